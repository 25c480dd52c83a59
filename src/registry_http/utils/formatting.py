"""Display helpers"""


class CommaSep:
    """Lazy view of a sequence that displays as its items joined by ``", "``

    >>> str(CommaSep(["serde", "rand", 7]))
    'serde, rand, 7'
    """

    def __init__(self, items):
        self.items = items

    def __iter__(self):
        for index, item in enumerate(self.items):
            if index != 0:
                yield ", "
            yield str(item)

    def write_to(self, stream):
        """Write the joined form to ``stream`` piece by piece"""
        for piece in self:
            stream.write(piece)

    def __str__(self):
        return "".join(self)

    def __format__(self, format_spec):
        return format(str(self), format_spec)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.items!r})"
