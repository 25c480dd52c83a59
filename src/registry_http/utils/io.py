"""Readers wrapping a request body stream"""

import hashlib
import io

from registry_http.exceptions import human


class HashingReader(io.RawIOBase):
    """Reader that feeds every byte passing through it into a SHA-256 hash"""

    def __init__(self, stream):
        self._stream = stream
        self._hash = hashlib.sha256()

    def readable(self):
        return True

    def readinto(self, buffer):
        data = self._stream.read(len(buffer))
        size = len(data)
        buffer[:size] = data
        self._hash.update(data)
        return size

    def finalize(self):
        """Digest of everything read so far"""
        return self._hash.digest()


class LimitErrorReader(io.RawIOBase):
    """Reader that refuses to yield more than ``limit`` bytes.

    Reading past the limit raises a :class:`HumanError` instead of silently
    truncating the stream.
    """

    def __init__(self, stream, limit):
        self._stream = stream
        self._limit = limit
        self._remaining = limit

    def readable(self):
        return True

    def readinto(self, buffer):
        if not len(buffer):
            return 0

        if self._remaining == 0:
            # Read one more byte to tell a stream that ends exactly at the limit
            # apart from one that goes on
            if self._stream.read(1):
                raise human(f"max upload size is: {self._limit}")
            return 0

        data = self._stream.read(min(len(buffer), self._remaining))
        size = len(data)
        buffer[:size] = data
        self._remaining -= size
        return size
