"""Route table built on :mod:`werkzeug.routing`.

Patterns accept ``:name`` for a single path segment and ``*name`` for the rest
of the path, alongside werkzeug's own ``<converter:name>`` syntax::

    routes = RouteBuilder()
    routes.get("/crates/:crate_id/owners", owners)
    routes.get("/api/v1/*path", Mount(api))
"""

from __future__ import annotations

import logging
import re

from collections import namedtuple
from typing import TYPE_CHECKING, Iterator

from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.routing import Map, RequestRedirect, Rule

from registry_http.exceptions import ConfigurationError, RegistryException

if TYPE_CHECKING:
    from registry_http.handlers import Handler

logger = logging.getLogger(__name__)

Match = namedtuple("Match", ["handler", "params"])

# Placeholders only count at the start of a segment, so `<int:id>` is left alone
_PLACEHOLDER = re.compile(r"(?<=/)([:*])([A-Za-z_][A-Za-z0-9_]*)")


class NoMatch(RegistryException):
    """No route is registered for the method and path"""


def to_rule(pattern: str) -> str:
    """Translate ``:name`` and ``*name`` placeholders to werkzeug converters"""

    def replace(match: re.Match) -> str:
        sigil, name = match.groups()
        return f"<{name}>" if sigil == ":" else f"<path:{name}>"

    return _PLACEHOLDER.sub(replace, pattern)


class RouteBuilder:
    """Maps a method and path pattern to a handler.

    Build the table once at startup. After that it is only read, so one
    instance can serve any number of threads.
    """

    def __init__(self) -> None:
        self._map = Map(strict_slashes=False, merge_slashes=False)
        self._handlers = {}

    def map(self, method: str, pattern: str, handler: Handler) -> RouteBuilder:
        """Register ``handler`` for ``method`` requests matching ``pattern``"""
        method = method.upper()
        endpoint = f"{method} {pattern}"
        if endpoint in self._handlers:
            raise ConfigurationError(f"Route `{endpoint}` is already registered")

        rule = Rule(to_rule(pattern), endpoint=endpoint, methods=[method])
        # werkzeug lets HEAD into every GET rule; HEAD is routed by `Head` instead
        rule.methods = {method}
        self._map.add(rule)
        self._handlers[endpoint] = handler
        logger.debug(f"Registered route `{endpoint}`")
        return self

    def get(self, pattern: str, handler: Handler) -> RouteBuilder:
        return self.map("GET", pattern, handler)

    def post(self, pattern: str, handler: Handler) -> RouteBuilder:
        return self.map("POST", pattern, handler)

    def put(self, pattern: str, handler: Handler) -> RouteBuilder:
        return self.map("PUT", pattern, handler)

    def delete(self, pattern: str, handler: Handler) -> RouteBuilder:
        return self.map("DELETE", pattern, handler)

    def head(self, pattern: str, handler: Handler) -> RouteBuilder:
        return self.map("HEAD", pattern, handler)

    def recognize(self, method: str, path: str) -> Match:
        """Find the handler for ``method`` and ``path``.

        :return: a :class:`Match` of the handler and the path parameters
        :raises NoMatch: if no route matches
        """
        adapter = self._map.bind("localhost")
        try:
            endpoint, values = adapter.match(path, method=method)
        except (NotFound, MethodNotAllowed, RequestRedirect) as exc:
            raise NoMatch(f"No route for {method} {path}") from exc

        params = {name: str(value) for name, value in values.items()}
        return Match(self._handlers[endpoint], params)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Registered ``(method, pattern)`` pairs, in registration order"""
        for endpoint in self._handlers:
            method, pattern = endpoint.split(" ", 1)
            yield method, pattern
