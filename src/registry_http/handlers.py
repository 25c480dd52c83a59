"""Handlers that adapt domain code to the WSGI bridge.

Every handler exposes one operation, ``call(request)``, which returns a
:class:`werkzeug.wrappers.Response` or raises :class:`FatalError`. Wrappers
hold a reference to the handler they wrap and can be nested freely::

    api = RouteBuilder()
    api.get("/crates", handler(list_crates))

    routes = RouteBuilder()
    routes.get("/api/v1/*path", Mount(FallbackRouter(api)))

    app = Application(Head(FallbackRouter(routes)))
"""

from __future__ import annotations

import logging

from abc import ABC, abstractmethod
from typing import Callable

from werkzeug.wrappers import Response

from registry_http.exceptions import DomainError, FatalError
from registry_http.routing import NoMatch, RouteBuilder
from registry_http.utils.request import not_found_response
from registry_http.wrappers import AnyRequest, RequestProxy

logger = logging.getLogger(__name__)


class Handler(ABC):
    """Interface implemented by everything that can answer a request"""

    @abstractmethod
    def call(self, request: AnyRequest) -> Response:
        """Answer ``request``.

        :raises FatalError: when no response can be produced
        """

    def __call__(self, request: AnyRequest) -> Response:
        return self.call(request)


class HandlerFunc(Handler):
    """Wraps a domain function ``func(request) -> Response``.

    ``func`` may raise :class:`DomainError`. A human error carrying a
    pre-rendered response is answered with that response, anything else is
    escalated as :class:`FatalError`. The request is committed only when
    ``func`` returns.
    """

    def __init__(self, func: Callable[[AnyRequest], Response]) -> None:
        self.func = func

    def call(self, request: AnyRequest) -> Response:
        try:
            response = self.func(request)
        except DomainError as error:
            response = error.response()
            if response is None:
                raise FatalError.from_error(error) from error

            logger.debug(f"Answered {request.method} {request.path} with: {error}")
            return response

        request.commit()
        return response

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", self.func)
        return f"<{self.__class__.__name__} {name}>"


def handler(func: Callable[[AnyRequest], Response]) -> HandlerFunc:
    """Decorator turning a domain function into a :class:`HandlerFunc`"""
    return HandlerFunc(func)


class Mount(Handler):
    """Serve a whole sub-application below a path prefix.

    The outer route captures the remainder of the path in the ``param``
    parameter (``/api/v1/*path``); the wrapped handler sees that remainder as
    the request path. The method and everything else are left as they are.
    """

    def __init__(self, handler: Handler, param: str = "path") -> None:
        self.handler = handler
        self.param = param

    def call(self, request: AnyRequest) -> Response:
        try:
            path = request.params[self.param]
        except KeyError:
            raise FatalError(
                f"Mounted handler expects a `{self.param}` path parameter, "
                f"but the route for {request.path} did not capture one"
            ) from None

        if not path.startswith("/"):
            path = f"/{path}"

        return self.handler.call(RequestProxy(request, path=path))


class FallbackRouter(Handler):
    """Dispatch through a :class:`RouteBuilder`, answering 404 when no route
    matches.
    """

    def __init__(self, router: RouteBuilder) -> None:
        self.router = router

    def call(self, request: AnyRequest) -> Response:
        try:
            match = self.router.recognize(request.method, request.path)
        except NoMatch:
            logger.debug(f"No route for {request.method} {request.path}")
            return not_found_response()

        # Keep parameters captured by outer routers
        request.params.update(match.params)
        return match.handler.call(request)


class Head(Handler):
    """Answer ``HEAD`` requests by running the ``GET`` handler and dropping
    the body.
    """

    def __init__(self, handler: Handler) -> None:
        self.handler = handler

    def call(self, request: AnyRequest) -> Response:
        if request.method != "HEAD":
            return self.handler.call(request)

        response = self.handler.call(RequestProxy(request, method="GET"))
        response.response = []
        return response
