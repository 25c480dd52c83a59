"""WSGI entry point wrapping the root handler"""

import logging

from werkzeug.exceptions import InternalServerError

from registry_http.exceptions import FatalError, InternalError
from registry_http.wrappers import Request

logger = logging.getLogger(__name__)


class Application:
    """WSGI application serving ``handler``.

    >>> app = Application(FallbackRouter(routes))
    >>> run_simple("localhost", 8888, app)

    A :class:`FatalError` raised by the handler is logged and answered with
    werkzeug's generic 500 page; nothing about the failure reaches the client.
    """

    request_class = Request

    def __init__(self, handler):
        self.handler = handler

    def handle(self, request):
        try:
            return self.handler.call(request)
        except FatalError as exc:
            detail = ""
            if isinstance(exc.error, InternalError) and exc.error.detail:
                detail = f"\n{exc.error.detail}"
            logger.error(
                f"Failed to handle {request.method} {request.path}: {exc}{detail}",
                exc_info=True,
            )
            return InternalServerError()

    def __call__(self, environ, start_response):
        request = self.request_class(environ)
        response = self.handle(request)
        return response(environ, start_response)
