"""Request objects handed to handlers"""

from typing import Any, Callable, Optional, Union

from werkzeug.wrappers import Request as BaseRequest

from registry_http.utils.request import RequestUtilsMixin


class Request(RequestUtilsMixin, BaseRequest):
    """werkzeug request carrying the state shared by nested handlers.

    * ``params``: path parameters recognized by the routers so far
    * ``extensions``: any other per-request values
    * ``commit()``: signals that the request completed successfully
    """

    def __init__(self, environ: dict, *args: Any, **kwargs: Any) -> None:
        super().__init__(environ, *args, **kwargs)

        self.params: dict[str, str] = {}
        self.extensions: dict[str, Any] = {}
        self.committed = False
        self._commit_callbacks: list[Callable[["Request"], Any]] = []

    def on_commit(self, callback: Callable[["Request"], Any]) -> Callable:
        """Register ``callback`` to run when the request commits"""
        self._commit_callbacks.append(callback)
        return callback

    def commit(self) -> None:
        """Mark the request successful and run the commit callbacks"""
        self.committed = True
        for callback in self._commit_callbacks:
            callback(self)


class RequestProxy:
    """View of another request with a different ``path`` and/or ``method``.

    ``full_path`` follows the rewritten ``path``. ``url``, ``base_url`` and the
    WSGI ``environ`` are not rewritten and still describe the request as the
    client sent it.

    Everything else, including ``params``, ``extensions`` and ``commit``,
    is read from the wrapped request, so changes made through the proxy are
    visible to the outer handlers.
    """

    def __init__(
        self, other: Any, path: Optional[str] = None, method: Optional[str] = None
    ) -> None:
        self.other = other
        self.path = path if path is not None else other.path
        self.method = method if method is not None else other.method

    @property
    def full_path(self) -> str:
        return f"{self.path}?{self.query_string.decode('latin-1')}"

    def __getattr__(self, name: str) -> Any:
        return getattr(self.other, name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.method} {self.path!r}>"


AnyRequest = Union[Request, RequestProxy]
