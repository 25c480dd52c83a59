"""Fixtures shared by the registry_http test suite"""

import pytest

from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Response

from registry_http.handlers import Handler
from registry_http.wrappers import Request


@pytest.fixture
def make_request():
    """Factory building a :class:`Request` from werkzeug's ``EnvironBuilder``"""

    def _make_request(path="/", method="GET", headers=None, **kwargs):
        builder = EnvironBuilder(path=path, method=method, headers=headers, **kwargs)
        return Request(builder.get_environ())

    return _make_request


class RecordingHandler(Handler):
    """Handler remembering the requests it was called with"""

    def __init__(self, body):
        self.body = body
        self.calls = []

    def call(self, request):
        self.calls.append(
            {
                "path": request.path,
                "method": request.method,
                "params": dict(request.params),
            }
        )
        return Response(self.body, headers=[("X-Handled-By", "recorder")])


@pytest.fixture
def make_recorder():
    """Factory for handlers that record their calls and answer with ``body``"""

    def _make_recorder(body=b"inner"):
        return RecordingHandler(body)

    return _make_recorder
