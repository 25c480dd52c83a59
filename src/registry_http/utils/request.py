"""Helpers for reading requests and building responses.

Every helper is a plain function taking the request as its first argument, and
is also exposed as a method on :class:`registry_http.wrappers.Request` through
:class:`RequestUtilsMixin`.
"""

from __future__ import annotations

import datetime
import decimal
import json
import uuid

from collections import namedtuple
from typing import Any, Optional

import marshmallow as ma

from werkzeug.wrappers import Response

from registry_http.conf import active_config
from registry_http.exceptions import human
from registry_http.serializers import ErrorsSerializer
from registry_http.utils.importlib import perform_import

Page = namedtuple("Page", ["offset", "count"])


class JSONEncoder(json.JSONEncoder):
    """Encoder that also understands dates, decimals, UUIDs and sets"""

    def default(self, o):
        if isinstance(o, (datetime.datetime, datetime.date, datetime.time)):
            return o.isoformat()
        if isinstance(o, (decimal.Decimal, uuid.UUID)):
            return str(o)
        if isinstance(o, (set, frozenset)):
            return list(o)
        return super().default(o)


def rename_keys(value: Any, renames: Optional[dict[str, str]] = None) -> Any:
    """Rename object keys at every depth of a decoded JSON value.

    Arrays keep their order and scalars are returned untouched.
    """
    if renames is None:
        renames = active_config.RENAMED_JSON_KEYS

    if isinstance(value, dict):
        return {
            renames.get(key, key): rename_keys(item, renames)
            for key, item in value.items()
        }
    elif isinstance(value, list):
        return [rename_keys(item, renames) for item in value]

    return value


def _json(data: Any, status: int = 200) -> Response:
    encoder = perform_import(active_config.JSON_ENCODER)

    # Encode first so objects handled by the encoder are renamed as well
    decoded = json.loads(json.dumps(data, cls=encoder))
    body = json.dumps(rename_keys(decoded)).encode("utf-8")

    response = Response(
        body, status=status, content_type=active_config.JSON_CONTENT_TYPE
    )
    response.headers["Content-Length"] = str(len(body))
    return response


def json_response(value: Any, schema: Optional[ma.Schema] = None) -> Response:
    """Render ``value`` as a JSON response.

    :param value: Any JSON-encodable value
    :param schema: Optional :class:`marshmallow.Schema` instance used to dump
        ``value`` before encoding
    """
    if schema is not None:
        value = schema.dump(value)

    return _json(value)


def _errors(message: str) -> dict:
    return ErrorsSerializer().dump({"errors": [{"detail": message}]})


def error_response(message: str) -> Response:
    """Response pre-rendered for a human error"""
    return _json(_errors(message), status=active_config.HUMAN_ERROR_STATUS)


def not_found_response() -> Response:
    return _json(_errors("Not Found"), status=404)


def redirect(url: str) -> Response:
    """Return a 302 response pointing at ``url``, with an empty body"""
    return Response(b"", status=302, headers=[("Location", url)])


def query(request: Any) -> dict[str, str]:
    """Parse the query string into a dictionary.

    Repeated keys collapse to the last value given.
    """
    return {key: values[-1] for key, values in request.args.lists()}


def wants_json(request: Any) -> bool:
    return any("json" in value for value in request.headers.getlist("Accept"))


def _parse_count(value: Optional[str], default: int) -> int:
    if value is None or not value.isdecimal():
        return default
    return int(value)


def pagination(request: Any, default: int, max_count: int) -> Page:
    """Derive the offset and count of the requested page.

    ``page`` starts at 1 and ``per_page`` defaults to ``default``. Values that
    are missing or not numbers fall back to those defaults.

    :raises HumanError: if more than ``max_count`` items are requested
    """
    params = query(request)

    page = _parse_count(params.get("page"), 1) or 1
    count = _parse_count(params.get("per_page"), default)
    if count > max_count:
        raise human(f"cannot request more than {max_count} items")

    return Page(offset=(page - 1) * count, count=count)


class RequestUtilsMixin:
    """Exposes the request helpers as methods of the request"""

    def redirect(self, url: str) -> Response:
        return redirect(url)

    def json_response(
        self, value: Any, schema: Optional[ma.Schema] = None
    ) -> Response:
        return json_response(value, schema=schema)

    def query(self) -> dict[str, str]:
        return query(self)

    def wants_json(self) -> bool:
        return wants_json(self)

    def pagination(self, default: int, max_count: int) -> Page:
        return pagination(self, default, max_count)
