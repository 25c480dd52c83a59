"""Utility functions used across registry_http"""

from .formatting import CommaSep
from .io import HashingReader, LimitErrorReader
from .process import exec_command
from .request import (
    Page,
    RequestUtilsMixin,
    json_response,
    pagination,
    query,
    redirect,
    wants_json,
)

__all__ = [
    "CommaSep",
    "exec_command",
    "HashingReader",
    "json_response",
    "LimitErrorReader",
    "Page",
    "pagination",
    "query",
    "redirect",
    "RequestUtilsMixin",
    "wants_json",
]
