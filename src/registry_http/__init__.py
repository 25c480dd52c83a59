__version__ = "0.1.0"

from .app import Application
from .exceptions import (
    DomainError,
    FatalError,
    HumanError,
    InternalError,
    NotFound,
    human,
    internal,
    internal_error,
)
from .handlers import FallbackRouter, Handler, HandlerFunc, Head, Mount, handler
from .routing import RouteBuilder
from .wrappers import Request, RequestProxy

__all__ = [
    "Application",
    "DomainError",
    "FallbackRouter",
    "FatalError",
    "Handler",
    "HandlerFunc",
    "Head",
    "human",
    "HumanError",
    "internal",
    "internal_error",
    "InternalError",
    "Mount",
    "NotFound",
    "Request",
    "RequestProxy",
    "RouteBuilder",
    "handler",
]
