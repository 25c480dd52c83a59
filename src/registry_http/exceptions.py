"""
Error taxonomy shared by handlers, request utilities and the command executor
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class RegistryException(Exception):
    """Base class for all Exceptions raised within registry_http"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)

        self.extra_info = kwargs.get("extra_info", None)

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (self.__class__, self.args)


class ConfigurationError(RegistryException):
    """Improper Configuration encountered like:
    * An important configuration variable is missing
    * A setting holds a value of the wrong type
    """


class DomainError(RegistryException):
    """Base class of the two error kinds a domain handler may raise"""

    def response(self):
        """Pre-rendered response for this error, if any"""
        return None


class HumanError(DomainError):
    """Expected failure that is safe to describe to the caller.

    :param message: Text shown to the user
    :param response: Optional pre-rendered :class:`werkzeug.wrappers.Response`
    """

    def __init__(self, message: str, response=None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

        self.message = message
        self._response = response

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        # Responses hold open body iterators and do not pickle
        return (self.__class__, (self.message,))

    def response(self):
        return self._response


class InternalError(DomainError):
    """Unexpected failure. The description and detail are for diagnostics only
    and are never rendered into a response.
    """

    def __init__(
        self, description: str, detail: Optional[str] = None, **kwargs: Any
    ) -> None:
        super().__init__(description, **kwargs)

        self.description = description
        self.detail = detail

    def __str__(self) -> str:
        return self.description

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (self.__class__, (self.description, self.detail))


class NotFound(HumanError):
    """Requested object or route does not exist, renders as a 404"""

    def __init__(self, message: str = "Not Found", **kwargs: Any) -> None:
        from registry_http.utils.request import not_found_response

        super().__init__(message, response=not_found_response(), **kwargs)


class FatalError(RegistryException):
    """Escalation past the handler layer. The WSGI bridge answers it with a
    generic failure response.

    The originating :class:`DomainError`, when there is one, is kept in
    ``error`` and is also the exception's ``__cause__``.
    """

    def __init__(self, message: str, error: Optional[DomainError] = None) -> None:
        super().__init__(message)

        self.error = error

    @classmethod
    def from_error(cls, error: DomainError) -> "FatalError":
        if isinstance(error, InternalError):
            if error.detail:
                logger.debug(f"Internal error detail:: {error.detail}")
            return cls(f"internal error: {error.description}", error=error)

        return cls(f"unrendered human error: {error}", error=error)

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (self.__class__, (self.args[0],))


def human(message: str) -> HumanError:
    """Build a :class:`HumanError` with a pre-rendered JSON error body"""
    from registry_http.utils.request import error_response

    return HumanError(message, response=error_response(message))


def internal(description: str) -> InternalError:
    return InternalError(description)


def internal_error(description: str, detail: str) -> InternalError:
    return InternalError(description, detail=detail)
