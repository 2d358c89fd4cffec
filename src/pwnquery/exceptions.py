"""Custom exceptions for pwnquery.

All exceptions inherit from PwnQueryError with context fields
for better error tracking and debugging.
"""

from typing import Any


class PwnQueryError(Exception):
    """Base exception for all pwnquery errors.

    Includes context dict for structured error information.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ConfigurationError(PwnQueryError):
    """Raised when configuration is invalid or missing."""

    pass


class TransportError(PwnQueryError):
    """Raised when the request could not be sent or was rejected upstream."""

    pass


class HTTPStatusError(TransportError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, **context: Any) -> None:
        super().__init__(message, status_code=status_code, **context)
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        """The upstream answers 404 when an account or breach is unknown."""
        return self.status_code == 404


class BodyReadError(PwnQueryError):
    """Raised when the response body cannot be fully read as text."""

    pass


class DecodeError(PwnQueryError):
    """Base for failures turning a response body into records."""

    pass


class ParseError(DecodeError):
    """Raised when the body is not valid JSON."""

    pass


class SchemaError(DecodeError):
    """Raised when a field is missing or has the wrong JSON type."""

    def __init__(self, message: str, *, field: str, value: Any = None, **context: Any) -> None:
        super().__init__(message, field=field, value=value, **context)
        self.field = field
        self.value = value


class ShapeError(DecodeError):
    """Raised when the top-level JSON value has an unexpected shape."""

    pass
