# src/xai_kit/api/errors.py

"""Error taxonomy for the API client.

Every failure the client raises is an ``XAIError`` carrying a ``kind``, so
callers can branch on the failure class without matching message text.
"""

import builtins
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    API = "api"
    NETWORK = "network"
    RESPONSE_FORMAT = "response_format"


class XAIError(Exception):
    """Base class for all client errors."""

    kind: ErrorKind


class ConfigurationError(XAIError):
    """The client was constructed with invalid settings."""

    kind = ErrorKind.CONFIGURATION


class ValidationError(XAIError):
    """A call parameter is missing or malformed. Raised before any I/O."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, reason: str = "is required") -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"'{field}' {reason}")


class TimeoutError(XAIError, builtins.TimeoutError):
    """No response arrived within the configured timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Request timed out after {timeout:g}s")


class ApiError(XAIError):
    """The server answered with a non-success HTTP status."""

    kind = ErrorKind.API

    def __init__(
        self,
        status_code: int,
        status_text: str,
        message: str | None = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.message = message
        self.body = body if body is not None else {}
        text = f"API request failed: {status_code} {status_text}".rstrip()
        if message:
            text = f"{text} - {message}"
        super().__init__(text)


class NetworkError(XAIError):
    """Transport failure that is not a timeout (DNS, refused, TLS)."""

    kind = ErrorKind.NETWORK


class ResponseFormatError(XAIError):
    """A successful response did not have the expected shape."""

    kind = ErrorKind.RESPONSE_FORMAT
