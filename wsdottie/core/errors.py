"""Error types raised by wsdottie.

Every failure that reaches a caller is one of:

* ``ParseError`` for malformed JSON text (never wrapped),
* ``WsdotApiError`` for transport failures, HTTP errors, upstream
  "soft" errors and schema validation failures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

import requests


class ErrorCode(str, Enum):
    NETWORK_ERROR = "NETWORK_ERROR"
    API_ERROR = "API_ERROR"
    TRANSFORM_ERROR = "TRANSFORM_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    CORS_ERROR = "CORS_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"


USER_MESSAGES = {
    ErrorCode.NETWORK_ERROR: "Network connection failed. Please check your internet connection.",
    ErrorCode.API_ERROR: "The API is currently unavailable. Please try again later.",
    ErrorCode.TRANSFORM_ERROR: "The data returned by the API did not have the expected shape.",
    ErrorCode.TIMEOUT_ERROR: "Request timed out. Please try again.",
    ErrorCode.CORS_ERROR: "Cross-origin request failed. This may be a browser security issue.",
    ErrorCode.INVALID_RESPONSE: "Received an invalid response from the server.",
    ErrorCode.RATE_LIMIT_ERROR: "Too many requests. Please wait before trying again.",
}

# Substrings that mark a 200 response whose "Message" field is really an error
SOFT_ERROR_KEYWORDS = ("failed", "invalid", "not valid", "cannot be used", "error")


class WsdotError(Exception):
    """Base class for wsdottie errors."""


class ParseError(WsdotError, ValueError):
    """Malformed JSON text.

    Attributes mirror ``json.JSONDecodeError`` so callers can point at the
    offending character.
    """

    def __init__(self, msg: str, *, pos: int = 0, lineno: int = 1, colno: int = 1) -> None:
        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        super().__init__(f"{msg}: line {lineno} column {colno} (char {pos})")


@dataclass
class ErrorContext:
    endpoint: Optional[str] = None
    url: Optional[str] = None
    status: Optional[int] = None
    retry_count: int = 0
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class WsdotApiError(WsdotError):
    """A failed call to a WSDOT or WSF endpoint.

    Attributes:
        code: Coarse classification used for retries and user feedback.
        user_message: Text suitable for showing to an end user.
        context: Endpoint, URL (key redacted), HTTP status and timing.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.user_message = user_message or USER_MESSAGES[code]
        self.context = context or ErrorContext()

    @property
    def status(self) -> Optional[int]:
        return self.context.status

    def to_dict(self) -> dict:
        return {
            "error": self.code.value,
            "message": self.message,
            "userMessage": self.user_message,
            "endpoint": self.context.endpoint,
            "url": self.context.url,
            "status": self.context.status,
            "timestamp": self.context.timestamp.isoformat(),
        }

    def __repr__(self) -> str:
        return f"WsdotApiError(code={self.code.value}, message={self.message!r}, endpoint={self.context.endpoint!r})"


def _classify_message(message: str) -> ErrorCode:
    message = message.lower()
    if "timeout" in message or "timed out" in message:
        return ErrorCode.TIMEOUT_ERROR
    if "script load failed" in message:
        return ErrorCode.NETWORK_ERROR
    if "cors" in message or "cross-origin" in message:
        return ErrorCode.CORS_ERROR
    if "network" in message or "fetch" in message:
        return ErrorCode.NETWORK_ERROR
    if "invalid response" in message or "empty body" in message:
        return ErrorCode.INVALID_RESPONSE
    return ErrorCode.NETWORK_ERROR


def _status_of(error: BaseException) -> Optional[int]:
    response = getattr(error, "response", None)
    if response is not None and getattr(response, "status_code", None) is not None:
        return int(response.status_code)
    return None


def create_api_error(
    error: Any,
    endpoint: str,
    url: str | None = None,
    status: int | None = None,
) -> WsdotApiError:
    """
    Convert any exception raised while calling an endpoint into a WsdotApiError.

    Args:
        error: The original exception (or any value that was raised/rejected).
        endpoint: Endpoint id or path, for diagnostics.
        url: Request URL with the API key already redacted.
        status: HTTP status code if known; read from ``error.response`` otherwise.

    Returns:
        A WsdotApiError; an existing WsdotApiError is returned unchanged.
    """
    if isinstance(error, WsdotApiError):
        return error

    if isinstance(error, BaseException):
        status = status if status is not None else _status_of(error)
        context = ErrorContext(endpoint=endpoint, url=url, status=status)
        message = str(error) or error.__class__.__name__

        if isinstance(error, requests.Timeout):
            code = ErrorCode.TIMEOUT_ERROR
        elif isinstance(error, requests.ConnectionError):
            code = ErrorCode.NETWORK_ERROR
        elif status == 429:
            code = ErrorCode.RATE_LIMIT_ERROR
        elif status is not None and status >= 400:
            code = ErrorCode.API_ERROR
        else:
            code = _classify_message(message)

        api_error = WsdotApiError(message, code, context=context)
        api_error.__cause__ = error
        return api_error

    context = ErrorContext(endpoint=endpoint, url=url, status=status)
    message = error if isinstance(error, str) else "Unknown error occurred"
    return WsdotApiError(message, ErrorCode.NETWORK_ERROR, context=context)


def is_soft_error_message(message: str) -> bool:
    lowered = message.lower()
    return any(keyword in lowered for keyword in SOFT_ERROR_KEYWORDS)


def check_api_message(data: Any, *, endpoint: str = "", url: str | None = None) -> None:
    """
    Raise if a 200 response body is actually an upstream error.

    WSDOT and WSF report some validation failures as
    ``{"Message": "The request is invalid."}`` with HTTP 200.

    Raises:
        WsdotApiError: With code API_ERROR and the upstream message.
    """
    if not isinstance(data, dict):
        return
    message = data.get("Message")
    if isinstance(message, str) and is_soft_error_message(message):
        raise WsdotApiError(
            message,
            ErrorCode.API_ERROR,
            context=ErrorContext(endpoint=endpoint, url=url),
        )


def create_validation_error(error, context: str, *, endpoint: str = "") -> WsdotApiError:
    """Build a TRANSFORM_ERROR from a pydantic ValidationError."""
    details = ", ".join(
        f"{'.'.join(str(p) for p in issue.get('loc', ())) or '<root>'}: {issue.get('msg', '')}"
        for issue in error.errors()
    )
    api_error = WsdotApiError(
        f"{context} failed: {details}",
        ErrorCode.TRANSFORM_ERROR,
        context=ErrorContext(endpoint=endpoint),
    )
    api_error.__cause__ = error
    return api_error
