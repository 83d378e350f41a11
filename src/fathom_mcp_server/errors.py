"""Error classes and helpers for the Fathom MCP Server.

Defines structured exceptions for request validation and upstream
failures, and a function to convert exceptions to serializable error
payloads suitable for tool responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class BadRequestError(AppError):
    """Raised when a request is invalid or missing required parameters."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_REQUEST", message, details)


class NotFoundError(AppError):
    """Raised when the upstream API reports that a recording does not exist."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("NOT_FOUND", message, details)


class TimeoutErrorApp(AppError):
    """Raised when an operation exceeds its allowed time budget."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("TIMEOUT", message, details)


class UpstreamError(AppError):
    """Raised on transport failures or non-success responses from Fathom."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UPSTREAM_ERROR", message, details)


class UpstreamAuthError(AppError):
    """Raised when Fathom rejects the API key (missing, invalid or revoked)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UNAUTHORIZED", message, details)


class MalformedResponseError(AppError):
    """Raised when an upstream response is not JSON or has an unexpected shape."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_RESPONSE", message, details)


def to_error_payload(
    error: Exception, *, recording_id: Optional[int] = None
) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.
        recording_id: Optional recording the failed call was about.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> try:
        ...     raise NotFoundError("Recording not found", {"recording_id": 1})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "NOT_FOUND"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    details: Dict[str, Any] = {}
    if recording_id is not None:
        details["recording_id"] = recording_id
    payload: ErrorPayload = {"code": "INTERNAL_ERROR", "message": str(error)}
    if details:
        payload["details"] = details
    return payload
