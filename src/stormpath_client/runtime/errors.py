"""
Stormpath Error Model

This module provides the error handling framework for the Stormpath Python
client. Request construction has two failure paths (payload serialization and
transport request construction); the executing client adds transport and HTTP
status failures on top.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes surfaced by the client."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INVALID_REQUEST = 2
    INVALID_URL = 3
    INVALID_METHOD = 4

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_JSON = 101
    MARSHAL_ERROR = 103

    # Network errors (200-299)
    NETWORK_ERROR = 200
    CONNECTION_FAILED = 201
    TIMEOUT = 202

    # HTTP status errors (300-399)
    HTTP_ERROR = 300
    UNAUTHENTICATED = 301
    FORBIDDEN = 302
    NOT_FOUND = 303
    CONFLICT = 304
    RATE_LIMITED = 305
    SERVICE_UNAVAILABLE = 306


class StormpathError(Exception):
    """
    Base class for all Stormpath client errors.

    Carries a message, an error code, optional structured details and the
    underlying exception, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Stormpath error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StormpathError':
        """Create error from dictionary representation."""
        try:
            code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        except ValueError:
            code = ErrorCode.UNKNOWN
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


class SerializationError(StormpathError):
    """Request payload could not be encoded as JSON."""

    def __init__(self, message: str = "Payload is not JSON serializable",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MARSHAL_ERROR, details, cause)


class RequestConstructionError(StormpathError):
    """A transport request could not be built from a request descriptor."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_REQUEST,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class TransportError(StormpathError):
    """Network-related errors raised while sending a request."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NETWORK_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class HttpStatusError(StormpathError):
    """The service answered with an error status."""

    def __init__(self, message: str, status: int, code: ErrorCode = ErrorCode.HTTP_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)
        self.status = status

    @property
    def developer_message(self) -> Optional[str]:
        return self.details.get("developerMessage")

    @property
    def more_info(self) -> Optional[str]:
        return self.details.get("moreInfo")


_STATUS_CODES = {
    401: ErrorCode.UNAUTHENTICATED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    429: ErrorCode.RATE_LIMITED,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}


def error_from_response(status: int, body: Optional[Dict[str, Any]] = None) -> Optional[HttpStatusError]:
    """
    Create an error from an HTTP status and its decoded JSON body.

    Stormpath error bodies look like
    ``{"status": 404, "code": 404, "message": "...", "developerMessage": "...",
    "moreInfo": "..."}``; any of those keys may be missing.

    Args:
        status: HTTP status code of the response
        body: Decoded JSON body, if the response had one

    Returns:
        HttpStatusError for statuses >= 400, otherwise None
    """
    if status < 400:
        return None

    body = body if isinstance(body, dict) else {}
    message = body.get("message") or f"HTTP {status}"
    details = {key: body[key] for key in ("code", "developerMessage", "moreInfo") if key in body}

    return HttpStatusError(message, status, _STATUS_CODES.get(status, ErrorCode.HTTP_ERROR), details)


__all__ = [
    "ErrorCode",
    "StormpathError",
    "SerializationError",
    "RequestConstructionError",
    "TransportError",
    "HttpStatusError",
    "error_from_response",
]
