"""
API Errors

Failure values delivered to ApiService completions. Transport, validation
and decode failures share one base class so callers can treat them alike.
"""

from typing import Optional


class ApiError(Exception):
    """Base class for every failure an ApiService reports."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class TransportError(ApiError):
    """The request never produced a response (connectivity, timeout)."""


class ResponseValidationError(ApiError):
    """The server answered with a non-2xx status."""


class DecodeError(ApiError):
    """The response body does not match the expected shape."""
