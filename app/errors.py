"""
API error types. The endpoint layer renders these as error envelopes.
"""

from typing import Any, Optional


class ApiError(Exception):
    """Base error carrying an HTTP status code and a user-facing message."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRequestError(ApiError):
    """The request is well-formed but asks for something out of range."""
    status_code = 400


class NotFoundError(ApiError):
    """Unknown entry or tag."""
    status_code = 404


class InternalFailureError(ApiError):
    """Malformed content or an unexpected I/O failure."""
    status_code = 500
