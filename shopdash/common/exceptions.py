"""
Custom exceptions for the dashboard.
"""

from __future__ import annotations


class ResourceError(Exception):
    """Base exception for remote resource failures."""


class TransportError(ResourceError):
    """The request could not be sent or the response not received."""


class ResponseError(ResourceError):
    """The remote API answered with a non-success status code."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ResourceError):
    """The response body is not valid JSON of the expected shape."""


class AuthenticationRequired(Exception):
    """Exception for calls made without an authenticated session."""

    def __init__(self, message: str, status_code: int = 401) -> None:
        super().__init__(message)
        self.status_code = status_code
