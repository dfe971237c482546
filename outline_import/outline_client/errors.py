"""Typed exception hierarchy for Outline-related errors.

This module defines the base exception for the whole tool plus the errors
raised by the Outline client. Remote failures carry the endpoint and the raw
response body so callers can log useful diagnostics.
"""

from typing import Optional


class OutlineImportError(Exception):
    """Base exception for all outline-import errors.

    Use this to catch any application-level error from the import tool.
    """
    pass


class ConfigurationError(OutlineImportError):
    """Raised when required configuration (token, collection) is missing or invalid."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class RemoteError(OutlineImportError):
    """Raised when an Outline API call fails.

    Covers non-200 responses, responses whose ``ok`` flag is false, and
    bodies that are not valid JSON.

    Attributes:
        endpoint: API path that was called (e.g. ``/api/documents.create``)
        body: Raw response body, kept for diagnostics
        status_code: HTTP status code (None if no response was received)
    """

    def __init__(
        self,
        endpoint: str,
        body: str = "",
        status_code: Optional[int] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            if status_code is not None:
                message = f"Outline API call {endpoint} failed with status {status_code}"
            else:
                message = f"Outline API call {endpoint} failed"
            if body:
                message += f": {body}"
        super().__init__(message)
        self.endpoint = endpoint
        self.body = body
        self.status_code = status_code


class InvalidCredentialsError(RemoteError):
    """Raised when Outline rejects the API token (HTTP 401)."""

    def __init__(self, endpoint: str, body: str = ""):
        super().__init__(
            endpoint,
            body=body,
            status_code=401,
            message=f"API token was rejected by {endpoint}",
        )


class APIUnreachableError(RemoteError):
    """Raised when the request never produced a response (DNS, connection, TLS)."""

    def __init__(self, endpoint: str, reason: str = ""):
        message = f"API is not available at {endpoint}"
        if reason:
            message += f": {reason}"
        super().__init__(endpoint, message=message)
        self.reason = reason
