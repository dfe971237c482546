"""Outline client library for the Markdown importer.

This package provides Python abstractions over the Outline REST API:
credential resolution, the three document/collection endpoints the importer
uses, and a typed exception hierarchy.
"""

from .errors import (
    OutlineImportError,
    ConfigurationError,
    RemoteError,
    InvalidCredentialsError,
    APIUnreachableError,
)
from .models import Collection

__all__ = [
    "OutlineImportError",
    "ConfigurationError",
    "RemoteError",
    "InvalidCredentialsError",
    "APIUnreachableError",
    "Collection",
]
