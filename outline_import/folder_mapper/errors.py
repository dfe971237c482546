"""Typed exception hierarchy for folder mapper errors.

This module defines all custom exceptions used while walking the source tree
and mapping it onto Outline documents. All exceptions inherit from
FolderMapperError and carry the offending path.
"""

from typing import Optional

from ..outline_client.errors import OutlineImportError, RemoteError


class FolderMapperError(OutlineImportError):
    """Base exception for all folder mapper errors."""
    pass


class TraversalError(FolderMapperError):
    """Raised when the source directory tree cannot be enumerated.

    This is the only error that aborts an import run.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Cannot traverse {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class FolderCreationError(FolderMapperError):
    """Raised when a folder document for a cumulative folder path cannot be created."""

    def __init__(self, folder_path: str, cause: RemoteError):
        super().__init__(f"Creating folder '{folder_path}' failed: {cause}")
        self.folder_path = folder_path
        self.cause = cause


class FileImportError(FolderMapperError):
    """Raised when a single Markdown file cannot be imported."""

    def __init__(self, file_path: str, cause: RemoteError):
        super().__init__(f"Importing {file_path} failed: {cause}")
        self.file_path = file_path
        self.cause = cause
