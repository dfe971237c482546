"""Folder mapper library for importing Markdown trees into Outline.

This package walks a local directory of Markdown files, mirrors its folder
structure as a hierarchy of Outline documents and uploads each file under
the document standing in for its directory.
"""

from .config_loader import ConfigLoader
from .errors import (
    FolderMapperError,
    TraversalError,
    FolderCreationError,
    FileImportError,
)
from .folder_cache import FolderCache
from .folder_resolver import FolderResolver
from .import_orchestrator import ImportOrchestrator
from .models import (
    NO_PARENT,
    ImportConfig,
    ImportFailure,
    ImportResult,
    ImportTask,
    normalize_folder_path,
)
from .tree_walker import is_markdown_file, iter_import_tasks

__all__ = [
    'ConfigLoader',
    'FolderMapperError',
    'TraversalError',
    'FolderCreationError',
    'FileImportError',
    'FolderCache',
    'FolderResolver',
    'ImportOrchestrator',
    'NO_PARENT',
    'ImportConfig',
    'ImportFailure',
    'ImportResult',
    'ImportTask',
    'normalize_folder_path',
    'is_markdown_file',
    'iter_import_tasks',
]
