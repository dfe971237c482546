"""Import orchestration for a whole Markdown tree.

This module drives one import run: it walks the source tree, resolves each
file's directory to a folder document and uploads the file under it. The run
is best effort. Folder and file failures are recorded in the returned
ImportResult and the walk moves on; only a TraversalError aborts it.
"""

import logging
from typing import Callable, Optional

from ..outline_client.api_wrapper import APIWrapper
from ..outline_client.errors import RemoteError
from .errors import FileImportError, FolderCreationError
from .folder_resolver import FolderResolver
from .models import NO_PARENT, ImportFailure, ImportResult, ImportTask
from .tree_walker import iter_import_tasks

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, ImportTask], None]


class ImportOrchestrator:
    """Imports every Markdown file under a directory into an Outline collection.

    Each run gets its own FolderResolver (and therefore its own folder cache)
    unless one is injected.

    Example:
        >>> orchestrator = ImportOrchestrator(api)
        >>> result = orchestrator.run("./docs", collection_id)
        >>> print(f"{result.succeeded} imported, {result.failed_count} failed")
    """

    def __init__(
        self,
        api: APIWrapper,
        resolver: Optional[FolderResolver] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        """Initialize the orchestrator.

        Args:
            api: APIWrapper used for folder creation and file uploads
            resolver: FolderResolver to use. If None, a new one (with an
                      empty cache) is created for every run.
            on_progress: Called with (1-based index, task) before each file
        """
        self.api = api
        self._resolver = resolver
        self._on_progress = on_progress

    def run(self, root_dir: str, collection_id: str) -> ImportResult:
        """Import all Markdown files under root_dir.

        Args:
            root_dir: Directory whose tree is mirrored into the collection
            collection_id: Target collection

        Returns:
            ImportResult with success count and per-path failures

        Raises:
            TraversalError: If the directory tree cannot be enumerated
        """
        resolver = self._resolver or FolderResolver(self.api)
        folders_before = len(resolver.cache)
        result = ImportResult()

        logger.info(f"Importing Markdown files from {root_dir} into collection {collection_id}")

        for index, task in enumerate(iter_import_tasks(root_dir), 1):
            if self._on_progress:
                self._on_progress(index, task)
            logger.debug(f"Processing Markdown file: {task.file_path}")

            parent_id = self._resolve_parent(resolver, task, collection_id, result)
            self._import_file(task, collection_id, parent_id, result)

        result.folders_created = len(resolver.cache) - folders_before
        logger.info(
            f"Import finished: {result.succeeded} imported, "
            f"{result.failed_count} failed, {result.folders_created} folder(s) created"
        )
        return result

    def _resolve_parent(
        self,
        resolver: FolderResolver,
        task: ImportTask,
        collection_id: str,
        result: ImportResult
    ) -> str:
        """Resolve the task's folder, falling back to NO_PARENT on failure."""
        try:
            return resolver.resolve(task.folder_path, collection_id)
        except FolderCreationError as e:
            logger.error(f"Error creating folder for {task.folder_path}: {e}")
            result.failures.append(ImportFailure(
                path=e.folder_path,
                stage="folder",
                message=str(e),
                error=e,
            ))
            return NO_PARENT

    def _import_file(
        self,
        task: ImportTask,
        collection_id: str,
        parent_id: str,
        result: ImportResult
    ) -> None:
        try:
            self.api.import_file(task.file_path, collection_id, parent_id or None)
        except RemoteError as e:
            error = FileImportError(task.file_path, e)
            logger.error(f"Error importing file {task.file_path}: {e}")
            result.failures.append(ImportFailure(
                path=task.file_path,
                stage="import",
                message=str(error),
                error=error,
            ))
            return

        result.succeeded += 1
        logger.info(f"Imported {task.file_path}")
