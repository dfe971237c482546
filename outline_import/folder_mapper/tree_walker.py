"""Discovery of Markdown files under an import root.

The walk is depth-first and deterministic: within each directory, files are
visited in sorted name order before its subdirectories, which are also
visited in sorted order. Any error while listing a directory aborts the walk
with a TraversalError.
"""

import logging
import os
from typing import Iterator

from .errors import TraversalError
from .models import ImportTask, normalize_folder_path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def is_markdown_file(name: str) -> bool:
    """Check for a ``.md`` suffix, ignoring case (README.MD counts, .markdown does not)."""
    return name.lower().endswith(MARKDOWN_SUFFIX)


def _raise_traversal_error(error: OSError) -> None:
    raise TraversalError(
        error.filename or "<unknown>",
        error.strerror or str(error)
    ) from error


def iter_import_tasks(root: str) -> Iterator[ImportTask]:
    """Yield an ImportTask for every Markdown file under root.

    Args:
        root: Import root directory

    Yields:
        ImportTask with the absolute file path and the file's directory
        relative to root ("" for files directly under root)

    Raises:
        TraversalError: If root is missing, is not a directory, or any
            directory below it cannot be listed
    """
    root_abs = os.path.abspath(root)
    if not os.path.exists(root_abs):
        raise TraversalError(root, "No such file or directory")
    if not os.path.isdir(root_abs):
        raise TraversalError(root, "Not a directory")

    for dirpath, dirnames, filenames in os.walk(root_abs, onerror=_raise_traversal_error):
        # Sorting in place also fixes the order os.walk descends in
        dirnames.sort()

        folder_path = normalize_folder_path(os.path.relpath(dirpath, root_abs))
        for name in sorted(filenames):
            if not is_markdown_file(name):
                logger.debug(f"Skipping non-Markdown file: {os.path.join(dirpath, name)}")
                continue
            file_path = os.path.join(dirpath, name)
            # FIFOs, sockets and dangling symlinks
            if not os.path.isfile(file_path):
                logger.debug(f"Skipping non-regular file: {file_path}")
                continue
            yield ImportTask(
                file_path=file_path,
                folder_path=folder_path,
            )
