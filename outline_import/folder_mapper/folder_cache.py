"""Append-only map from folder paths to Outline document IDs."""

from typing import Dict, Iterator, Optional, Tuple

from .models import normalize_folder_path


class FolderCache:
    """Memoizes the folder document created for each cumulative folder path.

    Keys are normalized folder paths (see ``normalize_folder_path``). The
    cache lives for a single import run and is append-only: once a path has
    an ID, that ID never changes and the path cannot be inserted again.

    Example:
        >>> cache = FolderCache()
        >>> cache.add("guides", "doc-1")
        >>> cache.get("guides/")
        'doc-1'
    """

    def __init__(self) -> None:
        self._ids: Dict[str, str] = {}

    def get(self, folder_path: str) -> Optional[str]:
        """Return the document ID for a folder path, or None if not created yet."""
        return self._ids.get(normalize_folder_path(folder_path))

    def add(self, folder_path: str, document_id: str) -> None:
        """Record the document ID created for a folder path.

        Raises:
            ValueError: If the path is empty or already cached
        """
        key = normalize_folder_path(folder_path)
        if not key:
            raise ValueError("Cannot cache the import root as a folder")
        if key in self._ids:
            raise ValueError(f"Folder '{key}' is already cached as {self._ids[key]}")
        self._ids[key] = document_id

    def __contains__(self, folder_path: object) -> bool:
        if not isinstance(folder_path, str):
            return False
        return normalize_folder_path(folder_path) in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate (folder_path, document_id) pairs in insertion order."""
        return iter(self._ids.items())
