"""Folder resolver mapping source directories onto Outline folder documents.

Outline has no folders, so every directory in the source tree is represented
by an empty document, and the files inside it are imported as children of
that document. This module creates those folder documents on demand, one
path segment at a time from the root down, and memoizes the ID created for
every cumulative path so sibling files share a single folder document.
"""

import logging
from typing import Optional

from ..outline_client.api_wrapper import APIWrapper
from ..outline_client.auth import Authenticator
from ..outline_client.errors import RemoteError
from .errors import FolderCreationError
from .folder_cache import FolderCache
from .models import NO_PARENT, normalize_folder_path

logger = logging.getLogger(__name__)


class FolderResolver:
    """Resolves relative folder paths to Outline document IDs.

    For ``a/b/c`` the resolver checks ``a``, ``a/b`` and ``a/b/c`` in order.
    Cached paths are reused as the running parent; missing ones are created
    under the running parent and cached. Each cumulative path is therefore
    created at most once per cache.

    Failures are never cached. If creating ``a/b`` fails, the next resolution
    touching ``a/b`` tries to create it again.

    Example:
        >>> resolver = FolderResolver(api)
        >>> parent_id = resolver.resolve("guides/setup", collection_id)
        >>> api.import_file("guides/setup/install.md", collection_id, parent_id)
    """

    def __init__(
        self,
        api: Optional[APIWrapper] = None,
        cache: Optional[FolderCache] = None
    ):
        """Initialize FolderResolver.

        Args:
            api: APIWrapper instance. If None, creates one with default
                 authentication.
            cache: FolderCache to memoize into. If None, a fresh cache is
                   created, scoped to this resolver.
        """
        if api is None:
            api = APIWrapper(Authenticator())
        self.api = api
        self.cache = cache if cache is not None else FolderCache()

    def resolve(self, folder_path: Optional[str], collection_id: str) -> str:
        """Return the document ID of the deepest segment of a folder path.

        Args:
            folder_path: Directory path relative to the import root
            collection_id: Collection the folder documents live in

        Returns:
            Document ID of the deepest folder, or NO_PARENT ("") when the
            path denotes the import root

        Raises:
            FolderCreationError: If creating any missing segment fails. The
                error names the cumulative path that failed.
        """
        key = normalize_folder_path(folder_path)
        if not key:
            return NO_PARENT

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        parent_id = NO_PARENT
        current_path = ""
        for segment in key.split("/"):
            current_path = f"{current_path}/{segment}" if current_path else segment

            existing = self.cache.get(current_path)
            if existing is not None:
                parent_id = existing
                continue

            try:
                new_id = self.api.create_folder_document(
                    segment,
                    collection_id,
                    parent_id or None
                )
            except RemoteError as e:
                raise FolderCreationError(current_path, e) from e

            self.cache.add(current_path, new_id)
            logger.info(f"Created folder document for '{current_path}' ({new_id})")
            parent_id = new_id

        return parent_id
