"""In-memory stand-in for the Outline APIWrapper.

Records every create/import call so tests can assert on call counts and the
parent chain without mocking HTTP. Folder creation can be made to fail for
chosen names, either always or a fixed number of times.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from outline_import.outline_client.errors import RemoteError
from outline_import.outline_client.models import Collection


@dataclass
class CreateCall:
    name: str
    collection_id: str
    parent_id: Optional[str]
    document_id: str


@dataclass
class ImportCall:
    path: str
    collection_id: str
    parent_id: Optional[str]


class FakeOutlineAPI:
    """Records calls and hands out sequential folder IDs F1, F2, ..."""

    def __init__(self, collections: Optional[List[Collection]] = None):
        self.create_calls: List[CreateCall] = []
        self.import_calls: List[ImportCall] = []
        self.collections = collections or []
        self._folder_failures: Dict[str, int] = {}
        self._failing_imports: set = set()
        self._next_id = 1

    def fail_folder(self, name: str, times: int = -1) -> None:
        """Make creation of folders titled name fail (times=-1 means always)."""
        self._folder_failures[name] = times

    def fail_import(self, filename: str) -> None:
        """Make imports of files with this basename fail."""
        self._failing_imports.add(filename)

    def create_folder_document(
        self,
        name: str,
        collection_id: str,
        parent_id: Optional[str] = None
    ) -> str:
        remaining = self._folder_failures.get(name, 0)
        if remaining != 0:
            self._folder_failures[name] = remaining - 1 if remaining > 0 else remaining
            self.create_calls.append(CreateCall(name, collection_id, parent_id, ""))
            raise RemoteError(
                "/api/documents.create",
                body='{"ok":false,"error":"validation_error"}',
                status_code=400,
            )

        document_id = f"F{self._next_id}"
        self._next_id += 1
        self.create_calls.append(CreateCall(name, collection_id, parent_id, document_id))
        return document_id

    def import_file(
        self,
        path: str,
        collection_id: str,
        parent_id: Optional[str] = None
    ) -> str:
        self.import_calls.append(ImportCall(path, collection_id, parent_id))
        if Path(path).name in self._failing_imports:
            raise RemoteError(
                "/api/documents.import",
                body='{"ok":false,"error":"file_too_large"}',
                status_code=400,
            )
        return f"D{len(self.import_calls)}"

    def list_collections(self) -> List[Collection]:
        return list(self.collections)

    def successful_creates(self) -> List[CreateCall]:
        return [c for c in self.create_calls if c.document_id]

    def parent_of(self, filename: str) -> Optional[str]:
        """Parent ID used for the (single) import of a file with this basename."""
        matches = [c for c in self.import_calls if Path(c.path).name == filename]
        assert len(matches) == 1, f"expected one import of {filename}, got {len(matches)}"
        return matches[0].parent_id


def make_tree(root: Path, files: Iterable[str], content: str = "# Title\n") -> Path:
    """Create files (relative POSIX paths) under root, making directories as needed."""
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root
