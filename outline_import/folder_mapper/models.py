"""Data models for the folder mapper.

This module defines the value types passed between the tree walker, the
folder resolver and the import orchestrator. All models use dataclasses.
"""

import os
from dataclasses import dataclass, field
from typing import List, Literal, Optional

# Parent ID meaning "top level of the collection"
NO_PARENT = ""


def normalize_folder_path(path: Optional[str]) -> str:
    """Normalize a relative directory path into a folder cache key.

    Platform separators (os.sep and os.altsep) become forward slashes, empty
    and "." segments are dropped and there is never a leading or trailing
    slash. Two paths name the same folder iff their normalized forms are
    equal. On POSIX a backslash is an ordinary name character. The root
    ("", ".") normalizes to "".

    Example:
        >>> normalize_folder_path("./a//b/c/")
        'a/b/c'
    """
    if not path:
        return ""
    path = path.replace(os.sep, "/")
    if os.altsep:
        path = path.replace(os.altsep, "/")
    return "/".join(seg for seg in path.split("/") if seg and seg != ".")


@dataclass(frozen=True)
class ImportTask:
    """A Markdown file discovered during the walk.

    Attributes:
        file_path: Absolute path to the file
        folder_path: Normalized path of its directory relative to the import
            root ("" for files directly under the root)
    """
    file_path: str
    folder_path: str


@dataclass
class ImportFailure:
    """A single per-path failure recorded during an import run.

    Attributes:
        path: Folder path (stage "folder") or file path (stage "import")
        stage: Which step failed
        message: Human-readable error message
        error: The exception that was caught
    """
    path: str
    stage: Literal["folder", "import"]
    message: str
    error: Optional[Exception] = None


@dataclass
class ImportResult:
    """Outcome of an import run.

    Attributes:
        succeeded: Number of files imported successfully
        failures: Per-path failures, in the order they happened
        folders_created: Number of folder documents created during the run
    """
    succeeded: int = 0
    failures: List[ImportFailure] = field(default_factory=list)
    folders_created: int = 0

    @property
    def failed_count(self) -> int:
        """Number of files whose import call failed."""
        return len(self.import_failures)

    @property
    def folder_failures(self) -> List[ImportFailure]:
        return [f for f in self.failures if f.stage == "folder"]

    @property
    def import_failures(self) -> List[ImportFailure]:
        return [f for f in self.failures if f.stage == "import"]


@dataclass
class ImportConfig:
    """Defaults loaded from the YAML config file.

    Any field left as None falls back to the command line or environment.
    """
    folder: Optional[str] = None
    host: Optional[str] = None
    collection: Optional[str] = None
