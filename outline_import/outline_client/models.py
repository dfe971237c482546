"""Data models returned by the Outline client."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Collection:
    """A top-level Outline collection.

    Attributes:
        id: Stable collection identifier (UUID)
        name: Display name
        description: Collection description (empty when unset)
    """
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Collection":
        """Build a Collection from one entry of a collections.list response."""
        return cls(
            id=data.get("id", ""),
            name=data.get("name") or "",
            description=data.get("description") or "",
        )
