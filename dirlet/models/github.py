"""
GitHub domain models for Dirlet.

This module contains strongly typed data classes and enums representing
GitHub contents-API entities.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional
import posixpath


class EntryKind(Enum):
    """Type tag of one item in a contents listing."""

    FILE = "file"
    DIRECTORY = "dir"
    SYMLINK = "symlink"
    SUBMODULE = "submodule"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "EntryKind":
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


class MirrorTarget(NamedTuple):
    """Listing URL of the mirrored directory and its local root name."""

    api_url: str
    local_root: str


@dataclass(frozen=True)
class Entry:
    """Immutable record of one file or directory in a listing."""

    repo_path: str
    name: str
    kind: EntryKind
    size: int = 0
    listing_url: Optional[str] = None  # set for directories
    download_url: Optional[str] = None  # set for files
    sha: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Entry":
        """
        Build an entry from one item of a GitHub contents response.

        Raises:
            ValueError: If the item carries no usable path
        """

        if not isinstance(item, dict):
            raise ValueError(f"Listing item is not an object: {item!r}")

        repo_path = item.get("path") or ""
        download_url = item.get("download_url")
        name = item.get("name")
        if not name and download_url:
            from ..core.links import file_name_from_url
            name = file_name_from_url(download_url)
        if not name:
            name = posixpath.basename(repo_path)
        if not repo_path or not name:
            raise ValueError(f"Listing item has no path: {item!r}")

        return cls(
            repo_path=repo_path,
            name=name,
            kind=EntryKind.from_tag(item.get("type")),
            size=int(item.get("size") or 0),
            listing_url=item.get("url"),
            download_url=download_url,
            sha=item.get("sha"),
        )


__all__ = [
    "EntryKind",
    "MirrorTarget",
    "Entry",
]
