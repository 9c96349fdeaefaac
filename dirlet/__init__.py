"""
Dirlet: mirror a single GitHub repository directory onto local disk.
"""

from .core import translate, resolve_local_path, MirrorOrchestrator, TreeWalker
from .infrastructure.error_handler import (
    DirletError,
    InvalidURLError,
    ListingFetchError,
    DirectoryCreateError,
    DownloadError,
)
from .interfaces.api import DirectoryMirror
from .models import Entry, EntryKind, MirrorConfig, MirrorResult, MirrorStatus, RunState

__version__ = "0.1.0"

__all__ = [
    "translate",
    "resolve_local_path",
    "MirrorOrchestrator",
    "TreeWalker",
    "DirectoryMirror",
    "DirletError",
    "InvalidURLError",
    "ListingFetchError",
    "DirectoryCreateError",
    "DownloadError",
    "Entry",
    "EntryKind",
    "MirrorConfig",
    "MirrorResult",
    "MirrorStatus",
    "RunState",
]
