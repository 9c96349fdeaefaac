"""
Core data models API surface for Dirlet.

This file re-exports model classes from domain-specific modules so that
imports like `from dirlet.models import X` keep working.
"""

from .github import (
    EntryKind,
    MirrorTarget,
    Entry,
)
from .download import (
    MirrorStatus,
    RunState,
    MirrorResult,
)
from .config import MirrorConfig

__all__ = [
    # GitHub models
    "EntryKind",
    "MirrorTarget",
    "Entry",
    # Download models
    "MirrorStatus",
    "RunState",
    "MirrorResult",
    # Config models
    "MirrorConfig",
]
