"""
Download domain models for Dirlet.

This module contains the shared run state that concurrent tasks report
into and the result handed back to callers once a mirror run finishes.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


class MirrorStatus(Enum):
    """Status enumeration for mirror runs."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class RunState:
    """
    Failure slot and ledger shared by every task of one mirror run.

    The first recorded error is kept and never replaced. Every failure is
    also kept in ``failures`` keyed by the local path it belongs to.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._first_error: Optional[BaseException] = None
        self.failures: Dict[str, str] = {}
        self.downloaded_files: List[str] = []
        self.created_directories: List[str] = []
        self.total_bytes: int = 0

    @property
    def first_error(self) -> Optional[BaseException]:
        with self._lock:
            return self._first_error

    @property
    def failed(self) -> bool:
        return self.first_error is not None

    def record(self, error: BaseException) -> bool:
        """
        Store ``error`` unless an earlier one is already stored.

        Returns:
            True if this call filled the slot, False otherwise
        """

        with self._lock:
            if self._first_error is not None:
                return False
            self._first_error = error
            return True

    def add_failure(self, path: str, error: BaseException) -> bool:
        """Add ``error`` to the ledger and offer it to the first-error slot."""

        with self._lock:
            self.failures.setdefault(path, str(error))
        return self.record(error)

    def add_download(self, path: str, size: int) -> None:
        with self._lock:
            self.downloaded_files.append(path)
            self.total_bytes += size

    def add_directory(self, path: str) -> None:
        with self._lock:
            self.created_directories.append(path)


@dataclass
class MirrorResult:
    """Result of one mirror run."""

    url: str
    destination: Path
    status: MirrorStatus
    local_root: Optional[str] = None

    # Results
    downloaded_files: List[str] = field(default_factory=list)
    created_directories: List[str] = field(default_factory=list)
    failed_files: Dict[str, str] = field(default_factory=dict)

    # Metadata
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    error_message: Optional[str] = None

    # Statistics
    total_bytes: int = 0
    api_calls_made: int = 0

    @property
    def is_successful(self) -> bool:
        return self.status == MirrorStatus.COMPLETED and self.error_message is None

    @property
    def duration_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()

    def apply(self, state: RunState) -> None:
        """Copy the ledger of a finished run into this result."""

        self.downloaded_files = sorted(state.downloaded_files)
        self.created_directories = sorted(state.created_directories)
        self.failed_files = dict(state.failures)
        self.total_bytes = state.total_bytes
        error = state.first_error
        if error is not None:
            self.error_message = str(error)

    def mark_completed(self) -> None:
        self.completed_at = datetime.now()
        self.status = MirrorStatus.COMPLETED if self.error_message is None else MirrorStatus.FAILED


__all__ = [
    "MirrorStatus",
    "RunState",
    "MirrorResult",
]
