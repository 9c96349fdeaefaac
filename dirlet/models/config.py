"""
Configuration models for Dirlet mirror runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_CONNECT_TIMEOUT = 10.0


@dataclass
class MirrorConfig:
    """
    Settings for one mirror run.

    ``destination`` is the directory the local root is created in.
    Timeouts are in seconds and apply to every HTTP request.
    """

    destination: Path = field(default_factory=lambda: Path("."))

    # HTTP settings
    timeout: float = 30.0
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    user_agent: str = "dirlet"

    # Download settings
    chunk_size: int = 8192
    max_concurrent_downloads: int = 5
    verify_size: bool = True

    # Stop expanding new directories once any failure is recorded
    fail_fast: bool = True

    def __post_init__(self) -> None:
        self.destination = Path(self.destination)
        if self.timeout <= 0 or self.connect_timeout <= 0:
            raise ValueError("timeouts must be positive")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if self.max_concurrent_downloads <= 0:
            raise ValueError("max_concurrent_downloads must be positive")


__all__ = [
    "DEFAULT_CONNECT_TIMEOUT",
    "MirrorConfig",
]
