"""
Python API for mirroring a GitHub directory.

Example:
    >>> from dirlet import DirectoryMirror
    >>> mirror = DirectoryMirror(verbose=True)
    >>> result = mirror.mirror_sync("https://github.com/tesseract-ocr/tesseract/tree/4.0/m4")
    >>> result.is_successful
    True
"""

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

import httpx

from ..core.orchestrator import MirrorOrchestrator
from ..infrastructure.logger import logger
from ..models import MirrorConfig, MirrorResult
from ..services import DownloadService, GitHubAPIService


class DirectoryMirror:
    """
    High-level entry point that owns the HTTP client for each run.

    Args:
        config: Settings for every run started from this instance
        verbose: Log at DEBUG; otherwise the level from DIRLET_LOGLEVEL is kept
    """

    def __init__(self, config: Optional[MirrorConfig] = None, verbose: bool = False):
        self.config = config or MirrorConfig()
        self.verbose = verbose
        if verbose:
            logger.setLevel(logging.DEBUG)

    def set_verbose(self, verbose: bool) -> None:
        self.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        logger.debug(f"Verbose logging {'enabled' if verbose else 'disabled'}")

    def _client(self) -> httpx.AsyncClient:
        timeout = httpx.Timeout(self.config.timeout, connect=self.config.connect_timeout)
        return httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
        )

    def _config_for(self, destination: Optional[Union[str, Path]]) -> MirrorConfig:
        if destination is None:
            return self.config
        return replace(self.config, destination=Path(destination))

    async def mirror(
        self,
        url: str,
        destination: Optional[Union[str, Path]] = None
    ) -> MirrorResult:
        """
        Mirror the directory behind ``url``.

        Args:
            url: GitHub browse-directory URL
            destination: Overrides ``config.destination`` for this run

        Returns:
            MirrorResult for the run

        Raises:
            InvalidURLError: If ``url`` is not a browse-directory URL
        """

        config = self._config_for(destination)
        async with self._client() as client:
            orchestrator = MirrorOrchestrator(
                GitHubAPIService(client),
                DownloadService(
                    client,
                    chunk_size=config.chunk_size,
                    verify_size=config.verify_size
                ),
                config
            )
            return await orchestrator.execute(url)

    def mirror_sync(
        self,
        url: str,
        destination: Optional[Union[str, Path]] = None
    ) -> MirrorResult:
        """Blocking wrapper around :meth:`mirror`."""

        return asyncio.run(self.mirror(url, destination))


__all__ = [
    "DirectoryMirror",
]
