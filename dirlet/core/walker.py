"""
Recursive expansion of directory listings into local directories and downloads.
"""

import asyncio
from pathlib import Path
from typing import Awaitable, List

from ..infrastructure.error_handler import (
    DirletError, DownloadError, ListingFetchError
)
from ..infrastructure.logger import logger
from ..models import Entry, RunState
from ..services import GitHubAPIService, DownloadService
from .paths import resolve_local_path


class TreeWalker:
    """
    Walks a remote directory tree level by level.

    Every level gathers its child tasks (sub-walks and downloads), so the
    outermost ``walk`` returns only once all nested work has finished.
    Only downloads hold the semaphore; a walk waiting on its children never
    blocks a slot.

    With ``fail_fast`` set, the run state is checked when a walk or a
    sub-walk starts: once it holds an error no new listing is fetched and
    no new directory is created. A level whose listing already arrived
    still schedules all of its children, and downloads that were
    scheduled run to completion.
    """

    def __init__(
        self,
        github_service: GitHubAPIService,
        download_service: DownloadService,
        destination: Path,
        max_concurrent_downloads: int = 5,
        fail_fast: bool = True
    ):
        self.github_service = github_service
        self.download_service = download_service
        self.destination = Path(destination)
        self.fail_fast = fail_fast
        self._semaphore = asyncio.Semaphore(max_concurrent_downloads)

    def local_path(self, relative: str) -> Path:
        return self.destination / relative

    def _should_stop(self, state: RunState) -> bool:
        return self.fail_fast and state.failed

    async def walk(self, listing_url: str, local_root: str, state: RunState) -> None:
        """
        Mirror the directory behind ``listing_url`` into ``local_root``.

        ``local_root`` is relative to the destination and must already
        exist. Failures go into ``state``; this method does not raise
        for them.
        """

        if self._should_stop(state):
            logger.debug(f"Skipping {local_root}: run already failed")
            return

        try:
            if not listing_url:
                raise ListingFetchError(f"No listing URL for {local_root}")
            entries = await self.github_service.get_directory_listing(listing_url)
        except DirletError as e:
            self._record(state, local_root, e)
            return

        tasks: List[Awaitable[None]] = []
        for entry in entries:
            if entry.is_directory:
                child_root = resolve_local_path(entry.repo_path, entry.name, local_root)
                tasks.append(self._walk_subdirectory(entry, child_root, state))
            elif entry.is_file:
                file_path = resolve_local_path(entry.repo_path, entry.name, local_root)
                tasks.append(self._download_entry(entry, file_path, state))
            else:
                logger.debug(f"Skipping {entry.repo_path} ({entry.kind.value})")

        if tasks:
            await asyncio.gather(*tasks)

    async def _walk_subdirectory(self, entry: Entry, child_root: str, state: RunState) -> None:
        if self._should_stop(state):
            return

        try:
            await self.download_service.ensure_directory(self.local_path(child_root))
        except DirletError as e:
            self._record(state, child_root, e)
            return

        state.add_directory(child_root)
        await self.walk(entry.listing_url, child_root, state)

    async def _download_entry(self, entry: Entry, file_path: str, state: RunState) -> None:
        async with self._semaphore:
            try:
                if not entry.download_url:
                    raise DownloadError(f"No download URL for {entry.repo_path}")
                size = await self.download_service.download_file(
                    entry.download_url,
                    self.local_path(file_path),
                    expected_size=entry.size
                )
            except DirletError as e:
                self._record(state, file_path, e)
                return

        state.add_download(file_path, size)
        logger.debug(f"Downloaded {file_path} ({size} bytes)")

    @staticmethod
    def _record(state: RunState, path: str, error: DirletError) -> None:
        logger.error(f"Failed on {path}: {error}")
        state.add_failure(path, error)


__all__ = [
    "TreeWalker",
]
