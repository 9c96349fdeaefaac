"""
Orchestrator for a complete mirror run: translate, walk, join, report.
"""

from datetime import datetime
from typing import Optional

from ..models import MirrorConfig, MirrorResult, MirrorStatus, RunState
from ..services import GitHubAPIService, DownloadService
from ..infrastructure.error_handler import DirletError
from .links import translate
from .walker import TreeWalker

from dirlet.infrastructure.logger import logger



####
##      MIRROR ORCHESTRATOR
#####
class MirrorOrchestrator:
    """
    Runs one directory URL through the tree walker and turns the shared
    run state into a ``MirrorResult`` once every task has joined.
    """

    def __init__(
        self,
        github_service: GitHubAPIService,
        download_service: DownloadService,
        config: Optional[MirrorConfig] = None
    ):
        self.github_service = github_service
        self.download_service = download_service
        self.config = config or MirrorConfig()

    async def execute(self, directory_url: str) -> MirrorResult:
        """
        Mirror the directory behind ``directory_url`` into the destination.

        Args:
            directory_url: GitHub browse-directory URL

        Returns:
            MirrorResult, COMPLETED only if no failure was recorded

        Raises:
            InvalidURLError: If ``directory_url`` is malformed; raised
                before any request is made
        """

        target = translate(directory_url)
        destination = self.config.destination

        logger.debug(f"Mirroring {target.api_url} into {destination / target.local_root}")

        state = RunState()
        result = MirrorResult(
            url=directory_url,
            destination=destination,
            status=MirrorStatus.IN_PROGRESS,
            local_root=target.local_root,
            started_at=datetime.now()
        )
        walker = TreeWalker(
            self.github_service,
            self.download_service,
            destination,
            max_concurrent_downloads=self.config.max_concurrent_downloads,
            fail_fast=self.config.fail_fast
        )

        try:
            await self.download_service.ensure_directory(destination / target.local_root)
        except DirletError as e:
            logger.error(f"Cannot create {target.local_root}: {e}")
            state.add_failure(target.local_root, e)
        else:
            state.add_directory(target.local_root)
            await walker.walk(target.api_url, target.local_root, state)

        result.apply(state)
        result.api_calls_made = self.github_service.api_calls
        result.mark_completed()

        if result.is_successful:
            logger.info(
                f"Mirrored {len(result.downloaded_files)} files "
                f"({result.total_bytes} bytes) into {destination / target.local_root}"
            )
        else:
            logger.error(
                f"Mirror failed with {len(result.failed_files)} error(s); "
                f"first: {result.error_message}"
            )
        return result


__all__ = [
    "MirrorOrchestrator",
]
