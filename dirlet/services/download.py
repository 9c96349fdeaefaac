"""
Download service that streams raw file bodies onto local disk.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

import httpx

from ..infrastructure.error_handler import (
    DirectoryCreateError, DownloadError, handle_api_error
)
from ..infrastructure.logger import logger


PARTIAL_SUFFIX = ".part"
FILE_MODE = 0o644


class DownloadService:
    """Fetch-and-save of single files plus local directory creation."""

    def __init__(self, client: httpx.AsyncClient, chunk_size: int = 8192, verify_size: bool = True):
        self.client = client
        self.chunk_size = chunk_size
        self.verify_size = verify_size

    @handle_api_error(DirectoryCreateError)
    async def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and its parents; an existing directory is fine."""

        Path(path).mkdir(parents=True, exist_ok=True)

    @handle_api_error(DownloadError)
    async def download_file(
        self,
        url: str,
        target_path: Path,
        expected_size: Optional[int] = None
    ) -> int:
        """
        Stream ``url`` into ``target_path``, replacing any existing file.

        The body goes to a uniquely named ``.part`` file beside the target
        and is moved into place only once it is complete, so a file at
        ``target_path`` is always whole.

        Args:
            url: Raw download URL
            target_path: Local destination file
            expected_size: Size reported by the listing, checked when set

        Returns:
            Number of bytes written

        Raises:
            DownloadError: On transport, status, write or size failures
        """

        target_path = Path(target_path)
        partial_path: Optional[Path] = None
        written = 0

        try:
            async with self.client.stream("GET", url) as response:
                response.raise_for_status()
                fd, name = tempfile.mkstemp(
                    dir=target_path.parent, prefix="." + target_path.name + ".", suffix=PARTIAL_SUFFIX
                )
                partial_path = Path(name)
                with os.fdopen(fd, "wb") as f:
                    async for chunk in response.aiter_bytes(self.chunk_size):
                        f.write(chunk)
                        written += len(chunk)

            if self.verify_size and expected_size is not None and written != expected_size:
                raise DownloadError(
                    f"Size mismatch for {target_path}: expected {expected_size}, got {written}"
                )

            os.chmod(partial_path, FILE_MODE)
            os.replace(partial_path, target_path)
        except BaseException:
            if partial_path is not None:
                self._discard(partial_path)
            raise

        logger.debug(f"Saved {url} to {target_path} ({written} bytes)")
        return written

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove partial file {path}: {e}")


__all__ = [
    "PARTIAL_SUFFIX",
    "DownloadService",
]
