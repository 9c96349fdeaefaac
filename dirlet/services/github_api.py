"""
GitHub contents-API client used to expand directory listings.
"""

from typing import List

import httpx

from ..infrastructure.error_handler import ListingFetchError, handle_api_error
from ..infrastructure.logger import logger
from ..models import Entry


GITHUB_JSON = "application/vnd.github+json"


class GitHubAPIService:
    """Fetches one directory level at a time from the contents API."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.api_calls = 0

    @handle_api_error(ListingFetchError)
    async def get_directory_listing(self, api_url: str) -> List[Entry]:
        """
        Fetch the immediate children of the directory behind ``api_url``.

        Args:
            api_url: Contents-API URL, including its ``ref`` query

        Returns:
            Entries in the order the API returned them

        Raises:
            ListingFetchError: On transport, status or decode failures
        """

        logger.debug(f"Fetching listing {api_url}")
        self.api_calls += 1
        response = await self.client.get(api_url, headers={"Accept": GITHUB_JSON})
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, list):
            raise ListingFetchError(f"Listing at {api_url} is not a directory")
        if not all(isinstance(item, dict) for item in payload):
            raise ListingFetchError(f"Listing at {api_url} contains non-object items")

        entries = [Entry.from_api(item) for item in payload]
        for entry in entries:
            logger.debug(
                f"name: {entry.name!r}, size: {entry.size}, "
                f"url: {entry.download_url!r}, type: {entry.kind.value!r}"
            )
        return entries


__all__ = [
    "GitHubAPIService",
]
