"""
Translation between GitHub browse URLs, contents-API URLs and local names.
"""

import posixpath
from urllib.parse import unquote, urlparse

from ..infrastructure.error_handler import InvalidURLError
from ..models import MirrorTarget


BROWSE_PREFIX = "https://github.com/"
API_PREFIX = "https://api.github.com/repos/"
TREE_MARKER = "/tree/"
CONTENTS = "contents"


def translate(directory_url: str) -> MirrorTarget:
    """
    Turn a browse-directory URL into its listing URL and local root name.

    ``https://github.com/<owner>/<repo>/tree/<branch>/<dir...>`` becomes
    ``https://api.github.com/repos/<owner>/<repo>/contents/<dir...>?ref=<branch>``.
    The branch ends at the first ``/`` after the tree marker.

    Raises:
        InvalidURLError: If the URL is not a browse-directory URL
    """

    if not directory_url.startswith(BROWSE_PREFIX) or TREE_MARKER not in directory_url:
        raise InvalidURLError(f"Not a GitHub directory URL: {directory_url}")

    link_path = directory_url[len(BROWSE_PREFIX):].rstrip("/")
    repo, _, ref_path = link_path.partition(TREE_MARKER)
    branch, _, dir_path = ref_path.partition("/")

    owner_repo = repo.split("/")
    if len(owner_repo) != 2 or not all(owner_repo):
        raise InvalidURLError(f"Missing owner or repository in {directory_url}")
    if not branch or not dir_path:
        raise InvalidURLError(f"Missing branch or directory in {directory_url}")

    api_url = API_PREFIX + posixpath.join(repo, CONTENTS, dir_path) + "?ref=" + branch
    return MirrorTarget(api_url=api_url, local_root=dir_name(directory_url))


def dir_name(directory_url: str) -> str:
    """Last path segment of ``directory_url``, percent-decoded."""

    return unquote(posixpath.basename(directory_url.rstrip("/")))


def file_name_from_url(download_url: str) -> str:
    """
    UTF-8 file name for a raw download URL.

    Download URLs carry escaped characters, so ``bar%C4%B1%C5%9F.png``
    comes back as ``barış.png``.
    """

    return posixpath.basename(unquote(urlparse(download_url).path))


__all__ = [
    "BROWSE_PREFIX",
    "API_PREFIX",
    "translate",
    "dir_name",
    "file_name_from_url",
]
