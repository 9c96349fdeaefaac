"""
Local path reconstruction for entries of a mirrored directory.
"""

import posixpath


def resolve_local_path(repo_path: str, name: str, local_root: str) -> str:
    """
    Compute the local path of an entry below ``local_root``.

    Listing paths are relative to the repository root while local paths
    are relative to the mirror root, which may sit at a shallower depth.
    Everything in ``repo_path`` up to and including the first occurrence
    of ``local_root/name`` is replaced by it; the rest is kept verbatim.

    >>> resolve_local_path("tesseract/example/cli", "cli", "example")
    'example/cli'
    """

    target = posixpath.join(local_root, name)
    _, found, remainder = repo_path.partition(target)
    if not found:
        return target

    remainder = remainder.lstrip("/")
    if not remainder:
        return target
    return posixpath.join(target, remainder)


__all__ = [
    "resolve_local_path",
]
