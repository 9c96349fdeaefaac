from .logger import logger
from .error_handler import (
    DirletError,
    InvalidURLError,
    ListingFetchError,
    DirectoryCreateError,
    DownloadError,
    handle_api_error,
)

__all__ = [
    "logger",
    "DirletError",
    "InvalidURLError",
    "ListingFetchError",
    "DirectoryCreateError",
    "DownloadError",
    "handle_api_error",
]
