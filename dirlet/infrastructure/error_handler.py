"""
Error types for Dirlet and a decorator that maps low-level failures onto them.
"""

import inspect
import functools
import json
from typing import Any, Callable, Optional, Type

import httpx

from .logger import logger


class DirletError(Exception):
    """Base exception for mirror failures."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class InvalidURLError(DirletError):
    """The input is not a GitHub browse-directory URL."""


class ListingFetchError(DirletError):
    """A directory listing could not be fetched or decoded."""


class DirectoryCreateError(DirletError):
    """A local directory could not be created."""


class DownloadError(DirletError):
    """A single file could not be fetched or written."""


def _describe(error: BaseException) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code} for {error.request.url}"
    if isinstance(error, httpx.TimeoutException):
        return "Request timed out"
    if isinstance(error, httpx.RequestError):
        return "Network error"
    if isinstance(error, (json.JSONDecodeError, ValueError)):
        return "Malformed response"
    if isinstance(error, OSError):
        return "Filesystem error"
    return "Unexpected error"


def handle_api_error(error_cls: Type[DirletError]) -> Callable:
    """
    Decorator that converts HTTP, decode and filesystem errors into ``error_cls``.

    Dirlet errors pass through unchanged. Works on plain and async functions.
    """

    def _convert(func_name: str, error: Exception) -> DirletError:
        logger.debug(f"{func_name} failed: {error!r}")
        return error_cls(_describe(error), error)

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except DirletError:
                    raise
                except (httpx.HTTPError, ValueError, OSError) as e:
                    raise _convert(func.__name__, e) from e

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except DirletError:
                raise
            except (httpx.HTTPError, ValueError, OSError) as e:
                raise _convert(func.__name__, e) from e

        return wrapper

    return decorator


__all__ = [
    "DirletError",
    "InvalidURLError",
    "ListingFetchError",
    "DirectoryCreateError",
    "DownloadError",
    "handle_api_error",
]
