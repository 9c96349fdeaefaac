from .api import DirectoryMirror

__all__ = [
    "DirectoryMirror",
]
