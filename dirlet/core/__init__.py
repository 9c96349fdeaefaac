from .links import translate, file_name_from_url
from .paths import resolve_local_path
from .walker import TreeWalker
from .orchestrator import MirrorOrchestrator

__all__ = [
    "translate",
    "file_name_from_url",
    "resolve_local_path",
    "TreeWalker",
    "MirrorOrchestrator",
]
