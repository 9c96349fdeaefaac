"""Mirror one GitHub directory onto local disk.

usage: dirlet URL [-o DIR] [-j N] [--timeout S] [-v]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..infrastructure.error_handler import InvalidURLError
from ..models import MirrorConfig
from ..models.config import DEFAULT_CONNECT_TIMEOUT
from .api import DirectoryMirror


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_URL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlet", description=__doc__, formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "url", help="directory URL, e.g. https://github.com/OWNER/REPO/tree/BRANCH/DIR"
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("."),
        help="directory the mirrored folder is created in (default: .)"
    )
    parser.add_argument(
        "-j", "--jobs", type=int, default=5,
        help="maximum concurrent downloads (default: 5)"
    )
    parser.add_argument(
        "--timeout", type=float, default=30.0,
        help="per-request timeout in seconds, also caps the connect timeout (default: 30)"
    )
    parser.add_argument(
        "--keep-going", action="store_true",
        help="keep expanding directories after a failure"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = MirrorConfig(
            destination=args.output,
            timeout=args.timeout,
            connect_timeout=min(args.timeout, DEFAULT_CONNECT_TIMEOUT),
            max_concurrent_downloads=args.jobs,
            fail_fast=not args.keep_going,
        )
    except ValueError as e:
        parser.error(str(e))

    mirror = DirectoryMirror(config=config, verbose=args.verbose)
    try:
        result = mirror.mirror_sync(args.url)
    except InvalidURLError as e:
        print(f"dirlet: {e}", file=sys.stderr)
        return EXIT_BAD_URL

    if not result.is_successful:
        print(f"dirlet: {result.error_message}", file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK


__all__ = [
    "build_parser",
    "main",
]
