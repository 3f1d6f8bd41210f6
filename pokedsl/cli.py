"""Command that loads a data directory into a dex and prints it."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .dex import Dex
from .loader import load_ron_from_dir
from .store import ResolveError


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load dex data and print it.")
    parser.add_argument(
        "directory", nargs="?", default="./data", help="directory of .ron files"
    )
    args = parser.parse_args(argv)
    dex = Dex()
    try:
        load_ron_from_dir(dex, args.directory)
    except (ResolveError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(repr(dex))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())