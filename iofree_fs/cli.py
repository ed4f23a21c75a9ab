"""Command line for reading directories and creating many files."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import tempfile
import time
from collections.abc import Sequence
from pathlib import Path

from . import aio, blocking
from .coroutines import CreateFiles, ReadDir

__all__ = ["main"]

_CONTENTS = b"Hello, world!"


def _prompt(message: str) -> str:
    print(message, end=" ", flush=True)
    return sys.stdin.readline().strip()


def _read_dir(path: str | None) -> int:
    if path is None:
        path = _prompt("Which directory to read?")
    try:
        entries = blocking.run(ReadDir(path))
    except OSError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(f"Entries inside {path}:")
    for entry in sorted(entries):
        print(f" - {entry}")
    return 0


def _create_files(count: int) -> int:
    with tempfile.TemporaryDirectory(prefix="create-files") as tmp:
        root = Path(tmp)
        start = time.perf_counter()
        coroutine = CreateFiles((root / str(n), _CONTENTS) for n in range(count))
        try:
            asyncio.run(aio.run(coroutine))
        except OSError as err:
            print(f"error: {err}", file=sys.stderr)
            return 1
        duration = time.perf_counter() - start
    print(f"Created {count} temp files in {duration:.6f}s!")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    parser = argparse.ArgumentParser(prog="iofree-fs")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    commands = parser.add_subparsers(dest="command", required=True)

    read = commands.add_parser("read-dir", help="list the entries of a directory")
    read.add_argument("path", nargs="?", help="directory to read (prompted if absent)")

    create = commands.add_parser("create-files", help="create many temporary files")
    create.add_argument("count", nargs="?", help="number of files (prompted if absent)")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "read-dir":
        return _read_dir(args.path)

    raw = args.count if args.count is not None else _prompt("How many temp files to create?")
    try:
        count = int(raw)
    except ValueError:
        parser.error(f"invalid number of files: {raw!r}")
    if count < 0:
        parser.error(f"invalid number of files: {raw!r}")
    return _create_files(count)


if __name__ == "__main__":
    sys.exit(main())