"""Blocking runtime that performs filesystem I/O with the standard library."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from .coroutines import Coroutine
from .io_request import Io, IoKind

__all__ = [
    "handle",
    "run",
    "create_dir",
    "create_dirs",
    "create_file",
    "create_files",
    "read_dir",
    "read_file",
    "read_files",
    "remove_dir",
    "remove_dirs",
    "remove_file",
    "remove_files",
    "rename",
]

log = logging.getLogger(__name__)

PathLike = "str | os.PathLike[str]"

MISSING_INPUT: dict[IoKind, str] = {
    IoKind.CREATE_DIR: "missing directory path",
    IoKind.CREATE_DIRS: "missing directory paths",
    IoKind.CREATE_FILE: "missing file contents",
    IoKind.CREATE_FILES: "missing file contents",
    IoKind.READ_DIR: "missing directory path",
    IoKind.READ_FILE: "missing file path",
    IoKind.READ_FILES: "missing file paths",
    IoKind.REMOVE_DIR: "missing directory path",
    IoKind.REMOVE_DIRS: "missing directory paths",
    IoKind.REMOVE_FILE: "missing file path",
    IoKind.REMOVE_FILES: "missing file paths",
    IoKind.RENAME: "missing file paths",
}


def check_request(io: Io) -> None:
    """Raise if ``io`` is not a request a runtime can act upon."""
    if io.kind is IoKind.ERROR:
        raise OSError(io.payload)
    if io.output:
        raise ValueError(MISSING_INPUT[io.kind])


def create_dir(path: Any) -> Io:
    """Create a single directory; its parent must exist."""
    os.mkdir(path)
    return Io.response(IoKind.CREATE_DIR)


def create_dirs(paths: Iterable[Any]) -> Io:
    """Create each of the given directories."""
    for path in paths:
        os.mkdir(path)
    return Io.response(IoKind.CREATE_DIRS)


def create_file(path: Any, contents: bytes) -> Io:
    """Write ``contents`` to ``path``, replacing any existing file."""
    Path(path).write_bytes(bytes(contents))
    return Io.response(IoKind.CREATE_FILE)


def create_files(contents: Mapping[Any, bytes]) -> Io:
    """Write every file of the mapping of paths to contents."""
    for path, data in contents.items():
        Path(path).write_bytes(bytes(data))
    return Io.response(IoKind.CREATE_FILES)


def read_dir(path: Any) -> Io:
    """List the paths of the entries of a directory."""
    entries: set[Path] = set()
    with os.scandir(path) as iterator:
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                break
            except OSError as err:
                log.debug("ignore invalid directory entry: %s", err)
                continue
            entries.add(Path(entry.path))
    return Io.response(IoKind.READ_DIR, entries)


def read_file(path: Any) -> Io:
    """Read the whole contents of a file."""
    return Io.response(IoKind.READ_FILE, Path(path).read_bytes())


def read_files(paths: Iterable[Any]) -> Io:
    """Read the contents of several files, keyed by path."""
    contents = {Path(path): Path(path).read_bytes() for path in paths}
    return Io.response(IoKind.READ_FILES, contents)


def remove_dir(path: Any) -> Io:
    """Remove a directory and everything below it."""
    shutil.rmtree(path)
    return Io.response(IoKind.REMOVE_DIR)


def remove_dirs(paths: Iterable[Any]) -> Io:
    """Remove several directories and everything below them."""
    for path in paths:
        shutil.rmtree(path)
    return Io.response(IoKind.REMOVE_DIRS)


def remove_file(path: Any) -> Io:
    """Remove a single file."""
    os.remove(path)
    return Io.response(IoKind.REMOVE_FILE)


def remove_files(paths: Iterable[Any]) -> Io:
    """Remove several files."""
    for path in paths:
        os.remove(path)
    return Io.response(IoKind.REMOVE_FILES)


def rename(pairs: Iterable[tuple[Any, Any]]) -> Io:
    """Rename each source to its target, in order, replacing targets."""
    for source, target in pairs:
        os.replace(source, target)
    return Io.response(IoKind.RENAME)


_HANDLERS: dict[IoKind, Callable[[Any], Io]] = {
    IoKind.CREATE_DIR: create_dir,
    IoKind.CREATE_DIRS: create_dirs,
    IoKind.CREATE_FILE: lambda payload: create_file(*payload),
    IoKind.CREATE_FILES: create_files,
    IoKind.READ_DIR: read_dir,
    IoKind.READ_FILE: read_file,
    IoKind.READ_FILES: read_files,
    IoKind.REMOVE_DIR: remove_dir,
    IoKind.REMOVE_DIRS: remove_dirs,
    IoKind.REMOVE_FILE: remove_file,
    IoKind.REMOVE_FILES: remove_files,
    IoKind.RENAME: rename,
}


def handle(io: Io) -> Io:
    """Perform the I/O a request asks for and return the response.

    An ``ERROR`` message raises :class:`OSError`; a message that is
    already a response raises :class:`ValueError`.
    """
    check_request(io)
    return _HANDLERS[io.kind](io.payload)


def run(coroutine: Coroutine) -> Any:
    """Drive a coroutine to completion and return its result."""
    output: Io | None = None
    while True:
        result = coroutine.resume(output)
        if not isinstance(result, Io):
            return result
        output = handle(result)