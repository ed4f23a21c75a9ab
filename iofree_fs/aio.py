"""Asynchronous runtime that performs filesystem I/O off the event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from . import blocking
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


async def create_dir(path: Any) -> Io:
    """Create a single directory; its parent must exist."""
    return await asyncio.to_thread(blocking.create_dir, path)


async def create_dirs(paths: Iterable[Any]) -> Io:
    """Create each of the given directories."""
    for path in paths:
        await asyncio.to_thread(blocking.create_dir, path)
    return Io.response(IoKind.CREATE_DIRS)


async def create_file(path: Any, contents: bytes) -> Io:
    """Write ``contents`` to ``path``, replacing any existing file."""
    return await asyncio.to_thread(blocking.create_file, path, contents)


async def create_files(contents: Mapping[Any, bytes]) -> Io:
    """Write every file of the mapping of paths to contents."""
    for path, data in contents.items():
        await asyncio.to_thread(blocking.create_file, path, data)
    return Io.response(IoKind.CREATE_FILES)


async def read_dir(path: Any) -> Io:
    """List the paths of the entries of a directory."""
    return await asyncio.to_thread(blocking.read_dir, path)


async def read_file(path: Any) -> Io:
    """Read the whole contents of a file."""
    return await asyncio.to_thread(blocking.read_file, path)


async def read_files(paths: Iterable[Any]) -> Io:
    """Read the contents of several files, keyed by path."""
    contents = {}
    for path in paths:
        response = await asyncio.to_thread(blocking.read_file, path)
        contents[path] = response.payload
    return Io.response(IoKind.READ_FILES, contents)


async def remove_dir(path: Any) -> Io:
    """Remove a directory and everything below it."""
    return await asyncio.to_thread(blocking.remove_dir, path)


async def remove_dirs(paths: Iterable[Any]) -> Io:
    """Remove several directories and everything below them."""
    for path in paths:
        await asyncio.to_thread(blocking.remove_dir, path)
    return Io.response(IoKind.REMOVE_DIRS)


async def remove_file(path: Any) -> Io:
    """Remove a single file."""
    return await asyncio.to_thread(blocking.remove_file, path)


async def remove_files(paths: Iterable[Any]) -> Io:
    """Remove several files."""
    for path in paths:
        await asyncio.to_thread(blocking.remove_file, path)
    return Io.response(IoKind.REMOVE_FILES)


async def rename(pairs: Iterable[tuple[Any, Any]]) -> Io:
    """Rename each source to its target, in order, replacing targets."""
    for source, target in pairs:
        await asyncio.to_thread(blocking.rename, [(source, target)])
    return Io.response(IoKind.RENAME)


_HANDLERS: dict[IoKind, Callable[[Any], Awaitable[Io]]] = {
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


async def handle(io: Io) -> Io:
    """Perform the I/O a request asks for and return the response.

    An ``ERROR`` message raises :class:`OSError`; a message that is
    already a response raises :class:`ValueError`.
    """
    blocking.check_request(io)
    return await _HANDLERS[io.kind](io.payload)


async def run(coroutine: Coroutine) -> Any:
    """Drive a coroutine to completion and return its result."""
    output: Io | None = None
    while True:
        result = coroutine.resume(output)
        if not isinstance(result, Io):
            return result
        output = await handle(result)