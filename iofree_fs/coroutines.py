"""Resumable, I/O-free filesystem state machines.

Each coroutine is driven by calling :meth:`Coroutine.resume`. The first
call (with no argument) hands back an :class:`Io` request for a runtime
to process; passing the runtime's response to the next call yields the
final result. When something goes wrong, an ``ERROR`` :class:`Io` is
handed back instead, for the runtime to turn into an exception.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Union

from .io_request import Io, IoKind

__all__ = [
    "Coroutine",
    "CreateDir",
    "CreateDirs",
    "CreateFile",
    "CreateFiles",
    "ReadDir",
    "ReadFile",
    "ReadFiles",
    "RemoveDir",
    "RemoveDirs",
    "RemoveFile",
    "RemoveFiles",
    "Rename",
]

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Coroutine:
    """Base of the single-step filesystem coroutines."""

    kind: IoKind
    label: str
    action: str

    def __init__(self, request_payload: Any) -> None:
        self._input = request_payload
        self._consumed = False

    def _step(self, arg: Io | None) -> Any:
        if arg is None:
            if self._consumed:
                return Io.error(f"{self.label} input already consumed")
            self._consumed = True
            payload, self._input = self._input, None
            log.debug("break: need I/O to %s", self.action)
            return Io.request(self.kind, payload)

        log.debug("resume after I/O to %s", self.action)
        if arg.kind is not self.kind or not arg.output:
            return Io.error(f"expected {self.label} output, got {arg!r}")
        return arg.payload

    def resume(self, arg: Io | None = None) -> Any:
        """Make the coroutine progress.

        Returns an :class:`Io` while a runtime must act, otherwise the
        coroutine's result.
        """
        return self._step(arg)


def _paths(paths: Iterable[PathLike]) -> set[Path]:
    return {Path(path) for path in paths}


class CreateDir(Coroutine):
    """Create a directory."""

    kind = IoKind.CREATE_DIR
    label = "create dir"
    action = "create directory"

    def __init__(self, path: PathLike) -> None:
        super().__init__(Path(path))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class CreateDirs(Coroutine):
    """Create several directories."""

    kind = IoKind.CREATE_DIRS
    label = "create dirs"
    action = "create directories"

    def __init__(self, paths: Iterable[PathLike]) -> None:
        super().__init__(_paths(paths))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class CreateFile(Coroutine):
    """Create a file with the given contents."""

    kind = IoKind.CREATE_FILE
    label = "create file"
    action = "create file"

    def __init__(self, path: PathLike, contents: Iterable[int]) -> None:
        super().__init__((Path(path), bytes(contents)))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class CreateFiles(Coroutine):
    """Create several files with their contents."""

    kind = IoKind.CREATE_FILES
    label = "create files"
    action = "create files"

    def __init__(
        self,
        contents: Mapping[PathLike, Iterable[int]] | Iterable[tuple[PathLike, Iterable[int]]],
    ) -> None:
        pairs = contents.items() if isinstance(contents, Mapping) else contents
        super().__init__({Path(path): bytes(data) for path, data in pairs})

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class ReadDir(Coroutine):
    """Read the entries of a directory."""

    kind = IoKind.READ_DIR
    label = "read dir"
    action = "read directory"

    def __init__(self, path: PathLike) -> None:
        super().__init__(Path(path))

    def resume(self, arg: Io | None = None) -> Io | set[Path]:
        """Return the request, an error, or the set of entry paths."""
        return self._step(arg)


class ReadFile(Coroutine):
    """Read the contents of a file."""

    kind = IoKind.READ_FILE
    label = "read file"
    action = "read file"

    def __init__(self, path: PathLike) -> None:
        super().__init__(Path(path))

    def resume(self, arg: Io | None = None) -> Io | bytes:
        """Return the request, an error, or the file contents."""
        return self._step(arg)


class ReadFiles(Coroutine):
    """Read the contents of several files."""

    kind = IoKind.READ_FILES
    label = "read files"
    action = "read files"

    def __init__(self, paths: Iterable[PathLike]) -> None:
        super().__init__(_paths(paths))

    def resume(self, arg: Io | None = None) -> Io | dict[Path, bytes]:
        """Return the request, an error, or contents keyed by path."""
        return self._step(arg)


class RemoveDir(Coroutine):
    """Remove a directory and everything in it."""

    kind = IoKind.REMOVE_DIR
    label = "remove dir"
    action = "remove directory"

    def __init__(self, path: PathLike) -> None:
        super().__init__(Path(path))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class RemoveDirs(Coroutine):
    """Remove several directories and everything in them."""

    kind = IoKind.REMOVE_DIRS
    label = "remove dirs"
    action = "remove directories"

    def __init__(self, paths: Iterable[PathLike]) -> None:
        super().__init__(_paths(paths))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class RemoveFile(Coroutine):
    """Remove a file."""

    kind = IoKind.REMOVE_FILE
    label = "remove file"
    action = "remove file"

    def __init__(self, path: PathLike) -> None:
        super().__init__(Path(path))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class RemoveFiles(Coroutine):
    """Remove several files."""

    kind = IoKind.REMOVE_FILES
    label = "remove files"
    action = "remove files"

    def __init__(self, paths: Iterable[PathLike]) -> None:
        super().__init__(_paths(paths))

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)


class Rename(Coroutine):
    """Rename files or directories, in the given order."""

    kind = IoKind.RENAME
    label = "rename"
    action = "rename files or directories"

    def __init__(self, pairs: Iterable[tuple[PathLike, PathLike]]) -> None:
        super().__init__([(Path(source), Path(target)) for source, target in pairs])

    def resume(self, arg: Io | None = None) -> Io | None:
        """Return the request, an error, or ``None`` once done."""
        return self._step(arg)