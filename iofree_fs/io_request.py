"""I/O requests exchanged between filesystem coroutines and runtimes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

__all__ = ["IoKind", "Io"]


class IoKind(enum.Enum):
    """Every kind of filesystem I/O a coroutine may ask a runtime for."""

    ERROR = "error"
    CREATE_DIR = "create_dir"
    CREATE_DIRS = "create_dirs"
    CREATE_FILE = "create_file"
    CREATE_FILES = "create_files"
    READ_DIR = "read_dir"
    READ_FILE = "read_file"
    READ_FILES = "read_files"
    REMOVE_DIR = "remove_dir"
    REMOVE_DIRS = "remove_dirs"
    REMOVE_FILE = "remove_file"
    REMOVE_FILES = "remove_files"
    RENAME = "rename"


@dataclass
class Io:
    """A filesystem I/O message.

    A request (``output`` false) carries the input a runtime needs to
    perform the operation; a response (``output`` true) carries what the
    operation produced. An ``ERROR`` message carries a description of
    what went wrong.
    """

    kind: IoKind
    payload: Any = None
    output: bool = False

    @classmethod
    def error(cls, message: object) -> Io:
        """Build an error message with the standard prefix."""
        return cls(IoKind.ERROR, f"fs error: {message}")

    @classmethod
    def request(cls, kind: IoKind, payload: Any) -> Io:
        """Build a request asking a runtime to perform ``kind``."""
        if kind is IoKind.ERROR:
            raise ValueError("use Io.error to build error messages")
        return cls(kind, payload, output=False)

    @classmethod
    def response(cls, kind: IoKind, payload: Any = None) -> Io:
        """Build the response a runtime hands back after performing ``kind``."""
        if kind is IoKind.ERROR:
            raise ValueError("use Io.error to build error messages")
        return cls(kind, payload, output=True)

    def is_request(self) -> bool:
        """Whether this message still needs a runtime to perform I/O."""
        return self.kind is not IoKind.ERROR and not self.output