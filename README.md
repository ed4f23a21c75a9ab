# iofree-fs

Filesystem operations written as small, I/O-free state machines, plus the
runtimes that actually touch the disk.

A coroutine never reads or writes anything itself. When it needs the
filesystem, it hands back an `Io` request describing what must be done; a
runtime carries out that request and gives the coroutine an `Io` response so
it can finish. The logic of an operation stays separate from how the I/O is
performed, so the same coroutine can be driven by the blocking runtime, by
the asyncio runtime, or by hand in tests.

## Installation

```
pip install iofree-fs
```

Python 3.10 or newer is required. The package has no dependencies outside the
standard library.

## Coroutines

All coroutines live in `iofree_fs.coroutines` and derive from `Coroutine`,
whose single step is `resume(arg=None)`:

| Coroutine     | Built from                               | Result                     |
|---------------|------------------------------------------|----------------------------|
| `CreateDir`   | a path                                   | `None`                     |
| `CreateDirs`  | an iterable of paths                     | `None`                     |
| `CreateFile`  | a path and its contents                  | `None`                     |
| `CreateFiles` | a mapping, or pairs, of path to contents | `None`                     |
| `ReadDir`     | a path                                   | `set` of entry `Path`s     |
| `ReadFile`    | a path                                   | `bytes`                    |
| `ReadFiles`   | an iterable of paths                     | `dict` of `Path` to `bytes`|
| `RemoveDir`   | a path                                   | `None`                     |
| `RemoveDirs`  | an iterable of paths                     | `None`                     |
| `RemoveFile`  | a path                                   | `None`                     |
| `RemoveFiles` | an iterable of paths                     | `None`                     |
| `Rename`      | an iterable of `(source, target)` pairs  | `None`                     |

Paths are turned into `pathlib.Path` objects and contents into `bytes` when
the coroutine is built.

- `resume()` with no argument returns the coroutine's request. The input is
  consumed by this call; calling `resume()` with no argument again returns an
  error message (`fs error: read dir input already consumed`, and so on).
- `resume(response)` with the matching response returns the result.
- A response of another kind, an error, or a request passed back in is not
  raised: `resume` returns an error message
  (`fs error: expected read dir output, got ...`).

```python
from iofree_fs.coroutines import ReadFile
from iofree_fs.io_request import Io, IoKind

coroutine = ReadFile("notes.txt")
request = coroutine.resume()          # Io(kind=IoKind.READ_FILE, payload=Path("notes.txt"))
contents = coroutine.resume(Io.response(IoKind.READ_FILE, b"hello"))  # b"hello"
```

## Requests and responses

`iofree_fs.io_request` defines:

- `IoKind`, an enum of the operations above plus `ERROR`.
- `Io`, a dataclass with `kind`, `payload` and `output`.
  - `Io.request(kind, payload)` builds a request (`output` false).
  - `Io.response(kind, payload=None)` builds a response (`output` true).
  - Both raise `ValueError` when given `IoKind.ERROR`.
  - `Io.error(message)` builds an `ERROR` message whose payload is
    `"fs error: <message>"`.
  - `is_request()` is true for a non-error message that is not a response.

## Runtimes

Two runtimes process requests:

- `iofree_fs.blocking` uses the standard, blocking filesystem calls.
- `iofree_fs.aio` runs the same calls in worker threads with
  `asyncio.to_thread`; its functions are coroutines to be awaited.

Each provides:

- `handle(io)`: performs the request and returns the response. An `ERROR`
  message raises `OSError` carrying its text; a message that is already a
  response raises `ValueError`.
- `run(coroutine)`: drives a coroutine to completion and returns its result.
  Filesystem failures, and error messages from the coroutine, surface as
  `OSError`.
- One function per operation, which `handle` dispatches to:
  `create_dir(path)`, `create_dirs(paths)`, `create_file(path, contents)`,
  `create_files(contents)`, `read_dir(path)`, `read_file(path)`,
  `read_files(paths)`, `remove_dir(path)`, `remove_dirs(paths)`,
  `remove_file(path)`, `remove_files(paths)`, `rename(pairs)`.
  Each returns the matching response `Io`.

What the operations do:

- Creating a directory requires its parent to exist.
- Creating a file replaces any existing file at that path.
- Reading a directory lists the full paths of its entries; entries that
  cannot be read are skipped.
- Removing a directory removes everything below it.
- Renaming goes through the pairs in order and replaces existing targets.

Blocking:

```python
from iofree_fs import blocking
from iofree_fs.coroutines import ReadDir

for path in sorted(blocking.run(ReadDir("."))):
    print(path)
```

Asynchronous:

```python
import asyncio

from iofree_fs import aio
from iofree_fs.coroutines import ReadFile

contents = asyncio.run(aio.run(ReadFile("notes.txt")))
```

## Command line

The package installs an `iofree-fs` command with two subcommands:

```
iofree-fs read-dir [PATH]
iofree-fs create-files [COUNT]
```

- `read-dir` lists the entries of a directory, sorted, using the blocking
  runtime.
- `create-files` writes `COUNT` files containing `Hello, world!` into a
  temporary directory with the asyncio runtime, prints how long it took, and
  removes the directory again. `COUNT` must be a non-negative integer.

When the argument is left out, the command prompts for it on standard input.
`-v` / `--verbose` turns on debug logging. A filesystem error is printed to
standard error and the command exits with status 1. See all options with:

```
iofree-fs --help
```

## Limits

Only the twelve operations above are available: there is no copying, no
metadata or permission handling, no partial reads or appends, and the
operations on several paths stop at the first failure without undoing what
was already done.

## Running the tests

```
pip install "iofree-fs[test]"
pytest
```