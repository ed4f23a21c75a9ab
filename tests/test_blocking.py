from pathlib import Path

import pytest

from iofree_fs import blocking
from iofree_fs.coroutines import (
    CreateDir,
    CreateDirs,
    CreateFile,
    CreateFiles,
    ReadDir,
    ReadFile,
    ReadFiles,
    RemoveDir,
    RemoveDirs,
    RemoveFile,
    RemoveFiles,
    Rename,
)
from iofree_fs.io_request import Io, IoKind


def test_create_dir(tmp_path):
    target = tmp_path / "a"
    assert blocking.run(CreateDir(target)) is None
    assert target.is_dir()


def test_create_dir_existing_raises(tmp_path):
    with pytest.raises(FileExistsError):
        blocking.run(CreateDir(tmp_path))


def test_create_dir_not_recursive(tmp_path):
    with pytest.raises(FileNotFoundError):
        blocking.run(CreateDir(tmp_path / "x" / "y"))


def test_create_dirs(tmp_path):
    targets = [tmp_path / "a", tmp_path / "b"]
    blocking.run(CreateDirs(targets))
    assert all(path.is_dir() for path in targets)


def test_create_and_read_file(tmp_path):
    target = tmp_path / "f.txt"
    blocking.run(CreateFile(target, b"Hello, world!"))
    assert blocking.run(ReadFile(target)) == b"Hello, world!"


def test_create_and_read_files(tmp_path):
    contents = {tmp_path / "a": b"one", tmp_path / "b": b"two"}
    blocking.run(CreateFiles(contents))
    assert blocking.run(ReadFiles(contents)) == contents


def test_read_dir(tmp_path):
    (tmp_path / "a").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    assert blocking.run(ReadDir(tmp_path)) == {tmp_path / "a", tmp_path / "sub"}


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        blocking.run(ReadFile(tmp_path / "nope"))


def test_remove_dir_recursive(tmp_path):
    target = tmp_path / "d"
    (target / "inner").mkdir(parents=True)
    (target / "inner" / "f").write_bytes(b"x")
    blocking.run(RemoveDir(target))
    assert not target.exists()


def test_remove_dirs(tmp_path):
    targets = [tmp_path / "a", tmp_path / "b"]
    for path in targets:
        path.mkdir()
    assert blocking.run(RemoveDirs(targets)) is None
    assert blocking.run(ReadDir(tmp_path)) == set()
    assert list(tmp_path.iterdir()) == []


def test_remove_file_and_files(tmp_path):
    files = [tmp_path / name for name in ("a", "b", "c")]
    for path in files:
        path.write_bytes(b"")
    blocking.run(RemoveFile(files[0]))
    assert not files[0].exists()
    blocking.run(RemoveFiles(files[1:]))
    assert list(tmp_path.iterdir()) == []


def test_remove_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        blocking.run(RemoveFile(tmp_path / "nope"))


def test_rename_in_order(tmp_path):
    (tmp_path / "a").write_bytes(b"data")
    blocking.run(Rename([(tmp_path / "a", tmp_path / "b"), (tmp_path / "b", tmp_path / "c")]))
    assert {p.name for p in tmp_path.iterdir()} == {"c"}
    assert (tmp_path / "c").read_bytes() == b"data"


def test_handle_error_raises_oserror():
    with pytest.raises(OSError, match="fs error: boom"):
        blocking.handle(Io.error("boom"))


def test_handle_response_raises_value_error():
    with pytest.raises(ValueError, match="missing directory path"):
        blocking.handle(Io.response(IoKind.CREATE_DIR))


def test_handle_returns_response(tmp_path):
    (tmp_path / "f").write_bytes(b"abc")
    response = blocking.handle(Io.request(IoKind.READ_FILE, tmp_path / "f"))
    assert response == Io.response(IoKind.READ_FILE, b"abc")


def test_consumed_coroutine_raises(tmp_path):
    coroutine = CreateDir(tmp_path / "a")
    blocking.run(coroutine)
    with pytest.raises(OSError, match="create dir input already consumed"):
        blocking.run(coroutine)


def test_direct_functions(tmp_path):
    blocking.create_file(tmp_path / "x", b"1")
    assert blocking.read_dir(tmp_path).payload == {Path(tmp_path / "x")}
    blocking.remove_files([tmp_path / "x"])
    assert blocking.read_dir(tmp_path).payload == set()