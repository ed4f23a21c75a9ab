import pytest

from iofree_fs.io_request import Io, IoKind


def test_error_prefixes_message():
    io = Io.error("boom")
    assert io.kind is IoKind.ERROR
    assert io.payload == "fs error: boom"


def test_error_formats_any_object():
    io = Io.error(42)
    assert io.payload == "fs error: 42"


def test_error_is_not_request():
    assert Io.error("x").is_request() is False


def test_request_is_request():
    io = Io.request(IoKind.READ_FILE, "a.txt")
    assert io.is_request() is True
    assert io.payload == "a.txt"
    assert io.output is False


def test_response_is_not_request():
    io = Io.response(IoKind.READ_FILE, b"data")
    assert io.is_request() is False
    assert io.output is True
    assert io.payload == b"data"


def test_response_default_payload_is_none():
    assert Io.response(IoKind.CREATE_DIR).payload is None


@pytest.mark.parametrize("factory", [Io.request, Io.response])
def test_error_kind_rejected(factory):
    with pytest.raises(ValueError):
        factory(IoKind.ERROR, "message")


def test_request_and_response_differ():
    assert Io.request(IoKind.RENAME, []) != Io.response(IoKind.RENAME, [])


def test_every_non_error_kind_builds_request():
    kinds = [kind for kind in IoKind if kind is not IoKind.ERROR]
    assert len(kinds) == 12
    assert all(Io.request(kind, None).is_request() for kind in kinds)