import asyncio

import pytest

from storage.files import read_message_from_file, write_message_to_file
from utils.exceptions import FileReadError, FileWriteError


def test_write_then_read(tmp_path):
    path = tmp_path / "nested" / "dir" / "message.txt"
    asyncio.run(write_message_to_file(path, "Héllo\n"))
    assert path.read_text(encoding="utf-8") == "Héllo\n"
    assert asyncio.run(read_message_from_file(str(path))) == "Héllo\n"


def test_read_missing_file(tmp_path):
    path = tmp_path / "missing.txt"
    with pytest.raises(FileReadError, match="missing.txt") as excinfo:
        asyncio.run(read_message_from_file(path))
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_read_invalid_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FileReadError):
        asyncio.run(read_message_from_file(path))


def test_write_into_directory_path_fails(tmp_path):
    with pytest.raises(FileWriteError):
        asyncio.run(write_message_to_file(tmp_path, "text"))


def test_read_keeps_crlf(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"A\r\nB\r")
    assert asyncio.run(read_message_from_file(path)) == "A\r\nB\r"


def test_write_keeps_line_endings(tmp_path):
    path = tmp_path / "out.txt"
    asyncio.run(write_message_to_file(path, "A\r\nB\nC"))
    assert path.read_bytes() == b"A\r\nB\nC"
