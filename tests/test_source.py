import pytest

from tinyinterp.source import read_file


def test_round_trip(tmp_path):
    path = tmp_path / "prog.txt"
    text = "x = 5\nprint x\n"
    path.write_bytes(text.encode("utf-8"))
    assert read_file(path) == text


def test_accepts_str_path(tmp_path):
    path = tmp_path / "prog.txt"
    path.write_bytes(b"y = 1")
    assert read_file(str(path)) == "y = 1"


def test_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a = 1\r\nprint a\r\n")
    assert read_file(path) == "a = 1\r\nprint a\r\n"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_file(path) == ""


def test_invalid_bytes_replaced(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"a\xffb")
    result = read_file(path)
    assert result[0] == "a"
    assert result[-1] == "b"
    assert len(result) == 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")