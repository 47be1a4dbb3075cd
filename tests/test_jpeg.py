import io

import pytest

from soshell.jpeg import is_jpeg, is_jpeg_file


@pytest.mark.parametrize("marker", [0xE0, 0xE1, 0xE2, 0xE8])
def test_known_markers(marker):
    stream = io.BytesIO(b"\xff\xd8\xff" + bytes([marker]) + b"payload")
    assert is_jpeg(stream) is True
    assert stream.tell() == 0


@pytest.mark.parametrize("marker", [0xE3, 0xDB, 0x00])
def test_unknown_markers(marker):
    assert is_jpeg(io.BytesIO(b"\xff\xd8\xff" + bytes([marker]))) is False


def test_wrong_signature():
    assert is_jpeg(io.BytesIO(b"\x89PNG\r\n")) is False


def test_short_stream():
    assert is_jpeg(io.BytesIO(b"\xff\xd8\xff")) is False


def test_file(tmp_path):
    good = tmp_path / "a.jpg"
    good.write_bytes(b"\xff\xd8\xff\xe1rest")
    bad = tmp_path / "b.txt"
    bad.write_bytes(b"hello world")
    assert is_jpeg_file(good) is True
    assert is_jpeg_file(bad) is False


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        is_jpeg_file(tmp_path / "missing.jpg")