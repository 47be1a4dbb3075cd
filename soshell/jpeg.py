"""Recognising JPEG files by their leading bytes."""

from __future__ import annotations

import os
from typing import BinaryIO

_SIGNATURE = b"\xff\xd8\xff"
_KNOWN_TYPES = frozenset({0xE0, 0xE1, 0xE2, 0xE8})


def is_jpeg(stream: BinaryIO) -> bool:
    """Tell whether *stream* starts with a known JPEG signature.

    When four bytes could be read the stream is rewound to its start.
    """
    head = stream.read(4)
    if len(head) < 4:
        return False
    stream.seek(0)
    return head[:3] == _SIGNATURE and head[3] in _KNOWN_TYPES


def is_jpeg_file(path: str | os.PathLike[str]) -> bool:
    """Tell whether the file at *path* is a JPEG."""
    with open(path, "rb") as stream:
        return is_jpeg(stream)