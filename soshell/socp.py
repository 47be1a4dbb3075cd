"""Copying file contents."""

from __future__ import annotations

import os
from typing import BinaryIO

CHUNK_SIZE = 1024


def io_copy(source: BinaryIO, destination: BinaryIO) -> int:
    """Copy everything from *source* to *destination*; return the byte count."""
    total = 0
    while chunk := source.read(CHUNK_SIZE):
        destination.write(chunk)
        total += len(chunk)
    return total


def socp(source: str, destination: str) -> int:
    """Copy the file *source* to *destination*, creating it with mode 0644."""
    with open(source, "rb") as src:
        fd = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with open(fd, "wb") as dst:
            return io_copy(src, dst)