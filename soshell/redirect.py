"""Input and output redirection of the standard descriptors."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

FILE_MODE = 0o600


@dataclass(frozen=True)
class Redirection:
    """Send descriptor *fd* to or from the file at *path*."""

    fd: int
    path: str
    append: bool = False

    @property
    def flags(self) -> int:
        if self.fd == 0:
            return os.O_RDONLY
        return os.O_WRONLY | os.O_CREAT | (os.O_APPEND if self.append else os.O_TRUNC)


def split_redirects(args: Sequence[str]) -> tuple[list[str], list[Redirection]]:
    """Strip trailing redirections from *args*.

    ``2>`` is looked for first, then ``>>`` or ``>``, then ``<``, each only at
    the end of what remains and only while at least three words are left.
    """
    remaining = list(args)
    found: list[Redirection] = []

    def take(operator: str, fd: int, append: bool = False) -> bool:
        if len(remaining) >= 3 and remaining[-2] == operator:
            found.append(Redirection(fd, remaining[-1], append))
            del remaining[-2:]
            return True
        return False

    take("2>", 2)
    if not take(">>", 1, append=True):
        take(">", 1)
    take("<", 0)
    return remaining, found


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


@contextmanager
def redirected(redirections: Sequence[Redirection]) -> Iterator[None]:
    """Apply *redirections* to the process descriptors for the block's duration."""
    saved: list[tuple[int, int]] = []
    _flush_standard_streams()
    try:
        for redirection in redirections:
            new_fd = os.open(redirection.path, redirection.flags, FILE_MODE)
            try:
                saved.append((redirection.fd, os.dup(redirection.fd)))
                os.dup2(new_fd, redirection.fd)
            finally:
                os.close(new_fd)
        yield
    finally:
        _flush_standard_streams()
        for target, copy in reversed(saved):
            os.dup2(copy, target)
            os.close(copy)