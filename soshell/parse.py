"""Splitting a command line into arguments."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t\n\v\f\r]+")


def parse_line(line: str) -> list[str]:
    """Split *line* on runs of ASCII whitespace, dropping empty pieces."""
    return [token for token in _SEPARATORS.split(line) if token]