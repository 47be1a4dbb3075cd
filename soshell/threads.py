"""Delayed warnings and background copies with a bounded log."""

from __future__ import annotations

import os
import sys
import threading
import time
from collections import deque
from collections.abc import Callable
from typing import TextIO

from soshell.socp import socp

MAX_LOG_ENTRIES = 100
LOG_ENTRY_SIZE = 130


class CopyLog:
    """Thread-safe record of the most recent copy results."""

    def __init__(
        self,
        capacity: int = MAX_LOG_ENTRIES,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._entries: deque[str] = deque(maxlen=capacity)
        self._clock = clock
        self._lock = threading.Lock()

    def record(self, filename: str, success: bool) -> str:
        """Add an entry for *filename* and return it."""
        status = "SUCCESS" if success else "FAILED"
        entry = f"{time.ctime(self._clock())} {filename} - {status}"
        encoded = entry.encode("utf-8")
        if len(encoded) > LOG_ENTRY_SIZE - 1:
            entry = encoded[: LOG_ENTRY_SIZE - 1].decode("utf-8", "ignore")
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> list[str]:
        """Return the kept entries, oldest first."""
        with self._lock:
            return list(self._entries)


def warn(message: str, seconds: int, stream: TextIO | None = None) -> None:
    """Wait *seconds* seconds, then write the warning to *stream* (stderr)."""
    while seconds > 0:
        time.sleep(1)
        seconds -= 1
    out = sys.stderr if stream is None else stream
    out.write(f"Aviso : {message}\n")
    out.flush()


def start_warning(
    message: str, seconds: int, stream: TextIO | None = None
) -> threading.Thread:
    """Run :func:`warn` in a background thread and return the thread."""
    thread = threading.Thread(target=warn, args=(message, seconds, stream), daemon=True)
    thread.start()
    return thread


def copy_and_log(source: str, destination: str, log: CopyLog) -> bool:
    """Copy *source* to *destination*, record the outcome in *log*, return it."""
    success = False
    if source and destination and os.path.exists(source):
        try:
            socp(source, destination)
        except OSError as exc:
            print(f"Erro ao copiar: {exc}", file=sys.stderr)
        success = os.path.exists(destination)
    log.record(source, success)
    return success


def copy_in_background(source: str, destination: str, log: CopyLog) -> threading.Thread:
    """Run :func:`copy_and_log` in a background thread and return the thread."""
    thread = threading.Thread(
        target=copy_and_log, args=(source, destination, log), daemon=True
    )
    thread.start()
    return thread