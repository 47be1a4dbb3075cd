"""File comparisons, permission changes and directory listings."""

from __future__ import annotations

import os
import stat
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class EntryInfo:
    """One directory entry; ``error`` is set when it could not be examined."""

    name: str
    inode: int = 0
    size: int = 0
    modified: float = 0.0
    error: OSError | None = None


def larger_file(path1: str, path2: str) -> tuple[str | None, int]:
    """Return the larger of two files and its size; the path is None when equal."""
    size1 = os.stat(path1).st_size
    size2 = os.stat(path2).st_size
    if size1 > size2:
        return path1, size1
    if size2 > size1:
        return path2, size2
    return None, size1


def describe_larger(path1: str, path2: str) -> str:
    """Return the text the maior command prints."""
    path, size = larger_file(path1, path2)
    kb = size / 1024.0
    if path is None:
        return f"Os ficheiros têm o mesmo tamanho: {kb:.2f} KB"
    return f"Ficheiro maior: {path}\nTamanho: {kb:.2f} KB"


def set_executable(path: str) -> int:
    """Grant the owner execute permission; return the new mode."""
    mode = stat.S_IMODE(os.stat(path).st_mode) | stat.S_IXUSR
    os.chmod(path, mode)
    return mode


def remove_read(path: str) -> int:
    """Remove read permission for group and others; return the new mode."""
    mode = stat.S_IMODE(os.stat(path).st_mode) & ~(stat.S_IRGRP | stat.S_IROTH)
    os.chmod(path, mode)
    return mode


def list_directory(path: str | None = None) -> list[EntryInfo]:
    """Describe every entry of *path* (the current directory by default)."""
    folder = "." if path is None else path
    entries = []
    with os.scandir(folder) as iterator:
        for entry in iterator:
            try:
                info = os.stat(os.path.join(folder, entry.name))
            except OSError as exc:
                entries.append(EntryInfo(entry.name, error=exc))
                continue
            entries.append(
                EntryInfo(entry.name, info.st_ino, info.st_size, info.st_mtime)
            )
    return entries


def format_entry(entry: EntryInfo) -> str:
    """Return the listing line for *entry*."""
    if entry.error is not None:
        return f"Erro ao obter info do ficheiro: {entry.error.strerror}"
    return (
        f"Nome: {entry.name:<20} | Inode: {entry.inode:<10} | "
        f"Tamanho: {entry.size:<8} bytes | Modificado: {time.ctime(entry.modified)}"
    )