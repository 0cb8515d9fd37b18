"""File-system operations of the virtual file system layer.

Covers path status queries, removal, renaming, directory creation and
directory listing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntFlag
from pathlib import Path
from typing import Iterator

_DIRECTORY_MODE = 0o750


class StatFlag(IntFlag):
    """Bits describing what a path is."""

    NONE = 0
    IS_VALID = 1
    IS_DIRECTORY = 2
    IS_CHARACTER_SPECIAL = 4


@dataclass(frozen=True)
class PathStat:
    """Result of :func:`stat_path`: the status flags and the size in bytes."""

    flags: StatFlag
    size: int = 0

    @property
    def valid(self) -> bool:
        return bool(self.flags & StatFlag.IS_VALID)

    @property
    def is_directory(self) -> bool:
        return bool(self.flags & StatFlag.IS_DIRECTORY)

    @property
    def is_character_special(self) -> bool:
        return bool(self.flags & StatFlag.IS_CHARACTER_SPECIAL)


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    is_dir: bool


def _require_path(path: str | Path | None, what: str = "path") -> str:
    text = "" if path is None else os.fspath(path)
    if not text:
        raise ValueError(f"{what} must not be empty")
    return text


class VfsDirectory:
    """An open directory whose entries are read by iterating over it.

    ``include_hidden`` is kept for callers; hidden entries are always listed.
    """

    def __init__(self, path: str | Path, include_hidden: bool = False):
        self._path = _require_path(path)
        self.include_hidden = include_hidden
        self._scanner = os.scandir(self._path)
        self._closed = False

    @property
    def path(self) -> str:
        """The path the directory was opened with."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[DirEntry]:
        if self._closed:
            raise ValueError("directory is closed")
        for entry in self._scanner:
            try:
                is_dir = entry.is_dir(follow_symlinks=True)
            except OSError:
                is_dir = False
            yield DirEntry(entry.name, is_dir)

    def close(self) -> None:
        """Release the directory handle; safe to call twice."""
        if self._closed:
            return
        self._closed = True
        self._scanner.close()

    def __enter__(self) -> VfsDirectory:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"VfsDirectory({self._path!r}, {state})"


def stat_path(path: str | Path | None) -> PathStat:
    """Describe ``path``; an empty or inaccessible path gives no flags at all."""
    text = "" if path is None else os.fspath(path)
    if not text:
        return PathStat(StatFlag.NONE, 0)
    try:
        info = os.stat(text)
    except (OSError, ValueError):
        return PathStat(StatFlag.NONE, 0)
    flags = StatFlag.IS_VALID
    if os.path.stat.S_ISDIR(info.st_mode):
        flags |= StatFlag.IS_DIRECTORY
    if os.path.stat.S_ISCHR(info.st_mode):
        flags |= StatFlag.IS_CHARACTER_SPECIAL
    return PathStat(flags, info.st_size)


def remove_path(path: str | Path) -> None:
    """Remove a file or an empty directory."""
    text = _require_path(path)
    if stat_path(text).is_directory:
        os.rmdir(text)
    else:
        os.remove(text)


def rename_path(old_path: str | Path, new_path: str | Path) -> None:
    """Rename ``old_path`` to ``new_path``."""
    source = _require_path(old_path, "old path")
    target = _require_path(new_path, "new path")
    os.rename(source, target)


def make_directory(path: str | Path) -> None:
    """Create one directory; raises FileExistsError if it is already there."""
    text = _require_path(path)
    os.mkdir(text, _DIRECTORY_MODE)