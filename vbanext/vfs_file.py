"""Files opened through the virtual file system layer.

A :class:`VfsFile` is opened with one of the access modes the frontend
interface defines. Files opened read-only with the frequent-access hint
are memory-mapped; every other file goes through a buffered stream. The
file keeps track of its own size as it is written and truncated.
"""

from __future__ import annotations

import io
import mmap
from enum import IntEnum, IntFlag
from pathlib import Path
from typing import BinaryIO


class FileAccess(IntFlag):
    """Access modes for opening a file."""

    READ = 1
    WRITE = 2
    READ_WRITE = READ | WRITE
    UPDATE_EXISTING = 4


class AccessHint(IntFlag):
    """Hints on how a file will be used."""

    NONE = 0
    FREQUENT_ACCESS = 1


class Whence(IntEnum):
    """Reference points for :meth:`VfsFile.seek`."""

    SET = 0
    CUR = 1
    END = 2


_MODE_STRINGS = {
    FileAccess.READ: "rb",
    FileAccess.WRITE: "wb",
    FileAccess.READ_WRITE: "w+b",
    FileAccess.WRITE | FileAccess.UPDATE_EXISTING: "r+b",
    FileAccess.READ_WRITE | FileAccess.UPDATE_EXISTING: "r+b",
}


class VfsFile:
    """An open file with a tracked size, buffered or memory-mapped."""

    def __init__(
        self,
        path: str | Path,
        mode: FileAccess | int,
        hints: AccessHint | int = AccessHint.NONE,
    ):
        self._path = str(path)
        self._fp: BinaryIO | None = None
        self._map: mmap.mmap | None = None
        self._mappos = 0
        self._error = False
        self._closed = False

        try:
            access = FileAccess(int(mode))
        except ValueError:
            access = None
        mode_str = _MODE_STRINGS.get(access) if access is not None else None
        if mode_str is None:
            self._closed = True
            raise ValueError(f"unsupported access mode: {mode!r}")

        requested = AccessHint(int(hints) & AccessHint.FREQUENT_ACCESS)
        wants_map = bool(requested & AccessHint.FREQUENT_ACCESS) and access == FileAccess.READ

        if wants_map:
            raw = open(self._path, "rb", buffering=0)
            self._fp = raw
            try:
                self._map = mmap.mmap(raw.fileno(), 0, access=mmap.ACCESS_READ)
            except (ValueError, OSError):
                self._map = None
        else:
            self._fp = open(self._path, mode_str)

        self._hints = AccessHint.FREQUENT_ACCESS if self._map is not None else AccessHint.NONE

        if self._map is not None:
            self._size = len(self._map)
        else:
            self._fp.seek(0, Whence.END)
            self._size = self._fp.tell()
            self._fp.seek(0, Whence.SET)

    @property
    def path(self) -> str:
        """The path the file was opened with."""
        return self._path

    @property
    def size(self) -> int:
        """Current size of the file in bytes."""
        return self._size

    @property
    def hints(self) -> AccessHint:
        """The access hints in effect after opening."""
        return self._hints

    @property
    def mapped(self) -> bool:
        """True if the file is read through a memory map."""
        return self._map is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed file")

    def _guarded(self, operation, *args):
        try:
            return operation(*args)
        except OSError:
            self._error = True
            raise

    def close(self) -> None:
        """Release the map and the underlying stream; safe to call twice."""
        if self._closed:
            return
        self._closed = True
        try:
            if self._map is not None:
                self._map.close()
        finally:
            self._map = None
            if self._fp is not None:
                self._fp.close()
                self._fp = None

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes from the current position."""
        self._check_open()
        if length < 0:
            raise ValueError("length must not be negative")
        if self._map is not None:
            if self._mappos > self._size:
                raise ValueError("position is beyond the end of the mapping")
            end = min(self._mappos + length, self._size)
            data = self._map[self._mappos:end]
            self._mappos = end
            return data
        return self._guarded(self._fp.read, length)

    def write(self, data: bytes) -> int:
        """Write ``data`` at the current position; returns the bytes written."""
        self._check_open()
        if self._map is not None:
            raise io.UnsupportedOperation("memory-mapped files are read-only")
        position = self._guarded(self._fp.tell)
        written = self._guarded(self._fp.write, data)
        if written is None:
            written = 0
        if position + written > self._size:
            self._size = position + written
        return written

    def seek(self, offset: int, whence: Whence | int = Whence.SET) -> int:
        """Move the position and return the new one."""
        self._check_open()
        whence = Whence(int(whence))
        if self._map is not None:
            if whence is Whence.SET:
                if offset < 0:
                    raise ValueError("negative seek position")
                self._mappos = offset
            elif whence is Whence.CUR:
                target = self._mappos + offset
                if target < 0:
                    raise ValueError("negative seek position")
                self._mappos = target
            else:
                if offset < 0:
                    raise ValueError("cannot seek backwards from the end of a mapping")
                self._mappos = self._size + offset
            return self._mappos
        return self._guarded(self._fp.seek, offset, int(whence))

    def tell(self) -> int:
        """Current position in the file."""
        self._check_open()
        if self._map is not None:
            return self._mappos
        return self._guarded(self._fp.tell)

    def truncate(self, length: int) -> int:
        """Cut or extend the file to ``length`` bytes; returns the new size."""
        self._check_open()
        if self._map is not None:
            raise io.UnsupportedOperation("memory-mapped files cannot be truncated")
        self._guarded(self._fp.truncate, length)
        self._size = length
        return length

    def flush(self) -> None:
        """Push buffered writes to the operating system."""
        self._check_open()
        if self._map is None:
            self._guarded(self._fp.flush)

    def error(self) -> bool:
        """True if an I/O operation on this file has failed."""
        return self._error

    def __enter__(self) -> VfsFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("mapped" if self.mapped else "open")
        return f"VfsFile({self._path!r}, {state}, size={self._size})"