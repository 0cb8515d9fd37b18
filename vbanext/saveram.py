"""The battery-backed save buffer and how its save type is recognised.

The save buffer is sized for the largest flash chip plus the largest
EEPROM. Once loaded, its contents tell which kind of chip the save came
from: the smallest leading region holding data with everything after it
still erased (0xFF).
"""

from __future__ import annotations

import logging
from enum import IntEnum

_log = logging.getLogger(__name__)

SAVE_BUFFER_SIZE = 0x20000 + 0x2000
SYSTEM_RAM_SIZE = 0x40000
VIDEO_RAM_SIZE = 0x20000
_ERASED = 0xFF


class SaveKind(IntEnum):
    """Recognised save chips, valued by their size in bytes."""

    EEPROM_8KBIT = 512
    EEPROM_64KBIT = 0x2000
    FLASH_512KBIT = 0x10000
    FLASH_1MBIT = 0x20000

    @property
    def is_eeprom(self) -> bool:
        return self in (SaveKind.EEPROM_8KBIT, SaveKind.EEPROM_64KBIT)

    @property
    def is_flash(self) -> bool:
        return self in (SaveKind.FLASH_512KBIT, SaveKind.FLASH_1MBIT)


class MemoryId(IntEnum):
    """Memory regions a frontend can ask about."""

    SAVE_RAM = 0
    RTC = 1
    SYSTEM_RAM = 2
    VIDEO_RAM = 3


_DESCRIPTIONS = {
    SaveKind.EEPROM_8KBIT: "Detecting EEprom 8kbit",
    SaveKind.EEPROM_64KBIT: "Detecting EEprom 64kbit",
    SaveKind.FLASH_512KBIT: "Detecting Flash 512kbit",
    SaveKind.FLASH_1MBIT: "Detecting Flash 1Mbit",
}


def scan_area(data: bytes) -> bool:
    """True if any byte of ``data`` is not erased (0xFF)."""
    return any(byte != _ERASED for byte in data)


def detect_save_size(data: bytes) -> int | None:
    """Size of the save held in ``data``, or None if no chip size fits."""
    for kind in SaveKind:
        size = int(kind)
        if scan_area(data[:size]) and not scan_area(data[size:]):
            return size
    return None


def memory_size(memory_id: MemoryId | int, save_size: int) -> int:
    """Size in bytes of a memory region; 0 for regions that are not exposed."""
    if memory_id == MemoryId.SAVE_RAM:
        return save_size
    if memory_id == MemoryId.SYSTEM_RAM:
        return SYSTEM_RAM_SIZE
    if memory_id == MemoryId.VIDEO_RAM:
        return VIDEO_RAM_SIZE
    return 0


class SaveBuffer:
    """The save buffer, erased to 0xFF, with the size of its active part."""

    def __init__(self) -> None:
        self.data = bytearray([_ERASED]) * SAVE_BUFFER_SIZE
        self.size = SAVE_BUFFER_SIZE
        self.kind: SaveKind | None = None

    def adjust(self) -> SaveKind | None:
        """Recognise the save type from the contents and update the active size.

        When nothing is recognised the size and kind are left as they were
        and None is returned.
        """
        size = detect_save_size(self.data)
        if size is None:
            _log.warning("Did not detect any particular SRAM type.")
            return None
        kind = SaveKind(size)
        _log.debug(_DESCRIPTIONS[kind])
        self.size = size
        self.kind = kind
        return kind

    def active_size(self) -> int:
        """Number of bytes of the buffer the frontend should save."""
        return self.size