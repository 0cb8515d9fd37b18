"""Convert save files between raw ``.sav`` dumps and padded ``.srm`` images.

An ``.srm`` image is always 0x22000 bytes: flash and SRAM data sit at the
start, EEPROM data at offset 0x20000, and unused space is filled with 0xFF.
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

SRM_SIZE = 0x20000 + 0x2000
EEPROM_OFFSET = 0x20000
_FILL = 0xFF


class SaveType(Enum):
    """Kinds of cartridge save memory."""

    EEPROM_512B = "EEPROM 4kbit"
    EEPROM_8K = "EEPROM 64kbit"
    FLASH_64K = "FLASH 512kbit"
    FLASH_128K = "FLASH 1MBit"
    SRAM = "SRAM"
    UNKNOWN = "Unknown type"

    def describe(self) -> str:
        """Human-readable name of the save type."""
        return self.value


class ConversionError(Exception):
    """A save file could not be converted."""

    def __init__(self, message: str, save_type: SaveType | None = None):
        super().__init__(message)
        self.save_type = save_type


_RAW_SIZES = {
    512: SaveType.EEPROM_512B,
    0x2000: SaveType.EEPROM_8K,
    0x10000: SaveType.FLASH_64K,
    0x20000: SaveType.FLASH_128K,
    0x8000: SaveType.SRAM,
}

# (offset in the .srm image, length of the data) for each save type.
_LAYOUT = {
    SaveType.EEPROM_512B: (EEPROM_OFFSET, 512),
    SaveType.EEPROM_8K: (EEPROM_OFFSET, 0x2000),
    SaveType.FLASH_64K: (0, 0x10000),
    SaveType.FLASH_128K: (0, 0x20000),
    SaveType.SRAM: (0, 0x8000),
}


def scan_section(data: bytes) -> bool:
    """True if any byte of ``data`` differs from the erased value 0xFF."""
    return any(byte != _FILL for byte in data)


def detect_save_type(data: bytes) -> SaveType:
    """Work out the save type from the size and, for .srm images, the contents."""
    size = len(data)
    if size in _RAW_SIZES:
        return _RAW_SIZES[size]
    if size == SRM_SIZE:
        if scan_section(data[:0x8000]) and not scan_section(data[0x8000:0x8000 + 0x1A000]):
            return SaveType.SRAM
        if scan_section(data[:0x10000]) and not scan_section(data[0x10000:0x20000]):
            return SaveType.FLASH_64K
        if scan_section(data[:0x20000]):
            return SaveType.FLASH_128K
        eeprom = data[EEPROM_OFFSET:]
        if scan_section(eeprom[:512]) and not scan_section(eeprom[512:0x20000]):
            return SaveType.EEPROM_512B
        if scan_section(eeprom[:0x2000]):
            return SaveType.EEPROM_8K
    return SaveType.UNKNOWN


def to_srm(data: bytes, save_type: SaveType) -> bytes:
    """Place a raw save into a 0xFF-padded .srm image; empty for an unknown type."""
    layout = _LAYOUT.get(save_type)
    if layout is None:
        return b""
    offset, length = layout
    image = bytearray([_FILL]) * SRM_SIZE
    image[offset:offset + length] = data[:length]
    return bytes(image)


def to_sav(data: bytes, save_type: SaveType) -> bytes:
    """Extract the raw save from a .srm image; empty for an unknown type."""
    layout = _LAYOUT.get(save_type)
    if layout is None:
        return b""
    offset, length = layout
    return bytes(data[offset:offset + length])


def output_path(path: str | Path) -> Path:
    """Path of the converted file: ``.srm`` becomes ``.sav``, anything else ``.srm``."""
    text = str(path)
    stem, dot, ext = text.rpartition(".")
    if dot:
        if ext.lower() == "srm":
            return Path(stem + ".sav")
        if len(ext) >= 3:
            return Path(stem + ".srm")
    raise ConversionError("Cannot detect extension!")


def convert_file(path: str | Path) -> tuple[Path, SaveType]:
    """Convert the save at ``path`` and write the result next to it.

    Returns the output path and the detected save type.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ConversionError(f'Failed to open file "{path}"') from exc
    target = output_path(path)
    save_type = detect_save_type(data)
    if save_type is SaveType.UNKNOWN:
        raise ConversionError("Cannot infer save type ...", save_type)
    converted = to_sav(data, save_type) if len(data) == SRM_SIZE else to_srm(data, save_type)
    try:
        target.write_bytes(converted)
    except OSError as exc:
        raise ConversionError(f'Failed to write file "{target}"', save_type) from exc
    return target, save_type


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: ``gbaconv <file>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: gbaconv <file>", file=sys.stderr)
        return 1
    try:
        _, save_type = convert_file(args[0])
    except ConversionError as exc:
        if exc.save_type is not None:
            print(f"Detected save type: {exc.save_type.describe()}")
        print(exc, file=sys.stderr)
        return 1
    print(f"Detected save type: {save_type.describe()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())