"""Static descriptions the core reports to a frontend.

System and timing information, the memory map exposed for achievements
and debuggers, the input descriptors, and the parsing of option values
that control frameskip and turbo delay.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from vbanext.joypad import JoypadButton

LIBRARY_NAME = "VBA Next"
LIBRARY_VERSION = "v1.0.2"
DEVICE_JOYPAD = 1

_FRAMESKIP_CODES = {
    "1/3": 0x13,
    "1/2": 0x12,
    "1": 0x1,
    "2": 0x2,
    "3": 0x3,
    "4": 0x4,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class SystemInfo:
    """Name, version and content requirements of the core."""

    library_name: str
    library_version: str
    valid_extensions: str
    need_fullpath: bool
    block_extract: bool


@dataclass(frozen=True)
class AvInfo:
    """Screen geometry and timing."""

    base_width: int
    base_height: int
    max_width: int
    max_height: int
    aspect_ratio: float
    fps: float
    sample_rate: float


@dataclass(frozen=True)
class MemoryDescriptor:
    """One region of the emulated address space."""

    address_space: str
    start: int
    length: int
    select: int = 0
    disconnect: int = 0
    offset: int = 0
    flags: int = 0


@dataclass(frozen=True)
class InputDescriptor:
    """Label for one frontend button."""

    port: int
    device: int
    index: int
    button: JoypadButton
    description: str


def system_info(load_from_memory: bool = True, git_version: str = "") -> SystemInfo:
    """Core information; ``git_version`` is appended to the version as given."""
    return SystemInfo(
        library_name=LIBRARY_NAME,
        library_version=LIBRARY_VERSION + git_version,
        valid_extensions="gba",
        need_fullpath=not load_from_memory,
        block_extract=False,
    )


def av_info() -> AvInfo:
    """Geometry of the 240x160 screen and the console's frame and sample rates."""
    return AvInfo(
        base_width=240,
        base_height=160,
        max_width=240,
        max_height=160,
        aspect_ratio=3.0 / 2.0,
        fps=16777216.0 / 280896.0,
        sample_rate=32000.0,
    )


def memory_descriptors(rom_size: int) -> tuple[MemoryDescriptor, ...]:
    """The memory map; the three ROM mirrors are ``rom_size`` bytes long."""
    return (
        MemoryDescriptor("BIOS", 0x00000000, 0x4000),
        MemoryDescriptor("EWRAM", 0x02000000, 0x40000),
        MemoryDescriptor("IWRAM", 0x03000000, 0x8000),
        MemoryDescriptor("IOMEM", 0x04000000, 0x400),
        MemoryDescriptor("PALRAM", 0x05000000, 0x400),
        MemoryDescriptor("VRAM", 0x06000000, 0x18000, select=0xFFFE8000),
        MemoryDescriptor("OAM", 0x07000000, 0x400),
        MemoryDescriptor("ROM-WS0", 0x08000000, rom_size),
        MemoryDescriptor("ROM-WS1", 0x0A000000, rom_size),
        MemoryDescriptor("ROM-WS2", 0x0C000000, rom_size),
        # Only 64K of save memory is visible at a time; larger flash is banked.
        MemoryDescriptor("SRAM", 0x0E000000, 0x10000),
    )


def input_descriptors() -> tuple[InputDescriptor, ...]:
    """Labels for the buttons the core uses."""
    labels = (
        (JoypadButton.LEFT, "十字键左"),
        (JoypadButton.UP, "十字键上"),
        (JoypadButton.DOWN, "十字键下"),
        (JoypadButton.RIGHT, "十字键右"),
        (JoypadButton.B, "B"),
        (JoypadButton.A, "A"),
        (JoypadButton.L, "L"),
        (JoypadButton.R, "R"),
        (JoypadButton.SELECT, "选择"),
        (JoypadButton.START, "开始"),
        (JoypadButton.Y, "连发 B"),
        (JoypadButton.X, "连发 A"),
    )
    return tuple(
        InputDescriptor(0, DEVICE_JOYPAD, 0, button, text) for button, text in labels
    )


def frameskip_code(value: str | None) -> int:
    """Frameskip setting for a ``vbanext_frameskip`` value; 0 for none or unknown."""
    if value is None:
        return 0
    return _FRAMESKIP_CODES.get(value, 0)


def turbo_delay(value: str | None) -> int:
    """Turbo delay from a ``vbanext_turbodelay`` value.

    Reads the leading integer of the string the way the frontend values
    are read; a value with no leading integer, or None, gives 0.
    """
    if value is None:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0