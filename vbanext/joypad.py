"""Mapping of frontend joypad state to the handheld's key register.

The frontend reports buttons as a bitmask indexed by its own button ids.
The emulated console expects ten keys in a fixed order. Optional turbo
buttons press A or B on a repeating schedule while they are held.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


class JoypadButton(IntEnum):
    """Frontend joypad button ids (bit positions in the frontend bitmask)."""

    B = 0
    Y = 1
    SELECT = 2
    START = 3
    UP = 4
    DOWN = 5
    LEFT = 6
    RIGHT = 7
    A = 8
    X = 9
    L = 10
    R = 11
    L2 = 12
    R2 = 13
    L3 = 14
    R3 = 15


# Frontend button for each console key, in the order of the key bits.
GBA_BINDS: tuple[JoypadButton, ...] = (
    JoypadButton.A,
    JoypadButton.B,
    JoypadButton.SELECT,
    JoypadButton.START,
    JoypadButton.RIGHT,
    JoypadButton.LEFT,
    JoypadButton.UP,
    JoypadButton.DOWN,
    JoypadButton.R,
    JoypadButton.L,
)

# Turbo buttons: X repeats key bit 0 (A), Y repeats key bit 1 (B).
TURBO_BINDS: tuple[JoypadButton, ...] = (JoypadButton.X, JoypadButton.Y)

_HORIZONTAL = 0x30
_VERTICAL = 0xC0


def bits_from_buttons(pressed: Iterable[JoypadButton | int]) -> int:
    """Build a frontend bitmask from button ids; ids outside B..R3 are ignored."""
    bits = 0
    for button in pressed:
        index = int(button)
        if 0 <= index <= JoypadButton.R3:
            bits |= 1 << index
    return bits


@dataclass
class InputMapper:
    """Turns frontend button bitmasks into console key states, frame by frame."""

    turbo_enabled: bool = False
    turbo_delay: int = 0
    turbo_counter: int = 0

    def update(self, joy_bits: int) -> int:
        """Key state for one frame from the frontend bitmask ``joy_bits``."""
        state = 0
        for bit, button in enumerate(GBA_BINDS):
            if joy_bits & (1 << button):
                state |= 1 << bit

        if self.turbo_enabled:
            held = False
            for bit, button in enumerate(TURBO_BINDS):
                if joy_bits & (1 << button):
                    held = True
                    if self.turbo_counter == 0:
                        state |= 1 << bit
            if held:
                self.turbo_counter += 1
                if self.turbo_counter > self.turbo_delay:
                    self.turbo_counter = 0
            else:
                self.turbo_counter = 0

        # Opposing directions cannot be held together.
        if state & _HORIZONTAL == _HORIZONTAL:
            state &= ~_HORIZONTAL
        elif state & _VERTICAL == _VERTICAL:
            state &= ~_VERTICAL
        return state