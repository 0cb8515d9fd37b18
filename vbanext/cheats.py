"""Parsing of cheat codes entered through the frontend.

A cheat string may hold several codes. Hexadecimal digits are collected;
any other character ends a code once at least twelve digits have been
gathered. Twelve digits make a CodeBreaker code (written ``XXXXXXXX YYYY``),
sixteen digits a GameShark code. Any other length of twelve or more is
reported as invalid.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from enum import Enum

_log = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)
_CODEBREAKER_DIGITS = 12
_GAMESHARK_DIGITS = 16


class CheatKind(Enum):
    """Formats of cheat codes."""

    CODEBREAKER = "CBA"
    GAMESHARK = "GSA"


@dataclass(frozen=True)
class CheatCode:
    """One code ready to be handed to the cheat engine."""

    kind: CheatKind
    code: str
    name: str


@dataclass
class CheatParseResult:
    """Codes found in a cheat string and the pieces that were rejected."""

    name: str
    codes: list[CheatCode] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)


def parse_cheat(index: int, code: str) -> CheatParseResult:
    """Split ``code`` into CodeBreaker and GameShark codes named ``cheat_<index>``."""
    result = CheatParseResult(name=f"cheat_{index}")
    digits: list[str] = []

    # A trailing terminator ends the last code like any separator.
    for char in [*code, ""]:
        if char and char in _HEX_DIGITS:
            digits.append(char.upper())
            continue
        if len(digits) < _CODEBREAKER_DIGITS:
            continue
        text = "".join(digits)
        if len(digits) == _CODEBREAKER_DIGITS:
            line = f"{text[:8]} {text[8:]}"
            result.codes.append(CheatCode(CheatKind.CODEBREAKER, line, result.name))
            _log.debug("Cheat code added: '%s'", line)
        elif len(digits) == _GAMESHARK_DIGITS:
            result.codes.append(CheatCode(CheatKind.GAMESHARK, text, result.name))
            _log.debug("Cheat code added: '%s'", text)
        else:
            result.invalid.append(text)
            _log.error("Invalid cheat code '%s'", text)
        digits = []
    return result