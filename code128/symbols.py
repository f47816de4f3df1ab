"""
Code 128 Symbol Table

Fixed bijection between the symbol values 0..106 and their 11-module
bar/space patterns (ISO/IEC 15417), plus the symbolic names used when a
sequence is rendered as a value list.

Module patterns are strings of '1' (black) and '0' (white). The Stop symbol
(106) is followed by a two-module termination bar when a full barcode is
rendered, giving the 13-module stop pattern "1100011101011".
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import ErrorCode, InputError, StructureError


class Subtype(str, Enum):
    """The three Code 128 character sets."""
    A = "A"  # ASCII 0-95: control characters and upper case
    B = "B"  # ASCII 32-127: full printable ASCII
    C = "C"  # Digit pairs 00-99

    @classmethod
    def coerce(cls, value) -> "Subtype":
        """
        Convert a Subtype or a case-insensitive name to a Subtype.

        Raises:
            StructureError: value does not name a character set
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise StructureError(ErrorCode.INVALID_SUBTYPE, f"subtype {value!r} is not valid.")


# Control symbols
FNC3 = 96
FNC2 = 97
SHIFT = 98
CODE_C = 99
CODE_B = 100   # FNC4 while in set B
CODE_A = 101   # FNC4 while in set A
FNC1 = 102
START_A = 103
START_B = 104
START_C = 105
STOP = 106

MAX_DATA_VALUE = 102
TERMINATION_BAR = "11"
MODULE_WIDTH = 11

START_CODES: Dict[Subtype, int] = {
    Subtype.A: START_A,
    Subtype.B: START_B,
    Subtype.C: START_C,
}

LATCH_CODES: Dict[Subtype, int] = {
    Subtype.A: CODE_A,
    Subtype.B: CODE_B,
    Subtype.C: CODE_C,
}

FNC4_CODES: Dict[Subtype, int] = {
    Subtype.A: CODE_A,
    Subtype.B: CODE_B,
}

PATTERNS: Tuple[str, ...] = (
    "11011001100", "11001101100", "11001100110", "10010011000", "10010001100",
    "10001001100", "10011001000", "10011000100", "10001100100", "11001001000",
    "11001000100", "11000100100", "10110011100", "10011011100", "10011001110",
    "10111001100", "10011101100", "10011100110", "11001110010", "11001011100",
    "11001001110", "11011100100", "11001110100", "11101101110", "11101001100",
    "11100101100", "11100100110", "11101100100", "11100110100", "11100110010",
    "11011011000", "11011000110", "11000110110", "10100011000", "10001011000",
    "10001000110", "10110001000", "10001101000", "10001100010", "11010001000",
    "11000101000", "11000100010", "10110111000", "10110001110", "10001101110",
    "10111011000", "10111000110", "10001110110", "11101110110", "11010001110",
    "11000101110", "11011101000", "11011100010", "11011101110", "11101011000",
    "11101000110", "11100010110", "11101101000", "11101100010", "11100011010",
    "11101111010", "11001000010", "11110001010", "10100110000", "10100001100",
    "10010110000", "10010000110", "10000101100", "10000100110", "10110010000",
    "10110000100", "10011010000", "10011000010", "10000110100", "10000110010",
    "11000010010", "11001010000", "11110111010", "11000010100", "10001111010",
    "10100111100", "10010111100", "10010011110", "10111100100", "10011110100",
    "10011110010", "11110100100", "11110010100", "11110010010", "11011011110",
    "11011110110", "11110110110", "10101111000", "10100011110", "10001011110",
    "10111101000", "10111100010", "11110101000", "11110100010", "10111011110",
    "10111101110", "11101011110", "11110101110", "11010000100", "11010010000",
    "11010011100", "11000111010",
)

STOP_PATTERN = PATTERNS[STOP] + TERMINATION_BAR
REVERSED_STOP_PATTERN = STOP_PATTERN[::-1]

_PATTERN_INDEX: Dict[str, int] = {p: i for i, p in enumerate(PATTERNS)}


def subtype_of_start(value: int) -> Optional[Subtype]:
    """Return the character set selected by a Start code, or None."""
    for subtype, code in START_CODES.items():
        if code == value:
            return subtype
    return None


def get_pattern_string(value: int) -> str:
    """
    Get the module pattern of a symbol value as a '1'/'0' string.

    Raises:
        InputError: value is not in 0..106
    """
    if not isinstance(value, int) or value < 0 or value > STOP:
        raise InputError(ErrorCode.INVALID_ARGUMENT, "value should be in 0..106.")
    return PATTERNS[value]


def get_pattern(value: int) -> List[bool]:
    """Get the module pattern of a symbol value; white is False, black is True."""
    return [c == "1" for c in get_pattern_string(value)]


def pattern_to_value(pattern: str) -> Optional[int]:
    """Reverse lookup of an 11-module pattern string."""
    return _PATTERN_INDEX.get(pattern)


def symbol_name(subtype: Subtype, value: int) -> str:
    """
    Convert a symbol value to its string form within a character set.

    Data values map to their character (or digit pair in set C); control
    values map to a bracketed name such as "[FNC1]" or "[Code B]".
    """
    if value > 101:
        return {
            FNC1: "[FNC1]",
            START_A: "[Start A]",
            START_B: "[Start B]",
            START_C: "[Start C]",
            STOP: "[Stop]",
        }.get(value, "")

    subtype = Subtype.coerce(subtype)
    if subtype is Subtype.C:
        if value < 100:
            return f"{value:02d}"
        return "[Code B]" if value == CODE_B else "[Code A]"

    is_a = subtype is Subtype.A
    if value < 64 or (not is_a and value < 96):
        return chr(value + 32)
    if value < 96:
        return chr(value - 64)

    return {
        FNC3: "[FNC3]",
        FNC2: "[FNC2]",
        SHIFT: "[Shift B]" if is_a else "[Shift A]",
        CODE_C: "[Code C]",
        CODE_B: "[Code B]" if is_a else "[FNC4]",
        CODE_A: "[FNC4]" if is_a else "[Code A]",
    }[value]
