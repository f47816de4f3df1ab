"""
Character-Set State Machine

Tracks the active Code 128 character set while a symbol stream is read or
written. The encoder feeds every symbol it emits through the same machine the
decoder replays, so both sides always agree on how a symbol is interpreted.

Rules:
- Latch (99 -> C; 100 -> B from A/C; 101 -> A from B/C) changes the set for
  all following symbols
- Shift (98, in A or B) reads the single next symbol in the other of A/B
- FNC4 (100 in B, 101 in A) sets the high bit (+128) of the next character;
  two FNC4 in a row make the high bit sticky until the next double FNC4
- Any set C symbol and FNC1 clear both high bit flags
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..symbols import (
    CODE_A,
    CODE_B,
    CODE_C,
    FNC1,
    FNC2,
    FNC3,
    SHIFT,
    Subtype,
    subtype_of_start,
)
from ..errors import ErrorCode, StructureError


class EventKind(str, Enum):
    """What a single symbol resolved to."""
    CHAR = "char"        # One (possibly extended) character
    DIGITS = "digits"    # A set C digit pair
    FNC1 = "fnc1"
    FNC2 = "fnc2"
    FNC3 = "fnc3"
    FNC4 = "fnc4"
    SHIFT = "shift"
    LATCH = "latch"
    END = "end"          # Start/Stop code met inside the data


@dataclass(frozen=True)
class Event:
    """A resolved symbol: its kind, the set it was read in and any text."""
    kind: EventKind
    value: int
    subtype: Subtype
    text: str = ""


@dataclass
class CharsetState:
    """
    Mutable state threaded through one encode or decode pass.

    Attributes:
        active: Set used to read the next symbol
        latched: Set restored after a one-symbol shift
        high: High bit applied to the next character
        sticky_high: High bit restored after each character (double FNC4)
        reserved_digit: Set C digit waiting for its partner (encoder only)
    """
    active: Subtype
    latched: Subtype
    high: bool = False
    sticky_high: bool = False
    reserved_digit: Optional[int] = None

    @classmethod
    def for_subtype(cls, subtype: Subtype) -> "CharsetState":
        subtype = Subtype.coerce(subtype)
        return cls(active=subtype, latched=subtype)

    @classmethod
    def from_start(cls, start_code: int) -> "CharsetState":
        subtype = subtype_of_start(start_code)
        if subtype is None:
            raise StructureError(
                ErrorCode.INVALID_START_CODE, "The start code is not valid.", at_index=0
            )
        return cls.for_subtype(subtype)

    def _latch(self, subtype: Subtype) -> None:
        self.active = self.latched = subtype

    def feed(self, value: int) -> Event:
        """Apply one symbol and return what it resolved to."""
        if value > 101:
            if value > FNC1:
                return Event(EventKind.END, value, self.active)
            self.high = self.sticky_high = False
            return Event(EventKind.FNC1, value, self.active)

        current = self.active
        self.active = self.latched

        if current is Subtype.C:
            self.high = self.sticky_high = False
            if value < 100:
                return Event(EventKind.DIGITS, value, current, f"{value:02d}")
            self._latch(Subtype.B if value == CODE_B else Subtype.A)
            return Event(EventKind.LATCH, value, current)

        is_a = current is Subtype.A
        if value < 96:
            if is_a and value >= 64:
                code = value - 64
            else:
                code = value + 32
            if self.high:
                code += 128
            self.high = self.sticky_high
            return Event(EventKind.CHAR, value, current, chr(code))

        if value == SHIFT:
            self.active = Subtype.B if is_a else Subtype.A
            return Event(EventKind.SHIFT, value, current)

        if (value == CODE_A and is_a) or (value == CODE_B and not is_a):
            if self.high != self.sticky_high:
                self.sticky_high = self.high
            else:
                self.high = not self.high
            return Event(EventKind.FNC4, value, current)

        if value == FNC3:
            event = Event(EventKind.FNC3, value, current)
        elif value == FNC2:
            event = Event(EventKind.FNC2, value, current)
        else:
            self._latch({CODE_C: Subtype.C, CODE_B: Subtype.B, CODE_A: Subtype.A}[value])
            event = Event(EventKind.LATCH, value, current)

        self.high = self.sticky_high
        return event
