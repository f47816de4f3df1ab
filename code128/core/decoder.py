"""
Code 128 Decoder

Replays the character-set state machine over a symbol sequence to recover:
- the text it carries (optionally annotated with [FNC1]/[FNC2]/[FNC3])
- the GS1 element strings delimited by FNC1
- the sequence of character sets used

Also reads a black/white module pattern back into symbol values, in either
scanning direction.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..errors import ErrorCode, InputError, StructureError
from ..symbols import (
    MAX_DATA_VALUE,
    MODULE_WIDTH,
    REVERSED_STOP_PATTERN,
    STOP,
    TERMINATION_BAR,
    Subtype,
    pattern_to_value,
    subtype_of_start,
)
from .state import CharsetState, Event, EventKind

logger = logging.getLogger(__name__)

# Start, one symbol, checksum and the first modules of Stop
MIN_PATTERN_LENGTH = 25

_ANNOTATIONS = {
    EventKind.FNC1: "[FNC1]",
    EventKind.FNC2: "[FNC2]",
    EventKind.FNC3: "[FNC3]",
}


def iter_events(symbols: Sequence[int]) -> Iterator[Event]:
    """
    Resolve every data symbol of a complete sequence.

    Yields nothing for sequences shorter than four symbols or without a
    valid Start code. Stops at the first Start/Stop code among the data.
    """
    if len(symbols) < 4 or subtype_of_start(symbols[0]) is None:
        return
    state = CharsetState.from_start(symbols[0])
    for value in symbols[1:-2]:
        event = state.feed(value)
        if event.kind is EventKind.END:
            return
        yield event


def decode_text(symbols: Sequence[int], annotate: bool = True) -> str:
    """
    Decode a complete sequence to its text.

    Args:
        symbols: Start code, data symbols, check symbol and Stop code
        annotate: Write [FNC1], [FNC2] and [FNC3] where they occur

    Returns:
        Decoded text; characters 128-255 come from FNC4
    """
    parts: List[str] = []
    for event in iter_events(symbols):
        if event.text:
            parts.append(event.text)
        elif annotate and event.kind in _ANNOTATIONS:
            parts.append(_ANNOTATIONS[event.kind])
    return "".join(parts)


def decode_ai(symbols: Sequence[int]) -> Iterator[str]:
    """
    Lazily yield the GS1 element strings (AI followed by data).

    FNC1 starts a new element string. FNC2 and FNC3 end the current one and
    stop recording until the next FNC1. Text before the first FNC1 has no AI
    and is dropped; empty element strings are never yielded.
    """
    buffer: List[str] = []
    recording = False
    for event in iter_events(symbols):
        if event.kind in (EventKind.FNC1, EventKind.FNC2, EventKind.FNC3):
            if buffer:
                yield "".join(buffer)
                buffer = []
            recording = event.kind is EventKind.FNC1
            continue
        if recording and event.text:
            buffer.append(event.text)
    if buffer:
        yield "".join(buffer)


def iter_subtypes_used(symbols: Sequence[int]) -> Iterator[Subtype]:
    """Yield the start set and then each set latched to, without repeats."""
    start = subtype_of_start(symbols[0]) if len(symbols) > 3 else None
    if start is None:
        return
    yield start
    current = start
    for event in iter_events(symbols):
        if event.kind is not EventKind.LATCH:
            continue
        latched = {99: Subtype.C, 100: Subtype.B, 101: Subtype.A}[event.value]
        if latched is not current:
            current = latched
            yield current


def _bits_to_string(bits: Iterable) -> str:
    if bits is None:
        raise InputError(ErrorCode.NULL_INPUT, "values should not be None.")
    if isinstance(bits, str):
        if set(bits) - {"0", "1"}:
            raise InputError(ErrorCode.INVALID_ARGUMENT, "pattern string should only contain 0 and 1.")
        return bits
    return "".join("1" if b else "0" for b in bits)


def decode_pattern(bits: Iterable) -> Tuple[int, ...]:
    """
    Read a module pattern back into symbol values.

    Args:
        bits: Modules, black as True (or '1'), white as False (or '0');
            leading and trailing white quiet zones are ignored

    Returns:
        Start code, data symbols, check symbol and Stop code

    Raises:
        StructureError: the pattern is too short, its Start code or a symbol
            is not recognised, or Stop is missing
    """
    s = _bits_to_string(bits).strip("0")
    if len(s) < MIN_PATTERN_LENGTH:
        raise StructureError(ErrorCode.PATTERN_TOO_SHORT, "The count of values is too less.")

    if s.startswith(REVERSED_STOP_PATTERN):
        logger.debug("Pattern starts with Stop, reading it reversed")
        s = s[::-1]

    start = pattern_to_value(s[:MODULE_WIDTH])
    if start is None or subtype_of_start(start) is None:
        raise StructureError(ErrorCode.INVALID_START_CODE, "The start code is not valid.", at_index=0)

    values = [start]
    for i in range(MODULE_WIDTH, len(s), MODULE_WIDTH):
        item = s[i:i + MODULE_WIDTH]
        value = pattern_to_value(item)
        if value is None:
            raise StructureError(
                ErrorCode.INVALID_PATTERN,
                f"Contains invalid symbol at position {i}.",
                at_index=i,
            )
        if value == STOP:
            rest = s[i + MODULE_WIDTH:]
            if rest != TERMINATION_BAR:
                raise StructureError(
                    ErrorCode.INVALID_STOP_CODE,
                    "The stop code should be followed by the termination bar only.",
                    at_index=i,
                )
            values.append(value)
            return tuple(values)
        if value > MAX_DATA_VALUE:
            raise StructureError(
                ErrorCode.INVALID_SYMBOL,
                f"Contains invalid symbol at position {i}.",
                at_index=i,
            )
        values.append(value)

    raise StructureError(ErrorCode.INVALID_STOP_CODE, "The stop code is missing.")
