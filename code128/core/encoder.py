"""
Code 128 Encoder

Turns a byte payload into data symbols, choosing latches, shifts and FNC4
codes as it goes. Every emitted symbol is also fed to a CharsetState, so the
encoder's view of the active set and high bit is exactly what a decoder will
reconstruct.

Per-byte rules:
- Set A: 32-95 -> value-32, 0-31 -> value+64
- Set B: 32-127 -> value-32
- Set C: digits are packed in pairs (00-99); a held digit is flushed as
  digit+16 in set A/B when the run of digits ends
- Bytes 128-255 are written as their low byte behind FNC4; long runs use the
  double FNC4 (sticky) form

GS1-128 data starts with FNC1 in set C; every further element string is
introduced by another FNC1 after returning to set C.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import ErrorCode, InputError
from ..symbols import (
    CODE_C,
    FNC1,
    FNC4_CODES,
    LATCH_CODES,
    SHIFT,
    START_CODES,
    STOP,
    Subtype,
)
from ..validators.validators import calculate_checksum
from .state import CharsetState

Payload = Union[str, bytes, bytearray]

# Symbol of a set C digit written in set A or B ('0' is 16 in both sets)
DIGIT_OFFSET = 16


@dataclass
class EncodeOptions:
    """
    Configuration options for encoding.

    Attributes:
        use_shift: Use Shift (98) for a single character that needs the
            other of sets A/B, instead of latching
        sticky_fnc4_run: Minimum run of extended characters (128-255) written
            with the sticky double-FNC4 form; None always uses single FNC4
    """
    use_shift: bool = True
    sticky_fnc4_run: Optional[int] = 4


def to_bytes(payload: Payload) -> bytes:
    """
    Convert a text or byte payload to bytes.

    Text is encoded as Latin-1 so characters 128-255 can be written with FNC4.

    Raises:
        InputError: payload is None or contains characters above U+00FF
    """
    if payload is None:
        raise InputError(ErrorCode.NULL_INPUT, "payload should not be None.")
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    if not isinstance(payload, str):
        raise InputError(ErrorCode.INVALID_ARGUMENT, "payload should be str or bytes.")
    try:
        return payload.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InputError(
            ErrorCode.UNENCODABLE_CHARACTER,
            f"Character {payload[e.start]!r} cannot be encoded in Code 128.",
            at_index=e.start,
        ) from e


def _required_subtype(byte: int) -> Optional[Subtype]:
    """Set a byte's low 7 bits can only be written in; None if both A and B work."""
    low = byte & 0x7F
    if low < 32:
        return Subtype.A
    if low > 95:
        return Subtype.B
    return None


def _char_value(subtype: Subtype, byte: int) -> int:
    low = byte & 0x7F
    if subtype is Subtype.A and low < 32:
        return low + 64
    return low - 32


def _is_digit(byte: int) -> bool:
    return 48 <= byte <= 57


class _Writer:
    """Collects symbols and keeps the state machine in step with them."""

    def __init__(self, state: CharsetState, out: List[int], options: EncodeOptions):
        self.state = state
        self.out = out
        self.options = options

    def emit(self, value: int) -> None:
        self.out.append(value)
        self.state.feed(value)

    def latch(self, subtype: Subtype) -> None:
        self.emit(LATCH_CODES[subtype])

    def flush_digit(self) -> None:
        digit = self.state.reserved_digit
        if digit is not None:
            self.state.reserved_digit = None
            self.emit(digit + DIGIT_OFFSET)

    def _extended_run(self, data: bytes, index: int) -> int:
        high = data[index] > 127
        run = 0
        for byte in data[index:]:
            if (byte > 127) != high:
                break
            run += 1
        return run

    def _fits_current(self, data: bytes, index: int) -> bool:
        if index >= len(data):
            return False
        needed = _required_subtype(data[index])
        return needed is None or needed is self.state.active

    def write_char(self, data: bytes, index: int) -> None:
        """Write one byte while the active set is A or B."""
        byte = data[index]
        state = self.state
        needed = _required_subtype(byte)
        shift = False
        if needed is not None and needed is not state.active:
            if self.options.use_shift and self._fits_current(data, index + 1):
                shift = True
            else:
                self.latch(needed)

        high = byte > 127
        if high != state.sticky_high:
            fnc4 = FNC4_CODES[state.active]
            run = self._extended_run(data, index)
            threshold = self.options.sticky_fnc4_run
            self.emit(fnc4)
            if threshold is not None and run >= threshold:
                self.emit(fnc4)

        if shift:
            self.emit(SHIFT)
            self.emit(_char_value(needed, byte))
        else:
            self.emit(_char_value(state.active, byte))

    def write_digit_or_leave(self, data: bytes, index: int) -> None:
        """Write one byte while the active set is C."""
        byte = data[index]
        state = self.state
        if _is_digit(byte):
            if state.reserved_digit is None:
                state.reserved_digit = byte - 48
            else:
                pair = state.reserved_digit * 10 + byte - 48
                state.reserved_digit = None
                self.emit(pair)
            return

        target = _required_subtype(byte) or Subtype.B
        self.latch(target)
        self.flush_digit()
        self.write_char(data, index)

    def finish(self) -> None:
        if self.state.reserved_digit is not None:
            if self.state.active is Subtype.C:
                self.latch(Subtype.A)
            self.flush_digit()


def fill(
    out: List[int],
    state: CharsetState,
    payload: Payload,
    options: Optional[EncodeOptions] = None,
) -> Subtype:
    """
    Append the data symbols of a payload to out.

    Args:
        out: Symbol list to append to
        state: State of the sequence written so far (updated in place)
        payload: Text or bytes to encode
        options: Encoding options

    Returns:
        The set that is active after the payload
    """
    data = to_bytes(payload)
    writer = _Writer(state, out, options or EncodeOptions())
    for index in range(len(data)):
        if state.active is Subtype.C:
            writer.write_digit_or_leave(data, index)
        else:
            writer.write_char(data, index)
    writer.finish()
    return state.latched


def encode_data(
    subtype: Subtype,
    payload: Payload,
    options: Optional[EncodeOptions] = None,
) -> List[int]:
    """Encode a payload to data symbols, starting in the given set."""
    state = CharsetState.for_subtype(subtype)
    out: List[int] = []
    fill(out, state, payload, options)
    return out


def encode(
    subtype: Subtype,
    payload: Payload,
    options: Optional[EncodeOptions] = None,
) -> Tuple[int, ...]:
    """
    Encode a payload to a complete symbol sequence.

    An empty payload yields Start, check symbol and Stop only.

    Raises:
        StructureError: subtype is not A, B or C
        InputError: payload is None or not encodable
    """
    subtype = Subtype.coerce(subtype)
    start = START_CODES[subtype]
    data = encode_data(subtype, payload, options)
    return (start, *data, calculate_checksum(start, data), STOP)


def _gs1_element(ai: int, data: Optional[str]) -> str:
    if not isinstance(ai, int) or isinstance(ai, bool):
        raise InputError(ErrorCode.INVALID_AI, "ai should be an integer.")
    if ai < 0:
        raise InputError(ErrorCode.INVALID_AI, "ai should not be less than zero.")
    return f"{ai:02d}{data or ''}"


def encode_gs1_data(
    parts: Sequence[Optional[str]],
    options: Optional[EncodeOptions] = None,
) -> List[int]:
    """
    Encode GS1 element strings ("AI + data") to data symbols.

    Each non-empty part is introduced by FNC1 in set C, latching back to C
    first if the previous part left another set active. Empty parts are skipped.
    """
    state = CharsetState.for_subtype(Subtype.C)
    out: List[int] = []
    for part in parts:
        if not part:
            continue
        if state.latched is not Subtype.C:
            out.append(CODE_C)
            state.feed(CODE_C)
        out.append(FNC1)
        state.feed(FNC1)
        fill(out, state, part, options)
    return out


def encode_gs1(ai: int, data: Optional[str], options: Optional[EncodeOptions] = None) -> List[int]:
    """
    Encode one GS1 element string as data symbols.

    The AI is written as at least two decimal digits.

    Raises:
        InputError: ai is negative
    """
    return encode_gs1_data([_gs1_element(ai, data)], options)
