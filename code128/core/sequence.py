"""
Code 128 symbol sequence.

Code128 is an immutable sequence of symbol values: Start code, data
symbols, check symbol and Stop code. Instances are created by encoding text
or bytes, from raw symbol values, from GS1 element strings or from a module
pattern, and can be joined with + or Code128.join().
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..ai_catalog import AIRecord, split_element
from ..errors import ErrorCode, InputError, StructureError
from ..formatters.formats import Format, barcode_string, path_string, render
from ..symbols import (
    MAX_DATA_VALUE,
    START_CODES,
    STOP,
    Subtype,
    get_pattern,
    subtype_of_start,
)
from ..validators.validators import ValidationResult, calculate_checksum, validate_sequence
from . import combinator
from .decoder import decode_ai, decode_pattern, iter_subtypes_used
from .encoder import EncodeOptions, encode_data, encode_gs1, encode_gs1_data

logger = logging.getLogger(__name__)

Values = Union[str, bytes, bytearray, Iterable[int]]


def _build(values: Optional[Iterable[int]], start_code: int) -> Tuple[int, ...]:
    """
    Complete a list of symbols with the given Start code.

    The Start code is prepended unless values already begin with it. A check
    symbol and Stop code are appended unless values already end with Stop,
    in which case the supplied check symbol is kept as is.
    """
    if values is None:
        raise InputError(ErrorCode.NULL_INPUT, "values should not be None.")
    col = list(values)
    if not col:
        raise InputError(ErrorCode.EMPTY_INPUT, "values should not be empty.")
    for i, value in enumerate(col):
        if not isinstance(value, int) or value < 0 or value > STOP:
            raise StructureError(
                ErrorCode.INVALID_SYMBOL, f"The value {value!r} at position {i} is not valid.", at_index=i
            )

    if col[0] != start_code:
        if col[0] > MAX_DATA_VALUE:
            raise StructureError(ErrorCode.INVALID_START_CODE, f"The first value {col[0]} is not valid.", at_index=0)
        col.insert(0, start_code)

    if col[-1] != STOP:
        col.append(calculate_checksum(start_code, col[1:]))
        col.append(STOP)

    if len(col) < 4:
        raise StructureError(ErrorCode.SEQUENCE_TOO_SHORT, "The sequence does not contain any data symbol.")

    for i in range(1, len(col) - 1):
        if col[i] > MAX_DATA_VALUE:
            raise StructureError(ErrorCode.INVALID_SYMBOL, f"The value {col[i]} at position {i} is not valid.", at_index=i)

    return tuple(col)


class Code128(Sequence[int]):
    """
    A Code 128 barcode as its symbol values.

    Use the create_* class methods to build one; indexing, len() and
    iteration expose the raw symbols.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[int]):
        self._values: Tuple[int, ...] = tuple(values)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, Code128):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Code128({list(self._values)!r})"

    def __str__(self) -> str:
        return self.to_string(Format.REGULAR)

    def __add__(self, other: Optional["Code128"]) -> "Code128":
        if other is None:
            return self
        if not isinstance(other, Code128):
            return NotImplemented
        return Code128(combinator.concat(self._values, other._values))

    def __radd__(self, other: Optional["Code128"]) -> "Code128":
        if other is None:
            return self
        return NotImplemented

    # Properties

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    @property
    def subtype(self) -> Optional[Subtype]:
        """The set selected by the Start code."""
        if len(self._values) < 4:
            return None
        return subtype_of_start(self._values[0])

    @property
    def checksum(self) -> Optional[int]:
        """The check symbol, or None if the sequence is too short."""
        if len(self._values) < 4:
            return None
        return self._values[-2]

    def take_data(self) -> Tuple[int, ...]:
        """Symbols without Start code, check symbol and Stop code."""
        if len(self._values) < 4:
            return ()
        return self._values[1:-2]

    def get_subtypes_used(self) -> List[Subtype]:
        """The start set followed by each set latched to, in order."""
        return list(iter_subtypes_used(self._values))

    def get_ai_data(self) -> Iterator[str]:
        """Lazily yield the GS1 element strings (AI followed by its data)."""
        return decode_ai(self._values)

    def get_ai_records(self) -> List[AIRecord]:
        """GS1 element strings split into AI and data."""
        return [split_element(element) for element in decode_ai(self._values)]

    def validate(self) -> ValidationResult:
        """Check every structural invariant, including the check symbol."""
        return validate_sequence(self._values)

    @property
    def is_valid(self) -> bool:
        return self.validate().valid

    # Output

    def to_string(self, fmt: Union[Format, str] = Format.REGULAR) -> str:
        """Render in one of the output formats."""
        return render(self._values, Format(fmt))

    def to_barcode(self) -> List[bool]:
        """Modules including the termination bar; white is False, black is True."""
        modules = [m for value in self._values for m in get_pattern(value)]
        if len(modules) > 10:
            modules.extend((True, True))
        return modules

    def to_barcode_string(self, black: str = "1", white: str = "0") -> str:
        return barcode_string(self._values, black, white)

    def to_path_string(self, height: int = 40) -> str:
        """Stroke path data for SVG or XAML."""
        return path_string(self._values, height)

    # Construction

    @classmethod
    def _create_for(cls, subtype: Subtype, values: Values, options: Optional[EncodeOptions]) -> "Code128":
        if values is None:
            raise InputError(ErrorCode.NULL_INPUT, "values should not be None.")
        start = START_CODES[subtype]
        if isinstance(values, (str, bytes, bytearray)):
            return cls(_build(encode_data(subtype, values, options), start))
        return cls(_build(values, start))

    @classmethod
    def create(cls, subtype: Union[Subtype, str], values: Values, options: Optional[EncodeOptions] = None) -> "Code128":
        """
        Create with the given start set.

        Args:
            subtype: Start set (A, B or C)
            values: Text or bytes to encode, or raw symbol values

        Raises:
            StructureError: subtype is not valid, or a symbol is out of range
            InputError: values is None or empty
        """
        return cls._create_for(Subtype.coerce(subtype), values, options)

    @classmethod
    def create_a(cls, values: Values, options: Optional[EncodeOptions] = None) -> "Code128":
        """Create with Start Code A."""
        return cls._create_for(Subtype.A, values, options)

    @classmethod
    def create_b(cls, values: Values, options: Optional[EncodeOptions] = None) -> "Code128":
        """Create with Start Code B."""
        return cls._create_for(Subtype.B, values, options)

    @classmethod
    def create_c(cls, values: Union[Values, int], options: Optional[EncodeOptions] = None) -> "Code128":
        """Create with Start Code C. An integer is encoded as its decimal digits."""
        if isinstance(values, int) and not isinstance(values, bool):
            values = str(values)
        return cls._create_for(Subtype.C, values, options)

    @classmethod
    def create_gs1(cls, ai: int, data: Optional[str], options: Optional[EncodeOptions] = None) -> "Code128":
        """
        Create a GS1-128 code holding one element string.

        Raises:
            InputError: ai is negative
        """
        return cls(_build(encode_gs1(ai, data, options), START_CODES[Subtype.C]))

    @classmethod
    def create_gs1_parts(cls, *parts: Optional[str], options: Optional[EncodeOptions] = None) -> "Code128":
        """
        Create a GS1-128 code from element strings, each "AI + data".

        Empty parts are skipped.

        Raises:
            InputError: every part is empty
        """
        return cls(_build(encode_gs1_data(parts, options), START_CODES[Subtype.C]))

    @classmethod
    def from_symbols(cls, values: Iterable[int], strict: bool = False) -> "Code128":
        """
        Create from symbol values beginning with a Start code.

        A trailing check symbol and Stop code are kept as supplied unless
        strict is set, in which case the whole sequence is validated.

        Raises:
            StructureError: the Start code or a symbol is not valid, or (strict)
                the check symbol does not match
        """
        if values is None:
            raise InputError(ErrorCode.NULL_INPUT, "values should not be None.")
        col = list(values)
        if not col:
            raise InputError(ErrorCode.EMPTY_INPUT, "values should not be empty.")
        if subtype_of_start(col[0]) is None:
            raise StructureError(ErrorCode.INVALID_START_CODE, "The start code is not valid.", at_index=0)
        instance = cls(_build(col, col[0]))
        if strict:
            instance._ensure_valid()
        return instance

    @classmethod
    def from_pattern(cls, bits: Union[str, Iterable[bool]]) -> "Code128":
        """
        Create from a module pattern, black as True (or '1').

        The pattern may be read in either direction; the check symbol is verified.

        Raises:
            StructureError: the pattern is not a valid Code 128 barcode
        """
        instance = cls.from_symbols(decode_pattern(bits))
        instance._ensure_valid()
        logger.debug("Decoded pattern into %d symbols", len(instance))
        return instance

    @classmethod
    def join(cls, items: Optional[Iterable[Optional["Code128"]]]) -> Optional["Code128"]:
        """
        Join codes into one. None items are skipped; a single item is returned as is.
        """
        if items is None:
            return None
        items = [item for item in items if item is not None]
        if len(items) == 1:
            return items[0]
        joined = combinator.join([item.values for item in items])
        return cls(joined) if joined is not None else None

    def _ensure_valid(self) -> None:
        result = self.validate()
        if not result.valid:
            code = ErrorCode.INVALID_CHECKSUM
            if not result.meta:
                code = ErrorCode.INVALID_SYMBOL
            raise StructureError(code, "; ".join(result.errors))
