"""
Code 128 Checksum and Sequence Validation

Implements the modulo-103 weighted checksum and the structural checks of a
complete symbol sequence:
- Start code (103, 104 or 105) at position 0
- Data symbols in 0..102
- Checksum symbol at position len-2
- Stop code (106) at position len-1

Validation reports problems instead of raising, so a caller can inspect a
sequence that was built from trusted (unverified) symbols.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from ..symbols import MAX_DATA_VALUE, START_A, START_C, STOP

CHECKSUM_MODULUS = 103
MIN_SEQUENCE_LENGTH = 4


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def calculate_checksum(start_code: int, data: Iterable[int]) -> int:
    """
    Calculate the Code 128 check symbol.

    Algorithm (ISO/IEC 15417):
    1. Start with the value of the Start code
    2. Add each data symbol multiplied by its 1-based position
    3. Check symbol = sum mod 103

    Args:
        start_code: Start code value (103-105)
        data: Data symbols between the Start code and the check symbol

    Returns:
        Check symbol value (0-102)
    """
    total = start_code
    for position, value in enumerate(data, 1):
        total += value * position
    return total % CHECKSUM_MODULUS


def checksum(symbols: Sequence[int]) -> int:
    """
    Calculate the check symbol of a complete sequence (Start..Stop).

    The existing check symbol and Stop code are ignored.
    """
    if len(symbols) < 3:
        raise ValueError("A sequence needs at least Start, check symbol and Stop")
    return calculate_checksum(symbols[0], symbols[1:-2])


def validate_sequence(symbols: Sequence[int]) -> ValidationResult:
    """
    Validate every structural invariant of a complete symbol sequence.

    Args:
        symbols: Start code, data symbols, check symbol and Stop code

    Returns:
        ValidationResult; meta holds the provided and calculated check symbols
    """
    result = ValidationResult(valid=True)

    if symbols is None or len(symbols) < MIN_SEQUENCE_LENGTH:
        result.valid = False
        result.errors.append(
            f"Sequence must contain at least {MIN_SEQUENCE_LENGTH} symbols"
        )
        return result

    start = symbols[0]
    if not START_A <= start <= START_C:
        result.valid = False
        result.errors.append(f"Invalid start code: {start}")

    if symbols[-1] != STOP:
        result.valid = False
        result.errors.append(f"Last symbol must be the stop code, got {symbols[-1]}")

    for i, value in enumerate(symbols[1:-1], 1):
        if not 0 <= value <= MAX_DATA_VALUE:
            result.valid = False
            result.errors.append(f"Symbol {value} at position {i} is not valid")

    if not result.valid:
        return result

    calculated = checksum(symbols)
    provided = symbols[-2]
    result.meta['calculated_checksum'] = calculated
    result.meta['provided_checksum'] = provided
    result.meta['checksum_valid'] = (calculated == provided)

    if calculated != provided:
        result.valid = False
        result.errors.append(
            f"Checksum mismatch: expected {calculated}, got {provided}"
        )

    return result


def is_valid_sequence(symbols: Sequence[int]) -> bool:
    """Shorthand for validate_sequence(symbols).valid."""
    return validate_sequence(symbols).valid
