"""
Validation modules for the Code 128 codec.
"""

from .validators import (
    calculate_checksum,
    checksum,
    validate_sequence,
    is_valid_sequence,
    ValidationResult,
    CHECKSUM_MODULUS,
    MIN_SEQUENCE_LENGTH,
)

__all__ = [
    "calculate_checksum",
    "checksum",
    "validate_sequence",
    "is_valid_sequence",
    "ValidationResult",
    "CHECKSUM_MODULUS",
    "MIN_SEQUENCE_LENGTH",
]
