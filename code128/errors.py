"""
Error types for the Code 128 codec.

Two families are raised:
- InputError: the shape of an argument is wrong (None, empty, out of range)
- StructureError: the symbols or modules do not form a valid Code 128 sequence

Both derive from Code128Error, which is a ValueError.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes."""
    NULL_INPUT = "NULL_INPUT"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_AI = "INVALID_AI"
    INVALID_SUBTYPE = "INVALID_SUBTYPE"
    INVALID_START_CODE = "INVALID_START_CODE"
    INVALID_SYMBOL = "INVALID_SYMBOL"
    INVALID_STOP_CODE = "INVALID_STOP_CODE"
    INVALID_CHECKSUM = "INVALID_CHECKSUM"
    INVALID_PATTERN = "INVALID_PATTERN"
    PATTERN_TOO_SHORT = "PATTERN_TOO_SHORT"
    SEQUENCE_TOO_SHORT = "SEQUENCE_TOO_SHORT"
    UNENCODABLE_CHARACTER = "UNENCODABLE_CHARACTER"


class Code128Error(ValueError):
    """
    Base error of the codec.

    Attributes:
        code: Machine-readable error code
        message: Human-readable message
        at_index: Symbol or module position the error was detected at
    """

    def __init__(self, code: ErrorCode, message: str, at_index: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.at_index = at_index

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'message': self.message,
            'at_index': self.at_index,
        }


class InputError(Code128Error):
    """An argument was None, empty or out of range."""


class StructureError(Code128Error):
    """Symbols or module patterns do not form a valid sequence."""
