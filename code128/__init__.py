"""
Code 128 / GS1-128 Barcode Codec

Encodes text, bytes and GS1 element strings into Code 128 symbol sequences,
and decodes symbol sequences and module patterns back into text and GS1
Application Identifier data.
"""

from .core.sequence import Code128
from .core.encoder import EncodeOptions
from .symbols import Subtype, symbol_name
from .errors import ErrorCode, Code128Error, InputError, StructureError
from .formatters.formats import Format
from .formatters.json_formatter import sequence_to_dict, sequence_to_json
from .validators.validators import (
    ValidationResult,
    calculate_checksum,
    validate_sequence,
    is_valid_sequence,
)
from .ai_catalog import AIEntry, AIRecord, lookup_ai, split_element

__version__ = "1.0.0"
__all__ = [
    "Code128",
    "EncodeOptions",
    "Subtype",
    "symbol_name",
    "ErrorCode",
    "Code128Error",
    "InputError",
    "StructureError",
    "Format",
    "sequence_to_dict",
    "sequence_to_json",
    "ValidationResult",
    "calculate_checksum",
    "validate_sequence",
    "is_valid_sequence",
    "AIEntry",
    "AIRecord",
    "lookup_ai",
    "split_element",
]
