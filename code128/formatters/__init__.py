"""
Output formatters for the Code 128 codec.
"""

from .formats import (
    Format,
    render,
    barcode_string,
    path_string,
)
from .json_formatter import (
    sequence_to_dict,
    sequence_to_json,
)

__all__ = [
    "Format",
    "render",
    "barcode_string",
    "path_string",
    "sequence_to_dict",
    "sequence_to_json",
]
