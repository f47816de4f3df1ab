"""
Core encoding and decoding modules for the Code 128 codec.
"""

from .state import CharsetState, Event, EventKind
from .encoder import EncodeOptions, encode, encode_data, encode_gs1, encode_gs1_data
from .decoder import decode_ai, decode_pattern, decode_text, iter_subtypes_used
from .combinator import concat, join
from .sequence import Code128

__all__ = [
    "CharsetState",
    "Event",
    "EventKind",
    "EncodeOptions",
    "encode",
    "encode_data",
    "encode_gs1",
    "encode_gs1_data",
    "decode_ai",
    "decode_pattern",
    "decode_text",
    "iter_subtypes_used",
    "concat",
    "join",
    "Code128",
]
