"""
JSON Formatter for Code 128 sequences

Provides a dictionary/JSON view of a sequence with:
- Raw symbol values, start set, check symbol and validity
- Decoded text
- GS1 element strings keyed by human-readable AI title
"""

from __future__ import annotations

import json
from typing import Any, Dict

from ..ai_catalog import split_element
from ..core.decoder import decode_ai, iter_subtypes_used
from ..validators.validators import validate_sequence
from .formats import Format, render


def sequence_to_dict(symbols, include_pattern: bool = False) -> Dict[str, Any]:
    """
    Describe a symbol sequence as a dictionary.

    Args:
        symbols: A Code128 or any sequence of symbol values
        include_pattern: Include the module pattern string

    Returns:
        Dictionary with symbols, subtypes, checksum, validity, text and AI data
    """
    symbols = tuple(symbols)
    validation = validate_sequence(symbols)

    output: Dict[str, Any] = {
        "symbols": list(symbols),
        "subtypes": [s.value for s in iter_subtypes_used(symbols)],
        "checksum": symbols[-2] if len(symbols) > 3 else None,
        "valid": validation.valid,
        "text": render(symbols, Format.TEXT),
        "regular": render(symbols, Format.REGULAR),
    }

    if validation.errors:
        output["errors"] = validation.errors

    records = [split_element(element) for element in decode_ai(symbols)]
    if records:
        output["ai"] = [
            {"ai": r.ai, "title": r.title, "data": r.data}
            for r in records
        ]
        fields: Dict[str, str] = {}
        for r in records:
            key = r.title if r.title else f"AI({r.ai})"
            if key in fields:
                key = f"{key} ({r.ai})"
            fields[key] = r.data
        output["fields"] = fields

    if include_pattern:
        output["pattern"] = render(symbols, Format.BARCODE)

    return output


def sequence_to_json(symbols, include_pattern: bool = False) -> str:
    """Describe a symbol sequence as JSON."""
    return json.dumps(
        sequence_to_dict(symbols, include_pattern=include_pattern),
        ensure_ascii=False,
        indent=2,
    )
