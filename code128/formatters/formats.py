"""
Output formats of a symbol sequence.

Each format is rendered by its own function; render() picks one by the
Format member.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Sequence

from ..core.decoder import decode_text
from ..core.state import CharsetState
from ..symbols import PATTERNS, STOP, TERMINATION_BAR, Subtype, symbol_name, subtype_of_start

# Quiet zone, in modules, on each side of a rendered path
PATH_MARGIN = 10
DEFAULT_PATH_HEIGHT = 40


class Format(str, Enum):
    """The output string format."""
    REGULAR = "regular"  # Text with [FNCx] marks
    TEXT = "text"        # Text only
    VALUES = "values"    # Symbol values and control names
    HEX = "hex"          # Two hex digits per symbol
    BARCODE = "barcode"  # Modules, black as 1 and white as 0
    PATH = "path"        # SVG/XAML stroke path


def barcode_string(symbols: Sequence[int], black: str = "1", white: str = "0") -> str:
    """Render the module pattern, including the termination bar."""
    modules = "".join(PATTERNS[b] for b in symbols)
    if len(modules) > 10:
        modules += TERMINATION_BAR
    if black == "1" and white == "0":
        return modules
    return "".join(black if c == "1" else white for c in modules)


def path_string(symbols: Sequence[int], height: int = DEFAULT_PATH_HEIGHT) -> str:
    """Render one vertical stroke per black module, with a quiet zone on each side."""
    parts = ["M0,0"]
    x = PATH_MARGIN - 1
    for b in symbols:
        if b > STOP:
            continue
        for c in PATTERNS[b]:
            x += 1
            if c == "1":
                parts.append(f"M{x},0 L{x},{height}")
    parts.append(f"M{x + 1},0 L{x + 1},{height}")
    parts.append(f"M{x + 2},0 L{x + 2},{height}")
    parts.append(f"M{x + 2 + PATH_MARGIN},0")
    return " ".join(parts)


def _render_regular(symbols: Sequence[int]) -> str:
    return decode_text(symbols, annotate=True)


def _render_text(symbols: Sequence[int]) -> str:
    return decode_text(symbols, annotate=False)


def _render_hex(symbols: Sequence[int]) -> str:
    return "".join(f"{b:02x}" for b in symbols)


def _render_values(symbols: Sequence[int]) -> str:
    state = CharsetState.from_start(symbols[0])
    items: List[str] = [symbol_name(state.active, symbols[0])]
    for b in symbols[1:-2]:
        current = state.active
        if b < 96 or (current is Subtype.C and b < 100):
            items.append(str(b))
        else:
            items.append(symbol_name(current, b))
        state.feed(b)
    items.append(f"[Check symbol {symbols[-2]}]")
    items.append("[Stop]")
    return " ".join(items)


def _render_barcode(symbols: Sequence[int]) -> str:
    return barcode_string(symbols)


def _render_path(symbols: Sequence[int]) -> str:
    return path_string(symbols)


_RENDERERS: Dict[Format, Callable[[Sequence[int]], str]] = {
    Format.REGULAR: _render_regular,
    Format.TEXT: _render_text,
    Format.VALUES: _render_values,
    Format.HEX: _render_hex,
    Format.BARCODE: _render_barcode,
    Format.PATH: _render_path,
}


def render(symbols: Sequence[int], fmt: Format = Format.REGULAR) -> str:
    """
    Render a complete sequence in the given format.

    Returns an empty string for sequences shorter than four symbols or
    without a valid Start code.
    """
    if len(symbols) < 4 or subtype_of_start(symbols[0]) is None:
        return ""
    return _RENDERERS[Format(fmt)](symbols)
