"""
Tests for the Code 128 symbol table and symbol naming.
"""

import pytest

from code128 import ErrorCode, InputError, StructureError, Subtype, symbol_name
from code128.symbols import (
    PATTERNS,
    REVERSED_STOP_PATTERN,
    STOP_PATTERN,
    get_pattern,
    get_pattern_string,
    pattern_to_value,
    subtype_of_start,
)


class TestPatternTable:
    """Test the value to module pattern bijection."""

    def test_table_size(self):
        """Every symbol value 0..106 has an 11-module pattern."""
        assert len(PATTERNS) == 107
        assert all(len(p) == 11 for p in PATTERNS), "All patterns must be 11 modules wide"

    def test_patterns_are_unique(self):
        """No two values share a pattern."""
        assert len(set(PATTERNS)) == 107

    def test_start_and_stop_patterns(self):
        """Start codes and the full Stop pattern."""
        assert get_pattern_string(103) == "11010000100"
        assert get_pattern_string(104) == "11010010000"
        assert get_pattern_string(105) == "11010011100"
        assert STOP_PATTERN == "1100011101011"
        assert REVERSED_STOP_PATTERN == "1101011100011"

    def test_reverse_lookup(self):
        """pattern_to_value inverts the table."""
        for value in (0, 42, 99, 102, 106):
            assert pattern_to_value(PATTERNS[value]) == value
        assert pattern_to_value("11111111111") is None

    def test_bool_pattern(self):
        """Black modules are True."""
        assert get_pattern(0) == [c == "1" for c in "11011001100"]

    def test_out_of_range_value(self):
        """Values outside 0..106 are rejected."""
        with pytest.raises(InputError) as exc_info:
            get_pattern_string(107)
        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT

        with pytest.raises(InputError):
            get_pattern(-1)


class TestSubtype:
    """Test character set helpers."""

    def test_subtype_of_start(self):
        assert subtype_of_start(103) is Subtype.A
        assert subtype_of_start(104) is Subtype.B
        assert subtype_of_start(105) is Subtype.C
        assert subtype_of_start(106) is None
        assert subtype_of_start(42) is None

    def test_coerce_name(self):
        """Names are case-insensitive."""
        assert Subtype.coerce("b") is Subtype.B
        assert Subtype.coerce(Subtype.C) is Subtype.C

    def test_coerce_invalid(self):
        with pytest.raises(StructureError) as exc_info:
            Subtype.coerce("D")
        assert exc_info.value.code == ErrorCode.INVALID_SUBTYPE


class TestSymbolName:
    """Test conversion of symbol values to their string form."""

    def test_printable_characters(self):
        assert symbol_name(Subtype.B, 33) == "A"
        assert symbol_name(Subtype.B, 65) == "a"
        assert symbol_name(Subtype.A, 33) == "A"

    def test_control_characters_in_a(self):
        """Values 64-95 in set A are ASCII 0-31."""
        assert symbol_name(Subtype.A, 64) == "\x00"
        assert symbol_name(Subtype.A, 73) == "\t"

    def test_digit_pairs_in_c(self):
        assert symbol_name(Subtype.C, 5) == "05"
        assert symbol_name(Subtype.C, 99) == "99"

    def test_control_names(self):
        assert symbol_name(Subtype.B, 102) == "[FNC1]"
        assert symbol_name(Subtype.A, 98) == "[Shift B]"
        assert symbol_name(Subtype.B, 98) == "[Shift A]"
        assert symbol_name(Subtype.A, 99) == "[Code C]"
        assert symbol_name(Subtype.A, 100) == "[Code B]"
        assert symbol_name(Subtype.A, 101) == "[FNC4]"
        assert symbol_name(Subtype.B, 100) == "[FNC4]"
        assert symbol_name(Subtype.B, 101) == "[Code A]"
        assert symbol_name(Subtype.C, 100) == "[Code B]"
        assert symbol_name(Subtype.C, 101) == "[Code A]"
        assert symbol_name(Subtype.B, 96) == "[FNC3]"
        assert symbol_name(Subtype.B, 97) == "[FNC2]"

    def test_start_stop_names(self):
        assert symbol_name(Subtype.C, 105) == "[Start C]"
        assert symbol_name(Subtype.A, 106) == "[Stop]"
