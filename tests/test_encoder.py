"""
Tests for the Code 128 encoder.

Expected symbol values are worked out from the character set tables:
- Set A/B: ASCII 32-95 -> value-32; set A: ASCII 0-31 -> value+64
- Set B: ASCII 96-127 -> value-32
- Set C: digit pairs 00-99
"""

import pytest

from code128 import EncodeOptions, ErrorCode, InputError, StructureError, Subtype
from code128.core.decoder import decode_text
from code128.core.encoder import encode, encode_data, encode_gs1, encode_gs1_data, to_bytes


class TestSingleSet:
    """Test payloads that fit the start set."""

    def test_set_b_text(self):
        """'Kingcean' in set B, check symbol 64."""
        assert encode(Subtype.B, "Kingcean") == (104, 43, 73, 78, 71, 67, 69, 65, 78, 64, 106)

    def test_set_c_even_digits(self):
        assert encode(Subtype.C, "1234") == (105, 12, 34, 82, 106)

    def test_empty_payload(self):
        """An empty payload gives Start, check symbol and Stop."""
        assert encode(Subtype.B, "") == (104, 1, 106)

    def test_subtype_by_name(self):
        assert encode("b", "A") == encode(Subtype.B, "A")

    def test_invalid_subtype(self):
        with pytest.raises(StructureError):
            encode("X", "A")


class TestSetChanges:
    """Test latch and shift selection."""

    def test_latch_for_lowercase_run(self):
        assert encode_data(Subtype.A, "ab") == [100, 65, 66]

    def test_latch_for_last_character(self):
        """No character follows, so a latch is used instead of a shift."""
        assert encode_data(Subtype.A, "Ab") == [33, 100, 66]

    def test_shift_for_single_character(self):
        """A single lowercase character between set A characters is shifted."""
        data = encode_data(Subtype.A, "aB")
        assert data == [98, 65, 34]
        assert decode_text((103, *data, 0, 106)) == "aB"

    def test_shift_disabled(self):
        options = EncodeOptions(use_shift=False)
        assert encode_data(Subtype.A, "aB", options) == [100, 65, 34]

    def test_control_character_latches_to_a(self):
        assert encode_data(Subtype.B, "\t") == [101, 73]

    def test_leave_set_c(self):
        assert encode_data(Subtype.C, "12A") == [12, 100, 33]

    def test_held_digit_flushed_after_latch(self):
        """An odd digit before a letter is written in set B after the latch."""
        data = encode_data(Subtype.C, "1A")
        assert data == [100, 17, 33]
        assert decode_text((105, *data, 0, 106)) == "1A"

    def test_odd_digit_count(self):
        """A trailing odd digit is written in set A."""
        assert encode(Subtype.C, "123") == (105, 12, 101, 19, 67, 106)
        assert decode_text(encode(Subtype.C, "123")) == "123"


class TestExtendedCharacters:
    """Test characters 128-255 written with FNC4."""

    def test_single_extended_character(self):
        data = encode_data(Subtype.B, "\xe9")
        assert data == [100, 73]
        assert decode_text((104, *data, 0, 106)) == "\xe9"

    def test_long_run_uses_sticky_fnc4(self):
        assert encode_data(Subtype.B, "\xc0\xc0\xc0\xc0") == [100, 100, 32, 32, 32, 32]

    def test_sticky_run_followed_by_ascii(self):
        data = encode_data(Subtype.B, "\xc0\xc0\xc0\xc0A")
        assert data == [100, 100, 32, 32, 32, 32, 100, 33]
        assert decode_text((104, *data, 0, 106)) == "\xc0\xc0\xc0\xc0A"

    def test_sticky_disabled(self):
        options = EncodeOptions(sticky_fnc4_run=None)
        assert encode_data(Subtype.B, "\xc0\xc0", options) == [100, 32, 100, 32]

    def test_extended_control_character(self):
        """FNC4 follows the latch, so it is read in the new set."""
        data = encode_data(Subtype.B, "\x85")
        assert data == [101, 101, 69]
        assert decode_text((104, *data, 0, 106)) == "\x85"

    @pytest.mark.parametrize("text", [
        "Hello, World!",
        "Tab\there",
        "ABC123456789xyz",
        "caf\xe9 cr\xe8me br\xfbl\xe9e",
        "\xc0\xc1\xc2\xc3\xc4 end",
        "0",
    ])
    def test_text_survives_encoding(self, text):
        for subtype in Subtype:
            encoded = encode(subtype, text)
            assert decode_text(encoded) == text, \
                f"Round trip failed for {text!r} starting in {subtype.value}: {encoded}"


class TestPayload:
    """Test payload conversion."""

    def test_bytes_payload(self):
        assert encode(Subtype.B, b"Kingcean") == encode(Subtype.B, "Kingcean")

    def test_none_payload(self):
        with pytest.raises(InputError) as exc_info:
            to_bytes(None)
        assert exc_info.value.code == ErrorCode.NULL_INPUT

    def test_unencodable_character(self):
        with pytest.raises(InputError) as exc_info:
            to_bytes("A€")
        assert exc_info.value.code == ErrorCode.UNENCODABLE_CHARACTER
        assert exc_info.value.at_index == 1

    def test_wrong_payload_type(self):
        with pytest.raises(InputError) as exc_info:
            to_bytes(5)
        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT


class TestGS1:
    """Test GS1-128 element strings."""

    def test_ship_to_postal_code(self):
        assert encode_gs1(421, "84020500") == [102, 42, 18, 40, 20, 50, 101, 16]

    def test_two_digit_ai_is_padded(self):
        assert encode_gs1(1, "x") == [102, 1, 100, 88]

    def test_negative_ai(self):
        with pytest.raises(InputError) as exc_info:
            encode_gs1(-1, "12")
        assert exc_info.value.code == ErrorCode.INVALID_AI

    def test_empty_parts_skipped(self):
        assert encode_gs1_data(["0112", "", None, "10AB"]) == [102, 1, 12, 102, 10, 100, 33, 34]

    def test_return_to_set_c_between_parts(self):
        assert encode_gs1_data(["10A", "2112"]) == [102, 10, 100, 33, 99, 102, 21, 12]
