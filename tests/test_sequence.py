"""
Tests for the Code128 value type.

Covers construction in each start set, GS1-128 element strings, joining,
output formats and the reference cases:
- "Kingcean" from raw set B values and from text in set A
- "[FNC1]42184020500" from raw set C values
- AI(421) 84020500 rendered as values with check symbol 92
- Sticky FNC4 high-bit toggling in set B
"""

import pytest

from code128 import (
    Code128,
    ErrorCode,
    Format,
    InputError,
    StructureError,
    Subtype,
)

KINGCEAN_B = [43, 73, 78, 71, 67, 69, 65, 78]


class TestReferenceCases:
    """Reference encodings that must decode exactly."""

    def test_raw_set_b_values(self):
        code = Code128.create_b(KINGCEAN_B)
        assert code.to_string() == "Kingcean"
        assert code.values == (104, *KINGCEAN_B, 64, 106)

    def test_text_in_set_a(self):
        code = Code128.create_a("Kingcean")
        assert code.to_string() == "Kingcean"
        assert code.get_subtypes_used() == [Subtype.A, Subtype.B]

    def test_raw_set_c_values(self):
        code = Code128.create_c([102, 42, 18, 40, 20, 50, 101, 16])
        assert code.to_string() == "[FNC1]42184020500"
        assert code.to_string(Format.TEXT) == "42184020500"
        assert list(code.get_ai_data()) == ["42184020500"]

    def test_gs1_values_format(self):
        code = Code128.create_gs1(421, "84020500")
        assert code.checksum == 92
        assert code.to_string(Format.VALUES) == \
            "[Start C] [FNC1] 42 18 40 20 50 [Code A] 16 [Check symbol 92] [Stop]"

    def test_sticky_fnc4_toggling(self):
        code = Code128.create_b([52, 100, 52, 52, 100, 100, 52, 52, 100, 52, 52, 100, 100, 52, 100, 100, 101, 52])
        assert code.to_string() == "T\xd4T\xd4\xd4T\xd4T\xd4"

    def test_combination(self):
        """GS1 elements and plain text joined with + and join()."""
        postal = Code128.create_gs1(421, "84020500")
        bank_account = Code128.create_gs1(8007, "100016")
        code = postal + (
            bank_account
            + Code128.create_a(" Something... ")
            + Code128.join([
                Code128.create_a("And "),
                Code128.create_c(123),
                Code128.create_gs1(21, "01234567890123456789"),
            ])
        )
        assert str(code) == \
            "[FNC1]42184020500[FNC1]8007100016 Something... And 123[FNC1]2101234567890123456789"
        assert code.is_valid
        assert code.subtype is Subtype.C

        records = code.get_ai_records()
        assert [(r.ai, r.data) for r in records] == [
            ("421", "84020500"),
            ("8007", "100016 Something... And 123"),
            ("21", "01234567890123456789"),
        ]
        assert records[1].title == "IBAN"


class TestConstruction:
    """Test the create_* family."""

    def test_create_by_subtype_name(self):
        assert Code128.create("B", "Kingcean") == Code128.create_b("Kingcean")

    def test_create_c_from_int(self):
        assert Code128.create_c(1234).values == (105, 12, 34, 82, 106)

    def test_create_from_bytes(self):
        assert Code128.create_b(b"Kingcean") == Code128.create_b(KINGCEAN_B)

    def test_gs1_parts(self):
        code = Code128.create_gs1_parts("0112", "", "10AB")
        assert list(code.get_ai_data()) == ["0112", "10AB"]

    def test_none_values(self):
        with pytest.raises(InputError) as exc_info:
            Code128.create_b(None)
        assert exc_info.value.code == ErrorCode.NULL_INPUT

    def test_empty_values(self):
        with pytest.raises(InputError) as exc_info:
            Code128.create_b("")
        assert exc_info.value.code == ErrorCode.EMPTY_INPUT

        with pytest.raises(InputError):
            Code128.create_gs1_parts("", None)

    def test_symbol_out_of_range(self):
        with pytest.raises(StructureError) as exc_info:
            Code128.create_b([107])
        assert exc_info.value.code == ErrorCode.INVALID_SYMBOL

    def test_start_code_inside_data(self):
        with pytest.raises(StructureError) as exc_info:
            Code128.create_b([33, 103])
        assert exc_info.value.code == ErrorCode.INVALID_SYMBOL

    def test_invalid_subtype(self):
        with pytest.raises(StructureError) as exc_info:
            Code128.create("D", "x")
        assert exc_info.value.code == ErrorCode.INVALID_SUBTYPE

    def test_negative_ai(self):
        with pytest.raises(InputError) as exc_info:
            Code128.create_gs1(-1, "x")
        assert exc_info.value.code == ErrorCode.INVALID_AI


class TestFromSymbols:
    """Test construction from raw symbols, including caller-supplied check symbols."""

    def test_completes_sequence(self):
        assert Code128.from_symbols([104, 33]).values == (104, 33, 34, 106)

    def test_supplied_checksum_is_kept(self):
        code = Code128.from_symbols([104, 33, 50, 106])
        assert code.checksum == 50
        assert not code.is_valid

    def test_strict_rejects_bad_checksum(self):
        with pytest.raises(StructureError) as exc_info:
            Code128.from_symbols([104, 33, 50, 106], strict=True)
        assert exc_info.value.code == ErrorCode.INVALID_CHECKSUM

    def test_strict_accepts_good_checksum(self):
        code = Code128.from_symbols([104, 33, 34, 106], strict=True)
        assert code.to_string() == "A"

    def test_missing_start_code(self):
        with pytest.raises(StructureError) as exc_info:
            Code128.from_symbols([33, 34])
        assert exc_info.value.code == ErrorCode.INVALID_START_CODE

    def test_no_data(self):
        with pytest.raises(StructureError) as exc_info:
            Code128.from_symbols([104, 33, 106])
        assert exc_info.value.code == ErrorCode.SEQUENCE_TOO_SHORT


class TestFromPattern:
    """Test construction from module patterns."""

    def test_round_trip(self):
        code = Code128.create_gs1(421, "84020500")
        assert Code128.from_pattern(code.to_barcode_string()) == code

    def test_reversed(self):
        code = Code128.create_b("Kingcean")
        assert Code128.from_pattern(code.to_barcode_string()[::-1]) == code

    def test_bool_modules(self):
        code = Code128.create_a("Kingcean")
        assert Code128.from_pattern(code.to_barcode()) == code

    def test_bad_checksum(self):
        bits = Code128.from_symbols([104, 33, 50, 106]).to_barcode_string()
        with pytest.raises(StructureError) as exc_info:
            Code128.from_pattern(bits)
        assert exc_info.value.code == ErrorCode.INVALID_CHECKSUM


class TestSequenceProtocol:
    """Test indexing, equality and joining operators."""

    def test_indexing(self):
        code = Code128.create_b(KINGCEAN_B)
        assert len(code) == 11
        assert code[0] == 104
        assert code[-1] == 106
        assert list(code) == [104, *KINGCEAN_B, 64, 106]
        assert code.take_data() == tuple(KINGCEAN_B)

    def test_equality_and_hash(self):
        a = Code128.create_b("Kingcean")
        b = Code128.create_b(KINGCEAN_B)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Code128.create_a("Kingcean")

    def test_add_none(self):
        a = Code128.create_b("A")
        assert (a + None) is a
        assert (None + a) is a

    def test_add_wrong_type(self):
        with pytest.raises(TypeError):
            Code128.create_b("A") + "B"

    def test_join_edge_cases(self):
        a = Code128.create_b("A")
        assert Code128.join([a]) is a
        assert Code128.join([None, a]) is a
        assert Code128.join([None, None]) is None
        assert Code128.join(None) is None

    def test_repr(self):
        assert repr(Code128.create_b("A")) == "Code128([104, 33, 34, 106])"


class TestOutput:
    """Test the output formats."""

    def test_hex(self):
        assert Code128.create_b("Kingcean").to_string("hex") == "682b494e474345414e406a"

    def test_barcode(self):
        code = Code128.create_b("Kingcean")
        modules = code.to_barcode()
        assert len(modules) == 11 * 11 + 2
        assert modules[-2:] == [True, True]
        assert code.to_barcode_string() == "".join("1" if m else "0" for m in modules)

    def test_barcode_custom_characters(self):
        s = Code128.create_b("A").to_barcode_string(black="#", white=" ")
        assert set(s) == {"#", " "}
        assert s.endswith("##   ### # ##")

    def test_path(self):
        path = Code128.create_b("Kingcean").to_path_string()
        assert path.startswith("M0,0 M10,0 L10,40")
        assert path.endswith("M131,0 L131,40 M132,0 L132,40 M142,0")

    def test_path_height(self):
        assert "L10,20" in Code128.create_b("A").to_path_string(height=20)
