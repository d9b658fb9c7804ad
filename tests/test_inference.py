# ==============================================
# Tests for Type Inference Module
# ==============================================
#
# TypeProbe: literal string → INTEGER / FLOAT / STRING
# FieldType: tags and the widening table
# ==============================================

import pytest

from flatland.inference import FieldType, TypeProbe


# ==============================================
# TypeProbe
# ==============================================

class TestTypeProbe:
    """Tests for classifying single literals."""

    @pytest.mark.parametrize("value", ["0", "42", "-7", "+3", "9223372036854775807", "-9223372036854775808"])
    def test_integers(self, value):
        assert TypeProbe.probe(value) is FieldType.INTEGER

    @pytest.mark.parametrize("value", ["9.99", "-0.5", "1e10", "2.5E-3", ".5", "nan", "inf"])
    def test_floats(self, value):
        assert TypeProbe.probe(value) is FieldType.FLOAT

    @pytest.mark.parametrize("value", ["apple", "", "1.2.3", "0x1F", "12abc", "1,000", "192.168.1.1"])
    def test_strings(self, value):
        assert TypeProbe.probe(value) is FieldType.STRING

    def test_integer_out_of_64bit_range_is_float(self):
        """Too large for int64 → falls back to the float parse."""
        assert TypeProbe.probe("9223372036854775808") is FieldType.FLOAT
        assert TypeProbe.probe("-9223372036854775809") is FieldType.FLOAT

    def test_probe_is_deterministic(self):
        for value in ["10", "9.99", "banana"]:
            assert TypeProbe.probe(value) is TypeProbe.probe(value)


# ==============================================
# FieldType
# ==============================================

class TestFieldType:
    """Tests for type tags and widening."""

    def test_tags(self):
        assert FieldType.STRING.tag == "FIELD_TYPE_STRING"
        assert FieldType.INTEGER.tag == "FIELD_TYPE_INTEGER"
        assert FieldType.FLOAT.tag == "FIELD_TYPE_FLOAT"
        assert FieldType.UNKNOWN.tag == "FIELD_TYPE_UNKNOWN"

    @pytest.mark.parametrize("current, observed, expected", [
        (FieldType.UNKNOWN, FieldType.INTEGER, FieldType.INTEGER),
        (FieldType.UNKNOWN, FieldType.FLOAT, FieldType.FLOAT),
        (FieldType.UNKNOWN, FieldType.STRING, FieldType.STRING),
        (FieldType.INTEGER, FieldType.INTEGER, FieldType.INTEGER),
        (FieldType.INTEGER, FieldType.FLOAT, FieldType.FLOAT),
        (FieldType.INTEGER, FieldType.STRING, FieldType.STRING),
        (FieldType.FLOAT, FieldType.INTEGER, FieldType.FLOAT),
        (FieldType.FLOAT, FieldType.FLOAT, FieldType.FLOAT),
        (FieldType.FLOAT, FieldType.STRING, FieldType.STRING),
        (FieldType.STRING, FieldType.INTEGER, FieldType.STRING),
        (FieldType.STRING, FieldType.FLOAT, FieldType.STRING),
        (FieldType.STRING, FieldType.STRING, FieldType.STRING),
    ])
    def test_widening_table(self, current, observed, expected):
        assert current.widen(observed) is expected

    def test_only_string_is_terminal(self):
        assert [t for t in FieldType if t.is_terminal] == [FieldType.STRING]

    def test_values_match_config_names(self):
        assert FieldType("unknown") is FieldType.UNKNOWN
        assert FieldType("integer") is FieldType.INTEGER
