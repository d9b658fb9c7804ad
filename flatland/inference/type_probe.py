# ==============================================
# TypeProbe
# ==============================================
#
# PURPOSE:
#   Classify a single literal string as INTEGER, FLOAT or STRING.
#
# RULES:
# ------
#   1. Parses with int(value, 10) and fits in a signed 64-bit range → INTEGER
#   2. Parses with float(value)                                     → FLOAT
#   3. Anything else                                                → STRING
#
#   Python's numeric parsers define what counts as a literal:
#   surrounding whitespace, "_" digit separators, exponents,
#   "nan" and "inf" are accepted exactly as int()/float() accept them.
#   Integers too large for 64 bits fall through to FLOAT.
#
#   The probe is a pure function of the text. No locale, no state.
#
# ==============================================

from .field_type import FieldType


class TypeProbe:
    INT64_MIN = -(2 ** 63)
    INT64_MAX = 2 ** 63 - 1

    @classmethod
    def probe(cls, value: str) -> FieldType:
        """
        Classify a literal string.
        
        Args:
            value: Raw cell text
            
        Returns:
            FieldType.INTEGER, FieldType.FLOAT or FieldType.STRING
        """
        if cls._is_integer(value):
            return FieldType.INTEGER

        if cls._is_float(value):
            return FieldType.FLOAT

        return FieldType.STRING

    @classmethod
    def _is_integer(cls, value: str) -> bool:
        try:
            parsed = int(value, 10)
        except ValueError:
            return False
        return cls.INT64_MIN <= parsed <= cls.INT64_MAX

    @classmethod
    def _is_float(cls, value: str) -> bool:
        try:
            float(value)
            return True
        except ValueError:
            return False
