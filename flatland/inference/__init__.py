# ==============================================
# TYPE INFERENCE
# ==============================================
#
# This package decides which scalar type a CSV column holds.
# It knows nothing about files or rows: it classifies single
# string values and combines classifications per field.
#
# Modules:
# --------
# - field_type.py  → FieldType enum, widening rules, allowed seed types
# - type_probe.py  → Classify one literal as integer / float / string
#
# ==============================================

from .field_type import SEED_TYPES, FieldType
from .type_probe import TypeProbe

__all__ = ["FieldType", "SEED_TYPES", "TypeProbe"]
