# ==============================================
# FieldType
# ==============================================
#
# PURPOSE:
#   The scalar type inferred for one field (column), and the rule
#   that moves a field from one type to the next as values arrive.
#
# ENUM: FieldType
# ---------------
#   UNKNOWN  → no observation yet (only reachable with an "unknown" seed)
#   STRING   → most general; terminal
#   INTEGER  → every value so far parsed as a 64-bit integer
#   FLOAT    → every value so far parsed as an integer or a float
#
#   Strictness order: INTEGER < FLOAT < STRING.
#
#   Methods:
#   --------
#   - tag -> str
#       Log tag, e.g. "FIELD_TYPE_INTEGER".
#
#   - widen(observed: FieldType) -> FieldType
#       Next type for a field currently of this type, given the
#       probed type of a new cell:
#
#       current \ observed | INTEGER | FLOAT | STRING
#       -------------------+---------+-------+-------
#       UNKNOWN            | INTEGER | FLOAT | STRING
#       INTEGER            | INTEGER | FLOAT | STRING
#       FLOAT              | FLOAT   | FLOAT | STRING
#       STRING             | STRING  | STRING| STRING
#
# ==============================================

from enum import Enum


class FieldType(Enum):
    """
    Enumeration of scalar types a field can be inferred as.
    
    Values are the lowercase names used in configuration
    (e.g. CACHE_SEED_TYPE=unknown).
    """
    UNKNOWN = "unknown"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"

    @property
    def tag(self) -> str:
        """Literal tag used when reporting field types."""
        return f"FIELD_TYPE_{self.name}"

    @property
    def is_terminal(self) -> bool:
        return self is FieldType.STRING

    def widen(self, observed: "FieldType") -> "FieldType":
        """
        Combine the current field type with the probed type of a new cell.
        
        Types only ever move towards STRING; a field never narrows.
        
        Args:
            observed: Type the probe assigned to the new cell value
            
        Returns:
            The field's next type
        """
        if self is FieldType.STRING:
            return FieldType.STRING

        if self is FieldType.FLOAT:
            # Integers fit in a float column; only a string can move it
            if observed is FieldType.STRING:
                return FieldType.STRING
            return FieldType.FLOAT

        # UNKNOWN and INTEGER take whatever the cell says
        return observed


# Types a field may start from before the first data row
SEED_TYPES = (FieldType.INTEGER, FieldType.UNKNOWN)
