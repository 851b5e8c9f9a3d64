from enum import Enum
from typing import Optional


class FieldCode(str, Enum):
    """
    Field codes understood in a QIF transaction record.

    The value is the leading character of the QIF line.
    """
    DATE = "D"
    REFERENCE = "N"
    NOTE = "M"
    AMOUNT = "T"
    TERMINATOR = "^"

    @classmethod
    def from_char(cls, code: str) -> Optional["FieldCode"]:
        """Return the member for ``code`` or ``None`` when it is not a known code."""
        try:
            return cls(code)
        except ValueError:
            return None
