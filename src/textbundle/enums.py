"""Enumerations for TextBundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class MissingKeyPolicy(StrEnum):
    """What a lookup does when no catalog in the chain has the key.

    StrEnum provides automatic string conversion: str(MissingKeyPolicy.RAISE) == "raise"
    """

    RAISE = "raise"
    """Raise MissingKeyError."""

    SENTINEL = "sentinel"
    """Return the key wrapped in the sentinel marker: ???key???"""


class FormatType(StrEnum):
    """Format type tag of a template placeholder: {0,number}, {1,date,short}."""

    NONE = ""
    """Untyped placeholder: {0}"""

    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    CHOICE = "choice"


__all__ = [
    "FormatType",
    "MissingKeyPolicy",
]
