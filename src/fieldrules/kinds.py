"""Closed classification of field values."""

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kinds of value a rule knows how to evaluate."""
    INTEGER = "integer"
    TEXT = "text"
    SEQUENCE = "sequence"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """Return the kind of a field value.

    ``bool`` is a subclass of ``int`` but is not treated as an integer.
    """
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER
