"""Closed classification of runtime default values."""

from collections.abc import Mapping
from enum import Enum


class ValueKind(Enum):
    """Kinds of values a schema default can hold."""

    ABSENT = "absent"
    TEXT = "text"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    STRUCTURED = "structured"
    CALLABLE = "callable"
    OTHER = "other"


def classify_value(value: object) -> ValueKind:
    """Map a value onto its ValueKind."""
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, str):
        return ValueKind.TEXT
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMERIC
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return ValueKind.STRUCTURED
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OTHER
