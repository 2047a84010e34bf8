"""Data model for a single documented schema field."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Represents one field of an extracted type."""

    name: str
    typ: str | None  # raw signature, e.g. "(string|number)?"
    description: str | None = None
