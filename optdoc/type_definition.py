"""Data model for an extracted schema type."""

from dataclasses import dataclass, field

from optdoc.member import Member


@dataclass(frozen=True)
class TypeDefinition:
    """Represents a class in the schema with its own members and base names."""

    name: str
    members: tuple[Member, ...] = field(default_factory=tuple)
    bases: tuple[str, ...] = field(default_factory=tuple)

    def has_member(self, name: str) -> bool:
        """Check whether this type declares a member with the exact name."""
        return any(m.name == name for m in self.members)
