"""Data model describing one generated section of the options document."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from optdoc.member import Member


@dataclass(frozen=True)
class SectionSpec:
    """Where a section's members come from and how they are filtered."""

    prefix: str  # heading prefix, e.g. globals.winopts
    type_name: str
    path: tuple[str, ...] = ()  # location of the defaults in the snapshot
    skip: frozenset[str] = frozenset()
    allow: frozenset[str] | None = None
    nested: Mapping[str, "SectionSpec"] = field(default_factory=dict)
    fixed: tuple[Member, ...] = ()

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> "SectionSpec":
        """Build a spec from its configuration mapping."""
        allow = raw.get("allow")
        return cls(
            prefix=str(raw["prefix"]),
            type_name=str(raw["type"]),
            path=tuple(raw.get("path") or ()),
            skip=frozenset(raw.get("skip") or ()),
            allow=frozenset(allow) if allow is not None else None,
            nested={
                str(name): cls.from_config(sub)
                for name, sub in (raw.get("nested") or {}).items()
            },
            fixed=tuple(
                Member(
                    name=str(m["name"]),
                    typ=m.get("typ"),
                    description=m.get("description"),
                )
                for m in (raw.get("fixed") or [])
            ),
        )
