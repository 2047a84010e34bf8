"""Logic for turning the extractor's JSON payload into type definitions."""

from typing import Any

from optdoc.member import Member
from optdoc.type_definition import TypeDefinition


def parse_extraction(data: dict[str, Any]) -> list[TypeDefinition]:
    """Convert a decoded ``{"types": [...]}`` payload into TypeDefinitions."""
    types: list[TypeDefinition] = []
    for raw in data.get("types") or []:
        if not isinstance(raw, dict) or not raw.get("name"):
            continue
        members = tuple(
            Member(
                name=str(m["name"]),
                typ=str(m["typ"]) if m.get("typ") is not None else None,
                description=m.get("description"),
            )
            for m in (raw.get("members") or [])
            if isinstance(m, dict) and m.get("name")
        )
        bases = tuple(str(b) for b in (raw.get("bases") or []))
        types.append(TypeDefinition(name=str(raw["name"]), members=members, bases=bases))
    return types
