"""Logic for building the fixed emission order of generated sections."""

from typing import Any

from optdoc.section_spec import SectionSpec


def build_sections(config: dict[str, Any]) -> list[SectionSpec]:
    """Build section specs in document order from the configuration.

    A section flagged ``global`` only documents names in ``global_options``.
    """
    sections = []
    for raw in config.get("sections") or []:
        if raw.get("global"):
            raw = {**raw, "allow": config.get("global_options") or []}
        sections.append(SectionSpec.from_config(raw))
    return sections
