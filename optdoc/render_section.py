"""Logic for rendering all entries of one schema type."""

import logging
from collections.abc import Mapping
from typing import Any

from optdoc.render_option import render_option
from optdoc.resolve_default import resolve_default
from optdoc.section_spec import SectionSpec
from optdoc.type_graph import TypeGraph

logger = logging.getLogger(__name__)


def is_private_name(name: str) -> bool:
    """Check if the name follows the leading-underscore private convention."""
    return name.startswith("_")


def render_section(
    spec: SectionSpec,
    graph: TypeGraph,
    snapshot: Mapping[str, Any],
) -> list[str]:
    """Render one entry per documented member of ``spec.type_name``.

    Private, skipped, non-allowed and undescribed members are omitted. Members
    routed through ``spec.nested`` are rendered by a separate call against the
    nested spec, at the position the member is declared.
    """
    parts: list[str] = []
    seen: set[str] = set()

    for fixed in spec.fixed:
        seen.add(fixed.name)
        parts.extend(
            render_option(
                spec.prefix,
                fixed.name,
                fixed.typ,
                resolve_default(snapshot, (*spec.path, fixed.name)),
                fixed.description,
            )
        )

    ty = graph.get(spec.type_name)
    if ty is None:
        logger.debug("Type %s not extracted, omitting %s", spec.type_name, spec.prefix)
        return parts

    for member in ty.members:
        name = member.name
        if is_private_name(name) or name in spec.skip or name in seen:
            continue
        if spec.allow is not None and name not in spec.allow:
            continue

        nested = spec.nested.get(name)
        if nested is not None:
            seen.add(name)
            parts.extend(render_section(nested, graph, snapshot))
            continue

        if not isinstance(member.description, str) or not member.description.strip():
            continue
        seen.add(name)
        parts.extend(
            render_option(
                spec.prefix,
                name,
                member.typ,
                resolve_default(snapshot, (*spec.path, name)),
                member.description,
                inherited=graph.is_inherited(spec.type_name, name),
            )
        )
    return parts
