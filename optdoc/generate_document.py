"""Logic for merging static document regions with generated sections."""

from collections.abc import Mapping, Sequence
from typing import Any

from optdoc.fallback_header import FALLBACK_HEADER
from optdoc.render_section import render_section
from optdoc.section_spec import SectionSpec
from optdoc.split_document import (
    compute_static_preamble,
    locate_trailer_start,
    trailer_search_start,
)
from optdoc.type_graph import TypeGraph

SEPARATOR = ("", "---", "")


def generate_document(
    lines: Sequence[str],
    graph: TypeGraph,
    snapshot: Mapping[str, Any],
    sections: Sequence[SectionSpec],
) -> list[str]:
    """Return the regenerated document as a list of lines.

    The preamble (up to the first generated global entry) and the trailer
    (from ``## Pickers`` on) of ``lines`` are carried over verbatim; everything
    in between is rebuilt from ``graph`` and ``snapshot``.
    """
    output: list[str] = []

    preamble_end = compute_static_preamble(lines)
    if preamble_end is not None:
        output.extend(lines[: preamble_end + 1])
    else:
        output.extend(FALLBACK_HEADER)

    for spec in sections:
        output.extend(render_section(spec, graph, snapshot))

    trailer_start = locate_trailer_start(
        lines, trailer_search_start(lines, preamble_end)
    )
    if trailer_start is not None:
        output.extend(SEPARATOR)
        output.extend(lines[trailer_start:])
    return output
