"""Logic for locating the static regions of an existing options document."""

import logging
from collections.abc import Sequence

from optdoc.document_markers import (
    find_line,
    is_blank,
    is_global_entry,
    is_global_options_start,
    is_trailer_start,
)

logger = logging.getLogger(__name__)


def compute_static_preamble(lines: Sequence[str]) -> int | None:
    """Return the inclusive index of the last preamble line, or None.

    The preamble runs up to the line before the first ``#### globals.`` entry
    of the global options section, minus trailing blank lines. None means the
    anchors are missing and the fallback header must be used.
    """
    start = find_line(lines, is_global_options_start)
    if start is None:
        logger.info("No '## Global Options' section found")
        return None
    first_entry = find_line(lines, is_global_entry, start)
    if first_entry is None:
        logger.info("No generated entry found after line %s", start + 1)
        return None
    end = first_entry - 1
    while end > start and is_blank(lines[end]):
        end -= 1
    return end


def locate_trailer_start(lines: Sequence[str], start: int = 0) -> int | None:
    """Return the index of the first ``## Pickers`` line at or after ``start``."""
    return find_line(lines, is_trailer_start, start)


def trailer_search_start(lines: Sequence[str], preamble_end: int | None) -> int:
    """Return where the trailer search begins for ``lines``."""
    if preamble_end is not None:
        return preamble_end + 1
    start = find_line(lines, is_global_options_start)
    return start if start is not None else 0
