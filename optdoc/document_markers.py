"""Line predicates for the anchors inside the options document."""

from collections.abc import Callable, Sequence

GLOBAL_OPTIONS_HEADER = "## Global Options"
GLOBAL_ENTRY_PREFIX = "#### globals."
TRAILER_HEADER = "## Pickers"


def is_global_options_start(line: str) -> bool:
    """Check if the line opens the global options section."""
    return line.startswith(GLOBAL_OPTIONS_HEADER)


def is_global_entry(line: str) -> bool:
    """Check if the line is a generated ``#### globals.*`` entry heading."""
    return line.startswith(GLOBAL_ENTRY_PREFIX)


def is_trailer_start(line: str) -> bool:
    """Check if the line opens the static section kept after generated content."""
    return line.startswith(TRAILER_HEADER)


def is_blank(line: str) -> bool:
    return not line.strip()


def find_line(
    lines: Sequence[str], predicate: Callable[[str], bool], start: int = 0
) -> int | None:
    """Return the index of the first line at or after ``start`` matching."""
    for i in range(start, len(lines)):
        if predicate(lines[i]):
            return i
    return None
