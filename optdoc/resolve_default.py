"""Logic for reading literal default values out of the live defaults mapping."""

from collections.abc import Mapping, Sequence
from typing import Any

from optdoc.function_tag import function_tag


def resolve_default(snapshot: Mapping[str, Any], path: Sequence[Any]) -> Any:
    """Walk ``path`` into ``snapshot`` and return the value found there.

    Returns None when a step lands on a missing key or on a non-mapping node.
    Callables are replaced by their placeholder tag.
    """
    val: Any = snapshot
    for part in path:
        if not isinstance(val, Mapping):
            return None
        val = val.get(part)
    if callable(val):
        return function_tag(val)
    return val
