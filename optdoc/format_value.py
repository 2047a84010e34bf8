"""Logic for rendering default values as short display strings."""

from collections.abc import Mapping

from optdoc.function_tag import function_tag
from optdoc.value_kind import ValueKind, classify_value

MAX_WIDTH = 60
ELLIPSIS = "..."
CYCLE = "{...}"


def format_value(value: object) -> str:
    """Render a value for the ``Default:`` part of an option entry."""
    kind = classify_value(value)
    if kind is ValueKind.ABSENT:
        return "nil"
    if kind is ValueKind.TEXT:
        return str(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMERIC:
        return str(value)
    if kind is ValueKind.STRUCTURED:
        s = _inline(value)
        if len(s) > MAX_WIDTH:
            s = s[: MAX_WIDTH - len(ELLIPSIS)] + ELLIPSIS
        return s
    if kind is ValueKind.CALLABLE:
        return function_tag(value)
    return str(value)


def _inline(value: object, parents: frozenset[int] = frozenset()) -> str:
    """Single-line structural rendering, strings quoted.

    A container that contains itself is rendered as ``{...}``.
    """
    kind = classify_value(value)
    if kind is ValueKind.TEXT:
        return '"' + str(value).replace('"', '\\"') + '"'
    if kind is not ValueKind.STRUCTURED:
        return format_value(value)
    if id(value) in parents:
        return CYCLE
    parents = parents | {id(value)}
    if isinstance(value, Mapping):
        items = [f"{_key(k)} = {_inline(v, parents)}" for k, v in value.items()]
    elif isinstance(value, (set, frozenset)):
        items = sorted(_inline(v, parents) for v in value)
    else:
        items = [_inline(v, parents) for v in value]  # type: ignore[attr-defined]
    return "{" + ", ".join(items) + "}"


def _key(k: object) -> str:
    if isinstance(k, str) and k.isidentifier():
        return k
    return f"[{_inline(k)}]"
