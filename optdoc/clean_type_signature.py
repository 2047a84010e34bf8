"""Utility for tidying raw type signatures before display."""


def clean_type_signature(typ: str | None) -> str:
    """Drop one optional ``?`` marker and one layer of enclosing parentheses.

    ``(string|number)?`` becomes ``string|number``; ``(a)|(b)`` is kept since
    its parentheses do not enclose the whole signature.
    """
    if not typ:
        return "unknown"
    if typ.endswith("?"):
        typ = typ[:-1]
    if len(typ) > 2 and typ.startswith("(") and _closing_paren(typ) == len(typ) - 1:
        typ = typ[1:-1]
    return typ


def _closing_paren(typ: str) -> int | None:
    depth = 0
    for i, ch in enumerate(typ):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return None
