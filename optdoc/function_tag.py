"""Utility for naming callables without serializing them."""

from typing import Any


def function_tag(func: Any) -> str:
    """Return a stable placeholder such as ``<function:42>`` for a callable."""
    code = getattr(func, "__code__", None)
    if code is not None:
        return f"<function:{code.co_firstlineno}>"
    name = getattr(func, "__qualname__", None) or type(func).__name__
    return f"<function:{name}>"
