"""Logic for loading the live defaults mapping of the documented project."""

import importlib
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def load_snapshot(module: str, attribute: str, root: Path) -> Mapping[str, Any]:
    """Import ``module`` from ``root`` and return its defaults mapping."""
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    mod = importlib.import_module(module)
    defaults = getattr(mod, attribute)
    if not isinstance(defaults, Mapping):
        msg = f"{module}.{attribute} is not a mapping"
        raise TypeError(msg)
    return defaults
