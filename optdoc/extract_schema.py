"""Statically extract schema classes from Python sources as JSON.

Every top-level class becomes a type named ``<module>.<Class>``. Annotated
class attributes become members; the string literal directly below an
attribute is its description:

    class Winopts(Base):
        row: float | None = None
        \"\"\"Screen row where to place the window.\"\"\"

Usage:
    python -m optdoc.extract_schema fuzzy/config --root .
"""

from __future__ import annotations

import argparse
import ast
import inspect
import json
import sys
from pathlib import Path
from typing import Any


def module_name(path: Path, root: Path) -> str:
    """Dotted module name of ``path`` relative to ``root``."""
    try:
        rel = path.resolve().relative_to(root.resolve())
    except ValueError:
        rel = Path(path.name)
    parts = list(rel.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def extract_types(source_dir: Path, root: Path) -> list[dict[str, Any]]:
    """Parse all ``*.py`` files under ``source_dir`` and describe their classes."""
    classes: list[tuple[str, ast.ClassDef]] = []
    for f in sorted(source_dir.rglob("*.py")):
        tree = ast.parse(f.read_text(encoding="utf-8"), filename=str(f))
        mod = module_name(f, root)
        classes.extend(
            (mod, node) for node in tree.body if isinstance(node, ast.ClassDef)
        )

    known = {_qualify(mod, node.name) for mod, node in classes}
    by_short: dict[str, list[str]] = {}
    for name in sorted(known):
        by_short.setdefault(name.rsplit(".", 1)[-1], []).append(name)

    types = []
    for mod, node in classes:
        types.append(
            {
                "name": _qualify(mod, node.name),
                "members": _members(node),
                "bases": [
                    _resolve_base(ast.unparse(b), mod, known, by_short)
                    for b in node.bases
                ],
            }
        )
    return types


def _qualify(mod: str, name: str) -> str:
    return f"{mod}.{name}" if mod else name


def _members(node: ast.ClassDef) -> list[dict[str, Any]]:
    members = []
    body = node.body
    for i, stmt in enumerate(body):
        if not isinstance(stmt, ast.AnnAssign) or not isinstance(stmt.target, ast.Name):
            continue
        member: dict[str, Any] = {
            "name": stmt.target.id,
            "typ": ast.unparse(stmt.annotation),
        }
        doc = _attribute_doc(body[i + 1] if i + 1 < len(body) else None)
        if doc:
            member["description"] = doc
        members.append(member)
    return members


def _attribute_doc(stmt: ast.stmt | None) -> str | None:
    if (
        isinstance(stmt, ast.Expr)
        and isinstance(stmt.value, ast.Constant)
        and isinstance(stmt.value.value, str)
    ):
        return inspect.cleandoc(stmt.value.value)
    return None


def _resolve_base(
    text: str, mod: str, known: set[str], by_short: dict[str, list[str]]
) -> str:
    """Map a base expression onto an extracted type name when unambiguous."""
    if _qualify(mod, text) in known:
        return _qualify(mod, text)
    if text in known:
        return text
    candidates = by_short.get(text.rsplit(".", 1)[-1], [])
    if len(candidates) == 1:
        return candidates[0]
    return text


def main() -> int:
    """Print the extracted types of a schema directory as JSON."""
    ap = argparse.ArgumentParser(
        description="Extract schema classes and attribute docstrings as JSON."
    )
    ap.add_argument(
        "source_dir",
        type=Path,
        help="Directory containing the schema *.py files",
    )
    ap.add_argument(
        "--root",
        type=Path,
        default=Path(),
        help="Directory module names are relative to (default: current directory)",
    )
    args = ap.parse_args()

    if not args.source_dir.is_dir():
        print(f"Not a directory: {args.source_dir}", file=sys.stderr)
        return 2
    try:
        types = extract_types(args.source_dir, args.root)
    except SyntaxError as e:
        print(f"{e.filename}:{e.lineno}: {e.msg}", file=sys.stderr)
        return 1

    print(json.dumps({"types": types}, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
