"""Tests for the type graph and extraction parsing."""

from optdoc.member import Member
from optdoc.parse_extraction import parse_extraction
from optdoc.type_definition import TypeDefinition
from optdoc.type_graph import TypeGraph


def _chain() -> TypeGraph:
    return TypeGraph.index(
        [
            TypeDefinition("Base", (Member("cwd", "string", "Working dir."),)),
            TypeDefinition("Derived", (Member("row", "number"),), ("Base",)),
            TypeDefinition("DerivedTwice", (), ("Derived",)),
        ]
    )


def test_index_last_write_wins() -> None:
    """Verify that a later type with the same name replaces the earlier one."""
    graph = TypeGraph.index(
        [
            TypeDefinition("A", (Member("old", "string"),)),
            TypeDefinition("A", (Member("new", "string"),)),
        ]
    )
    a = graph.get("A")
    assert a is not None
    assert [m.name for m in a.members] == ["new"]
    assert len(graph) == 1
    assert graph.get("Missing") is None


def test_inherited_through_chain() -> None:
    """Verify inheritance detection over single and multi-level chains."""
    graph = _chain()
    assert graph.is_inherited("Derived", "cwd")
    assert graph.is_inherited("DerivedTwice", "cwd")
    assert graph.is_inherited("DerivedTwice", "row")
    assert not graph.is_inherited("Derived", "row")
    assert not graph.is_inherited("Base", "cwd")


def test_inherited_dead_ends() -> None:
    """Verify that unknown bases and unknown types are not errors."""
    graph = TypeGraph.index(
        [TypeDefinition("Orphan", (Member("x", "string"),), ("NotExtracted",))]
    )
    assert not graph.is_inherited("Orphan", "x")
    assert not graph.is_inherited("Nope", "x")


def test_inherited_cycle_terminates() -> None:
    """Verify that a cyclic base chain fails safe."""
    graph = TypeGraph.index(
        [
            TypeDefinition("A", (Member("a", "string"),), ("B",)),
            TypeDefinition("B", (Member("b", "string"),), ("A",)),
        ]
    )
    assert graph.is_inherited("A", "b")
    assert not graph.is_inherited("A", "zzz")
    assert not graph.is_inherited("A", "a")


def test_inherited_multiple_bases_in_order() -> None:
    """Verify that every declared base is searched."""
    graph = TypeGraph.index(
        [
            TypeDefinition("Left", (Member("l", "string"),)),
            TypeDefinition("Right", (Member("r", "string"),)),
            TypeDefinition("Both", (), ("Left", "Right")),
        ]
    )
    assert graph.is_inherited("Both", "l")
    assert graph.is_inherited("Both", "r")


def test_parse_extraction() -> None:
    """Verify parsing of the extractor payload with optional fields."""
    data = {
        "types": [
            {
                "name": "Base",
                "members": [
                    {"name": "cwd", "typ": "string?", "description": "Dir."},
                    {"name": "query", "typ": "string"},
                    {"typ": "nameless"},
                ],
            },
            {"name": "Derived", "bases": ["Base"]},
            {"members": []},
            "garbage",
        ]
    }
    types = parse_extraction(data)
    assert [t.name for t in types] == ["Base", "Derived"]
    base = types[0]
    assert base.members[0] == Member("cwd", "string?", "Dir.")
    assert base.members[1].description is None
    assert len(base.members) == 2
    assert types[1].bases == ("Base",)
    assert types[1].members == ()


def test_parse_extraction_empty() -> None:
    """Verify that a payload without types yields nothing."""
    assert parse_extraction({}) == []
    assert parse_extraction({"types": None}) == []
