"""Tests for loading the live defaults mapping."""

import sys
from pathlib import Path

import pytest

from optdoc.load_snapshot import load_snapshot


def test_load_snapshot(tmp_path: Path) -> None:
    """Verify that the defaults attribute is imported from the root."""
    (tmp_path / "snapshot_defaults_ok.py").write_text(
        'defaults = {"prompt": "> ", "winopts": {"row": 0.35}}\n', encoding="utf-8"
    )
    try:
        snapshot = load_snapshot("snapshot_defaults_ok", "defaults", tmp_path)
        assert snapshot["winopts"]["row"] == 0.35
    finally:
        sys.modules.pop("snapshot_defaults_ok", None)
        sys.path.remove(str(tmp_path))


def test_load_snapshot_not_a_mapping(tmp_path: Path) -> None:
    """Verify that a non-mapping defaults attribute is rejected."""
    (tmp_path / "snapshot_defaults_bad.py").write_text(
        "defaults = [1, 2]\n", encoding="utf-8"
    )
    try:
        with pytest.raises(TypeError):
            load_snapshot("snapshot_defaults_bad", "defaults", tmp_path)
    finally:
        sys.modules.pop("snapshot_defaults_bad", None)
        sys.path.remove(str(tmp_path))
