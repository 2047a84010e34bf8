"""Orchestration logic for regenerating the options document."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from optdoc.build_sections import build_sections
from optdoc.extraction_error import ExtractionError
from optdoc.generate_document import generate_document
from optdoc.load_snapshot import load_snapshot
from optdoc.parse_extraction import parse_extraction
from optdoc.run_extraction import run_extraction
from optdoc.type_graph import TypeGraph

logger = logging.getLogger(__name__)


def run_generation(config: dict[str, Any], root: Path) -> int:
    """Execute the full regeneration pipeline and return an exit code."""
    options_file = root / config["document"]
    original = _read_lines(options_file)

    try:
        data = run_extraction(config["extractor"]["command"], cwd=root)
    except ExtractionError as e:
        print(f"Error running extractor: {e}")
        if e.stderr:
            print(e.stderr.rstrip())
        return 1

    graph = TypeGraph.index(parse_extraction(data))
    logger.info("Indexed %s types", len(graph))

    output = generate_document(
        original,
        graph,
        _load_defaults(config, root),
        build_sections(config),
    )

    try:
        options_file.write_text("\n".join(output) + "\n", encoding="utf-8")
    except OSError:
        logger.debug("Write failed", exc_info=True)
        print(f"Error: Could not open {options_file} for writing")
        return 0

    print(f"Generated {options_file}")
    return 0


def _read_lines(path: Path) -> list[str]:
    """Read the existing document, or nothing when it does not exist yet."""
    if not path.exists():
        logger.info("%s does not exist, using the fallback header", path)
        return []
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read %s, using the fallback header", path, exc_info=True)
        return []


def _load_defaults(config: dict[str, Any], root: Path) -> Mapping[str, Any]:
    """Load the defaults mapping; documents still render without it."""
    defaults_cfg = config["defaults"]
    try:
        return load_snapshot(defaults_cfg["module"], defaults_cfg["attribute"], root)
    except (ImportError, AttributeError, TypeError):
        logger.warning(
            "Could not load %s.%s, defaults will render as nil",
            defaults_cfg["module"],
            defaults_cfg["attribute"],
            exc_info=True,
        )
        return {}
