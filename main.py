"""Regenerate OPTIONS.md from the schema annotations and the live defaults."""

import logging
from pathlib import Path

from optdoc.load_config import CONFIG_FILE_NAME, load_config
from optdoc.run_generation import run_generation


def main() -> int:
    """Run the options document generation pipeline."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    root_dir = Path(__file__).resolve().parent
    config = load_config(root_dir / CONFIG_FILE_NAME)
    return run_generation(config, root_dir)


if __name__ == "__main__":
    raise SystemExit(main())
