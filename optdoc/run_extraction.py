"""Logic for running the external schema extractor."""

import json
import logging
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from optdoc.extraction_error import ExtractionError

logger = logging.getLogger(__name__)


def run_extraction(command: Sequence[str], cwd: Path | str | None = None) -> dict[str, Any]:
    """Run the extractor to completion and decode its JSON output."""
    cmd = [sys.executable if part == "{python}" else str(part) for part in command]
    logger.info("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd, cwd=cwd, capture_output=True, text=True, encoding="utf-8", check=False
        )
    except OSError as e:
        msg = f"could not start {cmd[0]}"
        raise ExtractionError(msg, str(e)) from e

    if proc.returncode != 0:
        msg = f"{cmd[0]} exited with status {proc.returncode}"
        raise ExtractionError(msg, proc.stderr or "unknown error")

    try:
        data = json.loads(proc.stdout or "{}")
    except json.JSONDecodeError as e:
        msg = "extractor output is not valid JSON"
        raise ExtractionError(msg, str(e)) from e
    if not isinstance(data, dict):
        msg = "extractor output is not a JSON object"
        raise ExtractionError(msg)
    return data
