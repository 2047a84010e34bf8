"""Logic for loading the generator configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from optdoc.deep_merge import deep_merge

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "optdoc.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "document": "OPTIONS.md",
    "extractor": {
        # "{python}" is replaced with the running interpreter
        "command": ["{python}", "-m", "optdoc.extract_schema", "fuzzy/config"],
    },
    "defaults": {
        "module": "fuzzy.defaults",
        "attribute": "defaults",
    },
    "global_options": [
        "cwd",
        "query",
        "prompt",
        "header",
        "previewer",
        "formatter",
        "file_icons",
        "git_icons",
        "color_icons",
    ],
    "sections": [
        {
            "prefix": "globals",
            "type": "fuzzy.config.Base",
            "path": [],
            "global": True,
        },
        {
            "prefix": "globals.winopts",
            "type": "fuzzy.config.Winopts",
            "path": ["winopts"],
            "skip": ["preview", "split"],
            "fixed": [
                {
                    "name": "split",
                    "typ": "string",
                    "description": (
                        "Split command used to open the picker window, "
                        "e.g `belowright new`."
                    ),
                },
            ],
        },
        {
            "prefix": "globals.winopts.preview",
            "type": "fuzzy.config.PreviewOpts",
            "path": ["winopts", "preview"],
            "skip": ["winopts", "default"],
        },
        {
            "prefix": "globals.winopts.preview.winopts",
            "type": "fuzzy.config.PreviewerWinopts",
            "path": ["winopts", "preview", "winopts"],
        },
        {
            "prefix": "globals.hls",
            "type": "fuzzy.config.HLS",
            "path": ["__HLS"],
            "nested": {
                "fzf": {
                    "prefix": "globals.hls.fzf",
                    "type": "fuzzy.config.FzfHLS",
                    "path": ["__HLS", "fzf"],
                },
            },
        },
    ],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            logger.info("Loading configuration overrides from %s", p)
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
