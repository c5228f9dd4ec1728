"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docmodel.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "crate": {
        "name": "",
        "version": "",
    },
    "store": {
        "path": "docstore",
        "name": "",
        "register_ancestor_paths": False,
    },
    "render": {
        "api_root": "/api",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
