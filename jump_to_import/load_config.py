"""Logic for loading user settings and merging them with defaults."""

import copy
from pathlib import Path
from typing import Any

import yaml

from jump_to_import.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "pathOverrides": ["$PROJECT:app", "$PROJECT/config:config"],
    "disablePathOverrides": False,
    "disableBabelRc": False,
    "disableWebpack": False,
    "fileExtensions": ["js", "jsx"],
    "useEmberPods": False,
    "serviceOverrides": [],
    "debug": False,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
