"""Per-root declarative config file holding path overrides."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from jump_to_import.config_source_error import ConfigSourceError
from jump_to_import.file_system import LocalFileSystem

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = ".jump-to-import.json"

DEFAULT_PROJECT_CONFIG: dict[str, Any] = {
    "pathOverrides": ["$PROJECT:app", "$PROJECT/config:config"],
}


def load_project_overrides(root: str, fs: LocalFileSystem) -> list[str]:
    """Return the `pathOverrides` declared in the root's config file.

    Raises ConfigSourceError when the file is malformed.
    """
    path = os.path.join(root, PROJECT_CONFIG_FILE)
    if not fs.exists(path):
        return []
    try:
        data = json.loads(fs.read_text(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigSourceError(root, path, f"invalid JSON: {e}") from e

    overrides = data.get("pathOverrides", []) if isinstance(data, dict) else None
    if not isinstance(overrides, list):
        raise ConfigSourceError(root, path, "pathOverrides must be a list")
    return overrides


def create_default_config(
    root: str, config: dict[str, Any] | None = None
) -> Path | None:
    """Write a default config file at `root`.

    The file is written to a temporary sibling and moved into place, so readers
    never observe a partial file. Existing files are never overwritten; returns
    None in that case.
    """
    target = Path(root) / PROJECT_CONFIG_FILE
    if target.exists():
        return None

    content = json.dumps(config or DEFAULT_PROJECT_CONFIG, indent=2) + "\n"
    fd, tmp_name = tempfile.mkstemp(dir=root, prefix=PROJECT_CONFIG_FILE, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, target)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Created %s", target)
    return target
