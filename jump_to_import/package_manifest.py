"""Reading package.json / bower.json manifests."""

import json
import logging
import os
from typing import Any

from jump_to_import.file_system import LocalFileSystem

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
BOWER_JSON = "bower.json"


def read_manifest(path: str, fs: LocalFileSystem) -> dict[str, Any] | None:
    """Parse a JSON manifest, returning None when missing or malformed."""
    if not fs.exists(path):
        return None
    try:
        data = json.loads(fs.read_text(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Unreadable manifest %s: %s", path, e)
        return None
    return data if isinstance(data, dict) else None


def manifest_entry_point(manifest: dict[str, Any]) -> str | None:
    """Return the declared `main` entry.

    A list-valued `main` (common in bower.json) yields its first `.js` entry.
    """
    main = manifest.get("main")
    if isinstance(main, str) and main:
        return main
    if isinstance(main, list):
        for entry in main:
            if isinstance(entry, str) and entry.endswith(".js"):
                return entry
    return None


def project_name_of(root: str, fs: LocalFileSystem) -> str:
    """Return the `name` field of the root's package.json, or ''."""
    manifest = read_manifest(os.path.join(root, PACKAGE_JSON), fs)
    if not manifest:
        return ""
    name = manifest.get("name")
    return name if isinstance(name, str) else ""
