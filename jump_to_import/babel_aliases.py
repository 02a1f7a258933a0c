"""Discovery of Babel config and extraction of module-resolver aliases."""

import json
import logging
import os
import posixpath
from typing import Any

from jump_to_import.config_source_error import ConfigSourceError
from jump_to_import.file_system import LocalFileSystem
from jump_to_import.package_manifest import PACKAGE_JSON, read_manifest

logger = logging.getLogger(__name__)

BABEL_CONFIG_FILES = (".babelrc", ".babelrc.json", "babel.config.json")

VALID_BABEL_PLUGIN_NAMES = frozenset(
    {
        "module-resolver",
        "babel-plugin-module-resolver",
        "module-alias",
        "babel-plugin-module-alias",
    }
)


def find_babel_config(
    root: str, fs: LocalFileSystem
) -> tuple[str, dict[str, Any]] | None:
    """Return the first Babel config found at `root` and where it came from.

    Looks at the dedicated config files first, then the `babel` key of
    package.json. Raises ConfigSourceError for a malformed config file.
    """
    for name in BABEL_CONFIG_FILES:
        path = os.path.join(root, name)
        if not fs.exists(path):
            continue
        try:
            data = json.loads(fs.read_text(path))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigSourceError(root, path, f"invalid Babel config: {e}") from e
        if not isinstance(data, dict):
            raise ConfigSourceError(root, path, "Babel config must be an object")
        return path, data

    manifest_path = os.path.join(root, PACKAGE_JSON)
    manifest = read_manifest(manifest_path, fs)
    if manifest and isinstance(manifest.get("babel"), dict):
        return manifest_path, manifest["babel"]
    return None


def babel_plugins(config: dict[str, Any]) -> list[Any]:
    """Collect top-level and per-environment plugin entries."""
    plugins = list(config.get("plugins") or [])
    env = config.get("env")
    if isinstance(env, dict):
        for env_config in env.values():
            if isinstance(env_config, dict):
                plugins.extend(env_config.get("plugins") or [])
    return plugins


def _join_root(root: Any, target: str) -> str:
    if isinstance(root, list):
        root = root[0] if root else None
    if not isinstance(root, str) or not root:
        return target
    return posixpath.normpath(posixpath.join(root, target))


def _plugin_aliases(options: Any) -> dict[str, str]:
    aliases: dict[str, str] = {}
    if isinstance(options, dict):
        alias = options.get("alias")
        if not isinstance(alias, dict):
            return aliases
        for key, target in alias.items():
            if isinstance(target, str):
                aliases[key] = _join_root(options.get("root"), target)
    elif isinstance(options, list):
        # Legacy module-alias form: [{"src": "./src", "expose": "app"}]
        for entry in options:
            if isinstance(entry, dict) and {"src", "expose"} <= entry.keys():
                aliases[entry["expose"]] = entry["src"]
    return aliases


def extract_babel_aliases(config: dict[str, Any]) -> dict[str, str]:
    """Extract aliases declared by recognised module-resolver/alias plugins."""
    aliases: dict[str, str] = {}
    for plugin in babel_plugins(config):
        # Bare plugin names carry no options
        if not isinstance(plugin, list) or len(plugin) < 2:
            continue
        name, options = plugin[0], plugin[1]
        if name not in VALID_BABEL_PLUGIN_NAMES:
            continue
        aliases.update(_plugin_aliases(options))
    return aliases


def load_babel_aliases(root: str, fs: LocalFileSystem) -> dict[str, str]:
    """Load the Babel aliases declared for a root, if any."""
    found = find_babel_config(root, fs)
    if not found:
        return {}
    path, config = found
    aliases = extract_babel_aliases(config)
    logger.debug("Loaded %d Babel aliases from %s", len(aliases), path)
    return aliases
