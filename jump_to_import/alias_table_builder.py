"""Building and owning the process-wide alias table."""

import asyncio
import logging
import os
from collections.abc import Callable
from typing import Any

from jump_to_import.alias_table import AliasTable
from jump_to_import.babel_aliases import BABEL_CONFIG_FILES, load_babel_aliases
from jump_to_import.config_source_error import ConfigSourceError
from jump_to_import.deep_merge import deep_merge
from jump_to_import.file_system import FileStamp, LocalFileSystem
from jump_to_import.package_manifest import PACKAGE_JSON, project_name_of
from jump_to_import.parse_path_overrides import (
    parse_path_overrides,
    substitute_project_name,
)
from jump_to_import.project_config import PROJECT_CONFIG_FILE, load_project_overrides
from jump_to_import.project_context import ProjectContext, project_context_for
from jump_to_import.settings import Settings
from jump_to_import.webpack_aliases import WEBPACK_CONFIG_FILES, load_webpack_aliases

logger = logging.getLogger(__name__)

# Settings whose change invalidates the alias table
ALIAS_SETTING_KEYS = (
    "pathOverrides",
    "disablePathOverrides",
    "disableBabelRc",
    "disableWebpack",
)


def _with_project_name(aliases: dict[str, str], project_name: str) -> dict[str, str]:
    return {substitute_project_name(k, project_name): v for k, v in aliases.items()}


def alias_source_paths(root: str) -> list[str]:
    """Every file under `root` whose contents feed the alias table."""
    names = [PACKAGE_JSON, PROJECT_CONFIG_FILE, *BABEL_CONFIG_FILES]
    names.extend(WEBPACK_CONFIG_FILES)
    return [os.path.join(root, name) for name in names]


def build_alias_table(
    user_overrides: list[str],
    per_root_configs: dict[str, list[str]],
    babel_configs: dict[str, dict[str, str]],
    bundler_configs: dict[str, dict[str, str]],
    project_names: dict[str, str],
) -> AliasTable:
    """Merge every alias source into one table keyed by root.

    Sources are applied in precedence order, later keys winning:
    user overrides, per-root config file, Babel plugin, bundler config.
    """
    roots = sorted(
        set(project_names)
        | set(per_root_configs)
        | set(babel_configs)
        | set(bundler_configs)
    )
    table: dict[str, Any] = {}
    for root in roots:
        name = project_names.get(root, "")
        layers = [
            parse_path_overrides(user_overrides, name),
            parse_path_overrides(per_root_configs.get(root, []), name),
            _with_project_name(babel_configs.get(root, {}), name),
            _with_project_name(bundler_configs.get(root, {}), name),
        ]
        for layer in layers:
            table = deep_merge(table, {root: layer})
        table.setdefault(root, {})
    return AliasTable(table)


class AliasTableBuilder:
    """Owns the alias table and per-root project contexts.

    The table is rebuilt wholesale, never patched. Reads made while a rebuild
    is in flight wait for it to settle. A load that overlaps an invalidation
    is discarded and run again, and a read rebuilds when any alias source file
    changed on disk since the last load.
    """

    def __init__(
        self,
        settings: Settings,
        roots: list[str],
        fs: LocalFileSystem | None = None,
    ) -> None:
        """Initialize the builder and subscribe to alias-related settings."""
        self.settings = settings
        self.roots = [os.path.abspath(r) for r in roots]
        self.fs = fs or LocalFileSystem()
        self.errors: list[ConfigSourceError] = []
        self.project_names: dict[str, str] = {}
        self._table: AliasTable | None = None
        self._stamps: dict[str, FileStamp] = {}
        self._generation = 0
        self._contexts: dict[tuple[str, str], ProjectContext] = {}
        self._lock = asyncio.Lock()
        for key in ALIAS_SETTING_KEYS:
            settings.subscribe(key, self._on_setting_changed)

    def _on_setting_changed(self, key: str, _value: Any) -> None:
        logger.debug("Alias setting %s changed, invalidating", key)
        self.invalidate()

    def invalidate(self) -> None:
        """Drop the cached table and contexts; the next read rebuilds."""
        self._generation += 1
        self._table = None
        self._contexts.clear()

    async def rebuild(self) -> AliasTable:
        """Reload every source and replace the table."""
        async with self._lock:
            self._table = None
            return await self._settle()

    async def table(self) -> AliasTable:
        """Return the current table, building it first if needed."""
        async with self._lock:
            if self._table is not None and await asyncio.to_thread(
                self._sources_changed
            ):
                logger.debug("Alias sources changed on disk, rebuilding")
                self._table = None
                self._contexts.clear()
            return await self._settle()

    async def _settle(self) -> AliasTable:
        while self._table is None:
            generation = self._generation
            stamps = await asyncio.to_thread(self._source_stamps)
            table = await asyncio.to_thread(self._load)
            if generation != self._generation:
                logger.debug("Alias table invalidated while loading, reloading")
                continue
            self._table, self._stamps = table, stamps
        return self._table

    def _source_stamps(self) -> dict[str, FileStamp]:
        return {
            path: self.fs.stamp(path)
            for root in self.roots
            for path in alias_source_paths(root)
        }

    def _sources_changed(self) -> bool:
        return self._source_stamps() != self._stamps

    def context_for(self, document_path: str) -> ProjectContext:
        """Return the (cached) project context for a document."""
        document_dir = os.path.dirname(os.path.abspath(document_path))
        context = project_context_for(document_path, self.roots, self.project_names)
        key = (context.root_path, document_dir)
        if key not in self._contexts:
            if context.root_path not in self.project_names:
                name = project_name_of(context.root_path, self.fs)
                self.project_names[context.root_path] = name
                context = ProjectContext(context.root_path, document_dir, name)
            self._contexts[key] = context
        return self._contexts[key]

    def _load_source(
        self, root: str, loader: Callable[[str, LocalFileSystem], Any], default: Any
    ) -> Any:
        try:
            return loader(root, self.fs)
        except ConfigSourceError as e:
            logger.debug("Skipping alias source %s", e)
            self.errors.append(e)
            return default

    def _load(self) -> AliasTable:
        self.errors = []
        self.project_names = {
            root: project_name_of(root, self.fs) for root in self.roots
        }

        per_root: dict[str, list[str]] = {}
        babel: dict[str, dict[str, str]] = {}
        bundler: dict[str, dict[str, str]] = {}
        for root in self.roots:
            per_root[root] = self._load_source(root, load_project_overrides, [])
            if not self.settings.get("disableBabelRc"):
                babel[root] = self._load_source(root, load_babel_aliases, {})
            if not self.settings.get("disableWebpack"):
                bundler[root] = self._load_source(root, load_webpack_aliases, {})

        table = build_alias_table(
            self.settings.get("pathOverrides") or [],
            per_root,
            babel,
            bundler,
            self.project_names,
        )
        logger.debug(
            "Built alias table %s for %d roots", table.fingerprint, len(self.roots)
        )
        return table
