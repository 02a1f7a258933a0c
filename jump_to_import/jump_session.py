"""Orchestration of a single "go to module" request."""

import asyncio
import logging
from dataclasses import dataclass

from jump_to_import.alias_table_builder import AliasTableBuilder
from jump_to_import.document_source import DocumentSource
from jump_to_import.extract_specifier import extract_for_cursor, is_import_path
from jump_to_import.file_system import LocalFileSystem
from jump_to_import.path_resolver import PathResolver
from jump_to_import.resolution_report import ResolutionReport
from jump_to_import.resolved_module import ResolvedModule
from jump_to_import.settings import Settings
from jump_to_import.symbol_locator import TagGenerator, locate
from jump_to_import.tag import Position
from jump_to_import.tag_generator import generate_tags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JumpTarget:
    """Where the caller should move: a file (or the active one) and a position."""

    module: ResolvedModule
    file_path: str
    position: Position | None


class JumpToImport:
    """Runs extractor -> resolver -> locator for the active document."""

    def __init__(
        self,
        settings: Settings,
        roots: list[str],
        fs: LocalFileSystem | None = None,
        tag_generator: TagGenerator = generate_tags,
    ) -> None:
        """Initialize the session; the alias table is built lazily."""
        self.settings = settings
        self.fs = fs or LocalFileSystem()
        self.builder = AliasTableBuilder(settings, roots, self.fs)
        self.tag_generator = tag_generator
        self.report = ResolutionReport(enabled=bool(settings.get("debug")))
        settings.subscribe("debug", self._on_debug_changed)

    def _on_debug_changed(self, _key: str, value: object) -> None:
        self.report.enabled = bool(value)

    async def setup(self) -> None:
        """Build the alias table up front."""
        table = await self.builder.rebuild()
        self.report.config_hash = table.fingerprint
        for error in self.builder.errors:
            logger.debug("Alias source ignored: %s", error)

    async def resolve(self, source: DocumentSource) -> ResolvedModule | None:
        """Resolve the text under the cursor, or None when nothing applies."""
        word = source.get_selection_or_word_under_cursor()
        receiver = source.get_receiver_of_word_under_cursor()
        method = word if receiver is not None else None

        specifier = extract_for_cursor(
            source.get_active_document_text(),
            word,
            receiver,
            use_ember_pods=bool(self.settings.get("useEmberPods")),
        )
        if specifier is None:
            module = ResolvedModule(path=None, method=method)
            return module if module.found else None

        table = await self.builder.table()
        context = self.builder.context_for(source.get_active_document_path())
        resolver = PathResolver(self.settings.values, self.fs, self.report)
        return resolver.resolve(specifier, table, context)

    async def go_to_module(self, source: DocumentSource) -> JumpTarget | None:
        """Resolve the cursor target and locate the symbol to jump to.

        Returns None when there is nothing to do; failures are silent.
        """
        module = await self.resolve(source)
        if module is None or not module.found:
            return None

        if module.path is None:
            file_path = source.get_active_document_path()
            symbol = module.method
        else:
            file_path = module.path
            word = source.get_selection_or_word_under_cursor()
            symbol = module.method or (None if is_import_path(word) else word)

        position = await asyncio.to_thread(
            locate, file_path, symbol, self.tag_generator
        )
        return JumpTarget(module=module, file_path=file_path, position=position)
