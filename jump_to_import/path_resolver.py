"""Resolving a specifier to an existing file under a project root."""

import logging
import os
from typing import Any

from jump_to_import.alias_table import AliasTable
from jump_to_import.append_file_extension import append_file_extension
from jump_to_import.external_package import (
    external_module_candidates,
    is_external_module,
)
from jump_to_import.file_system import LocalFileSystem
from jump_to_import.load_config import load_config
from jump_to_import.parse_path_overrides import parse_path_overrides
from jump_to_import.project_context import ProjectContext
from jump_to_import.resolution_report import ResolutionAttempt, ResolutionReport
from jump_to_import.resolved_module import ResolvedModule
from jump_to_import.specifier import ServiceSpecifier, Specifier, TemplateSpecifier

logger = logging.getLogger(__name__)


def is_path_absolute(path: str) -> bool:
    """Check if the path is rooted (`/...`)."""
    return path.startswith("/")


def is_path_relative_child(path: str) -> bool:
    """Check if the path is relative to the document (`./...`)."""
    return path.startswith("./")


def is_path_relative_parent(path: str) -> bool:
    """Check if the path traverses up from the document (`../...`)."""
    return path.startswith("../")


class PathResolver:
    """Classifies specifiers and expands them into verified file paths.

    Classification order: service, template, relative child, external
    package, relative parent, absolute, aliased. A miss always yields
    `path=None`; nothing is raised.
    """

    def __init__(
        self,
        options: dict[str, Any] | None = None,
        fs: LocalFileSystem | None = None,
        report: ResolutionReport | None = None,
    ) -> None:
        """Initialize the resolver with settings and collaborators."""
        options = options or load_config()
        self.fs = fs or LocalFileSystem()
        self.report = report
        self.disable_path_overrides = bool(options.get("disablePathOverrides"))
        self.file_extensions = [
            ext.lstrip(".") for ext in options.get("fileExtensions") or []
        ]
        self.service_overrides = parse_path_overrides(
            options.get("serviceOverrides") or [], ""
        )

    def resolve(
        self, specifier: Specifier, alias_table: AliasTable, context: ProjectContext
    ) -> ResolvedModule:
        """Resolve a specifier to a ResolvedModule."""
        attempt = ResolutionAttempt(
            specifier=specifier.text, kind=specifier.kind, root=context.root_path
        )
        attempt.path = self._resolve_path(specifier, alias_table, context, attempt)
        if self.report is not None:
            self.report.add_attempt(attempt)
        logger.debug("Resolved %r to %s", specifier.text, attempt.path)
        return ResolvedModule(
            path=attempt.path, method=specifier.bound_member, kind=specifier.kind
        )

    def _resolve_path(
        self,
        specifier: Specifier,
        alias_table: AliasTable,
        context: ProjectContext,
        attempt: ResolutionAttempt,
    ) -> str | None:
        text = specifier.text
        root = context.root_path

        if isinstance(specifier, ServiceSpecifier):
            attempt.strategy = "service"
            return self._find_file(root, self.apply_service_overrides(text), attempt)

        if isinstance(specifier, TemplateSpecifier):
            attempt.strategy = "template"
            return self._find_file(root, text, attempt)

        if is_path_relative_child(text):
            attempt.strategy = "relative_child"
            relative = os.path.join(context.document_dir_relative_to_root, text[2:])
            return self._find_file(root, relative, attempt)

        if is_external_module(text):
            attempt.strategy = "external"
            return self._find_external(text, root, attempt)

        if is_path_relative_parent(text):
            attempt.strategy = "relative_parent"
            return self._find_file(context.document_dir_path, text, attempt)

        if is_path_absolute(text):
            attempt.strategy = "absolute"
            return self._find_file(root, text.lstrip("/"), attempt)

        if not self.disable_path_overrides:
            match = alias_table.match(root, text)
            if match:
                key, target = match
                attempt.strategy = "alias"
                attempt.alias = key
                return self._find_file(root, target + text[len(key) :], attempt)

        attempt.strategy = "external"
        return self._find_external(text, root, attempt)

    def apply_service_overrides(self, path: str) -> str:
        """Apply every configured service alias as a substring substitution."""
        for alias, target in self.service_overrides.items():
            if alias in path:
                path = path.replace(alias, target)
        return path

    def _find_file(
        self, base: str, relative: str, attempt: ResolutionAttempt
    ) -> str | None:
        path = os.path.normpath(os.path.join(base, relative))
        return append_file_extension(
            path, self.file_extensions, self.fs, attempt.candidates
        )

    def _find_external(
        self, text: str, root: str, attempt: ResolutionAttempt
    ) -> str | None:
        for candidate in external_module_candidates(text, root, self.fs):
            found = append_file_extension(
                candidate, self.file_extensions, self.fs, attempt.candidates
            )
            if found:
                return found
        return None


def resolve(
    specifier: Specifier,
    alias_table: AliasTable,
    context: ProjectContext,
    options: dict[str, Any] | None = None,
) -> ResolvedModule:
    """Resolve a specifier with a one-off resolver."""
    return PathResolver(options).resolve(specifier, alias_table, context)
