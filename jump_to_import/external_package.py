"""Locating modules installed in node_modules or bower_components."""

import os

from jump_to_import.file_system import LocalFileSystem
from jump_to_import.package_manifest import (
    BOWER_JSON,
    PACKAGE_JSON,
    manifest_entry_point,
    read_manifest,
)

NPM_PREFIX = "npm:"
NODE_MODULES = "node_modules"
BOWER_COMPONENTS = "bower_components"

# Package directories in lookup order, each with the manifests it may declare
PACKAGE_DIRECTORIES = (
    (NODE_MODULES, (PACKAGE_JSON,)),
    (BOWER_COMPONENTS, (PACKAGE_JSON, BOWER_JSON)),
)


def is_external_module(specifier: str) -> bool:
    """Check if a specifier names a package rather than a project path."""
    return specifier.startswith(NPM_PREFIX) or "/" not in specifier


def strip_npm_prefix(specifier: str) -> str:
    """Remove an explicit `npm:` prefix."""
    if specifier.startswith(NPM_PREFIX):
        return specifier[len(NPM_PREFIX) :]
    return specifier


def entry_point_from_manifest(
    manifest_path: str, package_path: str, fs: LocalFileSystem
) -> str | None:
    """Return the package entry file declared by a manifest, if any."""
    manifest = read_manifest(manifest_path, fs)
    if not manifest:
        return None
    entry = manifest_entry_point(manifest)
    if not entry:
        return None
    return os.path.normpath(os.path.join(package_path, entry))


def external_module_candidates(
    specifier: str, root: str, fs: LocalFileSystem
) -> list[str]:
    """Return candidate base paths for a package specifier, best first.

    Declared entry points (node_modules, then the legacy bower layout) come
    before the bare package paths, which still need an extension.
    """
    name = strip_npm_prefix(specifier)
    entries: list[str] = []
    bare: list[str] = []
    for directory, manifests in PACKAGE_DIRECTORIES:
        package_path = os.path.normpath(os.path.join(root, directory, name))
        for manifest_name in manifests:
            entry = entry_point_from_manifest(
                os.path.join(package_path, manifest_name), package_path, fs
            )
            if entry:
                entries.append(entry)
                break
        bare.append(package_path)
    return entries + bare
