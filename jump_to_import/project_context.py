"""Per-document project information used while resolving a specifier."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectContext:
    """Owning root, document directory and project name for one document."""

    root_path: str
    document_dir_path: str
    project_name: str = ""

    @property
    def document_dir_relative_to_root(self) -> str:
        """The document's directory expressed relative to the project root."""
        if self.document_dir_path == self.root_path:
            return ""
        return os.path.relpath(self.document_dir_path, self.root_path)


def find_owning_root(document_path: str, roots: list[str]) -> str | None:
    """Return the deepest root that contains `document_path`, if any."""
    document_path = os.path.abspath(document_path)
    owners = [
        root
        for root in roots
        if os.path.commonpath([os.path.abspath(root), document_path])
        == os.path.abspath(root)
    ]
    if not owners:
        return None
    return max(owners, key=lambda r: len(os.path.abspath(r)))


def project_context_for(
    document_path: str, roots: list[str], project_names: dict[str, str]
) -> ProjectContext:
    """Build the context for a document.

    Documents outside every known root are treated as their own root.
    """
    document_dir = os.path.dirname(os.path.abspath(document_path))
    root = find_owning_root(document_path, roots)
    root_path = os.path.abspath(root) if root else document_dir
    return ProjectContext(
        root_path=root_path,
        document_dir_path=document_dir,
        project_name=project_names.get(root_path, ""),
    )
