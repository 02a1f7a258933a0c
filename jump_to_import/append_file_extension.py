"""Finding an existing file for an extension-less module path."""

import os

from jump_to_import.file_system import LocalFileSystem

# Extensions that mark a path as already complete, besides the configured ones
KNOWN_EXTENSIONS = frozenset(
    {"js", "jsx", "mjs", "cjs", "ts", "tsx", "json", "hbs", "css", "scss", "vue"}
)


def has_extension(path: str, file_extensions: list[str]) -> bool:
    """Check if the path already ends in a recognised file extension."""
    ext = os.path.splitext(path)[1].lstrip(".")
    return bool(ext) and (ext in KNOWN_EXTENSIONS or ext in file_extensions)


def file_candidates(path: str, file_extensions: list[str]) -> list[str]:
    """Return the paths to probe for `path`, in priority order.

    `<path>.<ext>` for every extension first, then `<path>/index.<ext>`.
    """
    if has_extension(path, file_extensions):
        return [path]
    return [f"{path}.{ext}" for ext in file_extensions] + [
        os.path.join(path, f"index.{ext}") for ext in file_extensions
    ]


def append_file_extension(
    path: str,
    file_extensions: list[str],
    fs: LocalFileSystem,
    attempted: list[str] | None = None,
) -> str | None:
    """Return the first existing candidate for `path`, or None.

    Every probed candidate is appended to `attempted` when given.
    """
    for candidate in file_candidates(path, file_extensions):
        if attempted is not None:
            attempted.append(candidate)
        if fs.exists(candidate):
            return candidate
    return None
