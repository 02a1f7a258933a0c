"""Textual extraction of `resolve.alias` entries from a webpack config.

The config is JavaScript and is never executed: only string literals and
`path.resolve(__dirname, ...)` / `path.join(__dirname, ...)` values are
understood.
"""

import logging
import os
import posixpath
import re

from jump_to_import.config_source_error import ConfigSourceError
from jump_to_import.file_system import LocalFileSystem

logger = logging.getLogger(__name__)

WEBPACK_CONFIG_FILES = ("webpack.config.js", "webpack.config.cjs")

ALIAS_BLOCK_RE = re.compile(r"\balias\s*:\s*\{")
ALIAS_ENTRY_RE = re.compile(
    r"""(?:['"]([^'"]+)['"]|([\w$@/.-]+))\s*:\s*"""
    r"""(['"][^'"]*['"]|path\.(?:resolve|join)\s*\([^)]*\))"""
)
STRING_LITERAL_RE = re.compile(r"""['"]([^'"]*)['"]""")


def _alias_block(text: str, start: int) -> str | None:
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return text[start + 1 : i]
    return None


def _alias_target(value: str) -> str:
    parts = STRING_LITERAL_RE.findall(value)
    if not parts:
        return ""
    return posixpath.normpath(posixpath.join(*parts))


def extract_webpack_aliases(
    text: str, source: str = "", root: str = ""
) -> dict[str, str]:
    """Extract alias entries from webpack config text.

    A trailing `$` (webpack's exact-match marker) is stripped from keys.
    Raises ConfigSourceError when an alias block is never closed.
    """
    aliases: dict[str, str] = {}
    for m in ALIAS_BLOCK_RE.finditer(text):
        block = _alias_block(text, m.end() - 1)
        if block is None:
            raise ConfigSourceError(root, source, "unterminated alias block")
        for entry in ALIAS_ENTRY_RE.finditer(block):
            key = (entry.group(1) or entry.group(2)).rstrip("$")
            target = _alias_target(entry.group(3))
            if key and target:
                aliases[key] = target
    return aliases


def load_webpack_aliases(root: str, fs: LocalFileSystem) -> dict[str, str]:
    """Load the webpack aliases declared for a root, if any."""
    for name in WEBPACK_CONFIG_FILES:
        path = os.path.join(root, name)
        if not fs.exists(path):
            continue
        try:
            text = fs.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigSourceError(root, path, str(e)) from e
        aliases = extract_webpack_aliases(text, path, root)
        logger.debug("Loaded %d webpack aliases from %s", len(aliases), path)
        return aliases
    return {}
