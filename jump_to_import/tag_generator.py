"""Regex-based symbol tags for JavaScript source files."""

import re
from collections.abc import Iterator
from pathlib import Path

from jump_to_import.tag import Position, Tag

CONTROL_KEYWORDS = frozenset(
    {"if", "for", "while", "switch", "catch", "function", "return", "with", "super"}
)

TAG_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (
        "class",
        re.compile(r"^\s*(?:export\s+(?:default\s+)?)?class\s+([\w$]+)"),
    ),
    (
        "function",
        re.compile(
            r"^\s*(?:export\s+(?:default\s+)?)?(?:async\s+)?"
            r"function\s*\*?\s*([\w$]+)\s*\("
        ),
    ),
    (
        "variable",
        re.compile(r"^\s*(?:export\s+)?(?:const|let|var)\s+([\w$]+)\s*="),
    ),
    (
        "method",
        re.compile(
            r"^\s*([\w$]+)\s*:\s*(?:async\s+)?"
            r"(?:function\b|\([^)]*\)\s*=>|[\w$]+\s*=>|(?:Ember\.)?computed\s*\()"
        ),
    ),
    (
        "method",
        re.compile(
            r"^\s*(?:static\s+)?(?:async\s+)?(?:[gs]et\s+)?\*?([\w$]+)\s*\([^)]*\)\s*\{"
        ),
    ),
]


def tags_for_text(text: str) -> Iterator[Tag]:
    """Yield the tags declared in JavaScript source text, in file order."""
    for row, line in enumerate(text.splitlines()):
        for kind, pattern in TAG_PATTERNS:
            m = pattern.match(line)
            if not m or m.group(1) in CONTROL_KEYWORDS:
                continue
            yield Tag(name=m.group(1), position=Position(row, m.start(1)), kind=kind)
            break


def generate_tags(file_path: str) -> Iterator[Tag]:
    """Yield the tags of a file lazily; the iterator is single use."""
    text = Path(file_path).read_text(encoding="utf-8", errors="replace")
    yield from tags_for_text(text)
