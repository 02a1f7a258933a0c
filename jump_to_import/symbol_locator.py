"""Locating a named symbol inside a resolved file."""

import logging
from collections.abc import Callable, Iterable

from jump_to_import.tag import Position, Tag
from jump_to_import.tag_generator import generate_tags

logger = logging.getLogger(__name__)

TagGenerator = Callable[[str], Iterable[Tag]]


def locate(
    file_path: str,
    symbol_name: str | None,
    tag_generator: TagGenerator = generate_tags,
) -> Position | None:
    """Return the position of the first tag named exactly `symbol_name`."""
    if not symbol_name:
        return None
    try:
        tags = list(tag_generator(file_path))
    except OSError as e:
        logger.debug("Could not generate tags for %s: %s", file_path, e)
        return None

    for tag in tags:
        if tag.name == symbol_name:
            return tag.position
    logger.debug("No tag %r among %d tags in %s", symbol_name, len(tags), file_path)
    return None
