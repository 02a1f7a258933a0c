"""Parsing of `"alias:target"` override strings."""

import logging

logger = logging.getLogger(__name__)

PROJECT_NAME_PLACEHOLDER = "$PROJECT"


def substitute_project_name(alias: str, project_name: str) -> str:
    """Replace the `$PROJECT` placeholder in an alias key.

    Without a project name the key is kept literally, placeholder included.
    """
    if PROJECT_NAME_PLACEHOLDER in alias and project_name:
        return alias.replace(PROJECT_NAME_PLACEHOLDER, project_name)
    return alias


def parse_path_overrides(overrides: list[str], project_name: str) -> dict[str, str]:
    """Parse override strings into an alias -> target mapping.

    Each entry is split on its first colon. Later entries win over earlier
    ones for the same alias.
    """
    aliases: dict[str, str] = {}
    for override in overrides or []:
        if not isinstance(override, str) or ":" not in override:
            logger.debug("Skipping malformed override %r", override)
            continue
        alias, target = override.split(":", 1)
        alias = alias.strip()
        if not alias:
            logger.debug("Skipping override with empty alias %r", override)
            continue
        aliases[substitute_project_name(alias, project_name)] = target.strip()
    return aliases
