"""Configuration store with per-key change notification."""

import logging
from collections.abc import Callable
from typing import Any

from jump_to_import.load_config import load_config

logger = logging.getLogger(__name__)

SettingListener = Callable[[str, Any], None]


class Settings:
    """Holds the recognised settings and notifies subscribers on change."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        """Initialize the store, falling back to the default settings."""
        self.values: dict[str, Any] = values if values is not None else load_config()
        self._listeners: dict[str, list[SettingListener]] = {}

    @classmethod
    def from_file(cls, path: str | None) -> "Settings":
        """Build a store from an optional YAML settings file."""
        return cls(load_config(path))

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of a setting."""
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Update a setting and notify its subscribers if it changed."""
        if self.values.get(key) == value:
            return
        self.values[key] = value
        logger.debug("Setting %s changed to %r", key, value)
        for listener in self._listeners.get(key, []):
            listener(key, value)

    def subscribe(self, key: str, listener: SettingListener) -> None:
        """Register a callback invoked whenever `key` changes."""
        self._listeners.setdefault(key, []).append(listener)
