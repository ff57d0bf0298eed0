# src/winbuilder/core/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from winbuilder.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off")


def load_settings(path: Path) -> Dict[str, Any]:
    """Reads a settings file. A missing or unreadable file gives an empty configuration."""
    if not path.exists():
        logger.warning("No settings file at %s, using built-in defaults.", path)
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read settings from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.error("Settings in %s must be a JSON object, got %s.", path, type(data).__name__)
        return {}
    logger.debug("Loaded settings from %s", path)
    return data


def coerce(text: str, like: type) -> Any:
    """Converts a command-line string to the type of the setting it overrides."""
    if like is bool:
        word = text.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {text!r}")
    return like(text)


class ConfigManager:
    """
    The process-wide settings: the shipped settings.json plus the `--set`
    overrides of the current run. Overrides live in memory only.
    """
    _shared: Optional["ConfigManager"] = None

    def __new__(cls):
        if cls._shared is None:
            cls._shared = super().__new__(cls)
            cls._shared._settings = load_settings(PathUtils.get_settings_file())
        return cls._shared

    def reset(self) -> None:
        """Drops all overrides and reloads settings.json."""
        self._settings = load_settings(PathUtils.get_settings_file())

    def get_all(self) -> Dict[str, Any]:
        return self._settings

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """Looks up a dotted key such as 'builder.attribute_separator'."""
        node: Any = self._settings
        for key in key_path.split("."):
            if not isinstance(node, dict):
                return default
            node = node.get(key)
        return default if node is None else node

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Overrides a dotted key, creating missing sections on the way.
        A string replacing an existing value is converted to that value's type;
        when that fails the string is stored as is.

        Returns:
            bool: False if a section on the path already holds a plain value.
        """
        *sections, leaf = key_path.split(".")
        target = self._settings
        for key in sections:
            target = target.setdefault(key, {})
            if not isinstance(target, dict):
                logger.error("Cannot set '%s': '%s' is a value, not a section.", key_path, key)
                return False

        current = target.get(leaf)
        if current is not None and isinstance(value, str):
            try:
                value = coerce(value, type(current))
            except (ValueError, TypeError):
                logger.warning("'%s' expects a %s; keeping %r as text.", key_path, type(current).__name__, value)

        target[leaf] = value
        logger.info("Setting override: %s = %r", key_path, value)
        return True


config_manager = ConfigManager()
