# src/viewprobe/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from viewprobe.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Read-only access to the defaults shipped in the package's settings.json.

    Settings are read once on creation. `reset()` re-reads the file, which
    is how tests swap in their own settings through PathUtils.
    """

    def __init__(self):
        self._settings: Dict[str, Any] = {}
        self.reset()

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Looks up a dotted key, e.g. 'lookup.test_id_attribute'.
        Returns `default` when any segment is missing or not a section.
        """
        node: Any = self._settings
        for segment in key_path.split('.'):
            if not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
        return default if node is None else node

    def reset(self) -> None:
        """(Re)loads settings.json; a missing or unreadable file leaves no settings."""
        settings_path = PathUtils.get_settings_path()
        if not settings_path.exists():
            logger.warning("settings.json not found at %s. Using built-in defaults.", settings_path)
            self._settings = {}
            return
        try:
            with open(settings_path, "r", encoding="utf-8") as f:
                self._settings = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._settings = {}
            return
        logger.debug("Settings loaded from %s.", settings_path)


# Shared instance read by RenderConfiguration, Lookup and configure_logger.
config_manager = ConfigManager()
