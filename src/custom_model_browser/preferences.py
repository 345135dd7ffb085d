"""Durable operator preferences stored as a YAML mapping."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config_paths import get_preferences_path
from .logging import LogEvent, log_debug, log_warning

# Key under which the last selected tab route is stored
SUB_TYPE_KEY = "sub_type"


class PreferenceStore:
    """Key/value preferences that survive across sessions."""

    def __init__(self, path: Optional[str] = None):
        """Initialize the store.

        Args:
            path: YAML file to use. If None, ``CMB_PREFERENCES_PATH`` or the
                  user state directory decides.
        """
        self.path = Path(path or get_preferences_path())

    def _load(self) -> Dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            log_warning(LogEvent.PREFERENCES, f"Could not read preferences: {e}", path=str(self.path))
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            log_warning(LogEvent.PREFERENCES, "Preferences file is not a mapping, ignoring it", path=str(self.path))
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a value and write the file immediately.

        Raises:
            OSError: If the file or its directory cannot be written
        """
        data = self._load()
        data[key] = value
        os.makedirs(self.path.parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)
        log_debug(LogEvent.PREFERENCES, "Preference saved", key=key, path=str(self.path))
