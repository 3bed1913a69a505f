"""Per-document settings that survive restarts.

Settings live in a JSON file in the user's config directory, keyed by the
absolute path of the document. The editor uses this to reopen a file with the
cursor where it was at the last save.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Manages persistent storage of per-document settings."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir) if config_dir is not None else Path(
            platformdirs.user_config_dir(EditorConstants.SETTINGS_APP_NAME))
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILE_NAME
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all_settings(self) -> Dict[str, Dict[str, Any]]:
        """Load all settings from disk.

        Returns an empty dict if the file is missing, unreadable or malformed.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

        self._settings_cache = settings
        return True

    def load_settings(self, document_path: Optional[str]) -> Dict[str, Any]:
        """Load settings for a document; empty dict if there are none."""
        if document_path is None:
            return {}

        abs_path = os.path.abspath(document_path)
        doc_settings = self._load_all_settings().get(abs_path, {})
        if not isinstance(doc_settings, dict):
            logger.warning(f"Settings for {abs_path} are not a dict, ignoring")
            return {}
        return doc_settings.copy()

    def save_settings(self, document_path: Optional[str], settings: Dict[str, Any]) -> bool:
        """Replace the settings stored for a document.

        Returns:
            True if save was successful, False otherwise.
        """
        if document_path is None:
            return False

        abs_path = os.path.abspath(document_path)
        all_settings = dict(self._load_all_settings())
        all_settings[abs_path] = settings
        return self._save_all_settings(all_settings)

    def load_cursor(self, document_path: Optional[str]) -> Optional[tuple[int, int]]:
        """Return the remembered (row, col) for a document, if valid."""
        settings = self.load_settings(document_path)
        row = settings.get(EditorConstants.CURSOR_ROW_KEY)
        col = settings.get(EditorConstants.CURSOR_COL_KEY)
        if not self.validate_setting(EditorConstants.CURSOR_ROW_KEY, row) or \
           not self.validate_setting(EditorConstants.CURSOR_COL_KEY, col):
            return None
        if row is None or col is None:
            return None
        return row, col

    def save_cursor(self, document_path: Optional[str], row: int, col: int) -> bool:
        settings = self.load_settings(document_path)
        settings[EditorConstants.CURSOR_ROW_KEY] = row
        settings[EditorConstants.CURSOR_COL_KEY] = col
        return self.save_settings(document_path, settings)

    def validate_setting(self, key: str, value: Any) -> bool:
        if value is None:
            return True  # None is valid (means "not set")

        if key in (EditorConstants.CURSOR_ROW_KEY, EditorConstants.CURSOR_COL_KEY):
            # bool is an int subclass but never a valid position
            return isinstance(value, int) and not isinstance(value, bool) and value >= 0

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None
