"""Unit tests for settings persistence."""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

from linepad.settings_persistence import SettingsPersistence


class TestSettingsPersistence(unittest.TestCase):
    """Test settings persistence functionality."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.persistence = SettingsPersistence(config_dir=Path(self.temp_dir) / "config")
        self.test_doc_path = os.path.join(self.temp_dir, "test_document.txt")

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_save_and_load_settings(self):
        settings = {"cursor_row": 3, "cursor_col": 7}
        self.assertTrue(self.persistence.save_settings(self.test_doc_path, settings))
        self.assertEqual(self.persistence.load_settings(self.test_doc_path), settings)

    def test_settings_survive_new_instance(self):
        self.persistence.save_cursor(self.test_doc_path, 2, 4)
        fresh = SettingsPersistence(config_dir=Path(self.temp_dir) / "config")
        self.assertEqual(fresh.load_cursor(self.test_doc_path), (2, 4))

    def test_load_nonexistent_document(self):
        self.assertEqual(self.persistence.load_settings("/nonexistent/document.txt"), {})
        self.assertIsNone(self.persistence.load_cursor("/nonexistent/document.txt"))

    def test_none_document_path(self):
        self.assertFalse(self.persistence.save_settings(None, {"cursor_row": 1}))
        self.assertEqual(self.persistence.load_settings(None), {})

    def test_save_cursor_keeps_other_settings(self):
        self.persistence.save_settings(self.test_doc_path, {"other": "value"})
        self.persistence.save_cursor(self.test_doc_path, 5, 0)
        self.assertEqual(self.persistence.load_settings(self.test_doc_path),
                         {"other": "value", "cursor_row": 5, "cursor_col": 0})

    def test_invalid_cursor_values_ignored(self):
        for bad in ({"cursor_row": -1, "cursor_col": 0},
                    {"cursor_row": "3", "cursor_col": 0},
                    {"cursor_row": True, "cursor_col": 0},
                    {"cursor_row": 1}):
            self.persistence.save_settings(self.test_doc_path, bad)
            self.assertIsNone(self.persistence.load_cursor(self.test_doc_path), bad)

    def test_corrupted_file_is_ignored(self):
        config_dir = Path(self.temp_dir) / "config"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text("{not json", encoding="utf-8")
        with self.assertLogs("linepad.settings_persistence", level="WARNING"):
            self.assertEqual(self.persistence.load_settings(self.test_doc_path), {})

    def test_non_dict_file_is_ignored(self):
        config_dir = Path(self.temp_dir) / "config"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(json.dumps([1, 2]), encoding="utf-8")
        self.assertEqual(self.persistence.load_settings(self.test_doc_path), {})

    def test_unwritable_config_dir_returns_false(self):
        blocker = Path(self.temp_dir) / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        persistence = SettingsPersistence(config_dir=blocker / "config")
        with self.assertLogs("linepad.settings_persistence", level="WARNING"):
            self.assertFalse(persistence.save_cursor(self.test_doc_path, 0, 0))

    def test_clear_cache_rereads_disk(self):
        self.persistence.save_cursor(self.test_doc_path, 1, 2)
        other = SettingsPersistence(config_dir=Path(self.temp_dir) / "config")
        other.save_cursor(self.test_doc_path, 3, 4)
        self.assertEqual(self.persistence.load_cursor(self.test_doc_path), (1, 2))
        self.persistence.clear_cache()
        self.assertEqual(self.persistence.load_cursor(self.test_doc_path), (3, 4))


if __name__ == '__main__':
    unittest.main()
