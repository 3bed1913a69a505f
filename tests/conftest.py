import pytest

from linepad.editor import Editor
from linepad.settings_persistence import SettingsPersistence


class FakeTerminal:
    """Stands in for TerminalInterface; records frames instead of drawing."""

    def __init__(self, width=80, height=23):
        self.width = width
        self.height = height
        self.frames = []
        self.help_draws = 0
        self.invalidated = 0
        self._keys = []

    def update_frame(self, lines, cursor_y, cursor_x, status_text):
        self.frames.append((list(lines), cursor_y, cursor_x, status_text))

    def draw_help(self, title, help_lines, footer):
        self.help_draws += 1

    def invalidate_frame(self):
        self.invalidated += 1

    def get_key(self, timeout=None):
        return self._keys.pop(0) if self._keys else None

    def add_key(self, key):
        self._keys.append(key)


@pytest.fixture
def fake_terminal():
    return FakeTerminal()


@pytest.fixture
def settings(tmp_path):
    return SettingsPersistence(config_dir=tmp_path / "config")


@pytest.fixture
def editor(fake_terminal, settings):
    return Editor(terminal=fake_terminal, settings=settings)
