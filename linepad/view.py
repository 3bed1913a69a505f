"""Line-numbered viewport over a text model."""

from typing import Optional

from .model import TextModel
from .constants import EditorConstants


def gutter_width(line_count: int) -> int:
    """Columns taken by line numbers plus the separator."""
    return len(str(max(1, line_count))) + len(EditorConstants.GUTTER_SEPARATOR)


def format_line_number(number: int, line_count: int) -> str:
    digits = len(str(max(1, line_count)))
    return str(number).rjust(digits) + EditorConstants.GUTTER_SEPARATOR


class TerminalTextView:
    """Computes what the terminal should show for a model.

    The view never changes the model. ``render()`` scrolls the viewport so
    the cursor stays visible and fills ``lines``, ``visual_cursor_y`` and
    ``visual_cursor_x`` (screen coordinates including the gutter).
    """

    num_rows: int = 24
    num_columns: int = 80

    def __init__(self, model: Optional[TextModel] = None):
        self.model = model
        self.start_row = 0
        self.start_col = 0
        self.lines: list[str] = []
        self.visual_cursor_y = 0
        self.visual_cursor_x = 0

    @property
    def gutter_width(self) -> int:
        return gutter_width(len(self.model.lines))

    @property
    def text_columns(self) -> int:
        return max(1, self.num_columns - self.gutter_width)

    def _scroll_to_cursor(self):
        row = self.model.cursor_position.row
        col = self.model.cursor_position.col
        rows = max(1, self.num_rows)
        # The view may point past the end after lines were removed
        self.start_row = min(self.start_row, len(self.model.lines) - 1)
        if row < self.start_row:
            self.start_row = row
        elif row >= self.start_row + rows:
            self.start_row = row - rows + 1

        columns = self.text_columns
        if col < self.start_col:
            self.start_col = col
        elif col >= self.start_col + columns:
            self.start_col = col - columns + 1

    def render(self):
        assert self.model is not None
        self._scroll_to_cursor()
        line_count = len(self.model.lines)
        end_row = min(line_count, self.start_row + max(1, self.num_rows))
        columns = self.text_columns

        self.lines = []
        for row in range(self.start_row, end_row):
            text = self.model.lines[row][self.start_col:self.start_col + columns]
            self.lines.append(format_line_number(row + 1, line_count) + text)

        self.visual_cursor_y = self.model.cursor_position.row - self.start_row
        self.visual_cursor_x = (self.gutter_width
                                + self.model.cursor_position.col - self.start_col)

    def status_text(self, path: Optional[str], dirty: bool) -> str:
        """Status bar contents: unsaved marker, file path and (col, row)."""
        parts = []
        if dirty:
            parts.append(EditorConstants.UNSAVED_INDICATOR)
        parts.append(path or EditorConstants.NO_FILE_NAME)
        parts.append(EditorConstants.POSITION_FORMAT.format(
            col=self.model.cursor_position.col + 1,
            row=self.model.cursor_position.row + 1,
        ))
        return " " + " ".join(parts)
