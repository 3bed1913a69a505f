from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0

    def clamp(self, lines: "LineStore"):
        """Pull the cursor back inside the text.

        Row is limited to the last line, then column to the length of the
        line the cursor ends up on.
        """
        if self.row >= len(lines):
            self.row = len(lines) - 1
        if self.row < 0:
            self.row = 0
        line_length = len(lines[self.row])
        if self.col > line_length:
            self.col = line_length
        if self.col < 0:
            self.col = 0


class LineStore:
    """Ordered, never-empty sequence of text lines."""

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self._lines: list[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines = [""]

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, row: int) -> str:
        return self._lines[row]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other):
        if isinstance(other, LineStore):
            return self._lines == other._lines
        if isinstance(other, list):
            return self._lines == other
        return NotImplemented

    def __repr__(self):
        return f"LineStore({self._lines!r})"

    def replace(self, row: int, text: str):
        self._lines[row] = text

    def insert(self, row: int, text: str):
        """Insert a line at row; rows from there on shift down by one."""
        self._lines.insert(row, text)

    def remove(self, row: int) -> str:
        """Remove and return the line at row; later rows shift up by one."""
        if len(self._lines) == 1:
            raise ValueError("cannot remove the last remaining line")
        return self._lines.pop(row)

    def to_list(self) -> list[str]:
        return list(self._lines)


class TextModel:
    """Line buffer plus cursor, with the editing operations over both.

    Every operation leaves the cursor clamped into the text. Operations that
    change the text set ``dirty`` and return True; movement returns False.
    """

    lines: LineStore
    cursor_position: CursorPosition
    dirty: bool

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self.lines = LineStore(lines)
        self.cursor_position = CursorPosition()
        self.dirty = False

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_position.row]

    def _finish(self, changed: bool) -> bool:
        self.cursor_position.clamp(self.lines)
        if changed:
            self.dirty = True
        return changed

    # --- Movement ---

    def up_line(self) -> bool:
        self.cursor_position.row = max(0, self.cursor_position.row - 1)
        return self._finish(False)

    def down_line(self) -> bool:
        self.cursor_position.row += 1
        return self._finish(False)

    def left_char(self) -> bool:
        self.cursor_position.col = max(0, self.cursor_position.col - 1)
        return self._finish(False)

    def right_char(self) -> bool:
        # Stays on the current line; clamp stops it at end of line
        self.cursor_position.col += 1
        return self._finish(False)

    def move_beginning_of_line(self) -> bool:
        self.cursor_position.col = 0
        return self._finish(False)

    def move_end_of_line(self) -> bool:
        self.cursor_position.col = len(self.current_line)
        return self._finish(False)

    def set_cursor(self, row: int, col: int) -> bool:
        """Place the cursor, clamping an out-of-range position."""
        self.cursor_position.row = max(0, row)
        self.cursor_position.col = max(0, col)
        return self._finish(False)

    # --- Editing ---

    def insert_char(self, char: str) -> bool:
        """Insert one character at the cursor.

        Raises:
            ValueError: For anything but a single non-newline character;
                line breaks go through ``insert_newline``.
        """
        if len(char) != 1 or char in "\r\n":
            raise ValueError(f"insert_char takes one non-newline character, got {char!r}")
        row = self.cursor_position.row
        col = self.cursor_position.col
        line = self.lines[row]
        self.lines.replace(row, line[:col] + char + line[col:])
        self.cursor_position.col = col + 1
        return self._finish(True)

    def insert_newline(self) -> bool:
        """Split the current line at the cursor."""
        row = self.cursor_position.row
        col = self.cursor_position.col
        line = self.lines[row]
        if col == 0:
            self.lines.insert(row, "")
        elif col == len(line):
            self.lines.insert(row + 1, "")
        else:
            self.lines.replace(row, line[:col])
            self.lines.insert(row + 1, line[col:])
        self.cursor_position.row = row + 1
        self.cursor_position.col = 0
        return self._finish(True)

    def backspace(self) -> bool:
        """Delete the character before the cursor.

        At the start of a line, join the line onto the previous one. At the
        start of the document nothing happens.
        """
        row = self.cursor_position.row
        col = self.cursor_position.col
        if col > 0:
            line = self.lines[row]
            self.lines.replace(row, line[:col - 1] + line[col:])
            self.cursor_position.col = col - 1
            return self._finish(True)
        if row > 0:
            self._join_with_previous_line()
            return self._finish(True)
        return self._finish(False)

    def _join_with_previous_line(self):
        row = self.cursor_position.row
        previous = self.lines[row - 1]
        current = self.lines.remove(row)
        self.lines.replace(row - 1, previous + current)
        self.cursor_position.row = row - 1
        self.cursor_position.col = len(previous)

    def clear_line(self) -> bool:
        """Empty the current line without removing it."""
        self.lines.replace(self.cursor_position.row, "")
        self.cursor_position.col = 0
        return self._finish(True)
