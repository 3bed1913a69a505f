"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False
        # Last painted frame, for minimal updates
        self._last_lines: list[str] | None = None
        self._last_status: str | None = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen)
        print(self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception:
                # Justification: curtsies can fail to initialize without a
                # real tty (CI, pipes). Run without input instead of crashing.
                self._curtsies_input = None
                self._curtsies_active = False

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen)
            print(self.term.normal_cursor)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception:
                # Justification: teardown should never crash the app or
                # hide the exception that brought us here.
                pass
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def invalidate_frame(self) -> None:
        """Forget the last frame so the next update repaints everything."""
        self._last_lines = None
        self._last_status = None

    def update_frame(
        self,
        lines: list[str],
        cursor_y: int,
        cursor_x: int,
        status_text: str,
    ) -> None:
        """Diff against last frame and write only changes.

        Falls back to a full clear on first paint or when the number of rows
        changes.
        """
        width = self.term.width
        need_full_clear = (
            self._last_lines is None
            or len(self._last_lines) != len(lines)
        )
        if need_full_clear:
            print(self.term.home + self.term.clear, end='')
            self._last_lines = ["" for _ in range(len(lines))]
            self._last_status = None

        for y, line in enumerate(lines):
            new_disp = line[:width].ljust(width)
            if new_disp != self._last_lines[y]:
                print(self.term.move(y, 0) + new_disp, end='')
                self._last_lines[y] = new_disp

        status = status_text[:width].ljust(width)
        if status != self._last_status:
            print(self.term.move(self.term.height - 1, 0)
                  + self.term.reverse + status + self.term.normal, end='')
            self._last_status = status

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def draw_help(self, title: str, help_lines: list[str], footer: str):
        """Draw a centered help page with a footer in the status row."""
        width, height = self.terminal_size_safe()
        print(self.term.home + self.term.clear, end='')
        title_pos = max(0, (width - len(title)) // 2)
        print(f"{self.term.move(1, title_pos)}{self.term.bold}{title}{self.term.normal}", end='')

        content_start_y = max(3, (height - len(help_lines)) // 2)
        max_line_length = max((len(line) for line in help_lines), default=0)
        left_margin = max(0, (width - max_line_length) // 2)
        for i, line in enumerate(help_lines):
            print(f"{self.term.move(content_start_y + i, left_margin)}{line}", end='')

        print(f"{self.term.move(height - 1, 0)}{footer}", end='')
        print(self.term.hide_cursor, end='', flush=True)
        # The help page overwrote the editor frame
        self.invalidate_frame()

    def terminal_size_safe(self) -> tuple[int, int]:
        """Return (width, height), falling back to 80x24 when unknown."""
        try:
            width = int(getattr(self.term, 'width', 80))
        except (TypeError, ValueError):
            width = 80
        try:
            height = int(getattr(self.term, 'height', 24))
        except (TypeError, ValueError):
            height = 24
        return width, height

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name as a string, or None if no key is ready or
            input is unavailable.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
