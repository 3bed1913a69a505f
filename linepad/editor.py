"""Main editor controller."""

import errno
import logging
import os
import select
import signal
import sys
import termios
from typing import Optional

from .terminal import TerminalInterface
from .document import Document, NoPathError
from .view import TerminalTextView
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .constants import EditorConstants
from .commands import CommandRegistry
from .settings_persistence import SettingsPersistence

logger = logging.getLogger(__name__)

HELP_TITLE = "LINEPAD HELP"
HELP_LINES = [
    "",
    "FILE                       NAVIGATION",
    "  Ctrl-S    Save             Arrows     Move cursor",
    "  Ctrl-Q    Quit             Home       Beginning of line",
    "  Esc       Quit             Ctrl-A     Beginning of line",
    "  Ctrl-X    Quit, discard    End        End of line",
    "  F1        Help             Ctrl-E     End of line",
    "",
    "EDITING",
    "  Enter     Split line",
    "  Bksp      Delete char / join lines",
    "  Ctrl-K    Clear line",
]
HELP_FOOTER = " Press any key to continue"


class Editor:
    """Terminal text editor application controller."""

    def __init__(self, document: Optional[Document] = None,
                 terminal: Optional[TerminalInterface] = None,
                 settings: Optional[SettingsPersistence] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.document = document or Document()
        self.view = TerminalTextView(self.document)
        self.view.num_rows = self.terminal.height
        self.view.num_columns = self.terminal.width
        self.settings = settings or SettingsPersistence()
        self.command_registry = CommandRegistry()
        self.running = False
        self.status_message: Optional[str] = None
        self.help_visible = False
        self._interrupted = False
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    @property
    def modified(self) -> bool:
        return self.document.dirty

    def load_file(self, filename: str):
        """Open a file, or start a new one if it does not exist.

        Errors other than a missing file propagate.
        """
        self.document = Document.open(filename)
        self.view.model = self.document
        remembered = self.settings.load_cursor(filename)
        if remembered is not None:
            self.document.set_cursor(*remembered)

    def save(self) -> bool:
        """Save the document to its path, reporting the outcome in the status bar.

        Returns:
            True if save succeeded, False otherwise. On failure the document
            stays dirty.
        """
        path = self.document.path
        try:
            self.document.save()
        except NoPathError:
            self.status_message = EditorConstants.NO_FILE_NAME_MESSAGE
            return False
        except PermissionError as e:
            logger.warning(f"Could not save {path}: {e}")
            self.status_message = EditorConstants.PERMISSION_DENIED_MESSAGE.format(path)
            return False
        except OSError as e:
            logger.warning(f"Could not save {path}: {e}")
            if e.errno == errno.ENOSPC:
                self.status_message = EditorConstants.NO_SPACE_MESSAGE
            else:
                self.status_message = EditorConstants.CANNOT_SAVE_MESSAGE.format(path)
            return False

        cursor = self.document.cursor_position
        self.settings.save_cursor(path, cursor.row, cursor.col)
        self.status_message = EditorConstants.SAVED_MESSAGE.format(path)
        return True

    def quit(self, force: bool = False) -> bool:
        """Stop the main loop unless there are unsaved changes.

        Args:
            force: Quit even if the document is dirty, discarding edits.

        Returns:
            True if the editor will exit.
        """
        if self.document.dirty and not force:
            self.status_message = EditorConstants.UNSAVED_CHANGES_MESSAGE
            return False
        if self.document.dirty:
            logger.info(f"Discarding unsaved changes to {self.document.path}")
        self.running = False
        return True

    def show_help(self):
        """Show the help screen."""
        self.help_visible = True

    def hide_help(self):
        """Hide the help screen and return to editor."""
        self.help_visible = False
        self.terminal.invalidate_frame()

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # If help is visible, any key dismisses it
        if self.help_visible:
            self.hide_help()
            return

        # Status messages last until the next key
        self.status_message = None

        if self.command_registry.execute(self, key_event):
            logger.debug(f"Edited by {key_event.key_type.value} {key_event.value!r}")

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def _handle_sigint(self, signum, frame):
        """Handle SIGINT (Ctrl-C) - treat as the quit key."""
        del signum, frame  # Unused
        self._interrupted = True
        os.write(self._resize_pipe_w, EditorConstants.INTERRUPT_PIPE_MARKER)

    def _draw(self):
        """Draw the current editor state to terminal."""
        if self.help_visible:
            self.terminal.draw_help(HELP_TITLE, HELP_LINES, HELP_FOOTER)
            return

        self.view.num_rows = self.terminal.height
        self.view.num_columns = self.terminal.width
        self.view.render()

        if self.status_message:
            status_text = f" {self.status_message}"
        else:
            status_text = self.view.status_text(self.document.path, self.document.dirty)

        self.terminal.update_frame(
            self.view.lines,
            self.view.visual_cursor_y,
            self.view.visual_cursor_x,
            status_text,
        )

    def run(self):
        """Run the main editor loop."""
        self.terminal.setup()
        self.running = True
        self._interrupted = False
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        original_int_handler = signal.signal(signal.SIGINT, self._handle_sigint)

        try:
            with self.terminal.term.cbreak():
                old_settings = None
                try:
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    # Disable IXON/IXOFF so Ctrl-S and Ctrl-Q reach us
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, AttributeError, OSError):
                    old_settings = None

                need_draw = True
                try:
                    while self.running:
                        if need_draw:
                            self._draw()
                            need_draw = False

                        ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                        if self._resize_pipe_r in ready:
                            os.read(self._resize_pipe_r, 1024)
                            if self._interrupted:
                                self._interrupted = False
                                self._handle_key_event(KeyEvent(
                                    key_type=KeyType.CTRL, value='c', raw='\x03', is_ctrl=True))
                            else:
                                self.terminal.invalidate_frame()
                            need_draw = True
                        elif 0 in ready:
                            key_event = self.keyboard.get_key_event(timeout=0)
                            if key_event:
                                self._handle_key_event(key_event)
                                need_draw = True
                finally:
                    if old_settings:
                        try:
                            termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                        except (termios.error, OSError):
                            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            signal.signal(signal.SIGINT, original_int_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()
