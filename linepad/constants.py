"""Constants and configuration for the linepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Gutter
    GUTTER_SEPARATOR = " "  # Between the line number and the text

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    INTERRUPT_PIPE_MARKER = b'C'  # Byte written to pipe on SIGINT

    # Status bar
    UNSAVED_INDICATOR = "[unsaved]"
    NO_FILE_NAME = "[no name]"
    POSITION_FORMAT = "({col}, {row})"

    # Status messages
    SAVED_MESSAGE = "Saved to {}"
    UNSAVED_CHANGES_MESSAGE = "Unsaved changes! Ctrl-S to save, Ctrl-X to quit without saving"
    NO_FILE_NAME_MESSAGE = "Error: No file name to save to"
    PERMISSION_DENIED_MESSAGE = "Error: Permission denied saving {}"
    NO_SPACE_MESSAGE = "Error: No space left on device"
    CANNOT_SAVE_MESSAGE = "Error: Cannot save to {}"

    # Settings persistence
    SETTINGS_APP_NAME = "linepad"
    SETTINGS_FILE_NAME = "settings.json"
    CURSOR_ROW_KEY = "cursor_row"
    CURSOR_COL_KEY = "cursor_col"
