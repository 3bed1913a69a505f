"""Test Enter splitting a line at the cursor."""

from linepad.model import TextModel, CursorPosition


def create_test_model(lines, row=0, col=0):
    model = TextModel(lines)
    model.cursor_position = CursorPosition(row, col)
    return model


def test_split_in_middle_of_line():
    model = create_test_model(["abcdef"], 0, 3)
    assert model.insert_newline() is True
    assert model.lines == ["abc", "def"]
    assert model.cursor_position == CursorPosition(1, 0)
    assert model.dirty is True


def test_split_at_start_inserts_empty_line_before():
    """Current content moves down one row unchanged."""
    model = create_test_model(["first", "second"], 1, 0)
    model.insert_newline()
    assert model.lines == ["first", "", "second"]
    assert model.cursor_position == CursorPosition(2, 0)


def test_split_at_end_inserts_empty_line_after():
    model = create_test_model(["first", "second"], 0, 5)
    model.insert_newline()
    assert model.lines == ["first", "", "second"]
    assert model.cursor_position == CursorPosition(1, 0)


def test_split_on_empty_line():
    model = create_test_model([""], 0, 0)
    model.insert_newline()
    assert model.lines == ["", ""]
    assert model.cursor_position == CursorPosition(1, 0)


def test_split_last_line_in_middle():
    model = create_test_model(["one", "two words"], 1, 3)
    model.insert_newline()
    assert model.lines == ["one", "two", " words"]
    assert model.cursor_position == CursorPosition(2, 0)


def test_repeated_enter():
    model = create_test_model(["ab"], 0, 1)
    model.insert_newline()
    model.insert_newline()
    assert model.lines == ["a", "", "b"]
    assert model.cursor_position == CursorPosition(2, 0)
