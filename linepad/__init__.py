"""Linepad - a minimal full-screen terminal text editor."""

from .model import TextModel, LineStore, CursorPosition
from .document import Document, NoPathError
from .view import TerminalTextView

__all__ = [
    'TextModel',
    'LineStore',
    'CursorPosition',
    'Document',
    'NoPathError',
    'TerminalTextView',
]
