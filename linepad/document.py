"""Document lifecycle: open from disk, track unsaved changes, save back."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from typing import Iterable, Optional

from .model import TextModel

logger = logging.getLogger(__name__)


class NoPathError(Exception):
    """Raised when saving a document that has no file path."""


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    A final line terminator does not produce an extra empty line, and empty
    content gives a single empty line.
    """
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines or [""]


def _target_mode(path: str) -> int:
    """Permission bits a save should give ``path``.

    An existing file keeps its mode; a new file gets 0666 less the umask,
    as ``open()`` would have created it.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        # os.umask can only be read by setting it
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class Document(TextModel):
    """A text model bound to an optional file path."""

    path: Optional[str]

    def __init__(self, lines: Optional[Iterable[str]] = None, path: Optional[str] = None):
        super().__init__(lines)
        self.path = path

    @classmethod
    def open(cls, path: str) -> "Document":
        """Load ``path``, or start a new unsaved buffer if it does not exist.

        Any other I/O error propagates to the caller.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            logger.info(f"{path} does not exist, starting a new file")
            doc = cls(path=path)
            doc.dirty = True
            return doc
        logger.debug(f"Loaded {path}")
        return cls(split_lines(content), path=path)

    def to_text(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def save(self, path: Optional[str] = None) -> None:
        """Write every line to disk atomically, each terminated by a newline.

        Args:
            path: Destination; defaults to the document's own path. On success
                it becomes the document's path.

        Raises:
            NoPathError: If neither ``path`` nor the document has a path.
            OSError: If writing fails. The target file and ``dirty`` are left
                untouched.
        """
        target = path or self.path
        if not target:
            raise NoPathError("No file name to save to")

        # Write through symlinks so the link itself survives the rename
        real_target = os.path.realpath(target)
        dir_name = os.path.dirname(real_target) or "."
        suffix = os.path.splitext(real_target)[1]
        temp_filename = None
        try:
            # Temp file in the same directory so the rename stays on one filesystem
            with tempfile.NamedTemporaryFile(mode="w", encoding="utf-8",
                                             dir=dir_name, suffix=suffix,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(self.to_text())
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.chmod(temp_filename, _target_mode(real_target))
            os.replace(temp_filename, real_target)
        except OSError:
            if temp_filename and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.warning(f"Could not remove temporary file {temp_filename}")
            raise

        self.path = target
        self.dirty = False
        logger.info(f"Saved {len(self.lines)} lines to {target}")
