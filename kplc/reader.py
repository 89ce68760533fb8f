"""Character reader tracking line and column positions."""

from __future__ import annotations

import os
from typing import TextIO


class Reader:
    """Reads source text one character at a time.

    ``current_char`` holds the character last read, or ``None`` at end of
    input. Lines start at 1; the column is reset to 0 after a newline.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.line = 1
        self.column = 0
        self.current_char: str | None = None
        self.read_char()

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "Reader":
        """Open the file at ``path`` for reading; raises ``OSError`` on failure."""
        stream = open(path, "r", encoding="latin-1")
        return cls(stream)

    def read_char(self) -> str | None:
        """Advance to the next character and return it, or ``None`` at end."""
        ch = self._stream.read(1)
        self.current_char = ch or None
        self.column += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        return self.current_char

    @property
    def at_eof(self) -> bool:
        return self.current_char is None

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def __enter__(self) -> "Reader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()