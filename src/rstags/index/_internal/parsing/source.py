"""Character source with one character of push-back.

Input bytes are decoded as Latin-1 so that every character corresponds to
exactly one byte: ``position`` is therefore a byte offset, and multi-byte
UTF-8 sequences pass through identifier scanning as runs of characters
above 0x7F. Token text is re-decoded as UTF-8 by the tokenizer.
"""

from __future__ import annotations

from pathlib import Path

from rstags.core.errors import InternalError


class CharSource:
    """Sequential reader over one file's bytes.

    ``line`` and ``position`` describe the character most recently returned
    by :meth:`next_char` (a newline belongs to the line it ends). At end of
    input they point just past the last character.
    """

    def __init__(self, data: bytes, name: str = "") -> None:
        self.name = name
        self._text = data.decode("latin-1")
        self._index = 0
        self._next_line = 1
        self._pushed: tuple[str, int, int] | None = None
        self.line = 1
        self.position = 0

    @classmethod
    def from_text(cls, text: str, name: str = "") -> CharSource:
        return cls(text.encode("utf-8"), name=name)

    @classmethod
    def from_path(cls, path: Path) -> CharSource:
        return cls(path.read_bytes(), name=str(path))

    def next_char(self) -> str | None:
        """Return the next character, or ``None`` at end of input."""
        if self._pushed is not None:
            c, self.line, self.position = self._pushed
            self._pushed = None
            return c

        if self._index >= len(self._text):
            self.line = self._next_line
            self.position = len(self._text)
            return None

        c = self._text[self._index]
        self.line = self._next_line
        self.position = self._index
        self._index += 1
        if c == "\n":
            self._next_line += 1
        return c

    def push_back(self, c: str | None) -> None:
        """Make ``c`` the next character returned. Pushing ``None`` is a no-op."""
        if c is None:
            return
        if self._pushed is not None:
            raise InternalError.unexpected(
                "push-back buffer already holds a character",
                source=self.name,
                line=self.line,
            )
        self._pushed = (c, self.line, self.position)

    def skip_to_char(self, target: str) -> str | None:
        """Consume characters through ``target``; returns it, or ``None`` at end of input."""
        while True:
            c = self.next_char()
            if c is None or c == target:
                return c
