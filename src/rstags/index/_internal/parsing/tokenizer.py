"""Tokenizer for Rust-like sources.

Converts a :class:`CharSource` into :class:`Token` values without a grammar:
whitespace and comments are skipped, literals are scanned as strings, a
handful of punctuation characters get dedicated kinds and everything else
is read as an identifier (so ``;``, ``=``, ``:`` and ``->`` pieces come out
as short identifiers).

Statements are terminated by newlines, not by ``;``: a newline becomes a
``TERMINATOR`` token when the previous token could end a statement
(identifier, string, or a closing bracket). End of input counts as one
final newline.
"""

from __future__ import annotations

from rstags.index._internal.parsing.keywords import Keyword, KeywordTable
from rstags.index._internal.parsing.source import CharSource
from rstags.index._internal.parsing.tokens import (
    PUNCTUATION,
    TERMINATING_KINDS,
    Token,
    TokenKind,
)

_INLINE_WHITESPACE = frozenset(" \t\r")
_QUOTES = frozenset("\"'`")
_RAW_QUOTE = "`"
_IDENT_EXTRA = frozenset("$@_#")


class EndOfInput(Exception):  # noqa: N818
    """The source ran out while a new token was being started.

    This is the normal way every parse finishes. It is caught once, by the
    declaration parser's driver loop, and never escapes it.
    """


def is_ident_char(c: str | None) -> bool:
    """ASCII alphanumerics, ``$ @ _ #``, and any byte above 0x7F."""
    if c is None:
        return False
    return (c.isascii() and c.isalnum()) or c in _IDENT_EXTRA or ord(c) > 0x7F


def _decode(chars: list[str]) -> str:
    # Characters are Latin-1 stand-ins for bytes; restore the UTF-8 text.
    return "".join(chars).encode("latin-1").decode("utf-8", errors="replace")


class Tokenizer:
    """Reads one token per :meth:`read_token` call."""

    def __init__(self, source: CharSource, keywords: KeywordTable) -> None:
        self._source = source
        self._keywords = keywords
        self._last_kind: TokenKind | None = None

    def read_token(self) -> Token:
        """Return the next token.

        Raises:
            EndOfInput: The source is exhausted before a token starts.
        """
        token = self._scan()
        self._last_kind = token.kind
        return token

    def _scan(self) -> Token:
        source = self._source
        while True:
            c = source.next_char()
            line, offset = source.line, source.position

            if c in _INLINE_WHITESPACE:
                continue
            if c == "\n":
                if self._last_kind in TERMINATING_KINDS:
                    return Token(TokenKind.TERMINATOR, line, offset)
                continue
            if c is None:
                # End of input ends the last statement like a final newline would.
                if self._last_kind in TERMINATING_KINDS:
                    return Token(TokenKind.TERMINATOR, line, offset)
                raise EndOfInput

            if c == "/":
                d = source.next_char()
                if d == "/":
                    # A line comment acts like the newline that ends it.
                    source.skip_to_char("\n")
                    source.push_back("\n")
                    continue
                if d == "*":
                    source.push_back("\n" if self._skip_block_comment() else " ")
                    continue
                source.push_back(d)
                return Token(TokenKind.FORWARD_SLASH, line, offset)

            if c in _QUOTES:
                return Token(TokenKind.STRING, line, offset, text=self._scan_string(c))

            if c == "<":
                # Only `<-` is a token; `<` plus any other character is dropped.
                if source.next_char() == "-":
                    return Token(TokenKind.LEFT_ARROW, line, offset)
                continue

            kind = PUNCTUATION.get(c)
            if kind is not None:
                return Token(kind, line, offset)

            text = self._scan_identifier(c)
            keyword = self._keywords.lookup(text)
            if keyword is Keyword.NONE:
                return Token(TokenKind.IDENTIFIER, line, offset, text=text)
            return Token(TokenKind.KEYWORD, line, offset, text=text, keyword=keyword)

    def _skip_block_comment(self) -> bool:
        """Consume through ``*/``; returns whether a newline was crossed."""
        source = self._source
        has_newline = False
        while True:
            d = source.next_char()
            while d is not None and d != "*":
                if d == "\n":
                    has_newline = True
                d = source.next_char()
            c = source.next_char()
            if c == "/" or c is None:
                return has_newline
            source.push_back(c)

    def _scan_string(self, delimiter: str) -> str:
        source = self._source
        chars: list[str] = []
        while True:
            c = source.next_char()
            if c is None or c == delimiter:
                break
            if c == "\\" and delimiter != _RAW_QUOTE:
                c = source.next_char()
                if c is None:
                    break
            chars.append(c)
        return _decode(chars)

    def _scan_identifier(self, first: str) -> str:
        source = self._source
        chars = [first]
        c = source.next_char()
        while is_ident_char(c):
            chars.append(c)  # type: ignore[arg-type]
            c = source.next_char()
        # Always push back: a newline here may still terminate the statement.
        source.push_back(c)
        return _decode(chars)
