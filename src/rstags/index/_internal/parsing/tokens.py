"""Token model shared by the tokenizer and the declaration parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from rstags.index._internal.parsing.keywords import Keyword


class TokenKind(Enum):
    """Lexical categories produced by :class:`Tokenizer`.

    ``CHARACTER`` and ``DOUBLE_COLON`` are part of the model but never
    produced: ``'`` literals lex as strings and ``:`` lexes as an identifier.
    """

    CHARACTER = auto()
    FORWARD_SLASH = auto()
    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OPEN_CURLY = auto()
    CLOSE_CURLY = auto()
    OPEN_SQUARE = auto()
    CLOSE_SQUARE = auto()
    TERMINATOR = auto()
    DOUBLE_COLON = auto()
    STAR = auto()
    SIGIL = auto()
    AMPERSAND = auto()
    LEFT_ARROW = auto()
    DOT = auto()
    COMMA = auto()


# Opening bracket kind -> closing bracket kind
BRACKET_PAIRS: dict[TokenKind, TokenKind] = {
    TokenKind.OPEN_PAREN: TokenKind.CLOSE_PAREN,
    TokenKind.OPEN_CURLY: TokenKind.CLOSE_CURLY,
    TokenKind.OPEN_SQUARE: TokenKind.CLOSE_SQUARE,
}

# A newline after one of these becomes a TERMINATOR token
TERMINATING_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.CLOSE_PAREN,
        TokenKind.CLOSE_CURLY,
        TokenKind.CLOSE_SQUARE,
    }
)

# Single-character punctuation
PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_CURLY,
    "}": TokenKind.CLOSE_CURLY,
    "[": TokenKind.OPEN_SQUARE,
    "]": TokenKind.CLOSE_SQUARE,
    "*": TokenKind.STAR,
    "&": TokenKind.AMPERSAND,
    "~": TokenKind.SIGIL,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
}


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit.

    ``line`` (1-based) and ``offset`` (bytes from start of file) locate the
    first character of the token's content.
    """

    kind: TokenKind
    line: int
    offset: int
    text: str = ""
    keyword: Keyword = Keyword.NONE

    def is_keyword(self, keyword: Keyword) -> bool:
        return self.kind is TokenKind.KEYWORD and self.keyword is keyword

    def describe(self) -> str:
        """Short human-readable form for diagnostics."""
        if self.text:
            return f"{self.kind.name.lower()} {self.text!r}"
        return self.kind.name.lower()
