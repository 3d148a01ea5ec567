"""Token cursor, bracket matching and type skipping.

None of these routines build anything: they only move the cursor past
constructs the declaration parser is not interested in, accurately
enough that nested punctuation never confuses it.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from rstags.core.errors import ParseError
from rstags.index._internal.parsing.keywords import Keyword
from rstags.index._internal.parsing.tokenizer import Tokenizer
from rstags.index._internal.parsing.tokens import BRACKET_PAIRS, Token, TokenKind

log = structlog.get_logger(__name__)

_POINTER_PREFIXES = frozenset({TokenKind.STAR, TokenKind.AMPERSAND, TokenKind.SIGIL})
_BODY_TYPE_KEYWORDS = frozenset({Keyword.STRUCT, Keyword.TRAIT, Keyword.ENUM})


class TokenCursor:
    """Holds the single current token of a parse pass.

    Every routine that looks at ``token`` is responsible for advancing it;
    :meth:`advance` is the only way the current token changes.
    """

    def __init__(self, tokenizer: Tokenizer, *, path: str = "", strict: bool = False) -> None:
        self._tokenizer = tokenizer
        self.path = path
        self.strict = strict
        self.token: Token | None = None

    @property
    def current(self) -> Token:
        if self.token is None:
            return self.advance()
        return self.token

    def advance(self) -> Token:
        self.token = self._tokenizer.read_token()
        return self.token

    def at(self, kind: TokenKind) -> bool:
        return self.token is not None and self.token.kind is kind

    def expect(self, predicate: Callable[[Token], bool], expected: str) -> bool:
        """Check an internal consistency assumption about the current token.

        Returns whether it held. In strict mode a failure raises
        :class:`ParseError`; otherwise it is logged and scanning carries on.
        """
        token = self.current
        if predicate(token):
            return True
        if self.strict:
            raise ParseError.unexpected_token(
                expected, token.describe(), path=self.path, line=token.line
            )
        log.debug(
            "unexpected_token",
            expected=expected,
            found=token.describe(),
            path=self.path,
            line=token.line,
        )
        return False


def skip_to_matched(cursor: TokenCursor) -> None:
    """Skip from an opening bracket to just past its matching closer.

    Only brackets of the entry kind are counted, so ``{`` inside ``( ... )``
    is invisible. A no-op when the current token is not an opening bracket.
    """
    open_kind = cursor.current.kind
    close_kind = BRACKET_PAIRS.get(open_kind)
    if close_kind is None:
        return

    depth = 1
    while True:
        kind = cursor.advance().kind
        if kind is open_kind:
            depth += 1
        elif kind is close_kind:
            depth -= 1
            if depth == 0:
                break
    cursor.advance()


def skip_type(cursor: TokenCursor) -> None:
    """Skip one type expression; a no-op if none starts at the cursor."""
    while True:
        token = cursor.current

        # "(" Type ")"
        if token.kind is TokenKind.OPEN_PAREN:
            skip_to_matched(cursor)
            return

        # identifier [ "." identifier ]
        if token.kind is TokenKind.IDENTIFIER:
            if cursor.advance().kind is TokenKind.DOT:
                cursor.advance()
                cursor.expect(lambda t: t.kind is TokenKind.IDENTIFIER, "identifier after '.'")
                cursor.advance()
            return

        # struct { ... } / trait { ... } / enum { ... }
        if token.kind is TokenKind.KEYWORD and token.keyword in _BODY_TYPE_KEYWORDS:
            cursor.advance()
            cursor.expect(
                lambda t: t.kind is TokenKind.OPEN_CURLY, f"'{{' after '{token.text}'"
            )
            skip_to_matched(cursor)
            return

        # "[" length "]" ElementType
        if token.kind is TokenKind.OPEN_SQUARE:
            skip_to_matched(cursor)
            continue

        # "*" / "&" / "~" BaseType
        if token.kind in _POINTER_PREFIXES:
            cursor.advance()
            continue

        # fn "(" params ")" [ Result ]
        if token.is_keyword(Keyword.FN):
            cursor.advance()
            cursor.expect(lambda t: t.kind is TokenKind.OPEN_PAREN, "'(' after 'fn'")
            skip_to_matched(cursor)
            continue

        return


def skip_to_terminator(cursor: TokenCursor) -> None:
    """Advance to the next top-level TERMINATOR, skipping bracketed groups."""
    while not cursor.at(TokenKind.TERMINATOR):
        cursor.advance()
        skip_to_matched(cursor)
