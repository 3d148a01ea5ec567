"""Declaration scanner for Rust-like sources.

Reads tokens one at a time and reacts only to the keywords that introduce
something worth tagging:

- ``fn``   -> function/method tag
- ``type`` -> type alias tag
- ``let``  -> local binding tag(s)

Everything else (``use``, ``mod``, ``struct``, ``impl`` ...) is skipped
token by token. Bodies, parameter lists and initializers are skipped with
the bracket matcher, so the parser never needs to understand them.

Usage::

    emitter = CollectingEmitter()
    parser = DeclarationParser(CharSource.from_text(text), emitter)
    parser.parse()
"""

from __future__ import annotations

from collections.abc import Collection

import structlog

from rstags.index._internal.parsing.keywords import Keyword, KeywordTable, rust_keyword_table
from rstags.index._internal.parsing.skipper import (
    TokenCursor,
    skip_to_matched,
    skip_to_terminator,
    skip_type,
)
from rstags.index._internal.parsing.source import CharSource
from rstags.index._internal.parsing.tokenizer import EndOfInput, Tokenizer
from rstags.index._internal.parsing.tokens import BRACKET_PAIRS, Token, TokenKind
from rstags.index.emitters import TagEmitter
from rstags.index.models import ALL_KINDS, Tag, TagKind

log = structlog.get_logger(__name__)

# Pattern modifiers that may precede a binding name (`let mut x`, `let ref y`).
_BINDING_MODIFIERS = frozenset({"mut", "ref"})


class DeclarationParser:
    """One parse pass over one source.

    Args:
        source: Characters to scan.
        emitter: Receives every tag as soon as its declaration is consumed.
        keywords: Keyword table; defaults to :func:`rust_keyword_table`.
        path: Reported on tags and in diagnostics.
        scope: Qualifying name for nested declarations. Nothing in this
            parser sets it; when given and ``qualified_tags`` is on, each
            tag is also emitted as ``scope.name``.
        qualified_tags: Whether scope-qualified duplicates are emitted.
        enabled_kinds: Kinds to emit; others are parsed but dropped.
        strict: Raise :class:`ParseError` on internal consistency failures.
    """

    def __init__(
        self,
        source: CharSource,
        emitter: TagEmitter,
        *,
        keywords: KeywordTable | None = None,
        path: str = "",
        scope: str | None = None,
        qualified_tags: bool = False,
        enabled_kinds: Collection[TagKind] = ALL_KINDS,
        strict: bool = False,
    ) -> None:
        tokenizer = Tokenizer(source, keywords or rust_keyword_table())
        self._cursor = TokenCursor(tokenizer, path=path, strict=strict)
        self._emitter = emitter
        self._path = path
        self._scope = scope
        self._qualified_tags = qualified_tags
        self._enabled_kinds = frozenset(enabled_kinds)
        self.tag_count = 0

    def parse(self) -> int:
        """Scan the whole source. Returns the number of tags emitted."""
        try:
            while True:
                self._parse_next()
        except EndOfInput:
            log.debug("parse_done", path=self._path, tags=self.tag_count)
        return self.tag_count

    def _parse_next(self) -> None:
        token = self._cursor.advance()
        if token.kind is not TokenKind.KEYWORD:
            return

        if token.keyword is Keyword.FN:
            self._parse_function()
        elif token.keyword is Keyword.TYPE:
            self._parse_binding(TagKind.TYPE)
        elif token.keyword is Keyword.LET:
            self._parse_binding(TagKind.LET)

    def _parse_function(self) -> None:
        # FunctionDecl = "fn" [ Receiver ] identifier Parameters [ Result ] [ Body ] .
        # Receiver     = "(" ... ")" .
        cursor = self._cursor

        name = cursor.advance()
        if name.kind is TokenKind.OPEN_PAREN:
            skip_to_matched(cursor)
            name = cursor.current
        cursor.expect(lambda t: t.kind is TokenKind.IDENTIFIER, "function name")

        cursor.advance()
        skip_to_matched(cursor)
        skip_type(cursor)
        if cursor.at(TokenKind.OPEN_CURLY):
            skip_to_matched(cursor)

        # Emitted last, but positioned at the name.
        self._make_tag(name, TagKind.FUNCTION)

    def _parse_binding(self, kind: TagKind) -> None:
        # Decl     = ( "type" | "let" ) ( Spec | "(" Spec { Spec } ")" ) .
        # Spec     = IdentList [ Type ] [ "=" Expression ] Terminator .
        # IdentList = identifier { "," identifier } .
        cursor = self._cursor

        name = self._read_name()
        group_open = name.kind is TokenKind.OPEN_PAREN
        if group_open:
            name = self._read_name()
            if name.kind is TokenKind.CLOSE_PAREN:
                group_open = False

        while True:
            while True:
                if name.kind in BRACKET_PAIRS:
                    # Nested pattern such as the inner group of `let ((a, b), c)`.
                    skip_to_matched(cursor)
                    token = cursor.current
                else:
                    self._make_tag(name, kind)
                    token = cursor.advance()

                if token.kind is TokenKind.COMMA:
                    name = self._read_name()
                    if not (group_open and name.kind is TokenKind.CLOSE_PAREN):
                        continue
                    token = name
                if group_open and token.kind is TokenKind.CLOSE_PAREN:
                    group_open = False
                    cursor.advance()
                break

            skip_type(cursor)
            skip_to_terminator(cursor)

            if not group_open:
                return
            name = self._read_name()
            if name.kind is TokenKind.CLOSE_PAREN:
                return

    def _read_name(self) -> Token:
        token = self._cursor.advance()
        while token.is_keyword(Keyword.MUT) or (
            token.kind is TokenKind.IDENTIFIER and token.text in _BINDING_MODIFIERS
        ):
            token = self._cursor.advance()
        return token

    def _make_tag(self, name: Token, kind: TagKind) -> None:
        if name.kind is not TokenKind.IDENTIFIER or kind not in self._enabled_kinds:
            return

        self._emit(Tag(name.text, kind, name.line, name.offset, self._path))
        if self._scope and self._qualified_tags:
            qualified = f"{self._scope}.{name.text}"
            self._emit(Tag(qualified, kind, name.line, name.offset, self._path))

    def _emit(self, tag: Tag) -> None:
        self._emitter.emit(tag)
        self.tag_count += 1
