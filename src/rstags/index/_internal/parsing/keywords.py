"""Keyword registry for the declaration scanner.

The table is a plain object built once by :func:`rust_keyword_table` and
injected into each :class:`Tokenizer`; there is no process-wide state.
"""

from __future__ import annotations

from enum import Enum


class Keyword(Enum):
    """Keywords the scanner can recognise. Only FN, TYPE and LET produce tags."""

    NONE = "none"
    USE = "use"
    MUT = "mut"
    TYPE = "type"
    LET = "let"
    FN = "fn"
    STRUCT = "struct"
    IMPL = "impl"
    TRAIT = "trait"
    ENUM = "enum"
    MOD = "mod"
    STATIC = "static"
    MACRO_RULES = "macro_rules"


# `mut` is not registered: it lexes as an identifier and the binding
# parser skips it by spelling. `macro_rules!` can never match because `!`
# ends an identifier.
RUST_KEYWORDS: tuple[tuple[str, Keyword], ...] = (
    ("use", Keyword.USE),
    ("type", Keyword.TYPE),
    ("let", Keyword.LET),
    ("fn", Keyword.FN),
    ("enum", Keyword.ENUM),
    ("struct", Keyword.STRUCT),
    ("trait", Keyword.TRAIT),
    ("impl", Keyword.IMPL),
    ("mod", Keyword.MOD),
    ("static", Keyword.STATIC),
    ("macro_rules!", Keyword.MACRO_RULES),
)


class KeywordTable:
    """Mapping from spelling to :class:`Keyword`."""

    def __init__(self) -> None:
        self._keywords: dict[str, Keyword] = {}

    def register(self, spelling: str, keyword: Keyword) -> None:
        self._keywords[spelling] = keyword

    def lookup(self, spelling: str) -> Keyword:
        """Return the keyword for ``spelling``, or ``Keyword.NONE``."""
        return self._keywords.get(spelling, Keyword.NONE)


def rust_keyword_table() -> KeywordTable:
    """Build the keyword table used for ``.rs`` sources."""
    table = KeywordTable()
    for spelling, keyword in RUST_KEYWORDS:
        table.register(spelling, keyword)
    return table
