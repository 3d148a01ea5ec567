"""Hand-written lexer and declaration scanner for Rust sources."""

from rstags.index._internal.parsing.declarations import DeclarationParser
from rstags.index._internal.parsing.keywords import Keyword, KeywordTable, rust_keyword_table
from rstags.index._internal.parsing.skipper import (
    TokenCursor,
    skip_to_matched,
    skip_to_terminator,
    skip_type,
)
from rstags.index._internal.parsing.source import CharSource
from rstags.index._internal.parsing.tokenizer import EndOfInput, Tokenizer
from rstags.index._internal.parsing.tokens import Token, TokenKind

__all__ = [
    "CharSource",
    "DeclarationParser",
    "EndOfInput",
    "Keyword",
    "KeywordTable",
    "Token",
    "TokenCursor",
    "TokenKind",
    "Tokenizer",
    "rust_keyword_table",
    "skip_to_matched",
    "skip_to_terminator",
    "skip_type",
]
