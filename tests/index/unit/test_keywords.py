"""Tests for the keyword table."""

from __future__ import annotations

import pytest

from rstags.index._internal.parsing import Keyword, KeywordTable, rust_keyword_table
from rstags.index._internal.parsing.keywords import RUST_KEYWORDS


class TestRustKeywordTable:
    def test_registers_every_rust_keyword(self) -> None:
        table = rust_keyword_table()
        assert len(RUST_KEYWORDS) == 11
        assert all(table.lookup(spelling) is keyword for spelling, keyword in RUST_KEYWORDS)

    @pytest.mark.parametrize(
        ("spelling", "keyword"),
        [
            ("fn", Keyword.FN),
            ("let", Keyword.LET),
            ("type", Keyword.TYPE),
            ("use", Keyword.USE),
            ("struct", Keyword.STRUCT),
            ("enum", Keyword.ENUM),
            ("trait", Keyword.TRAIT),
            ("impl", Keyword.IMPL),
            ("mod", Keyword.MOD),
            ("static", Keyword.STATIC),
            ("macro_rules!", Keyword.MACRO_RULES),
        ],
    )
    def test_lookup(self, spelling: str, keyword: Keyword) -> None:
        assert rust_keyword_table().lookup(spelling) is keyword

    def test_mut_is_not_a_keyword(self) -> None:
        assert rust_keyword_table().lookup("mut") is Keyword.NONE

    def test_unknown_spelling_is_none(self) -> None:
        assert rust_keyword_table().lookup("fnord") is Keyword.NONE

    def test_lookup_is_case_sensitive(self) -> None:
        assert rust_keyword_table().lookup("FN") is Keyword.NONE

    def test_tables_are_independent(self) -> None:
        first = rust_keyword_table()
        second = rust_keyword_table()
        first.register("async", Keyword.FN)
        assert first.lookup("async") is Keyword.FN
        assert second.lookup("async") is Keyword.NONE


class TestKeywordTable:
    def test_starts_empty(self) -> None:
        assert KeywordTable().lookup("fn") is Keyword.NONE

    def test_register_overrides(self) -> None:
        table = KeywordTable()
        table.register("fun", Keyword.FN)
        table.register("fun", Keyword.LET)
        assert table.lookup("fun") is Keyword.LET
