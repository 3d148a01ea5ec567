"""Tests for the declaration parser.

Covers:
- fn / type / let tagging, with receivers, results and bodies
- Grouped declarations and identifier lists
- Tag positions (line and byte offset of the name)
- Kind filtering and scope-qualified duplicates
- Strict vs lenient handling of unexpected tokens
"""

from __future__ import annotations

import pytest

from rstags.core.errors import ParseError
from rstags.index._internal.parsing import CharSource, DeclarationParser
from rstags.index.emitters import CollectingEmitter
from rstags.index.models import Tag, TagKind
from rstags.index.ops import parse_source

F, L, T = TagKind.FUNCTION, TagKind.LET, TagKind.TYPE


def _names(text: str, **kwargs: object) -> list[tuple[str, TagKind]]:
    return [(tag.name, tag.kind) for tag in parse_source(text, **kwargs)]  # type: ignore[arg-type]


class TestEmptyInput:
    @pytest.mark.parametrize(
        "text",
        ["", "   \n\t\n", "// only a comment\n", "/* block\ncomment */", "use std::io;\n"],
    )
    def test_no_tags(self, text: str) -> None:
        assert parse_source(text) == []

    def test_lone_keyword_at_end(self) -> None:
        assert parse_source("fn") == []
        assert parse_source("let") == []


class TestFunctions:
    def test_simple_function(self) -> None:
        assert _names("fn foo() { }") == [("foo", F)]

    def test_without_trailing_newline(self) -> None:
        assert _names("fn foo() {}") == [("foo", F)]

    def test_parameters_and_body_are_skipped(self) -> None:
        text = "fn f(a: int, b: (int, int)) { if g(h(i())) { } }\nfn second() {}\n"
        assert _names(text) == [("f", F), ("second", F)]

    def test_receiver(self) -> None:
        assert _names("fn (self: &Thing) bar(&self) -> i32 { }") == [("bar", F)]

    def test_declaration_without_body(self) -> None:
        assert _names("fn f(x)\nfn g(y)\n") == [("f", F), ("g", F)]

    def test_result_type_before_body(self) -> None:
        assert _names("fn f() Result { body }\nfn g() {}") == [("f", F), ("g", F)]

    def test_arrow_result_leaves_body_to_main_loop(self) -> None:
        text = "fn compute(a: i32) -> i32 {\n    let total = a + 1;\n    total\n}\n"
        assert _names(text) == [("compute", F), ("total", L)]

    def test_skipped_body_hides_inner_declarations(self) -> None:
        text = "fn outer() {\n    let hidden = 1;\n    fn inner() {}\n}\n"
        assert _names(text) == [("outer", F)]

    def test_position_is_name_token(self) -> None:
        tags = parse_source("\n\nfn   foo() {\n}\n")
        assert tags == [Tag("foo", F, 3, 7)]

    def test_other_keywords_do_not_tag(self) -> None:
        text = "use a\nmod m\nstruct S\nimpl X\ntrait Y\nenum Z\nstatic N\n"
        assert parse_source(text) == []


class TestTypeDeclarations:
    def test_type_alias(self) -> None:
        assert _names("type Meters = f64;\nfn next() {}") == [("Meters", T), ("next", F)]

    def test_grouped_types(self) -> None:
        text = "type (\n    A int\n    B string\n)\nfn after() {}\n"
        assert _names(text) == [("A", T), ("B", T), ("after", F)]

    def test_struct_type(self) -> None:
        text = "type Point struct { x int\n y int }\nfn f() {}\n"
        assert _names(text) == [("Point", T), ("f", F)]


class TestLetBindings:
    def test_simple_let(self) -> None:
        assert _names("let x = 1;") == [("x", L)]

    @pytest.mark.parametrize("modifier", ["mut", "ref", "ref mut"])
    def test_modifiers_are_skipped(self, modifier: str) -> None:
        assert _names(f"let {modifier} x = 1;") == [("x", L)]

    def test_identifier_list(self) -> None:
        assert _names("let x, y = 1, 2\nlet z = 3") == [("x", L), ("y", L), ("z", L)]

    def test_tuple_pattern(self) -> None:
        assert _names("let (a, b) = pair;\nfn g() {}") == [("a", L), ("b", L), ("g", F)]

    def test_tuple_pattern_with_mut(self) -> None:
        assert _names("let (mut a, b) = pair;") == [("a", L), ("b", L)]

    def test_trailing_comma_in_group(self) -> None:
        assert _names("let (a, b,) = t;\nfn g() {}") == [("a", L), ("b", L), ("g", F)]

    def test_nested_pattern_is_skipped(self) -> None:
        assert _names("let ((a, b), c) = t;\nfn g() {}") == [("c", L), ("g", F)]

    def test_empty_group(self) -> None:
        assert _names("let () = f();\nfn g() {}") == [("g", F)]

    def test_newline_inside_group_ends_the_binding(self) -> None:
        # The newline after `a` ends the binding, so `, b) = p` is read as a
        # second binding starting at `,` and the group never closes.
        assert _names("let (a\n, b) = p\nfn z(){}") == [("a", L)]

    def test_slice_pattern_is_skipped(self) -> None:
        assert _names("let [a, b] = arr;\nfn g() {}") == [("g", F)]

    def test_let_with_type(self) -> None:
        assert _names("let x: u32 = 5;\nlet y = 6;") == [("x", L), ("y", L)]

    def test_initializer_with_brackets(self) -> None:
        text = "let v = vec(1,\n  2,\n  3);\nlet w = 4;\n"
        assert _names(text) == [("v", L), ("w", L)]

    def test_let_positions(self) -> None:
        tags = parse_source("let a = 1;\nlet bb = 2;\n")
        assert [(t.line, t.offset) for t in tags] == [(1, 4), (2, 15)]


class TestKindFilter:
    def test_only_enabled_kinds_are_emitted(self) -> None:
        text = "type A = B\nlet x = 1\nfn f() {}\n"
        assert _names(text, kinds={F}) == [("f", F)]
        assert _names(text, kinds={T, L}) == [("A", T), ("x", L)]

    def test_no_kinds(self) -> None:
        assert parse_source("fn f() {}", kinds=frozenset()) == []


class TestQualifiedTags:
    def test_scope_with_qualified_tags(self) -> None:
        tags = parse_source("fn f() {}", scope="m", qualified_tags=True)
        assert [t.name for t in tags] == ["f", "m.f"]
        assert tags[0].line == tags[1].line
        assert tags[0].offset == tags[1].offset

    def test_scope_without_qualified_tags(self) -> None:
        assert [t.name for t in parse_source("fn f() {}", scope="m")] == ["f"]

    def test_qualified_tags_without_scope(self) -> None:
        assert [t.name for t in parse_source("fn f() {}", qualified_tags=True)] == ["f"]


class TestNonIdentifierNames:
    def test_function_without_name_is_not_tagged(self) -> None:
        assert _names("fn (r) { }\nfn ok() {}") == [("ok", F)]

    def test_let_with_string_name_is_not_tagged(self) -> None:
        assert _names('let "x" = 1\nlet y = 2') == [("y", L)]


class TestStrictMode:
    def test_strict_raises_on_missing_function_name(self) -> None:
        with pytest.raises(ParseError):
            parse_source("fn (r) { }", strict=True)

    def test_strict_accepts_wellformed_source(self) -> None:
        text = "fn f(a) {}\ntype T = U\nlet x = 1\n"
        assert _names(text, strict=True) == [("f", F), ("T", T), ("x", L)]


class TestDeclarationParser:
    def test_parse_returns_tag_count(self) -> None:
        emitter = CollectingEmitter()
        parser = DeclarationParser(
            CharSource.from_text("fn a() {}\nfn b() {}\n"), emitter, path="lib.rs"
        )
        assert parser.parse() == 2
        assert parser.tag_count == len(emitter.tags) == 2
        assert {tag.path for tag in emitter.tags} == {"lib.rs"}

    def test_count_includes_qualified_duplicates(self) -> None:
        emitter = CollectingEmitter()
        parser = DeclarationParser(
            CharSource.from_text("fn a() {}"), emitter, scope="s", qualified_tags=True
        )
        assert parser.parse() == 2

    def test_tags_are_emitted_as_found(self) -> None:
        seen: list[str] = []

        class Recorder(CollectingEmitter):
            def emit(self, tag: Tag) -> None:
                seen.append(tag.name)
                super().emit(tag)

        DeclarationParser(CharSource.from_text("let a = 1\nlet b = 2\n"), Recorder()).parse()
        assert seen == ["a", "b"]
