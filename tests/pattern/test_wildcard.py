"""Tests for wildcard pattern parsing and matching."""

import pytest

from matrixpath.pattern import (
    AnyChar,
    AnyString,
    Literal,
    Pattern,
    compile_wildcard,
    parse_unix_wildcard,
)
from matrixpath.tokens import Tokenizer, TokenType


# ──────────────────────────────────────────────────────────────────────────────
# Pattern model
# ──────────────────────────────────────────────────────────────────────────────


class TestPatternModel:
    """Normalization and equality of Pattern values."""

    def test_adjacent_literals_merge(self) -> None:
        assert Pattern((Literal("ab"), Literal("c"))).parts == (Literal("abc"),)

    def test_repeated_any_string_collapses(self) -> None:
        pattern = Pattern((Literal("a"), AnyString(), AnyString(), Literal("b")))
        assert pattern.parts == (Literal("a"), AnyString(), Literal("b"))

    def test_empty_literals_are_dropped(self) -> None:
        assert Pattern((Literal(""),)).parts == ()
        assert Pattern.literal("") == Pattern()

    def test_equivalent_spellings_are_equal(self) -> None:
        assert compile_wildcard("a**b") == compile_wildcard("a*b")
        assert compile_wildcard("a**b").equals(compile_wildcard("a*b"))
        assert hash(compile_wildcard("a**b")) == hash(compile_wildcard("a*b"))

    def test_different_patterns_are_not_equal(self) -> None:
        assert not compile_wildcard("a*").equals(compile_wildcard("a?"))
        assert not compile_wildcard("a").equals("a")

    def test_is_literal(self) -> None:
        assert compile_wildcard("abc").is_literal()
        assert compile_wildcard(r"a\*c").is_literal()
        assert not compile_wildcard("a*c").is_literal()


# ──────────────────────────────────────────────────────────────────────────────
# Matching
# ──────────────────────────────────────────────────────────────────────────────


class TestPatternTest:
    """Whole-string matching semantics."""

    @pytest.mark.parametrize(
        "pattern,candidate,expected",
        [
            ("abc", "abc", True),
            ("abc", "abcd", False),
            ("a*", "a", True),
            ("a*", "abc", True),
            ("a*", "ba", False),
            ("?", "1", True),
            ("?", "", False),
            ("?", "12", False),
            ("gr*", "green", True),
            ("gr*", "black", False),
            ("def*", "def", True),
            ("*x*", "axb", True),
            ("a?c", "abc", True),
            ("", "", True),
            ("", "a", False),
        ],
    )
    def test_matches(self, pattern: str, candidate: str, expected: bool) -> None:
        assert compile_wildcard(pattern).test(candidate) is expected

    def test_regex_metacharacters_are_literal(self) -> None:
        pattern = compile_wildcard("a.b[1]+")
        assert pattern.test("a.b[1]+")
        assert not pattern.test("axb1")

    def test_escaped_wildcard_is_literal(self) -> None:
        pattern = compile_wildcard(r"a\*")
        assert pattern.test("a*")
        assert not pattern.test("ab")

    def test_any_string_spans_newlines(self) -> None:
        assert compile_wildcard("a*b").test("a\nb")


# ──────────────────────────────────────────────────────────────────────────────
# Parsing from a token stream
# ──────────────────────────────────────────────────────────────────────────────


class TestParseUnixWildcard:
    """Reading one pattern from a shared tokenizer."""

    def test_stops_at_non_wildcard_operator(self) -> None:
        tokenizer = Tokenizer("a*b/c", "\\", frozenset("*?/"))
        pattern = parse_unix_wildcard(tokenizer)
        assert pattern.parts == (Literal("a"), AnyString(), Literal("b"))
        assert tokenizer.current is not None
        assert tokenizer.current.type is TokenType.OPERATOR
        assert tokenizer.current.data == "/"

    def test_consumes_to_end(self) -> None:
        tokenizer = Tokenizer("?x", "\\", frozenset("*?"))
        assert parse_unix_wildcard(tokenizer).parts == (AnyChar(), Literal("x"))
        assert tokenizer.current is None

    def test_empty_when_positioned_on_delimiter(self) -> None:
        tokenizer = Tokenizer("/a", "\\", frozenset("*?/"))
        assert parse_unix_wildcard(tokenizer) == Pattern()
        assert tokenizer.current is not None and tokenizer.current.data == "/"

    def test_restricted_wildcard_set(self) -> None:
        """A wildcard character outside ``operators`` ends the pattern."""
        tokenizer = Tokenizer("a?b", "\\", frozenset("*?"))
        pattern = parse_unix_wildcard(tokenizer, operators=frozenset("*"))
        assert pattern == Pattern.literal("a")
        assert tokenizer.current is not None and tokenizer.current.data == "?"
