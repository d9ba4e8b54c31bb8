"""Tests for PatternPath: one wildcard pattern per segment."""

import pytest

from matrixpath.path import Path, PatternPath
from matrixpath.pattern import Pattern, compile_wildcard


def test_parse_segments():
    path = PatternPath.parse("a*/b?/c")
    assert len(path) == 3
    assert path.head() == compile_wildcard("a*")
    assert path.last() == Pattern.literal("c")


def test_parse_empty_string():
    assert PatternPath.parse("").is_empty()


def test_parse_absorbs_empty_segments():
    """Empty segments are skipped, as in Path.parse."""
    assert len(PatternPath.parse("/a//b/")) == 2


def test_escaped_delimiter_and_wildcards():
    path = PatternPath.parse(r"a\/b/\*")
    assert len(path) == 2
    assert path.head().test("a/b")
    assert path.last().test("*")
    assert not path.last().test("x")


@pytest.mark.parametrize("text", ["a*/b?/c", r"x\*/y\/z", "*", "", r"\\"])
def test_round_trip(text: str) -> None:
    path = PatternPath.parse(text)
    assert path.to_string() == text
    assert PatternPath.parse(str(path)) == path


def test_equality_is_structural():
    assert PatternPath.parse("a**/b") == PatternPath.parse("a*/b")
    assert PatternPath.parse("a*/b").equals(PatternPath.parse("a*/b"))
    assert not PatternPath.parse("a*/b").equals(PatternPath.parse("a?/b"))


def test_derivations_keep_pattern_path_type():
    path = PatternPath.parse("a/b/c")
    assert type(path.tail()) is PatternPath
    assert type(path.parent()) is PatternPath
    assert type(path.slice(0, 1)) is PatternPath


def test_starts_with_patterns():
    path = PatternPath.parse("a*/b/c")
    assert path.starts_with(PatternPath.parse("a*"))
    assert not path.starts_with(PatternPath.parse("a"))


def test_three_segment_pattern_never_matches_other_lengths():
    pattern = PatternPath.parse("*/*/*")
    assert not Path.parse("a/b").matches(pattern)
    assert not Path.parse("a/b/c/d").matches(pattern)
    assert Path.parse("x/y/z").matches(pattern)
