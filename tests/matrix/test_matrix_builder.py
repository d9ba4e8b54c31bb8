"""Tests for the matrix element state machine."""

import pytest

from matrixpath.errors import PathSyntaxError
from matrixpath.matrix import BuilderState, MatrixElement, MatrixPathBuilder


def _build(*items: str) -> list:
    """Feed items to a string builder; single reserved characters are operators."""
    builder = MatrixPathBuilder(MatrixElement, str, "")
    for item in items:
        if item in ("/", ";", "="):
            builder.add_operator(item)
        else:
            builder.add_value(item)
    return builder.build()


def test_initial_state_expects_name():
    builder = MatrixPathBuilder(MatrixElement, str, "")
    assert builder.state is BuilderState.EXPECT_NAME


def test_operator_sets_state():
    builder = MatrixPathBuilder(MatrixElement, str, "")
    builder.add_operator(";")
    assert builder.state is BuilderState.EXPECT_ATTR_KEY
    builder.add_operator("=")
    assert builder.state is BuilderState.EXPECT_ATTR_VALUE
    builder.add_operator("/")
    assert builder.state is BuilderState.EXPECT_NAME


def test_unknown_operator_rejected():
    builder = MatrixPathBuilder(MatrixElement, str, "")
    with pytest.raises(ValueError):
        builder.add_operator("*")


def test_names_and_attributes():
    elements = _build("a", ";", "k", "=", "v", "/", "b")
    assert elements == [MatrixElement("a", {"k": "v"}), MatrixElement("b")]


def test_bare_flag_at_end():
    assert _build("a", ";", "draft") == [MatrixElement("a", {"draft": None})]


def test_bare_flag_before_next_key():
    elements = _build("a", ";", "draft", ";", "k", "=", "v")
    assert elements == [MatrixElement("a", {"draft": None, "k": "v"})]


def test_bare_flag_before_next_element():
    """A flag is kept when ``/`` starts the next element."""
    elements = _build("a", ";", "draft", "/", "b")
    assert elements == [MatrixElement("a", {"draft": None}), MatrixElement("b")]


def test_key_with_missing_value_gets_empty_value():
    """``k=`` stores the empty value, which is distinct from a bare flag."""
    assert _build("a", ";", "k", "=") == [MatrixElement("a", {"k": ""})]
    assert _build("a", ";", "k", "=", ";", "j") == [
        MatrixElement("a", {"k": "", "j": None})
    ]
    assert _build("a", ";", "k", "=", "/", "b") == [
        MatrixElement("a", {"k": ""}),
        MatrixElement("b"),
    ]


def test_empty_value_comes_from_builder_argument():
    builder = MatrixPathBuilder(MatrixElement, str, "<empty>")
    for item in ("a", ";", "k", "="):
        if item in (";", "="):
            builder.add_operator(item)
        else:
            builder.add_value(item)
    assert builder.build() == [MatrixElement("a", {"k": "<empty>"})]


def test_consecutive_operators_absorbed():
    assert _build("a", "/", "/", "b") == [MatrixElement("a"), MatrixElement("b")]
    assert _build("a", ";", ";", "k") == [MatrixElement("a", {"k": None})]


def test_value_without_key_raises():
    with pytest.raises(PathSyntaxError, match="unexpected '='"):
        _build("a", "=", "b")


def test_second_value_for_same_key_raises():
    with pytest.raises(PathSyntaxError):
        _build("a", ";", "k", "=", "v", "=", "w")


def test_attributes_before_name_are_dropped():
    assert _build(";", "k", "=", "v", "/", "a") == [MatrixElement("a")]


def test_repeated_key_keeps_last_value():
    elements = _build("a", ";", "k", "=", "1", ";", "k", "=", "2")
    assert elements == [MatrixElement("a", {"k": "2"})]


def test_key_conversion_applied():
    builder = MatrixPathBuilder(MatrixElement, str.upper, "")
    builder.add_value("a")
    builder.add_operator(";")
    builder.add_value("k")
    assert builder.build() == [MatrixElement("a", {"K": None})]


def test_empty_input():
    assert _build() == []
