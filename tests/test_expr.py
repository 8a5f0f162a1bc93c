"""
Tests for the expression tree: rendering, equality, traversal.
"""

import dataclasses

import pytest

from calclab import BinaryOp, Number, Op, parse
from calclab.expr import format_number


def test_render_fully_parenthesized():
    assert str(parse("1+2*3")) == "(1 + (2 * 3))"
    assert str(parse("2(3 - 1)")) == "(2 * (3 - 1))"
    assert str(parse("-2(-3(1/3))")) == "(-2 * (-3 * (1 / 3)))"


def test_render_number_leaf():
    assert str(Number(5.0)) == "5"
    assert str(Number(-5.0)) == "-5"
    assert str(Number(2.5)) == "2.5"


def test_format_number_non_finite():
    assert format_number(float("inf")) == "inf"


@pytest.mark.parametrize("text", [
    "1 + 2 * 3",
    "10 - 2 - 3",
    "10 / 2 / 5",
    "(1 + 2) * 3",
    "10 / (2 + 3)",
    "-2(-3(1/3))",
    "(2)(3)",
    "10 + -2",
    "((1 + 2) * (3 + 4)) / 7 - 8(2)",
])
def test_render_then_reparse(text):
    """Rendering keeps precedence and associativity: reparsing gives the same tree."""
    tree = parse(text)
    again = parse(str(tree))
    assert again == tree
    assert again.evaluate() == tree.evaluate()


def test_operator_symbols():
    assert [str(op) for op in Op] == ["+", "-", "*", "/"]
    assert Op.from_symbol("/") is Op.DIV
    with pytest.raises(ValueError):
        Op.from_symbol("^")


def test_nodes_are_immutable():
    node = BinaryOp(Number(1), Op.ADD, Number(2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.op = Op.SUB
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.left.value = 3


def test_structural_equality():
    assert parse("1 + 2") == BinaryOp(Number(1), Op.ADD, Number(2))
    assert parse("1 + 2") != parse("2 + 1")
    assert Number(1) != BinaryOp(Number(1), Op.ADD, Number(0))


def test_walk_is_post_order_left_first():
    tree = parse("1 - 2 * 3")
    rendered = [str(node) for node in tree.walk()]
    assert rendered == ["1", "2", "3", "(2 * 3)", "(1 - (2 * 3))"]


def test_depth():
    assert Number(1).depth() == 1
    assert parse("1 + 2").depth() == 2
    assert parse("(1 + 2) * (3 + 4)").depth() == 3
