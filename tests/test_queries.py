import math
import random

import pytest

from exprtree import (
    ExprNodeType,
    LiteralExpression,
    count,
    depth,
    evaluate,
    make_literal,
    make_operator,
)
from exprtree.testing import build_tree, load_tree_tests

BINARY_KINDS = [
    ExprNodeType.ADD,
    ExprNodeType.SUB,
    ExprNodeType.MUL,
    ExprNodeType.DIV,
    ExprNodeType.POWER,
]


def random_binary_tree(rng: random.Random, binary_nodes: int):
    """Build a random tree with exactly `binary_nodes` operators and no negation"""
    if binary_nodes == 0:
        return make_literal(rng.randint(-9, 9))
    on_left = rng.randint(0, binary_nodes - 1)
    return make_operator(
        rng.choice(BINARY_KINDS),
        random_binary_tree(rng, on_left),
        random_binary_tree(rng, binary_nodes - 1 - on_left),
    )


def longest_path(tree) -> int:
    longest = 0

    def visit_fn(node, depth, data):
        nonlocal longest
        if node.is_leaf():
            longest = max(longest, depth + 1)

    tree.visit_preorder(visit_fn)
    return longest


def test_queries_absent_tree():
    assert depth(None) == 0
    assert count(None) == 0
    assert evaluate(None) == 0.0


@pytest.mark.parametrize("value", [23400000, -1000, 0, -0.125, 1e18, 6.5])
def test_queries_literal(value: float):
    tree = make_literal(value)
    assert depth(tree) == 1
    assert count(tree) == 1
    assert evaluate(tree) == value


@pytest.mark.parametrize("value", [-0.125, 3, 0.0, 1e300])
def test_queries_double_negation_round_trips(value: float):
    tree = make_operator(
        ExprNodeType.NEGATE, make_operator(ExprNodeType.NEGATE, make_literal(value))
    )
    assert evaluate(tree) == value


def test_queries_fixture_values():
    for example in load_tree_tests("render")["valid"]:
        tree = build_tree(example["tree"])
        assert depth(tree) == example["depth"], example
        assert count(tree) == example["count"], example
        assert evaluate(tree) == pytest.approx(example["value"]), example


@pytest.mark.parametrize("seed", range(10))
def test_queries_binary_tree_counts(seed: int):
    rng = random.Random(seed)
    binary_nodes = rng.randint(0, 30)
    tree = random_binary_tree(rng, binary_nodes)
    literals = len(tree.find_type(LiteralExpression))
    assert literals == binary_nodes + 1
    assert count(tree) == binary_nodes + literals == 2 * binary_nodes + 1
    assert depth(tree) == longest_path(tree)


def test_queries_depth_with_negation():
    # 1 + max(depth(left), 0) for the one-child node
    tree = make_operator(
        ExprNodeType.ADD,
        make_literal(1),
        make_operator(ExprNodeType.NEGATE, make_operator("neg", make_literal(2))),
    )
    assert depth(tree) == 4
    assert count(tree) == 5


def test_queries_evaluate_scenarios():
    assert evaluate(make_operator("+", make_literal(1), make_literal(3))) == 4
    tree = make_operator(
        "*", make_literal(5), make_operator("-", make_literal(10), make_literal(3))
    )
    assert evaluate(tree) == 35
    assert count(tree) == 5
    assert depth(tree) == 3
    assert evaluate(make_operator("^", make_literal(2), make_literal(3))) == 8
    assert evaluate(make_operator("/", make_literal(3), make_literal(0))) == math.inf


def test_queries_evaluate_is_repeatable():
    tree = build_tree(["/", ["^", 2, ["*", 1.5, 2]], ["+", -1.7, ["-", 6, 0.3]]])
    first = evaluate(tree)
    assert first == pytest.approx(2)
    assert evaluate(tree) == first


def test_queries_very_deep_trees():
    """trees far deeper than the interpreter's recursion limit"""
    right_heavy = make_literal(1)
    for _ in range(2000):
        right_heavy = make_operator("+", make_literal(1), right_heavy)
    assert depth(right_heavy) == 2001
    assert count(right_heavy) == 4001
    assert evaluate(right_heavy) == 2001.0

    left_heavy = make_literal(0)
    for i in range(1, 2001):
        left_heavy = make_operator("-", left_heavy, make_literal(i))
    assert depth(left_heavy) == 2001
    assert count(left_heavy) == 4001
    assert evaluate(left_heavy) == -float(sum(range(1, 2001)))

    negations = make_literal(3)
    for _ in range(2001):
        negations = make_operator("neg", negations)
    assert depth(negations) == 2002
    assert count(negations) == 2002
    assert evaluate(negations) == -3.0
