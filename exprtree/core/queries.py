from typing import Optional

from .expressions import MathExpression


def depth(tree: Optional[MathExpression]) -> int:
    """The number of nodes on the longest root-to-leaf path. An absent tree
    has depth 0."""
    if tree is None:
        return 0
    tree._check_live()
    return tree.depth()


def count(tree: Optional[MathExpression]) -> int:
    """The total number of nodes in the tree, 0 for an absent tree."""
    if tree is None:
        return 0
    tree._check_live()
    return tree.count()


def evaluate(tree: Optional[MathExpression]) -> float:
    """Evaluate the tree with IEEE-754 double semantics. An absent tree evaluates
    to 0.0. Division by zero and domain errors produce `inf`/`nan` instead of
    raising."""
    if tree is None:
        return 0.0
    tree._check_live()
    return tree.evaluate()
