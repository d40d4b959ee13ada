"""Bounded serializer
---

Render an expression tree as text that never exceeds a caller supplied
capacity. Every operator expression is fully parenthesized and literal operands
are written bare:

    (5 * (10 - 3))
    ((2 ^ 3) / (1.3 + 2.7))
    (-(-0.125))

When the full rendering is longer than the capacity, the result holds the first
`capacity - 1` characters of the full rendering followed by a single `$`
marker, so `len(text) == capacity`. The cut is character exact and can fall
inside a number: `23400000` at capacity 5 is `2340$`.
"""
from typing import NamedTuple, Optional

from wasabi import msg

from ..config import ExprTreeConfig
from .errors import InvalidCapacity, InvalidTree
from .expressions import MathExpression, format_number
from .writer import BoundedWriter

__all__ = ["RenderResult", "format_number", "tree_to_string"]


class RenderResult(NamedTuple):
    text: str
    # Characters in text. Never more than the capacity it was rendered with.
    length: int
    # True when text ends in the truncation marker because the tree did not fit
    truncated: bool


def tree_to_string(
    tree: MathExpression, capacity: int = None, config: ExprTreeConfig = None
) -> RenderResult:
    """Render `tree` into at most `capacity` characters.

    # Arguments
    tree (MathExpression): The tree to render.
    capacity (int): The most characters the caller accepts. Defaults to
        `config.default_capacity`.
    config (ExprTreeConfig): Truncation marker, default capacity and verbosity.

    # Raises
    InvalidTree: if tree is None or not an expression.
    InvalidCapacity: if capacity is not a positive integer.
    ReleasedTree: if tree has been released.

    # Returns
    (RenderResult): The text, its length, and whether it was truncated.
    """
    if config is None:
        config = ExprTreeConfig()
    if capacity is None:
        capacity = config.default_capacity
    if tree is None:
        raise InvalidTree("cannot render an absent tree")
    if not isinstance(tree, MathExpression):
        raise InvalidTree(
            "expected an expression, got: {}".format(type(tree).__name__)
        )
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacity("capacity must be an int, got: {!r}".format(capacity))
    if capacity < 1:
        raise InvalidCapacity("capacity must be at least 1, got: {}".format(capacity))
    tree._check_live()

    writer = BoundedWriter(capacity)
    tree.render(writer)
    text = writer.getvalue()
    if not writer.overflowed:
        return RenderResult(text, len(text), False)

    text = text[: capacity - 1] + config.truncation_marker
    if config.verbose:
        msg.warn(f"rendering truncated to {capacity} chars")
    return RenderResult(text, len(text), True)
