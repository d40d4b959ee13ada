"""Builder
---

Trees are built bottom-up: literals first, then operators that take ownership
of the nodes handed to them.

```python
from exprtree import ExprNodeType, make_literal, make_operator

tree = make_operator(
    ExprNodeType.MUL,
    make_literal(5),
    make_operator(ExprNodeType.SUB, make_literal(10), make_literal(3)),
)
assert str(tree) == "(5 * (10 - 3))"
```
"""
from typing import Dict, Optional, Type, Union

from wasabi import msg

from ..config import ExprTreeConfig
from .errors import InvalidTree
from .expressions import (
    AddExpression,
    BinaryExpression,
    DivideExpression,
    ExprNodeType,
    LiteralExpression,
    MathExpression,
    MultiplyExpression,
    NegateExpression,
    PowerExpression,
    SubtractExpression,
)

BINARY_TYPES: Dict[ExprNodeType, Type[BinaryExpression]] = {
    ExprNodeType.ADD: AddExpression,
    ExprNodeType.SUB: SubtractExpression,
    ExprNodeType.MUL: MultiplyExpression,
    ExprNodeType.DIV: DivideExpression,
    ExprNodeType.POWER: PowerExpression,
}


def make_literal(value: float) -> LiteralExpression:
    """Create a literal leaf holding `value` as a double."""
    return LiteralExpression(value)


def make_operator(
    kind: Union[ExprNodeType, str],
    left: MathExpression,
    right: Optional[MathExpression] = None,
) -> MathExpression:
    """Create an operator node that owns `left` and `right`.

    # Arguments
    kind (ExprNodeType|str): The operator kind, its value ("add") or its symbol ("+").
        Negation is `ExprNodeType.NEGATE` or "neg".
    left (MathExpression): The first operand.
    right (Optional[MathExpression]): The second operand. Must be None for negation
        and present for every other operator.

    # Raises
    InvalidTree: when the operand count does not match the kind, or an operand
        is already owned by another node.
    """
    kind = ExprNodeType.coerce(kind)
    if kind == ExprNodeType.LITERAL:
        raise InvalidTree("literal nodes are created with make_literal")
    if kind == ExprNodeType.NEGATE:
        if right is not None:
            raise InvalidTree("negate takes a single operand, got a right child")
        return NegateExpression(left)
    if right is None:
        raise InvalidTree("{} requires both left and right operands".format(kind.value))
    return BINARY_TYPES[kind](left, right)


def release(tree: Optional[MathExpression], config: ExprTreeConfig = None) -> int:
    """Release a tree, children before parents. Releasing None does nothing.

    Returns the number of nodes released."""
    if tree is None:
        return 0
    if config is None:
        config = ExprTreeConfig()
    released = tree.release()
    if config.verbose:
        msg.info(f"released {released} nodes")
    return released
