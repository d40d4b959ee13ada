from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, Type, TypeVar, Union

import numpy as np

from .errors import InvalidTree
from .tree import BinaryTreeNode
from .writer import BoundedWriter


class ExprNodeType(Enum):
    """The kind of an expression node."""

    LITERAL = "literal"
    NEGATE = "negate"
    ADD = "add"
    SUB = "subtract"
    MUL = "multiply"
    DIV = "divide"
    POWER = "power"

    @property
    def symbol(self) -> str:
        return _TYPE_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "ExprNodeType":
        """Look up a binary operator by its rendered symbol, e.g. "+" or "^".
        Negation is spelled "neg" since "-" already means subtraction."""
        for node_type, node_symbol in _TYPE_SYMBOLS.items():
            if node_type in (cls.LITERAL, cls.NEGATE):
                continue
            if node_symbol == symbol:
                return node_type
        if symbol == "neg":
            return cls.NEGATE
        raise InvalidTree("unknown operator symbol: {}".format(symbol))

    @classmethod
    def coerce(cls, kind) -> "ExprNodeType":
        """Accept an ExprNodeType, one of its values ("add"), or an operator
        symbol ("+")."""
        if isinstance(kind, ExprNodeType):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind)
            except ValueError:
                return cls.from_symbol(kind)
        raise InvalidTree("invalid node kind: {!r}".format(kind))


_TYPE_SYMBOLS = {
    ExprNodeType.LITERAL: "",
    ExprNodeType.NEGATE: "-",
    ExprNodeType.ADD: "+",
    ExprNodeType.SUB: "-",
    ExprNodeType.MUL: "*",
    ExprNodeType.DIV: "/",
    ExprNodeType.POWER: "^",
}

NodeType = TypeVar("NodeType", bound="MathExpression")


def format_number(value: float) -> str:
    """Render a literal value. Integral values drop the decimal point entirely,
    everything else uses the shortest positional form that round-trips."""
    if value % 1 == 0:
        return f"{int(value)}"
    return np.format_float_positional(value, trim="-")


class MathExpression(BinaryTreeNode):
    """Math tree node with helpers for inspecting expressions."""

    left: Optional["MathExpression"]
    right: Optional["MathExpression"]
    parent: Optional["MathExpression"]

    @property
    def kind(self) -> ExprNodeType:
        raise NotImplementedError("must be implemented in subclass")

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def raw(self) -> str:
        """raw text representation of the expression."""
        return str(self)

    def operands(self) -> List["MathExpression"]:
        """The child expressions this node combines, left first."""
        return self.get_children()

    def apply(self, values: List[Any]) -> Any:
        """Compute this node's value from the values of its operands"""
        raise NotImplementedError("must be implemented in subclass")

    def render_parts(self) -> List[Union[str, "MathExpression"]]:
        """The text fragments and child expressions this node renders as, in
        output order."""
        raise NotImplementedError("must be implemented in subclass")

    def copy_with(self, operands: List["MathExpression"]) -> "MathExpression":
        """Create a node of the same kind that owns the given operands."""
        raise NotImplementedError("must be implemented in subclass")

    def fold(self, fn: Callable[["MathExpression", List[Any]], Any]) -> Any:
        """Reduce the tree bottom-up. `fn` receives each node and the results
        of its operands, left first, and returns the node's result.

        The walk keeps its own stack, so deep trees do not hit the
        interpreter's recursion limit."""
        results: List[Any] = []
        pending: List[Tuple[MathExpression, bool]] = [(self, False)]
        while pending:
            node, expanded = pending.pop()
            operands = node.operands()
            if expanded or not operands:
                split = len(results) - len(operands)
                values = results[split:]
                del results[split:]
                results.append(fn(node, values))
                continue
            pending.append((node, True))
            # Pushed right to left so the left operand is reduced first
            pending.extend((child, False) for child in reversed(operands))
        return results[0]

    def evaluate(self) -> float:
        """Evaluate the expression to a double precision value"""
        return self.fold(lambda node, values: node.apply(values))

    def render(self, writer: BoundedWriter) -> None:
        """Write this expression into the given writer, stopping as soon as the
        writer overflows."""
        pending: List[Union[str, MathExpression]] = [self]
        while pending and not writer.overflowed:
            item = pending.pop()
            if isinstance(item, str):
                writer.write(item)
            else:
                pending.extend(reversed(item.render_parts()))

    def clone(self) -> "MathExpression":
        """Create a deep copy of this tree. The copy is a new, unowned root."""
        return self.fold(lambda node, copies: node.copy_with(copies))

    def depth(self) -> int:
        return self.fold(lambda node, depths: 1 + max(depths, default=0))

    def count(self) -> int:
        return self.fold(lambda node, counts: 1 + sum(counts))

    def to_list(self, visit: str = "preorder") -> List["MathExpression"]:
        """Convert this node hierarchy into a list."""
        results = []

        def visit_fn(node, depth, data):
            return results.append(node)

        if visit == "inorder":
            self.visit_inorder(visit_fn)
        elif visit == "preorder":
            self.visit_preorder(visit_fn)
        elif visit == "postorder":
            self.visit_postorder(visit_fn)
        else:
            raise ValueError(f"invalid visit order: {visit}")
        return results

    def find_type(self, instanceType: Type[NodeType]) -> List[NodeType]:
        """Find expressions in this tree by type.

        - instanceType: The type to check for instances of

        Returns the found #MathExpression objects of the given type.
        """
        results = []

        def visit_fn(node, depth, data):
            if isinstance(node, instanceType):
                return results.append(node)

        self.visit_inorder(visit_fn)
        return results

    def __str__(self) -> str:
        writer = BoundedWriter()
        self.render(writer)
        return writer.getvalue()

    def __repr__(self) -> str:
        return "<{} {}>".format(self.__class__.__name__, self)


class LiteralExpression(MathExpression):
    """A numeric leaf, where the value is accessible as `node.value`"""

    value: float

    def __init__(self, value: float):
        super().__init__()
        self.value = float(value)

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.LITERAL

    @property
    def symbol(self) -> str:
        return format_number(self.value)

    def copy_with(self, operands: List[MathExpression]) -> "LiteralExpression":
        return LiteralExpression(self.value)

    def apply(self, values: List[float]) -> float:
        return self.value

    def render_parts(self) -> List[Union[str, MathExpression]]:
        return [format_number(self.value)]


class UnaryExpression(MathExpression):
    """An expression that operates on one sub-expression, held as `left`"""

    def __init__(self, child: MathExpression):
        if child is None:
            raise InvalidTree(
                "{} requires an operand".format(self.__class__.__name__)
            )
        super().__init__(left=child)

    def get_child(self) -> MathExpression:
        return self._check()

    def _check(self) -> MathExpression:
        if self.left is None or self.right is not None:
            raise InvalidTree(
                "{}: must have exactly one (left) child".format(
                    self.__class__.__name__
                )
            )
        return self.left

    def operands(self) -> List[MathExpression]:
        return [self._check()]

    def copy_with(self, operands: List[MathExpression]) -> "UnaryExpression":
        return self.__class__(operands[0])

    def apply(self, values: List[float]) -> float:
        return self.operate(values[0])

    def operate(self, value: float) -> float:
        raise NotImplementedError("Must be implemented in subclass")


# ### Negation


class NegateExpression(UnaryExpression):
    """Negate an expression, e.g. `4` becomes `-4`

    !!! note

        Rendering is not injective here. A negative literal is wrapped in its
        own parentheses, so `Negate(Literal(-0.125))` and
        `Negate(Negate(Literal(0.125)))` both render as `(-(-0.125))`. They
        evaluate to the same value, but the rendered text cannot tell the two
        trees apart.
    """

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.NEGATE

    def operate(self, value: float) -> float:
        return -value

    def render_parts(self) -> List[Union[str, MathExpression]]:
        child = self._check()
        # A negative literal keeps its own parens so the signs stay apart,
        # "(-(-0.125))" rather than "(--0.125)"
        if isinstance(child, LiteralExpression) and child.symbol.startswith("-"):
            return ["(-", "(", child, ")", ")"]
        return ["(-", child, ")"]


# ## Binary Expressions


class BinaryExpression(MathExpression):
    """An expression that operates on two sub-expressions. Every binary
    expression renders inside its own set of parentheses, without regard for
    operator precedence."""

    def __init__(self, left: MathExpression, right: MathExpression):
        if left is None or right is None:
            raise InvalidTree(
                "{}: left/right children must both be valid".format(
                    self.__class__.__name__
                )
            )
        super().__init__(left=left, right=right)

    def _check(self) -> Tuple[MathExpression, MathExpression]:
        if self.left is None or self.right is None:
            raise InvalidTree(
                "{}: left/right children must both be valid".format(
                    self.__class__.__name__
                )
            )
        return self.left, self.right

    def operands(self) -> List[MathExpression]:
        return list(self._check())

    def copy_with(self, operands: List[MathExpression]) -> "BinaryExpression":
        left, right = operands
        return self.__class__(left, right)

    def apply(self, values: List[float]) -> float:
        # values arrive left first, the non-commutative operators depend on it
        one, two = np.float64(values[0]), np.float64(values[1])
        # IEEE-754 results (inf, nan) are values here, not errors
        with np.errstate(all="ignore"):
            return float(self.operate(one, two))

    def operate(self, one: np.float64, two: np.float64) -> np.float64:
        raise NotImplementedError("Must be implemented in subclass")

    def render_parts(self) -> List[Union[str, MathExpression]]:
        left, right = self._check()
        return ["(", left, " {} ".format(self.symbol), right, ")"]


class AddExpression(BinaryExpression):
    """Add one and two"""

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.ADD

    def operate(self, one: np.float64, two: np.float64) -> np.float64:
        return one + two


class SubtractExpression(BinaryExpression):
    """Subtract two from one"""

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.SUB

    def operate(self, one: np.float64, two: np.float64) -> np.float64:
        return one - two


class MultiplyExpression(BinaryExpression):
    """Multiply one and two"""

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.MUL

    def operate(self, one: np.float64, two: np.float64) -> np.float64:
        return one * two


class DivideExpression(BinaryExpression):
    """Divide one by two. Division by zero follows IEEE-754 and yields
    `inf`, `-inf` or `nan`."""

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.DIV

    def operate(self, one: np.float64, two: np.float64) -> np.float64:
        return one / two


class PowerExpression(BinaryExpression):
    """Raise one to the power of two"""

    @property
    def kind(self) -> ExprNodeType:
        return ExprNodeType.POWER

    def operate(self, one: np.float64, two: np.float64) -> np.float64:
        return np.power(one, two)
