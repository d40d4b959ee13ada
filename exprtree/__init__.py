from .about import __version__
from .config import ExprTreeConfig
from .core.builder import make_literal, make_operator, release
from .core.errors import ExprTreeException, InvalidCapacity, InvalidTree, ReleasedTree
from .core.expressions import (
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
    UnaryExpression,
)
from .core.queries import count, depth, evaluate
from .core.serializer import RenderResult, format_number, tree_to_string
from .core.tree import STOP, BinaryTreeNode
