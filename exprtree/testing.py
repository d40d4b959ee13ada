import json
from pathlib import Path
from typing import Any, Union

from .core.builder import make_literal, make_operator
from .core.expressions import MathExpression

TreeData = Union[int, float, list]


def build_tree(data: TreeData) -> MathExpression:
    """Build a tree from nested JSON style data.

    A number becomes a literal. A list is `[symbol, left]` for negation (symbol
    "neg") or `[symbol, left, right]` for the binary operators, e.g.

        ["*", 5, ["-", 10, 3]]

    # Arguments
    data (TreeData): The nested tree description

    # Returns
    (MathExpression): The root of the new tree.
    """
    if isinstance(data, bool):
        raise ValueError(f"invalid tree data: {data!r}")
    if isinstance(data, (int, float)):
        return make_literal(data)
    if not isinstance(data, (list, tuple)) or len(data) not in (2, 3):
        raise ValueError(f"invalid tree data: {data!r}")
    symbol, *operands = data
    children = [build_tree(operand) for operand in operands]
    return make_operator(symbol, *children)


def load_tree_tests(name: str) -> Any:
    """Load a set of JSON tree test assertions.

    # Arguments
    name (str): The name of the test JSON file to open, e.g. "render"

    # Returns
    (dict): The decoded fixture. Each example holds a "tree" for #build_tree and
    the expected outputs for it.
    """
    fixture_file = (
        Path(__file__).parent.parent / "tests" / "fixtures" / "{}.json".format(name)
    )
    if not fixture_file.is_file() is True:
        raise ValueError(f"does not exist: {fixture_file}")
    with open(fixture_file, "r") as file:
        return json.load(file)
