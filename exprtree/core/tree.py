from typing import Callable, List, Optional

from .errors import InvalidTree, ReleasedTree

# ## Constants

# Return this from a node visit function to abort a tree visit.
STOP = "stop"

VisitFunction = Callable[["BinaryTreeNode", int, object], Optional[str]]


class BinaryTreeNode:
    """
    The binary tree node is the base node for all of our trees. It owns its
    children exclusively: a node attached as a child records its `parent`, and
    a node that already has a parent cannot be attached anywhere else. This keeps
    every tree a strict tree, never a DAG and never cyclic.

    Children are assigned once, in the constructor. There is no public API for
    swapping them afterwards.
    """

    left: Optional["BinaryTreeNode"]
    right: Optional["BinaryTreeNode"]
    parent: Optional["BinaryTreeNode"]

    def __init__(
        self, left: "BinaryTreeNode" = None, right: "BinaryTreeNode" = None,
    ):
        self.left = None
        self.right = None
        self.parent = None
        self._released = False
        if left is not None and left is right:
            raise InvalidTree("the same node cannot be both left and right child")
        # Validate both sides before taking ownership of either, so a failed
        # construction leaves the caller's nodes untouched.
        self._check_attachable(left)
        self._check_attachable(right)
        self._set_left(left)
        self._set_right(right)

    @property
    def name(self):
        """Human readable name for this node."""
        return "BinaryTreeNode"

    @property
    def released(self) -> bool:
        return self._released

    def is_leaf(self) -> bool:
        """Is this node a leaf?  A node is a leaf if it has no children."""
        return not self.left and not self.right

    def _check_attachable(self, child: Optional["BinaryTreeNode"]) -> None:
        if child is None:
            return
        if not isinstance(child, BinaryTreeNode):
            raise InvalidTree(
                "children must be tree nodes, got: {}".format(type(child).__name__)
            )
        if child is self:
            raise InvalidTree("nodes cannot be their own children")
        if child.released:
            raise ReleasedTree("cannot attach a released node")
        if child.parent is not None:
            raise InvalidTree(
                "node is already owned by another node: {}".format(child.name)
            )

    def _set_left(self, child: Optional["BinaryTreeNode"]) -> None:
        self.left = child
        if child is not None:
            child.parent = self

    def _set_right(self, child: Optional["BinaryTreeNode"]) -> None:
        self.right = child
        if child is not None:
            child.parent = self

    def _check_live(self) -> None:
        if self._released:
            raise ReleasedTree("{} has already been released".format(self.name))

    def visit_preorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree preorder, which visits the current node, then its left
        child, and then its right child.

        *Visit -> Left -> Right*

        This method accepts a function that will be invoked for each node in the
        tree.  The callback function is passed three arguments: the node being
        visited, the current depth in the tree, and a user specified data parameter.

        !!! info

            Traversals may be canceled by returning `STOP` from any visit function.
        """
        if visit_fn and visit_fn(self, depth, data) == STOP:
            return STOP

        if self.left and self.left.visit_preorder(visit_fn, depth + 1, data) == STOP:
            return STOP

        if self.right and self.right.visit_preorder(visit_fn, depth + 1, data) == STOP:
            return STOP

    def visit_inorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree inorder, which visits the left child, then the current node,
        and then its right child.

        *Left -> Visit -> Right*
        """
        if self.left and self.left.visit_inorder(visit_fn, depth + 1, data) == STOP:
            return STOP

        if visit_fn and visit_fn(self, depth, data) == STOP:
            return STOP

        if self.right and self.right.visit_inorder(visit_fn, depth + 1, data) == STOP:
            return STOP

    def visit_postorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree postorder, which visits its left child, then its right child,
        and finally the current node.

        *Left -> Right -> Visit*
        """
        if self.left and self.left.visit_postorder(visit_fn, depth + 1, data) == STOP:
            return STOP

        if self.right and self.right.visit_postorder(visit_fn, depth + 1, data) == STOP:
            return STOP

        if visit_fn and visit_fn(self, depth, data) == STOP:
            return STOP

    def get_children(self) -> List["BinaryTreeNode"]:
        """Get children as an array.  If there are two children, the first object will
        always represent the left child, and the second will represent the right."""
        result = []
        if self.left:
            result.append(self.left)

        if self.right:
            result.append(self.right)

        return result

    def release(self) -> int:
        """Release this tree, children first. Only a root can be released; a
        subtree belongs to its parent and goes away with it.

        Returns the number of nodes released."""
        self._check_live()
        if self.parent is not None:
            raise InvalidTree("cannot release a node that is owned by a parent")
        return self._release()

    def _release(self) -> int:
        # Explicit stack so tree depth is not limited by the interpreter's
        # recursion limit. Reversing the root-right-left order yields post-order.
        pending: List[BinaryTreeNode] = [self]
        ordered: List[BinaryTreeNode] = []
        while pending:
            node = pending.pop()
            ordered.append(node)
            pending.extend(node.get_children())
        for node in reversed(ordered):
            node.left = None
            node.right = None
            node.parent = None
            node._released = True
        return len(ordered)
