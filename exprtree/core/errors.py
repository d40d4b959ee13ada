class ExprTreeException(Exception):
    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message


class InvalidTree(ExprTreeException):
    """The tree shape breaks the node invariants, or a node is shared between
    two parents."""


class InvalidCapacity(ExprTreeException):
    pass


class ReleasedTree(ExprTreeException):
    pass
