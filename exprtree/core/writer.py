from typing import List, Optional


class BoundedWriter:
    """Accumulates rendered text without ever holding more than `capacity`
    characters. Once a write does not fit, the writer keeps the characters that
    did fit, flips `overflowed`, and ignores every later write.

    A `capacity` of None is unbounded."""

    capacity: Optional[int]
    length: int
    overflowed: bool

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self.length = 0
        self.overflowed = False
        self._parts: List[str] = []

    def write(self, text: str) -> bool:
        """Append `text`. Returns False once the writer has overflowed."""
        if self.overflowed:
            return False
        if self.capacity is not None:
            room = self.capacity - self.length
            if len(text) > room:
                text = text[:room]
                self.overflowed = True
        self._parts.append(text)
        self.length += len(text)
        return not self.overflowed

    def getvalue(self) -> str:
        return "".join(self._parts)
