"""A stack that reports its minimum in constant time."""

from __future__ import annotations


class MinStack:
    """Stack of integers tracking the smallest element it holds."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """The top value, left in place."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """The smallest value currently on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]