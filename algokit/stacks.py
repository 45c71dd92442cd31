"""Array-backed stacks."""

from __future__ import annotations

from typing import Any


class TwoStacks:
    """Two stacks sharing one fixed-size array, growing towards each other."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._slots: list[Any] = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    def _full(self) -> bool:
        return self._top1 + 1 == self._top2

    def push1(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        if self._full():
            raise OverflowError("no room left in the shared array")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        if self._full():
            raise OverflowError("no room left in the shared array")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> Any:
        """Pop from the first stack."""
        if self._top1 == -1:
            raise IndexError("first stack is empty")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Pop from the second stack."""
        if self._top2 == len(self._slots):
            raise IndexError("second stack is empty")
        value = self._slots[self._top2]
        self._top2 += 1
        return value


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items


def reverse_words(sentence: str) -> str:
    """Return the space-separated words of ``sentence`` in reverse order.

    At most 100 words are accepted.
    """
    stack = BoundedStack(100)
    for word in sentence.split(" "):
        stack.push(word)
    words = []
    while not stack.is_empty():
        words.append(stack.pop())
    return " ".join(words)