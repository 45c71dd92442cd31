"""Singly linked lists, plus a queue and a stack built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Optional[Node] = None


def _iter_nodes(node: Optional[Node]) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.next


def _reverse_from(node: Optional[Node]) -> Optional[Node]:
    if node is None or node.next is None:
        return node
    new_head = _reverse_from(node.next)
    node.next.next = node
    node.next = None
    return new_head


def _reverse_groups_from(head: Optional[Node], k: int) -> Optional[Node]:
    previous: Optional[Node] = None
    current = head
    count = 0
    while current is not None and count < k:
        following = current.next
        current.next = previous
        previous = current
        current = following
        count += 1
    if current is not None and head is not None:
        head.next = _reverse_groups_from(current, k)
    return previous


class LinkedList:
    """A singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _iter_nodes(self._head))

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _refresh_tail(self) -> None:
        self._tail = None
        for node in _iter_nodes(self._head):
            self._tail = node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it becomes the 1-based ``position``-th item."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position must be between 1 and {self._size + 1}")
        if position == 1:
            self._head = Node(value, self._head)
            if self._tail is None:
                self._tail = self._head
            self._size += 1
            return
        if position == self._size + 1:
            self.append(value)
            return
        before = self._head
        for _ in range(position - 2):
            before = before.next
        before.next = Node(value, before.next)
        self._size += 1

    def insert_sorted(self, value: Any) -> None:
        """Insert ``value`` before the first item not smaller than it."""
        position = 1
        for item in self:
            if item >= value:
                break
            position += 1
        self.insert(value, position)

    def remove(self, value: Any) -> None:
        """Remove the first item equal to ``value``."""
        previous: Optional[Node] = None
        for node in _iter_nodes(self._head):
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} not in list")

    def delete_alternate(self) -> None:
        """Remove the 2nd, 4th, 6th ... items."""
        node = self._head
        while node is not None and node.next is not None:
            node.next = node.next.next
            self._size -= 1
            node = node.next
        self._refresh_tail()

    def reverse(self) -> None:
        """Reverse the list in place, iteratively."""
        previous: Optional[Node] = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""
        self._tail = self._head
        self._head = _reverse_from(self._head)

    def reverse_in_groups(self, k: int) -> None:
        """Reverse every run of ``k`` items; a shorter last run is reversed too."""
        if k < 1:
            raise ValueError("k must be at least 1")
        self._head = _reverse_groups_from(self._head, k)
        self._refresh_tail()

    def sum_of_last(self, n: int) -> Any:
        """Return the sum of the last ``n`` items (all of them if ``n`` is larger)."""
        skip = self._size - n
        return sum(value for index, value in enumerate(self) if index >= skip)


class LinkedQueue:
    """A first-in first-out queue on linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to back."""
        return (node.value for node in _iter_nodes(self._head))

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front item."""
        if self._head is None:
            raise IndexError("pop from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self._head is None:
            raise IndexError("peek at empty queue")
        return self._head.value


class LinkedStack:
    """A last-in first-out stack on linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        return (node.value for node in _iter_nodes(self._top))

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise IndexError("stack underflow")
        return self._top.value

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._top is None