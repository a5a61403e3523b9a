"""Singly-linked LIFO stack used to carry the token stream.

Each node owns the next one. Access never raises: ``pop()`` and ``peek()``
return None on an empty stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class Stack(Generic[T]):
    """Last-in-first-out container built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Place value on top of the stack."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Optional[T]:
        """Remove and return the top value, or None when empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        self._size -= 1
        return node.value

    def peek(self) -> Optional[T]:
        """Return the top value without removing it, or None when empty."""
        if self._head is None:
            return None
        return self._head.value

    def reversed(self) -> Stack[T]:
        """Drain this stack into a new one, flipping the order.

        This stack is empty afterwards.
        """
        result: Stack[T] = Stack()
        while self._head is not None:
            result.push(self.pop())
        return result

    def iterate(self) -> Iterator[T]:
        """Yield values top to bottom without mutating the stack."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def clear(self) -> None:
        """Release every node, detaching the head one node at a time."""
        node = self._head
        self._head = None
        self._size = 0
        while node is not None:
            node.next, node = None, node.next

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"Stack([{', '.join(repr(v) for v in self.iterate())}])"

    def __del__(self) -> None:
        # Refcount teardown of a long chain would recurse once per node.
        self.clear()
