"""Bounded stack and queues, a binary search tree and a min-heap."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class StructureFullError(OverflowError):
    """Raised when a bounded structure has no room for another element."""


class StructureEmptyError(IndexError):
    """Raised when an element is taken from an empty structure."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class Stack:
    """Last-in first-out stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StructureFullError(f"Stack Overflow! Cannot push {value}")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StructureEmptyError("Stack Underflow! Cannot pop")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Elements from top to bottom."""
        return reversed(self._items)


class Queue:
    """Linear first-in first-out queue.

    Slots are never reused: once ``capacity`` elements have been enqueued the
    queue is full, however many of them have been dequeued since.
    """

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if len(self._slots) >= self.capacity:
            raise StructureFullError(f"Queue Overflow! Cannot enqueue {value}")
        self._slots.append(value)

    def dequeue(self) -> Any:
        if self._front >= len(self._slots):
            raise StructureEmptyError("Queue Underflow! Cannot dequeue")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        """Elements from front to rear."""
        return iter(self._slots[self._front :])


class CircularQueue:
    """First-in first-out queue whose freed slots are reused."""

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StructureFullError(f"Queue Overflow! Cannot enqueue {value}")
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise StructureEmptyError("Queue Underflow! Cannot dequeue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Elements from front to rear."""
        return iter(self._items)


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree that ignores duplicate values."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, value: Any) -> None:
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def inorder(self) -> Iterator[Any]:
        """Values in left-root-right order, which is ascending."""
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False


class MinHeap:
    """Array-backed binary min-heap with a fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def insert(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StructureFullError("Heap is full!")
        heapq.heappush(self._items, value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Elements in their array order."""
        return iter(self._items)