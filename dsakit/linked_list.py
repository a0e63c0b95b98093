"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link: a value and the node after it."""

    value: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with insertion at either end or at a 1-based position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        self.head = Node(value, self.head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = Node(value)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = node
        else:
            last.next = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``.

        Positions run from 1 to ``len(self) + 1``; others raise IndexError.
        """
        if position == 1:
            self.push_front(value)
            return
        if not 1 < position <= self._size + 1:
            raise IndexError(f"position {position} out of bounds")
        before = self.head
        for _ in range(position - 2):
            before = before.next
        before.next = Node(value, before.next)
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous = node
        return False

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} → " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"