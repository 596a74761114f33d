"""A singly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Node:
    """One cell of a linked list: its value, a rank slot and the following cell."""

    content: int
    index: int = 0
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self, contents: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: int) -> Node:
        """Insert a new node holding ``content`` before the head and return it."""
        node = Node(content, next=self.head)
        self.head = node
        return node

    def add_back(self, content: int) -> Node:
        """Append a new node holding ``content`` after the last node and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self) -> None:
        """Drop every node."""
        node = self.head
        while node is not None:
            node, node.next = node.next, None
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"