"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list reached from its head node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` before the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the head, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        while self.head is not None:
            self.pop_front(delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(content)`` for every content."""
        return LinkedList(func(content) for content in self)