"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None when the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """New list of ``func`` applied to each content.

        If ``func`` raises, the contents made so far are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result