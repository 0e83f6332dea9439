"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a content value and the next node."""

    content: Any
    next: Optional["Node"] = None

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` after the current last node; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``release`` first if given."""
        if release is not None:
            for node in self._nodes():
                release(node.content)
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, head first."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for each content.

        If ``func`` raises, the contents already built are passed to
        ``release`` and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(release)
            raise
        return result