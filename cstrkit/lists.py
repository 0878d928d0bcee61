"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list built from :class:`Node` links."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            tail = self._link_after(tail, item)

    def _link_after(self, tail: Optional[Node], content: Any) -> Node:
        node = Node(content)
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Optional[Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the start of the list."""
        self.head = Node(content, self.head)

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the end of the list."""
        self._link_after(self._last_node(), content)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Any:
        """Return the last value in the list."""
        node = self._last_node()
        if node is None:
            raise IndexError("last() of an empty list")
        return node.content

    def remove_first(self, delete: Optional[Callable[[Any], Any]] = None) -> Any:
        """Unlink the first node, pass its value to ``delete`` if given, and return it."""
        node = self.head
        if node is None:
            raise IndexError("remove_first() from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each value to ``delete`` in order if given."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every value in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> LinkedList:
        """Return a new list of ``f(value)`` for each value.

        If ``f`` raises, the values already produced are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                tail = result._link_after(tail, f(content))
        except Exception:
            result.clear(delete)
            raise
        return result