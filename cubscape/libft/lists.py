"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Deleter) -> None:
    """Hand the content of ``node`` to ``delete``.

    Nothing happens when the node or the callback is missing.
    """
    if node is None or delete is None:
        return
    delete(node.content)


class LinkedList:
    """A singly linked list whose nodes are :class:`Node` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.add_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Node) -> None:
        """Put ``node`` at the start of the list."""
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Put ``node`` at the end of the list; a missing node is ignored."""
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

    def clear(self, delete: Deleter) -> None:
        """Hand every content to ``delete`` and empty the list.

        Without a callback the list is left as it is.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete_node(node, delete)
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Optional[Callable[[Any], Any]], delete: Deleter = None) -> Optional["LinkedList"]:
        """Return a new list holding ``func(content)`` for every node.

        Without ``func`` or for an empty list, None is returned. If ``func``
        raises, the contents already produced are handed to ``delete`` and the
        error is passed on.
        """
        if func is None or self.head is None:
            return None
        result = LinkedList()
        try:
            for node in self._nodes():
                result.add_back(Node(func(node.content)))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content