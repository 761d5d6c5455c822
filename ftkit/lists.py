"""A singly linked list of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A list node holding ``content`` and a link to the ``next`` node."""

    content: Any = None
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        """Yield this node and every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next

    def append(self, node: "Node") -> None:
        """Attach ``node`` after the last node of this list."""
        last = self
        for last in self:
            pass
        last.next = node

    def prepend(self, node: "Node") -> "Node":
        """Put ``node`` in front of this list and return it as the new head."""
        node.next = self
        return node

    def each(self, f: Callable[["Node"], Any]) -> None:
        """Call ``f`` on every node in order."""
        for node in self:
            f(node)

    def map(self, f: Callable[["Node"], Optional["Node"]]) -> Optional["Node"]:
        """Build a new list from the nodes ``f`` returns for each node.

        If ``f`` returns None for any node, the partial result is dropped
        and None is returned.
        """
        head: Optional[Node] = None
        tail: Optional[Node] = None
        for node in self:
            made = f(node)
            if made is None:
                return None
            if tail is None:
                head = made
            else:
                tail.next = made
            tail = made
        return head

    def release(self, delete: Callable[[Any], Any]) -> None:
        """Hand this node's content to ``delete`` and unlink the node."""
        delete(self.content)
        self.content = None
        self.next = None

    def dispose(self, delete: Callable[[Any], Any]) -> None:
        """Release every node of the list, handing each content to ``delete``."""
        for node in list(self):
            node.release(delete)