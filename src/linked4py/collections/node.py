"""Node classes for singly and doubly linked lists."""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class SinglyNode(Generic[T]):
    next: Optional["SinglyNode[T]"]
    value: T

    def __init__(self, value: T) -> None:
        self.next = None
        self.value = value

    def __str__(self) -> str:
        return f"[{self.value}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class DoublyNode(Generic[T]):
    """Node of a doubly linked list.

    Assigning `next` also points the new successor's `prev` back at this node,
    and assigning `prev` points the new predecessor's `next` at this node.
    Assigning `None` only clears the link on this side. The neighbour that was
    linked before keeps its stale back link, so callers must capture old
    neighbours before relinking.
    """

    value: T

    def __init__(self, value: T) -> None:
        self._next: Optional["DoublyNode[T]"] = None
        self._prev: Optional["DoublyNode[T]"] = None
        self.value = value

    @property
    def next(self) -> Optional["DoublyNode[T]"]:
        return self._next

    @next.setter
    def next(self, node: Optional["DoublyNode[T]"]) -> None:
        self._next = node
        if node is not None:
            node._prev = self

    @property
    def prev(self) -> Optional["DoublyNode[T]"]:
        return self._prev

    @prev.setter
    def prev(self, node: Optional["DoublyNode[T]"]) -> None:
        self._prev = node
        if node is not None:
            node._next = self

    def swap_links(self) -> None:
        """Exchange `next` and `prev` without touching the neighbours."""
        self._next, self._prev = self._prev, self._next

    def unlink(self) -> None:
        self._next = None
        self._prev = None

    def __str__(self) -> str:
        return f"[{self.value}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
