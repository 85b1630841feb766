"""Linked list base class shared by the singly and doubly linked variants."""

import abc
from enum import Enum, auto
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union
import warnings

from ..utils.util_logging import setup_debugger
from .logging import ListOperation, VERBOSE
from .node import DoublyNode, SinglyNode

logger = setup_debugger(__name__)

T = TypeVar("T")

Node = Union[SinglyNode[T], DoublyNode[T]]
Comparator = Callable[[T, T], bool]


def precedes(a: Any, b: Any) -> bool:
    return a < b


def matches(stored: Any, value: object) -> bool:
    """Identity first, then equality, as `list.remove` does."""
    return stored is value or stored == value


class NotFoundError(LookupError):
    """No node holds the value an operation was anchored on."""

    def __init__(self, message: str):
        super().__init__(message)


class Insert(Enum):
    HEAD = auto()
    END = auto()


class SortOrder(Enum):
    ASC = auto()
    DESC = auto()


class LinkedList(abc.ABC, Generic[T]):
    """Linked list without a tail pointer.

    Iterating over a list yields its nodes. Values are matched with `==` and
    the first node in traversal order wins.
    """

    separator = " "

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        if values is not None:
            self.insert_many(values)

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    def is_empty(self) -> bool:
        return self._head is None

    def peek_head_value(self) -> Optional[T]:
        """Value of the first node, or `None` if the list is empty."""
        if self._head is None:
            return None
        return self._head.value

    def __iter__(self) -> Iterator[Node[T]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def values(self) -> Iterator[T]:
        for node in self:
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __str__(self) -> str:
        return self.separator.join(map(str, self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.values())!r})"

    def __copy__(self) -> "LinkedList[T]":
        new = self.__class__()
        new._append_copies(None, self.values())
        return new

    def sanity_check(self) -> None:
        """Check that the chain starting at the head is finite"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        seen: set[int] = set()
        current = self._head
        while current is not None:
            assert id(current) not in seen, f"Cycle at node {current}"
            seen.add(id(current))
            current = current.next

    @abc.abstractmethod
    def _new_node(self, value: T) -> Node[T]:
        pass

    def _last_node(self) -> Optional[Node[T]]:
        """Time complexity: O(n)"""
        if self._head is None:
            return None
        current = self._head
        while current.next is not None:
            logger.log(VERBOSE, ListOperation.VISIT.value)
            current = current.next
        return current

    def insert(self, value: T, position: Insert = Insert.END) -> None:
        if position == Insert.HEAD:
            self.insert_at_head(value)
        elif position == Insert.END:
            self.insert_at_tail(value)
        else:
            raise ValueError(f"Unknown insert position: {position}")

    def insert_many(
        self, values: Iterable[T], position: Insert = Insert.END
    ) -> None:
        """Insert each value in turn. Inserting at the head reverses their
        relative order."""
        for value in values:
            self.insert(value, position)

    @abc.abstractmethod
    def insert_at_head(self, value: T) -> None:
        """Time complexity: O(1)"""
        pass

    @abc.abstractmethod
    def insert_at_tail(self, value: T) -> None:
        """Time complexity: O(n)"""
        pass

    @abc.abstractmethod
    def insert_after(self, value: T, search_value: T) -> None:
        """Insert `value` right after the first node holding `search_value`.

        Raises:
            NotFoundError: If no node holds `search_value`.
        """
        pass

    @abc.abstractmethod
    def delete(self, value: T) -> None:
        """Remove the first node holding `value`. Absent values are ignored."""
        pass

    def delete_many(self, values: Iterable[T]) -> None:
        for value in values:
            self.delete(value)

    def find(self, value: object) -> Optional[Node[T]]:
        """First node holding `value`, or `None`."""
        for node in self:
            logger.log(VERBOSE, ListOperation.VISIT.value)
            if matches(node.value, value):
                return node
        return None

    def _find_anchor(self, search_value: T) -> Node[T]:
        node = self.find(search_value)
        if node is None:
            raise NotFoundError(
                f"No node holds the search value {search_value!r}"
            )
        return node

    def concatenate(self, other: "LinkedList[T]") -> None:
        """Append the nodes of `other` to this list.

        A list of the same kind is spliced in by reference and left empty, so
        its nodes belong to this list only. Any other list is copied value by
        value and left untouched. Concatenating a list with itself appends a
        copy of its values.
        """
        tail = self._last_node()
        if other is not self and isinstance(other, type(self)):
            logger.debug(
                "Splicing %s into %s", type(other).__name__, type(self).__name__
            )
            if tail is None:
                self._head = other._head
            else:
                tail.next = other._head
            other._head = None
        else:
            logger.debug(
                "Copying %s into %s", type(other).__name__, type(self).__name__
            )
            self._append_copies(tail, list(other.values()))
        if __debug__:
            self.sanity_check()

    def _append_copies(self, tail: Optional[Node[T]], values: Iterable[T]) -> None:
        for value in values:
            node = self._new_node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    @abc.abstractmethod
    def reverse(self) -> None:
        """Reverse the list in place. Time complexity: O(n)"""
        pass

    def sort(
        self,
        comparator: Comparator[T] = precedes,
        order: SortOrder = SortOrder.ASC,
    ) -> None:
        """Selection sort that relinks nodes in place.

        `comparator(a, b)` must return True iff `a` strictly precedes `b` in
        a total order. Each pass moves the first extremal node of the unsorted
        suffix into place.
        """
        if order == SortOrder.ASC:
            key = comparator
        elif order == SortOrder.DESC:
            key = lambda a, b: comparator(b, a)  # noqa: E731
        else:
            raise ValueError(f"Unknown sort order: {order}")

        def counted(a: T, b: T) -> bool:
            logger.log(VERBOSE, ListOperation.COMPARE.value)
            return key(a, b)

        logger.debug("Sorting %s (%s)", type(self).__name__, order.name)
        self._selection_sort(counted)
        if __debug__:
            self.sanity_check()

    @abc.abstractmethod
    def _selection_sort(self, key: Comparator[T]) -> None:
        pass
