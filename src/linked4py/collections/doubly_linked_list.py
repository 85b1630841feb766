"""Doubly linked list"""

from typing import Optional, TypeVar
import warnings

from ..utils.util_logging import setup_debugger
from .linked_list import Comparator, LinkedList
from .logging import ListOperation, VERBOSE
from .node import DoublyNode

logger = setup_debugger(__name__)

T = TypeVar("T")


class DoublyLinkedList(LinkedList[T]):
    """Doubly linked list

    Every `next` and `prev` assignment goes through the node setters, which
    keep both directions consistent.
    """

    _head: Optional[DoublyNode[T]]
    separator = "<->"

    def sanity_check(self) -> None:
        """Check that the chain is finite and that prev mirrors next"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        super().sanity_check()
        if self._head is None:
            return
        assert self._head.prev is None
        current = self._head
        while current.next is not None:
            assert current.next.prev is current
            current = current.next

    def _new_node(self, value: T) -> DoublyNode[T]:
        logger.log(VERBOSE, ListOperation.ALLOCATE.value)
        return DoublyNode(value)

    def insert_at_head(self, value: T) -> None:
        node = self._new_node(value)
        node.next = self._head
        self._head = node
        if __debug__:
            self.sanity_check()

    def insert_at_tail(self, value: T) -> None:
        node = self._new_node(value)
        tail = self._last_node()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        if __debug__:
            self.sanity_check()

    def insert_before(self, value: T, search_value: T) -> None:
        """Insert `value` right before the first node holding `search_value`.

        Raises:
            NotFoundError: If no node holds `search_value`.
        """
        node = self._find_anchor(search_value)
        new_node = self._new_node(value)
        before = node.prev
        new_node.next = node
        if before is None:
            self._head = new_node
        else:
            before.next = new_node
        if __debug__:
            self.sanity_check()

    def insert_after(self, value: T, search_value: T) -> None:
        node = self._find_anchor(search_value)
        new_node = self._new_node(value)
        after = node.next
        node.next = new_node
        new_node.next = after
        if __debug__:
            self.sanity_check()

    def delete(self, value: T) -> None:
        node = self.find(value)
        if node is None:
            return
        logger.log(VERBOSE, ListOperation.RELEASE.value)
        before = node.prev
        after = node.next
        if before is None:
            self._head = after
            if after is not None:
                after.prev = None
        else:
            before.next = after
        node.unlink()
        if __debug__:
            self.sanity_check()

    def reverse(self) -> None:
        last: Optional[DoublyNode[T]] = None
        node = self._head
        while node is not None:
            node.swap_links()
            last = node
            node = node.prev  # the old next
        self._head = last
        if __debug__:
            self.sanity_check()

    def _selection_sort(self, key: Comparator[T]) -> None:
        placed: Optional[DoublyNode[T]] = None  # last node in sorted position
        node = self._head
        while node is not None:
            best = node
            scan = node.next
            while scan is not None:
                if key(scan.value, best.value):
                    best = scan
                scan = scan.next

            if best is not node:
                logger.log(VERBOSE, ListOperation.SWAP.value)
                # The setters below overwrite these links
                after_node = node.next
                before_best = best.prev
                after_best = best.next
                assert before_best is not None

                node.next = after_best
                if before_best is node:
                    # placed <-> best <-> node <-> after_best
                    best.next = node
                else:
                    # placed <-> best <-> after_node ... before_best <-> node <-> after_best
                    before_best.next = node
                    best.next = after_node

                if placed is None:
                    best.prev = None
                    self._head = best
                else:
                    placed.next = best

            placed = best
            node = best.next
