"""Singly linked list"""

from typing import Optional, TypeVar

from ..utils.util_logging import setup_debugger
from .linked_list import Comparator, LinkedList, matches
from .logging import ListOperation, VERBOSE
from .node import SinglyNode

logger = setup_debugger(__name__)

T = TypeVar("T")


class SinglyLinkedList(LinkedList[T]):
    """Singly linked list"""

    _head: Optional[SinglyNode[T]]
    separator = "->"

    def _new_node(self, value: T) -> SinglyNode[T]:
        logger.log(VERBOSE, ListOperation.ALLOCATE.value)
        return SinglyNode(value)

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

    def insert_after(self, value: T, search_value: T) -> None:
        node = self._find_anchor(search_value)
        new_node = self._new_node(value)
        new_node.next = node.next
        node.next = new_node
        if __debug__:
            self.sanity_check()

    def delete(self, value: T) -> None:
        if self._head is None:
            return
        if matches(self._head.value, value):
            logger.log(VERBOSE, ListOperation.RELEASE.value)
            removed = self._head
            self._head = removed.next
            removed.next = None
        else:
            # The predecessor is needed to route around the removed node
            prev = self._head
            while prev.next is not None:
                logger.log(VERBOSE, ListOperation.VISIT.value)
                if matches(prev.next.value, value):
                    logger.log(VERBOSE, ListOperation.RELEASE.value)
                    removed = prev.next
                    prev.next = removed.next
                    removed.next = None
                    break
                prev = prev.next
        if __debug__:
            self.sanity_check()

    def reverse(self) -> None:
        prev: Optional[SinglyNode[T]] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev
        if __debug__:
            self.sanity_check()

    def _selection_sort(self, key: Comparator[T]) -> None:
        placed: Optional[SinglyNode[T]] = None  # last node in sorted position
        node = self._head
        while node is not None:
            best = node
            best_prev = placed
            scan_prev = node
            scan = node.next
            while scan is not None:
                if key(scan.value, best.value):
                    best = scan
                    best_prev = scan_prev
                scan_prev = scan
                scan = scan.next

            if best is not node:
                assert best_prev is not None
                logger.log(VERBOSE, ListOperation.SWAP.value)
                after_best = best.next
                if best_prev is node:
                    # placed -> node -> best -> after_best
                    best.next = node
                else:
                    # placed -> node -> after_node ... best_prev -> best -> after_best
                    best.next = node.next
                    best_prev.next = node
                node.next = after_best

                if placed is None:
                    self._head = best
                else:
                    placed.next = best

            placed = best
            node = best.next
