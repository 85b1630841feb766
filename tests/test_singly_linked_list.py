"""Unit tests for singly_linked_list.py"""

import itertools
import logging
import unittest
from unittest import mock
import warnings
from typing import Any

from linked4py.collections import SinglyLinkedList, SinglyNode, SortOrder


class TestSinglyLinkedList(unittest.TestCase):
    """Unit tests for singly_linked_list.py"""

    def setUp(self) -> None:
        logging.basicConfig(level=logging.INFO)
        warnings.simplefilter(action="ignore", category=FutureWarning)
        self.maxDiff = None  # pylint: disable=invalid-name

    def assertChain(self, linked_list: SinglyLinkedList[Any], expected: list[Any]) -> None:
        values = []
        current = linked_list.head
        while current is not None:
            self.assertLessEqual(len(values), len(expected), "Traversal did not terminate")
            self.assertIsInstance(current, SinglyNode)
            values.append(current.value)
            current = current.next
        self.assertEqual(values, expected)

    def test_nodes_have_no_back_link(self) -> None:
        linked_list = SinglyLinkedList([1, 2])
        for node in linked_list:
            self.assertFalse(hasattr(node, "prev"))

    def test_insert_after_tail(self) -> None:
        linked_list = SinglyLinkedList([1, 2])
        linked_list.insert_after(3, 2)
        self.assertChain(linked_list, [1, 2, 3])
        tail = linked_list.find(3)
        assert tail is not None
        self.assertIsNone(tail.next)

    def test_delete_reroutes_predecessor(self) -> None:
        linked_list = SinglyLinkedList([1, 2, 3])
        one = linked_list.find(1)
        three = linked_list.find(3)
        linked_list.delete(2)
        assert one is not None
        self.assertIs(one.next, three)

    def test_delete_head_detaches_node(self) -> None:
        linked_list = SinglyLinkedList([1, 2])
        head = linked_list.head
        linked_list.delete(1)
        self.assertChain(linked_list, [2])
        assert head is not None
        self.assertIsNone(head.next)

    def test_delete_head_checks_chain(self) -> None:
        linked_list = SinglyLinkedList([1, 2])
        with mock.patch.object(
            SinglyLinkedList, "sanity_check", autospec=True
        ) as sanity_check:
            linked_list.delete(1)
        if __debug__:
            sanity_check.assert_called_once_with(linked_list)
        self.assertChain(linked_list, [2])

    def test_delete_on_empty(self) -> None:
        linked_list: SinglyLinkedList[int] = SinglyLinkedList()
        linked_list.delete(1)
        self.assertChain(linked_list, [])

    def test_sort_adjacent_and_distant_swaps(self) -> None:
        for values, expected in (
            ([2, 1], [1, 2]),
            ([3, 2, 1], [1, 2, 3]),
            ([1, 3, 2], [1, 2, 3]),
            ([4, 1, 3, 2], [1, 2, 3, 4]),
        ):
            with self.subTest(values=values):
                linked_list = SinglyLinkedList(values)
                linked_list.sort()
                self.assertChain(linked_list, expected)

    def test_sort_all_permutations(self) -> None:
        for size in range(7):
            for permutation in itertools.permutations(range(size)):
                for order in SortOrder:
                    linked_list = SinglyLinkedList(permutation)
                    linked_list.sort(order=order)
                    expected = sorted(permutation, reverse=order == SortOrder.DESC)
                    self.assertChain(linked_list, expected)

    def test_sort_all_sequences_with_duplicates(self) -> None:
        for size in range(6):
            for values in itertools.product(range(3), repeat=size):
                linked_list = SinglyLinkedList(values)
                linked_list.sort(order=SortOrder.DESC)
                self.assertChain(linked_list, sorted(values, reverse=True))

    def test_str(self) -> None:
        self.assertEqual(str(SinglyLinkedList([1, 2, 3])), "[1]->[2]->[3]")
        self.assertEqual(str(SinglyLinkedList(["a"])), "[a]")
