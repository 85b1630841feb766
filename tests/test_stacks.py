"""Unit tests for the stacks"""

import logging
import unittest
import warnings

from linked4py.stacks import (
    ArrayStack,
    LinkStack,
    StackError,
    StackOverflowError,
    StackType,
    StackUnderflowError,
)


class TestArrayStack(unittest.TestCase):
    def setUp(self) -> None:
        logging.basicConfig(level=logging.INFO)
        warnings.simplefilter(action="ignore", category=FutureWarning)

    def test_capacity_scenario(self) -> None:
        stack: ArrayStack[int] = ArrayStack(2)
        stack.push(1)
        stack.push(2)
        with self.assertRaises(StackOverflowError):
            stack.push(3)
        self.assertEqual(stack.pop(), 2)
        self.assertEqual(stack.pop(), 1)
        with self.assertRaises(StackUnderflowError):
            stack.pop()

    def test_peek(self) -> None:
        stack: ArrayStack[str] = ArrayStack(3)
        with self.assertRaises(StackUnderflowError):
            stack.peek()
        stack.push("a")
        stack.push("b")
        self.assertEqual(stack.peek(), "b")
        self.assertEqual(len(stack), 2)

    def test_holds_any_object(self) -> None:
        stack: ArrayStack[object] = ArrayStack(2)
        stack.push([1, 2])
        stack.push(None)
        self.assertIsNone(stack.pop())
        self.assertEqual(stack.pop(), [1, 2])
        self.assertTrue(stack.is_empty())

    def test_zero_capacity(self) -> None:
        stack: ArrayStack[int] = ArrayStack(0)
        with self.assertRaises(StackOverflowError):
            stack.push(1)

    def test_negative_capacity(self) -> None:
        with self.assertRaises(ValueError):
            ArrayStack(-1)

    def test_errors_are_index_errors(self) -> None:
        stack: ArrayStack[int] = ArrayStack(0)
        with self.assertRaises(IndexError):
            stack.pop()
        self.assertTrue(issubclass(StackOverflowError, StackError))

    def test_str(self) -> None:
        stack: ArrayStack[int] = ArrayStack(4)
        stack.push(1)
        self.assertEqual(str(stack), "ArrayStack: size=1, capacity=4")


class TestLinkStack(unittest.TestCase):
    def setUp(self) -> None:
        logging.basicConfig(level=logging.INFO)
        warnings.simplefilter(action="ignore", category=FutureWarning)

    def test_push_pop(self) -> None:
        stack: LinkStack[int] = LinkStack()
        for value in (1, 2, 3):
            stack.push(value)
        self.assertEqual(stack.peek(), 3)
        self.assertEqual([stack.pop() for _ in range(3)], [3, 2, 1])
        self.assertTrue(stack.is_empty())
        self.assertTrue(stack.stack.is_empty())

    def test_duplicates(self) -> None:
        stack: LinkStack[int] = LinkStack()
        for value in (1, 2, 1, 1):
            stack.push(value)
        self.assertEqual([stack.pop() for _ in range(4)], [1, 1, 2, 1])

    def test_underflow(self) -> None:
        stack: LinkStack[int] = LinkStack()
        with self.assertRaises(StackUnderflowError):
            stack.pop()
        with self.assertRaises(StackUnderflowError):
            stack.peek()
        stack.push(1)
        stack.pop()
        with self.assertRaises(StackUnderflowError):
            stack.pop()

    def test_none_value(self) -> None:
        stack: LinkStack[object] = LinkStack()
        stack.push(None)
        self.assertIsNone(stack.peek())
        self.assertIsNone(stack.pop())
        with self.assertRaises(StackUnderflowError):
            stack.pop()

    def test_str(self) -> None:
        stack: LinkStack[int] = LinkStack()
        stack.push(5)
        self.assertEqual(str(stack), "LinkStack: size=1")

    def test_pop_value_unequal_to_itself(self) -> None:
        stack: LinkStack[float] = LinkStack()
        nan = float("nan")
        stack.push(1)
        stack.push(nan)
        self.assertIs(stack.pop(), nan)
        self.assertEqual(stack.peek(), 1)
        self.assertEqual(list(stack.stack.values()), [1])


class TestStackType(unittest.TestCase):
    def test_create_stack(self) -> None:
        self.assertIsInstance(StackType.ARRAY.create_stack(2), ArrayStack)
        self.assertIsInstance(StackType.LINK.create_stack(), LinkStack)

    def test_array_needs_capacity(self) -> None:
        with self.assertRaises(ValueError):
            StackType.ARRAY.create_stack()
