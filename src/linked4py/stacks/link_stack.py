"""Link stack"""

from typing import TypeVar

from ..collections.singly_linked_list import SinglyLinkedList
from .stack_base import StackBase, StackUnderflowError

T = TypeVar("T")


class LinkStack(StackBase[T]):
    """Stack stored as the head of a singly linked list"""

    def __init__(self) -> None:
        super().__init__()
        self.stack: SinglyLinkedList[T] = SinglyLinkedList()

    def push(self, value: T) -> None:
        self.stack.insert_at_head(value)
        self.size += 1

    def pop(self) -> T:
        value = self.peek()
        # The head is the first node holding this value
        self.stack.delete(value)
        self.size -= 1
        return value

    def peek(self) -> T:
        if self.is_empty() or self.stack.is_empty():
            raise StackUnderflowError("There are no values stored in the stack")
        value: T = self.stack.peek_head_value()  # type: ignore[assignment]
        return value
