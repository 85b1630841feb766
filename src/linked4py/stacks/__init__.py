"""Stacks"""

from .array_stack import ArrayStack
from .link_stack import LinkStack
from .stack_base import StackBase, StackError, StackOverflowError, StackUnderflowError
from .stack_type import StackType

__all__ = [
    "ArrayStack",
    "LinkStack",
    "StackBase",
    "StackError",
    "StackOverflowError",
    "StackType",
    "StackUnderflowError",
]
