"""Stack Base"""

import abc
from typing import Generic, TypeVar

T = TypeVar("T")


class StackError(IndexError):
    """StackError"""

    def __init__(self, message: str):
        super().__init__(message)


class StackOverflowError(StackError):
    """Push beyond the capacity of the stack."""


class StackUnderflowError(StackError):
    """Pop or peek on an empty stack."""


class StackBase(abc.ABC, Generic[T]):
    """
    Last-in first-out stack that keeps track of its own size.
    """

    def __init__(self) -> None:
        self.size = 0

    def is_empty(self) -> bool:
        return self.size == 0

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: size={self.size}"

    @abc.abstractmethod
    def push(self, value: T) -> None:
        """Add a value to the top of the stack."""
        pass

    @abc.abstractmethod
    def pop(self) -> T:
        """Remove and return the value at the top of the stack."""
        pass

    @abc.abstractmethod
    def peek(self) -> T:
        """Return the value at the top of the stack without removing it."""
        pass
