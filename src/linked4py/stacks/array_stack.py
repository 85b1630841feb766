"""Array stack"""

from typing import TypeVar

import numpy as np
import numpy.typing as npt

from ..utils.util_logging import setup_debugger
from .stack_base import StackBase, StackOverflowError, StackUnderflowError

logger = setup_debugger(__name__)

T = TypeVar("T")


class ArrayStack(StackBase[T]):
    """Stack stored in a fixed-capacity buffer"""

    def __init__(self, capacity: int) -> None:
        super().__init__()
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.buffer: npt.NDArray[np.object_] = np.empty(
            capacity, dtype=object
        )

    @property
    def capacity(self) -> int:
        return len(self.buffer)

    def push(self, value: T) -> None:
        if self.size >= self.capacity:
            raise StackOverflowError(
                f"Stack overflow: capacity of {self.capacity} has been met"
            )
        self.buffer[self.size] = value
        self.size += 1

    def pop(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("There are no values stored in the stack")
        self.size -= 1
        value: T = self.buffer[self.size]
        self.buffer[self.size] = None
        return value

    def peek(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("There are no values stored in the stack")
        value: T = self.buffer[self.size - 1]
        logger.debug("Peek at index %d", self.size - 1)
        return value

    def __str__(self) -> str:
        return f"{super().__str__()}, capacity={self.capacity}"
