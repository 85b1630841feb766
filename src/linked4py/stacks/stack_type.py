from enum import auto
from enum import Enum
from typing import Any, Optional

from .array_stack import ArrayStack
from .link_stack import LinkStack
from .stack_base import StackBase


class StackType(Enum):
    ARRAY = auto()
    LINK = auto()

    def create_stack(self, capacity: Optional[int] = None) -> StackBase[Any]:
        """Create a stack of this type. Only array stacks use `capacity`."""
        match self:
            case StackType.ARRAY:
                if capacity is None:
                    raise ValueError("An array stack needs a capacity")
                return ArrayStack(capacity)
            case StackType.LINK:
                return LinkStack()
            case _:
                raise ValueError("Unknown Stack Type!")
