"""Linked list collections"""

from .doubly_linked_list import DoublyLinkedList
from .linked_list import Insert, LinkedList, NotFoundError, SortOrder
from .node import DoublyNode, SinglyNode
from .singly_linked_list import SinglyLinkedList

__all__ = [
    "DoublyLinkedList",
    "DoublyNode",
    "Insert",
    "LinkedList",
    "NotFoundError",
    "SinglyLinkedList",
    "SinglyNode",
    "SortOrder",
]
