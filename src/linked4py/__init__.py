"""Singly and doubly linked lists, and the stacks built on them."""
