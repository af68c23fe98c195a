"""Intrusive doubly linked list and AA tree data structures."""

__version__ = "0.1.0"
__all__ = ["linked_list", "aatree"]