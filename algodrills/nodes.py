"""Singly linked nodes and helpers for building, walking and printing chains."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked chain."""

    data: Any = 0
    next: Optional["Node"] = field(default=None)

    def __repr__(self):
        return f"Node({self.data!r})"


def from_values(values):
    """Build a chain from an iterable and return its head, or None if empty."""
    dummy = Node()
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def iter_nodes(head):
    """Yield each node of the chain starting at ``head``."""
    node = head
    while node is not None:
        yield node
        node = node.next


def to_values(head):
    """Return the data of every node in the chain as a list."""
    return [node.data for node in iter_nodes(head)]


def length(head):
    """Return the number of nodes in the chain."""
    return sum(1 for _ in iter_nodes(head))


def format_list(head):
    """Render the chain as ``a->b->...->NULL``."""
    return "".join(f"{node.data}->" for node in iter_nodes(head)) + "NULL"