"""A doubly linked list with head and tail and 1-based positional operations."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class DoublyNode:
    """A node linked to both its predecessor and successor."""

    data: Any = 0
    prev: Optional["DoublyNode"] = field(default=None)
    next: Optional["DoublyNode"] = field(default=None)

    def __repr__(self):
        return f"DoublyNode({self.data!r})"


class DoublyLinkedList:
    """A doubly linked list that tracks its head, tail and size."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def insert_at_head(self, data):
        """Put ``data`` at the front."""
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def insert_at_tail(self, data):
        """Put ``data`` at the back."""
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at_position(self, data, position):
        """Insert ``data`` so it becomes the 1-based ``position``-th element.

        Positions at or below 1 insert at the head; positions past the end
        append at the tail.
        """
        if position <= 1 or self.head is None:
            self.insert_at_head(data)
            return
        if position > self._size:
            self.insert_at_tail(data)
            return
        before = self._node_at(position - 1)
        after = before.next
        node = DoublyNode(data, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def delete(self, position):
        """Remove the element at the 1-based ``position`` and return its data."""
        if self.head is None:
            raise IndexError("cannot delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"position must be between 1 and {self._size}, got {position}")
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def _node_at(self, position):
        if position <= self._size // 2 + 1:
            node = self.head
            for _ in range(position - 1):
                node = node.next
        else:
            node = self.tail
            for _ in range(self._size - position):
                node = node.prev
        return node

    def values(self):
        """Return the elements from head to tail."""
        return list(self)

    def values_backward(self):
        """Return the elements from tail to head, following the back links."""
        found = []
        node = self.tail
        while node is not None:
            found.append(node.data)
            node = node.prev
        return found

    def format(self):
        """Render the list as ``a->b->...->NULL``."""
        return "".join(f"{value}->" for value in self) + "NULL"