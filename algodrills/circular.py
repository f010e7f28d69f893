"""A circular singly linked list whose last node points back to the first."""

from .nodes import Node


class CircularList:
    """A circular singly linked list that tracks its head and tail."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        self._size = 0
        for value in values:
            self.insert_at_head(value)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self.head
        for _ in range(self._size):
            yield node.data
            node = node.next

    def insert_at_head(self, data):
        """Put ``data`` at the front, keeping the ring closed."""
        node = Node(data)
        if self.head is None:
            node.next = node
            self.tail = node
        else:
            node.next = self.head
            self.tail.next = node
        self.head = node
        self._size += 1

    def values(self):
        """Return the elements once around the ring, starting at the head."""
        return list(self)

    def format(self):
        """Render the ring as ``a -> b -> ...``, or a note that it is empty."""
        if self.head is None:
            return "List is empty."
        return "".join(f"{value} -> " for value in self) + "..."