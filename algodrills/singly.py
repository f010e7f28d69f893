"""A singly linked list with head and tail, and algorithms over node chains."""

from .nodes import Node, from_values, iter_nodes, length


class SinglyLinkedList:
    """A singly linked list that tracks its head and tail."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def __len__(self):
        return self._size

    def __iter__(self):
        return (node.data for node in iter_nodes(self.head))

    def insert_at_head(self, data):
        """Put ``data`` at the front."""
        node = Node(data, self.head)
        if self.head is None:
            self.tail = node
        self.head = node
        self._size += 1

    def insert_at_tail(self, data):
        """Put ``data`` at the back."""
        node = Node(data)
        if self.head is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at_position(self, position, data):
        """Insert ``data`` so it becomes the 1-based ``position``-th element.

        Positions at or below 1 insert at the head; positions past the end
        append at the tail.
        """
        if position <= 1:
            self.insert_at_head(data)
            return
        if position > self._size:
            self.insert_at_tail(data)
            return
        before = self.head
        for _ in range(position - 2):
            before = before.next
        before.next = Node(data, before.next)
        self._size += 1

    def values(self):
        """Return the elements as a list."""
        return list(self)


def reverse(head):
    """Reverse the chain and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def find_middle(head):
    """Return the middle node; for even lengths, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _split(head, key, buckets):
    """Relink nodes into ``buckets`` chains by ``key`` and join them in order."""
    dummies = [Node() for _ in range(buckets)]
    tails = list(dummies)
    for node in list(iter_nodes(head)):
        index = key(node)
        tails[index].next = node
        tails[index] = node
    for tail, following in zip(tails, dummies[1:]):
        tail.next = None
        tail.next = following.next
    tails[-1].next = None
    # Join skipping empty buckets: walk tails so each non-empty one links onward.
    result = Node()
    end = result
    for dummy, tail in zip(dummies, tails):
        if dummy.next is not None and tail is not dummy:
            end.next = dummy.next
            end = tail
    end.next = None
    return result.next


def sort_012(head):
    """Stably group nodes holding 0, then 1, then anything else (2)."""
    return _split(head, lambda node: 0 if node.data == 0 else 1 if node.data == 1 else 2, 3)


def odd_even_positions(head):
    """Relink so nodes at odd positions come first, then those at even positions."""
    positions = {id(node): i for i, node in enumerate(iter_nodes(head))}
    return _split(head, lambda node: positions[id(node)] % 2, 2)


def remove_duplicates(head):
    """Drop nodes equal to the node before them; return the head."""
    current = head
    while current is not None and current.next is not None:
        if current.data == current.next.data:
            current.next = current.next.next
        else:
            current = current.next
    return head


def remove_kth_from_end(head, k):
    """Remove the k-th node counted from the end (1 is the last).

    A ``k`` outside 1..length leaves the chain unchanged.
    """
    size = length(head)
    if not 1 <= k <= size:
        return head
    if k == size:
        return head.next
    before = head
    for _ in range(size - k - 1):
        before = before.next
    before.next = before.next.next
    return head


def reverse_k_group(head, k):
    """Reverse each consecutive group of ``k`` nodes; a shorter tail stays as is."""
    remaining = length(head)
    if k <= 1 or k > remaining:
        return head
    dummy = Node(next=head)
    before = dummy
    while remaining >= k:
        first = before.next
        previous, current = None, first
        for _ in range(k):
            current.next, previous, current = previous, current, current.next
        before.next = previous
        first.next = current
        before = first
        remaining -= k
    return dummy.next


def swap_pair_values(head):
    """Swap the data of each adjacent pair of nodes; return the head."""
    current = head
    while current is not None and current.next is not None:
        current.data, current.next.data = current.next.data, current.data
        current = current.next.next
    return head


def merge_sorted(first, second):
    """Merge two sorted chains into one sorted chain, stably."""
    dummy = Node()
    tail = dummy
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def _to_number(head):
    number = 0
    for node in iter_nodes(head):
        number = 10 * number + node.data
    return number


def multiply(first, second):
    """Treat each chain as decimal digits and return the product as a digit chain."""
    product = _to_number(first) * _to_number(second)
    return from_values(int(digit) for digit in str(product))