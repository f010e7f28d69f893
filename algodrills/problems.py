"""Linked-list problems: digit arithmetic, cycles, palindromes, reordering and sorting."""

from itertools import zip_longest

from .nodes import Node, from_values, iter_nodes, length, to_values
from .singly import merge_sorted, remove_duplicates, reverse, reverse_k_group, sort_012


def add_numbers(first, second):
    """Add two chains of decimal digits (most significant first) into a new chain."""
    if first is None:
        return second
    if second is None:
        return first
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(to_values(first)), reversed(to_values(second)), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return from_values(reversed(digits))


def cycle_start(head):
    """Return the node where a cycle begins, or None if the chain ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def has_cycle(head):
    """Tell whether the chain loops back on itself (two pointers)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def has_cycle_by_set(head):
    """Tell whether the chain loops back on itself by remembering visited nodes."""
    visited = set()
    node = head
    while node is not None:
        if id(node) in visited:
            return True
        visited.add(id(node))
        node = node.next
    return False


def remove_kth_from_end_by_reversal(head, k):
    """Remove the k-th node from the end (1 is the last) by reversing twice."""
    size = length(head)
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")
    backwards = reverse(head)
    if k == 1:
        backwards = backwards.next
    else:
        before = backwards
        for _ in range(k - 2):
            before = before.next
        before.next = before.next.next
    return reverse(backwards)


def reverse_in_groups(head, k):
    """Reverse each run of ``k`` nodes; a shorter remainder keeps its order."""
    return reverse_k_group(head, k)


def drop_adjacent_duplicates(head):
    """Drop every node equal to the node before it; return the head."""
    return remove_duplicates(head)


def swap_kth(head, k):
    """Swap the data of the k-th node from the start and the k-th from the end."""
    size = length(head)
    if size < 2:
        return head
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")
    nodes = list(iter_nodes(head))
    front, back = nodes[k - 1], nodes[size - k]
    front.data, back.data = back.data, front.data
    return head


def is_palindrome(head):
    """Tell whether the chain reads the same both ways (using a stack)."""
    stack = [node.data for node in iter_nodes(head)]
    return all(node.data == stack.pop() for node in iter_nodes(head))


def is_palindrome_by_reversal(head):
    """Tell whether the chain is a palindrome by reversing its second half.

    The chain is restored before returning.
    """
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse(slow.next)
    result = all(
        a.data == b.data for a, b in zip(iter_nodes(head), iter_nodes(second))
    )
    slow.next = reverse(second)
    return result


def partition_012(head):
    """Stably group nodes holding 0, then 1, then 2."""
    return sort_012(head)


def partition_even_odd(head):
    """Stably put nodes with even data before nodes with odd data."""
    if head is None or head.next is None:
        return head
    evens, odds = Node(), Node()
    even_tail, odd_tail = evens, odds
    node = head
    while node is not None:
        following = node.next
        if node.data % 2 == 0:
            even_tail.next = node
            even_tail = node
        else:
            odd_tail.next = node
            odd_tail = node
        node = following
    even_tail.next = odds.next
    odd_tail.next = None
    return evens.next


def swap_pairs(head):
    """Relink each adjacent pair of nodes in swapped order; return the new head."""
    dummy = Node(next=head)
    before = dummy
    while before.next is not None and before.next.next is not None:
        first = before.next
        second = first.next
        first.next = second.next
        second.next = first
        before.next = second
        before = first
    return dummy.next


def sort_list(head):
    """Sort the chain with merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return merge_sorted(sort_list(head), sort_list(second))