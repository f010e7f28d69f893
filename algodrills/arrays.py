"""Classic interview problems on one-dimensional sequences."""

import heapq
from collections import Counter


def max_profit_brute(prices):
    """Return the best profit from one buy followed by one sell, checking every pair."""
    return max(
        (
            later - earlier
            for i, earlier in enumerate(prices)
            for later in prices[i + 1:]
            if later > earlier
        ),
        default=0,
    )


def max_profit(prices):
    """Return the best profit from one buy followed by one sell in a single pass."""
    best = 0
    cheapest = None
    for price in prices:
        if cheapest is None or price < cheapest:
            cheapest = price
        best = max(best, price - cheapest)
    return best


def _check_rank(items, k):
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")


def kth_largest(items, k):
    """Return the k-th largest element (k counts from 1)."""
    _check_rank(items, k)
    return heapq.nlargest(k, items)[-1]


def kth_smallest(items, k):
    """Return the k-th smallest element (k counts from 1)."""
    _check_rank(items, k)
    return heapq.nsmallest(k, items)[-1]


def majority_brute(items):
    """Return the element occurring more than half the time, or None, by counting each."""
    half = len(items) // 2
    for candidate in items:
        if sum(1 for value in items if value == candidate) > half:
            return candidate
    return None


def majority_element(items):
    """Return the element occurring more than half the time, or None (Boyer-Moore vote)."""
    candidate, count = None, 0
    for value in items:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if count and sum(1 for value in items if value == candidate) > len(items) // 2:
        return candidate
    return None


def max_length_subarray_sum(items, k):
    """Return the length of the longest contiguous run summing to ``k`` (0 if none)."""
    first_seen = {0: -1}
    total = 0
    longest = 0
    for index, value in enumerate(items):
        total += value
        start = first_seen.get(total - k)
        if start is not None:
            longest = max(longest, index - start)
        first_seen.setdefault(total, index)
    return longest


def missing_number(items):
    """Return the number from 1..len(items)+1 absent from ``items``, or None."""
    present = set(items)
    return next((i for i in range(1, len(items) + 2) if i not in present), None)


def missing_number_by_sum(items):
    """Return the missing number of 1..len(items)+1 using the arithmetic series sum."""
    top = len(items) + 1
    return top * (top + 1) // 2 - sum(items)


def union(first, second):
    """Return the sorted distinct values found in either sequence."""
    return sorted(set(first) | set(second))


def find_duplicate(items):
    """Return the repeated value among n+1 values drawn from 1..n (cycle detection)."""
    if not items:
        raise ValueError("empty sequence")
    if any(not 0 <= value < len(items) for value in items):
        raise ValueError("values must be valid indices into the sequence")
    slow = fast = items[0]
    while True:
        slow = items[slow]
        fast = items[items[fast]]
        if slow == fast:
            break
    fast = items[0]
    while slow != fast:
        slow = items[slow]
        fast = items[fast]
    return slow


def leaders(items):
    """Return, in order, the elements not smaller than anything to their right."""
    found = []
    best = None
    for value in reversed(items):
        if best is None or value >= best:
            found.append(value)
            best = value
    found.reverse()
    return found


def move_zeroes_to_end(items):
    """Return a copy with the non-zero values kept in order and the zeros moved last."""
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def remove_sorted_duplicates(items):
    """Return the distinct values of a sorted sequence, in order."""
    result = []
    for value in items:
        if not result or result[-1] != value:
            result.append(value)
    return result


def sort_by_frequency(items):
    """Return the values ordered by falling frequency, ties by rising value."""
    counts = Counter(items)
    ordered = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
    return [value for value, count in ordered for _ in range(count)]


def max_subarray_sum(items):
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not items:
        raise ValueError("empty sequence")
    best = None
    running = 0
    for value in items:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def max_window_sum(items, k):
    """Return the largest sum of ``k`` consecutive elements."""
    if not 1 <= k <= len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    window = sum(items[:k])
    best = window
    for leaving, entering in zip(items, items[k:]):
        window += entering - leaving
        best = max(best, window)
    return best


def three_sum(items, target):
    """Return indices (i, j, k) into sorted ``items`` whose values sum to ``target``, or None."""
    n = len(items)
    for i in range(n - 2):
        low, high = i + 1, n - 1
        while low < high:
            current = items[i] + items[low] + items[high]
            if current == target:
                return i, low, high
            if current < target:
                low += 1
            else:
                high -= 1
    return None


def two_sum(items, target):
    """Return indices (i, j), i < j, of two values summing to ``target``, or None."""
    seen = {}
    for index, value in enumerate(items):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen.setdefault(value, index)
    return None


def two_sum_brute(items, target):
    """Return the first pair of indices (i, j), i < j, summing to ``target``, or None."""
    for i, first in enumerate(items):
        for j in range(i + 1, len(items)):
            if first + items[j] == target:
                return i, j
    return None


def has_pair_with_sum(items, target):
    """Tell whether two distinct elements sum to ``target`` (two pointers on a sorted copy)."""
    ordered = sorted(items)
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low] + ordered[high]
        if total == target:
            return True
        if total < target:
            low += 1
        else:
            high -= 1
    return False