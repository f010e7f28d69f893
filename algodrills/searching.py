"""Binary-search routines over sorted and rotated sequences."""

from fractions import Fraction


def _search_range(items, low, high, target):
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search(items, target):
    """Return an index of ``target`` in sorted ``items``, or None."""
    return _search_range(items, 0, len(items) - 1, target)


def first_occurrence(items, target):
    """Return the first index of ``target`` in sorted ``items``, or None."""
    low, high, found = 0, len(items) - 1, None
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            found = mid
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return found


def last_occurrence(items, target):
    """Return the last index of ``target`` in sorted ``items``, or None."""
    low, high, found = 0, len(items) - 1, None
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            found = mid
            low = mid + 1
        elif items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return found


def occurrence_range(items, target):
    """Return (first, last) indices of ``target``, or None if absent."""
    first = first_occurrence(items, target)
    if first is None:
        return None
    return first, last_occurrence(items, target)


def lower_bound(items, target):
    """Return the first index whose value is >= ``target`` (len if none)."""
    low, high, answer = 0, len(items) - 1, len(items)
    while low <= high:
        mid = (low + high) // 2
        if items[mid] >= target:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def upper_bound(items, target):
    """Return the first index whose value is > ``target`` (len if none)."""
    low, high, answer = 0, len(items) - 1, len(items)
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def peak_element(items):
    """Return the value of an element strictly greater than its neighbours."""
    n = len(items)
    if n == 0:
        raise ValueError("no peak in an empty sequence")
    if n == 1:
        return items[0]
    if items[0] > items[1]:
        return items[0]
    if items[-1] > items[-2]:
        return items[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid - 1] < items[mid] > items[mid + 1]:
            return items[mid]
        if items[mid + 1] > items[mid]:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError("sequence has no strict peak")


def rotation_count(items):
    """Return how many times a sorted sequence has been rotated right."""
    n = len(items)
    if n == 0:
        raise ValueError("empty sequence")
    low, high = 0, n - 1
    while low <= high:
        mid = low + (high - low) // 2
        previous = items[(mid + n - 1) % n]
        following = items[(mid + 1) % n]
        if previous >= items[mid] <= following:
            return mid
        if items[mid] <= items[high]:
            high = mid - 1
        else:
            low = mid + 1
    return 0


def find_pivot(items):
    """Return the index of the smallest element of a rotated sorted sequence."""
    if not items:
        raise ValueError("empty sequence")
    low, high = 0, len(items) - 1
    while low < high:
        mid = low + (high - low) // 2
        if items[mid] > items[high]:
            low = mid + 1
        else:
            high = mid
    return low


def search_rotated(items, target):
    """Return the index of ``target`` in a rotated sorted sequence, or None."""
    if not items:
        return None
    pivot = find_pivot(items)
    found = _search_range(items, 0, pivot - 1, target)
    if found is not None:
        return found
    return _search_range(items, pivot, len(items) - 1, target)


def search_insert(items, target):
    """Return the index at which ``target`` is or would be inserted."""
    return lower_bound(items, target)


def integer_sqrt(n):
    """Return the integer part of the square root of ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    low, high, answer = 0, n, 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def sqrt_precise(n, digits):
    """Return the square root of ``n`` truncated to ``digits`` decimal places."""
    if digits < 0:
        raise ValueError("digits must not be negative")
    root = Fraction(integer_sqrt(n))
    step = Fraction(1, 10)
    for _ in range(digits):
        while root * root <= n:
            root += step
        root -= step
        step /= 10
    return float(root)