"""Comparison sorts; each returns a new sorted list and leaves its input alone."""


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items):
    """Return a sorted copy using top-down merge sort (stable)."""
    items = list(items)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(values, start, end):
    """Place values[start] at its final spot and return that index."""
    pivot = values[start]
    target = start + sum(1 for v in values[start + 1:end + 1] if v <= pivot)
    values[start], values[target] = values[target], values[start]
    i, j = start, end
    while i < target < j:
        while values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < target < j:
            values[i], values[j] = values[j], values[i]
    return target


def quick_sort(items):
    """Return a sorted copy using quicksort with the first element as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(values, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return values


def bubble_sort(items):
    """Return a sorted copy using bubble sort."""
    values = list(items)
    for done in range(len(values) - 1):
        for j in range(len(values) - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
    return values


def selection_sort(items):
    """Return a sorted copy using selection sort."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def insertion_sort(items):
    """Return a sorted copy using insertion sort."""
    values = list(items)
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j - 1] > values[j]:
            values[j - 1], values[j] = values[j], values[j - 1]
            j -= 1
    return values