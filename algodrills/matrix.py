"""Operations on matrices held as lists of rows."""

from bisect import bisect_left


def _shape(matrix):
    """Return (rows, columns) of a rectangular matrix, raising on ragged rows."""
    if not matrix:
        return 0, 0
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), width


def multiply(first, second):
    """Return the matrix product of ``first`` and ``second``."""
    _, inner = _shape(first)
    rows, _ = _shape(second)
    if not first or not second or inner != rows:
        raise ValueError("matrices have incompatible dimensions")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def rotate(matrix):
    """Return a new matrix rotated 90 degrees clockwise."""
    _shape(matrix)
    return [list(row) for row in zip(*reversed(matrix))]


def rotate_in_place(matrix):
    """Rotate a square matrix 90 degrees clockwise, modifying it."""
    rows, columns = _shape(matrix)
    if rows != columns:
        raise ValueError("in-place rotation needs a square matrix")
    for i in range(rows):
        for j in range(i + 1, rows):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def _in_sorted(row, target):
    index = bisect_left(row, target)
    return index < len(row) and row[index] == target


def search_sorted_rows(matrix, target):
    """Tell whether ``target`` is in a matrix whose rows are each sorted."""
    return any(_in_sorted(row, target) for row in matrix)


def contains(matrix, target):
    """Tell whether ``target`` appears anywhere in the matrix."""
    return any(value == target for row in matrix for value in row)


def set_zeroes(matrix):
    """Return a copy where every row and column holding a zero is all zeros."""
    _shape(matrix)
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_columns = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_columns else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def spiral(matrix):
    """Return the elements in clockwise spiral order from the top-left corner."""
    rows, columns = _shape(matrix)
    if not rows or not columns:
        return []
    top, bottom, left, right = 0, rows - 1, 0, columns - 1
    order = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][left:right + 1])
        top += 1
        order.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return order


def transpose(matrix):
    """Return the transpose of the matrix."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix):
    """Render the matrix as lines of space-separated values."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)