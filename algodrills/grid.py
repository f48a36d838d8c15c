"""Exercises on two-dimensional grids and interval lists."""

from bisect import bisect_left
from itertools import chain

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _island_area(grid, i, j):
    rows, cols = len(grid), len(grid[0])
    area = 0
    stack = [(i, j)]
    while stack:
        r, c = stack.pop()
        # The first row and the first column never count as land here.
        if not (0 < r < rows and 0 < c < cols) or grid[r][c] == 0:
            continue
        grid[r][c] = 0
        area += 1
        stack.extend((r + dr, c + dc) for dr, dc in _STEPS)
    return area


def max_area_of_island(grid):
    """Return the largest island area in a 0/1 grid, sinking islands in place.

    Cells in the first row or first column are treated as water while an
    island is being measured.
    """
    best = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 1:
                best = max(best, _island_area(grid, i, j))
    return best


def maximal_square(matrix):
    """Return the area of the largest square made only of ``"1"`` cells."""
    if not matrix or not matrix[0]:
        return 0
    cols = len(matrix[0])
    previous = [0] * (cols + 1)
    side = 0
    for row in matrix:
        current = [0] * (cols + 1)
        for j, cell in enumerate(row, start=1):
            if cell == "1":
                current[j] = min(previous[j - 1], previous[j], current[j - 1]) + 1
                side = max(side, current[j])
        previous = current
    return side * side


def merge_intervals(intervals):
    """Sort ``intervals`` in place and return the merged, non-overlapping intervals."""
    if not intervals:
        raise ValueError("intervals must not be empty")
    intervals.sort(key=lambda interval: (interval[0], interval[1]))
    merged = []
    left, right = intervals[0][0], intervals[0][1]
    for start, end in intervals:
        if start <= right:
            right = max(right, end)
        else:
            merged.append([left, right])
            left, right = start, end
    merged.append([left, right])
    return merged


def _sink(grid, i, j):
    rows, cols = len(grid), len(grid[0])
    stack = [(i, j)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols) or grid[r][c] == "0":
            continue
        grid[r][c] = "0"
        stack.extend((r + dr, c + dc) for dr, dc in _STEPS)


def num_islands(grid):
    """Count islands of ``"1"`` cells, sinking them to ``"0"`` in place."""
    count = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "1":
                _sink(grid, i, j)
                count += 1
    return count


def rotate(matrix):
    """Rotate a square matrix a quarter turn clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    transposed = [list(column) for column in zip(*matrix)]
    for row, column in zip(matrix, transposed):
        row[:] = column[::-1]


def search_matrix(matrix, target):
    """Return True if ``target`` occurs in a matrix sorted row after row."""
    values = list(chain.from_iterable(matrix))
    index = bisect_left(values, target)
    return index < len(values) and values[index] == target


def spiral_order(matrix):
    """Return the elements of a square matrix in clockwise spiral order.

    The right edge is read at the column numbered by the current last row and
    short edges are not guarded, so only square matrices come out as a true
    spiral; a single row, for instance, is walked out and back.
    """
    if not matrix:
        return []
    order = []
    row_start, row_end = 0, len(matrix) - 1
    col_start, col_end = 0, len(matrix[0]) - 1
    while row_start <= row_end and col_start <= col_end:
        order.extend(matrix[row_start][col_start:col_end + 1])
        row_start += 1
        order.extend(matrix[i][row_end] for i in range(row_start, row_end + 1))
        col_end -= 1
        order.extend(matrix[row_end][i] for i in range(col_end, col_start - 1, -1))
        row_end -= 1
        order.extend(matrix[i][col_start] for i in range(row_end, row_start - 1, -1))
        col_start += 1
    return order