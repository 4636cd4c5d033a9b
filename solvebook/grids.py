"""Puzzles over two-dimensional grids and square matrices."""

from collections.abc import MutableSequence, Sequence


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of ``"1"`` cells; the grid is left untouched."""
    land = {
        (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for neighbour in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
    return islands


def rotate(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if any(value == 0 for value in row)}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0