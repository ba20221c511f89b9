"""Safety checks for queen placements."""

from __future__ import annotations
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board


def attacks(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """Check if two queens share a row, column, or diagonal."""
    (r1, c1), (r2, c2) = a, b
    return r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2)


def is_safe(board: Board, row: int, col: int) -> bool:
    """
    Check if a queen can go on (row, col) given the rows above it.

    Only rows 0..row-1 are inspected: the backtracking search fills the
    board top-down, so everything from `row` on is still empty.

    Args:
        board: The board.
        row: Row index.
        col: Column index.

    Returns:
        False if a queen above shares the column or a diagonal.
    """
    grid = board.grid
    n = board.size

    # Column
    for i in range(row):
        if grid[i, col]:
            return False

    # Up-left diagonal
    i, j = row - 1, col - 1
    while i >= 0 and j >= 0:
        if grid[i, j]:
            return False
        i -= 1
        j -= 1

    # Up-right diagonal
    i, j = row - 1, col + 1
    while i >= 0 and j < n:
        if grid[i, j]:
            return False
        i -= 1
        j += 1

    return True


def is_valid_configuration(board: Board) -> bool:
    """
    Check a fully built board for attacking queens.

    Applies `is_safe` to every queen against the rows above it, which covers
    every pair once. Rows holding more than one queen are rejected up front.
    """
    for row in range(board.size):
        cols = [c for c in range(board.size) if board.grid[row, c]]
        if len(cols) > 1:
            return False
        if cols and not is_safe(board, row, cols[0]):
            return False
    return True
