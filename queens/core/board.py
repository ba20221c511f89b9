"""N-Queens board representation."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Tuple, Sequence


EMPTY = 0
QUEEN = 1


class Board:
    """
    An N x N chessboard where each cell is either empty or holds a queen.

    The grid is a numpy int8 array. Strategies mutate one working board in
    place and hand observers read-only snapshots of it.
    """

    def __init__(self, size: int = 8, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            size: Board dimension N (N >= 1).
            grid: Optional initial grid of 0/1 values. If None, creates an
                  empty board.
        """
        if size < 1:
            raise ValueError(f"Size must be at least 1, got {size}")

        self.size = size

        if grid is not None:
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            self.grid = grid.copy().astype(np.int8)
        else:
            self.grid = np.zeros((size, size), dtype=np.int8)

    def copy(self) -> Board:
        """Create a writable deep copy of the board."""
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def snapshot(self) -> Board:
        """Create an independent copy that can no longer be modified."""
        frozen = self.copy()
        frozen.grid.flags.writeable = False
        return frozen

    @property
    def frozen(self) -> bool:
        """True if this board is a read-only snapshot."""
        return not self.grid.flags.writeable

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(
                f"Position ({row}, {col}) is outside a {self.size}x{self.size} board"
            )

    def place(self, row: int, col: int) -> None:
        """Put a queen on (row, col)."""
        self._check(row, col)
        self.grid[row, col] = QUEEN

    def remove(self, row: int, col: int) -> None:
        """Take the queen off (row, col), if any."""
        self._check(row, col)
        self.grid[row, col] = EMPTY

    def has_queen(self, row: int, col: int) -> bool:
        """Check if (row, col) holds a queen."""
        self._check(row, col)
        return bool(self.grid[row, col] == QUEEN)

    def clear(self) -> None:
        """Remove every queen."""
        self.grid[:, :] = EMPTY

    def queens(self) -> List[Tuple[int, int]]:
        """Get all queen positions in row-major order."""
        rows, cols = np.nonzero(self.grid)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_queens(self) -> int:
        """Count the queens on the board."""
        return int(np.sum(self.grid == QUEEN))

    def columns(self) -> List[int]:
        """
        Get the queen column of each row.

        Returns:
            List of length N; -1 marks a row without a queen. A row with
            several queens reports the leftmost one.
        """
        result = []
        for row in range(self.size):
            occupied = np.flatnonzero(self.grid[row])
            result.append(int(occupied[0]) if occupied.size else -1)
        return result

    @classmethod
    def from_columns(cls, columns: Sequence[int], size: Optional[int] = None) -> Board:
        """
        Create a board with one queen per row.

        Args:
            columns: columns[row] is the queen's column; -1 leaves the row empty.
            size: Board size (defaults to len(columns)).
        """
        board = cls(size if size is not None else len(columns))
        for row, col in enumerate(columns):
            if col >= 0:
                board.place(row, col)
        return board

    def to_string(self) -> str:
        """Convert board to a compact string, one '0'/'1' per cell."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        for i in range(self.size):
            lines.append(' '.join('Q' if v == QUEEN else '.' for v in self.grid[i]))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Board(size={self.size}, queens={self.count_queens()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash((self.size, self.to_string()))
