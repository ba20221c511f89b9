"""Depth-first backtracking with a safety check before every placement."""

from __future__ import annotations
from typing import Iterator

from .base_solver import BaseSolver, CancelCheck
from .events import (
    PlacementAttempted,
    QueenPlaced,
    QueenRemoved,
    SolutionFound,
    StepEvent,
)
from ..core.board import Board
from ..core.validator import is_safe


class BacktrackingSolver(BaseSolver):
    """
    One queen per row, filled top-down.

    Every candidate column is checked with `is_safe` before the queen goes
    down, so an unsafe prefix is dropped immediately instead of being
    extended. After a queen's subtree is exhausted it is taken back
    (chronological backtracking) and the next column is tried. The search
    does not stop at the first solution.
    """

    name = "Backtracking"

    def _search(self, is_cancelled: CancelCheck) -> Iterator[StepEvent]:
        board = Board(self.size)
        yield from self._solve_row(board, 0, is_cancelled)

    def _solve_row(self, board: Board, row: int, is_cancelled: CancelCheck) -> Iterator[StepEvent]:
        if is_cancelled():
            return

        if row == self.size:
            self.stats.solutions += 1
            yield SolutionFound(self.stats.solutions, board.snapshot())
            return

        for col in range(self.size):
            if is_cancelled():
                return

            self.stats.attempts += 1
            safe = is_safe(board, row, col)
            yield PlacementAttempted(row, col, safe)

            if not safe:
                continue

            board.place(row, col)
            self.stats.placements += 1
            yield QueenPlaced(row, col, board.snapshot())

            yield from self._solve_row(board, row + 1, is_cancelled)

            board.remove(row, col)
            # No cleanup noise once the user has stopped the run
            if is_cancelled():
                return
            self.stats.backtracks += 1
            yield QueenRemoved(row, col, board.snapshot())
