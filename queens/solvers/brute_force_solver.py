"""Exhaustive enumeration of every one-queen-per-row assignment."""

from __future__ import annotations
from typing import Iterator, List

from .base_solver import BaseSolver, CancelCheck
from .events import BoardFilled, InvalidConfiguration, SolutionFound, StepEvent
from ..core.board import Board
from ..core.validator import is_valid_configuration


class BruteForceSolver(BaseSolver):
    """
    Generate all N^N column assignments, then check each one.

    Assignments are produced as a Cartesian product in row-major,
    ascending-column order by extending a position list one row at a time.
    Nothing is checked until all N queens are down, so a conflict in the
    first two rows still costs N^(N-2) complete boards.
    """

    name = "Brute Force"

    def _search(self, is_cancelled: CancelCheck) -> Iterator[StepEvent]:
        yield from self._extend([], is_cancelled)

    def _extend(self, positions: List[int], is_cancelled: CancelCheck) -> Iterator[StepEvent]:
        if is_cancelled():
            return

        if len(positions) == self.size:
            self.stats.attempts += 1
            attempt = self.stats.attempts
            board = Board.from_columns(positions).snapshot()
            yield BoardFilled(attempt, tuple(positions), board)

            if is_valid_configuration(board):
                self.stats.solutions += 1
                yield SolutionFound(self.stats.solutions, board)
            else:
                self.stats.invalid_configurations += 1
                yield InvalidConfiguration(attempt, board)
            return

        for col in range(self.size):
            if is_cancelled():
                return
            yield from self._extend(positions + [col], is_cancelled)
