"""Step events reported by the search strategies.

Each event is a frozen dataclass describing one observable moment of a
search. Boards carried by events are read-only snapshots, so an observer can
keep them around while the search carries on mutating its own working board.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

from ..core.board import Board


@dataclass(frozen=True)
class PlacementAttempted:
    """A (row, col) was evaluated as a queen position."""
    row: int
    col: int
    safe: bool


@dataclass(frozen=True)
class QueenPlaced:
    """A queen was put on the working board."""
    row: int
    col: int
    board: Board


@dataclass(frozen=True)
class QueenRemoved:
    """A queen was taken back after its subtree was exhausted."""
    row: int
    col: int
    board: Board


@dataclass(frozen=True)
class BoardFilled:
    """Brute force built a complete assignment and is about to check it."""
    attempt: int
    columns: Tuple[int, ...]
    board: Board


@dataclass(frozen=True)
class InvalidConfiguration:
    """A complete assignment failed the full-board check."""
    attempt: int
    board: Board


@dataclass(frozen=True)
class SolutionFound:
    """A valid placement of all N queens. `index` counts from 1."""
    index: int
    board: Board


@dataclass(frozen=True)
class SearchFinished:
    """Terminal event of a search."""
    solutions: int
    attempts: int
    cancelled: bool = False


StepEvent = Union[
    PlacementAttempted,
    QueenPlaced,
    QueenRemoved,
    BoardFilled,
    InvalidConfiguration,
    SolutionFound,
    SearchFinished,
]
