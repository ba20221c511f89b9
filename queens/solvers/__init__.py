"""Step-wise search strategies for the N-Queens puzzle."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver
from .brute_force_solver import BruteForceSolver
from .factory import Algorithm, create_solver
from .events import (
    StepEvent,
    PlacementAttempted,
    QueenPlaced,
    QueenRemoved,
    BoardFilled,
    InvalidConfiguration,
    SolutionFound,
    SearchFinished,
)

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "BruteForceSolver",
    "Algorithm",
    "create_solver",
    "StepEvent",
    "PlacementAttempted",
    "QueenPlaced",
    "QueenRemoved",
    "BoardFilled",
    "InvalidConfiguration",
    "SolutionFound",
    "SearchFinished",
]
