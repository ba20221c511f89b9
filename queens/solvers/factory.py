"""Algorithm selector and solver construction."""

from __future__ import annotations
from enum import Enum
from typing import Dict, Type

from .base_solver import BaseSolver
from .backtracking_solver import BacktrackingSolver
from .brute_force_solver import BruteForceSolver
from ..errors import InvalidParameters


class Algorithm(Enum):
    """Search strategies the learner can pick from."""
    BACKTRACKING = "backtrack"
    BRUTE_FORCE = "bruteforce"

    @property
    def label(self) -> str:
        """Human-readable name."""
        return SOLVERS[self].name

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        """
        Look up an algorithm by value ("backtrack") or member name
        ("BRUTE_FORCE"), case-insensitively.
        """
        key = name.strip().lower()
        for algorithm in cls:
            if key in (algorithm.value, algorithm.name.lower()):
                return algorithm
        choices = ", ".join(a.value for a in cls)
        raise InvalidParameters(f"Unknown algorithm {name!r}, expected one of: {choices}")


SOLVERS: Dict[Algorithm, Type[BaseSolver]] = {
    Algorithm.BACKTRACKING: BacktrackingSolver,
    Algorithm.BRUTE_FORCE: BruteForceSolver,
}


def create_solver(algorithm: Algorithm, size: int) -> BaseSolver:
    """Build the solver for `algorithm` on an N=`size` board."""
    return SOLVERS[algorithm](size)
