"""Run parameters, supported ranges and the run lifecycle."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from numbers import Integral, Real
from typing import Dict, Type

from ..errors import InvalidParameters
from ..solvers.factory import Algorithm
from ..solvers.events import (
    BoardFilled,
    InvalidConfiguration,
    PlacementAttempted,
    QueenPlaced,
    QueenRemoved,
    SearchFinished,
    SolutionFound,
)


class RunState(Enum):
    """Lifecycle of a controller run."""
    IDLE = "idle"
    RUNNING = "running"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass(frozen=True)
class RunParameters:
    """Everything a run needs. Fixed for the duration of the run."""
    size: int
    algorithm: Algorithm = Algorithm.BACKTRACKING
    interval_ms: int = 500

    @classmethod
    def default(cls) -> RunParameters:
        """4x4 board, backtracking, half a second per step."""
        return cls(size=4)


@dataclass(frozen=True)
class Limits:
    """Supported parameter ranges (inclusive)."""
    min_size: int = 4
    max_size: int = 8
    min_interval_ms: int = 100
    max_interval_ms: int = 1000

    def validate(self, parameters: RunParameters) -> None:
        """Raise InvalidParameters if `parameters` fall outside these limits."""
        if not isinstance(parameters.algorithm, Algorithm):
            raise InvalidParameters(f"Unknown algorithm {parameters.algorithm!r}")
        # bool is an Integral too
        if not isinstance(parameters.size, Integral) or isinstance(parameters.size, bool):
            raise InvalidParameters(f"Board size must be an integer, got {parameters.size!r}")
        if not isinstance(parameters.interval_ms, Real) or isinstance(parameters.interval_ms, bool):
            raise InvalidParameters(f"Interval must be a number, got {parameters.interval_ms!r}")
        if not self.min_size <= parameters.size <= self.max_size:
            raise InvalidParameters(
                f"Board size must be {self.min_size}-{self.max_size}, got {parameters.size}"
            )
        if not self.min_interval_ms <= parameters.interval_ms <= self.max_interval_ms:
            raise InvalidParameters(
                f"Interval must be {self.min_interval_ms}-{self.max_interval_ms} ms, "
                f"got {parameters.interval_ms}"
            )


DEFAULT_LIMITS = Limits()

# Pause after each event, as a multiple of the base interval. Milestones
# linger longer than routine steps.
DEFAULT_PACING: Dict[Type, float] = {
    PlacementAttempted: 0.25,
    QueenPlaced: 1.0,
    QueenRemoved: 0.5,
    BoardFilled: 0.5,
    InvalidConfiguration: 0.0,
    SolutionFound: 2.0,
    SearchFinished: 0.0,
}
