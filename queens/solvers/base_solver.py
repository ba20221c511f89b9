"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple
import logging
import time
import tracemalloc

from .events import SearchFinished, SolutionFound, StepEvent


logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


def _never_cancelled() -> bool:
    return False


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    algorithm: str = ""
    size: int = 0

    # Counters shown to the learner
    solutions: int = 0
    attempts: int = 0

    # Algorithm-specific counters
    placements: int = 0
    backtracks: int = 0
    invalid_configurations: int = 0

    # Filled in by solve()
    time_seconds: float = 0.0
    memory_bytes: int = 0
    cancelled: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "algorithm": self.algorithm,
            "size": self.size,
            "solutions": self.solutions,
            "attempts": self.attempts,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "invalid_configurations": self.invalid_configurations,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "cancelled": self.cancelled,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for step-wise N-Queens strategies.

    A strategy is a generator of step events. Each `yield` suspends the whole
    search, recursion included, until the consumer asks for the next event,
    which is what lets a controller pause between steps.
    """

    name: str = "BaseSolver"

    def __init__(self, size: int):
        """
        Initialize the solver.

        Args:
            size: Board size N (N >= 1).
        """
        if size < 1:
            raise ValueError(f"Size must be at least 1, got {size}")
        self.size = size
        self.stats = SolverStats(algorithm=self.name, size=size)

    def steps(self, is_cancelled: Optional[CancelCheck] = None) -> Iterator[StepEvent]:
        """
        Run the search, yielding one event per observable step.

        Args:
            is_cancelled: Polled at the top of every recursive call and every
                          column iteration. Once it returns True the search
                          unwinds from the next polling point without
                          yielding further attempts or backtracks.

        Yields:
            Step events in depth-first, ascending-column order, ending with
            SearchFinished unless the search was cancelled.
        """
        cancelled = is_cancelled or _never_cancelled
        self.reset_stats()
        logger.debug("%s search started for N=%d", self.name, self.size)

        yield from self._search(cancelled)

        if cancelled():
            self.stats.cancelled = True
            logger.debug("%s search cancelled after %d attempts", self.name, self.stats.attempts)
            return

        yield SearchFinished(self.stats.solutions, self.stats.attempts)

    def solve(self, track_memory: bool = True) -> Tuple[List[List[int]], SolverStats]:
        """
        Run the whole search without pacing, with timing and memory tracking.

        Returns:
            Tuple of (solutions as per-row column lists, stats).
        """
        solutions: List[List[int]] = []

        if track_memory:
            tracemalloc.start()

        start_time = time.perf_counter()

        try:
            for event in self.steps():
                if isinstance(event, SolutionFound):
                    solutions.append(event.board.columns())
        except Exception as e:
            logger.exception("%s failed for N=%d", self.name, self.size)
            self.stats.extra["error"] = str(e)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if track_memory:
                current, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        return solutions, self.stats

    @abstractmethod
    def _search(self, is_cancelled: CancelCheck) -> Iterator[StepEvent]:
        """
        Internal search generator to be implemented by subclasses.

        Must keep `self.stats` counters current as it goes and must not
        yield SearchFinished; `steps()` does that.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name, size=self.size)
