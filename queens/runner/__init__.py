"""Run controller: paced, cancellable execution of a search strategy."""

from .controller import RunController, RunObserver, ObserverGroup, RunStats, StepUpdate
from .params import RunParameters, RunState, Limits, DEFAULT_LIMITS, DEFAULT_PACING
from .messages import describe

__all__ = [
    "RunController",
    "RunObserver",
    "ObserverGroup",
    "RunStats",
    "StepUpdate",
    "RunParameters",
    "RunState",
    "Limits",
    "DEFAULT_LIMITS",
    "DEFAULT_PACING",
    "describe",
]
