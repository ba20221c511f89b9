"""Terminal presentation of a run."""

from __future__ import annotations
import sys
from typing import Optional, TextIO

from ..runner.controller import RunObserver, StepUpdate
from ..runner.params import RunState
from ..solvers.events import (
    InvalidConfiguration,
    PlacementAttempted,
    SearchFinished,
)


class ConsoleObserver(RunObserver):
    """
    Prints each step: the board (when the step changed it), the status
    message and the counters.

    Args:
        show_attempts: Also print routine attempt and invalid-configuration
                       lines. With pacing off these dominate the output.
        stream: Where to write (default: stdout).
    """

    def __init__(self, show_attempts: bool = True, stream: Optional[TextIO] = None):
        self.show_attempts = show_attempts
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream, flush=True)

    def on_state(self, state: RunState) -> None:
        self._print(f"[{state.value}]")

    def on_step(self, update: StepUpdate) -> None:
        event = update.event
        routine = isinstance(event, (PlacementAttempted, InvalidConfiguration))
        if routine and not self.show_attempts:
            return

        board = getattr(event, "board", None)
        if board is not None:
            self._print()
            self._print(str(board))

        counters = f"solutions: {update.stats.solutions}  attempts: {update.stats.attempts}"
        if isinstance(event, SearchFinished):
            self._print()
            self._print("=" * 50)
            self._print(update.message)
            self._print(counters)
            self._print("=" * 50)
        else:
            self._print(f"{update.message}  ({counters})")
