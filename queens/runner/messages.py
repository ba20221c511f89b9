"""Status messages shown next to the board for each step."""

from __future__ import annotations

from ..solvers.events import (
    BoardFilled,
    InvalidConfiguration,
    PlacementAttempted,
    QueenPlaced,
    QueenRemoved,
    SearchFinished,
    SolutionFound,
    StepEvent,
)


START_MESSAGES = {
    "backtrack": "Backtracking: placing queens smartly...",
    "bruteforce": "Brute Force: trying every possible combination...",
}

IDLE_MESSAGE = "Click Start to begin!"


def describe(event: StepEvent) -> str:
    """
    Describe a step for the learner. Rows and columns are shown 1-based.
    """
    if isinstance(event, PlacementAttempted):
        if event.safe:
            return f"Row {event.row + 1}, col {event.col + 1} is safe"
        return f"Row {event.row + 1}, col {event.col + 1} is unsafe, skipping!"
    if isinstance(event, QueenPlaced):
        return f"Placed queen at row {event.row + 1}, col {event.col + 1}"
    if isinstance(event, QueenRemoved):
        return f"Backtracking from row {event.row + 1}, col {event.col + 1}"
    if isinstance(event, BoardFilled):
        return f"Checking configuration {event.attempt}"
    if isinstance(event, InvalidConfiguration):
        return f"Invalid configuration (attempt {event.attempt})"
    if isinstance(event, SolutionFound):
        return f"Found solution #{event.index}!"
    if isinstance(event, SearchFinished):
        if event.cancelled:
            return (f"Stopped. Found {event.solutions} solution(s) "
                    f"after {event.attempts} attempts")
        return f"Done! Found {event.solutions} solution(s) after {event.attempts} attempts"
    raise TypeError(f"Not a step event: {event!r}")
