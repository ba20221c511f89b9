"""
Run controller: drives one strategy at a time, one paced step after another.

The controller pulls events from a strategy generator on a background worker
thread. After forwarding each event to the observer it pauses for the
event's share of the pacing interval. The pause waits on the cancellation
flag, so `cancel()` wakes the worker, which closes the generator and reports
a final SearchFinished with the counters frozen where the run stopped.

Example:
    controller = RunController(observer=ConsoleObserver())
    controller.start(RunParameters(size=6, algorithm=Algorithm.BRUTE_FORCE))
    ...
    controller.cancel()
    controller.join()
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Optional, Type
import logging
import threading

from .messages import IDLE_MESSAGE, START_MESSAGES, describe
from .params import (
    DEFAULT_LIMITS,
    DEFAULT_PACING,
    Limits,
    RunParameters,
    RunState,
)
from ..core.board import Board
from ..errors import AlreadyRunning, RunInProgress
from ..solvers.base_solver import BaseSolver
from ..solvers.events import (
    BoardFilled,
    PlacementAttempted,
    SearchFinished,
    SolutionFound,
    StepEvent,
)
from ..solvers.factory import create_solver


logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Counters for the current run. Never decrease during a run."""
    solutions: int = 0
    attempts: int = 0

    def record(self, event: StepEvent) -> None:
        """Update the counters from one step event."""
        if isinstance(event, (PlacementAttempted, BoardFilled)):
            self.attempts += 1
        elif isinstance(event, SolutionFound):
            self.solutions += 1

    def copy(self) -> RunStats:
        return replace(self)


@dataclass(frozen=True)
class StepUpdate:
    """What the presentation layer receives for every step."""
    event: StepEvent
    stats: RunStats
    message: str
    state: RunState


class RunObserver:
    """
    Receiver of controller output. Subclass and override what you need.

    Both methods are called from the controller's worker thread. The final
    SearchFinished step arrives before the terminal state, and a terminal
    on_state may start the next run.
    """

    def on_step(self, update: StepUpdate) -> None:
        pass

    def on_state(self, state: RunState) -> None:
        pass


class ObserverGroup(RunObserver):
    """Forwards everything to several observers, in order."""

    def __init__(self, *observers: RunObserver):
        self.observers = list(observers)

    def on_step(self, update: StepUpdate) -> None:
        for observer in self.observers:
            observer.on_step(update)

    def on_state(self, state: RunState) -> None:
        for observer in self.observers:
            observer.on_state(state)


class RunController:
    """
    Owns the run lifecycle, the cancellation flag and the run statistics.

    Only one run is active per controller. Commands are rejected with
    AlreadyRunning / RunInProgress / InvalidParameters and leave the
    controller usable.
    """

    def __init__(
        self,
        observer: Optional[RunObserver] = None,
        time_scale: float = 1.0,
        limits: Limits = DEFAULT_LIMITS,
        pacing: Optional[Dict[Type, float]] = None,
    ):
        """
        Initialize the controller.

        Args:
            observer: Receives step updates and state changes.
            time_scale: Multiplies every pause; 0 runs without pacing.
            limits: Accepted parameter ranges.
            pacing: Event type -> multiple of the base interval to pause for
                    after that event (default: DEFAULT_PACING).
        """
        if time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {time_scale}")

        self.observer = observer or RunObserver()
        self.time_scale = time_scale
        self.limits = limits
        self.pacing = dict(DEFAULT_PACING if pacing is None else pacing)

        self._lock = threading.Lock()
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None

        self._state = RunState.IDLE
        self._stats = RunStats()
        self._parameters: Optional[RunParameters] = None
        self._board = Board(RunParameters.default().size).snapshot()
        self._message = IDLE_MESSAGE

    @property
    def state(self) -> RunState:
        with self._lock:
            return self._state

    @property
    def stats(self) -> RunStats:
        """A copy of the current counters."""
        with self._lock:
            return self._stats.copy()

    @property
    def board(self) -> Board:
        """The last board shown to the observer (read-only)."""
        with self._lock:
            return self._board

    @property
    def parameters(self) -> Optional[RunParameters]:
        with self._lock:
            return self._parameters

    @property
    def message(self) -> str:
        """The latest status message."""
        with self._lock:
            return self._message

    def start(self, parameters: RunParameters) -> None:
        """
        Start a new run on a background thread.

        The observer hears about the transition to RUNNING from the worker,
        before the first step.

        Raises:
            AlreadyRunning: A run is in progress; it continues unaffected.
            InvalidParameters: Parameters are out of range; nothing changes.
        """
        with self._lock:
            if self._state is RunState.RUNNING:
                logger.warning("Start rejected: a run is already in progress")
                raise AlreadyRunning("A run is already in progress")

            self.limits.validate(parameters)

            # Build everything that can fail before touching any state
            solver = create_solver(parameters.algorithm, parameters.size)
            board = Board(parameters.size).snapshot()
            message = START_MESSAGES[parameters.algorithm.value]
            thread = threading.Thread(
                target=self._drive,
                args=(solver,),
                name=f"queens-{parameters.algorithm.value}-{parameters.size}",
                daemon=True,
            )

            self._parameters = parameters
            self._stats = RunStats()
            self._board = board
            self._message = message
            self._cancel.clear()
            self._state = RunState.RUNNING

            logger.info(
                "Run started: N=%d, algorithm=%s, interval=%dms",
                parameters.size, parameters.algorithm.label, parameters.interval_ms,
            )
            thread.start()
            self._thread = thread

    def cancel(self) -> None:
        """
        Ask the running search to stop.

        Does not interrupt anything: the worker sees the flag when its current
        pause ends (which the flag itself cuts short). No-op unless running.
        """
        with self._lock:
            if self._state is not RunState.RUNNING:
                logger.debug("Cancel ignored in state %s", self._state.value)
                return
            self._cancel.set()
        logger.info("Cancellation requested")

    def reset(self) -> None:
        """
        Clear the board and counters and return to IDLE.

        Raises:
            RunInProgress: A run is in progress; cancel it first.
        """
        with self._lock:
            if self._state is RunState.RUNNING:
                logger.warning("Reset rejected: a run is in progress")
                raise RunInProgress("Cancel the current run before resetting")

            size = self._parameters.size if self._parameters else self._board.size
            self._stats = RunStats()
            self._board = Board(size).snapshot()
            self._message = IDLE_MESSAGE
            changed = self._state is not RunState.IDLE
            self._state = RunState.IDLE

        if changed:
            logger.info("Controller reset")
            self.observer.on_state(RunState.IDLE)

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the worker thread to finish.

        Returns:
            True if no run is active any more.
        """
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def run(self, parameters: RunParameters) -> RunStats:
        """Start a run and block until it ends. Returns the final counters."""
        self.start(parameters)
        self.join()
        return self.stats

    def _drive(self, solver: BaseSolver) -> None:
        steps = solver.steps(self._cancel.is_set)
        finished: Optional[SearchFinished] = None

        try:
            self.observer.on_state(RunState.RUNNING)
            for event in steps:
                if isinstance(event, SearchFinished):
                    finished = event
                    break

                self._apply(event)
                self._emit(event)
                self._pause(event)

                if self._cancel.is_set():
                    break
        except Exception:
            logger.exception("Run aborted by an error")
        finally:
            steps.close()

        if finished is not None:
            self._finish(RunState.COMPLETED, finished)
        else:
            with self._lock:
                stats = self._stats.copy()
            self._finish(
                RunState.CANCELLED,
                SearchFinished(stats.solutions, stats.attempts, cancelled=True),
            )

    def _apply(self, event: StepEvent) -> None:
        board = getattr(event, "board", None)
        with self._lock:
            self._stats.record(event)
            if board is not None:
                self._board = board
            self._message = describe(event)

    def _emit(self, event: StepEvent) -> None:
        with self._lock:
            update = StepUpdate(event, self._stats.copy(), self._message, self._state)
        self.observer.on_step(update)

    def _pause(self, event: StepEvent) -> None:
        interval = self._parameters.interval_ms / 1000.0
        delay = interval * self.pacing.get(type(event), 1.0) * self.time_scale
        if delay > 0:
            self._cancel.wait(delay)

    def _finish(self, state: RunState, event: SearchFinished) -> None:
        # The final update goes out while still RUNNING
        with self._lock:
            self._message = describe(event)
            update = StepUpdate(event, self._stats.copy(), self._message, state)

        logger.info(
            "Run %s: %d solution(s), %d attempts",
            state.value, event.solutions, event.attempts,
        )

        try:
            self.observer.on_step(update)
        except Exception:
            logger.exception("Observer failed on the final update")

        with self._lock:
            self._state = state

        try:
            self.observer.on_state(state)
        except Exception:
            logger.exception("Observer failed on the %s transition", state.value)
