"""N-Queens search visualizer: brute force versus backtracking, step by step."""

from .core import Board, is_safe
from .solvers import Algorithm, BacktrackingSolver, BruteForceSolver
from .runner import RunController, RunParameters, RunState
from .errors import QueensError, AlreadyRunning, RunInProgress, InvalidParameters

__version__ = "1.0.0"
