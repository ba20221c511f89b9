"""Errors raised by the run controller and parameter validation."""


class QueensError(Exception):
    """Base class for all errors raised by this package."""


class AlreadyRunning(QueensError):
    """start() was called while a run is in progress."""


class RunInProgress(QueensError):
    """reset() was called while a run is in progress; cancel it first."""


class InvalidParameters(QueensError, ValueError):
    """Run parameters are outside the supported range."""
