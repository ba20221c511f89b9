"""Presentation adapters for the run controller."""

from .console import ConsoleObserver
from .animation import AnimationRecorder, draw_board

__all__ = ["ConsoleObserver", "AnimationRecorder", "draw_board"]
