"""Board drawing with matplotlib and animated GIF export with Pillow."""

from __future__ import annotations
import io
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from PIL import Image

from ..core.board import Board
from ..runner.controller import RunObserver, RunStats, StepUpdate
from ..runner.params import RunState
from ..solvers.events import PlacementAttempted


logger = logging.getLogger(__name__)

LIGHT = "#f0d9b5"
DARK = "#b58863"
QUEEN_COLOR = "#c0392b"
QUEEN_GLYPH = "♛"


def draw_board(ax, board: Board, title: str = "") -> None:
    """
    Draw `board` on `ax` as a checkerboard with queens.

    Row 0 is drawn at the top, as on the learner's screen.
    """
    ax.clear()
    n = board.size
    for row in range(n):
        for col in range(n):
            color = LIGHT if (row + col) % 2 == 0 else DARK
            ax.add_patch(Rectangle((col, n - 1 - row), 1, 1, facecolor=color, edgecolor="none"))
            if board.has_queen(row, col):
                ax.text(col + 0.5, n - 1 - row + 0.5, QUEEN_GLYPH,
                        ha="center", va="center",
                        fontsize=min(40, 300 / n), color=QUEEN_COLOR)

    ax.set_xlim(0, n)
    ax.set_ylim(0, n)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title, fontsize=11)


@dataclass
class Frame:
    """One recorded step."""
    board: Board
    message: str
    stats: RunStats


class AnimationRecorder(RunObserver):
    """
    Observer that keeps every board-changing step of a run so it can be
    written out as an animated GIF afterwards.
    """

    def __init__(self, include_attempts: bool = False):
        self.include_attempts = include_attempts
        self.frames: List[Frame] = []
        self._board: Optional[Board] = None

    def on_state(self, state: RunState) -> None:
        if state is RunState.RUNNING:
            self.frames = []
            self._board = None

    def on_step(self, update: StepUpdate) -> None:
        event = update.event
        board = getattr(event, "board", None)
        if board is not None:
            self._board = board
        elif isinstance(event, PlacementAttempted) and not self.include_attempts:
            return
        if self._board is None:
            return
        self.frames.append(Frame(self._board, update.message, update.stats))

    def save(self, path: str, interval_ms: int = 500, dpi: int = 100) -> str:
        """
        Write the recorded frames as an animated GIF.

        Each frame is drawn with matplotlib and assembled with Pillow. The
        first and last frames are held longer.

        Returns:
            The path written.
        """
        if not self.frames:
            raise ValueError("No frames recorded")

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        images = []
        for frame in self.frames:
            fig, ax = plt.subplots(figsize=(5, 5.6))
            title = (f"{frame.message}\n"
                     f"solutions: {frame.stats.solutions}  attempts: {frame.stats.attempts}")
            draw_board(ax, frame.board, title)
            plt.tight_layout()

            buffer = io.BytesIO()
            fig.savefig(buffer, format="png", dpi=dpi)
            plt.close(fig)
            buffer.seek(0)
            images.append(Image.open(buffer).convert("RGB"))

        durations = [interval_ms] * len(images)
        durations[0] = max(interval_ms, 800)
        durations[-1] = max(interval_ms, 2000)

        images[0].save(
            path,
            save_all=True,
            append_images=images[1:],
            duration=durations,
            loop=0,
            optimize=True,
        )

        logger.info("Saved %d frames to %s", len(images), path)
        return path
