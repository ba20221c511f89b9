"""Core module for the N-Queens board and safety checks."""

from .board import Board, EMPTY, QUEEN
from .validator import is_safe, is_valid_configuration, attacks

__all__ = ["Board", "EMPTY", "QUEEN", "is_safe", "is_valid_configuration", "attacks"]
