"""
Player capability and the simple concrete players.

A Player reports a marker and, given its opponent and the current board,
chooses a cell to occupy. Players compare and hash by marker alone, which is
what win attribution relies on.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Optional

import numpy as np

from .board import Board, CellReference, empty_cells
from .errors import InvalidMarkerError, NoMovesError, PlayerExhaustedError


class Player(ABC):
    """Move-selection strategy behind one marker."""

    @abstractmethod
    def get_marker(self) -> str:
        """Stable, non-empty display symbol."""

    @abstractmethod
    def get_move(self, opponent: "Player", board: Board) -> CellReference:
        """Choose one of `empty_cells(board)`."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.get_marker() == other.get_marker()

    def __hash__(self) -> int:
        return hash(self.get_marker())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_marker()!r})"


def validate_marker(marker: str) -> str:
    """Return marker, raising InvalidMarkerError unless it is a non-empty string."""
    if not isinstance(marker, str) or not marker.strip():
        raise InvalidMarkerError(f"marker must be a non-empty string, got {marker!r}")
    return marker


class ScriptedPlayer(Player):
    """
    Plays a fixed sequence of cell indices, first to last.

    Used to drive games deterministically in tests and replays. Asking for a
    move after the script is used up raises PlayerExhaustedError.
    """

    def __init__(self, marker: str, moves: Iterable[int] = ()):
        self.marker = validate_marker(marker)
        self.moves = deque(moves)

    @property
    def remaining(self) -> int:
        return len(self.moves)

    def get_marker(self) -> str:
        return self.marker

    def get_move(self, opponent: Player, board: Board) -> CellReference:
        if not self.moves:
            raise PlayerExhaustedError(self)
        # Off-board indices are reported by the game loop against this player
        return CellReference(self.moves.popleft())


class RandomPlayer(Player):
    """Picks uniformly among empty cells."""

    def __init__(
        self,
        marker: str,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.marker = validate_marker(marker)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def get_marker(self) -> str:
        return self.marker

    def get_move(self, opponent: Player, board: Board) -> CellReference:
        moves = empty_cells(board)
        if not moves:
            raise NoMovesError(self)
        return moves[int(self.rng.integers(0, len(moves)))]
