"""
TicTacToe rules: classify a board as pending, drawn or won.

Segments are scanned in board enumeration order and the first complete one
decides the winner, so a constructed board with several complete lines
reports the earliest.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .board import Board, Segment, empty_cells, segments

if TYPE_CHECKING:
    from .player import Player


class GameState:
    """Result of analysing a board."""

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Pending(GameState):
    """Game still in progress."""

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Draw(GameState):
    """Full board with no complete line."""


@dataclass(frozen=True)
class Win(GameState):
    """
    A player completed a line.

    Equality follows Player equality, so two winners compare equal when their
    markers do.
    """
    player: "Player"

    @property
    def marker(self) -> str:
        return self.player.get_marker()


PENDING = Pending()
DRAW = Draw()


def segment_winner(segment: Segment) -> Optional["Player"]:
    """Return the occupant of the first cell if every cell shares its marker."""
    if not segment:
        return None
    first = segment[0].occupant
    if first is None:
        return None
    marker = first.get_marker()
    if all(c.marker == marker for c in segment[1:]):
        return first
    return None


def winning_segment(board: Board) -> Optional[Segment]:
    """Return the first complete segment, or None."""
    for segment in segments(board):
        if segment_winner(segment) is not None:
            return segment
    return None


def analyze_game_state(board: Board) -> GameState:
    """Classify board as Win(player), Draw or Pending."""
    for segment in segments(board):
        winner = segment_winner(segment)
        if winner is not None:
            return Win(winner)

    if not empty_cells(board):
        return DRAW

    return PENDING
