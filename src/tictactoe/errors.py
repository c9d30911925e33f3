"""
Exception hierarchy for the tic-tac-toe engine.

Every error carries a machine-readable code, a human-readable message and a
context dict naming the offending collaborator or cell.

Usage:
    from tictactoe.errors import InvalidMoveError

    try:
        play_game(player_one, player_two)
    except InvalidMoveError as e:
        print(e.player.get_marker(), e.reference)
"""

from typing import Any, Dict, Optional

__all__ = [
    "TicTacToeError",
    # Board errors
    "BoardError",
    "CellIndexError",
    "CellOccupiedError",
    "BoardParseError",
    # Player errors
    "PlayerError",
    "InvalidMarkerError",
    "InvalidMoveError",
    "PlayerExhaustedError",
    "NoMovesError",
]


class TicTacToeError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Additional context for debugging
    """
    code: str = "TICTACTOE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Board Errors
# =============================================================================


class BoardError(TicTacToeError):
    """Base class for errors raised by board operations."""
    code: str = "BOARD_ERROR"


class CellIndexError(BoardError, IndexError):
    """Cell reference outside the board.

    Attributes:
        index: The offending index
        cell_count: Number of cells on the board
    """
    code: str = "CELL_INDEX_OUT_OF_RANGE"

    def __init__(self, index: int, cell_count: int):
        super().__init__(
            f"cell index {index} is outside 0..{cell_count - 1}",
            context={"index": index, "cell_count": cell_count},
        )
        self.index = index
        self.cell_count = cell_count


class CellOccupiedError(BoardError):
    """Strict occupation of a cell that already has an occupant."""
    code: str = "CELL_OCCUPIED"

    def __init__(self, index: int, marker: str):
        super().__init__(
            f"cell {index} is already occupied by {marker}",
            context={"index": index, "occupant": marker},
        )
        self.index = index
        self.marker = marker


class BoardParseError(BoardError, ValueError):
    """Board text that does not describe a full board."""
    code: str = "BOARD_PARSE"


# =============================================================================
# Player Errors
# =============================================================================


class PlayerError(TicTacToeError):
    """Base class for errors attributed to a player collaborator.

    Attributes:
        player: The player at fault (may be None if not yet constructed)
    """
    code: str = "PLAYER_ERROR"

    def __init__(
        self,
        message: str,
        player: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.player = player


class InvalidMarkerError(PlayerError, ValueError):
    """Empty marker, or two players sharing one marker."""
    code: str = "INVALID_MARKER"


class InvalidMoveError(PlayerError):
    """A player chose a cell it may not occupy.

    Attributes:
        reference: The cell reference the player returned
        reason: Why the move was rejected
    """
    code: str = "INVALID_MOVE"

    def __init__(self, player: Any, reference: Any, reason: str):
        marker = player.get_marker()
        super().__init__(
            f"player {marker} chose {reference}: {reason}",
            player=player,
            context={"player": marker, "reference": reference},
        )
        self.reference = reference
        self.reason = reason


class PlayerExhaustedError(PlayerError):
    """A scripted player was asked for a move after its script ran out."""
    code: str = "PLAYER_EXHAUSTED"

    def __init__(self, player: Any):
        marker = player.get_marker()
        super().__init__(
            f"player {marker} has run out of moves",
            player=player,
            context={"player": marker},
        )


class NoMovesError(PlayerError):
    """A player was asked to move on a board that is already decided."""
    code: str = "NO_MOVES"

    def __init__(self, player: Any):
        marker = player.get_marker()
        super().__init__(
            f"player {marker} was asked to move on a finished board",
            player=player,
            context={"player": marker},
        )
