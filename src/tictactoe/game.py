"""
Turn-alternating game loop.

Player one moves first and players strictly alternate. Each turn the active
player is asked for a move given its opponent and the current board, the move
is applied to produce a new board, and the board is re-analysed. The loop
ends the first time the state is not Pending.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .board import Board, CellReference, empty_board, empty_cells, format_board, occupy_cell
from .config import GameConfig
from .errors import InvalidMarkerError, InvalidMoveError
from .player import Player
from .rules import PENDING, GameState, analyze_game_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Turn:
    """One applied move and what it produced."""
    number: int               # 1-based
    player: Player            # Who moved
    reference: CellReference  # Cell occupied
    board: Board              # Board after the move
    state: GameState          # State of that board


def _validate_move(player: Player, reference: CellReference, board: Board):
    """Raise InvalidMoveError unless reference is one of the board's empty cells."""
    if not isinstance(reference, CellReference):
        reason = "not a cell reference"
    elif not 0 <= reference.index < len(board.cells):
        reason = "outside the board"
    elif reference not in empty_cells(board):
        reason = f"cell already occupied by {board.cells[reference.index].marker}"
    else:
        return

    logger.warning("Rejected move from %s: %s (%s)", player.get_marker(), reference, reason)
    raise InvalidMoveError(player, reference, reason)


def iter_turns(
    player_one: Player,
    player_two: Player,
    config: Optional[GameConfig] = None,
) -> Iterator[Turn]:
    """
    Play a game, yielding every turn.

    Boards carried by earlier turns stay valid, so the sequence doubles as a
    full game record.

    Raises:
        InvalidMarkerError: both players share a marker
        InvalidMoveError: a player chose a cell that is not empty
            (when config.validate_moves)
    """
    config = config or GameConfig()
    if player_one == player_two:
        raise InvalidMarkerError(
            f"players must have distinct markers, both use {player_one.get_marker()!r}",
            player=player_two,
        )

    current, opposing = player_one, player_two
    board = empty_board()
    state = analyze_game_state(board)
    number = 0

    while not state.is_terminal:
        number += 1
        reference = current.get_move(opposing, board)

        if config.validate_moves:
            _validate_move(current, reference, board)
            board = occupy_cell(board, current, reference)
        else:
            board = occupy_cell(board, current, reference, strict=config.strict_occupancy)

        state = analyze_game_state(board)
        logger.debug("Turn %d: %s takes cell %d", number, current.get_marker(), reference.index)
        if config.log_boards:
            logger.debug("Board: %s", format_board(board))

        yield Turn(number, current, reference, board, state)
        current, opposing = opposing, current


def play_game(
    player_one: Player,
    player_two: Player,
    config: Optional[GameConfig] = None,
) -> GameState:
    """Play a game to completion and return the terminal state."""
    state: GameState = PENDING
    turns = 0
    for turn in iter_turns(player_one, player_two, config):
        state = turn.state
        turns = turn.number

    logger.info("Game over after %d turns: %s", turns, state)
    return state
