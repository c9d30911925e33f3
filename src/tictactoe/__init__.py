"""
TicTacToe engine - immutable 3x3 board, rules evaluator and game loop.

Boards are value snapshots; rules classify a board as Pending, Draw or
Win(player); the game loop alternates two pluggable players until the game
ends.
"""

from .board import (
    BOARD_SIZE,
    Board,
    Cell,
    CellReference,
    board_from_string,
    cell_at,
    cells,
    empty_board,
    empty_cells,
    format_board,
    is_full,
    occupy_cell,
    segments,
)
from .rules import GameState, Pending, Draw, Win, PENDING, DRAW, analyze_game_state, segment_winner, winning_segment
from .player import Player, ScriptedPlayer, RandomPlayer
from .minimax import MinimaxPlayer, minimax_value_and_moves, policy_targets
from .encoding import board_to_tokens, legal_move_mask
from .config import GameConfig
from .game import Turn, iter_turns, play_game
from .match import MatchResult, play_match
from .errors import (
    TicTacToeError,
    BoardError,
    CellIndexError,
    CellOccupiedError,
    BoardParseError,
    PlayerError,
    InvalidMarkerError,
    InvalidMoveError,
    PlayerExhaustedError,
    NoMovesError,
)

__version__ = "0.1.0"
__all__ = [
    "BOARD_SIZE",
    "Board",
    "Cell",
    "CellReference",
    "board_from_string",
    "cell_at",
    "cells",
    "empty_board",
    "empty_cells",
    "format_board",
    "is_full",
    "occupy_cell",
    "segments",
    "GameState",
    "Pending",
    "Draw",
    "Win",
    "PENDING",
    "DRAW",
    "analyze_game_state",
    "segment_winner",
    "winning_segment",
    "Player",
    "ScriptedPlayer",
    "RandomPlayer",
    "MinimaxPlayer",
    "minimax_value_and_moves",
    "policy_targets",
    "board_to_tokens",
    "legal_move_mask",
    "GameConfig",
    "Turn",
    "iter_turns",
    "play_game",
    "MatchResult",
    "play_match",
    "TicTacToeError",
    "BoardError",
    "CellIndexError",
    "CellOccupiedError",
    "BoardParseError",
    "PlayerError",
    "InvalidMarkerError",
    "InvalidMoveError",
    "PlayerExhaustedError",
    "NoMovesError",
]
