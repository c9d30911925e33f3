"""
Exact minimax solver over immutable boards, with caching.

Provides an optimal search-based player, plus policy/value targets for training
learned players outside this package (paired with tictactoe.encoding).
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np
import torch

from .board import Board, CellReference, empty_cells, occupy_cell
from .errors import NoMovesError
from .player import Player, validate_marker
from .rules import Win, analyze_game_state

logger = logging.getLogger(__name__)


# Cache: (markers by cell, mover marker, opponent marker) -> (value, best move indices)
_MINIMAX_CACHE: Dict[
    Tuple[Tuple[Optional[str], ...], str, str], Tuple[int, Tuple[int, ...]]
] = {}


def minimax_value_and_moves(
    board: Board, player: Player, opponent: Player
) -> Tuple[int, List[CellReference]]:
    """
    Compute minimax value and best moves from current state.

    Args:
        board: Current board
        player: Player to move
        opponent: The other player

    Returns:
        (value, best_moves) where:
        - value: +1 (win), 0 (draw), -1 (loss) from the mover's perspective
        - best_moves: references achieving the optimal value, ascending
    """
    key = (
        tuple(c.marker for c in board.cells),
        player.get_marker(),
        opponent.get_marker(),
    )
    if key in _MINIMAX_CACHE:
        v, best = _MINIMAX_CACHE[key]
        return v, [CellReference(i) for i in best]

    state = analyze_game_state(board)
    if state.is_terminal:
        if isinstance(state, Win):
            v = +1 if state.player == player else -1
        else:
            v = 0
        _MINIMAX_CACHE[key] = (v, tuple())
        return v, []

    best_v = -2
    best_moves: List[CellReference] = []

    for reference in empty_cells(board):
        next_board = occupy_cell(board, player, reference)
        child_v, _ = minimax_value_and_moves(next_board, opponent, player)
        v_here = -child_v  # Negate for opponent's perspective

        if v_here > best_v:
            best_v = v_here
            best_moves = [reference]
        elif v_here == best_v:
            best_moves.append(reference)

    _MINIMAX_CACHE[key] = (best_v, tuple(r.index for r in best_moves))
    return best_v, best_moves


def policy_targets(
    board: Board, player: Player, opponent: Player
) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Compute optimal policy and value targets.

    Returns:
        pi_star: [9] tensor with uniform distribution over optimal moves
        v_star: scalar tensor in {-1, 0, +1}
    """
    v, best_moves = minimax_value_and_moves(board, player, opponent)

    pi = torch.zeros(len(board.cells), dtype=torch.float32)
    if best_moves:
        pi[[r.index for r in best_moves]] = 1.0 / len(best_moves)

    return pi, torch.tensor(float(v), dtype=torch.float32)


def clear_cache():
    """Clear minimax cache (useful for memory management)."""
    _MINIMAX_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_MINIMAX_CACHE)


class MinimaxPlayer(Player):
    """
    Plays an optimal move.

    Without an rng the lowest-index optimal move is chosen, which keeps games
    reproducible; with one, optimal moves are sampled uniformly.
    """

    def __init__(self, marker: str, rng: Optional[np.random.Generator] = None):
        self.marker = validate_marker(marker)
        self.rng = rng

    def get_marker(self) -> str:
        return self.marker

    def get_move(self, opponent: Player, board: Board) -> CellReference:
        value, best_moves = minimax_value_and_moves(board, self, opponent)
        if not best_moves:
            raise NoMovesError(self)
        logger.debug(
            "Minimax %s: value %+d over %d optimal moves (cache %d)",
            self.marker, value, len(best_moves), cache_size(),
        )
        if self.rng is None:
            return best_moves[0]
        return best_moves[int(self.rng.integers(0, len(best_moves)))]
