"""
Tensor encodings of a board, the input format for learned players built
outside this package (the engine itself never consumes them).

Token encoding (perspective):
- 0: empty square
- 1: own piece
- 2: opponent piece
"""

import torch

from .board import Board
from .player import Player


def board_to_tokens(board: Board, perspective: Player) -> torch.LongTensor:
    """
    Convert board to perspective-relative tokens.

    Args:
        board: Board to encode
        perspective: Player whose pieces encode as 1

    Returns:
        [9] LongTensor with tokens in {0, 1, 2}
    """
    own = perspective.get_marker()
    toks = []
    for cell in board.cells:
        if cell.occupant is None:
            toks.append(0)    # empty
        elif cell.marker == own:
            toks.append(1)    # self
        else:
            toks.append(2)    # opponent
    return torch.tensor(toks, dtype=torch.long)


def legal_move_mask(board: Board) -> torch.BoolTensor:
    """Return [9] boolean mask of empty cells."""
    mask = torch.zeros(len(board.cells), dtype=torch.bool)
    for i, cell in enumerate(board.cells):
        if cell.occupant is None:
            mask[i] = True
    return mask
