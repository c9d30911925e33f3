"""
Shared pytest fixtures for engine tests.

Player fixtures are function-scoped because scripted players consume their
moves.
"""

from typing import Callable

import pytest

from tictactoe.board import Board, board_from_string
from tictactoe.player import Player, ScriptedPlayer


@pytest.fixture
def player_x() -> Player:
    return ScriptedPlayer("X")


@pytest.fixture
def player_o() -> Player:
    return ScriptedPlayer("O")


@pytest.fixture
def make_board(player_x: Player, player_o: Player) -> Callable[[str], Board]:
    """Factory building boards from row-major marker text, '-' for empty."""

    def _make_board(text: str) -> Board:
        return board_from_string([player_x, player_o], text)

    return _make_board
