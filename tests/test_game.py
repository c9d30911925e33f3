"""Tests for the turn-alternating game loop."""

import logging

import pytest

from tictactoe.board import CellReference, format_board
from tictactoe.config import GameConfig
from tictactoe.errors import (
    CellIndexError,
    CellOccupiedError,
    InvalidMarkerError,
    InvalidMoveError,
    PlayerExhaustedError,
)
from tictactoe.minimax import MinimaxPlayer
from tictactoe.player import RandomPlayer, ScriptedPlayer
from tictactoe.rules import DRAW, PENDING, Win
from tictactoe.game import iter_turns, play_game


class TestPlayGame:
    """End-to-end games with scripted players."""

    def test_plays_a_full_game_to_a_tie(self) -> None:
        player_one = ScriptedPlayer("X", [0, 8, 6, 5, 1])
        player_two = ScriptedPlayer("O", [4, 2, 3, 7])

        assert play_game(player_one, player_two) == DRAW
        assert player_one.remaining == 0
        assert player_two.remaining == 0

    def test_plays_a_game_to_a_row_win(self) -> None:
        player_one = ScriptedPlayer("X", [0, 1, 2])
        player_two = ScriptedPlayer("O", [3, 4])

        result = play_game(player_one, player_two)

        assert result == Win(player_one)
        assert result.player is player_one

    def test_second_player_can_win(self) -> None:
        player_one = ScriptedPlayer("X", [0, 1, 8])
        player_two = ScriptedPlayer("O", [3, 4, 5])

        assert play_game(player_one, player_two) == Win(player_two)

    def test_minimax_players_draw(self) -> None:
        assert play_game(MinimaxPlayer("X"), MinimaxPlayer("O")) == DRAW

    def test_minimax_never_loses_to_random(self) -> None:
        for seed in range(5):
            result = play_game(RandomPlayer("X", seed=seed), MinimaxPlayer("O"))
            assert result != Win(RandomPlayer("X"))

    def test_logs_result(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="tictactoe.game"):
            play_game(ScriptedPlayer("X", [0, 1, 2]), ScriptedPlayer("O", [3, 4]))
        assert "Game over after 5 turns" in caplog.text

    def test_logs_boards_when_configured(self, caplog) -> None:
        config = GameConfig(log_boards=True)
        with caplog.at_level(logging.DEBUG, logger="tictactoe.game"):
            play_game(ScriptedPlayer("X", [0, 1, 2]), ScriptedPlayer("O", [3, 4]), config)
        assert "Turn 1: X takes cell 0" in caplog.text
        assert "Board: X - - - - - - - -" in caplog.text
        assert "Board: X X X O O - - - -" in caplog.text

    def test_boards_not_logged_by_default(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="tictactoe.game"):
            play_game(ScriptedPlayer("X", [0, 1, 2]), ScriptedPlayer("O", [3, 4]))
        assert "Turn 5: X takes cell 2" in caplog.text
        assert "Board:" not in caplog.text


class TestIterTurns:
    """Tests for the turn record."""

    def test_players_alternate_starting_with_player_one(self) -> None:
        player_one = ScriptedPlayer("X", [0, 1, 2])
        player_two = ScriptedPlayer("O", [3, 4])

        turns = list(iter_turns(player_one, player_two))

        assert [t.number for t in turns] == [1, 2, 3, 4, 5]
        assert [t.player.get_marker() for t in turns] == ["X", "O", "X", "O", "X"]
        assert [t.reference for t in turns] == [CellReference(i) for i in [0, 3, 1, 4, 2]]
        assert [t.state for t in turns[:-1]] == [PENDING] * 4
        assert turns[-1].state == Win(player_one)

    def test_earlier_boards_are_unchanged(self) -> None:
        turns = list(iter_turns(ScriptedPlayer("X", [0, 1, 2]), ScriptedPlayer("O", [3, 4])))

        assert format_board(turns[0].board) == "X - - - - - - - -"
        assert format_board(turns[1].board) == "X - - O - - - - -"
        assert format_board(turns[-1].board) == "X X X O O - - - -"

    def test_players_with_same_marker_are_rejected(self) -> None:
        with pytest.raises(InvalidMarkerError):
            list(iter_turns(ScriptedPlayer("X", [0]), RandomPlayer("X", seed=0)))


class TestMoveValidation:
    """Tests for contract violations by players."""

    def test_occupied_cell_is_attributed_to_player(self) -> None:
        player_one = ScriptedPlayer("X", [4, 0])
        player_two = ScriptedPlayer("O", [4])

        with pytest.raises(InvalidMoveError) as exc_info:
            play_game(player_one, player_two)

        assert exc_info.value.player is player_two
        assert exc_info.value.reference == CellReference(4)
        assert "occupied by X" in exc_info.value.reason

    def test_rejected_move_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="tictactoe.game"):
            with pytest.raises(InvalidMoveError):
                play_game(ScriptedPlayer("X", [4]), ScriptedPlayer("O", [4]))
        assert "Rejected move from O" in caplog.text

    def test_out_of_range_is_attributed_to_player(self, player_o) -> None:
        class OffBoardPlayer(ScriptedPlayer):
            def get_move(self, opponent, board):
                return CellReference(9)

        player_one = OffBoardPlayer("X")
        with pytest.raises(InvalidMoveError) as exc_info:
            play_game(player_one, player_o)
        assert exc_info.value.player is player_one
        assert exc_info.value.reason == "outside the board"

    def test_off_board_script_is_attributed_to_player(self) -> None:
        player_one = ScriptedPlayer("X", [12])

        with pytest.raises(InvalidMoveError) as exc_info:
            play_game(player_one, ScriptedPlayer("O", [1]))

        assert exc_info.value.player is player_one
        assert exc_info.value.reference == CellReference(12)
        assert exc_info.value.reason == "outside the board"

    def test_unvalidated_strict_game_raises_board_errors(self) -> None:
        config = GameConfig(validate_moves=False)
        with pytest.raises(CellOccupiedError):
            play_game(ScriptedPlayer("X", [4]), ScriptedPlayer("O", [4]), config)

    def test_unvalidated_off_board_move_raises_index_error(self) -> None:
        class OffBoardPlayer(ScriptedPlayer):
            def get_move(self, opponent, board):
                return CellReference(-3)

        config = GameConfig(validate_moves=False)
        with pytest.raises(CellIndexError):
            play_game(OffBoardPlayer("X"), ScriptedPlayer("O"), config)

    def test_permissive_game_overwrites(self) -> None:
        config = GameConfig(validate_moves=False, strict_occupancy=False)
        player_one = ScriptedPlayer("X", [0, 8, 7])
        player_two = ScriptedPlayer("O", [0, 1, 2])

        turns = list(iter_turns(player_one, player_two, config))

        assert format_board(turns[1].board) == "O - - - - - - - -"
        assert turns[-1].state == Win(player_two)
        assert len(turns) == 6

    def test_exhausted_player_fails_loudly(self) -> None:
        player_one = ScriptedPlayer("X", [0])
        with pytest.raises(PlayerExhaustedError) as exc_info:
            play_game(player_one, ScriptedPlayer("O", [1]))
        assert exc_info.value.player is player_one
