"""
Tests for gridtac.selection.heuristic

Tests the offense -> defense -> center -> any priority chain.
"""

import random

import pytest

from gridtac.board.board import Board
from gridtac.players.player import Player
from gridtac.players.turn_order import TurnOrder
from gridtac.selection.heuristic import Tier, defense_keys, heuristic_choices, heuristic_move


class TestOffense:
    """Completing my own line comes first."""

    def test_completes_line(self, board: Board, play, x_player: Player, two_players: TurnOrder):
        play(board, [("X", 0), ("O", 4), ("X", 1)])
        assert heuristic_choices(board, x_player, two_players) == (Tier.OFFENSE, [2])

    def test_offense_beats_defense(
        self, board: Board, play, x_player: Player, two_players: TurnOrder
    ):
        play(board, [("X", 0), ("O", 3), ("X", 1), ("O", 4)])
        assert heuristic_choices(board, x_player, two_players) == (Tier.OFFENSE, [2])

    def test_move_is_completing_cell(
        self, board: Board, play, x_player: Player, two_players: TurnOrder
    ):
        play(board, [("X", 0), ("O", 4), ("X", 1)])
        for seed in range(5):
            assert heuristic_move(board, x_player, two_players, random.Random(seed)) == 2


class TestDefense:
    """Blocking upcoming opponents."""

    def test_blocks_opponent(self, board: Board, play, x_player: Player, two_players: TurnOrder):
        play(board, [("X", 0), ("O", 3), ("X", 8), ("O", 4)])
        assert heuristic_choices(board, x_player, two_players) == (Tier.DEFENSE, [5])

    def test_first_threatening_opponent_only(
        self, board: Board, play, three_players: TurnOrder
    ):
        """B plays before C, so only B's threat is blocked."""
        a, b, c = three_players
        play(board, [("A", 4), ("B", 0), ("C", 6), ("B", 1), ("C", 7)])
        assert defense_keys(board, a, three_players) == [2]
        assert heuristic_choices(board, a, three_players) == (Tier.DEFENSE, [2])

    def test_wraps_to_earlier_players(self, board: Board, play, three_players: TurnOrder):
        """C looks at A first, then B."""
        a, b, c = three_players
        play(board, [("A", 3), ("A", 5), ("B", 0), ("B", 1), ("C", 8)])
        assert defense_keys(board, c, three_players) == [4]

    def test_later_opponent_when_first_has_none(
        self, board: Board, play, three_players: TurnOrder
    ):
        a, b, c = three_players
        play(board, [("A", 4), ("B", 0), ("C", 6), ("C", 7)])
        assert heuristic_choices(board, a, three_players) == (Tier.DEFENSE, [8])


class TestCenterAndAny:
    """Fallback tiers."""

    def test_center_on_empty_board(self, board: Board, x_player: Player, two_players: TurnOrder):
        assert heuristic_choices(board, x_player, two_players) == (Tier.CENTER, [4])

    def test_center_4x4(self, board4: Board, x_player: Player, two_players: TurnOrder):
        tier, keys = heuristic_choices(board4, x_player, two_players)
        assert tier is Tier.CENTER
        assert keys == [5, 6, 9, 10]

    def test_any_cell_when_nothing_else(
        self, board: Board, x_player: Player, o_player: Player, two_players: TurnOrder
    ):
        board.mark(4, "X")
        tier, keys = heuristic_choices(board, o_player, two_players)
        assert tier is Tier.ANY
        assert keys == [0, 1, 2, 3, 5, 6, 7, 8]

    def test_random_within_tier(self, board4: Board, x_player: Player, two_players: TurnOrder):
        picks = {
            heuristic_move(board4, x_player, two_players, random.Random(seed))
            for seed in range(30)
        }
        assert picks <= {5, 6, 9, 10}
        assert len(picks) > 1

    def test_full_board_raises(self, board: Board, x_player: Player, two_players: TurnOrder):
        for key in board.keys:
            board.mark(key, "X" if key % 2 else "O")
        with pytest.raises(ValueError):
            heuristic_move(board, x_player, two_players, random.Random(0))
