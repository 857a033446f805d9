"""
Shared test fixtures for gridtac tests.

Design principles:
- Seeded randomness everywhere, no ambient global state
- Scripted input/output instead of a real terminal
- Minimal, focused fixtures
"""

import random
from typing import Callable, Iterable, List

import pytest

from gridtac.board.board import Board
from gridtac.players.player import Player
from gridtac.players.turn_order import TurnOrder


# =============================================================================
# Helpers
# =============================================================================

class ScriptedIO:
    """Feeds canned answers to `read` and records everything written."""

    def __init__(self, answers: Iterable[str]):
        self._answers = iter(answers)
        self.output: List[str] = []

    def read(self) -> str:
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def write(self, message: str) -> None:
        self.output.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty 3x3 board."""
    return Board(3)


@pytest.fixture
def board4() -> Board:
    """Empty 4x4 board."""
    return Board(4)


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def x_player() -> Player:
    return Player("Xavier", "X")


@pytest.fixture
def o_player() -> Player:
    return Player("Olga", "O")


@pytest.fixture
def two_players(x_player: Player, o_player: Player) -> TurnOrder:
    return TurnOrder([x_player, o_player])


@pytest.fixture
def three_players() -> TurnOrder:
    return TurnOrder([Player("A", "A"), Player("B", "B"), Player("C", "C")])


# =============================================================================
# Scripted Input Fixtures
# =============================================================================

@pytest.fixture
def scripted() -> Callable[[Iterable[str]], ScriptedIO]:
    """Factory for ScriptedIO sessions."""
    return ScriptedIO


@pytest.fixture
def scripted_moves() -> Callable[[Iterable[str]], Callable]:
    """Factory for human move providers replaying fixed keys."""
    def make(keys: Iterable[str]):
        answers = iter(keys)
        calls = []

        def provide(choices, message):
            calls.append((list(choices), message))
            return next(answers)

        provide.calls = calls
        return provide
    return make


@pytest.fixture
def play() -> Callable[[Board, Iterable], Board]:
    """Apply (marker, key) pairs to a board, in order."""
    def apply(board: Board, moves: Iterable) -> Board:
        for marker, key in moves:
            board.mark(key, marker)
        return board
    return apply
