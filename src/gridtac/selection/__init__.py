"""
Selection module - move selection for computer-controlled players.

Provides the main entry point:
- select_move(): choose a cell with the configured Strategy

Both strategies share one contract: given the live board (never modified),
the player to move and the turn order, return a single unmarked cell key.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, TYPE_CHECKING

from gridtac.core.errors import SearchBudgetExceeded
from gridtac.core.types import Strategy
from gridtac.selection.exhaustive import (
    minimax_choices,
    minimax_move,
    minimax_value,
    minimax_values,
)
from gridtac.selection.heuristic import Tier, heuristic_choices, heuristic_move

if TYPE_CHECKING:
    from gridtac.board.board import Board
    from gridtac.players.player import Player
    from gridtac.players.turn_order import TurnOrder

logger = logging.getLogger(__name__)

DEFAULT_EXHAUSTIVE_MAX_DIMENSION = 3


def resolve_strategy(
    strategy: Strategy,
    dimension: int,
    exhaustive_max_dimension: int = DEFAULT_EXHAUSTIVE_MAX_DIMENSION,
) -> Strategy:
    """Turn AUTO into a concrete strategy for a board size."""
    if strategy is not Strategy.AUTO:
        return strategy
    if dimension <= exhaustive_max_dimension:
        return Strategy.EXHAUSTIVE
    return Strategy.HEURISTIC


def select_move(
    board: "Board",
    player: "Player",
    turn_order: "TurnOrder",
    strategy: Strategy = Strategy.AUTO,
    rng: Optional[random.Random] = None,
    memoize: bool = True,
    max_nodes: Optional[int] = None,
    exhaustive_max_dimension: int = DEFAULT_EXHAUSTIVE_MAX_DIMENSION,
) -> int:
    """
    Choose a cell for `player`.

    Args:
        board: Live board; only snapshots of it are marked
        player: Player to move
        turn_order: Rotation used for lookahead and defensive checks
        strategy: EXHAUSTIVE, HEURISTIC or AUTO (by board size)
        rng: Random source for tie-breaking; a fresh Random() if omitted
        memoize: Cache positions during an exhaustive search
        max_nodes: Node budget for exhaustive search; when exceeded the
                   heuristic strategy is used instead
        exhaustive_max_dimension: Largest dimension AUTO searches exhaustively

    Returns:
        Selected cell key
    """
    if rng is None:
        rng = random.Random()

    if not board.unmarked_keys():
        raise ValueError("No unmarked cells to choose from")
    if board.has_winner():
        raise ValueError("The board already has a winner")

    strategy = resolve_strategy(strategy, board.dimension, exhaustive_max_dimension)

    if strategy is Strategy.EXHAUSTIVE:
        try:
            return minimax_move(board, player, turn_order, rng, memoize, max_nodes)
        except SearchBudgetExceeded as e:
            logger.warning("%s for %s, falling back to heuristic", e, player)

    return heuristic_move(board, player, turn_order, rng)


__all__ = [
    "select_move",
    "resolve_strategy",
    "minimax_choices",
    "minimax_move",
    "minimax_value",
    "minimax_values",
    "heuristic_choices",
    "heuristic_move",
    "Tier",
    "DEFAULT_EXHAUSTIVE_MAX_DIMENSION",
]
