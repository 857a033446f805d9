"""
Exhaustive move selection (minimax).

Every non-maximizing turn is treated as a single adversary minimizing the
maximizer's value, however many players rotate through the turn order. Leaf
values are +1 / 0 / -1 from the maximizer's fixed point of view.

Hypothetical futures are explored on Board snapshots; the board passed in
is never touched.

The value of a position only depends on the cells and on who moves next,
so a per-call transposition dict can be enabled (memoize=True) without
changing any result. Without it a 3x3 search from an empty board visits
roughly half a million nodes.
"""

from __future__ import annotations

import logging
import random
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from gridtac.board.board import Board
from gridtac.core.errors import SearchBudgetExceeded
from gridtac.core.types import MINIMAX_LOSS, MINIMAX_TIE, MINIMAX_WIN
from gridtac.players.player import Player
from gridtac.players.turn_order import TurnOrder

logger = logging.getLogger(__name__)


def terminal_value(board: Board, maximizer: Player) -> Optional[int]:
    """Leaf value of a finished board, or None while play can continue."""
    winner = board.winning_marker()
    if winner is not None:
        return MINIMAX_WIN if winner == maximizer.marker else MINIMAX_LOSS
    if board.is_full():
        return MINIMAX_TIE
    return None


class _Search:
    """State of one search call: fixed maximizer, node counter, cache."""

    __slots__ = ("maximizer", "turn_order", "memo", "max_nodes", "nodes")

    def __init__(
        self,
        maximizer: Player,
        turn_order: TurnOrder,
        memoize: bool,
        max_nodes: Optional[int],
    ):
        self.maximizer = maximizer
        self.turn_order = turn_order
        self.memo: Optional[Dict[Tuple, int]] = {} if memoize else None
        self.max_nodes = max_nodes
        self.nodes = 0

    def value(self, board: Board, mover: Player) -> int:
        self.nodes += 1
        if self.max_nodes is not None and self.nodes > self.max_nodes:
            raise SearchBudgetExceeded(self.max_nodes)

        key = None
        if self.memo is not None:
            key = (board.cells_key(), self.turn_order.index(mover))
            cached = self.memo.get(key)
            if cached is not None:
                return cached

        result = terminal_value(board, self.maximizer)
        if result is None:
            following = self.turn_order.next_player(mover)
            values = [
                self.value(_after_move(board, k, mover), following)
                for k in board.unmarked_keys()
            ]
            result = max(values) if mover is self.maximizer else min(values)

        if key is not None:
            self.memo[key] = result
        return result


def _after_move(board: Board, key: int, player: Player) -> Board:
    hypothetical = board.snapshot()
    hypothetical.mark(key, player.marker)
    return hypothetical


def minimax_value(
    board: Board,
    mover: Player,
    maximizer: Player,
    turn_order: TurnOrder,
    memoize: bool = True,
    max_nodes: Optional[int] = None,
) -> int:
    """
    Value of `board` for `maximizer` with `mover` to play.

    A board that is already won or full returns its leaf value without
    any recursion.
    """
    return _Search(maximizer, turn_order, memoize, max_nodes).value(board, mover)


def minimax_values(
    board: Board,
    player: Player,
    turn_order: TurnOrder,
    memoize: bool = True,
    max_nodes: Optional[int] = None,
) -> Dict[int, int]:
    """
    Value of every unmarked cell as `player`'s next move.

    Args:
        board: Current board (not modified)
        player: Player about to move; the maximizer for the whole search
        turn_order: Rotation used to decide who moves after each hypothetical
        memoize: Cache values by (cells, player to move) during this call
        max_nodes: Raise SearchBudgetExceeded after visiting this many nodes

    Returns:
        Dict mapping cell key to its minimax value
    """
    search = _Search(player, turn_order, memoize, max_nodes)
    following = turn_order.next_player(player)

    values = {
        k: search.value(_after_move(board, k, player), following)
        for k in board.unmarked_keys()
    }
    logger.debug(
        "minimax for %s: %d candidates, %d nodes visited",
        player, len(values), search.nodes,
    )
    return values


def minimax_choices(
    board: Board,
    player: Player,
    turn_order: TurnOrder,
    memoize: bool = True,
    max_nodes: Optional[int] = None,
) -> List[int]:
    """All cells attaining the best minimax value, in key order."""
    values = minimax_values(board, player, turn_order, memoize, max_nodes)
    if not values:
        return []

    by_value: Dict[int, List[int]] = defaultdict(list)
    for key, value in values.items():
        by_value[value].append(key)
    return by_value[max(by_value)]


def minimax_move(
    board: Board,
    player: Player,
    turn_order: TurnOrder,
    rng: random.Random,
    memoize: bool = True,
    max_nodes: Optional[int] = None,
) -> int:
    """Uniformly random cell among the best minimax choices."""
    choices = minimax_choices(board, player, turn_order, memoize, max_nodes)
    if not choices:
        raise ValueError("No unmarked cells to choose from")
    return rng.choice(choices)
