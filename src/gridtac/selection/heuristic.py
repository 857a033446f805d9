"""
Heuristic move selection for boards too large to search exhaustively.

Priority chain, first non-empty tier wins:
    1. offense - complete one of my own lines
    2. defense - block the first upcoming opponent that has a threat
    3. center  - an unmarked center cell
    4. any     - any unmarked cell
The move is drawn uniformly from the winning tier.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import List, Tuple

from gridtac.board.board import Board
from gridtac.players.player import Player
from gridtac.players.turn_order import TurnOrder


class Tier(Enum):
    OFFENSE = "offense"
    DEFENSE = "defense"
    CENTER = "center"
    ANY = "any"


def defense_keys(board: Board, player: Player, turn_order: TurnOrder) -> List[int]:
    """
    Threats of the first opponent (in upcoming turn order) that has any.

    Only that opponent's threats are returned, not the union of every
    opponent's.
    """
    for opponent in turn_order.players_after(player):
        threats = board.almost_winning(opponent.marker)
        if threats:
            return threats
    return []


def heuristic_choices(
    board: Board,
    player: Player,
    turn_order: TurnOrder,
) -> Tuple[Tier, List[int]]:
    """Return the first non-empty tier and its candidate cells."""
    offense = board.almost_winning(player.marker)
    if offense:
        return Tier.OFFENSE, offense

    defense = defense_keys(board, player, turn_order)
    if defense:
        return Tier.DEFENSE, defense

    center = board.unmarked_center_keys()
    if center:
        return Tier.CENTER, center

    return Tier.ANY, board.unmarked_keys()


def heuristic_move(
    board: Board,
    player: Player,
    turn_order: TurnOrder,
    rng: random.Random,
) -> int:
    _, choices = heuristic_choices(board, player, turn_order)
    if not choices:
        raise ValueError("No unmarked cells to choose from")
    return rng.choice(choices)
