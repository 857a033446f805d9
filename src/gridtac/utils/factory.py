"""
Factory functions for creating boards, players and tournaments.
"""

from __future__ import annotations

import random
import string
from typing import Collection, List, Optional, Tuple, TYPE_CHECKING

from gridtac.board.board import Board
from gridtac.players.player import Player
from gridtac.players.turn_order import TurnOrder
from gridtac.utils.config import CLASSIC_MARKERS, Config

if TYPE_CHECKING:
    from gridtac.tournament.tournament import HumanMoveProvider, Tournament


def _next_label(label: str) -> str:
    """Successor of an uppercase label: 'AA' -> 'AB', 'AZ' -> 'BA', 'ZZ' -> 'AAA'."""
    chars = list(label)
    i = len(chars) - 1
    while i >= 0:
        if chars[i] != "Z":
            chars[i] = chr(ord(chars[i]) + 1)
            return "".join(chars)
        chars[i] = "A"
        i -= 1
    return "A" + "".join(chars)


def random_new_marker(taken: Collection[str], rng: random.Random) -> str:
    """
    Pick a marker nobody uses yet.

    Classic markers (X, O) first, then a random uppercase letter, then the
    first free two-letter label (AA, AB, ...).
    """
    classic = [m for m in CLASSIC_MARKERS if m not in taken]
    if classic:
        return rng.choice(classic)

    letters = [c for c in string.ascii_uppercase if c not in taken]
    if letters:
        return rng.choice(letters)

    label = "AA"
    while label in taken:
        label = _next_label(label)
    return label


def create_players(
    num_humans: int,
    num_computers: int,
    rng: random.Random,
) -> Tuple[List[Player], List[Player]]:
    """
    Create players with default names and markers.

    Returns:
        (humans, computers)
    """
    taken: List[str] = []

    def make(name: str, is_human: bool) -> Player:
        marker = random_new_marker(taken, rng)
        taken.append(marker)
        return Player(name, marker, is_human=is_human)

    humans = [make(f"Human {i}", True) for i in range(1, num_humans + 1)]
    computers = [make(f"Computer {i}", False) for i in range(1, num_computers + 1)]
    return humans, computers


def order_players(
    humans: List[Player],
    computers: List[Player],
    order: str,
    rng: random.Random,
) -> TurnOrder:
    """Build the turn order: humans first, computers first or shuffled."""
    if order == "humans":
        players = humans + computers
    elif order == "computers":
        players = computers + humans
    elif order == "random":
        players = humans + computers
        rng.shuffle(players)
    else:
        raise ValueError(f"Unknown order: {order}")
    return TurnOrder(players)


def create_board(config: Config) -> Board:
    return Board(config.dimension)


def create_tournament(
    config: Config,
    human_move_provider: Optional["HumanMoveProvider"] = None,
    rng: Optional[random.Random] = None,
    players: Optional[Tuple[List[Player], List[Player]]] = None,
) -> "Tournament":
    """
    Create a ready-to-play tournament from a configuration.

    Args:
        config: Board size, players, strategy and score limit
        human_move_provider: Callable asked for every human move
        rng: Random source; seeded from config.seed if omitted
        players: (humans, computers) to use instead of default-named ones

    Returns:
        Tournament in the SETTING_UP state
    """
    from gridtac.tournament.tournament import Tournament

    if rng is None:
        rng = random.Random(config.seed)

    if players is None:
        players = create_players(config.num_humans, config.num_computers, rng)
    humans, computers = players
    turn_order = order_players(humans, computers, config.order, rng)

    return Tournament(
        create_board(config),
        turn_order,
        config,
        human_move_provider=human_move_provider,
        rng=rng,
    )
