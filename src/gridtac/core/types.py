"""
Core types and constants shared by the board, search and tournament layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Hashable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from gridtac.players.player import Player


Marker = Hashable

# Marker held by every cell nobody has claimed (what an empty cell displays)
EMPTY: Marker = " "

# Leaf values, always from the maximizing player's point of view
MINIMAX_WIN = 1
MINIMAX_TIE = 0
MINIMAX_LOSS = -1


class Strategy(Enum):
    """How a computer-controlled slot chooses its cell."""
    AUTO = "auto"
    EXHAUSTIVE = "exhaustive"
    HEURISTIC = "heuristic"


class TournamentState(Enum):
    SETTING_UP = auto()
    ROUND_IN_PROGRESS = auto()
    ROUND_COMPLETE = auto()
    TOURNAMENT_COMPLETE = auto()


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a single round."""
    winner: Optional["Player"]
    winning_marker: Optional[Marker]
    moves_played: int

    @property
    def is_tie(self) -> bool:
        return self.winner is None
