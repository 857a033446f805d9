"""
TurnOrder - the fixed, rotating sequence of players.

The order itself never changes during a tournament; only the pointer to
whoever plays (or starts) moves, one slot at a time, wrapping after the
last player.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from gridtac.core.errors import ConfigurationError
from gridtac.core.types import EMPTY, Marker
from gridtac.players.player import Player


class TurnOrder:

    __slots__ = ("_players",)

    def __init__(self, players: Iterable[Player]):
        players = tuple(players)
        if not players:
            raise ConfigurationError("A turn order needs at least one player")

        markers = [p.marker for p in players]
        if EMPTY in markers:
            raise ConfigurationError(f"{EMPTY!r} is reserved for unmarked cells")
        if len(set(markers)) != len(markers):
            raise ConfigurationError(f"Player markers must be distinct, got {markers}")

        names = [p.name for p in players]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"Player names must be distinct, got {names}")

        self._players: Tuple[Player, ...] = players

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def first(self) -> Player:
        return self._players[0]

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def index(self, player: Player) -> int:
        """Slot of `player` (compared by identity)."""
        for i, p in enumerate(self._players):
            if p is player:
                return i
        raise ValueError(f"{player} is not in the turn order")

    def next_player(self, player: Player) -> Player:
        """Player in the slot after `player`, wrapping to the first slot."""
        return self._players[(self.index(player) + 1) % len(self._players)]

    def players_after(self, player: Player) -> List[Player]:
        """
        Every other player, in the order they will play after `player`.

        For [A, B, C]: players_after(B) == [C, A].
        """
        i = self.index(player)
        n = len(self._players)
        return [self._players[(i + step) % n] for step in range(1, n)]

    def find_by_marker(self, marker: Marker) -> Optional[Player]:
        for p in self._players:
            if p.marker == marker:
                return p
        return None

    def __repr__(self) -> str:
        return f"TurnOrder({', '.join(str(p) for p in self._players)})"
