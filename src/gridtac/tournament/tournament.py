"""
Tournament - rounds of play until a player reaches the score limit.

State machine:

    SETTING_UP -> ROUND_IN_PROGRESS -> ROUND_COMPLETE -> ROUND_IN_PROGRESS ...
                                   |
                                   +-> TOURNAMENT_COMPLETE

The turn pointer advances one slot per move. The starting player advances
one slot per round, counted from the previous round's starter, regardless
of who was about to move when the round ended.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

from gridtac.core.errors import ConfigurationError, TournamentOverError
from gridtac.core.types import RoundResult, TournamentState
from gridtac.selection import select_move

if TYPE_CHECKING:
    from gridtac.board.board import Board
    from gridtac.players.player import Player
    from gridtac.players.turn_order import TurnOrder
    from gridtac.utils.config import Config

logger = logging.getLogger(__name__)

# (unmarked keys as strings, prompt) -> chosen key as a string
HumanMoveProvider = Callable[[Sequence[str], str], str]


class Tournament:
    """
    Orchestrates rounds on one board for a fixed turn order.

    Human players' moves come from `human_move_provider`; everyone else's
    come from the search engine with the configured strategy.
    """

    def __init__(
        self,
        board: "Board",
        turn_order: "TurnOrder",
        config: Optional["Config"] = None,
        human_move_provider: Optional[HumanMoveProvider] = None,
        rng: Optional[random.Random] = None,
        on_round_end: Optional[Callable[[RoundResult], None]] = None,
    ):
        if config is None:
            from gridtac.utils.config import DEFAULT_CONFIG
            config = DEFAULT_CONFIG

        if human_move_provider is None and any(p.is_human for p in turn_order):
            raise ConfigurationError("Human players need a human_move_provider")

        self.board = board
        self.turn_order = turn_order
        self.config = config
        self.human_move_provider = human_move_provider
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.on_round_end = on_round_end

        self.state = TournamentState.SETTING_UP
        self.first_player: "Player" = turn_order.first
        self._current: "Player" = self.first_player
        self._moves_this_round = 0
        self.results: List[RoundResult] = []

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def current_player(self) -> "Player":
        return self._current

    def is_human_turn(self) -> bool:
        return self._current.is_human

    def players_after_current(self) -> List["Player"]:
        """Everyone else, in the order they play after the current player."""
        return self.turn_order.players_after(self._current)

    def scores_by_player(self) -> Dict[str, int]:
        """Player name -> rounds won, in turn order."""
        return {p.name: p.score for p in self.turn_order}

    def tournament_winner(self) -> Optional["Player"]:
        """First player, in turn order, whose score reached the limit."""
        for player in self.turn_order:
            if player.score >= self.config.score_limit:
                return player
        return None

    def is_over(self) -> bool:
        return self.state is TournamentState.TOURNAMENT_COMPLETE

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def _choose_move(self, player: "Player") -> int:
        if player.is_human:
            choices = [str(k) for k in self.board.unmarked_keys()]
            answer = self.human_move_provider(choices, f"{player}, choose a square:")
            return int(answer)

        return select_move(
            self.board,
            player,
            self.turn_order,
            strategy=self.config.strategy,
            rng=self.rng,
            memoize=self.config.memoize,
            max_nodes=self.config.max_search_nodes,
            exhaustive_max_dimension=self.config.exhaustive_max_dimension,
        )

    def play_turn(self) -> int:
        """
        Resolve and apply the current player's move.

        Returns:
            The cell key that was played.

        Raises:
            TournamentOverError: the tournament already has a winner.
            RuntimeError: the round is over and next_round() was not called.
            CellOccupiedError: a human move named a marked cell.
        """
        if self.state is TournamentState.TOURNAMENT_COMPLETE:
            raise TournamentOverError("The tournament is over")
        if self.state is TournamentState.ROUND_COMPLETE:
            raise RuntimeError("The round is over; call next_round() first")

        self.state = TournamentState.ROUND_IN_PROGRESS
        player = self._current
        key = self._choose_move(player)
        self.board.place(key, player.marker)
        self._moves_this_round += 1
        logger.debug("%s played %d", player, key)

        self._current = self.turn_order.next_player(player)

        if self.board.has_winner() or self.board.is_full():
            self._finish_round()
        return key

    def _finish_round(self) -> None:
        marker = self.board.winning_marker()
        winner = self.turn_order.find_by_marker(marker) if marker is not None else None
        if winner is not None:
            winner.add_point()

        result = RoundResult(winner, marker, self._moves_this_round)
        self.results.append(result)

        logger.info(
            "Round %d: %s after %d moves",
            len(self.results), f"{winner} won" if winner else "tie", result.moves_played,
        )

        champion = self.tournament_winner()
        if champion is not None:
            self.state = TournamentState.TOURNAMENT_COMPLETE
            logger.info("%s won the tournament", champion)
        else:
            self.state = TournamentState.ROUND_COMPLETE

        if self.on_round_end is not None:
            self.on_round_end(result)

    def play_round(self) -> RoundResult:
        """Play turns until the board has a winner or is full."""
        played = len(self.results)
        while len(self.results) == played:
            self.play_turn()
        return self.results[-1]

    def play(self) -> "Player":
        """Play rounds until someone reaches the score limit."""
        if self.state is TournamentState.ROUND_COMPLETE:
            self.next_round()

        while not self.is_over():
            self.play_round()
            if not self.is_over():
                self.next_round()
        return self.tournament_winner()

    # ------------------------------------------------------------------
    # Between rounds
    # ------------------------------------------------------------------

    def _rotate_start(self) -> None:
        self.board.reset()
        self.first_player = self.turn_order.next_player(self.first_player)
        self._current = self.first_player
        self._moves_this_round = 0

    def next_round(self) -> None:
        """Clear the board and hand the first move to the next starter."""
        if self.state is TournamentState.TOURNAMENT_COMPLETE:
            raise TournamentOverError("The tournament is over; use reset_tournament()")
        if self.state is not TournamentState.ROUND_COMPLETE:
            raise RuntimeError("The current round is not finished")

        self._rotate_start()
        self.state = TournamentState.ROUND_IN_PROGRESS

    def reset_tournament(self) -> None:
        """Start over: next starter, empty board, every score back to zero."""
        self._rotate_start()
        for player in self.turn_order:
            player.reset_score()
        self.results.clear()
        self.state = TournamentState.SETTING_UP
