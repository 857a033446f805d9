"""
Public API for playing gridtac tournaments.

Usage:
    from gridtac import Config, create_tournament

    tournament = create_tournament(Config(dimension=3, num_humans=0, num_computers=2))
    winner = tournament.play()
"""

from __future__ import annotations

import logging
import random
from typing import Optional, TYPE_CHECKING

from gridtac.core.types import TournamentState
from gridtac.interaction.prompts import (
    Reader,
    Writer,
    human_move_provider,
    input_yes_no,
    joinor,
    prompt,
)
from gridtac.interaction.render import draw_board, players_summary, score_lines
from gridtac.interaction.setup import input_config, input_players
from gridtac.utils.config import Config
from gridtac.utils.factory import create_players, create_tournament

if TYPE_CHECKING:
    from gridtac.players.player import Player
    from gridtac.tournament.tournament import Tournament

logger = logging.getLogger(__name__)


def _show_board(tournament: "Tournament", write: Writer) -> None:
    for line in players_summary(tournament):
        prompt(line, write)
    write("")
    write(draw_board(tournament.board))
    write("")


def _show_round_result(tournament: "Tournament", write: Writer) -> None:
    result = tournament.results[-1]
    _show_board(tournament, write)
    prompt(f"{result.winner} won!" if result.winner else "It's a tie!", write)
    for line in score_lines(tournament):
        prompt(line, write)


def play_tournament(
    tournament: "Tournament",
    read: Reader = input,
    write: Writer = print,
) -> "Player":
    """
    Drive one tournament in the terminal until someone reaches the limit.

    Human moves go through the tournament's own human_move_provider; this
    loop only shows the board, announces results and pauses between rounds.
    """
    while True:
        _show_board(tournament, write)
        while True:
            if tournament.is_human_turn():
                upcoming = [str(p) for p in tournament.players_after_current()]
                prompt(f"next players: {joinor(upcoming, ', ', 'then')}", write)
            tournament.play_turn()
            if tournament.state is not TournamentState.ROUND_IN_PROGRESS:
                break
            if tournament.is_human_turn():
                _show_board(tournament, write)

        _show_round_result(tournament, write)
        if tournament.is_over():
            break

        prompt("Press enter to play the next round", write)
        read()
        tournament.next_round()

    winner = tournament.tournament_winner()
    prompt(f"{winner} won the tournament!", write)
    return winner


def setup_tournament(
    config: Config,
    read: Reader = input,
    write: Writer = print,
    rng: Optional[random.Random] = None,
) -> "Tournament":
    """
    Build a tournament, asking whether to keep the default names and markers.

    On "n" every player is asked for a name and every human for a marker.
    """
    if rng is None:
        rng = random.Random(config.seed)

    humans, computers = create_players(config.num_humans, config.num_computers, rng)
    if input_yes_no("Do you want to use default names and markers?", read, write) == "n":
        humans, computers = input_players(humans, computers, rng, read, write)

    return create_tournament(
        config,
        human_move_provider=human_move_provider(read, write),
        rng=rng,
        players=(humans, computers),
    )


def play_interactive(
    config: Config,
    read: Reader = input,
    write: Writer = print,
    rng: Optional[random.Random] = None,
    ask_setup: bool = False,
) -> None:
    """
    Welcome, setup, tournaments until the user stops, goodbye.

    With `ask_setup`, board size, player counts and starting order are
    asked for instead of taken from `config`.
    """
    prompt("Welcome to Tic Tac Toe", write)
    write("")
    try:
        if ask_setup:
            config = input_config(config, read, write)
        tournament = setup_tournament(config, read, write, rng)

        while True:
            play_tournament(tournament, read, write)
            if input_yes_no("Would you like to play again?", read, write) != "y":
                break
            tournament.reset_tournament()
            prompt("Let's play again!", write)
            write("")
    except (KeyboardInterrupt, EOFError):
        write("")
        logger.info("Interrupted - leaving the game")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    prompt("Thanks for playing Tic Tac Toe! Goodbye!", write)


__all__ = [
    "play_tournament",
    "setup_tournament",
    "play_interactive",
    "create_tournament",
    "Config",
]
