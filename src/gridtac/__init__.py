"""
gridtac - generalized tic-tac-toe for the terminal.

An N x N board, any number of human and computer players taking turns in
a rotating order, and tournaments of rounds played to a score limit.
Computers choose moves by exhaustive minimax search on small boards and
by an offense/defense/center heuristic on larger ones.

Quick Start:
    from gridtac import Config, create_tournament

    config = Config(dimension=3, num_humans=0, num_computers=2, seed=7)
    tournament = create_tournament(config)
    winner = tournament.play()

Modules:
    core        - Marker sentinel, enums, errors
    board       - Grid topology and Board
    players     - Player and TurnOrder
    selection   - Exhaustive and heuristic move selection
    tournament  - Round/score state machine
    interaction - Terminal prompts and rendering
"""

from gridtac.api import play_tournament, play_interactive
from gridtac.board import Board, GridTopology
from gridtac.core import EMPTY, Strategy, TournamentState, RoundResult
from gridtac.players import Player, TurnOrder
from gridtac.selection import select_move
from gridtac.tournament import Tournament
from gridtac.utils.config import Config
from gridtac.utils.factory import create_tournament

__version__ = "1.0.0"

__all__ = [
    # Main API
    "create_tournament",
    "play_tournament",
    "play_interactive",
    "select_move",
    "Config",
    # Types
    "Board",
    "GridTopology",
    "Player",
    "TurnOrder",
    "Tournament",
    "RoundResult",
    "Strategy",
    "TournamentState",
    "EMPTY",
]
