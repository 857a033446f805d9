"""
Interaction module - terminal prompts, player setup and rendering.
"""

from gridtac.interaction.prompts import (
    prompt,
    joinor,
    possible_choices,
    input_yes_no,
    input_matching,
    input_positive_int,
    input_choice,
    human_move_provider,
)
from gridtac.interaction.render import draw_board, players_summary, score_lines
from gridtac.interaction.setup import input_config, input_marker, input_name, input_players

__all__ = [
    "prompt",
    "joinor",
    "possible_choices",
    "input_yes_no",
    "input_matching",
    "input_positive_int",
    "input_choice",
    "human_move_provider",
    "draw_board",
    "players_summary",
    "score_lines",
    "input_config",
    "input_name",
    "input_marker",
    "input_players",
]
