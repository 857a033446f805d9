"""
Plain-text rendering of the board and tournament status.

Each grid row takes three text lines (cell keys, markers, padding) with a
separator between rows:

    [0]  |[1]  |[2]
      X  |     |  O
         |     |
    -----+-----+-----
    ...
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from gridtac.interaction.prompts import joinor

if TYPE_CHECKING:
    from gridtac.board.board import Board
    from gridtac.tournament.tournament import Tournament


def cell_width(board: "Board") -> int:
    return len(str(len(board))) + 3


def draw_board(board: "Board") -> str:
    width = cell_width(board)
    n = board.dimension
    separator = "+".join(["-" * width] * n)

    out: List[str] = []
    for i, row in enumerate(board.topology.rows):
        out.append("|".join(f"[{k}]".ljust(width) for k in row))
        out.append("|".join(str(board[k]).center(width) for k in row))
        out.append("|".join([" " * width] * n))
        if i < n - 1:
            out.append(separator)
    return "\n".join(out)


def players_summary(tournament: "Tournament") -> List[str]:
    humans = [str(p) for p in tournament.turn_order if p.is_human]
    computers = [str(p) for p in tournament.turn_order if not p.is_human]
    return [
        f"Humans: {joinor(humans, ', ', 'and') or 'none'}",
        f"Computers: {joinor(computers, ', ', 'and') or 'none'}",
    ]


def score_lines(tournament: "Tournament") -> List[str]:
    """One line per player, in turn order."""
    return [
        f"{p}: {p.score} point{'s' if p.score != 1 else ''}"
        for p in tournament.turn_order
    ]
