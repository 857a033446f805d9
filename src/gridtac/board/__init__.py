"""
Board module - grid topology and marker state.
"""

from gridtac.board.topology import GridTopology, Line, topology_for
from gridtac.board.board import Board

__all__ = [
    "GridTopology",
    "Line",
    "topology_for",
    "Board",
]
