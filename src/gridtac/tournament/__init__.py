"""
Tournament module - rounds, scoring and turn rotation.
"""

from gridtac.tournament.tournament import HumanMoveProvider, Tournament

__all__ = [
    "HumanMoveProvider",
    "Tournament",
]
