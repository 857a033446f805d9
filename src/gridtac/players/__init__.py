"""
Players module - participants and their rotating turn order.
"""

from gridtac.players.player import Player
from gridtac.players.turn_order import TurnOrder

__all__ = [
    "Player",
    "TurnOrder",
]
