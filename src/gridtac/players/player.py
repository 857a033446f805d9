"""
A participant in a tournament.
"""

from dataclasses import dataclass

from gridtac.core.types import Marker


@dataclass(eq=False)
class Player:
    name: str
    marker: Marker
    is_human: bool = False
    score: int = 0  # Rounds won in the current tournament

    def add_point(self) -> None:
        """Credit one won round."""
        self.score += 1

    def reset_score(self) -> None:
        self.score = 0

    def __str__(self) -> str:
        return f"{self.name} ({self.marker})"
