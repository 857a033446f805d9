"""
Exception hierarchy.

Every error raised on purpose derives from GridtacError. Most also derive
from the built-in exception a caller would naturally expect (ValueError for
bad settings, KeyError for unknown cells) so generic handlers keep working.
"""


class GridtacError(Exception):
    """Base class for all gridtac errors."""


class ConfigurationError(GridtacError, ValueError):
    """Settings that cannot produce a playable game."""


class InvalidDimensionError(ConfigurationError):
    """Grid dimension below 1."""

    def __init__(self, dimension):
        super().__init__(f"Grid dimension must be >= 1, got {dimension!r}")
        self.dimension = dimension


class InvalidCellError(GridtacError, KeyError):
    """Cell key outside the board."""

    def __init__(self, key, first: int, last: int):
        super().__init__(f"Cell {key!r} is not on the board (valid: {first}-{last})")
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class CellOccupiedError(GridtacError, ValueError):
    """Move onto a cell that already holds a marker."""

    def __init__(self, key, marker):
        super().__init__(f"Cell {key} is occupied by {marker!r}")
        self.key = key
        self.marker = marker


class SearchBudgetExceeded(GridtacError):
    """Exhaustive search visited more nodes than allowed."""

    def __init__(self, limit: int):
        super().__init__(f"Search exceeded {limit} nodes")
        self.limit = limit


class TournamentOverError(GridtacError, RuntimeError):
    """Turn requested after the tournament already has a winner."""
