"""
Core module - fundamental types and errors.
"""

from gridtac.core.errors import (
    GridtacError,
    ConfigurationError,
    InvalidDimensionError,
    InvalidCellError,
    CellOccupiedError,
    SearchBudgetExceeded,
    TournamentOverError,
)
from gridtac.core.types import (
    EMPTY,
    MINIMAX_WIN,
    MINIMAX_TIE,
    MINIMAX_LOSS,
    Strategy,
    TournamentState,
    RoundResult,
)

__all__ = [
    "EMPTY",
    "MINIMAX_WIN",
    "MINIMAX_TIE",
    "MINIMAX_LOSS",
    "Strategy",
    "TournamentState",
    "RoundResult",
    "GridtacError",
    "ConfigurationError",
    "InvalidDimensionError",
    "InvalidCellError",
    "CellOccupiedError",
    "SearchBudgetExceeded",
    "TournamentOverError",
]
