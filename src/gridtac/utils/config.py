"""
Configuration and strategy registry.
"""

from typing import Optional

from gridtac.core.errors import ConfigurationError
from gridtac.core.types import Strategy
from gridtac.selection import DEFAULT_EXHAUSTIVE_MAX_DIMENSION, resolve_strategy


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

STRATEGIES = {strategy.value: strategy for strategy in Strategy}

# Who goes first in the turn order
PLAYER_ORDERS = ("humans", "computers", "random")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_DIMENSION = 3
SCORE_LIMIT = 3
CLASSIC_MARKERS = ("X", "O")


def _positive_int(name: str, value, minimum: int = 1) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigurationError(f"{name} must be an integer >= {minimum}, got {value!r}")
    return value


def parse_strategy(strategy) -> Strategy:
    """Accept a Strategy or its registry name."""
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return STRATEGIES[str(strategy).lower()]
    except KeyError:
        available = ", ".join(STRATEGIES)
        raise ConfigurationError(
            f"Unknown strategy: {strategy}. Available: {available}"
        ) from None


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        dimension: int = DEFAULT_DIMENSION,
        score_limit: int = SCORE_LIMIT,
        strategy="auto",
        num_humans: int = 1,
        num_computers: int = 1,
        order: str = "humans",
        exhaustive_max_dimension: int = DEFAULT_EXHAUSTIVE_MAX_DIMENSION,
        memoize: bool = True,
        max_search_nodes: Optional[int] = None,
        seed: Optional[int] = None,
    ):
        self.dimension = _positive_int("dimension", dimension)
        self.score_limit = _positive_int("score_limit", score_limit)
        self.strategy = parse_strategy(strategy)
        self.num_humans = _positive_int("num_humans", num_humans, minimum=0)
        self.num_computers = _positive_int("num_computers", num_computers, minimum=0)
        if self.num_humans + self.num_computers < 2:
            raise ConfigurationError("At least two players are needed")

        if order not in PLAYER_ORDERS:
            raise ConfigurationError(
                f"Unknown order: {order}. Available: {', '.join(PLAYER_ORDERS)}"
            )
        self.order = order

        self.exhaustive_max_dimension = _positive_int(
            "exhaustive_max_dimension", exhaustive_max_dimension
        )
        self.memoize = bool(memoize)
        if max_search_nodes is not None:
            max_search_nodes = _positive_int("max_search_nodes", max_search_nodes)
        self.max_search_nodes = max_search_nodes
        self.seed = seed

        # Derive dependent values
        self.resolved_strategy = resolve_strategy(
            self.strategy, self.dimension, self.exhaustive_max_dimension
        )

    @property
    def num_players(self) -> int:
        return self.num_humans + self.num_computers

    def __repr__(self) -> str:
        return (
            f"Config(dimension={self.dimension}, score_limit={self.score_limit}, "
            f"strategy={self.strategy.value}, players={self.num_humans}h+{self.num_computers}c)"
        )


# Default configuration
DEFAULT_CONFIG = Config()
