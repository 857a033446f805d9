"""
Command-line interface for terminal tic-tac-toe tournaments.
"""

import argparse
import logging

from gridtac.api import play_interactive
from gridtac.core.errors import ConfigurationError
from gridtac.utils.config import (
    Config,
    DEFAULT_DIMENSION,
    PLAYER_ORDERS,
    SCORE_LIMIT,
    STRATEGIES,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play generalized tic-tac-toe against humans and computers"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=DEFAULT_DIMENSION,
        help=f"Squares per side (default: {DEFAULT_DIMENSION})",
    )
    parser.add_argument(
        "--humans",
        type=int,
        default=1,
        help="Number of human players (default: 1)",
    )
    parser.add_argument(
        "--computers",
        type=int,
        default=1,
        help="Number of computer players (default: 1)",
    )
    parser.add_argument(
        "--strategy",
        choices=list(STRATEGIES.keys()),
        default="auto",
        help="Computer move selection (default: auto - exhaustive on small boards)",
    )
    parser.add_argument(
        "--score-limit",
        type=int,
        default=SCORE_LIMIT,
        help=f"Rounds needed to win the tournament (default: {SCORE_LIMIT})",
    )
    parser.add_argument(
        "--order",
        choices=PLAYER_ORDERS,
        default="humans",
        help="Who goes first (default: humans)",
    )
    parser.add_argument(
        "--max-search-nodes",
        type=int,
        default=None,
        help="Node budget for exhaustive search before falling back to the heuristic",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible computer play",
    )
    parser.add_argument(
        "--setup",
        action="store_true",
        help="Ask for board size, player counts and starting order at startup",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        dimension=args.size,
        score_limit=args.score_limit,
        strategy=args.strategy,
        num_humans=args.humans,
        num_computers=args.computers,
        order=args.order,
        max_search_nodes=args.max_search_nodes,
        seed=args.seed,
    )


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ConfigurationError as e:
        raise SystemExit(f"gridtac: {e}")

    play_interactive(config, ask_setup=args.setup)


if __name__ == "__main__":
    main()
