"""
Interactive setup: board size, player counts, starting order, and custom
names and markers.

Computers keep a randomly allocated marker, drawn after every human has
chosen one so it never clashes.
"""

from __future__ import annotations

import random
from typing import Collection, List, Tuple

from gridtac.interaction.prompts import (
    REGEXP_MARKER,
    REGEXP_NAME,
    Reader,
    Writer,
    input_choice,
    input_matching,
    input_positive_int,
    prompt,
)
from gridtac.players.player import Player
from gridtac.utils.config import DEFAULT_CONFIG, PLAYER_ORDERS, Config
from gridtac.utils.factory import random_new_marker


def input_name(
    current_name: str,
    taken: Collection[str],
    read: Reader = input,
    write: Writer = print,
) -> str:
    while True:
        name = input_matching(REGEXP_NAME, f"Choose a name for {current_name}", read, write)
        if name not in taken:
            return name
        prompt("Sorry, the name is already taken", write)


def input_marker(
    name: str,
    taken: Collection[str],
    read: Reader = input,
    write: Writer = print,
) -> str:
    while True:
        marker = input_matching(REGEXP_MARKER, f"Choose a marker for {name}", read, write)
        if marker not in taken:
            return marker
        prompt("Sorry, the marker is already taken", write)


def input_players(
    humans: List[Player],
    computers: List[Player],
    rng: random.Random,
    read: Reader = input,
    write: Writer = print,
) -> Tuple[List[Player], List[Player]]:
    """
    Replace default players with named ones.

    Humans are asked for a name then a marker, in order; computers are asked
    for a name only. The returned players have zero scores.

    Returns:
        (humans, computers)
    """
    names: List[str] = []
    markers: List[str] = []

    custom_humans = []
    for human in humans:
        name = input_name(human.name, names, read, write)
        names.append(name)
        marker = input_marker(name, markers, read, write)
        markers.append(marker)
        custom_humans.append(Player(name, marker, is_human=True))

    custom_computers = []
    for computer in computers:
        name = input_name(computer.name, names, read, write)
        names.append(name)
        marker = random_new_marker(markers, rng)
        markers.append(marker)
        custom_computers.append(Player(name, marker))

    return custom_humans, custom_computers


def input_config(
    base: Config = DEFAULT_CONFIG,
    read: Reader = input,
    write: Writer = print,
) -> Config:
    """
    Ask for board size, player counts and starting order.

    Everything else (strategy, score limit, search settings, seed) is
    taken from `base`.
    """
    dimension = input_positive_int(
        "How many squares do you want per side?", strict=True, read=read, write=write
    )

    while True:
        num_humans = input_positive_int("Choose the number of humans", read=read, write=write)
        num_computers = input_positive_int("Choose the number of computers", read=read, write=write)
        if num_humans + num_computers > 1:
            break
        prompt("Sorry, at least two players are needed", write)

    order = input_choice(PLAYER_ORDERS, "Choose who goes first:", read=read, write=write)

    return Config(
        dimension=dimension,
        score_limit=base.score_limit,
        strategy=base.strategy,
        num_humans=num_humans,
        num_computers=num_computers,
        order=order,
        exhaustive_max_dimension=base.exhaustive_max_dimension,
        memoize=base.memoize,
        max_search_nodes=base.max_search_nodes,
        seed=base.seed,
    )
