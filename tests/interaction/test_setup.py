"""
Tests for gridtac.interaction.setup

Tests custom names, markers and the interactive configuration questions.
"""

import random

from gridtac.core.types import Strategy
from gridtac.interaction.setup import input_config, input_marker, input_name, input_players
from gridtac.players.player import Player
from gridtac.utils.config import Config


class TestNamesAndMarkers:

    def test_name_rejects_taken(self, scripted):
        io = scripted(["Ada", "Bob"])
        assert input_name("Human 2", ["Ada"], io.read, io.write) == "Bob"
        assert io.output == [
            "=> Choose a name for Human 2",
            "=> Sorry, the name is already taken",
            "=> Choose a name for Human 2",
        ]

    def test_marker_must_be_one_character(self, scripted):
        io = scripted(["XY", " ", "Z"])
        assert input_marker("Ada", [], io.read, io.write) == "Z"
        assert io.output.count("=> Sorry, invalid input.") == 2

    def test_marker_rejects_taken(self, scripted):
        io = scripted(["X", "O"])
        assert input_marker("Bob", ["X"], io.read, io.write) == "O"
        assert "=> Sorry, the marker is already taken" in io.output


class TestInputPlayers:
    """input_players() builds fresh players."""

    def test_humans_choose_computers_draw(self, scripted):
        humans = [Player("Human 1", "X", is_human=True)]
        computers = [Player("Computer 1", "O")]
        io = scripted(["Ada", "O", "Ada", "Hal"])

        new_humans, new_computers = input_players(
            humans, computers, random.Random(0), io.read, io.write
        )

        assert [str(p) for p in new_humans] == ["Ada (O)"]
        assert new_humans[0].is_human
        # the only classic marker left after the human took O
        assert [str(p) for p in new_computers] == ["Hal (X)"]
        assert not new_computers[0].is_human
        assert "=> Sorry, the name is already taken" in io.output

    def test_prompts_in_order(self, scripted):
        humans = [Player("Human 1", "X", is_human=True), Player("Human 2", "O", is_human=True)]
        io = scripted(["Ada", "A", "Bob", "B"])
        input_players(humans, [], random.Random(0), io.read, io.write)
        assert io.output == [
            "=> Choose a name for Human 1",
            "=> Choose a marker for Ada",
            "=> Choose a name for Human 2",
            "=> Choose a marker for Bob",
        ]

    def test_scores_start_at_zero(self, scripted):
        human = Player("Human 1", "X", is_human=True)
        human.add_point()
        io = scripted(["Ada", "A"])
        (ada,), _ = input_players([human], [], random.Random(0), io.read, io.write)
        assert ada.score == 0


class TestInputConfig:
    """input_config() asks for size, players and order."""

    def test_answers_and_base_settings(self, scripted):
        base = Config(score_limit=5, strategy="heuristic", seed=3, max_search_nodes=100)
        io = scripted(["0", "4", "1", "0", "0", "3", "r"])

        config = input_config(base, io.read, io.write)

        assert config.dimension == 4
        assert (config.num_humans, config.num_computers) == (0, 3)
        assert config.order == "random"
        assert config.score_limit == 5
        assert config.strategy is Strategy.HEURISTIC
        assert config.seed == 3
        assert config.max_search_nodes == 100
        assert io.output.count("=> Sorry, invalid input.") == 1
        assert io.output.count("=> Sorry, at least two players are needed") == 1
