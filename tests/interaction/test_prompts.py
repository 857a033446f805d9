"""
Tests for gridtac.interaction.prompts

Tests input validation loops with scripted input.
"""

import pytest

from gridtac.interaction.prompts import (
    human_move_provider,
    input_choice,
    input_matching,
    input_positive_int,
    input_yes_no,
    joinor,
    possible_choices,
    prompt,
    REGEXP_MARKER,
    REGEXP_NAME,
)


class TestJoinor:
    """joinor() sentence joining."""

    @pytest.mark.parametrize("items, expected", [
        ([], ""),
        ([1], "1"),
        ([1, 2], "1 or 2"),
        ([1, 2, 3], "1, 2, or 3"),
    ])
    def test_defaults(self, items, expected):
        assert joinor(items) == expected

    def test_custom_word_and_delimiter(self):
        assert joinor(["a", "b", "c"], "; ", "and") == "a; b; and c"


class TestPromptBasics:

    def test_prompt_prefix(self, scripted):
        io = scripted([])
        prompt("hello", io.write)
        assert io.output == ["=> hello"]

    def test_possible_choices(self):
        assert possible_choices(["humans", "computers", "random"], "h") == ["humans"]
        assert possible_choices(["10", "11", "2"], "1") == ["10", "11"]
        assert possible_choices(["a", "b"], "z") == []


class TestYesNo:
    """input_yes_no()."""

    @pytest.mark.parametrize("answer, expected", [
        ("y", "y"), ("YES", "y"), (" no ", "n"), ("N", "n"),
    ])
    def test_accepts(self, scripted, answer, expected):
        io = scripted([answer])
        assert input_yes_no("Again?", io.read, io.write) == expected
        assert io.output == ["=> Again? (y/n)"]

    def test_retries_until_valid(self, scripted):
        io = scripted(["maybe", "", "yes"])
        assert input_yes_no("Again?", io.read, io.write) == "y"
        assert io.output.count("=> Sorry, must be y or n") == 2


class TestNumbersAndPatterns:
    """input_positive_int() / input_matching()."""

    def test_positive_int_allows_zero(self, scripted):
        io = scripted(["-1", "0"])
        assert input_positive_int("How many?", read=io.read, write=io.write) == 0

    def test_strict_rejects_zero(self, scripted):
        io = scripted(["0", "abc", "007"])
        assert input_positive_int("Size?", strict=True, read=io.read, write=io.write) == 7
        assert io.output.count("=> Sorry, invalid input.") == 2

    def test_matching_marker(self, scripted):
        io = scripted(["XX", "", "Q"])
        assert input_matching(REGEXP_MARKER, "Marker?", io.read, io.write) == "Q"

    def test_matching_name_strips(self, scripted):
        io = scripted(["   ", "  Ada Lovelace  "])
        assert input_matching(REGEXP_NAME, "Name?", io.read, io.write) == "Ada Lovelace"

    def test_matching_string_pattern(self, scripted):
        io = scripted(["b", "a"])
        assert input_matching(r"\Aa\Z", "Letter?", io.read, io.write) == "a"


class TestInputChoice:
    """input_choice() exact and prefix matching."""

    CHOICES = ["humans", "computers", "random"]

    def test_exact(self, scripted):
        io = scripted(["random"])
        assert input_choice(self.CHOICES, "Who first?", read=io.read, write=io.write) == "random"

    def test_displays_choices(self, scripted):
        io = scripted(["random"])
        input_choice(self.CHOICES, "Who first?", read=io.read, write=io.write)
        assert io.output[0] == "=> Who first? humans, computers, or random"

    def test_hidden_choices(self, scripted):
        io = scripted(["random"])
        input_choice(self.CHOICES, "Who first?", display_choices=False, read=io.read, write=io.write)
        assert io.output[0] == "=> Who first?"

    def test_unique_prefix(self, scripted):
        io = scripted(["C"])
        assert input_choice(self.CHOICES, read=io.read, write=io.write) == "computers"

    def test_case_sensitive_when_asked(self, scripted):
        io = scripted(["Yes", "yes"])
        result = input_choice(["yes", "no"], downcase_input=False, read=io.read, write=io.write)
        assert result == "yes"
        assert "=> Sorry, invalid choice." in io.output

    def test_ambiguous_prefix(self, scripted):
        io = scripted(["1", "11"])
        assert input_choice(["10", "11", "2"], read=io.read, write=io.write) == "11"
        assert "=> Do you mean 10 or 11?" in io.output

    @pytest.mark.parametrize("bad", ["x", ""])
    def test_invalid(self, scripted, bad):
        io = scripted([bad, "humans"])
        assert input_choice(self.CHOICES, read=io.read, write=io.write) == "humans"
        assert "=> Sorry, invalid choice." in io.output

    def test_prefix_of_single_choice_rejected(self, scripted):
        """With one choice, a partial answer matches 'all' choices."""
        io = scripted(["4", "42"])
        assert input_choice(["42"], read=io.read, write=io.write) == "42"
        assert "=> Sorry, invalid choice." in io.output


class TestHumanMoveProvider:

    def test_returns_chosen_key(self, scripted):
        io = scripted(["9", "3"])
        provide = human_move_provider(io.read, io.write)
        assert provide(["0", "3", "5"], "Ada (X), choose a square:") == "3"
        assert io.output[0] == "=> Ada (X), choose a square: 0, 3, or 5"
