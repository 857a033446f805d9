"""
Prompt and input-validation helpers for the terminal.

Every helper takes `read` (returns one line of input, default input) and
`write` (prints one message, default print) so tests can script a session.
"""

from __future__ import annotations

import re
from typing import Callable, List, Pattern, Sequence, Union

Reader = Callable[[], str]
Writer = Callable[[str], None]

REGEXP_POS_INTEGER = re.compile(r"\A[0-9]+\Z")
REGEXP_STRICT_POS_INTEGER = re.compile(r"\A0*[1-9][0-9]*\Z")
REGEXP_NAME = re.compile(r"\A\S(.*\S)?\Z")
REGEXP_MARKER = re.compile(r"\A\S\Z")

YES_NO_ANSWERS = ("y", "n", "yes", "no")


def prompt(message: str, write: Writer = print) -> None:
    write(f"=> {message}")


def joinor(items: Sequence, delimiter: str = ", ", word: str = "or") -> str:
    """
    Join items for a sentence.

    joinor([1, 2]) == "1 or 2"
    joinor([1, 2, 3]) == "1, 2, or 3"
    """
    items = [str(i) for i in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {word} {items[1]}"
    return delimiter.join(items[:-1]) + f"{delimiter}{word} {items[-1]}"


def possible_choices(choices: Sequence[str], text: str) -> List[str]:
    """Choices starting with `text`."""
    return [c for c in choices if c.startswith(text)]


def input_formatted(read: Reader = input) -> str:
    return read().strip().lower()


def input_yes_no(message: str, read: Reader = input, write: Writer = print) -> str:
    """Ask until the answer is yes or no. Returns 'y' or 'n'."""
    message = message.strip()
    while True:
        prompt(f"{message} (y/n)", write)
        answer = input_formatted(read)
        if answer in YES_NO_ANSWERS:
            return answer[0]
        prompt("Sorry, must be y or n", write)


def input_matching(
    pattern: Union[str, Pattern[str]],
    message: str,
    read: Reader = input,
    write: Writer = print,
) -> str:
    """Ask until the stripped input matches `pattern`."""
    regexp = re.compile(pattern) if isinstance(pattern, str) else pattern
    while True:
        prompt(message, write)
        text = read().strip()
        if regexp.match(text):
            return text
        prompt("Sorry, invalid input.", write)


def input_positive_int(
    message: str,
    strict: bool = False,
    read: Reader = input,
    write: Writer = print,
) -> int:
    """Ask for an integer >= 0, or >= 1 when `strict`."""
    regexp = REGEXP_STRICT_POS_INTEGER if strict else REGEXP_POS_INTEGER
    return int(input_matching(regexp, message, read, write))


def input_choice(
    choices: Sequence[str],
    message: str = "Please choose",
    display_choices: bool = True,
    downcase_input: bool = True,
    read: Reader = input,
    write: Writer = print,
) -> str:
    """
    Ask until the input names one of `choices`.

    An exact match wins. Otherwise a prefix shared by exactly one choice
    selects it; a prefix shared by several triggers a "Do you mean" hint,
    and a prefix matching none (or all) is rejected.
    """
    choices = list(choices)
    if display_choices:
        message = f"{message.strip()} {joinor(choices)}"

    while True:
        prompt(message, write)
        text = input_formatted(read) if downcase_input else read().strip()
        if text in choices:
            return text

        matches = possible_choices(choices, text)
        if len(matches) == 1 and len(choices) > 1:
            return matches[0]
        if matches and len(matches) < len(choices):
            prompt(f"Do you mean {joinor(matches)}?", write)
        else:
            prompt("Sorry, invalid choice.", write)


def human_move_provider(read: Reader = input, write: Writer = print):
    """Build the callable a Tournament asks for human moves."""
    def provide(choices: Sequence[str], message: str) -> str:
        return input_choice(choices, message, read=read, write=write)
    return provide
