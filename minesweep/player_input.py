"""Parsing player commands typed at the prompt."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

PROMPT = "\nPC Input: "


class Action(IntEnum):
    INVALID = 0
    HELP = 1
    REVEAL = 2
    FLAG = 3
    QUIT = 4
    NEW_GAME = 5
    CHANGE_BOARD = 6
    CHANGE_BOMBS = 7


@dataclass(frozen=True)
class Command:
    """A parsed command; unused coordinates stay at -1."""

    action: Action
    x: int = -1
    y: int = -1


_SIMPLE = {
    "H": Action.HELP,
    "N": Action.NEW_GAME,
    "Q": Action.QUIT,
}

_WITH_NUMBERS = {
    "R": (Action.REVEAL, 2),
    "F": (Action.FLAG, 2),
    "S": (Action.CHANGE_BOARD, 2),
    "B": (Action.CHANGE_BOMBS, 1),
}

_INT = re.compile(r"\s*([+-]?\d+)")


def parse_command(line):
    """Turn one line of input into a :class:`Command`."""
    text = line.lstrip()
    if not text:
        return Command(Action.INVALID)

    letter, rest = text[0].upper(), text[1:]
    if letter in _SIMPLE:
        return Command(_SIMPLE[letter])

    spec = _WITH_NUMBERS.get(letter)
    if spec is None:
        return Command(Action.INVALID)

    action, count = spec
    numbers = []
    position = 0
    for _ in range(count):
        match = _INT.match(rest, position)
        if match is None:
            return Command(Action.INVALID)
        numbers.append(int(match.group(1)))
        position = match.end()
    return Command(action, *numbers)


def read_command(stream: TextIO):
    """Read the next non-blank line from ``stream``; return None at end of input."""
    while True:
        line = stream.readline()
        if not line:
            return None
        if line.strip():
            return parse_command(line)