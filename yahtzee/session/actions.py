"""
Yahtzee Duel - Player Actions

Discrete, already-decoded actions delivered by the input collaborator. The
core never sees raw keys.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class MoveFocus:
    """Move the focus ring (dice, Reroll, Stand, category list)."""
    direction: Direction


@dataclass(frozen=True)
class MoveSelection:
    """Move within the focused element: the category row, or hold/release a die."""
    direction: Direction


@dataclass(frozen=True)
class ToggleHold:
    """Flip the hold flag of one die directly."""
    index: int


@dataclass(frozen=True)
class Confirm:
    """Activate the focused element."""


@dataclass(frozen=True)
class Quit:
    """Ask to abandon the session."""


Action = Union[MoveFocus, MoveSelection, ToggleHold, Confirm, Quit]
