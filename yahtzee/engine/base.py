"""
Yahtzee Duel - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine: the closed set of scoring categories, the two actor kinds and
an immutable, validated five-dice roll.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from yahtzee.engine.errors import InvalidInput

NUM_DICE = 5
DIE_FACES = 6

UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS_POINTS = 35

FULL_HOUSE_POINTS = 25
SMALL_STRAIGHT_POINTS = 30
LARGE_STRAIGHT_POINTS = 40
YAHTZEE_POINTS = 50


class PlayerKind(Enum):
    """Who is acting in the current turn."""
    HUMAN = "human"
    AI = "ai"


class Category(Enum):
    """
    The 13 scoring combinations, in score-sheet order.

    The value is the category's index on the score sheet. Indices 0-5 form
    the upper section, 6-12 the lower section.
    """
    ACES = 0
    TWOS = 1
    THREES = 2
    FOURS = 3
    FIVES = 4
    SIXES = 5
    THREE_OF_A_KIND = 6
    FOUR_OF_A_KIND = 7
    FULL_HOUSE = 8
    SMALL_STRAIGHT = 9
    LARGE_STRAIGHT = 10
    YAHTZEE = 11
    CHANCE = 12

    @property
    def index(self) -> int:
        """Position on the score sheet (0-12)."""
        return self.value

    @property
    def is_upper(self) -> bool:
        """True for Aces through Sixes."""
        return self.value <= Category.SIXES.value

    @property
    def face(self) -> int | None:
        """Die face counted by an upper category, None for the lower section."""
        if self.is_upper:
            return self.value + 1
        return None

    @property
    def label(self) -> str:
        """Display label used by the score sheet."""
        return _LABELS[self]

    @classmethod
    def from_index(cls, index: int) -> "Category":
        """Look up a category by its score-sheet index."""
        try:
            return cls(index)
        except ValueError:
            raise InvalidInput(
                f"Category index must be between 0 and {len(cls) - 1}, got {index}."
            ) from None

    @classmethod
    def upper(cls) -> tuple["Category", ...]:
        """The six upper-section categories."""
        return tuple(c for c in cls if c.is_upper)

    @classmethod
    def lower(cls) -> tuple["Category", ...]:
        """The seven lower-section categories."""
        return tuple(c for c in cls if not c.is_upper)


_LABELS: dict[Category, str] = {
    Category.ACES: "Aces",
    Category.TWOS: "Twos",
    Category.THREES: "Threes",
    Category.FOURS: "Fours",
    Category.FIVES: "Fives",
    Category.SIXES: "Sixes",
    Category.THREE_OF_A_KIND: "3 of a kind",
    Category.FOUR_OF_A_KIND: "4 of a kind",
    Category.FULL_HOUSE: "Full House",
    Category.SMALL_STRAIGHT: "Small Straight",
    Category.LARGE_STRAIGHT: "Large Straight",
    Category.YAHTZEE: "Yahtzee (5 of a kind)",
    Category.CHANCE: "Chance",
}


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a five-dice roll.

    Attributes:
        values: Tuple of five face values, each 1-6
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate the number of dice and their faces."""
        if len(self.values) != NUM_DICE:
            raise InvalidInput(
                f"A roll must contain exactly {NUM_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if (
                not isinstance(value, int)
                or isinstance(value, bool)
                or not (1 <= value <= DIE_FACES)
            ):
                raise InvalidInput(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    @property
    def total(self) -> int:
        """Sum of all five faces."""
        return sum(self.values)

    def sorted(self) -> "DiceRoll":
        """Copy of this roll with faces in ascending order."""
        return DiceRoll(values=tuple(sorted(self.values)))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))
