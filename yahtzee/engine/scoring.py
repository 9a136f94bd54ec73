"""
Yahtzee Duel - Score Engine

Turns five dice into the 13 category scores they could earn. The result is a
preview: it does not know which categories a player has already used.

Scoring rules:
- Aces..Sixes: count of that face × face
- 3/4 of a kind: sum of all dice when at least 3/4 dice match
- Full House: 25 for exactly three of one face and two of another
- Small/Large Straight: 30/40 for a run of 4/5 consecutive faces
- Yahtzee: 50 for five of a kind
- Chance: sum of all dice

All methods are stateless class methods.
"""

import random
from collections import Counter
from typing import ClassVar, Sequence

from yahtzee.engine.base import (
    DIE_FACES,
    FULL_HOUSE_POINTS,
    LARGE_STRAIGHT_POINTS,
    NUM_DICE,
    SMALL_STRAIGHT_POINTS,
    YAHTZEE_POINTS,
    Category,
    DiceRoll,
)
from yahtzee.engine.validators import validate_dice_values, validate_held_mask

Scores = tuple[int, ...]


class ScoreEngine:
    """Stateless engine computing category previews for a roll."""

    NUM_DICE: ClassVar[int] = NUM_DICE
    DIE_FACES: ClassVar[int] = DIE_FACES

    @classmethod
    def roll_dice(cls, rng: random.Random | None = None) -> DiceRoll:
        """Roll all five dice."""
        source = rng or random
        return DiceRoll(
            values=tuple(source.randint(1, cls.DIE_FACES) for _ in range(cls.NUM_DICE))
        )

    @classmethod
    def reroll(
        cls,
        dice: DiceRoll | Sequence[int],
        held: Sequence[bool],
        rng: random.Random | None = None,
    ) -> DiceRoll:
        """
        Re-randomize every die whose hold flag is False.

        Args:
            dice: Current dice
            held: Hold mask, one flag per die
            rng: Optional random source (module-level random by default)

        Returns:
            New DiceRoll with held dice unchanged
        """
        values = dice.values if isinstance(dice, DiceRoll) else validate_dice_values(dice)
        mask = validate_held_mask(held)
        source = rng or random
        return DiceRoll(
            values=tuple(
                value if keep else source.randint(1, cls.DIE_FACES)
                for value, keep in zip(values, mask)
            )
        )

    @classmethod
    def face_counts(cls, dice: Sequence[int]) -> dict[int, int]:
        """Occurrences of each face 1-6 (zero for absent faces)."""
        counts = Counter(dice)
        return {face: counts[face] for face in range(1, cls.DIE_FACES + 1)}

    @classmethod
    def straight_length(cls, dice: Sequence[int]) -> int:
        """
        Longest run of consecutive faces.

        Duplicate faces neither extend nor break a run, so (1, 2, 2, 3, 4)
        has a run of 4.
        """
        ordered = sorted(dice)
        if not ordered:
            return 0

        longest = 1
        current = 1
        for prev, value in zip(ordered, ordered[1:]):
            if value == prev + 1:
                current += 1
            elif value != prev:
                longest = max(longest, current)
                current = 1
        return max(longest, current)

    @classmethod
    def compute_scores(cls, dice: DiceRoll | Sequence[int]) -> Scores:
        """
        Compute the score every category would earn with these dice.

        Args:
            dice: A DiceRoll or a sequence of five faces

        Returns:
            Tuple of 13 scores indexed by Category.index

        Raises:
            InvalidInput: If there are not exactly five dice in range 1-6
        """
        values = dice.values if isinstance(dice, DiceRoll) else validate_dice_values(dice)
        ordered = sorted(values)
        total = sum(ordered)

        counts = cls.face_counts(ordered)
        ranked = sorted(counts.values(), reverse=True)
        max_count, second_count = ranked[0], ranked[1]
        run = cls.straight_length(ordered)

        scores = [0] * len(Category)
        for category in Category.upper():
            scores[category.index] = counts[category.face] * category.face

        if max_count >= 3:
            scores[Category.THREE_OF_A_KIND.index] = total
        if max_count >= 4:
            scores[Category.FOUR_OF_A_KIND.index] = total
        if max_count == 3 and second_count == 2:
            scores[Category.FULL_HOUSE.index] = FULL_HOUSE_POINTS
        if run >= 4:
            scores[Category.SMALL_STRAIGHT.index] = SMALL_STRAIGHT_POINTS
        if run >= 5:
            scores[Category.LARGE_STRAIGHT.index] = LARGE_STRAIGHT_POINTS
        if max_count >= 5:
            scores[Category.YAHTZEE.index] = YAHTZEE_POINTS
        scores[Category.CHANCE.index] = total

        return tuple(scores)

    @classmethod
    def preview(cls, dice: DiceRoll | Sequence[int]) -> dict[Category, int]:
        """Same as compute_scores, keyed by Category."""
        scores = cls.compute_scores(dice)
        return {category: scores[category.index] for category in Category}
