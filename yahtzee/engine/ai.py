"""
Yahtzee Duel - AI Policy

Greedy single-roll opponent: the AI rolls once, never rerolls, and fills
whichever open category pays the most for that roll. Ties go to the category
that comes first on the score sheet.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from yahtzee.engine.base import Category, DiceRoll
from yahtzee.engine.errors import InvariantViolation
from yahtzee.engine.scorebook import ScoreBook
from yahtzee.engine.scoring import ScoreEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AITurnResult:
    """
    What the AI did during one turn, for narration.

    Attributes:
        dice: The single roll the AI scored
        category: Category it committed
        points: Previewed score for that category (bonus excluded)
    """
    dice: DiceRoll
    category: Category
    points: int


class AIPolicy:
    """Stateless greedy category selection."""

    @classmethod
    def choose(cls, book: ScoreBook, scores: Sequence[int]) -> Category:
        """
        Pick the unused category with the highest previewed score.

        Args:
            book: The AI's score book
            scores: 13 previews from ScoreEngine.compute_scores

        Returns:
            The chosen category

        Raises:
            InvariantViolation: If every category has already been used
        """
        open_categories = book.unused_categories()
        if not open_categories:
            raise InvariantViolation("AI must have at least one category to choose.")

        best = open_categories[0]
        for category in open_categories[1:]:
            if scores[category.index] > scores[best.index]:
                best = category
        return best

    @classmethod
    def play_turn(
        cls,
        book: ScoreBook,
        dice: DiceRoll | None = None,
        rng: random.Random | None = None,
    ) -> AITurnResult:
        """
        Roll, choose and commit in one step.

        Args:
            book: The AI's score book (mutated)
            dice: Optional pre-determined roll (for testing)
            rng: Optional random source for the roll

        Returns:
            AITurnResult describing the move
        """
        if dice is None:
            dice = ScoreEngine.roll_dice(rng)

        scores = ScoreEngine.compute_scores(dice)
        category = cls.choose(book, scores)
        book.commit(category, scores[category.index])

        logger.info("AI rolled %s and chose %s for %d", dice.values, category.name, scores[category.index])
        return AITurnResult(dice=dice, category=category, points=scores[category.index])
