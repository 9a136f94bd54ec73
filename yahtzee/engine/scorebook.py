"""
Yahtzee Duel - Score Book

Per-player record of committed category scores. The only mutation is
``commit``; a category, once used, stays used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from yahtzee.engine.base import UPPER_BONUS_POINTS, UPPER_BONUS_THRESHOLD, Category
from yahtzee.engine.errors import InvalidInput, InvariantViolation
from yahtzee.engine.validators import validate_score

logger = logging.getLogger(__name__)


@dataclass
class ScoreBook:
    """
    Committed scores for one player.

    Attributes:
        scores: Category -> committed score (absent until committed)
        total: Sum of committed scores plus the upper bonus, if awarded
        bonus_awarded: Whether the 35-point upper bonus has been added
    """
    scores: dict[Category, int] = field(default_factory=dict)
    total: int = 0
    bonus_awarded: bool = False

    def has_used(self, category: Category) -> bool:
        """True once a score has been committed for the category."""
        return category in self.scores

    def score_for(self, category: Category) -> int | None:
        """Committed score for a category, or None if still open."""
        return self.scores.get(category)

    def upper_total(self) -> int:
        """Sum of committed Aces..Sixes scores."""
        return sum(self.scores.get(category, 0) for category in Category.upper())

    def unused_categories(self) -> list[Category]:
        """Open categories in score-sheet order."""
        return [category for category in Category if category not in self.scores]

    @property
    def is_complete(self) -> bool:
        """True when all 13 categories have been committed."""
        return len(self.scores) == len(Category)

    def commit(self, category: Category, score: int) -> int:
        """
        Record a score for an unused category.

        Awards the upper bonus the first time an upper-section commit brings
        ``upper_total()`` to the threshold.

        Args:
            category: Category to fill
            score: Points earned (usually the preview for the current dice)

        Returns:
            Points added to the total, bonus included

        Raises:
            InvalidInput: If category is not a Category or score is negative
            InvariantViolation: If the category has already been used
        """
        if not isinstance(category, Category):
            raise InvalidInput(f"Unknown category {category!r}.")
        if self.has_used(category):
            raise InvariantViolation(f"Category {category.label} has already been used.")
        validate_score(score)

        self.scores[category] = score
        self.total += score
        added = score

        if (
            category.is_upper
            and not self.bonus_awarded
            and self.upper_total() >= UPPER_BONUS_THRESHOLD
        ):
            self.total += UPPER_BONUS_POINTS
            self.bonus_awarded = True
            added += UPPER_BONUS_POINTS
            logger.info("Upper bonus awarded (upper total %d)", self.upper_total())

        logger.debug("Committed %s for %d points (total %d)", category.name, score, self.total)
        return added

    def to_snapshot(self) -> dict[str, Any]:
        """Plain-data view for renderers."""
        return {
            "total": self.total,
            "upper_total": self.upper_total(),
            "bonus_awarded": self.bonus_awarded,
            "categories": [
                {
                    "category": category.name,
                    "label": category.label,
                    "used": self.has_used(category),
                    "score": self.score_for(category),
                }
                for category in Category
            ],
        }
