"""
Yahtzee Duel - Human Roll State

Sub-state machine for one human turn:

- ROLLING: dice may be held/released and rerolled (2 rerolls per turn)
- CHOOSING: rerolls exhausted or the player stood; only a category can be picked
- DONE: a category was committed; the turn is over

A fresh RollState is created for every human turn.
"""

from __future__ import annotations

import logging
import random
from enum import Enum

from yahtzee.engine.base import NUM_DICE, Category, DiceRoll
from yahtzee.engine.errors import InvariantViolation
from yahtzee.engine.scorebook import ScoreBook
from yahtzee.engine.scoring import Scores, ScoreEngine
from yahtzee.engine.validators import validate_die_index

logger = logging.getLogger(__name__)


class RollPhase(Enum):
    """Phase of the human turn."""
    ROLLING = "rolling"
    CHOOSING = "choosing"
    DONE = "done"


class RollState:
    """Dice, holds and remaining rerolls for the human's current turn."""

    MAX_REROLLS = 2

    def __init__(
        self,
        dice: DiceRoll | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Start a turn with a fresh roll.

        Args:
            dice: Optional pre-determined opening roll (for testing)
            rng: Optional random source for the opening roll and rerolls
        """
        self._rng = rng
        self.dice = dice if dice is not None else ScoreEngine.roll_dice(rng)
        self.held: list[bool] = [False] * NUM_DICE
        self.rerolls_remaining = self.MAX_REROLLS
        self.phase = RollPhase.ROLLING
        self.committed: Category | None = None
        self._scores = ScoreEngine.compute_scores(self.dice)

    @property
    def scores(self) -> Scores:
        """Category previews for the current dice."""
        return self._scores

    @property
    def can_reroll(self) -> bool:
        return self.phase is RollPhase.ROLLING and self.rerolls_remaining > 0

    @property
    def is_done(self) -> bool:
        return self.phase is RollPhase.DONE

    def toggle_hold(self, index: int) -> bool:
        """
        Flip the hold flag of one die.

        Returns:
            True if the hold changed, False if holds no longer apply
        """
        validate_die_index(index)
        self._ensure_open()
        if not self.can_reroll:
            return False
        self.held[index] = not self.held[index]
        return True

    def set_hold(self, index: int, held: bool) -> bool:
        """Hold or release one die. Returns False once holds no longer apply."""
        validate_die_index(index)
        self._ensure_open()
        if not self.can_reroll:
            return False
        self.held[index] = held
        return True

    def reroll(self) -> bool:
        """
        Reroll every die that is not held.

        Returns:
            True if the dice were rerolled, False if no rerolls remain
        """
        self._ensure_open()
        if not self.can_reroll:
            return False

        self.dice = ScoreEngine.reroll(self.dice, self.held, self._rng)
        self._scores = ScoreEngine.compute_scores(self.dice)
        self.rerolls_remaining -= 1
        logger.debug("Rerolled to %s (%d left)", self.dice.values, self.rerolls_remaining)

        if self.rerolls_remaining == 0:
            self._enter_choosing()
        return True

    def stand(self) -> None:
        """Stop rerolling and go straight to category choice."""
        self._ensure_open()
        if self.phase is RollPhase.ROLLING:
            self._enter_choosing()

    def commit(self, book: ScoreBook, category: Category) -> int | None:
        """
        Score the current dice in a category.

        Args:
            book: The human's score book
            category: Category to fill

        Returns:
            The previewed score committed, or None if the category was
            already used (nothing changes and the player may pick again)
        """
        self._ensure_open()
        if book.has_used(category):
            return None

        points = self._scores[category.index]
        book.commit(category, points)
        self.committed = category
        self.phase = RollPhase.DONE
        return points

    def _enter_choosing(self) -> None:
        # Dice are shown sorted once no more rerolls can happen.
        self.dice = self.dice.sorted()
        self.held = [False] * NUM_DICE
        self.phase = RollPhase.CHOOSING

    def _ensure_open(self) -> None:
        if self.phase is RollPhase.DONE:
            raise InvariantViolation("The turn has already been committed.")
