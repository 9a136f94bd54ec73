"""
Yahtzee Duel - Game State

The single aggregate owned by the turn loop: the turn marker and one score
book per actor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from yahtzee.engine.base import PlayerKind
from yahtzee.engine.scorebook import ScoreBook
from yahtzee.engine.turn import Turn

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    """Result from the human player's point of view."""
    WIN = "win"
    TIE = "tie"
    LOSS = "loss"


@dataclass
class GameState:
    """
    Complete state of a game session.

    Attributes:
        turn: Whose move it is and the current round
        human: The human player's score book
        ai: The AI player's score book
    """
    turn: Turn = field(default_factory=Turn.initial)
    human: ScoreBook = field(default_factory=ScoreBook)
    ai: ScoreBook = field(default_factory=ScoreBook)

    @property
    def is_over(self) -> bool:
        return self.turn.is_terminal

    def book_for(self, player: PlayerKind) -> ScoreBook:
        """Score book owned by the given actor."""
        if player is PlayerKind.HUMAN:
            return self.human
        return self.ai

    @property
    def current_book(self) -> ScoreBook:
        return self.book_for(self.turn.player)

    def advance(self) -> Turn:
        """Hand control to the other actor after a commit."""
        self.turn = self.turn.next()
        logger.debug("Advanced to %s", self.turn)
        return self.turn

    def outcome(self) -> GameOutcome:
        """Compare final totals."""
        if self.human.total > self.ai.total:
            return GameOutcome.WIN
        if self.human.total == self.ai.total:
            return GameOutcome.TIE
        return GameOutcome.LOSS
