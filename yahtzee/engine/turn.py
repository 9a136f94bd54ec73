"""
Yahtzee Duel - Turn Cycle

Strict Human/AI alternation. The round counter advances only when control
returns to the human, and the game is over once it reaches 14 (13 rounds,
one per category).
"""

from dataclasses import dataclass
from typing import ClassVar

from yahtzee.engine.base import PlayerKind
from yahtzee.engine.errors import InvariantViolation


@dataclass(frozen=True)
class Turn:
    """
    Immutable turn marker.

    Attributes:
        player: Actor whose move it is
        round: Current round, starting at 1
    """
    player: PlayerKind = PlayerKind.HUMAN
    round: int = 1

    TERMINAL_ROUND: ClassVar[int] = 14

    @classmethod
    def initial(cls) -> "Turn":
        """Human(1)."""
        return cls(player=PlayerKind.HUMAN, round=1)

    @property
    def is_terminal(self) -> bool:
        """True once all 13 rounds have been played."""
        return self.round == self.TERMINAL_ROUND

    def next(self) -> "Turn":
        """Human(n) -> AI(n), AI(n) -> Human(n + 1)."""
        if self.is_terminal:
            raise InvariantViolation("The game is over; no further turns.")
        if self.player is PlayerKind.HUMAN:
            return Turn(player=PlayerKind.AI, round=self.round)
        return Turn(player=PlayerKind.HUMAN, round=self.round + 1)

    def __str__(self) -> str:
        if self.player is PlayerKind.HUMAN:
            return f"Your turn ({self.round})"
        return f"AI turn ({self.round})"
