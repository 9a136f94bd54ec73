"""
Yahtzee Duel - Session Events and Snapshots

Narration events pushed to the rendering collaborator, and the read-only
snapshot it renders between actions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from yahtzee.engine.base import Category, PlayerKind
from yahtzee.engine.game import GameState
from yahtzee.engine.roll_state import RollPhase
from yahtzee.engine.turn import Turn

if TYPE_CHECKING:
    from yahtzee.session.controller import HumanTurn


class GameEvent(Enum):
    """Events that can occur during a game."""

    AI_ROLLING = auto()
    AI_ROLLED = auto()
    AI_CHOSE = auto()
    CATEGORY_COMMITTED = auto()
    TURN_ADVANCED = auto()
    GAME_OVER = auto()
    NEW_HIGHSCORE = auto()
    RANKING_SAVED = auto()


@dataclass
class EventPayload:
    """Wrapper for narration event data."""

    event: GameEvent
    round: int
    player: PlayerKind | None = None
    data: dict[str, Any] = field(default_factory=dict)


class Focus(Enum):
    """Elements of the human turn the focus ring cycles through."""

    DIE_0 = 0
    DIE_1 = 1
    DIE_2 = 2
    DIE_3 = 3
    DIE_4 = 4
    REROLL = 5
    STAND = 6
    CATEGORIES = 7

    @property
    def die_index(self) -> int | None:
        if self.value <= Focus.DIE_4.value:
            return self.value
        return None

    def shifted(self, step: int) -> "Focus":
        """Neighbouring element, wrapping around the ring."""
        return Focus((self.value + step) % len(Focus))


@dataclass(frozen=True)
class GameSnapshot:
    """
    Everything a renderer needs for one frame.

    Dice-related fields are None outside a human turn.
    """

    turn: Turn
    human: dict[str, Any]
    ai: dict[str, Any]
    dice: tuple[int, ...] | None = None
    held: tuple[bool, ...] | None = None
    rerolls_remaining: int | None = None
    previews: tuple[int, ...] | None = None
    phase: RollPhase | None = None
    focus: Focus | None = None
    selected: Category | None = None

    @classmethod
    def capture(cls, state: GameState, human_turn: HumanTurn | None = None) -> "GameSnapshot":
        """Build a snapshot from the game state and, if any, the active human turn."""
        if human_turn is None:
            return cls(turn=state.turn, human=state.human.to_snapshot(), ai=state.ai.to_snapshot())

        roll = human_turn.roll
        return cls(
            turn=state.turn,
            human=state.human.to_snapshot(),
            ai=state.ai.to_snapshot(),
            dice=roll.dice.values,
            held=tuple(roll.held),
            rerolls_remaining=roll.rerolls_remaining,
            previews=roll.scores,
            phase=roll.phase,
            focus=human_turn.focus,
            selected=human_turn.selected,
        )
