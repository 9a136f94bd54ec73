"""
Yahtzee Duel - Session Controller

Drives one game from the first roll to the ranking update. Rendering and
input belong to an injected Collaborator; the controller only consumes
decoded actions and pushes snapshots and narration events back.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from yahtzee.config.settings import Settings, get_settings
from yahtzee.engine.ai import AIPolicy
from yahtzee.engine.base import Category, PlayerKind
from yahtzee.engine.errors import SessionAborted
from yahtzee.engine.game import GameOutcome, GameState
from yahtzee.engine.roll_state import RollPhase, RollState
from yahtzee.engine.scorebook import ScoreBook
from yahtzee.session.actions import (
    Action,
    Confirm,
    Direction,
    MoveFocus,
    MoveSelection,
    Quit,
    ToggleHold,
)
from yahtzee.session.events import EventPayload, Focus, GameEvent, GameSnapshot
from yahtzee.storage.models import RankingEntry
from yahtzee.storage.ranking import RankingStore

logger = logging.getLogger(__name__)


class Collaborator(Protocol):
    """Rendering/input shell the session talks to."""

    def next_action(self) -> Action:
        """Block until the player does something."""
        ...

    def render(self, snapshot: GameSnapshot) -> None: ...

    def notify(self, payload: EventPayload) -> None: ...

    def confirm_quit(self) -> bool:
        """Ask whether the player really wants to quit."""
        ...

    def ask_name(self, ranking: list[RankingEntry], new_highscore: bool) -> str | None:
        """Show the ranking and ask for a name; None skips saving."""
        ...

    def pause(self, seconds: float) -> None: ...


@dataclass(frozen=True)
class GameResult:
    """
    Final outcome of a completed session.

    Attributes:
        outcome: Win, tie or loss for the human
        human_score: Human's final total
        ai_score: AI's final total
        new_highscore: Whether the human beat the previous best
        ranking_position: Index in the saved ranking, None if not saved
    """
    outcome: GameOutcome
    human_score: int
    ai_score: int
    new_highscore: bool
    ranking_position: int | None = None


class HumanTurn:
    """Interprets actions against a RollState during one human turn."""

    def __init__(self, roll: RollState) -> None:
        self.roll = roll
        self.focus = Focus.DIE_0
        self.selected = Category.ACES

    def handle(self, action: Action, book: ScoreBook) -> int | None:
        """
        Apply one action.

        Returns:
            Points committed when the action ended the turn, else None
        """
        if self.roll.phase is RollPhase.CHOOSING:
            return self._handle_choosing(action, book)

        if isinstance(action, MoveFocus):
            if action.direction is Direction.LEFT:
                self.focus = self.focus.shifted(-1)
            elif action.direction is Direction.RIGHT:
                self.focus = self.focus.shifted(1)
        elif isinstance(action, MoveSelection):
            die = self.focus.die_index
            if die is not None:
                self.roll.set_hold(die, action.direction is Direction.UP)
            elif self.focus is Focus.CATEGORIES:
                self._move_selection(action.direction)
        elif isinstance(action, ToggleHold):
            self.roll.toggle_hold(action.index)
        elif isinstance(action, Confirm):
            return self._confirm(book)
        return None

    def _confirm(self, book: ScoreBook) -> int | None:
        die = self.focus.die_index
        if die is not None:
            self.roll.toggle_hold(die)
        elif self.focus is Focus.REROLL:
            self.roll.reroll()
        elif self.focus is Focus.STAND:
            self.roll.stand()
        elif self.focus is Focus.CATEGORIES:
            return self.roll.commit(book, self.selected)

        if self.roll.phase is RollPhase.CHOOSING:
            self.focus = Focus.CATEGORIES
        return None

    def _handle_choosing(self, action: Action, book: ScoreBook) -> int | None:
        if isinstance(action, MoveSelection):
            self._move_selection(action.direction)
        elif isinstance(action, Confirm):
            return self.roll.commit(book, self.selected)
        return None

    def _move_selection(self, direction: Direction) -> None:
        index = self.selected.index
        if direction is Direction.UP and index > 0:
            self.selected = Category.from_index(index - 1)
        elif direction is Direction.DOWN and index < len(Category) - 1:
            self.selected = Category.from_index(index + 1)


class GameSession:
    """Runs a full game against the AI and records the human's result."""

    def __init__(
        self,
        collaborator: Collaborator,
        settings: Settings | None = None,
        store: RankingStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.collaborator = collaborator
        self.settings = settings or get_settings()
        self.store = store or RankingStore(self.settings.ranking_path)
        self.rng = rng
        self.state = GameState()

    def play(self) -> GameResult | None:
        """
        Play until the terminal round, then update the ranking.

        Returns:
            GameResult, or None if the player quit
        """
        try:
            while not self.state.is_over:
                if self.state.turn.player is PlayerKind.HUMAN:
                    self.play_human_turn()
                else:
                    self.play_ai_turn()
                self.state.advance()
                self._notify(GameEvent.TURN_ADVANCED)
            return self.finish()
        except SessionAborted:
            logger.info("Session abandoned in %s", self.state.turn)
            return None

    def play_human_turn(self) -> int:
        """Consume actions until the human commits a category."""
        turn = HumanTurn(RollState(rng=self.rng))
        book = self.state.human

        while True:
            self.collaborator.render(GameSnapshot.capture(self.state, turn))
            action = self.collaborator.next_action()

            if isinstance(action, Quit):
                if self.collaborator.confirm_quit():
                    raise SessionAborted("Player quit.")
                continue

            points = turn.handle(action, book)
            if points is not None:
                self._notify(
                    GameEvent.CATEGORY_COMMITTED,
                    PlayerKind.HUMAN,
                    category=turn.selected.name,
                    label=turn.selected.label,
                    points=points,
                )
                return points

    def play_ai_turn(self) -> int:
        """Let the AI roll once and commit, narrating each step."""
        self.collaborator.render(GameSnapshot.capture(self.state))
        self._notify(GameEvent.AI_ROLLING, PlayerKind.AI)
        self.collaborator.pause(self.settings.ai_rolling_delay)

        result = AIPolicy.play_turn(self.state.ai, rng=self.rng)

        self.collaborator.render(GameSnapshot.capture(self.state))
        self._notify(GameEvent.AI_ROLLED, PlayerKind.AI, dice=list(result.dice.values))
        self.collaborator.pause(self.settings.ai_rolled_delay)
        self._notify(
            GameEvent.AI_CHOSE,
            PlayerKind.AI,
            category=result.category.name,
            label=result.category.label,
            points=result.points,
        )
        self.collaborator.pause(self.settings.ai_chose_delay)
        return result.points

    def finish(self) -> GameResult:
        """Announce the outcome and save the human's score."""
        human_score = self.state.human.total
        ai_score = self.state.ai.total
        outcome = self.state.outcome()

        entries = self.store.load()
        new_highscore = RankingStore.is_new_highscore(entries, human_score)
        self._notify(
            GameEvent.GAME_OVER,
            outcome=outcome.value,
            human_score=human_score,
            ai_score=ai_score,
            new_highscore=new_highscore,
        )
        if new_highscore:
            self._notify(GameEvent.NEW_HIGHSCORE, PlayerKind.HUMAN, score=human_score)

        top = RankingStore.top(entries, self.settings.ranking_display_limit)
        name = self.collaborator.ask_name(top, new_highscore)
        position = None
        if name is not None:
            position = RankingStore.insert(entries, RankingEntry.from_input(name, human_score))
            self.store.persist(entries)
            self._notify(GameEvent.RANKING_SAVED, PlayerKind.HUMAN, position=position)

        logger.info("Game over: %s %d-%d", outcome.value, human_score, ai_score)
        return GameResult(
            outcome=outcome,
            human_score=human_score,
            ai_score=ai_score,
            new_highscore=new_highscore,
            ranking_position=position,
        )

    def _notify(self, event: GameEvent, player: PlayerKind | None = None, **data) -> None:
        self.collaborator.notify(
            EventPayload(event=event, round=self.state.turn.round, player=player, data=data)
        )
