"""
Yahtzee Duel - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from pathlib import Path

import pytest

from yahtzee.config.settings import Settings
from yahtzee.session.actions import Confirm, Direction, MoveFocus, MoveSelection
from yahtzee.session.events import Focus


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_scenarios() -> dict[str, tuple[tuple[int, ...], tuple[int, ...]]]:
    """
    Rolls with their full 13-category score vectors (Aces..Chance).

    Returns:
        Dict mapping name to (dice_values, expected_scores)
    """
    return {
        "three_of_a_kind": ((1, 2, 3, 3, 3), (1, 2, 9, 0, 0, 0, 12, 0, 0, 0, 0, 0, 12)),
        "four_of_a_kind": ((1, 3, 3, 3, 3), (1, 0, 12, 0, 0, 0, 13, 13, 0, 0, 0, 0, 13)),
        "full_house": ((4, 4, 3, 3, 3), (0, 0, 9, 8, 0, 0, 17, 0, 25, 0, 0, 0, 17)),
        "yahtzee": ((1, 1, 1, 1, 1), (5, 0, 0, 0, 0, 0, 5, 5, 0, 0, 0, 50, 5)),
        "small_straight": ((3, 2, 1, 4, 3), (1, 2, 6, 4, 0, 0, 0, 0, 0, 30, 0, 0, 13)),
        "large_straight": ((3, 2, 1, 4, 5), (1, 2, 3, 4, 5, 0, 0, 0, 0, 30, 40, 0, 15)),
    }


# =============================================================================
# RANDOMNESS
# =============================================================================

class SequenceRandom:
    """Stand-in for random.Random that returns scripted faces in order."""

    def __init__(self, faces):
        self.faces = list(faces)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return self.faces.pop(0)


@pytest.fixture
def sequence_rng():
    """Factory for scripted random sources."""
    return SequenceRandom


# =============================================================================
# SESSION FIXTURES
# =============================================================================

@pytest.fixture
def ranking_path(tmp_path: Path) -> Path:
    return tmp_path / "highscores.txt"


@pytest.fixture
def settings(ranking_path: Path) -> Settings:
    """Settings with no AI pacing delays and a temporary ranking file."""
    return Settings(
        ranking_path=ranking_path,
        ai_rolling_delay=0,
        ai_rolled_delay=0,
        ai_chose_delay=0,
    )


class ScriptedCollaborator:
    """
    Collaborator that plays scripted actions first, then plays on autopilot:
    focus the category list and commit the first open category.
    """

    def __init__(self, script=None, quit_answers=None, name="Tester"):
        self.script = list(script or [])
        self.quit_answers = list(quit_answers or [])
        self.name = name
        self.snapshots = []
        self.events = []
        self.pauses = []
        self.asked_ranking = None

    def next_action(self):
        if self.script:
            return self.script.pop(0)

        snapshot = self.snapshots[-1]
        if snapshot.focus is not Focus.CATEGORIES:
            return MoveFocus(Direction.LEFT)

        target = next(
            i for i, entry in enumerate(snapshot.human["categories"]) if not entry["used"]
        )
        if snapshot.selected.index < target:
            return MoveSelection(Direction.DOWN)
        if snapshot.selected.index > target:
            return MoveSelection(Direction.UP)
        return Confirm()

    def render(self, snapshot):
        self.snapshots.append(snapshot)

    def notify(self, payload):
        self.events.append(payload)

    def confirm_quit(self):
        return self.quit_answers.pop(0) if self.quit_answers else False

    def ask_name(self, ranking, new_highscore):
        self.asked_ranking = (ranking, new_highscore)
        return self.name

    def pause(self, seconds):
        self.pauses.append(seconds)

    def events_of(self, event):
        return [p for p in self.events if p.event is event]


@pytest.fixture
def collaborator_factory():
    return ScriptedCollaborator
