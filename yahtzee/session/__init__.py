"""
Yahtzee Duel Session Layer.

Turn loop, action interpretation and narration events between the engine and
the rendering/input shell.
"""

from yahtzee.session.actions import (
    Action,
    Confirm,
    Direction,
    MoveFocus,
    MoveSelection,
    Quit,
    ToggleHold,
)
from yahtzee.session.controller import Collaborator, GameResult, GameSession, HumanTurn
from yahtzee.session.events import EventPayload, Focus, GameEvent, GameSnapshot

__all__ = [
    # Actions
    "Action",
    "Confirm",
    "Direction",
    "MoveFocus",
    "MoveSelection",
    "Quit",
    "ToggleHold",
    # Events
    "EventPayload",
    "Focus",
    "GameEvent",
    "GameSnapshot",
    # Controller
    "Collaborator",
    "GameResult",
    "GameSession",
    "HumanTurn",
]
