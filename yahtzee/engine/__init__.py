"""
Yahtzee Duel Game Engine.

Pure Python game logic with zero UI/storage dependencies.
Handles dice rolling, category scoring, score books, turn order and the AI.
"""

from yahtzee.engine.ai import AIPolicy, AITurnResult
from yahtzee.engine.base import Category, DiceRoll, PlayerKind
from yahtzee.engine.errors import (
    InvalidInput,
    InvariantViolation,
    MalformedRecord,
    SessionAborted,
    StorageUnavailable,
    YahtzeeError,
)
from yahtzee.engine.game import GameOutcome, GameState
from yahtzee.engine.roll_state import RollPhase, RollState
from yahtzee.engine.scorebook import ScoreBook
from yahtzee.engine.scoring import ScoreEngine
from yahtzee.engine.turn import Turn

__all__ = [
    # Data Classes
    "DiceRoll",
    "AITurnResult",
    "GameState",
    "ScoreBook",
    "Turn",
    # Enums
    "Category",
    "GameOutcome",
    "PlayerKind",
    "RollPhase",
    # Engines
    "AIPolicy",
    "RollState",
    "ScoreEngine",
    # Errors
    "YahtzeeError",
    "InvalidInput",
    "InvariantViolation",
    "MalformedRecord",
    "SessionAborted",
    "StorageUnavailable",
]
