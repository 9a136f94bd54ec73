"""
Yahtzee Duel - Error Taxonomy

Exceptions raised by the engine and the ranking store. Each one also derives
from the closest built-in exception so callers that only know about
ValueError / RuntimeError / OSError keep working.
"""


class YahtzeeError(Exception):
    """Base class for all game errors."""


class InvalidInput(YahtzeeError, ValueError):
    """Dice or indices outside the accepted range (programming error)."""


class InvariantViolation(YahtzeeError, RuntimeError):
    """A state machine was driven through a transition it does not allow."""


class StorageUnavailable(YahtzeeError, OSError):
    """The ranking file could not be opened for writing."""


class MalformedRecord(YahtzeeError, ValueError):
    """A ranking line that does not parse as ``name:score``."""


class SessionAborted(YahtzeeError):
    """The human confirmed a quit request."""
