"""
Yahtzee Duel - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive InvalidInput exceptions.
"""

from typing import Sequence

from yahtzee.engine.base import DIE_FACES, NUM_DICE
from yahtzee.engine.errors import InvalidInput


def validate_dice_values(values: Sequence[int]) -> tuple[int, ...]:
    """
    Validate and normalize a set of five dice.

    Args:
        values: Sequence of dice values to validate

    Returns:
        Validated values as a tuple

    Raises:
        InvalidInput: If there are not exactly five dice or a face is out of range
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count != NUM_DICE:
        raise InvalidInput(f"Exactly {NUM_DICE} dice required, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (1 <= value <= DIE_FACES):
            raise InvalidInput(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_die_index(index: int) -> int:
    """
    Validate the index of a single die.

    Raises:
        InvalidInput: If the index is not 0-4
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidInput(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < NUM_DICE):
        raise InvalidInput(
            f"Die index {index} is out of range. Must be between 0 and {NUM_DICE - 1}."
        )

    return index


def validate_held_mask(mask: Sequence[bool]) -> tuple[bool, ...]:
    """
    Validate a hold mask (one flag per die).

    Raises:
        InvalidInput: If the mask does not have one entry per die
    """
    mask_tuple = tuple(bool(flag) for flag in mask)
    if len(mask_tuple) != NUM_DICE:
        raise InvalidInput(
            f"Hold mask must have {NUM_DICE} entries, got {len(mask_tuple)}."
        )
    return mask_tuple


def validate_score(score: int) -> int:
    """
    Validate a category score about to be committed.

    Raises:
        InvalidInput: If the score is not a non-negative integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidInput(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise InvalidInput(f"Score cannot be negative, got {score}.")

    return score
