"""
Yahtzee Duel - Turn Cycle Tests
"""

import pytest

from yahtzee.engine.base import PlayerKind
from yahtzee.engine.errors import InvariantViolation
from yahtzee.engine.turn import Turn


class TestTurn:
    """Tests for the Turn state machine."""

    def test_initial_is_human_round_one(self):
        turn = Turn.initial()
        assert turn.player is PlayerKind.HUMAN
        assert turn.round == 1
        assert not turn.is_terminal

    def test_human_to_ai_same_round(self):
        turn = Turn.initial().next()
        assert turn == Turn(player=PlayerKind.AI, round=1)

    def test_ai_to_human_next_round(self):
        turn = Turn(player=PlayerKind.AI, round=5).next()
        assert turn == Turn(player=PlayerKind.HUMAN, round=6)

    def test_strict_alternation_until_terminal(self):
        turn = Turn.initial()
        steps = 0
        while not turn.is_terminal:
            following = turn.next()
            assert following.player is not turn.player
            turn = following
            steps += 1
        assert steps == 26
        assert turn == Turn(player=PlayerKind.HUMAN, round=14)

    def test_no_turn_after_terminal(self):
        with pytest.raises(InvariantViolation):
            Turn(player=PlayerKind.HUMAN, round=14).next()

    def test_is_immutable(self):
        turn = Turn.initial()
        with pytest.raises(AttributeError):
            turn.round = 3

    def test_str(self):
        assert str(Turn(PlayerKind.HUMAN, 3)) == "Your turn (3)"
        assert str(Turn(PlayerKind.AI, 3)) == "AI turn (3)"
