"""
Yahtzee Duel - Game State Tests
"""

from yahtzee.engine.base import Category, PlayerKind
from yahtzee.engine.game import GameOutcome, GameState
from yahtzee.engine.turn import Turn


class TestGameState:
    def test_defaults(self):
        state = GameState()
        assert state.turn == Turn.initial()
        assert state.human is not state.ai
        assert not state.is_over

    def test_current_book_follows_turn(self):
        state = GameState()
        assert state.current_book is state.human
        state.advance()
        assert state.current_book is state.ai
        assert state.book_for(PlayerKind.HUMAN) is state.human

    def test_over_after_thirteen_rounds(self):
        state = GameState()
        for _ in range(26):
            state.advance()
        assert state.is_over
        assert state.turn.round == 14


class TestOutcome:
    def test_win(self):
        state = GameState()
        state.human.commit(Category.CHANCE, 20)
        state.ai.commit(Category.CHANCE, 10)
        assert state.outcome() is GameOutcome.WIN

    def test_tie(self):
        assert GameState().outcome() is GameOutcome.TIE

    def test_loss(self):
        state = GameState()
        state.ai.commit(Category.YAHTZEE, 50)
        assert state.outcome() is GameOutcome.LOSS
