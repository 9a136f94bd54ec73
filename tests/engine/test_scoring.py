"""
Yahtzee Duel - Score Engine Tests

Scenario vectors plus exhaustive property checks over all 7776 rolls.
"""

import itertools
import random
from collections import Counter

import pytest

from yahtzee.engine.base import Category, DiceRoll
from yahtzee.engine.errors import InvalidInput
from yahtzee.engine.scoring import ScoreEngine

ALL_ROLLS = list(itertools.product(range(1, 7), repeat=5))


class TestScenarios:
    """Known rolls and their complete score vectors."""

    @pytest.mark.parametrize(
        "name",
        [
            "three_of_a_kind",
            "four_of_a_kind",
            "full_house",
            "yahtzee",
            "small_straight",
            "large_straight",
        ],
    )
    def test_scenario_vector(self, scoring_scenarios, name):
        dice, expected = scoring_scenarios[name]
        assert ScoreEngine.compute_scores(dice) == expected

    def test_accepts_dice_roll(self):
        roll = DiceRoll(values=(4, 4, 3, 3, 3))
        assert ScoreEngine.compute_scores(roll)[Category.FULL_HOUSE.index] == 25

    def test_input_order_does_not_matter(self):
        assert ScoreEngine.compute_scores((5, 4, 3, 2, 1)) == ScoreEngine.compute_scores((1, 2, 3, 4, 5))

    def test_returns_thirteen_scores(self):
        assert len(ScoreEngine.compute_scores((2, 2, 5, 6, 1))) == 13

    def test_preview_keyed_by_category(self):
        preview = ScoreEngine.preview((6, 6, 6, 6, 2))
        assert preview[Category.SIXES] == 24
        assert preview[Category.FOUR_OF_A_KIND] == 26
        assert preview[Category.FULL_HOUSE] == 0
        assert set(preview) == set(Category)


class TestEdgeCases:
    """Rule boundaries."""

    def test_four_plus_one_is_not_full_house(self):
        assert ScoreEngine.compute_scores((2, 2, 2, 2, 5))[Category.FULL_HOUSE.index] == 0

    def test_yahtzee_is_not_full_house(self):
        assert ScoreEngine.compute_scores((6, 6, 6, 6, 6))[Category.FULL_HOUSE.index] == 0

    def test_yahtzee_fills_three_and_four_of_a_kind(self):
        scores = ScoreEngine.compute_scores((6, 6, 6, 6, 6))
        assert scores[Category.THREE_OF_A_KIND.index] == 30
        assert scores[Category.FOUR_OF_A_KIND.index] == 30
        assert scores[Category.YAHTZEE.index] == 50

    def test_duplicate_inside_run_keeps_small_straight(self):
        scores = ScoreEngine.compute_scores((2, 3, 3, 4, 5))
        assert scores[Category.SMALL_STRAIGHT.index] == 30
        assert scores[Category.LARGE_STRAIGHT.index] == 0

    def test_gap_breaks_run(self):
        scores = ScoreEngine.compute_scores((1, 2, 3, 5, 6))
        assert scores[Category.SMALL_STRAIGHT.index] == 0

    def test_high_large_straight(self):
        scores = ScoreEngine.compute_scores((6, 5, 4, 3, 2))
        assert scores[Category.SMALL_STRAIGHT.index] == 30
        assert scores[Category.LARGE_STRAIGHT.index] == 40

    @pytest.mark.parametrize(
        "dice,expected",
        [
            ((1, 2, 2, 3, 4), 4),
            ((1, 1, 1, 1, 1), 1),
            ((1, 3, 5, 2, 4), 5),
            ((1, 2, 4, 5, 6), 3),
            ((6, 6, 1, 1, 2), 2),
        ],
    )
    def test_straight_length(self, dice, expected):
        assert ScoreEngine.straight_length(dice) == expected


class TestInvalidInput:
    """Contract violations fail fast."""

    @pytest.mark.parametrize("dice", [(1, 2, 3, 4), (1, 2, 3, 4, 5, 6), ()])
    def test_wrong_length_raises(self, dice):
        with pytest.raises(InvalidInput, match="Exactly 5 dice"):
            ScoreEngine.compute_scores(dice)

    @pytest.mark.parametrize("dice", [(0, 1, 2, 3, 4), (1, 2, 3, 4, 7)])
    def test_out_of_range_raises(self, dice):
        with pytest.raises(InvalidInput, match="must be between 1 and 6"):
            ScoreEngine.compute_scores(dice)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            ScoreEngine.compute_scores((1, 2))


class TestProperties:
    """Properties that hold for every possible roll."""

    def test_chance_is_sum(self):
        for dice in ALL_ROLLS:
            assert ScoreEngine.compute_scores(dice)[Category.CHANCE.index] == sum(dice)

    def test_full_house_iff_three_and_two(self):
        for dice in ALL_ROLLS:
            is_full_house = sorted(Counter(dice).values()) == [2, 3]
            score = ScoreEngine.compute_scores(dice)[Category.FULL_HOUSE.index]
            assert (score == 25) == is_full_house
            assert score in (0, 25)

    def test_yahtzee_iff_all_same(self):
        for dice in ALL_ROLLS:
            expected = 50 if len(set(dice)) == 1 else 0
            assert ScoreEngine.compute_scores(dice)[Category.YAHTZEE.index] == expected

    def test_upper_is_count_times_face(self):
        for dice in ALL_ROLLS:
            scores = ScoreEngine.compute_scores(dice)
            for category in Category.upper():
                assert scores[category.index] == dice.count(category.face) * category.face

    def test_large_straight_implies_small(self):
        for dice in ALL_ROLLS:
            scores = ScoreEngine.compute_scores(dice)
            if scores[Category.LARGE_STRAIGHT.index]:
                assert scores[Category.SMALL_STRAIGHT.index] == 30


class TestRolling:
    """Tests for roll_dice() and reroll()."""

    def test_roll_dice_range(self):
        rng = random.Random(7)
        for _ in range(200):
            roll = ScoreEngine.roll_dice(rng)
            assert len(roll) == 5
            assert all(1 <= v <= 6 for v in roll)

    def test_reroll_keeps_held_dice(self, sequence_rng):
        rng = sequence_rng([6, 6])
        roll = ScoreEngine.reroll((1, 2, 3, 4, 5), [True, False, True, False, True], rng)
        assert roll.values == (1, 6, 3, 6, 5)
        assert rng.calls == 2

    def test_reroll_all_held_is_noop(self, sequence_rng):
        rng = sequence_rng([])
        roll = ScoreEngine.reroll(DiceRoll(values=(1, 2, 3, 4, 5)), [True] * 5, rng)
        assert roll.values == (1, 2, 3, 4, 5)

    def test_reroll_bad_mask_raises(self):
        with pytest.raises(InvalidInput, match="Hold mask"):
            ScoreEngine.reroll((1, 2, 3, 4, 5), [True, False])
