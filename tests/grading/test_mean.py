"""
Unit tests for mean grade conversion.
"""

import pytest

from kcse_scoreboard.core.models import Grade
from kcse_scoreboard.grading import points_to_grade, round_half_up


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    @pytest.mark.parametrize("value, expected", [
        (10.5, 11),
        (9.5, 10),
        (8.5, 9),
        (9.43, 9),
        (9.49, 9),
        (9.51, 10),
        (12.0, 12),
        (0.4, 0),
    ])
    def test_round_when_value_then_ties_go_up(self, value, expected):
        """Halves round up, unlike Python's banker's rounding."""
        assert round_half_up(value) == expected

    def test_round_when_negative_half_then_away_from_zero(self):
        """Negative halves round away from zero."""
        assert round_half_up(-2.5) == -3


class TestPointsToGrade:
    """Tests for points_to_grade()."""

    def test_points_to_grade_when_sum_73_5_then_a_minus(self):
        """73.5 / 7 = 10.5 rounds to 11: A-."""
        assert points_to_grade(73.5 / 7) is Grade.A_MINUS

    def test_points_to_grade_when_sum_70_then_b_plus(self):
        """70 / 7 = 10: B+."""
        assert points_to_grade(70 / 7) is Grade.B_PLUS

    def test_points_to_grade_when_sum_66_then_b(self):
        """66 / 7 = 9.43 rounds to 9: B."""
        assert points_to_grade(66 / 7) is Grade.B

    @pytest.mark.parametrize("mean, expected", [
        (12, Grade.A),
        (11.6, Grade.A),
        (11.4, Grade.A_MINUS),
        (7, Grade.C_PLUS),
        (2, Grade.D_MINUS),
        (1.49, Grade.E),
        (1, Grade.E),
    ])
    def test_points_to_grade_when_mean_then_table(self, mean, expected):
        """Rounded means follow the 12-level table."""
        assert points_to_grade(mean) is expected
