"""
Unit Tests for Grade Models

Tests for the Grade enumeration, GradeBand and GradeResult.
"""

import pytest

from kcse_scoreboard.core.models.grades import Grade, GradeBand, GradeResult


class TestGrade:
    """Tests for Grade enumeration."""

    def test_points_when_each_grade_then_twelve_down_to_one(self):
        """Grades should be worth 12 (A) down to 1 (E) in order."""
        assert [g.points for g in Grade] == list(range(12, 0, -1))

    def test_values_when_listed_then_match_letter_scale(self):
        """Enumeration values should be the printed letters."""
        assert [g.value for g in Grade] == [
            "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D+", "D", "D-", "E",
        ]

    @pytest.mark.parametrize("points, expected", [
        (12, Grade.A),
        (11, Grade.A_MINUS),
        (10, Grade.B_PLUS),
        (9, Grade.B),
        (8, Grade.B_MINUS),
        (7, Grade.C_PLUS),
        (6, Grade.C),
        (5, Grade.C_MINUS),
        (4, Grade.D_PLUS),
        (3, Grade.D),
        (2, Grade.D_MINUS),
        (1, Grade.E),
    ])
    def test_from_points_when_whole_points_then_maps_table(self, points, expected):
        """from_points should follow the 12-level table."""
        assert Grade.from_points(points) is expected

    def test_from_points_when_above_twelve_then_a(self):
        """Anything above 12 is still an A."""
        assert Grade.from_points(15) is Grade.A

    def test_from_points_when_zero_or_negative_then_e(self):
        """Anything below 2 is an E."""
        assert Grade.from_points(0) is Grade.E
        assert Grade.from_points(-3) is Grade.E

    def test_str_when_called_then_returns_letter(self):
        """str() should give the letter."""
        assert str(Grade.B_PLUS) == "B+"


class TestGradeBand:
    """Tests for GradeBand dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_values_then_creates_band(self):
        """Valid band should be created successfully."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        assert band.min_mark == 70
        assert band.max_mark == 74

    def test_init_when_min_above_max_then_raises_error(self):
        """Reversed range should raise ValueError."""
        with pytest.raises(ValueError, match="Invalid band range"):
            GradeBand(75, 70, Grade.B_PLUS, 10)

    def test_init_when_above_hundred_then_raises_error(self):
        """Bands cannot reach past 100."""
        with pytest.raises(ValueError, match="Invalid band range"):
            GradeBand(90, 101, Grade.A, 12)

    def test_init_when_points_mismatch_grade_then_raises_error(self):
        """Points must equal the grade's points."""
        with pytest.raises(ValueError, match="worth 10 points"):
            GradeBand(70, 74, Grade.B_PLUS, 9)

    def test_init_when_grade_not_enum_then_raises_error(self):
        """Plain strings are not accepted as grades."""
        with pytest.raises(ValueError, match="Invalid grade"):
            GradeBand(70, 74, "B+", 10)  # type: ignore[arg-type]

    def test_init_when_frozen_then_immutable(self):
        """GradeBand should be immutable (frozen)."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        with pytest.raises(AttributeError):
            band.min_mark = 60  # type: ignore

    # ─────────────────────────────────────────────────────────────────────────
    # contains() Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_contains_when_on_limits_then_true(self):
        """Both limits are inclusive."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        assert band.contains(70)
        assert band.contains(74)

    def test_contains_when_outside_then_false(self):
        """Marks outside the range do not match."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        assert not band.contains(69)
        assert not band.contains(75)

    def test_contains_when_decimal_inside_then_true(self):
        """Decimals strictly inside the limits match."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        assert band.contains(72.5)
        assert band.contains(70.0)

    def test_contains_when_decimal_above_max_then_false(self):
        """74.5 lies past the upper limit of a 70-74 band."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        assert not band.contains(74.5)
        assert not band.contains(74.01)

    def test_contains_when_top_band_then_hundred_is_ceiling(self):
        """The top band stops at exactly 100."""
        band = GradeBand(80, 100, Grade.A, 12)
        assert band.contains(100)
        assert not band.contains(100.5)

    def test_to_result_when_called_then_returns_grade_and_points(self):
        """to_result should carry the band's grade and points."""
        band = GradeBand(70, 74, Grade.B_PLUS, 10)
        assert band.to_result() == GradeResult(Grade.B_PLUS, 10)
