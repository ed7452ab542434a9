"""
Unit tests for grade lookup.

Verifies grade_for() never raises for unknown subjects or unusable marks.
"""

import math
from decimal import Decimal

import pytest

from kcse_scoreboard.core.models import Grade, GradeResult
from kcse_scoreboard.grading import describe_mark, grade_for


class TestGradeFor:
    """Tests for grade_for()."""

    def test_grade_for_when_maths_70_then_a_twelve(self):
        """Mathematics 70 falls in 70-100: A, 12 points."""
        assert grade_for("121", 70) == GradeResult(Grade.A, 12)

    def test_grade_for_when_english_74_then_b_plus_ten(self):
        """English 74 falls in 70-74: B+, 10 points."""
        assert grade_for("101", 74) == GradeResult(Grade.B_PLUS, 10)

    @pytest.mark.parametrize("code, mark, expected", [
        ("101", 0, Grade.E),
        ("101", 100, Grade.A),
        ("121", 11, Grade.E),
        ("121", 12, Grade.D_MINUS),
        ("232", 9, Grade.E),
        ("232", 10, Grade.D_MINUS),
        ("443", 87, Grade.A_MINUS),
        ("443", 88, Grade.A),
    ])
    def test_grade_for_when_on_band_edges_then_expected(self, code, mark, expected):
        """Band limits are inclusive at both ends."""
        assert grade_for(code, mark).grade is expected

    @pytest.mark.parametrize("mark", [79.5, 74.5, 29.5])
    def test_grade_for_when_decimal_between_bands_then_none(self, mark):
        """79.5 in English is above A- (75-79) and below A (80): no band."""
        assert grade_for("101", mark) is None

    def test_grade_for_when_decimal_inside_band_then_graded(self):
        """Decimals within a band's limits are graded normally."""
        assert grade_for("101", 77.5).grade is Grade.A_MINUS
        assert grade_for("101", 80.0).grade is Grade.A
        assert describe_mark("101", 79.5) is None

    def test_grade_for_when_unknown_subject_then_none(self):
        """Unknown codes return None."""
        assert grade_for("999", 50) is None
        assert grade_for(None, 50) is None

    @pytest.mark.parametrize("mark", [-1, 100.5, 150, math.nan, -math.inf, None, "abc"])
    def test_grade_for_when_mark_unusable_then_none(self, mark):
        """Out-of-range and non-numeric marks return None instead of raising."""
        assert grade_for("101", mark) is None

    def test_grade_for_when_decimal_type_then_graded(self):
        """decimal.Decimal marks are graded like floats."""
        assert grade_for("101", Decimal("74")) == GradeResult(Grade.B_PLUS, 10)
        assert grade_for("101", Decimal("77.5")).grade is Grade.A_MINUS
        assert grade_for("101", Decimal("79.5")) is None

    def test_grade_for_when_custom_catalog_then_uses_it(self, catalog):
        """An explicit catalog is honoured."""
        assert grade_for("121", 70, catalog) == GradeResult(Grade.A, 12)


class TestDescribeMark:
    """Tests for describe_mark()."""

    def test_describe_when_graded_then_letter(self):
        """describe_mark returns the letter."""
        assert describe_mark("101", 74) == "B+"

    def test_describe_when_no_grade_then_none(self):
        """describe_mark returns None when there is no grade."""
        assert describe_mark("101", 101) is None
