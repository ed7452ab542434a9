"""
Module: grading.mean

Purpose:
    Convert mean points to a mean grade.

Key Functions:
    - round_half_up(): Round to nearest whole number, ties away from zero
    - points_to_grade(): Mean points -> Grade
"""

from __future__ import annotations

import math

from kcse_scoreboard.core.models import Grade


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with .5 rounded away from zero.

    Python's round() uses banker's rounding (round(10.5) == 10), which
    would under-grade a candidate sitting exactly on a boundary.

    Example:
        >>> round_half_up(10.5)
        11
        >>> round_half_up(9.43)
        9
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def points_to_grade(mean_points: float) -> Grade:
    """
    Map mean points to the mean grade.

    The mean is rounded half up and then mapped 12->A, 11->A-, ... 2->D-,
    anything lower -> E.

    Args:
        mean_points: Unrounded mean points

    Returns:
        Mean grade

    Example:
        >>> points_to_grade(66 / 7)
        <Grade.B: 'B'>
    """
    return Grade.from_points(round_half_up(mean_points))
