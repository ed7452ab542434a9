"""
Grading engine.

Grade lookup for single marks, best-seven selection and mean grade
conversion. Everything here is pure: results depend only on the
arguments and the immutable subject catalog.
"""

from .lookup import describe_mark, grade_for
from .mean import points_to_grade, round_half_up
from .selector import compute_outcome, score_entries, select_best_seven

__all__ = [
    "grade_for",
    "describe_mark",
    "points_to_grade",
    "round_half_up",
    "compute_outcome",
    "score_entries",
    "select_best_seven",
]
