"""
Module: results

Purpose:
    Provides the input and output records of a grading run: MarkEntry
    (what the caller supplies), ScoredResult (one graded subject) and
    SessionOutcome (the best seven plus the mean grade).

Key Functions:
    - ScoredResult.from_subject(subject, mark, result): Build a graded row
    - SessionOutcome.total_points: Sum across the best seven
    - SessionOutcome.mean_points: total_points / 7
    - SessionOutcome.to_dict(): Plain dict for display layers

Dependencies:
    - dataclasses (std)
    - .grades: Grade, GradeResult
    - .subjects: Subject

Used By:
    - grading.selector
    - session
    - output
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from kcse_scoreboard.config import BEST_SUBJECT_COUNT

from .grades import Grade, GradeResult
from .subjects import Subject


@dataclass(frozen=True, slots=True)
class MarkEntry:
    """Subject code and raw mark supplied by the caller."""

    code: str
    mark: float


@dataclass(frozen=True, slots=True)
class ScoredResult:
    """
    One graded subject (immutable).

    Attributes:
        code: Subject code
        name: Subject display name
        mark: Raw mark (0-100)
        grade: Letter grade from the subject's scale
        points: Points for the grade
        mandatory: Whether the subject is mandatory
    """

    code: str
    name: str
    mark: float
    grade: Grade
    points: int
    mandatory: bool

    @classmethod
    def from_subject(cls, subject: Subject, mark: float, result: GradeResult) -> ScoredResult:
        """Combine a catalog subject, its mark and the looked-up grade."""
        return cls(
            code=subject.code,
            name=subject.name,
            mark=mark,
            grade=result.grade,
            points=result.points,
            mandatory=subject.mandatory,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "mark": self.mark,
            "grade": self.grade.value,
            "points": self.points,
            "mandatory": self.mandatory,
        }


@dataclass(frozen=True)
class SessionOutcome:
    """
    Result of one grading run (immutable).

    Attributes:
        best_seven: The counted subjects, alphabetical by name
        mean_grade: Grade for the rounded mean points

    Invariants:
        - len(best_seven) == 7

    Example:
        >>> outcome = compute_outcome(entries)
        >>> outcome.mean_grade
        <Grade.B: 'B'>
        >>> round(outcome.mean_points, 2)
        9.43
    """

    best_seven: Tuple[ScoredResult, ...]
    mean_grade: Grade

    def __post_init__(self) -> None:
        """Validate outcome on construction."""
        if len(self.best_seven) != BEST_SUBJECT_COUNT:
            raise ValueError(
                f"Outcome must hold exactly {BEST_SUBJECT_COUNT} subjects, "
                f"got {len(self.best_seven)}"
            )

    @property
    def total_points(self) -> int:
        """Sum of points across the best seven."""
        return sum(result.points for result in self.best_seven)

    @property
    def mean_points(self) -> float:
        """Unrounded mean points, always divided by seven."""
        return self.total_points / BEST_SUBJECT_COUNT

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(result.code for result in self.best_seven)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for display layers."""
        return {
            "best_seven": [result.to_dict() for result in self.best_seven],
            "mean_grade": self.mean_grade.value,
            "total_points": self.total_points,
            "mean_points": self.mean_points,
        }
