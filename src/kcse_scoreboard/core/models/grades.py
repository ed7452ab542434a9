"""
Module: grades

Purpose:
    Provides the Grade enumeration, the GradeBand dataclass that maps an
    inclusive mark range to a grade, and the GradeResult returned by
    lookups. These are the smallest building blocks of a subject's
    grading scale.

Key Functions:
    - Grade.points: Point value for a letter grade (A=12 ... E=1)
    - Grade.from_points(points): Letter grade for a whole point value
    - GradeBand.contains(mark): Whether a mark falls inside the band
    - GradeBand.to_result(): GradeResult for the band

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.subjects.Subject
    - grading.lookup
    - grading.mean
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kcse_scoreboard.config import MAX_MARK, MIN_MARK


class Grade(str, Enum):
    """Letter grade on the 12-point scale."""
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D_PLUS = "D+"
    D = "D"
    D_MINUS = "D-"
    E = "E"

    def __str__(self) -> str:
        return self.value

    @property
    def points(self) -> int:
        """Points awarded for this grade (A=12 down to E=1)."""
        return _POINTS[self]

    @classmethod
    def from_points(cls, points: int) -> Grade:
        """
        Map whole points to a grade.

        Anything at or above 12 is an A, anything below 2 is an E.

        Args:
            points: Whole point value

        Returns:
            Grade for the point value

        Example:
            >>> Grade.from_points(9)
            <Grade.B: 'B'>
        """
        for grade in cls:
            if points >= grade.points:
                return grade
        return cls.E


_POINTS = {grade: 12 - index for index, grade in enumerate(Grade)}


@dataclass(frozen=True, slots=True)
class GradeResult:
    """Grade and points awarded for a single mark."""

    grade: Grade
    points: int


@dataclass(frozen=True, slots=True)
class GradeBand:
    """
    Inclusive mark range mapped to one grade (immutable).

    Attributes:
        min_mark: Lowest whole mark in the band (inclusive)
        max_mark: Highest whole mark in the band (inclusive)
        grade: Letter grade awarded
        points: Points awarded, always equal to grade.points

    Invariants:
        - 0 <= min_mark <= max_mark <= 100
        - points == grade.points

    Example:
        >>> band = GradeBand(70, 74, Grade.B_PLUS, 10)
        >>> band.contains(74)
        True
    """

    min_mark: int
    max_mark: int
    grade: Grade
    points: int

    def __post_init__(self) -> None:
        """Validate band on construction."""
        if not isinstance(self.grade, Grade):
            raise ValueError(f"Invalid grade: {self.grade!r}")
        if not MIN_MARK <= self.min_mark <= self.max_mark <= MAX_MARK:
            raise ValueError(
                f"Invalid band range {self.min_mark}-{self.max_mark} for grade {self.grade}"
            )
        if self.points != self.grade.points:
            raise ValueError(
                f"Grade {self.grade} is worth {self.grade.points} points, not {self.points}"
            )

    def contains(self, mark: float) -> bool:
        """
        Check whether a mark belongs to this band.

        Both limits are inclusive. A decimal mark between two bands'
        whole-number limits (79.5 between 75-79 and 80-100) is in neither.

        Args:
            mark: Mark to test

        Returns:
            True if min_mark <= mark <= max_mark
        """
        return self.min_mark <= mark <= self.max_mark

    def to_result(self) -> GradeResult:
        """Return the GradeResult awarded by this band."""
        return GradeResult(grade=self.grade, points=self.points)

    def __repr__(self) -> str:
        return f"GradeBand({self.min_mark}-{self.max_mark}, {self.grade.value!r})"
