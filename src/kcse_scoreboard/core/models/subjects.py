"""
Module: subjects

Purpose:
    Provides the Subject dataclass - one examinable subject with its own
    ordered grading scale. Scales differ per subject (the mark needed for
    an A ranges from 60 to 90), so each subject carries its own bands.

Key Functions:
    - Subject.grade_for(mark): First band containing the mark, or None
    - Subject.coverage_gaps(): Whole marks not covered by exactly one band
    - Subject.from_dict(data): Build from catalog JSON

Dependencies:
    - dataclasses (std)
    - decimal (std)
    - math (std)
    - .grades: Grade, GradeBand, GradeResult

Used By:
    - catalog: registry and validation
    - grading.lookup
    - session
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Dict, List, Optional, Tuple

from kcse_scoreboard.config import MAX_MARK, MIN_MARK

from .grades import Grade, GradeBand, GradeResult


@dataclass(frozen=True, slots=True)
class Subject:
    """
    Examinable subject with its grading scale (immutable).

    Attributes:
        code: Unique subject code like "121"
        name: Display name like "MATHEMATICS"
        mandatory: Whether the subject always counts in the best seven
        bands: Grade bands in lookup order (first match wins)

    Invariants:
        - code and name are non-empty
        - bands is non-empty

    The partition invariant (every whole mark covered exactly once) is
    enforced by the catalog loader, not here, so a hand-built subject may
    carry overlapping bands and still resolve by first match.

    Example:
        >>> maths = Subject("121", "MATHEMATICS", True, bands)
        >>> maths.grade_for(70)
        GradeResult(grade=<Grade.A: 'A'>, points=12)
    """

    code: str
    name: str
    mandatory: bool
    bands: Tuple[GradeBand, ...]

    def __post_init__(self) -> None:
        """Validate subject on construction."""
        if not self.code:
            raise ValueError("Subject code cannot be empty")
        if not self.name:
            raise ValueError(f"Subject {self.code} has no name")
        if not self.bands:
            raise ValueError(f"Subject {self.code} has no grade bands")

    def grade_for(self, mark: Any) -> Optional[GradeResult]:
        """
        Look up the grade for a mark.

        Scans bands in stored order and returns the first that contains
        the mark. Ints, floats and Decimals are accepted. Marks that are
        not numbers, not finite, or outside 0-100 return None rather than
        raising.

        Args:
            mark: Raw mark

        Returns:
            GradeResult, or None if no band matches
        """
        if isinstance(mark, Decimal):
            if not mark.is_finite():
                return None
            mark = float(mark)
        if isinstance(mark, bool) or not isinstance(mark, Real):
            return None
        if not math.isfinite(mark) or not MIN_MARK <= mark <= MAX_MARK:
            return None
        for band in self.bands:
            if band.contains(mark):
                return band.to_result()
        return None

    def coverage_gaps(self) -> Dict[int, int]:
        """
        Count band matches for every whole mark that is not matched once.

        Returns:
            Mapping of mark -> number of bands containing it, only for marks
            matched zero or several times. Empty for a valid scale.
        """
        problems: Dict[int, int] = {}
        for mark in range(MIN_MARK, MAX_MARK + 1):
            hits = sum(
                1 for band in self.bands if band.min_mark <= mark <= band.max_mark
            )
            if hits != 1:
                problems[mark] = hits
        return problems

    @property
    def grades(self) -> List[Grade]:
        """Grades in band order."""
        return [band.grade for band in self.bands]

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Subject:
        """
        Build a subject from a catalog entry.

        Args:
            data: Dict with code, name, mandatory and a bands list of
                {grade, min, max, points}

        Returns:
            Subject instance

        Raises:
            ValueError: If a field is missing or invalid
            KeyError: If a required key is absent
        """
        bands = tuple(
            GradeBand(
                min_mark=int(band["min"]),
                max_mark=int(band["max"]),
                grade=Grade(band["grade"]),
                points=int(band["points"]),
            )
            for band in data["bands"]
        )
        return cls(
            code=str(data["code"]),
            name=str(data["name"]),
            mandatory=bool(data.get("mandatory", False)),
            bands=bands,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the catalog entry format."""
        return {
            "code": self.code,
            "name": self.name,
            "mandatory": self.mandatory,
            "bands": [
                {
                    "grade": band.grade.value,
                    "min": band.min_mark,
                    "max": band.max_mark,
                    "points": band.points,
                }
                for band in self.bands
            ],
        }

    def __repr__(self) -> str:
        flag = ", mandatory" if self.mandatory else ""
        return f"Subject({self.code!r}, {self.name!r}{flag})"
