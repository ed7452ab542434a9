"""
Module: grading.lookup

Purpose:
    Grade lookup for a single subject mark. Used live while marks are
    typed in, so it never raises: unknown subjects and unusable marks
    simply have no grade.

Key Functions:
    - grade_for(): GradeResult for a subject code and mark, or None
    - describe_mark(): Grade letter for display, or None

Dependencies:
    - kcse_scoreboard.catalog: subject lookup

Used By:
    - grading.selector.score_entries
    - cli: grade command
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from kcse_scoreboard.catalog import SubjectCatalog, lookup_subject
from kcse_scoreboard.core.models import GradeResult

logger = logging.getLogger(__name__)


def grade_for(
    subject_code: Optional[str],
    mark: Any,
    catalog: Optional[SubjectCatalog] = None,
) -> Optional[GradeResult]:
    """
    Look up the grade and points for a mark in one subject.

    Args:
        subject_code: Catalog code like "121"
        mark: Raw mark, expected in 0-100
        catalog: Catalog to use (default: bundled catalog)

    Returns:
        GradeResult, or None if the code is unknown or the mark has no band

    Example:
        >>> grade_for("121", 70)
        GradeResult(grade=<Grade.A: 'A'>, points=12)
        >>> grade_for("101", 74).points
        10
        >>> grade_for("999", 50) is None
        True
    """
    subject = lookup_subject(subject_code, catalog)
    if subject is None:
        logger.debug(f"No subject registered for code {subject_code!r}")
        return None
    result = subject.grade_for(mark)
    if result is None:
        logger.debug(f"Mark {mark!r} has no grade in {subject.name}")
    return result


def describe_mark(
    subject_code: Optional[str],
    mark: Any,
    catalog: Optional[SubjectCatalog] = None,
) -> Optional[str]:
    """Return the grade letter for a mark, or None when there is none."""
    result = grade_for(subject_code, mark, catalog)
    return result.grade.value if result else None
