"""
KCSE Scoreboard Core Package

Shared data models for grading. These are the single source of truth
passed between the catalog, the grading engine and the output layer.
"""

from .models import (
    Grade,
    GradeBand,
    GradeResult,
    MarkEntry,
    ScoredResult,
    SessionOutcome,
    StudentInfo,
    Subject,
)

__all__ = [
    "Grade",
    "GradeBand",
    "GradeResult",
    "MarkEntry",
    "ScoredResult",
    "SessionOutcome",
    "StudentInfo",
    "Subject",
]
