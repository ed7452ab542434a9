"""
Core Models Package

Immutable data models shared by the catalog, grading engine, session and
output layers. All models are frozen dataclasses: a grading run never
mutates its inputs, so results can be reused and compared freely.
"""

from .grades import Grade, GradeBand, GradeResult
from .subjects import Subject
from .results import MarkEntry, ScoredResult, SessionOutcome
from .student import StudentInfo

__all__ = [
    "Grade",
    "GradeBand",
    "GradeResult",
    "Subject",
    "MarkEntry",
    "ScoredResult",
    "SessionOutcome",
    "StudentInfo",
]
