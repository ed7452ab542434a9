"""Exceptions raised by the grading engine, catalog and session layers."""

from __future__ import annotations

from typing import Sequence


class GradingError(Exception):
    """Base class for every scoreboard error."""


class UnknownSubjectError(GradingError, KeyError):
    """Raised when a subject code is not registered in the catalog."""

    def __init__(self, code: object):
        super().__init__(f"Unknown subject code: {code!r}")
        self.code = code

    def __str__(self) -> str:
        # KeyError would otherwise quote the whole message
        return self.args[0]


class DuplicateSubjectError(GradingError):
    """Raised when the same subject code appears more than once."""

    def __init__(self, code: str):
        super().__init__(f"Subject {code} was supplied more than once")
        self.code = code


class MissingMandatorySubjectError(GradingError):
    """Raised when one or more mandatory subjects have no valid mark."""

    def __init__(self, missing: Sequence[str]):
        super().__init__(f"Missing marks for mandatory subjects: {', '.join(missing)}")
        self.missing = tuple(missing)


class InsufficientSubjectsError(GradingError):
    """Raised when fewer valid results exist than the best-seven rule needs."""

    def __init__(self, available: int, required: int):
        super().__init__(
            f"At least {required} graded subjects are required, got {available}"
        )
        self.available = available
        self.required = required


class SessionValidationError(GradingError):
    """Raised when a grading session is calculated before it is complete."""

    def __init__(self, issues: Sequence[str]):
        super().__init__("Grading session is incomplete: " + "; ".join(issues))
        self.issues = tuple(issues)


class CatalogValidationError(RuntimeError):
    """Raised when subject catalog data breaks its invariants."""


class TooManyMandatorySubjectsError(GradingError):
    """Raised when more mandatory results exist than places in the best seven."""

    def __init__(self, count: int, places: int):
        super().__init__(
            f"{count} mandatory subjects cannot fit in the best {places}"
        )
        self.count = count
        self.places = places
