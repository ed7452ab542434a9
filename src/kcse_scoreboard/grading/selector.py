"""
Module: grading.selector

Purpose:
    Best-seven selection and mean grade calculation. Grades every
    supplied mark, keeps the mandatory subjects, fills the remaining
    places with the strongest optional subjects and converts the total
    to a mean grade.

Key Functions:
    - compute_outcome(): Main entry point, marks -> SessionOutcome
    - score_entries(): Grade each mark entry
    - select_best_seven(): Pick the counted subjects from scored results

Algorithm:
    1. Grade each entry; entries with no grade are skipped
    2. Require every mandatory subject and at least seven results
    3. Keep all mandatory results
    4. Sort optional results by points, descending, stable on ties
    5. Take the top (7 - mandatory) optional results
    6. Order the seven alphabetically by subject name
    7. Mean grade = points_to_grade(total points / 7)

Dependencies:
    - kcse_scoreboard.catalog: subject lookup, mandatory subjects
    - .mean: points_to_grade

Used By:
    - session.GradingSession.calculate
    - cli: score command
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from kcse_scoreboard.catalog import SubjectCatalog, default_catalog
from kcse_scoreboard.config import BEST_SUBJECT_COUNT
from kcse_scoreboard.core.models import MarkEntry, ScoredResult, SessionOutcome
from kcse_scoreboard.errors import (
    DuplicateSubjectError,
    InsufficientSubjectsError,
    MissingMandatorySubjectError,
    TooManyMandatorySubjectsError,
)

from .mean import points_to_grade

logger = logging.getLogger(__name__)

EntryLike = Union[MarkEntry, Mapping[str, Any], Sequence[Any]]


def compute_outcome(
    entries: Iterable[EntryLike],
    catalog: Optional[SubjectCatalog] = None,
) -> SessionOutcome:
    """
    Grade one student's marks and compute the scoreboard.

    Main entry point for the grading engine. Pure: the same input always
    yields an equal outcome and nothing outside the arguments is changed.

    Args:
        entries: MarkEntry records, {"code", "mark"} mappings or
            (code, mark) pairs
        catalog: Catalog to use (default: bundled catalog)

    Returns:
        SessionOutcome with the best seven and the mean grade

    Raises:
        UnknownSubjectError: If an entry names a code not in the catalog
        DuplicateSubjectError: If a code appears twice
        MissingMandatorySubjectError: If a mandatory subject has no valid mark
        InsufficientSubjectsError: If fewer than seven subjects are graded

    Example:
        >>> outcome = compute_outcome([("101", 80), ("102", 78), ("121", 70), ...])
        >>> outcome.mean_grade.value
        'B'
    """
    scored = score_entries(entries, catalog)
    return select_best_seven(scored, catalog)


def score_entries(
    entries: Iterable[EntryLike],
    catalog: Optional[SubjectCatalog] = None,
) -> List[ScoredResult]:
    """
    Grade each entry against its subject's scale.

    Entries whose mark has no grade (non-numeric, outside 0-100) are
    left out with a warning, matching how an unfilled mark is ignored.

    Args:
        entries: Mark entries in caller order
        catalog: Catalog to use (default: bundled catalog)

    Returns:
        Scored results in input order

    Raises:
        UnknownSubjectError: If an entry names a code not in the catalog
        DuplicateSubjectError: If a code appears twice
    """
    catalog = catalog if catalog is not None else default_catalog()
    scored: List[ScoredResult] = []
    seen: set[str] = set()

    for raw in entries:
        entry = _coerce_entry(raw)
        subject = catalog.get(entry.code)
        if subject.code in seen:
            raise DuplicateSubjectError(subject.code)
        seen.add(subject.code)

        result = subject.grade_for(entry.mark)
        if result is None:
            logger.warning(f"Skipping {subject.name}: mark {entry.mark!r} has no grade")
            continue

        logger.debug(f"{subject.name}: {entry.mark} -> {result.grade} ({result.points} pts)")
        scored.append(ScoredResult.from_subject(subject, entry.mark, result))

    return scored


def select_best_seven(
    scored_results: Sequence[ScoredResult],
    catalog: Optional[SubjectCatalog] = None,
) -> SessionOutcome:
    """
    Pick the seven counted subjects and compute the mean grade.

    Mandatory subjects are always kept whatever their points. Optional
    subjects with equal points keep their input order, so the earlier
    one wins the last place.

    Args:
        scored_results: One result per graded subject
        catalog: Catalog that defines the mandatory subjects

    Returns:
        SessionOutcome

    Raises:
        DuplicateSubjectError: If a code appears twice
        MissingMandatorySubjectError: If a mandatory subject is absent
        InsufficientSubjectsError: If fewer than seven results are given
        TooManyMandatorySubjectsError: If more than seven results are mandatory

    Invariants:
        - len(result.best_seven) == 7
        - every mandatory subject is in result.best_seven
    """
    catalog = catalog if catalog is not None else default_catalog()

    codes = [result.code for result in scored_results]
    duplicates = [code for index, code in enumerate(codes) if code in codes[:index]]
    if duplicates:
        raise DuplicateSubjectError(duplicates[0])

    present = set(codes)
    missing = [subject.name for subject in catalog.mandatory if subject.code not in present]
    if missing:
        raise MissingMandatorySubjectError(missing)

    if len(scored_results) < BEST_SUBJECT_COUNT:
        raise InsufficientSubjectsError(len(scored_results), BEST_SUBJECT_COUNT)

    mandatory = [result for result in scored_results if result.mandatory]
    optional = [result for result in scored_results if not result.mandatory]
    if len(mandatory) > BEST_SUBJECT_COUNT:
        raise TooManyMandatorySubjectsError(len(mandatory), BEST_SUBJECT_COUNT)

    # sorted() is stable, so ties keep input order
    ranked = sorted(optional, key=lambda result: result.points, reverse=True)
    slots = max(0, BEST_SUBJECT_COUNT - len(mandatory))
    best_optional = ranked[:slots]

    dropped = ranked[slots:]
    if dropped:
        logger.debug(
            "Not counted: " + ", ".join(f"{r.name} ({r.points})" for r in dropped)
        )

    best_seven = sorted(mandatory + best_optional, key=lambda result: result.name)
    total = sum(result.points for result in best_seven)
    mean_grade = points_to_grade(total / BEST_SUBJECT_COUNT)

    logger.info(
        f"Mean grade {mean_grade} from {total} points over {BEST_SUBJECT_COUNT} subjects"
    )
    return SessionOutcome(best_seven=tuple(best_seven), mean_grade=mean_grade)


def _coerce_entry(raw: EntryLike) -> MarkEntry:
    if isinstance(raw, MarkEntry):
        return raw
    if isinstance(raw, Mapping):
        return MarkEntry(code=str(raw.get("code", "")).strip(), mark=raw.get("mark"))
    code, mark = raw
    return MarkEntry(code=str(code).strip(), mark=mark)
