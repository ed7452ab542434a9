"""
Module: session

Purpose:
    Immutable grading session for one student: identity, the chosen
    subjects (three mandatory rows plus 4-6 optional slots) and the
    raw marks typed against them. Every change returns a new session,
    so nothing is shared between calculations.

Key Classes:
    - SubjectSelectionEntry: One subject row, possibly an empty slot
    - GradingSession: Rows, marks, validation and calculation

Key Functions:
    - parse_mark(): Raw form value -> float or None
    - GradingSession.start(): Build rows for a subject count
    - GradingSession.choose_optional(): Fill or clear an optional slot
    - GradingSession.available_options(): Unchosen optional subjects
    - GradingSession.validate(): Problems blocking calculation
    - GradingSession.calculate(): SessionOutcome

Dependencies:
    - kcse_scoreboard.catalog: subject lookup
    - kcse_scoreboard.grading: compute_outcome

Used By:
    - cli: score command
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from kcse_scoreboard.catalog import SubjectCatalog, default_catalog
from kcse_scoreboard.config import (
    MANDATORY_SUBJECT_COUNT,
    MAX_MARK,
    MAX_SUBJECT_COUNT,
    MIN_MARK,
    MIN_SUBJECT_COUNT,
)
from kcse_scoreboard.core.models import MarkEntry, SessionOutcome, StudentInfo, Subject
from kcse_scoreboard.errors import DuplicateSubjectError, SessionValidationError
from kcse_scoreboard.grading import compute_outcome

logger = logging.getLogger(__name__)

EMPTY_SLOT_NAME = "Select subject"


def parse_mark(value: Any) -> Optional[float]:
    """
    Parse a raw mark from a form field.

    Accepts numbers and numeric strings. Returns None for blanks, text
    that is not a number, and non-finite values. Range is not checked.

    Example:
        >>> parse_mark(" 74 ")
        74.0
        >>> parse_mark("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class SubjectSelectionEntry:
    """
    One subject row in a grading session.

    Attributes:
        code: Subject code, or None for an optional slot not yet chosen
        name: Subject name, or a placeholder for an empty slot
        mandatory: Whether the row is one of the fixed mandatory subjects
    """

    code: Optional[str]
    name: str
    mandatory: bool = False

    @classmethod
    def for_subject(cls, subject: Subject) -> SubjectSelectionEntry:
        return cls(code=subject.code, name=subject.name, mandatory=subject.mandatory)

    @classmethod
    def empty(cls) -> SubjectSelectionEntry:
        return cls(code=None, name=EMPTY_SLOT_NAME, mandatory=False)

    @property
    def is_empty(self) -> bool:
        return not self.code


@dataclass(frozen=True)
class GradingSession:
    """
    Subjects and marks for one student (immutable).

    Attributes:
        entries: Mandatory rows first, then optional slots
        marks: Raw mark values keyed by subject code
        student: Name and index number for the printed scoreboard
        catalog: Catalog used for lookups (default: bundled catalog)

    Invariants:
        - no two non-empty entries share a code

    Example:
        >>> session = GradingSession.start(7, StudentInfo("Jane Doe", "12345678"))
        >>> session = session.choose_optional(0, "231").with_mark("231", 72)
        >>> session.available_options(1)[0]
        ('232', 'PHYSICS')
    """

    entries: Tuple[SubjectSelectionEntry, ...]
    # Hash covers rows and student only; marks stay a plain dict
    marks: Dict[str, Any] = field(default_factory=dict, hash=False)
    student: StudentInfo = field(default_factory=StudentInfo)
    catalog: Optional[SubjectCatalog] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate rows on construction."""
        chosen = [entry.code for entry in self.entries if not entry.is_empty]
        for index, code in enumerate(chosen):
            if code in chosen[:index]:
                raise DuplicateSubjectError(code)

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def start(
        cls,
        subject_count: int,
        student: Optional[StudentInfo] = None,
        catalog: Optional[SubjectCatalog] = None,
    ) -> GradingSession:
        """
        Create a session for the given total number of subjects.

        The mandatory subjects are added automatically; the rest become
        empty optional slots.

        Args:
            subject_count: Total subjects sat, 7 to 9
            student: Candidate identity
            catalog: Catalog to use (default: bundled catalog)

        Returns:
            New GradingSession

        Raises:
            ValueError: If subject_count is outside 7-9
        """
        if not MIN_SUBJECT_COUNT <= subject_count <= MAX_SUBJECT_COUNT:
            raise ValueError(
                f"subject_count must be between {MIN_SUBJECT_COUNT} and "
                f"{MAX_SUBJECT_COUNT}: {subject_count}"
            )
        resolved = catalog if catalog is not None else default_catalog()
        mandatory = [SubjectSelectionEntry.for_subject(s) for s in resolved.mandatory]
        optional_count = subject_count - MANDATORY_SUBJECT_COUNT
        slots = [SubjectSelectionEntry.empty() for _ in range(optional_count)]
        return cls(
            entries=tuple(mandatory + slots),
            student=student or StudentInfo(),
            catalog=catalog,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Rows
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def _catalog(self) -> SubjectCatalog:
        return self.catalog if self.catalog is not None else default_catalog()

    @property
    def subject_count(self) -> int:
        return len(self.entries)

    @property
    def mandatory_entries(self) -> List[SubjectSelectionEntry]:
        return [entry for entry in self.entries if entry.mandatory]

    @property
    def optional_entries(self) -> List[SubjectSelectionEntry]:
        return [entry for entry in self.entries if not entry.mandatory]

    @property
    def chosen_codes(self) -> List[str]:
        return [entry.code for entry in self.entries if not entry.is_empty]

    def with_student(self, student: StudentInfo) -> GradingSession:
        return replace(self, student=student)

    def choose_optional(self, slot: int, code: Optional[str]) -> GradingSession:
        """
        Fill, change or clear an optional slot.

        Changing or clearing a slot discards the mark typed for the
        subject that was there.

        Args:
            slot: Optional slot index, starting at 0
            code: Subject code, or None to clear the slot

        Returns:
            New GradingSession

        Raises:
            IndexError: If slot does not exist
            UnknownSubjectError: If code is not in the catalog
            DuplicateSubjectError: If code is mandatory or chosen in another slot
        """
        optional_positions = [i for i, entry in enumerate(self.entries) if not entry.mandatory]
        if not 0 <= slot < len(optional_positions):
            raise IndexError(f"No optional slot {slot}; session has {len(optional_positions)}")
        position = optional_positions[slot]
        previous = self.entries[position]

        if code:
            subject = self._catalog.get(code)
            if subject.mandatory:
                raise DuplicateSubjectError(subject.code)
            others = [e.code for i, e in enumerate(self.entries) if i != position]
            if subject.code in others:
                raise DuplicateSubjectError(subject.code)
            new_entry = SubjectSelectionEntry.for_subject(subject)
        else:
            new_entry = SubjectSelectionEntry.empty()

        marks = dict(self.marks)
        if previous.code and previous.code != new_entry.code:
            marks.pop(previous.code, None)

        entries = list(self.entries)
        entries[position] = new_entry
        logger.debug(f"Optional slot {slot}: {previous.name} -> {new_entry.name}")
        return replace(self, entries=tuple(entries), marks=marks)

    def available_options(self, slot: int) -> List[Tuple[str, str]]:
        """
        List optional subjects that can go in a slot.

        Subjects chosen in other slots are left out; the slot's own
        current choice stays available.

        Args:
            slot: Optional slot index, starting at 0

        Returns:
            (code, name) pairs in catalog order
        """
        optional = self.optional_entries
        if not 0 <= slot < len(optional):
            raise IndexError(f"No optional slot {slot}; session has {len(optional)}")
        taken = {entry.code for i, entry in enumerate(optional) if i != slot and entry.code}
        return [
            (subject.code, subject.name)
            for subject in self._catalog.optional
            if subject.code not in taken
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # Marks
    # ─────────────────────────────────────────────────────────────────────────

    def with_mark(self, code: str, mark: Any) -> GradingSession:
        """
        Record a raw mark for a chosen subject.

        The value is stored as given; validate() reports unusable values.

        Raises:
            ValueError: If the subject is not part of this session
        """
        if code not in self.chosen_codes:
            raise ValueError(f"Subject {code} is not part of this session")
        marks = dict(self.marks)
        marks[code] = mark
        return replace(self, marks=marks)

    def mark_entries(self) -> List[MarkEntry]:
        """Mark entries for every chosen subject with a numeric mark."""
        entries: List[MarkEntry] = []
        for entry in self.entries:
            if entry.is_empty:
                continue
            mark = parse_mark(self.marks.get(entry.code))
            if mark is not None:
                entries.append(MarkEntry(code=entry.code, mark=mark))
        return entries

    # ─────────────────────────────────────────────────────────────────────────
    # Validation and calculation
    # ─────────────────────────────────────────────────────────────────────────

    def validate(self) -> List[str]:
        """
        Collect everything that blocks a calculation.

        Returns:
            Human-readable issues, empty when the session is ready
        """
        issues = list(self.student.issues())

        for slot, entry in enumerate(self.optional_entries):
            if entry.is_empty:
                issues.append(f"Optional subject {slot + 1} has not been selected")

        missing_mandatory: List[str] = []
        for entry in self.entries:
            if entry.is_empty:
                continue
            raw = self.marks.get(entry.code)
            mark = parse_mark(raw)
            if mark is None:
                if entry.mandatory:
                    missing_mandatory.append(entry.name)
                blank = raw is None or not str(raw).strip()
                if blank:
                    issues.append(f"{entry.name}: Marks are required for all subjects")
                else:
                    issues.append(f"{entry.name}: Please enter a valid number")
            elif not MIN_MARK <= mark <= MAX_MARK:
                issues.append(f"{entry.name}: Marks must be between {MIN_MARK} and {MAX_MARK}")
            elif self._catalog.get(entry.code).grade_for(mark) is None:
                # Decimal marks between two bands
                if entry.mandatory:
                    missing_mandatory.append(entry.name)
                issues.append(f"{entry.name}: Mark {mark:g} does not fall in any grade band")

        if missing_mandatory:
            issues.append(
                f"Missing marks for mandatory subjects: {', '.join(missing_mandatory)}"
            )
        return issues

    @property
    def is_ready(self) -> bool:
        return not self.validate()

    def calculate(self) -> SessionOutcome:
        """
        Compute the scoreboard for this session.

        Returns:
            SessionOutcome

        Raises:
            SessionValidationError: If validate() reports any issue
        """
        issues = self.validate()
        if issues:
            raise SessionValidationError(issues)
        return compute_outcome(self.mark_entries(), self.catalog)
