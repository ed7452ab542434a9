"""
Module: student

Purpose:
    Provides StudentInfo - the candidate identity printed on a
    scoreboard - and the same checks the entry form applies to it.

Dependencies:
    - dataclasses (std)

Used By:
    - session.GradingSession
    - output
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from kcse_scoreboard.config import MIN_INDEX_NUMBER_LENGTH, MIN_STUDENT_NAME_LENGTH


@dataclass(frozen=True)
class StudentInfo:
    """
    Candidate name and index number.

    Values are stored trimmed. Construction never fails; call issues()
    to find out whether the identity is printable.
    """

    name: str = ""
    index_number: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", (self.name or "").strip())
        object.__setattr__(self, "index_number", (self.index_number or "").strip())

    def issues(self) -> List[str]:
        """
        Check name and index number.

        Returns:
            Human-readable problems, empty when both fields are acceptable
        """
        problems: List[str] = []
        if not self.name:
            problems.append("Student name is required")
        elif len(self.name) < MIN_STUDENT_NAME_LENGTH:
            problems.append(f"Name must be at least {MIN_STUDENT_NAME_LENGTH} characters")

        if not self.index_number:
            problems.append("Index number is required")
        elif len(self.index_number) < MIN_INDEX_NUMBER_LENGTH:
            problems.append(
                f"Index number must be at least {MIN_INDEX_NUMBER_LENGTH} characters"
            )
        return problems

    @property
    def is_valid(self) -> bool:
        return not self.issues()
