"""
Module: output.text

Purpose:
    Plain-text scoreboard for terminals and logs.

Key Functions:
    - render_scoreboard_text(): SessionOutcome -> multi-line string
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from kcse_scoreboard.config import BEST_SUBJECT_COUNT, ScoreboardConfig
from kcse_scoreboard.core.models import SessionOutcome, StudentInfo

NOTE = (
    "Note: This scoreboard is based on the best 7 subjects as per KCSE regulations. "
    "Mandatory subjects (English, Kiswahili, Mathematics) are included in the calculation."
)


def render_scoreboard_text(
    outcome: SessionOutcome,
    student: Optional[StudentInfo] = None,
    *,
    config: Optional[ScoreboardConfig] = None,
    graded_on: Optional[date] = None,
    show_points: bool = False,
) -> str:
    """
    Render the scoreboard as text.

    Args:
        outcome: Result of compute_outcome()
        student: Candidate identity; omitted lines when None
        config: Title and date format (default ScoreboardConfig())
        graded_on: Date printed as the grading date (default: today)
        show_points: Add mark and points columns

    Returns:
        Scoreboard text without a trailing newline
    """
    config = config or ScoreboardConfig()
    graded_on = graded_on or date.today()

    name_width = max(len("Subject"), *(len(r.name) for r in outcome.best_seven))
    rule = "=" * max(len(config.title), name_width + 24)

    lines: List[str] = [rule, config.title, config.subtitle, rule]
    if student is not None:
        lines.append(f"Student Name:    {student.name}")
        lines.append(f"Index Number:    {student.index_number}")
    lines.append(f"Grading Date:    {graded_on.strftime(config.date_format)}")
    lines.append(f"Subjects Graded: {len(outcome.best_seven)} (Best {BEST_SUBJECT_COUNT})")
    lines.append("")

    header = f"{'Subject':<{name_width}}  Grade"
    if show_points:
        header += "   Mark  Points"
    lines.append(header)
    lines.append("-" * len(header))
    for result in outcome.best_seven:
        row = f"{result.name:<{name_width}}  {result.grade.value:<5}"
        if show_points:
            row += f"  {result.mark:>5g}  {result.points:>6}"
        lines.append(row)

    lines.append("")
    lines.append(f"MEAN GRADE: {outcome.mean_grade.value}")
    if show_points:
        lines.append(
            f"Total points: {outcome.total_points}  Mean points: {outcome.mean_points:.2f}"
        )
    lines.append("")
    lines.append(NOTE)
    return "\n".join(lines)
