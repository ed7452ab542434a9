"""
Module: output.renderer

Purpose:
    Render a SessionOutcome to a printable one-page PDF using ReportLab.
    The page carries the heading, student details, the best-seven table,
    the mean grade and the grading note.

Key Functions:
    - render_scoreboard_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - kcse_scoreboard.core.models: SessionOutcome, StudentInfo

Used By:
    - cli: score command (--pdf)
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from kcse_scoreboard.config import BEST_SUBJECT_COUNT, ScoreboardConfig
from kcse_scoreboard.core.models import SessionOutcome, StudentInfo

from .text import NOTE

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH_PT, A4_HEIGHT_PT = A4
FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FOOTER_FONT_SIZE = 7
HEADER_FILL = colors.HexColor("#1f3a5f")
ROW_FILL = colors.HexColor("#f1f4f8")


def _get_footer_text() -> str:
    """Get footer text with current version number."""
    try:
        from kcse_scoreboard import __version__
        version = __version__
    except ImportError:
        version = "unknown"
    return f"Generated with KCSE Scoreboard v{version}"


def render_scoreboard_pdf(
    outcome: SessionOutcome,
    output_path: Path,
    student: Optional[StudentInfo] = None,
    *,
    config: Optional[ScoreboardConfig] = None,
    graded_on: Optional[date] = None,
) -> Path:
    """
    Render the scoreboard to a PDF file.

    Args:
        outcome: Result of compute_outcome()
        output_path: Path to write PDF; parent folders are created
        student: Candidate identity; the info block is omitted when None
        config: Page and typography options (default ScoreboardConfig())
        graded_on: Date printed as the grading date (default: today)

    Returns:
        output_path

    Raises:
        ValueError: If the outcome does not hold exactly seven subjects
        OSError: If the PDF cannot be written

    Example:
        >>> render_scoreboard_pdf(outcome, Path("output/scoreboard.pdf"), student)
    """
    if len(outcome.best_seven) != BEST_SUBJECT_COUNT:
        raise ValueError(
            f"Refusing to print a scoreboard with {len(outcome.best_seven)} subjects"
        )

    config = config or ScoreboardConfig()
    graded_on = graded_on or date.today()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle(config.title)
    if student is not None and student.name:
        c.setSubject(f"{config.title} - {student.name}")

    y = A4_HEIGHT_PT - config.margin_pt
    y = _draw_header(c, config, y)
    y = _draw_student_info(c, config, student, graded_on, len(outcome.best_seven), y)
    y = _draw_results_table(c, config, outcome, y)
    y = _draw_mean_grade(c, config, outcome, y)
    _draw_note(c, config, y)
    if config.show_footer:
        _draw_footer(c, config)

    c.showPage()
    c.save()

    logger.info(f"Rendered scoreboard (mean grade {outcome.mean_grade}) to {output_path}")
    return output_path


def _content_width(config: ScoreboardConfig) -> float:
    return A4_WIDTH_PT - 2 * config.margin_pt


def _draw_header(c: canvas.Canvas, config: ScoreboardConfig, y: float) -> float:
    center = A4_WIDTH_PT / 2
    y -= config.title_font_size
    c.setFont(FONT_BOLD, config.title_font_size)
    c.drawCentredString(center, y, config.title)

    y -= config.body_font_size + 8
    c.setFont(FONT, config.body_font_size)
    c.drawCentredString(center, y, config.subtitle)

    y -= 12
    c.setStrokeColor(HEADER_FILL)
    c.setLineWidth(1.5)
    c.line(config.margin_pt, y, A4_WIDTH_PT - config.margin_pt, y)
    return y - 20


def _draw_student_info(
    c: canvas.Canvas,
    config: ScoreboardConfig,
    student: Optional[StudentInfo],
    graded_on: date,
    subject_count: int,
    y: float,
) -> float:
    items: List[Tuple[str, str]] = []
    if student is not None:
        items.append(("Student Name", student.name))
        items.append(("Index Number", student.index_number))
    items.append(("Grading Date", graded_on.strftime(config.date_format)))
    items.append(("Subjects Graded", f"{subject_count} (Best {BEST_SUBJECT_COUNT})"))

    # Two columns of label/value pairs
    column_width = _content_width(config) / 2
    line_height = config.body_font_size * 2 + 10
    for index, (label, value) in enumerate(items):
        column = index % 2
        if index and column == 0:
            y -= line_height
        x = config.margin_pt + column * column_width
        c.setFillColor(colors.grey)
        c.setFont(FONT, config.body_font_size - 2)
        c.drawString(x, y, label.upper())
        c.setFillColor(colors.black)
        c.setFont(FONT_BOLD, config.body_font_size + 1)
        c.drawString(x, y - config.body_font_size - 4, value)
    return y - line_height - 10


def _draw_results_table(
    c: canvas.Canvas,
    config: ScoreboardConfig,
    outcome: SessionOutcome,
    y: float,
) -> float:
    left = config.margin_pt
    width = _content_width(config)
    grade_x = left + width * 0.75
    row_height = config.row_height_pt
    text_offset = (row_height - config.body_font_size) / 2 + 2

    # Header row
    y -= row_height
    c.setFillColor(HEADER_FILL)
    c.rect(left, y, width, row_height, stroke=0, fill=1)
    c.setFillColor(colors.white)
    c.setFont(FONT_BOLD, config.body_font_size)
    c.drawString(left + 8, y + text_offset, "Subject")
    c.drawString(grade_x, y + text_offset, "Grade")

    for index, result in enumerate(outcome.best_seven):
        y -= row_height
        if index % 2 == 0:
            c.setFillColor(ROW_FILL)
            c.rect(left, y, width, row_height, stroke=0, fill=1)
        c.setFillColor(colors.black)
        c.setFont(FONT, config.body_font_size)
        c.drawString(left + 8, y + text_offset, result.name)
        c.setFont(FONT_BOLD, config.body_font_size)
        c.drawString(grade_x, y + text_offset, result.grade.value)

    c.setStrokeColor(colors.lightgrey)
    c.setLineWidth(0.5)
    table_height = row_height * (len(outcome.best_seven) + 1)
    c.rect(left, y, width, table_height, stroke=1, fill=0)
    return y - 24


def _draw_mean_grade(
    c: canvas.Canvas,
    config: ScoreboardConfig,
    outcome: SessionOutcome,
    y: float,
) -> float:
    box_width = 160
    box_height = config.title_font_size * 2 + 24
    x = (A4_WIDTH_PT - box_width) / 2
    y -= box_height

    c.setStrokeColor(HEADER_FILL)
    c.setLineWidth(1.5)
    c.roundRect(x, y, box_width, box_height, 6, stroke=1, fill=0)

    c.setFillColor(colors.grey)
    c.setFont(FONT_BOLD, config.body_font_size - 1)
    c.drawCentredString(A4_WIDTH_PT / 2, y + box_height - config.body_font_size - 6, "MEAN GRADE")

    c.setFillColor(HEADER_FILL)
    c.setFont(FONT_BOLD, config.title_font_size * 1.6)
    c.drawCentredString(A4_WIDTH_PT / 2, y + 12, outcome.mean_grade.value)
    c.setFillColor(colors.black)
    return y - 24


def _draw_note(c: canvas.Canvas, config: ScoreboardConfig, y: float) -> float:
    font_size = config.body_font_size - 2
    c.setFont(FONT, font_size)
    c.setFillColor(colors.darkgrey)
    for line in simpleSplit(NOTE, FONT, font_size, _content_width(config)):
        y -= font_size + 3
        c.drawString(config.margin_pt, y, line)
    c.setFillColor(colors.black)
    return y


def _draw_footer(c: canvas.Canvas, config: ScoreboardConfig) -> None:
    c.setFont(FONT, FOOTER_FONT_SIZE)
    c.setFillColor(colors.grey)
    c.drawCentredString(A4_WIDTH_PT / 2, config.margin_pt / 2, _get_footer_text())
    c.setFillColor(colors.black)
