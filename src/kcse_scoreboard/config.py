"""
Module: config

Purpose:
    Constants for the grading rules and the immutable rendering
    configuration for printed scoreboards. Centralizing these makes it
    easy to adjust behavior if the grading regulations change.

Key Classes:
    - ScoreboardConfig: Page and typography options for the PDF scoreboard

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - core.models: mark bounds
    - catalog: bundled catalog path
    - grading.selector: best-seven count
    - session: subject count and identity rules
    - output.renderer: ScoreboardConfig
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# MARKS
# =============================================================================

MIN_MARK = 0
MAX_MARK = 100


# =============================================================================
# SUBJECT RULES
# =============================================================================

# Only the best seven subjects count towards the mean grade, and the mean
# is always taken over seven even if the caller supplied more.
BEST_SUBJECT_COUNT = 7

# English, Kiswahili and Mathematics.
MANDATORY_SUBJECT_COUNT = 3

# A candidate sits between 7 and 9 subjects in total.
MIN_SUBJECT_COUNT = 7
MAX_SUBJECT_COUNT = 9


# =============================================================================
# STUDENT IDENTITY
# =============================================================================

MIN_STUDENT_NAME_LENGTH = 3
MIN_INDEX_NUMBER_LENGTH = 5


# =============================================================================
# RESOURCES
# =============================================================================

PACKAGE_DIR = Path(__file__).resolve().parent
CATALOG_PATH = PACKAGE_DIR / "catalog" / "data" / "subjects.json"


@dataclass(frozen=True)
class ScoreboardConfig:
    """
    Rendering options for the printable scoreboard (immutable).

    Attributes:
        title: Heading printed at the top of the page
        subtitle: Line printed under the heading
        margin_pt: Page margin in points
        title_font_size: Font size for the heading
        body_font_size: Font size for table rows and labels
        row_height_pt: Height of one results table row
        show_footer: Print version footer at the bottom of the page
        date_format: strftime format for the grading date

    Example:
        >>> config = ScoreboardConfig(margin_pt=36)
        >>> config.title
        'KCSE SCOREBOARD'
    """

    title: str = "KCSE SCOREBOARD"
    subtitle: str = "Kenya Certificate of Secondary Education - Official Grading"
    margin_pt: float = 50.0
    title_font_size: int = 20
    body_font_size: int = 11
    row_height_pt: float = 22.0
    show_footer: bool = True
    date_format: str = "%B %d, %Y"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.margin_pt < 0:
            raise ValueError(f"margin_pt must be non-negative: {self.margin_pt}")
        if self.title_font_size <= 0 or self.body_font_size <= 0:
            raise ValueError("font sizes must be positive")
        if self.row_height_pt <= self.body_font_size:
            raise ValueError(
                f"row_height_pt ({self.row_height_pt}) must exceed "
                f"body_font_size ({self.body_font_size})"
            )
