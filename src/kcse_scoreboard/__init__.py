"""Top-level package for the KCSE Scoreboard.

Provides subpackages:
- kcse_scoreboard.core – immutable grading models
- kcse_scoreboard.catalog – subject catalog and grading scales
- kcse_scoreboard.grading – grade lookup, best-seven selection, mean grade
- kcse_scoreboard.output – text and PDF scoreboards
"""


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "1.0.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("kcse-scoreboard")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .errors import (  # noqa: E402
    CatalogValidationError,
    DuplicateSubjectError,
    GradingError,
    InsufficientSubjectsError,
    MissingMandatorySubjectError,
    SessionValidationError,
    TooManyMandatorySubjectsError,
    UnknownSubjectError,
)
from .core.models import (  # noqa: E402
    Grade,
    GradeBand,
    GradeResult,
    MarkEntry,
    ScoredResult,
    SessionOutcome,
    StudentInfo,
    Subject,
)
from .catalog import (  # noqa: E402
    SubjectCatalog,
    get_subject,
    list_subjects,
    load_catalog,
    lookup_subject,
    subject_options,
    supported_subject_codes,
)
from .grading import compute_outcome, grade_for, points_to_grade  # noqa: E402
from .session import GradingSession, SubjectSelectionEntry  # noqa: E402

__all__: list[str] = [
    "__version__",
    # Models
    "Grade",
    "GradeBand",
    "GradeResult",
    "MarkEntry",
    "ScoredResult",
    "SessionOutcome",
    "StudentInfo",
    "Subject",
    # Catalog
    "SubjectCatalog",
    "get_subject",
    "list_subjects",
    "load_catalog",
    "lookup_subject",
    "subject_options",
    "supported_subject_codes",
    # Engine
    "compute_outcome",
    "grade_for",
    "points_to_grade",
    # Session
    "GradingSession",
    "SubjectSelectionEntry",
    # Errors
    "GradingError",
    "UnknownSubjectError",
    "DuplicateSubjectError",
    "MissingMandatorySubjectError",
    "InsufficientSubjectsError",
    "SessionValidationError",
    "TooManyMandatorySubjectsError",
    "CatalogValidationError",
]
