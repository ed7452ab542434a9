"""Subject catalog validation.

This module provides load-time validation for catalog JSON files. Every
subject is checked field by field, and every grading scale must cover each
whole mark from 0 to 100 exactly once with points rising as marks rise.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List

from kcse_scoreboard.core.models import Grade, Subject
from kcse_scoreboard.errors import CatalogValidationError

logger = logging.getLogger(__name__)

# =============================================================================
# Schema Versioning
# =============================================================================
# CATALOG_SCHEMA_VERSION: Version of the catalog file format
# Used in: subjects.json, catalog_schema_version key
# Changelog:
#   v1: Initial schema with code, name, mandatory, bands
# =============================================================================
CATALOG_SCHEMA_VERSION = 1

_CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{1,10}$")
_VALID_GRADES = {grade.value for grade in Grade}


def read_catalog_file(catalog_path: Path) -> Dict[str, Any]:
    """Read a catalog file and return its top-level JSON object.

    Raises:
        CatalogValidationError: If the file cannot be read or parsed.
    """
    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogValidationError(f"Cannot read catalog {catalog_path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogValidationError(f"Catalog must be a JSON object: {catalog_path}")
    return data


def validate_catalog_data(data: Dict[str, Any]) -> List[Subject]:
    """Validate catalog data and return typed subjects in file order.

    Args:
        data: Parsed catalog JSON object.

    Returns:
        List of validated Subject instances.

    Raises:
        CatalogValidationError: If any subject or scale is invalid.
    """
    version = data.get("catalog_schema_version", 1)
    if not isinstance(version, int):
        raise CatalogValidationError("catalog_schema_version must be an integer")
    if version < CATALOG_SCHEMA_VERSION:
        logger.warning(
            f"Catalog has catalog_schema_version {version}, "
            f"expected {CATALOG_SCHEMA_VERSION}."
        )

    entries = data.get("subjects")
    if not isinstance(entries, list) or not entries:
        raise CatalogValidationError("Catalog must contain a non-empty 'subjects' list")

    subjects: List[Subject] = []
    seen: set[str] = set()
    for position, entry in enumerate(entries):
        subject = validate_subject_entry(entry, position)
        if subject.code in seen:
            raise CatalogValidationError(f"Duplicate subject code '{subject.code}'")
        seen.add(subject.code)
        subjects.append(subject)
    return subjects


def validate_subject_entry(entry: Any, position: int = 0) -> Subject:
    """Validate one catalog entry.

    Args:
        entry: Raw subject object from the catalog.
        position: Index of the entry, used in error messages.

    Returns:
        Validated Subject.

    Raises:
        CatalogValidationError: If validation fails.
    """
    if not isinstance(entry, dict):
        raise CatalogValidationError(f"Subject #{position} must be a JSON object")

    code = str(entry.get("code", "")).strip()
    name = str(entry.get("name", "")).strip()

    # Code validation: alphanumeric, 1-10 chars
    if not _CODE_PATTERN.match(code):
        raise CatalogValidationError(
            f"Invalid code '{code}': must be 1-10 alphanumeric characters"
        )

    if not name:
        raise CatalogValidationError(f"Subject {code}: missing 'name' field")
    if len(name) > 100:
        raise CatalogValidationError(f"Subject {code}: name exceeds 100 characters")

    mandatory = entry.get("mandatory", False)
    if not isinstance(mandatory, bool):
        raise CatalogValidationError(f"Subject {code}: mandatory must be a boolean")

    bands = entry.get("bands")
    if not isinstance(bands, list) or not bands:
        raise CatalogValidationError(f"Subject {code}: bands must be a non-empty list")
    for band in bands:
        _check_band_fields(code, band)

    try:
        subject = Subject.from_dict({**entry, "code": code, "name": name})
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogValidationError(f"Subject {code}: {e}") from e

    check_scale(subject)
    return subject


def _check_band_fields(code: str, band: Any) -> None:
    if not isinstance(band, dict):
        raise CatalogValidationError(f"Subject {code}: each band must be a JSON object")
    if band.get("grade") not in _VALID_GRADES:
        raise CatalogValidationError(f"Subject {code}: invalid grade {band.get('grade')!r}")
    for key in ("min", "max", "points"):
        value = band.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise CatalogValidationError(
                f"Subject {code}: band {band.get('grade')} field '{key}' must be an integer"
            )


def check_scale(subject: Subject) -> None:
    """Check that a subject's scale partitions 0-100 with rising points.

    Raises:
        CatalogValidationError: On a gap, an overlap, or points that fall
            as marks rise.
    """
    problems = subject.coverage_gaps()
    if problems:
        gaps = sorted(mark for mark, hits in problems.items() if hits == 0)
        overlaps = sorted(mark for mark, hits in problems.items() if hits > 1)
        details = []
        if gaps:
            details.append(f"uncovered marks {_format_marks(gaps)}")
        if overlaps:
            details.append(f"marks in several bands {_format_marks(overlaps)}")
        raise CatalogValidationError(f"Subject {subject.code}: {'; '.join(details)}")

    ordered = sorted(subject.bands, key=lambda band: band.min_mark)
    for lower, upper in zip(ordered, ordered[1:]):
        if upper.points < lower.points:
            raise CatalogValidationError(
                f"Subject {subject.code}: band {upper.min_mark}-{upper.max_mark} "
                f"awards fewer points than {lower.min_mark}-{lower.max_mark}"
            )


def _format_marks(marks: List[int]) -> str:
    shown = ", ".join(str(mark) for mark in marks[:5])
    if len(marks) > 5:
        shown += ", ..."
    return shown
