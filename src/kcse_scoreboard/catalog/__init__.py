"""
Module: catalog

Purpose:
    Subject catalog registry. Loads the bundled subjects.json once,
    validates it, and exposes read-only lookups by subject code along
    with the lists a subject picker needs.

Key Functions:
    - lookup_subject(code): Subject or None
    - get_subject(code): Subject or UnknownSubjectError
    - list_subjects(): All subjects in catalog order
    - mandatory_subjects() / optional_subjects(): Subsets by flag
    - subject_options(): (code, name) pairs for optional subjects
    - load_catalog(path): Load an alternative catalog file

Dependencies:
    - functools (std)
    - types (std)
    - .validation: catalog file checks

Used By:
    - grading: lookups and scoring
    - session: slot choices
    - cli: subject listing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from kcse_scoreboard.config import CATALOG_PATH
from kcse_scoreboard.core.models import Subject
from kcse_scoreboard.errors import CatalogValidationError, UnknownSubjectError

from .validation import (
    CATALOG_SCHEMA_VERSION,
    check_scale,
    read_catalog_file,
    validate_catalog_data,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubjectCatalog:
    """
    Read-only registry of subjects keyed by code.

    Attributes:
        subjects: Mapping of code -> Subject, in catalog order
        source: File the catalog was loaded from, if any
    """

    subjects: Mapping[str, Subject]
    source: Optional[Path] = None

    @classmethod
    def from_subjects(cls, subjects: Iterable[Subject], source: Optional[Path] = None) -> SubjectCatalog:
        """
        Build a catalog from subjects, rejecting duplicate codes.

        Scales are not re-checked here; use load_catalog() for files.
        """
        registry = {}
        for subject in subjects:
            if subject.code in registry:
                raise CatalogValidationError(f"Duplicate subject code '{subject.code}'")
            registry[subject.code] = subject
        return cls(subjects=MappingProxyType(registry), source=source)

    def lookup(self, code: Optional[str]) -> Optional[Subject]:
        if not code:
            return None
        return self.subjects.get(str(code).strip())

    def get(self, code: Optional[str]) -> Subject:
        subject = self.lookup(code)
        if subject is None:
            raise UnknownSubjectError(code)
        return subject

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def __iter__(self):
        return iter(self.subjects.values())

    def __len__(self) -> int:
        return len(self.subjects)

    @property
    def codes(self) -> List[str]:
        return list(self.subjects)

    @property
    def mandatory(self) -> List[Subject]:
        return [subject for subject in self if subject.mandatory]

    @property
    def optional(self) -> List[Subject]:
        return [subject for subject in self if not subject.mandatory]


def load_catalog(catalog_path: Path) -> SubjectCatalog:
    """
    Load and validate a catalog file.

    Args:
        catalog_path: Path to a subjects JSON file

    Returns:
        Validated SubjectCatalog

    Raises:
        CatalogValidationError: If the file is unreadable or invalid
    """
    data = read_catalog_file(catalog_path)
    subjects = validate_catalog_data(data)
    catalog = SubjectCatalog.from_subjects(subjects, source=catalog_path)
    logger.info(
        f"Loaded {len(catalog)} subjects ({len(catalog.mandatory)} mandatory) "
        f"from {catalog_path.name}"
    )
    return catalog


@lru_cache(maxsize=None)
def default_catalog() -> SubjectCatalog:
    """Return the bundled catalog, loading it on first use."""
    return load_catalog(CATALOG_PATH)


def _resolve(catalog: Optional[SubjectCatalog]) -> SubjectCatalog:
    return catalog if catalog is not None else default_catalog()


def lookup_subject(code: Optional[str], catalog: Optional[SubjectCatalog] = None) -> Optional[Subject]:
    """Return the subject for a code, or None if it is not registered."""
    return _resolve(catalog).lookup(code)


def get_subject(code: Optional[str], catalog: Optional[SubjectCatalog] = None) -> Subject:
    """Return the subject for a code or raise UnknownSubjectError."""
    return _resolve(catalog).get(code)


def list_subjects(catalog: Optional[SubjectCatalog] = None) -> List[Subject]:
    return list(_resolve(catalog))


def supported_subject_codes(catalog: Optional[SubjectCatalog] = None) -> List[str]:
    return _resolve(catalog).codes


def mandatory_subjects(catalog: Optional[SubjectCatalog] = None) -> List[Subject]:
    return _resolve(catalog).mandatory


def optional_subjects(catalog: Optional[SubjectCatalog] = None) -> List[Subject]:
    return _resolve(catalog).optional


def subject_options(catalog: Optional[SubjectCatalog] = None) -> List[Tuple[str, str]]:
    """
    List (code, name) pairs a caller can offer for optional slots.

    Mandatory subjects are excluded since they are always added.
    """
    return [(subject.code, subject.name) for subject in optional_subjects(catalog)]


__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "SubjectCatalog",
    "load_catalog",
    "default_catalog",
    "lookup_subject",
    "get_subject",
    "list_subjects",
    "supported_subject_codes",
    "mandatory_subjects",
    "optional_subjects",
    "subject_options",
    "check_scale",
]
