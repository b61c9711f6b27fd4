"""Validation system for Student Registry.

This module provides the validation and constraint engine for student,
exam, exam-registration and holiday-report records:

- **Models**: FieldError, ValidationResult, BatchReport - validation result data structures
- **Fields**: Field-level validators (see validation/fields.py)
- **Checks**: Cross-field refinements (see validation/checks/)
- **Config**: Thresholds, patterns and YAML-loadable settings (import from .config)
- **Registry**: validate_record(), validate_update(), validate_filters() - entry points

Public API:
    validate_record: Validate one record of a given RecordKind
    validate_update: Validate the changed fields of a stored record
    validate_filters: Validate listing query parameters
    run_file_validation: Validate every record of a CSV/JSON file
    print_report: Display a file validation report to console
    paginate: Slice a listing according to accepted filters

Usage:
    >>> from datetime import datetime
    >>> from student_registry.validation import validate_record, RecordKind
    >>> result = validate_record(RecordKind.EXAM_CREATION_FORM, form_data, now=datetime.now())
    >>> if not result.accepted:
    ...     print(result.errors_by_path())

For implementation details:
    - See validation/checks/__init__.py for refinement interface conventions
    - See core/schemas.py for the field definitions of each record kind
"""

from __future__ import annotations

from student_registry.core.enums import ErrorKind, RecordKind

from .config import ValidationSettings, load_settings
from .models import BatchReport, FieldError, RecordValidationError, ValidationResult
from .pagination import PaginationMeta, paginate
from .registry import (
    print_report,
    run_file_validation,
    validate_filters,
    validate_record,
    validate_update,
)

__all__ = [
    # Data models
    "FieldError",
    "ValidationResult",
    "RecordValidationError",
    "BatchReport",
    "PaginationMeta",
    "ValidationSettings",
    # Entry points
    "validate_record",
    "validate_update",
    "validate_filters",
    "run_file_validation",
    "print_report",
    "paginate",
    "load_settings",
    # Enums
    "RecordKind",
    "ErrorKind",
]
