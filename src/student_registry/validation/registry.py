"""Validation check registry and entry points.

This module orchestrates record validation:
- ALL_CHECKS: List of all available cross-field refinement instances
- validate_record(): Field checks plus refinements for one record
- validate_update(): Re-validation of the fields a mutation changes
- validate_filters(): Listing query parameters with pagination defaults
- run_file_validation(): Validates every record in a CSV/JSON file
- print_report(): Displays a file validation report on the console
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.core.utils import resolve_now
from .checks.age_eligibility import AgeEligibilityCheck
from .checks.exam_time_window import ExamTimeWindowCheck
from .checks.registration_deadline import RegistrationDeadlineCheck
from .checks.return_after_start import ReturnAfterStartCheck
from .checks.start_not_in_past import StartNotInPastCheck
from .config import DEFAULT_SETTINGS, ValidationSettings
from .models import BatchReport, FieldError, ValidationResult
from .runner import get_schema_fields, run_field_checks, run_refinements

logger = logging.getLogger(__name__)


# Registry of all available refinements
# Order decides the order of refinement errors within a result
ALL_CHECKS = [
    # Student onboarding
    AgeEligibilityCheck(),
    # Exams
    ExamTimeWindowCheck(),
    RegistrationDeadlineCheck(),
    # Holiday reports
    ReturnAfterStartCheck(),
    StartNotInPastCheck(),
]


def _not_a_mapping(kind: RecordKind) -> ValidationResult:
    return ValidationResult.reject(
        kind, [FieldError("", "Expected a mapping of field values", ErrorKind.INVALID_FORMAT)]
    )


def validate_record(
    kind: RecordKind,
    data: Any,
    now: Optional[Any] = None,
    settings: Optional[ValidationSettings] = None,
) -> ValidationResult:
    """Validate one record of the given kind.

    Every field is checked; all field errors are reported together. Refinements
    then run for fields that passed.

    Args:
        kind: Record kind (entity, form or filter shape).
        data: Raw record as received from a form or request body.
        now: Reference time for age and not-in-the-past checks. Read from the
            wall clock once when omitted.
        settings: Tunable thresholds. Defaults to the built-in constants.

    Returns:
        Accepted ValidationResult with the normalized record, or a rejected
        one with the ordered error list.

    Examples:
        >>> result = validate_record(
        ...     RecordKind.HOLIDAY_REPORT_FORM,
        ...     {"holidayType": "Medical Leave", "startDate": "2025-06-01",
        ...      "expectedReturnDate": "2025-06-05", "destination": "Nairobi",
        ...      "reason": "Scheduled surgery and recovery"},
        ...     now=datetime(2025, 5, 20),
        ... )
        >>> result.record["priorityLevel"]
        'Normal'
    """
    settings = settings or DEFAULT_SETTINGS
    if not isinstance(data, Mapping):
        return _not_a_mapping(kind)
    reference = resolve_now(now)

    record, errors, failed = run_field_checks(get_schema_fields(kind, settings), data)
    errors.extend(run_refinements(kind, record, failed, reference, settings, ALL_CHECKS))

    if errors:
        return ValidationResult.reject(kind, errors)
    return ValidationResult.accept(kind, record)


def validate_update(
    kind: RecordKind,
    changes: Any,
    current: Optional[Mapping[str, Any]] = None,
    now: Optional[Any] = None,
    settings: Optional[ValidationSettings] = None,
) -> ValidationResult:
    """Validate only the fields a mutation changes.

    Used for status transitions and reviews (e.g., approving a holiday report).
    Refinements reading a changed field are re-run against ``changes`` merged
    over ``current``.

    Args:
        kind: Record kind of the stored record.
        changes: Field values being set.
        current: The stored record the changes apply to, if available.
        now: Reference time, as for validate_record().
        settings: Tunable thresholds.

    Returns:
        Accepted result whose record holds only the normalized changes, or a
        rejected one.

    Examples:
        >>> validate_update(
        ...     RecordKind.HOLIDAY_REPORT,
        ...     {"status": "APPROVED", "reviewedBy": "admin-1"},
        ... ).accepted
        True
    """
    settings = settings or DEFAULT_SETTINGS
    if not isinstance(changes, Mapping):
        return _not_a_mapping(kind)
    reference = resolve_now(now)
    specs = get_schema_fields(kind, settings)
    touched = {spec.name for spec in specs if spec.name in changes}

    record, errors, failed = run_field_checks(specs, changes, only=touched)

    merged: Dict[str, Any] = {}
    merged_failed = set(failed)
    if current:
        untouched = {name for name in current if name not in touched}
        merged, _, current_failed = run_field_checks(specs, current, only=untouched)
        merged_failed |= current_failed
    merged.update(record)
    errors.extend(
        run_refinements(kind, merged, merged_failed, reference, settings, ALL_CHECKS, touched=touched)
    )

    if errors:
        return ValidationResult.reject(kind, errors)
    return ValidationResult.accept(kind, record)


def validate_filters(
    kind: RecordKind,
    params: Any,
    settings: Optional[ValidationSettings] = None,
) -> ValidationResult:
    """Validate and normalize listing query parameters.

    An accepted filter always carries ``page >= 1`` and
    ``1 <= limit <= settings.max_limit``. A larger limit is rejected.

    Raises:
        ValueError: If ``kind`` is not a filter kind.

    Examples:
        >>> validate_filters(RecordKind.EXAM_FILTERS, {}).record
        {'page': 1, 'limit': 10}
    """
    if not kind.is_filter:
        raise ValueError(f"{kind.value} is not a filter record kind")
    return validate_record(kind, params, settings=settings)


def load_records(input_path: Path) -> List[Dict[str, Any]]:
    """Load raw records from a CSV or JSON file.

    CSV cells are read as strings and empty cells stay empty strings, the way
    an HTML form would submit them. JSON may hold one object or a list of them.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or has an unsupported format.
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    suffix = input_path.suffix.lower()
    if suffix == ".csv":
        try:
            df = pd.read_csv(input_path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ValueError(f"Failed to read CSV file {input_path}: {e}") from e
        return df.to_dict(orient="records")

    if suffix == ".json":
        try:
            with open(input_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to read JSON file {input_path}: {e}") from e
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list) and all(isinstance(item, dict) for item in data):
            return data
        raise ValueError(f"JSON file {input_path} must hold an object or a list of objects")

    raise ValueError(f"Unsupported input format '{suffix}' for {input_path}. Use .csv or .json")


def run_file_validation(
    input_path: Path,
    kind: RecordKind,
    now: Optional[Any] = None,
    settings: Optional[ValidationSettings] = None,
) -> BatchReport:
    """Validate every record of a file independently.

    All records share one reference time so the report is reproducible.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed.
    """
    records = load_records(input_path)
    reference = resolve_now(now)
    logger.debug("Validating %d %s records from %s", len(records), kind.value, input_path)

    results = [validate_record(kind, record, now=reference, settings=settings) for record in records]

    return BatchReport(
        results=results,
        record_kind=kind,
        input_path=input_path,
        reference_time=reference,
    )


def print_report(report: BatchReport) -> None:
    """Print a file validation report to console.

    Displays a summary followed by every error of each rejected record.

    Examples:
        >>> print_report(report)
        Validation Summary:
          Kind: EXAM_CREATION_FORM (exams.csv)
          Records: 3 validated (2 accepted, 1 rejected)
          Issues: 1 field errors

        Rejected Records:
        ❌ row 2: 1 errors
           - endTime: End time must be after start time (CrossFieldInvariantError)
    """
    print(report.to_console_summary())
