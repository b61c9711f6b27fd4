"""Tests for validation result models."""

from datetime import date

import pytest
from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.validation.models import FieldError, RecordValidationError, ValidationResult

KIND = RecordKind.HOLIDAY_REPORT_FORM
ERROR = FieldError("reason", "Reason must be at least 10 characters", ErrorKind.TOO_SHORT)


def test_accepted_result_requires_record():
    with pytest.raises(ValueError, match="requires a normalized record"):
        ValidationResult(record_kind=KIND, accepted=True)


def test_accepted_result_rejects_errors():
    with pytest.raises(ValueError, match="requires an empty error list"):
        ValidationResult(record_kind=KIND, accepted=True, record={}, errors=[ERROR])


def test_rejected_result_requires_errors():
    with pytest.raises(ValueError, match="requires at least one error"):
        ValidationResult.reject(KIND, [])


def test_rejected_result_has_no_record():
    with pytest.raises(ValueError, match="must not carry a record"):
        ValidationResult(record_kind=KIND, accepted=False, record={}, errors=[ERROR])


def test_to_dict_renders_dates_and_kinds():
    accepted = ValidationResult.accept(KIND, {"startDate": date(2025, 6, 1), "priorityLevel": "Normal"})
    assert accepted.to_dict() == {
        "record_kind": "HOLIDAY_REPORT_FORM",
        "accepted": True,
        "record": {"startDate": "2025-06-01", "priorityLevel": "Normal"},
        "errors": [],
    }

    rejected = ValidationResult.reject(KIND, [ERROR])
    assert rejected.to_dict()["errors"] == [
        {
            "path": "reason",
            "message": "Reason must be at least 10 characters",
            "kind": "TooShortError",
        }
    ]


def test_errors_by_path_keeps_order():
    errors = [
        FieldError("startDate", "Invalid date", ErrorKind.INVALID_FORMAT),
        ERROR,
        FieldError("startDate", "Start date cannot be in the past", ErrorKind.CROSS_FIELD_INVARIANT),
    ]
    grouped = ValidationResult.reject(KIND, errors).errors_by_path()

    assert list(grouped) == ["startDate", "reason"]
    assert grouped["startDate"] == ["Invalid date", "Start date cannot be in the past"]


def test_unwrap_raises_with_errors():
    result = ValidationResult.reject(KIND, [ERROR])

    with pytest.raises(RecordValidationError) as exc_info:
        result.unwrap()

    assert exc_info.value.record_kind == KIND
    assert exc_info.value.errors == [ERROR]
    assert str(exc_info.value) == (
        "HOLIDAY_REPORT_FORM rejected: reason: Reason must be at least 10 characters"
    )
