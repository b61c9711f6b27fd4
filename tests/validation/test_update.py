"""Tests for validate_update (status transitions, reviews and partial edits)."""

from datetime import datetime, timezone

from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.validation import validate_update


def test_review_transition_is_accepted(holiday_record, now):
    changes = {
        "status": "APPROVED",
        "reviewedBy": "admin-1",
        "reviewedAt": "2025-03-02T10:00:00Z",
        "reviewComments": "Approved. Report back on return.",
    }
    result = validate_update(RecordKind.HOLIDAY_REPORT, changes, current=holiday_record, now=now)

    assert result.accepted is True
    assert result.record == {
        "status": "APPROVED",
        "reviewedAt": datetime(2025, 3, 2, 10, 0, tzinfo=timezone.utc),
        "reviewedBy": "admin-1",
        "reviewComments": "Approved. Report back on return.",
    }


def test_unknown_status_is_rejected(holiday_record, now):
    result = validate_update(RecordKind.HOLIDAY_REPORT, {"status": "DONE"}, current=holiday_record, now=now)

    assert result.accepted is False
    assert result.errors[0].path == "status"
    assert result.errors[0].kind == ErrorKind.INVALID_ENUM


def test_untouched_fields_are_not_checked(now):
    """A bare status change does not need the rest of the record."""
    result = validate_update(RecordKind.EXAM, {"status": "COMPLETED"}, now=now)

    assert result.accepted is True
    assert result.record == {"status": "COMPLETED"}


def test_changed_date_is_checked_against_current(holiday_record, now):
    result = validate_update(
        RecordKind.HOLIDAY_REPORT,
        {"expectedReturnDate": "2025-02-28"},
        current=holiday_record,
        now=now,
    )

    assert result.errors_by_path() == {
        "expectedReturnDate": ["Expected return date must be after start date"]
    }


def test_changed_date_without_current_skips_refinement(now):
    result = validate_update(RecordKind.HOLIDAY_REPORT, {"expectedReturnDate": "2025-02-28"}, now=now)

    assert result.accepted is True


def test_refinements_not_touching_changes_are_skipped(holiday_record, now):
    holiday_record["expectedReturnDate"] = "2025-02-01"
    result = validate_update(RecordKind.HOLIDAY_REPORT, {"status": "UNDER_REVIEW"}, current=holiday_record, now=now)

    assert result.accepted is True


def test_exam_time_change_against_current(exam_record, now):
    result = validate_update(RecordKind.EXAM, {"endTime": "13:00"}, current=exam_record, now=now)

    assert [(e.path, e.kind) for e in result.errors] == [
        ("endTime", ErrorKind.CROSS_FIELD_INVARIANT)
    ]


def test_changes_must_be_a_mapping(now):
    result = validate_update(RecordKind.EXAM, "PUBLISHED", now=now)

    assert result.errors[0].kind == ErrorKind.INVALID_FORMAT
