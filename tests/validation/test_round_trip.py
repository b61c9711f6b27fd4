"""Tests that an accepted record, validated again with the same reference
time, is accepted unchanged."""

import pytest
from student_registry.core.enums import RecordKind
from student_registry.validation import validate_filters, validate_record


@pytest.fixture
def insert_holiday(holiday_form):
    return dict(holiday_form, studentId="student-3")


@pytest.mark.parametrize(
    "kind, fixture_name",
    [
        (RecordKind.STUDENT_REGISTRATION_FORM, "student_form"),
        (RecordKind.EXAM_CREATION_FORM, "exam_form"),
        (RecordKind.HOLIDAY_REPORT_FORM, "holiday_form"),
        (RecordKind.INSERT_HOLIDAY_REPORT, "insert_holiday"),
        (RecordKind.EXAM, "exam_record"),
        (RecordKind.HOLIDAY_REPORT, "holiday_record"),
    ],
    ids=lambda value: value.value if isinstance(value, RecordKind) else None,
)
def test_accepted_record_revalidates_to_itself(request, now, kind, fixture_name):
    data = request.getfixturevalue(fixture_name)

    first = validate_record(kind, data, now=now)
    second = validate_record(kind, first.record, now=now)

    assert first.accepted is True
    assert second.accepted is True
    assert second.record == first.record


@pytest.mark.parametrize(
    "kind, params",
    [
        (RecordKind.EXAM_FILTERS, {"page": "2", "status": "PUBLISHED", "q": "CS"}),
        (RecordKind.STUDENT_FILTERS, {"studentType": "KUCCPS", "class": "Year 1"}),
        (RecordKind.HOLIDAY_REPORT_FILTERS, {"limit": "50", "priorityLevel": "Urgent"}),
        (RecordKind.EXAM_FILTERS, {}),
    ],
    ids=["exam", "student", "holiday_report", "empty"],
)
def test_accepted_filters_revalidate_to_themselves(kind, params):
    first = validate_filters(kind, params)
    second = validate_filters(kind, first.record)

    assert second.accepted is True
    assert second.record == first.record
