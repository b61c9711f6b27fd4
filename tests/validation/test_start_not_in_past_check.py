"""Tests for the StartNotInPastCheck refinement.

The reference date comes from the ``now`` passed in, never the wall clock.
"""

from datetime import date, datetime

import pytest
from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.validation.checks.start_not_in_past import StartNotInPastCheck
from student_registry.validation.config import DEFAULT_SETTINGS


@pytest.mark.parametrize(
    "start, expect_pass",
    [
        (date(2025, 5, 19), False),
        (date(2025, 5, 20), True),
        (date(2025, 5, 21), True),
    ],
    ids=["yesterday", "today", "tomorrow"],
)
def test_start_not_in_past(now, start, expect_pass):
    check = StartNotInPastCheck()
    errors = check.validate({"startDate": start}, now, DEFAULT_SETTINGS)

    if expect_pass:
        assert errors == []
    else:
        assert len(errors) == 1
        assert errors[0].path == "startDate"
        assert errors[0].kind == ErrorKind.CROSS_FIELD_INVARIANT
        assert errors[0].message == "Start date cannot be in the past"


def test_start_today_late_in_the_day():
    """Only the date part of the reference time matters."""
    check = StartNotInPastCheck()
    errors = check.validate(
        {"startDate": date(2025, 5, 20)}, datetime(2025, 5, 20, 23, 59), DEFAULT_SETTINGS
    )
    assert errors == []


def test_start_not_in_past_applies_to_form_only():
    check = StartNotInPastCheck()
    assert check.applies_to_record_kind(RecordKind.HOLIDAY_REPORT_FORM)
    assert not check.applies_to_record_kind(RecordKind.HOLIDAY_REPORT)
    assert not check.applies_to_record_kind(RecordKind.INSERT_HOLIDAY_REPORT)
