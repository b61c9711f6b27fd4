"""Holiday start date check.

New holiday requests cannot start before today. Starting today is allowed.
Only the submission form is checked: stored reports naturally fall into the past.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from student_registry.core.enums import ErrorKind, RecordKind
from ..config import ValidationSettings
from ..models import FieldError


class StartNotInPastCheck:
    """Validate that startDate is not before the reference date."""

    check_id = "start_not_in_past"
    fields = ("startDate",)

    def validate(
        self,
        record: Dict[str, Any],
        now: datetime,
        settings: ValidationSettings,
    ) -> List[FieldError]:
        if record["startDate"] >= now.date():
            return []
        return [
            FieldError(
                "startDate",
                "Start date cannot be in the past",
                ErrorKind.CROSS_FIELD_INVARIANT,
            )
        ]

    def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
        return record_kind == RecordKind.HOLIDAY_REPORT_FORM
