"""Holiday return date check.

A student on leave must be expected back strictly after the leave starts.
Applies to stored holiday reports, the holiday form and the API insert variant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from student_registry.core.enums import ErrorKind, RecordKind
from ..config import ValidationSettings
from ..models import FieldError


class ReturnAfterStartCheck:
    """Validate that expectedReturnDate is after startDate."""

    check_id = "return_after_start"
    fields = ("startDate", "expectedReturnDate")

    def validate(
        self,
        record: Dict[str, Any],
        now: datetime,
        settings: ValidationSettings,
    ) -> List[FieldError]:
        if record["expectedReturnDate"] > record["startDate"]:
            return []
        return [
            FieldError(
                "expectedReturnDate",
                "Expected return date must be after start date",
                ErrorKind.CROSS_FIELD_INVARIANT,
            )
        ]

    def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
        return record_kind in (
            RecordKind.HOLIDAY_REPORT,
            RecordKind.HOLIDAY_REPORT_FORM,
            RecordKind.INSERT_HOLIDAY_REPORT,
        )
