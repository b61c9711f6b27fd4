"""Exam time window check.

An exam must end after it starts. Times are zero-padded "HH:MM" strings, so
string order equals chronological order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from student_registry.core.enums import ErrorKind, RecordKind
from ..config import ValidationSettings
from ..models import FieldError


class ExamTimeWindowCheck:
    """Validate that endTime is strictly after startTime."""

    check_id = "exam_time_window"
    fields = ("startTime", "endTime")

    def validate(
        self,
        record: Dict[str, Any],
        now: datetime,
        settings: ValidationSettings,
    ) -> List[FieldError]:
        if record["startTime"] < record["endTime"]:
            return []
        return [
            FieldError(
                "endTime",
                "End time must be after start time",
                ErrorKind.CROSS_FIELD_INVARIANT,
            )
        ]

    def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
        return record_kind in (RecordKind.EXAM, RecordKind.EXAM_CREATION_FORM)
