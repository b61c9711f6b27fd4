"""Registration deadline check.

Registration must close strictly before the exam starts. Form values are
calendar dates, so there a deadline on the exam day is rejected; stored exams
carry timestamps and may close earlier on the same day.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.core.utils import as_utc
from ..config import ValidationSettings
from ..models import FieldError


class RegistrationDeadlineCheck:
    """Validate that registrationDeadline precedes examDate."""

    check_id = "registration_deadline"
    fields = ("registrationDeadline", "examDate")

    def validate(
        self,
        record: Dict[str, Any],
        now: datetime,
        settings: ValidationSettings,
    ) -> List[FieldError]:
        if as_utc(record["registrationDeadline"]) < as_utc(record["examDate"]):
            return []
        return [
            FieldError(
                "registrationDeadline",
                "Registration deadline must be before exam date",
                ErrorKind.CROSS_FIELD_INVARIANT,
            )
        ]

    def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
        return record_kind in (RecordKind.EXAM, RecordKind.EXAM_CREATION_FORM)
