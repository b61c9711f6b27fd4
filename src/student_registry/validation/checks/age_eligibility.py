"""Applicant age eligibility check.

Applicants must be within the configured age range (16 to 35 by default) on
the day the registration form is submitted. Age is the difference of calendar
years; month and day of birth are not considered.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.core.utils import calendar_age
from ..config import ValidationSettings
from ..models import FieldError


class AgeEligibilityCheck:
    """Validate that the applicant's age falls in the eligible range."""

    check_id = "age_eligibility"
    fields = ("birthDate",)

    def validate(
        self,
        record: Dict[str, Any],
        now: datetime,
        settings: ValidationSettings,
    ) -> List[FieldError]:
        age = calendar_age(record["birthDate"], now.date())
        if settings.min_age <= age <= settings.max_age:
            return []
        return [
            FieldError(
                "birthDate",
                f"Age must be between {settings.min_age} and {settings.max_age} years",
                ErrorKind.CROSS_FIELD_INVARIANT,
            )
        ]

    def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
        """Only new applications are age-gated; stored students keep aging."""
        return record_kind == RecordKind.STUDENT_REGISTRATION_FORM
