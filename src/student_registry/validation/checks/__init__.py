"""Cross-field refinement checks base interface.

This module defines the protocol (interface) that all refinements must implement.
A refinement verifies a relationship between two or more fields of one record
(e.g., a registration deadline preceding the exam date) after the field-level
checks for those fields have passed.

To implement a new refinement:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the RefinementCheck protocol
3. List the fields it reads in `fields`, implement `validate()` and
   `applies_to_record_kind()`
4. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_check.py
    from datetime import datetime
    from typing import Any, Dict, List
    from student_registry.core.enums import ErrorKind, RecordKind
    from ..config import ValidationSettings
    from ..models import FieldError

    class MyCheck:
        check_id = "my_check"
        fields = ("startDate", "endDate")

        def validate(
            self, record: Dict[str, Any], now: datetime, settings: ValidationSettings
        ) -> List[FieldError]:
            if record["endDate"] < record["startDate"]:
                return [FieldError("endDate", "...", ErrorKind.CROSS_FIELD_INVARIANT)]
            return []

        def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
            return record_kind == RecordKind.ACADEMIC_SESSION
    ```
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Protocol, Tuple

from student_registry.core.enums import RecordKind
from ..config import ValidationSettings
from ..models import FieldError


class RefinementCheck(Protocol):
    """Protocol defining the interface for cross-field refinements.

    Use duck typing (Protocol) - no need to inherit from a base class.

    Attributes:
        check_id: Unique identifier for the refinement.
        fields: Field names the refinement reads. The runner skips the
            refinement when any of them failed or is absent.
    """

    check_id: str
    fields: Tuple[str, ...]

    def validate(
        self,
        record: Dict[str, Any],
        now: datetime,
        settings: ValidationSettings,
    ) -> List[FieldError]:
        """Run the refinement.

        Args:
            record: Normalized record; every name in ``fields`` holds a valid,
                non-None value.
            now: Reference time of the validation call.
            settings: Tunable thresholds.

        Returns:
            Errors with kind CROSS_FIELD_INVARIANT; empty list when the
            invariant holds.
        """
        ...

    def applies_to_record_kind(self, record_kind: RecordKind) -> bool:
        """Check if this refinement applies to a given record kind."""
        ...


__all__ = ["RefinementCheck"]
