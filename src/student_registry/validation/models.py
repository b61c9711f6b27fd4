"""Validation data models.

This module defines core data structures for validation results:
- FieldError: One failed check, pinned to the field it blames
- ValidationResult: Accepted or rejected outcome of a single validation call
- BatchReport: Aggregated results from validating every record in a file
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from student_registry.core.enums import ErrorKind, RecordKind


@dataclass(frozen=True)
class FieldError:
    """A single failed check.

    Attributes:
        path: Field the error is attached to (e.g., "birthDate").
        message: Human-readable message suitable for an inline form error.
        kind: Error category from the taxonomy.

    Examples:
        >>> FieldError("phoneNumber", "Invalid phone number", ErrorKind.INVALID_FORMAT)
    """

    path: str
    message: str
    kind: ErrorKind

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message, "kind": self.kind.value}


class RecordValidationError(ValueError):
    """Raised by ValidationResult.unwrap() when the record was rejected."""

    def __init__(self, record_kind: RecordKind, errors: List[FieldError]) -> None:
        self.record_kind = record_kind
        self.errors = list(errors)
        details = "; ".join(f"{e.path}: {e.message}" for e in self.errors)
        super().__init__(f"{record_kind.value} rejected: {details}")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call.

    Attributes:
        record_kind: Record kind that was validated.
        accepted: True if every field and refinement passed.
        record: Normalized record (accepted only), ready for the persistence port.
        errors: Ordered failures (rejected only), one per failed check.

    Examples:
        >>> result = validate_record(RecordKind.HOLIDAY_REPORT_FORM, data, now=now)
        >>> if not result.accepted:
        ...     return {"errors": result.to_dict()["errors"]}, 400
    """

    record_kind: RecordKind
    accepted: bool
    record: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.accepted and self.errors:
            raise ValueError("accepted=True requires an empty error list")
        if self.accepted and self.record is None:
            raise ValueError("accepted=True requires a normalized record")
        if not self.accepted and not self.errors:
            raise ValueError("accepted=False requires at least one error")
        if not self.accepted and self.record is not None:
            raise ValueError("accepted=False must not carry a record")

    @classmethod
    def accept(cls, record_kind: RecordKind, record: Dict[str, Any]) -> "ValidationResult":
        return cls(record_kind=record_kind, accepted=True, record=record)

    @classmethod
    def reject(cls, record_kind: RecordKind, errors: List[FieldError]) -> "ValidationResult":
        return cls(record_kind=record_kind, accepted=False, errors=list(errors))

    def errors_by_path(self) -> Dict[str, List[str]]:
        """Group error messages by field path, keeping their order."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.path, []).append(error.message)
        return grouped

    def unwrap(self) -> Dict[str, Any]:
        """Return the normalized record or raise RecordValidationError."""
        if not self.accepted:
            raise RecordValidationError(self.record_kind, self.errors)
        return self.record  # type: ignore[return-value]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (dates rendered as ISO strings)."""
        return {
            "record_kind": self.record_kind.value,
            "accepted": self.accepted,
            "record": _jsonable(self.record) if self.record is not None else None,
            "errors": [e.to_dict() for e in self.errors],
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


@dataclass
class BatchReport:
    """Aggregated validation results for every record in an input file.

    Attributes:
        results: One ValidationResult per record, in file order.
        record_kind: Record kind each record was validated as.
        input_path: File the records were read from.
        reference_time: The "now" used for time-sensitive refinements.

    Examples:
        >>> report = run_file_validation(Path("students.csv"), RecordKind.STUDENT_REGISTRATION_FORM)
        >>> report.has_errors()
        True
        >>> report.get_rejected_count()
        2
    """

    results: List[ValidationResult]
    record_kind: RecordKind
    input_path: Path
    reference_time: Optional[datetime] = None

    def has_errors(self) -> bool:
        """True if any record was rejected."""
        return any(not r.accepted for r in self.results)

    def get_accepted_count(self) -> int:
        return sum(1 for r in self.results if r.accepted)

    def get_rejected_count(self) -> int:
        return sum(1 for r in self.results if not r.accepted)

    def get_error_count(self) -> int:
        """Count individual field errors across all rejected records."""
        return sum(len(r.errors) for r in self.results)

    def get_rejected_rows(self) -> List[Tuple[int, ValidationResult]]:
        """Rejected results paired with their 1-based row number."""
        return [(i, r) for i, r in enumerate(self.results, start=1) if not r.accepted]

    def get_error_counts_by_kind(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for result in self.results:
            for error in result.errors:
                counts[error.kind.value] = counts.get(error.kind.value, 0) + 1
        return dict(sorted(counts.items()))

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Kind: STUDENT_REGISTRATION_FORM (students.csv)
              Records: 10 validated (8 accepted, 2 rejected)
              Issues: 3 field errors
        """
        return (
            f"Validation Summary:\n"
            f"  Kind: {self.record_kind.value} ({self.input_path.name})\n"
            f"  Records: {len(self.results)} validated ({self.get_accepted_count()} accepted, "
            f"{self.get_rejected_count()} rejected)\n"
            f"  Issues: {self.get_error_count()} field errors"
        )

    def to_console_summary(self) -> str:
        """Summary plus every error of each rejected record, as printed by the CLI."""
        lines = [self.summary(), ""]
        rejected = self.get_rejected_rows()
        if not rejected:
            lines.append("✅ All records accepted!")
        else:
            lines.append("Rejected Records:")
            for row, result in rejected:
                lines.append(f"❌ row {row}: {len(result.errors)} errors")
                for error in result.errors:
                    lines.append(f"   - {error.path}: {error.message} ({error.kind.value})")
        return "\n".join(lines)

    def to_markdown(self) -> str:
        """Generate detailed Markdown validation report.

        Returns:
            Markdown with a header, summary counts, error counts by kind and a
            section per rejected record.
        """
        generated = (self.reference_time or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
        lines = [
            f"# Validation Report: {self.input_path.name}",
            "",
            f"**Record Kind:** {self.record_kind.value}",
            f"**File:** {self.input_path.name}",
            f"**Reference Time:** {generated}",
            "",
            "## Summary",
            "",
            f"- **Records:** {len(self.results)}",
            f"- **Accepted:** {self.get_accepted_count()} ✅",
            f"- **Rejected:** {self.get_rejected_count()} ❌",
            f"- **Field Errors:** {self.get_error_count()}",
            "",
        ]

        by_kind = self.get_error_counts_by_kind()
        if by_kind:
            lines.append("### Errors by Kind")
            lines.append("")
            for kind, count in by_kind.items():
                lines.append(f"- **{kind}:** {count}")
            lines.append("")

        rejected = self.get_rejected_rows()
        if not rejected:
            lines.append("## ✅ All Records Accepted")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
        else:
            lines.append("## ❌ Rejected Records")
            lines.append("")
            for row, result in rejected:
                lines.append(f"### ❌ Row {row} ({len(result.errors)} errors)")
                lines.append("")
                for error in result.errors:
                    lines.append(f"- `{error.path}`: {error.message} ({error.kind.value})")
                lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate detailed JSON validation report."""
        report_data = {
            "metadata": {
                "record_kind": self.record_kind.value,
                "input_path": self.input_path.name,
                "reference_time": self.reference_time.isoformat() if self.reference_time else None,
            },
            "summary": {
                "records": len(self.results),
                "accepted": self.get_accepted_count(),
                "rejected": self.get_rejected_count(),
                "errors": self.get_error_count(),
                "errors_by_kind": self.get_error_counts_by_kind(),
            },
            "rejected_records": [
                {"row": row, "errors": [e.to_dict() for e in result.errors]}
                for row, result in self.get_rejected_rows()
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)
