"""Record schemas and field definitions for Student Registry data.

This module declares, for every record kind, which fields exist, how each one
is typed and whether it must be present. The validation engine walks these
definitions; the CLI uses them to describe record kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type

from .enums import (
    DocumentCategory,
    ExamStatus,
    Gender,
    HolidayStatus,
    PriorityLevel,
    RecordKind,
    RegistrationStatus,
    StudentType,
    UserRole,
)


class FieldType(str, Enum):
    """Primitive shape of a single field."""

    TEXT = "text"
    IDENTIFIER = "identifier"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    TIME = "time"
    ENUM = "enum"
    DATE = "date"
    DATETIME = "datetime"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DOCUMENTS = "documents"


class Presence(str, Enum):
    """How a field may be omitted.

    - REQUIRED: must be present and valid.
    - NULLABLE: may be missing or None; normalized to None.
    - OPTIONAL: form-only; missing, None or blank input is left out of the record.
    """

    REQUIRED = "required"
    NULLABLE = "nullable"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class FieldSpec:
    """Definition of one field of a record kind.

    Attributes:
        name: Field key as transmitted by forms and API bodies (e.g. "birthDate").
        field_type: Primitive shape the value must have.
        presence: Whether the field may be omitted.
        label: Human-readable name used in "<label> is required" messages.
        min_length: Minimum string length (1 means "non-empty").
        choices: Closed value set for ENUM fields, or allowed keys for DOCUMENTS.
        positive: Number must be > 0.
        non_negative: Number must be >= 0.
        maximum: Inclusive upper bound for numbers.
        default: Value substituted when an optional field is absent.
        message: Override for the format/length error message.
    """

    name: str
    field_type: FieldType
    presence: Presence = Presence.REQUIRED
    label: Optional[str] = None
    min_length: int = 0
    choices: Optional[Type[Enum]] = None
    positive: bool = False
    non_negative: bool = False
    maximum: Optional[float] = None
    default: Any = None
    message: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label or self.name

    @property
    def required(self) -> bool:
        return self.presence == Presence.REQUIRED


REQUIRED = Presence.REQUIRED
NULLABLE = Presence.NULLABLE
OPTIONAL = Presence.OPTIONAL


def _text(name: str, label: Optional[str] = None, presence: Presence = REQUIRED,
          min_length: int = 1, message: Optional[str] = None) -> FieldSpec:
    return FieldSpec(name, FieldType.TEXT, presence, label, min_length=min_length, message=message)


def _free_text(name: str, presence: Presence = NULLABLE) -> FieldSpec:
    return FieldSpec(name, FieldType.TEXT, presence)


def _ref(name: str, presence: Presence = NULLABLE, label: Optional[str] = None) -> FieldSpec:
    return FieldSpec(name, FieldType.IDENTIFIER, presence, label, min_length=1)


def _enum(name: str, choices: Type[Enum], presence: Presence = REQUIRED,
          default: Any = None) -> FieldSpec:
    return FieldSpec(name, FieldType.ENUM, presence, choices=choices, default=default)


def _date(name: str, label: Optional[str] = None, presence: Presence = REQUIRED) -> FieldSpec:
    return FieldSpec(name, FieldType.DATE, presence, label)


def _timestamp(name: str) -> FieldSpec:
    return FieldSpec(name, FieldType.DATETIME, NULLABLE)


PHONE_MESSAGE = "Invalid phone number"
EMAIL_MESSAGE = "Invalid email address"
TIME_MESSAGE = "Invalid time format"

# ============================================================================
# ENTITY SCHEMAS
# ============================================================================

USER_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    FieldSpec("email", FieldType.EMAIL, NULLABLE, message=EMAIL_MESSAGE),
    _text("firstName", "First name", NULLABLE),
    _text("lastName", "Last name", NULLABLE),
    FieldSpec("profileImageUrl", FieldType.URL, NULLABLE),
    _enum("role", UserRole, NULLABLE),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

DEPARTMENT_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    _text("name", "Department name"),
    _free_text("description"),
    _timestamp("createdAt"),
)

ACADEMIC_SESSION_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    _text("name", "Session name"),
    _date("startDate", "Start date"),
    _date("endDate", "End date"),
    FieldSpec("isActive", FieldType.BOOLEAN, NULLABLE),
    _timestamp("createdAt"),
)

STUDENT_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    _ref("userId"),
    _text("studentNo", "Student number"),
    _text("studentName", "Student name"),
    _enum("studentType", StudentType),
    _text("birthCertNo", "Birth certificate number"),
    _date("birthDate", "Birth date"),
    _text("county", "County"),
    _text("subCounty", "Sub-county"),
    _enum("gender", Gender),
    _text("nationality", "Nationality"),
    FieldSpec("phoneNumber", FieldType.PHONE, label="Phone number", message=PHONE_MESSAGE),
    FieldSpec("email", FieldType.EMAIL, label="Email", message=EMAIL_MESSAGE),
    _text("class", "Class"),
    _text("session", "Session"),
    _text("programme", "Programme"),
    _ref("departmentId"),
    _free_text("kcpeIndex"),
    _free_text("kcseIndex"),
    _free_text("previousInstitution"),
    FieldSpec("documents", FieldType.DOCUMENTS, NULLABLE, choices=DocumentCategory),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

EXAM_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    _text("title", "Exam title"),
    _text("courseCode", "Course code"),
    _free_text("description"),
    _text("examType", "Exam type"),
    _ref("departmentId"),
    _ref("sessionId"),
    FieldSpec("examDate", FieldType.DATETIME, label="Exam date"),
    FieldSpec("startTime", FieldType.TIME, label="Start time", message=TIME_MESSAGE),
    FieldSpec("endTime", FieldType.TIME, label="End time", message=TIME_MESSAGE),
    _free_text("room"),
    FieldSpec("maxCapacity", FieldType.NUMBER, NULLABLE, positive=True),
    FieldSpec("registrationDeadline", FieldType.DATETIME, label="Registration deadline"),
    FieldSpec("registrationFee", FieldType.NUMBER, NULLABLE, non_negative=True),
    _enum("status", ExamStatus, NULLABLE),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

EXAM_REGISTRATION_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    _ref("studentId"),
    _ref("examId", REQUIRED, "Exam ID"),
    _enum("status", RegistrationStatus, NULLABLE),
    _timestamp("registeredAt"),
    _free_text("paymentStatus"),
    _free_text("notes"),
)

_REASON = FieldSpec(
    "reason",
    FieldType.TEXT,
    label="Reason",
    min_length=10,
    message="Reason must be at least 10 characters",
)

HOLIDAY_REPORT_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("id", REQUIRED),
    _ref("studentId"),
    _text("holidayType", "Holiday type"),
    _enum("priorityLevel", PriorityLevel, NULLABLE),
    _date("startDate", "Start date"),
    _date("expectedReturnDate", "Expected return date"),
    _text("destination", "Destination"),
    _REASON,
    _free_text("emergencyContactName"),
    FieldSpec("emergencyContactPhone", FieldType.PHONE, NULLABLE, message=PHONE_MESSAGE),
    FieldSpec("supportingDocuments", FieldType.DOCUMENTS, NULLABLE),
    _enum("status", HolidayStatus, NULLABLE),
    _timestamp("submittedAt"),
    _timestamp("reviewedAt"),
    _ref("reviewedBy"),
    _free_text("reviewComments"),
)

# ============================================================================
# FORM SCHEMAS
# ============================================================================

STUDENT_REGISTRATION_FORM_FIELDS: Tuple[FieldSpec, ...] = (
    _text("studentName", "Student name"),
    _text("studentNo", "Student number"),
    _enum("studentType", StudentType),
    _text("birthCertNo", "Birth certificate number"),
    _date("birthDate", "Birth date"),
    _text("county", "County"),
    _text("subCounty", "Sub-county"),
    _enum("gender", Gender),
    _text("nationality", "Nationality"),
    FieldSpec("phoneNumber", FieldType.PHONE, label="Phone number", message=PHONE_MESSAGE),
    FieldSpec("email", FieldType.EMAIL, label="Email", message=EMAIL_MESSAGE),
    _text("class", "Class"),
    _text("session", "Session"),
    _text("programme", "Programme"),
    _text("departmentId", "Department"),
    _free_text("kcpeIndex", OPTIONAL),
    _free_text("kcseIndex", OPTIONAL),
    _free_text("previousInstitution", OPTIONAL),
)

EXAM_CREATION_FORM_FIELDS: Tuple[FieldSpec, ...] = (
    _text("title", "Exam title"),
    _text("courseCode", "Course code"),
    _free_text("description", OPTIONAL),
    _text("examType", "Exam type"),
    _text("departmentId", "Department"),
    _text("sessionId", "Session"),
    _date("examDate", "Exam date"),
    FieldSpec("startTime", FieldType.TIME, label="Start time", message=TIME_MESSAGE),
    FieldSpec("endTime", FieldType.TIME, label="End time", message=TIME_MESSAGE),
    _free_text("room", OPTIONAL),
    FieldSpec("maxCapacity", FieldType.NUMBER, OPTIONAL, positive=True),
    _date("registrationDeadline", "Registration deadline"),
    FieldSpec("registrationFee", FieldType.NUMBER, OPTIONAL, non_negative=True),
)

HOLIDAY_REPORT_FORM_FIELDS: Tuple[FieldSpec, ...] = (
    _text("holidayType", "Holiday type"),
    _enum("priorityLevel", PriorityLevel, OPTIONAL, default=PriorityLevel.NORMAL.value),
    _date("startDate", "Start date"),
    _date("expectedReturnDate", "Expected return date"),
    _text("destination", "Destination"),
    _REASON,
    _free_text("emergencyContactName", OPTIONAL),
    FieldSpec("emergencyContactPhone", FieldType.PHONE, OPTIONAL, message=PHONE_MESSAGE),
)

INSERT_HOLIDAY_REPORT_FIELDS: Tuple[FieldSpec, ...] = (
    _ref("studentId", OPTIONAL),
) + HOLIDAY_REPORT_FORM_FIELDS

# ============================================================================
# FILTER SCHEMAS (page/limit are appended by validation.pagination)
# ============================================================================

EXAM_FILTER_FIELDS: Tuple[FieldSpec, ...] = (
    _free_text("department", OPTIONAL),
    _free_text("session", OPTIONAL),
    _free_text("examType", OPTIONAL),
    _free_text("q", OPTIONAL),
    _enum("status", ExamStatus, OPTIONAL),
)

STUDENT_FILTER_FIELDS: Tuple[FieldSpec, ...] = (
    _free_text("department", OPTIONAL),
    _free_text("class", OPTIONAL),
    _free_text("session", OPTIONAL),
    _enum("studentType", StudentType, OPTIONAL),
    _free_text("q", OPTIONAL),
)

HOLIDAY_REPORT_FILTER_FIELDS: Tuple[FieldSpec, ...] = (
    _enum("status", HolidayStatus, OPTIONAL),
    _enum("priorityLevel", PriorityLevel, OPTIONAL),
    _free_text("holidayType", OPTIONAL),
    _free_text("studentId", OPTIONAL),
    _free_text("q", OPTIONAL),
)

_FIELDS_BY_KIND: Dict[RecordKind, Tuple[FieldSpec, ...]] = {
    RecordKind.USER: USER_FIELDS,
    RecordKind.DEPARTMENT: DEPARTMENT_FIELDS,
    RecordKind.ACADEMIC_SESSION: ACADEMIC_SESSION_FIELDS,
    RecordKind.STUDENT: STUDENT_FIELDS,
    RecordKind.EXAM: EXAM_FIELDS,
    RecordKind.EXAM_REGISTRATION: EXAM_REGISTRATION_FIELDS,
    RecordKind.HOLIDAY_REPORT: HOLIDAY_REPORT_FIELDS,
    RecordKind.STUDENT_REGISTRATION_FORM: STUDENT_REGISTRATION_FORM_FIELDS,
    RecordKind.EXAM_CREATION_FORM: EXAM_CREATION_FORM_FIELDS,
    RecordKind.HOLIDAY_REPORT_FORM: HOLIDAY_REPORT_FORM_FIELDS,
    RecordKind.INSERT_HOLIDAY_REPORT: INSERT_HOLIDAY_REPORT_FIELDS,
    RecordKind.EXAM_FILTERS: EXAM_FILTER_FIELDS,
    RecordKind.STUDENT_FILTERS: STUDENT_FILTER_FIELDS,
    RecordKind.HOLIDAY_REPORT_FILTERS: HOLIDAY_REPORT_FILTER_FIELDS,
}

# ============================================================================
# REFERENCE OPTION LISTS (advisory; the fields themselves stay free text)
# ============================================================================

HOLIDAY_TYPES: Tuple[str, ...] = (
    "Medical Leave",
    "Family Emergency",
    "Personal Leave",
    "Academic Break",
    "Religious Holiday",
    "Other",
)

EXAM_TYPES: Tuple[str, ...] = (
    "Final Exam",
    "Mid-term Exam",
    "Quiz",
    "Practical Exam",
    "Oral Exam",
    "Project Defense",
)

STUDENT_TYPE_LABELS: Dict[str, str] = {
    StudentType.KUCCPS.value: "KUCCPS",
    StudentType.SELF_SPONSORED.value: "Self Sponsored",
}


def get_field_specs(kind: RecordKind) -> List[FieldSpec]:
    """Get the field definitions declared for a record kind.

    Args:
        kind: Record kind to look up.

    Returns:
        Field definitions in declaration order. For filter kinds the
        pagination fields are not included.

    Examples:
        >>> [s.name for s in get_field_specs(RecordKind.DEPARTMENT)]
        ['id', 'name', 'description', 'createdAt']
    """
    return list(_FIELDS_BY_KIND[kind])


def get_required_fields(kind: RecordKind) -> List[str]:
    """Get the names of fields that must be present for a record kind.

    Examples:
        >>> "birthDate" in get_required_fields(RecordKind.STUDENT_REGISTRATION_FORM)
        True
        >>> "kcpeIndex" in get_required_fields(RecordKind.STUDENT_REGISTRATION_FORM)
        False
    """
    return [spec.name for spec in _FIELDS_BY_KIND[kind] if spec.required]


__all__ = [
    "FieldType",
    "Presence",
    "FieldSpec",
    "HOLIDAY_TYPES",
    "EXAM_TYPES",
    "STUDENT_TYPE_LABELS",
    "get_field_specs",
    "get_required_fields",
]
