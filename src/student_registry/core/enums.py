"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class RecordKind(str, Enum):
    """Record shapes understood by the validation engine.

    Values are strings to ease serialization and CLI interchange.
    """

    USER = "USER"
    DEPARTMENT = "DEPARTMENT"
    ACADEMIC_SESSION = "ACADEMIC_SESSION"
    STUDENT = "STUDENT"
    EXAM = "EXAM"
    EXAM_REGISTRATION = "EXAM_REGISTRATION"
    HOLIDAY_REPORT = "HOLIDAY_REPORT"
    STUDENT_REGISTRATION_FORM = "STUDENT_REGISTRATION_FORM"
    EXAM_CREATION_FORM = "EXAM_CREATION_FORM"
    HOLIDAY_REPORT_FORM = "HOLIDAY_REPORT_FORM"
    INSERT_HOLIDAY_REPORT = "INSERT_HOLIDAY_REPORT"
    EXAM_FILTERS = "EXAM_FILTERS"
    STUDENT_FILTERS = "STUDENT_FILTERS"
    HOLIDAY_REPORT_FILTERS = "HOLIDAY_REPORT_FILTERS"

    @property
    def is_filter(self) -> bool:
        """True for list-query parameter shapes."""
        return self.value.endswith("_FILTERS")


class ErrorKind(str, Enum):
    """Categories of field-level and cross-field validation failures."""

    REQUIRED_FIELD = "RequiredFieldError"
    INVALID_FORMAT = "InvalidFormatError"
    INVALID_ENUM = "InvalidEnumError"
    OUT_OF_RANGE = "OutOfRangeError"
    TOO_SHORT = "TooShortError"
    CROSS_FIELD_INVARIANT = "CrossFieldInvariantError"


class StudentType(str, Enum):
    KUCCPS = "KUCCPS"
    SELF_SPONSORED = "SELF_SPONSORED"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class ExamStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RegistrationStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    WAITLISTED = "WAITLISTED"


class HolidayStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    UNDER_REVIEW = "UNDER_REVIEW"


class PriorityLevel(str, Enum):
    NORMAL = "Normal"
    URGENT = "Urgent"
    EMERGENCY = "Emergency"


class UserRole(str, Enum):
    STUDENT = "STUDENT"
    ADMIN = "ADMIN"
    STAFF = "STAFF"
    SUPER_ADMIN = "SUPER_ADMIN"


class DocumentCategory(str, Enum):
    """Upload slots of the student onboarding form."""

    BIRTH_CERTIFICATE = "birthCertificate"
    KCSE_CERTIFICATE = "kcseCertificate"
    TRANSCRIPTS = "transcripts"
    PASSPORT_PHOTO = "passportPhoto"


__all__ = [
    "RecordKind",
    "ErrorKind",
    "StudentType",
    "Gender",
    "ExamStatus",
    "RegistrationStatus",
    "HolidayStatus",
    "PriorityLevel",
    "UserRole",
    "DocumentCategory",
]
