"""Field-level validators.

Each validator inspects one value in isolation and either returns nothing
(valid) or a FieldError naming the field path. Coercing validators return a
``(value, error)`` pair where ``value`` is the normalized form on success.

All functions are pure: no I/O, no clock, no shared state.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from email_validator import EmailNotValidError, validate_email

from student_registry.core.enums import ErrorKind
from student_registry.core.schemas import FieldSpec, FieldType
from student_registry.core.utils import parse_date_like, parse_datetime_like
from .config import PHONE_PATTERN, TIME_PATTERN, URL_PATTERN
from .models import FieldError

Coerced = Tuple[Any, Optional[FieldError]]


def is_blank(value: Any) -> bool:
    """True for values a form sends when the input was left empty."""
    return value is None or (isinstance(value, str) and value == "")


def check_string(path: str, value: Any) -> Optional[FieldError]:
    if not isinstance(value, str):
        return FieldError(path, "Expected a string", ErrorKind.INVALID_FORMAT)
    return None


def check_non_empty(path: str, value: Any, label: Optional[str] = None) -> Optional[FieldError]:
    """Raw non-empty check; whitespace is not trimmed."""
    error = check_string(path, value)
    if error:
        return error
    if value == "":
        return FieldError(path, f"{label or path} is required", ErrorKind.REQUIRED_FIELD)
    return None


def check_min_length(
    path: str, value: Any, min_length: int, message: Optional[str] = None
) -> Optional[FieldError]:
    error = check_string(path, value)
    if error:
        return error
    if len(value) < min_length:
        return FieldError(
            path,
            message or f"{path} must be at least {min_length} characters",
            ErrorKind.TOO_SHORT,
        )
    return None


def check_pattern(
    path: str, value: Any, pattern: "re.Pattern[str]", message: str
) -> Optional[FieldError]:
    error = check_string(path, value)
    if error:
        return error
    if not pattern.match(value):
        return FieldError(path, message, ErrorKind.INVALID_FORMAT)
    return None


def check_email(path: str, value: Any, message: str = "Invalid email address") -> Optional[FieldError]:
    """Syntax-only check; no DNS lookup. The submitted spelling is kept as is."""
    error = check_string(path, value)
    if error:
        return error
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return FieldError(path, message, ErrorKind.INVALID_FORMAT)
    return None


def check_phone(path: str, value: Any, message: str = "Invalid phone number") -> Optional[FieldError]:
    """Examples:
    >>> check_phone("phoneNumber", "+254712345678") is None
    True
    >>> check_phone("phoneNumber", "abc123").kind
    <ErrorKind.INVALID_FORMAT: 'InvalidFormatError'>
    """
    return check_pattern(path, value, PHONE_PATTERN, message)


def check_time(path: str, value: Any, message: str = "Invalid time format") -> Optional[FieldError]:
    return check_pattern(path, value, TIME_PATTERN, message)


def check_url(path: str, value: Any, message: str = "Invalid URL") -> Optional[FieldError]:
    return check_pattern(path, value, URL_PATTERN, message)


def check_enum(path: str, value: Any, choices: Type[Enum]) -> Coerced:
    """Check membership in a closed value set; returns the plain string value."""
    allowed = [member.value for member in choices]
    candidate = value.value if isinstance(value, choices) else value
    if candidate not in allowed:
        return None, FieldError(
            path,
            f"Invalid value {value!r} for {path}. Allowed: {', '.join(allowed)}",
            ErrorKind.INVALID_ENUM,
        )
    return candidate, None


def check_bounds(
    path: str,
    value: float,
    positive: bool = False,
    non_negative: bool = False,
    maximum: Optional[float] = None,
) -> Optional[FieldError]:
    if positive and not value > 0:
        return FieldError(path, f"{path} must be greater than 0", ErrorKind.OUT_OF_RANGE)
    if non_negative and value < 0:
        return FieldError(path, f"{path} must be 0 or greater", ErrorKind.OUT_OF_RANGE)
    if maximum is not None and value > maximum:
        return FieldError(path, f"{path} must be at most {maximum:g}", ErrorKind.OUT_OF_RANGE)
    return None


def coerce_number(path: str, value: Any, integer: bool = False) -> Coerced:
    """Accept numbers or numeric strings (HTML forms send everything as text)."""
    if isinstance(value, bool):
        return None, FieldError(path, "Expected a number", ErrorKind.INVALID_FORMAT)
    number: Any = value
    if isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None, FieldError(path, "Expected a number", ErrorKind.INVALID_FORMAT)
    if not isinstance(number, (int, float)) or (isinstance(number, float) and not math.isfinite(number)):
        return None, FieldError(path, "Expected a number", ErrorKind.INVALID_FORMAT)
    if integer:
        if isinstance(number, float) and not number.is_integer():
            return None, FieldError(path, "Expected a whole number", ErrorKind.INVALID_FORMAT)
        number = int(number)
    return number, None


def coerce_date(path: str, value: Any, message: str = "Invalid date") -> Coerced:
    try:
        return parse_date_like(value), None
    except ValueError:
        return None, FieldError(path, message, ErrorKind.INVALID_FORMAT)


def coerce_datetime(path: str, value: Any, message: str = "Invalid date-time") -> Coerced:
    try:
        return parse_datetime_like(value), None
    except ValueError:
        return None, FieldError(path, message, ErrorKind.INVALID_FORMAT)


def coerce_boolean(path: str, value: Any) -> Coerced:
    if isinstance(value, bool):
        return value, None
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true", None
    return None, FieldError(path, "Expected true or false", ErrorKind.INVALID_FORMAT)


def check_documents(path: str, value: Any, categories: Optional[Type[Enum]] = None) -> Coerced:
    """Validate a document-reference mapping of category -> stored-file handle.

    When ``categories`` is given, keys must be among its values.
    """
    if not isinstance(value, dict):
        return None, FieldError(path, "Expected a mapping of documents", ErrorKind.INVALID_FORMAT)
    documents: Dict[str, str] = {}
    for key, handle in value.items():
        if not isinstance(key, str) or key == "":
            return None, FieldError(path, "Document category must be a non-empty string",
                                    ErrorKind.INVALID_FORMAT)
        if categories is not None:
            _, error = check_enum(f"{path}.{key}", key, categories)
            if error:
                return None, error
        if not isinstance(handle, str) or handle == "":
            return None, FieldError(f"{path}.{key}", "Document reference must be a non-empty string",
                                    ErrorKind.INVALID_FORMAT)
        documents[key] = handle
    return documents, None


def validate_field(spec: FieldSpec, value: Any, maximum: Optional[float] = None) -> Coerced:
    """Run the checks a field definition calls for on a present value.

    Args:
        spec: Field definition.
        value: Raw value (not absent; presence is decided by the caller).
        maximum: Upper bound overriding ``spec.maximum`` (used for page limits).

    Returns:
        ``(normalized_value, None)`` on success, ``(None, FieldError)`` otherwise.
    """
    path = spec.name
    ftype = spec.field_type

    if ftype in (FieldType.TEXT, FieldType.IDENTIFIER):
        if spec.min_length > 1:
            error = check_min_length(path, value, spec.min_length, spec.message)
        elif spec.min_length == 1:
            error = check_non_empty(path, value, spec.display_name)
        else:
            error = check_string(path, value)
        return (None, error) if error else (value, None)

    if ftype in (FieldType.EMAIL, FieldType.PHONE, FieldType.URL, FieldType.TIME, FieldType.DATE,
                 FieldType.DATETIME):
        if value == "" and spec.required:
            return None, FieldError(path, f"{spec.display_name} is required", ErrorKind.REQUIRED_FIELD)

    if ftype == FieldType.EMAIL:
        error = check_email(path, value, spec.message or "Invalid email address")
    elif ftype == FieldType.PHONE:
        error = check_phone(path, value, spec.message or "Invalid phone number")
    elif ftype == FieldType.URL:
        error = check_url(path, value, spec.message or "Invalid URL")
    elif ftype == FieldType.TIME:
        error = check_time(path, value, spec.message or "Invalid time format")
    elif ftype == FieldType.ENUM:
        if spec.choices is None:
            raise ValueError(f"ENUM field {path} has no choices")
        return check_enum(path, value, spec.choices)
    elif ftype == FieldType.DATE:
        return coerce_date(path, value)
    elif ftype == FieldType.DATETIME:
        return coerce_datetime(path, value)
    elif ftype == FieldType.BOOLEAN:
        return coerce_boolean(path, value)
    elif ftype == FieldType.DOCUMENTS:
        return check_documents(path, value, spec.choices)
    elif ftype in (FieldType.NUMBER, FieldType.INTEGER):
        number, error = coerce_number(path, value, integer=ftype == FieldType.INTEGER)
        if error:
            return None, error
        error = check_bounds(
            path,
            number,
            positive=spec.positive,
            non_negative=spec.non_negative,
            maximum=maximum if maximum is not None else spec.maximum,
        )
        return (None, error) if error else (number, None)
    else:
        raise ValueError(f"Unsupported field type: {ftype}")

    return (None, error) if error else (value, None)
