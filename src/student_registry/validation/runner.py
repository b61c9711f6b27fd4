from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.core.schemas import FieldSpec, Presence, get_field_specs
from .checks import RefinementCheck
from .config import ValidationSettings
from .fields import is_blank, validate_field
from .models import FieldError
from .pagination import pagination_specs


def get_schema_fields(kind: RecordKind, settings: ValidationSettings) -> List[FieldSpec]:
    specs = get_field_specs(kind)
    if kind.is_filter:
        specs.extend(pagination_specs(settings))
    return specs


def run_field_checks(
    specs: Iterable[FieldSpec],
    data: Mapping[str, Any],
    only: Optional[Set[str]] = None,
) -> Tuple[Dict[str, Any], List[FieldError], Set[str]]:
    """Check every field independently, without stopping at the first failure.

    Args:
        specs: Field definitions to walk, in order.
        data: Raw input. Keys without a definition are dropped.
        only: If given, restrict checking to these field names.

    Returns:
        ``(record, errors, failed)``: the normalized values of the fields that
        passed, the errors in field order, and the names of failed fields.
    """
    record: Dict[str, Any] = {}
    errors: List[FieldError] = []
    failed: Set[str] = set()

    for spec in specs:
        name = spec.name
        if only is not None and name not in only:
            continue
        value = data.get(name)

        if spec.presence == Presence.OPTIONAL and is_blank(value):
            if spec.default is not None:
                record[name] = spec.default
            continue
        if spec.presence == Presence.NULLABLE and value is None:
            record[name] = None
            continue
        if value is None:
            errors.append(
                FieldError(name, f"{spec.display_name} is required", ErrorKind.REQUIRED_FIELD)
            )
            failed.add(name)
            continue

        normalized, error = validate_field(spec, value)
        if error is not None:
            errors.append(error)
            failed.add(name)
        else:
            record[name] = normalized

    return record, errors, failed


def run_refinements(
    kind: RecordKind,
    record: Mapping[str, Any],
    failed: Set[str],
    now: datetime,
    settings: ValidationSettings,
    checks: Iterable[RefinementCheck],
    touched: Optional[Set[str]] = None,
) -> List[FieldError]:
    """Run the refinements that apply to ``kind``.

    A refinement is skipped when a field it reads failed or holds no value.
    With ``touched`` set, only refinements reading at least one touched field run.
    """
    errors: List[FieldError] = []
    for check in checks:
        if not check.applies_to_record_kind(kind):
            continue
        if touched is not None and not touched.intersection(check.fields):
            continue
        if any(f in failed or record.get(f) is None for f in check.fields):
            continue
        errors.extend(check.validate(dict(record), now, settings))
    return errors
