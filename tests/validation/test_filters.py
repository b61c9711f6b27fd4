"""Tests for listing filter validation and pagination."""

import pytest
from student_registry.core.enums import ErrorKind, RecordKind
from student_registry.validation import (
    PaginationMeta,
    ValidationSettings,
    paginate,
    validate_filters,
)


@pytest.mark.parametrize(
    "kind",
    [RecordKind.EXAM_FILTERS, RecordKind.STUDENT_FILTERS, RecordKind.HOLIDAY_REPORT_FILTERS],
)
def test_empty_filters_get_pagination_defaults(kind):
    result = validate_filters(kind, {})

    assert result.accepted is True
    assert result.record == {"page": 1, "limit": 10}


def test_query_string_values_are_coerced():
    result = validate_filters(
        RecordKind.EXAM_FILTERS,
        {"page": "3", "limit": "25", "status": "PUBLISHED", "q": "CS101"},
    )

    assert result.record == {"status": "PUBLISHED", "q": "CS101", "page": 3, "limit": 25}


def test_blank_filters_are_ignored():
    result = validate_filters(RecordKind.STUDENT_FILTERS, {"department": "", "studentType": ""})

    assert result.record == {"page": 1, "limit": 10}


@pytest.mark.parametrize(
    "params, kind",
    [
        ({"limit": 500}, ErrorKind.OUT_OF_RANGE),
        ({"limit": 0}, ErrorKind.OUT_OF_RANGE),
        ({"page": 0}, ErrorKind.OUT_OF_RANGE),
        ({"page": -1}, ErrorKind.OUT_OF_RANGE),
        ({"page": "2.5"}, ErrorKind.INVALID_FORMAT),
        ({"page": "first"}, ErrorKind.INVALID_FORMAT),
    ],
)
def test_invalid_pagination(params, kind):
    result = validate_filters(RecordKind.EXAM_FILTERS, params)

    assert result.accepted is False
    assert [(e.path, e.kind) for e in result.errors] == [(next(iter(params)), kind)]


def test_limit_at_maximum_is_accepted():
    assert validate_filters(RecordKind.EXAM_FILTERS, {"limit": 100}).record["limit"] == 100


def test_settings_change_limits():
    settings = ValidationSettings(default_limit=20, max_limit=50)

    assert validate_filters(RecordKind.EXAM_FILTERS, {}, settings=settings).record["limit"] == 20
    assert validate_filters(RecordKind.EXAM_FILTERS, {"limit": 60}, settings=settings).accepted is False


def test_unknown_enum_filter():
    result = validate_filters(RecordKind.HOLIDAY_REPORT_FILTERS, {"status": "LOST"})

    assert result.errors[0].path == "status"
    assert result.errors[0].kind == ErrorKind.INVALID_ENUM


def test_non_filter_kind_raises():
    with pytest.raises(ValueError, match="not a filter record kind"):
        validate_filters(RecordKind.EXAM, {})


def test_paginate_middle_and_last_page():
    items = list(range(25))

    page_items, meta = paginate(items, {"page": 2, "limit": 10})
    assert page_items == list(range(10, 20))
    assert meta == PaginationMeta(page=2, limit=10, total=25, total_pages=3)

    page_items, meta = paginate(items, {"page": 3, "limit": 10})
    assert page_items == [20, 21, 22, 23, 24]


def test_paginate_past_the_end():
    page_items, meta = paginate(list(range(5)), {"page": 4, "limit": 10})

    assert page_items == []
    assert meta.total_pages == 1


def test_paginate_empty_listing():
    page_items, meta = paginate([], validate_filters(RecordKind.EXAM_FILTERS, {}).record)

    assert page_items == []
    assert meta.to_dict() == {"page": 1, "limit": 10, "total": 0, "totalPages": 0}


def test_pagination_meta_invariants():
    with pytest.raises(ValueError):
        PaginationMeta(page=0, limit=10, total=0, total_pages=0)
    with pytest.raises(ValueError):
        PaginationMeta(page=1, limit=10, total=-1, total_pages=0)
