"""Pagination fields and page metadata for listing queries.

Listing filters (exams, students, holiday reports) share ``page`` and
``limit``. Their bounds depend on ValidationSettings, so they are built here
rather than declared with the static record schemas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple, TypeVar

from student_registry.core.schemas import FieldSpec, FieldType, Presence
from .config import DEFAULT_PAGE, ValidationSettings

T = TypeVar("T")


def pagination_specs(settings: ValidationSettings) -> List[FieldSpec]:
    """Field definitions for ``page`` and ``limit`` under the given settings."""
    return [
        FieldSpec("page", FieldType.INTEGER, Presence.OPTIONAL, positive=True, default=DEFAULT_PAGE),
        FieldSpec(
            "limit",
            FieldType.INTEGER,
            Presence.OPTIONAL,
            positive=True,
            maximum=settings.max_limit,
            default=settings.default_limit,
        ),
    ]


@dataclass(frozen=True)
class PaginationMeta:
    """Page metadata returned alongside a listing.

    Attributes:
        page: 1-based page number.
        limit: Page size.
        total: Number of matching records before paging.
        total_pages: ceil(total / limit); 0 when there are no records.
    """

    page: int
    limit: int
    total: int
    total_pages: int

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.page < 1:
            raise ValueError(f"page must be positive, got {self.page}")
        if self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")
        if self.total < 0:
            raise ValueError(f"total must be non-negative, got {self.total}")
        if self.total_pages < 0:
            raise ValueError(f"total_pages must be non-negative, got {self.total_pages}")

    @classmethod
    def from_total(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """Examples:
        >>> PaginationMeta.from_total(page=2, limit=10, total=25).total_pages
        3
        """
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))

    def to_dict(self) -> Dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


def paginate(items: Sequence[T], filters: Mapping[str, Any]) -> Tuple[List[T], PaginationMeta]:
    """Slice an in-memory listing according to validated filters.

    Args:
        items: Records already matched by the caller's search and filters.
        filters: An accepted filter record (``page`` and ``limit`` present).

    Returns:
        The items on the requested page and the page metadata. A page past
        the end yields an empty list.

    Examples:
        >>> page_items, meta = paginate(list(range(25)), {"page": 3, "limit": 10})
        >>> page_items
        [20, 21, 22, 23, 24]
        >>> meta.to_dict()
        {'page': 3, 'limit': 10, 'total': 25, 'totalPages': 3}
    """
    page = int(filters["page"])
    limit = int(filters["limit"])
    meta = PaginationMeta.from_total(page=page, limit=limit, total=len(items))
    start = (page - 1) * limit
    return list(items[start:start + limit]), meta
