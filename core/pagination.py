"""
Page-based Pagination
=====================

Stateless page arithmetic shared by every list endpoint.

A request names a 1-based ``page`` and a ``limit``; the repository skips
``(page - 1) * limit`` rows and returns at most ``limit`` of them together
with the total match count, from which the page metadata is derived.
Pages past the end are not an error: they come back empty with
``has_next`` false.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from rest_framework import serializers

MAX_PAGE_SIZE = 50


@dataclass(frozen=True)
class PageParams:
    """Validated page request."""
    page: int = 1
    limit: int = 10

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if not 1 <= self.limit <= MAX_PAGE_SIZE:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def window(self, items):
        """Slice a queryset or sequence down to this page."""
        return items[self.offset:self.offset + self.limit]


@dataclass
class Page:
    """One page of results plus its metadata."""
    items: List[Any] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total: int = 0
    has_next: bool = False
    has_prev: bool = False

    def metadata(self, total_key: str = "total") -> dict:
        """Pagination block in the API's camelCase wire format."""
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            total_key: self.total,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def paginate(items: Sequence, total: int, params: PageParams) -> Page:
    """Build a Page from an already-windowed item list and the total count."""
    pages = total_pages(total, params.limit)
    return Page(
        items=list(items),
        current_page=params.page,
        total_pages=pages,
        total=total,
        has_next=params.page < pages,
        has_prev=params.page > 1,
    )


class PageQuerySerializer(serializers.Serializer):
    """
    Validates ``page`` / ``limit`` / ``sort`` query parameters.

    Subclasses set ``sort_choices``, ``default_sort`` and ``default_limit``.
    Oversized limits are rejected, never clamped.
    """

    sort_choices: Sequence[str] = ("-createdAt", "createdAt")
    default_sort = "-createdAt"
    default_limit = 10

    page = serializers.IntegerField(min_value=1, required=False)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_PAGE_SIZE, required=False)
    sort = serializers.CharField(required=False)

    def validate_sort(self, value):
        if value not in self.sort_choices:
            raise serializers.ValidationError(
                f"Invalid sort parameter. Allowed: {', '.join(self.sort_choices)}"
            )
        return value

    def to_page_params(self) -> PageParams:
        data = self.validated_data
        return PageParams(page=data.get("page", 1), limit=data.get("limit", self.default_limit))

    @property
    def sort_key(self) -> str:
        return self.validated_data.get("sort", self.default_sort)
