"""
Tests for page arithmetic and query-parameter validation.

Run with: python -m pytest core/tests/test_pagination.py -v
"""

import pytest

from core.pagination import (
    MAX_PAGE_SIZE,
    Page,
    PageParams,
    PageQuerySerializer,
    paginate,
    total_pages,
)


class TestPageParams:

    def test_offset(self):
        assert PageParams(page=1, limit=10).offset == 0
        assert PageParams(page=3, limit=10).offset == 20

    def test_window_slices_items(self):
        items = list(range(25))
        assert PageParams(page=3, limit=10).window(items) == [20, 21, 22, 23, 24]

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, MAX_PAGE_SIZE + 1)])
    def test_rejects_out_of_range(self, page, limit):
        with pytest.raises(ValueError):
            PageParams(page=page, limit=limit)


class TestPaginate:

    @pytest.mark.parametrize("total,limit,pages", [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (25, 10, 3),
    ])
    def test_total_pages(self, total, limit, pages):
        assert total_pages(total, limit) == pages

    def test_middle_page(self):
        page = paginate(list(range(10)), 25, PageParams(page=2, limit=10))
        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_prev is True

    def test_last_page(self):
        page = paginate(list(range(5)), 25, PageParams(page=3, limit=10))
        assert page.has_next is False
        assert page.has_prev is True

    def test_page_past_the_end_is_empty(self):
        page = paginate([], 25, PageParams(page=9, limit=10))
        assert page.items == []
        assert page.total == 25
        assert page.has_next is False
        assert page.has_prev is True

    def test_empty_result(self):
        page = paginate([], 0, PageParams())
        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_prev is False

    def test_metadata_uses_named_total_key(self):
        page = Page(items=[], current_page=2, total_pages=4, total=37, has_next=True, has_prev=True)
        assert page.metadata("totalPosts") == {
            "currentPage": 2,
            "totalPages": 4,
            "totalPosts": 37,
            "hasNext": True,
            "hasPrev": True,
        }


class TestPageQuerySerializer:

    def test_defaults(self):
        serializer = PageQuerySerializer(data={})
        assert serializer.is_valid()
        assert serializer.to_page_params() == PageParams(page=1, limit=10)
        assert serializer.sort_key == "-createdAt"

    def test_limit_over_max_rejected_not_clamped(self):
        serializer = PageQuerySerializer(data={"limit": "51"})
        assert not serializer.is_valid()
        assert "limit" in serializer.errors

    def test_unknown_sort_rejected(self):
        serializer = PageQuerySerializer(data={"sort": "popularity"})
        assert not serializer.is_valid()
        assert "sort" in serializer.errors

    def test_every_bad_param_reported(self):
        serializer = PageQuerySerializer(data={"page": "0", "limit": "100", "sort": "nope"})
        assert not serializer.is_valid()
        assert set(serializer.errors) == {"page", "limit", "sort"}
