"""Tests for pagination value types."""

import pytest

from lifelessons.application.common.pagination import (
    MAX_OFFSET,
    MAX_PAGE_SIZE,
    PaginatedResult,
    Pagination,
)


class TestPaginatedResult:
    @pytest.mark.parametrize(
        ("total", "page_size", "expected_pages"),
        [(0, 12, 0), (1, 12, 1), (12, 12, 1), (13, 12, 2), (100, 7, 15)],
    )
    def test_total_pages_is_ceiling(self, total: int, page_size: int, expected_pages: int) -> None:
        result: PaginatedResult[int] = PaginatedResult(
            items=[], total=total, pagination=Pagination(page=1, page_size=page_size)
        )
        assert result.total_pages == expected_pages


class TestPagination:
    def test_rejects_out_of_range_values(self) -> None:
        with pytest.raises(ValueError):
            Pagination(page=0)
        with pytest.raises(ValueError):
            Pagination(page_size=MAX_PAGE_SIZE + 1)

    def test_coerce_uses_given_default_page_size(self) -> None:
        assert Pagination.coerce(None, None, default_page_size=6).page_size == 6

    @pytest.mark.parametrize("limit", [None, "1", "100"])
    def test_huge_page_keeps_offset_within_64_bits(self, limit: str | None) -> None:
        pagination = Pagination.coerce("100000000000000000000", limit)

        assert pagination.offset <= MAX_OFFSET
        assert pagination.offset > 10**15
