"""Tests for pagination parsing and the paginated response envelope."""

import pytest
from pydantic import ValidationError

from src.explorer.domain.errors import BadRequestError, InternalError
from src.explorer.domain.pagination import (
    PaginatedResponse,
    PagingCursor,
    RawQueryResult,
    parse_paging_cursor,
)


def _identity(item: int) -> int:
    return item


# ---------------------------------------------------------------------------
# parse_paging_cursor
# ---------------------------------------------------------------------------


class TestParsePagingCursorDefaults:
    """Absent parameters fall back to page 1 and the default page size."""

    def test_both_absent(self) -> None:
        cursor = parse_paging_cursor(None, None, default_page_size=15, max_page_size=100)
        assert cursor == PagingCursor(page=1, page_size=15)

    def test_only_page_given(self) -> None:
        cursor = parse_paging_cursor("3", None, default_page_size=20, max_page_size=100)
        assert cursor.page == 3
        assert cursor.page_size == 20

    def test_only_page_size_given(self) -> None:
        cursor = parse_paging_cursor(None, "7", default_page_size=20, max_page_size=100)
        assert cursor.page == 1
        assert cursor.page_size == 7


class TestParsePagingCursorValid:
    def test_parses_integers(self) -> None:
        cursor = parse_paging_cursor("2", "10")
        assert (cursor.page, cursor.page_size) == (2, 10)

    def test_accepts_max_page_size(self) -> None:
        cursor = parse_paging_cursor("1", "100", max_page_size=100)
        assert cursor.page_size == 100

    def test_accepts_page_size_of_one(self) -> None:
        assert parse_paging_cursor("1", "1").page_size == 1

    def test_strips_whitespace(self) -> None:
        cursor = parse_paging_cursor(" 4 ", " 5 ")
        assert (cursor.page, cursor.page_size) == (4, 5)


class TestParsePagingCursorRejectsPage:
    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "1.5", "1_0", "1e3"])
    def test_invalid_page(self, raw: str) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            parse_paging_cursor(raw, None)
        assert exc_info.value.reason == "page must be a positive integer"


class TestParsePagingCursorRejectsPageSize:
    """Out-of-range page sizes are rejected, never clamped."""

    @pytest.mark.parametrize("raw", ["0", "-5", "101", "ten", "", "2.0"])
    def test_invalid_page_size(self, raw: str) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            parse_paging_cursor(None, raw, max_page_size=100)
        assert "page_size" in exc_info.value.reason
        assert "100" in exc_info.value.reason

    def test_respects_custom_maximum(self) -> None:
        with pytest.raises(BadRequestError):
            parse_paging_cursor(None, "11", max_page_size=10)


# ---------------------------------------------------------------------------
# PagingCursor
# ---------------------------------------------------------------------------


class TestPagingCursor:
    @pytest.mark.parametrize(
        ("page", "page_size", "start"),
        [(1, 10, 0), (2, 10, 10), (5, 3, 12), (1, 1, 0), (100, 100, 9900)],
    )
    def test_start(self, page: int, page_size: int, start: int) -> None:
        assert PagingCursor(page=page, page_size=page_size).start == start

    def test_is_immutable(self) -> None:
        cursor = PagingCursor(page=1, page_size=10)
        with pytest.raises(ValidationError):
            cursor.page = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# PaginatedResponse.build
# ---------------------------------------------------------------------------


class TestEnvelopeTotals:
    @pytest.mark.parametrize(
        ("total", "page_size", "pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 10, 2), (100, 7, 15)],
    )
    def test_total_pages_is_ceiling(self, total: int, page_size: int, pages: int) -> None:
        cursor = PagingCursor(page=1, page_size=page_size)
        raw = RawQueryResult(items=list(range(min(total, page_size))), total_count=total)
        envelope = PaginatedResponse.build(cursor, raw, _identity)
        assert envelope.total_pages == pages
        assert envelope.total_items == total

    def test_empty_collection_is_success(self) -> None:
        cursor = PagingCursor(page=1, page_size=10)
        envelope = PaginatedResponse.build(cursor, RawQueryResult(), _identity)
        assert envelope.items == []
        assert envelope.total_pages == 0


class TestEnvelopeScenarios:
    def test_partial_last_page(self) -> None:
        """page=2, page_size=10, 15 items in total: 5 items on the page."""
        cursor = PagingCursor(page=2, page_size=10)
        raw = RawQueryResult(items=[10, 11, 12, 13, 14], total_count=15)

        envelope = PaginatedResponse.build(cursor, raw, _identity)

        assert envelope.page == 2
        assert envelope.page_size == 10
        assert envelope.total_items == 15
        assert envelope.total_pages == 2
        assert envelope.items == [10, 11, 12, 13, 14]

    def test_page_past_the_end_is_empty(self) -> None:
        cursor = PagingCursor(page=5, page_size=10)
        raw = RawQueryResult(items=[], total_count=15)

        envelope = PaginatedResponse.build(cursor, raw, _identity)

        assert envelope.items == []
        assert envelope.total_pages == 2
        assert envelope.page == 5

    def test_page_past_the_end_drops_stray_items(self) -> None:
        cursor = PagingCursor(page=3, page_size=10)
        raw = RawQueryResult(items=[1, 2], total_count=15)
        assert PaginatedResponse.build(cursor, raw, _identity).items == []


class TestEnvelopeProjection:
    def test_projection_preserves_order(self) -> None:
        cursor = PagingCursor(page=1, page_size=5)
        raw = RawQueryResult(items=["c", "a", "b"], total_count=3)
        envelope = PaginatedResponse.build(cursor, raw, str.upper)
        assert envelope.items == ["C", "A", "B"]

    def test_projection_failure_is_internal(self) -> None:
        def explode(item: int) -> int:
            if item == 2:
                raise ValueError("malformed stored value")
            return item

        cursor = PagingCursor(page=1, page_size=5)
        raw = RawQueryResult(items=[1, 2, 3], total_count=3)

        with pytest.raises(InternalError) as exc_info:
            PaginatedResponse.build(cursor, raw, explode)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_more_items_than_page_size_is_internal(self) -> None:
        cursor = PagingCursor(page=1, page_size=2)
        raw = RawQueryResult(items=[1, 2, 3], total_count=3)
        with pytest.raises(InternalError):
            PaginatedResponse.build(cursor, raw, _identity)


class TestEnvelopeSerialization:
    def test_uses_camel_case_keys(self) -> None:
        cursor = PagingCursor(page=2, page_size=10)
        raw = RawQueryResult(items=[1], total_count=11)
        body = PaginatedResponse[int].build(cursor, raw, _identity).model_dump(
            by_alias=True
        )
        assert body == {
            "items": [1],
            "page": 2,
            "pageSize": 10,
            "totalItems": 11,
            "totalPages": 2,
        }
