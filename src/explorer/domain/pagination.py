"""Pagination cursor, raw ledger results and the paginated response envelope."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.explorer.domain.errors import BadRequestError, InternalError

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_PAGE_SIZE = 15
MAX_PAGE_SIZE = 100

# Plain decimal integers only; rejects "1_0", "1e3" and the like
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class PagingCursor(BaseModel):
    """Normalized ``(page, page_size)`` pair for a single request."""

    page: int = Field(ge=1, description="1-based page number")
    page_size: int = Field(ge=1, description="Maximum items per page")

    model_config = ConfigDict(frozen=True)

    @property
    def start(self) -> int:
        """Number of items to skip before this page."""
        return (self.page - 1) * self.page_size


def _parse_int(raw: str) -> int | None:
    match = _INTEGER_PATTERN.fullmatch(raw.strip())
    return int(match.group(0)) if match else None


def parse_paging_cursor(
    raw_page: str | None,
    raw_page_size: str | None,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> PagingCursor:
    """Validate raw ``page`` / ``page_size`` query values.

    Out-of-range values are rejected rather than clamped.

    Args:
        raw_page: Value of the ``page`` query parameter, if present.
        raw_page_size: Value of the ``page_size`` query parameter, if present.
        default_page_size: Page size used when ``page_size`` is absent.
        max_page_size: Largest accepted page size.

    Returns:
        The validated cursor.

    Raises:
        BadRequestError: If either value is not an integer in range.
    """
    page = 1
    if raw_page is not None:
        parsed = _parse_int(raw_page)
        if parsed is None or parsed < 1:
            raise BadRequestError("page must be a positive integer")
        page = parsed

    page_size = default_page_size
    if raw_page_size is not None:
        parsed = _parse_int(raw_page_size)
        if parsed is None or not 1 <= parsed <= max_page_size:
            raise BadRequestError(
                f"page_size must be an integer between 1 and {max_page_size}"
            )
        page_size = parsed

    return PagingCursor(page=page, page_size=page_size)


def project_entity(entity: R, project: Callable[[R], T]) -> T:
    """Map one ledger entity to its response DTO.

    Raises:
        InternalError: If the projection fails.
    """
    try:
        return project(entity)
    except Exception as e:
        raise InternalError("Failed to project ledger entity", cause=e) from e


@dataclass(frozen=True)
class RawQueryResult(Generic[T]):
    """Items returned by one ledger call plus the ledger-side total."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response wrapper for list endpoints.

    Serialized with camelCase keys (``pageSize``, ``totalItems``,
    ``totalPages``). A page past the end is a valid, empty page: totals
    may shrink between two requests of the same client.
    """

    items: list[T] = Field(description="Page of results")
    page: int = Field(ge=1, description="1-based page number")
    page_size: int = Field(ge=1, description="Maximum items per page")
    total_items: int = Field(ge=0, description="Total number of items available")
    total_pages: int = Field(ge=0, description="Total number of pages available")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def build(
        cls,
        cursor: PagingCursor,
        raw: RawQueryResult[R],
        project: Callable[[R], T],
    ) -> "PaginatedResponse[T]":
        """Assemble the envelope for one page of ledger results.

        Args:
            cursor: Cursor the ledger call was windowed with.
            raw: Items and total count returned by the ledger.
            project: Maps one ledger entity to its response DTO.

        Returns:
            The envelope with projected items.

        Raises:
            InternalError: If the ledger returned more items than requested
                or an item could not be projected.
        """
        if len(raw.items) > cursor.page_size:
            raise InternalError(
                f"Ledger returned {len(raw.items)} items for a page of "
                f"{cursor.page_size}"
            )

        total_pages = -(-raw.total_count // cursor.page_size)
        source = raw.items if cursor.page <= total_pages else []

        items = [project_entity(item, project) for item in source]

        return cls(
            items=items,
            page=cursor.page,
            page_size=cursor.page_size,
            total_items=raw.total_count,
            total_pages=total_pages,
        )
