"""
Pagination types for queries.

Provides standardized pagination for list queries.

Example:
    pagination = Pagination.coerce(page="2", limit="abc", default_page_size=12)
    items = repo.find_page(predicate, sort, pagination.offset, pagination.limit)
    result = PaginatedResult(items=items, total=repo.count(predicate), pagination=pagination)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Maximum allowed page size
MAX_PAGE_SIZE = 100

# Offsets are bound as signed 64-bit integers
MAX_OFFSET = 2**63 - 1


def _positive_int(raw: object) -> int | None:
    """Parse a loosely typed value into a positive int, or None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            return None
        return value if value > 0 else None
    return None


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 12

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @classmethod
    def coerce(cls, page: object, limit: object, default_page_size: int = 12) -> "Pagination":
        """
        Build pagination from raw client input.

        Non-numeric or non-positive values fall back to the defaults.
        Page sizes above MAX_PAGE_SIZE are clamped, and page numbers are
        clamped so the offset stays within MAX_OFFSET. A clamped page is still
        past the end of any real result set.
        """
        page_size = min(_positive_int(limit) or default_page_size, MAX_PAGE_SIZE)
        page_number = min(_positive_int(page) or 1, MAX_OFFSET // page_size + 1)
        return cls(page=page_number, page_size=page_size)

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: List of items for the current page
        total: Total number of items across all pages
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Number of items per page."""
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.total == 0:
            return 0
        return (self.total + self.pagination.page_size - 1) // self.pagination.page_size
