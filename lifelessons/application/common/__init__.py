from .pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination

__all__ = [
    "MAX_PAGE_SIZE",
    "PaginatedResult",
    "Pagination",
]
