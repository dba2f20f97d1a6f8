"""Application dependency providers."""

from __future__ import annotations

from advanced_alchemy.filters import LimitOffset
from litestar.di import Provide
from litestar.params import Parameter

DEFAULT_PAGINATION_SIZE = 20
LIMIT_OFFSET_DEPENDENCY_KEY = "limit_offset"


def provide_limit_offset_pagination(
    current_page: int = Parameter(ge=1, query="currentPage", default=1, required=False),
    page_size: int = Parameter(query="pageSize", ge=1, default=DEFAULT_PAGINATION_SIZE, required=False),
) -> LimitOffset:
    """Add offset/limit pagination.

    Return type consumed by `Repository.apply_limit_offset_pagination()`.
    """
    return LimitOffset(page_size, page_size * (current_page - 1))


def create_collection_dependencies() -> dict[str, Provide]:
    return {LIMIT_OFFSET_DEPENDENCY_KEY: Provide(provide_limit_offset_pagination, sync_to_thread=False)}
