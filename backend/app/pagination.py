"""
Page-number pagination for list endpoints.

Clients ask for `page` (1-based) and `per_page`; services only ever see the
derived offset and limit.
"""

from dataclasses import dataclass
from typing import Sequence, TypeVar

from core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

from .schemas import Page

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """Resolved paging window for one list request."""

    page: int
    per_page: int
    page_count: int
    total_count: int

    @classmethod
    def create(
        cls,
        page: int | None,
        per_page: int | None,
        total_count: int,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "Pagination":
        """
        Normalize the requested window.

        Non-positive sizes fall back to the default and oversized ones are
        capped; the page is clamped to the last page. A negative total means
        "unknown", in which case page_count is -1 and the page is not clamped.
        """
        size = per_page if per_page and per_page > 0 else default_page_size
        size = min(size, max_page_size)

        current = page or 1
        page_count = -1
        if total_count >= 0:
            page_count = (total_count + size - 1) // size
            current = min(current, page_count)
        current = max(current, 1)

        return cls(page=current, per_page=size, page_count=page_count, total_count=total_count)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page

    def to_page(self, items: Sequence[T]) -> Page[T]:
        return Page(
            page=self.page,
            per_page=self.per_page,
            page_count=self.page_count,
            total_count=self.total_count,
            items=list(items),
        )
