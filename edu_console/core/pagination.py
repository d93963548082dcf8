from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from .exceptions import PaginationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageSlice:
    """
    Display bounds for one page of a result set.

    start/end are 1-based and inclusive (0/0 for an empty result set) so they can
    go straight into the "Showing 11-20 of 45" text.
    """

    start: int
    end: int
    has_next: bool
    has_prev: bool
    page_count: int
    current_page: int
    page_size: int
    total: int

    @property
    def showing_text(self) -> str:
        if self.total <= 0:
            return "No data"
        return f"Showing {self.start}-{self.end} of {self.total}"

    @property
    def page_text(self) -> str:
        return f"Page {self.current_page} of {max(self.page_count, 1)}"

    @property
    def offset(self) -> int:
        """0-based index of the first row on this page."""
        return (self.current_page - 1) * self.page_size


def _check(total: int, page_size: int) -> None:
    if page_size <= 0:
        raise PaginationError(f"page_size must be > 0, got {page_size}")
    if total < 0:
        raise PaginationError(f"total must be >= 0, got {total}")


def page_count(total: int, page_size: int) -> int:
    _check(total, page_size)
    return math.ceil(total / page_size)


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Clamp page into [1, ceil(total/page_size)]; an empty result set gives 1."""
    pages = page_count(total, page_size)
    if pages == 0:
        return 1
    return min(max(int(page), 1), pages)


def slice_page(total: int, current_page: int, page_size: int) -> PageSlice:
    pages = page_count(total, page_size)
    current = clamp_page(current_page, total, page_size)

    if total == 0:
        start = end = 0
    else:
        start = (current - 1) * page_size + 1
        end = min(current * page_size, total)

    return PageSlice(
        start=start,
        end=end,
        has_next=current < pages,
        has_prev=current > 1,
        page_count=pages,
        current_page=current,
        page_size=page_size,
        total=total,
    )


def page_rows(rows: Sequence[T], page: PageSlice) -> List[T]:
    if page.total == 0:
        return []
    return list(rows[page.offset:page.offset + page.page_size])
