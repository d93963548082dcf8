from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List, Optional

from .pagination import clamp_page

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class SortState:
    """
    Active sort of a table.

    column_key is None only while no sort has been applied (natural/insertion order).
    """

    column_key: Optional[str] = None
    direction: str = SORT_ASC

    def __post_init__(self) -> None:
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction '{self.direction}'")

    @property
    def is_sorted(self) -> bool:
        return self.column_key is not None


@dataclass(frozen=True)
class PaginationState:
    """
    current_page is kept inside [1, ceil(total/page_size)] by every with_* method.
    """

    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0

    def clamped(self) -> PaginationState:
        return replace(self, current_page=clamp_page(self.current_page, self.total, self.page_size))

    def with_total(self, total: int) -> PaginationState:
        return replace(self, total=total).clamped()

    def with_page(self, page: int) -> PaginationState:
        return replace(self, current_page=page).clamped()

    def with_page_size(self, page_size: int) -> PaginationState:
        # a new page size always starts again from the first page
        return replace(self, page_size=page_size, current_page=1).clamped()


@dataclass
class TableState:
    """
    Everything a table screen needs to reproduce its current view.

    Serialised into a dcc.Store between callbacks, so it round-trips through
    to_dict/from_dict.
    """

    sort: SortState = field(default_factory=SortState)
    query: str = ""
    pagination: PaginationState = field(default_factory=PaginationState)
    selected_keys: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TableState:
        sort = data.get("sort") or {}
        pagination = data.get("pagination") or {}
        return cls(
            sort=SortState(
                column_key=sort.get("column_key"),
                direction=sort.get("direction", SORT_ASC),
            ),
            query=str(data.get("query") or ""),
            pagination=PaginationState(
                current_page=int(pagination.get("current_page", 1)),
                page_size=int(pagination.get("page_size", DEFAULT_PAGE_SIZE)),
                total=int(pagination.get("total", 0)),
            ),
            selected_keys=list(data.get("selected_keys", [])),
        )
