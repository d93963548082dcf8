from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence

from .columns import ColumnDescriptor, column_by_key, column_options, display_rows, row_key_of
from .dataset_view import next_sort, view
from .debounce import DEFAULT_WINDOW_MS, DebouncedQueryController, TimerFactory
from .exceptions import ColumnNotSortableError, UnknownColumnError
from .pagination import PageSlice, page_rows, slice_page
from .selection import SelectionTracker, keys_of
from .table_state import PaginationState, SortState, TableState

logger = logging.getLogger(__name__)


class TableController:
    """
    Wires table UI events to the pure dataset/selection/pagination functions.

    Owns exactly one TableState and one SelectionTracker; every derived view
    (filtered rows, current page, header checkbox) is recomputed on demand from
    those plus the current records.

    Search keystrokes go through a DebouncedQueryController; everything else is
    applied immediately.

    State is only ever changed by the thread handling the current UI event.
    The default debounce timer fires on its own thread, so callers that use
    search() must pass a timer_factory that schedules the callback on their
    event thread (the Dash layer debounces in the browser and calls set_query
    directly instead).
    """

    def __init__(
        self,
        records: Sequence[Any],
        columns: Sequence[ColumnDescriptor],
        row_key: str = "id",
        state: Optional[TableState] = None,
        search_debounce_ms: int = DEFAULT_WINDOW_MS,
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        self.columns: List[ColumnDescriptor] = list(columns)
        self.row_key = row_key
        self._records: List[Any] = list(records)

        state = state or TableState()
        self._sort: SortState = self._restore_sort(state.sort)
        self._query: str = state.query
        self._selection = SelectionTracker(state.selected_keys)
        self._pagination: PaginationState = state.pagination

        self._search = DebouncedQueryController(
            self.set_query, window_ms=search_debounce_ms, timer_factory=timer_factory
        )

        # stored selection may reference rows that vanished since it was saved
        self._selection = self._selection.prune(self.all_keys())
        self._sync_total()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def records(self) -> List[Any]:
        return list(self._records)

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def query(self) -> str:
        return self._query

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    @property
    def selection(self) -> SelectionTracker:
        return self._selection

    @property
    def state(self) -> TableState:
        return TableState(
            sort=self._sort,
            query=self._query,
            pagination=self._pagination,
            selected_keys=self._selection.selected_keys,
        )

    def all_keys(self) -> List[Hashable]:
        return keys_of(self._records, self.row_key)

    def _sync_total(self) -> None:
        self._pagination = self._pagination.with_total(len(self.filtered_rows()))

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def filtered_rows(self) -> List[Any]:
        return view(self._records, self.columns, self._sort, self._query)

    def page(self) -> PageSlice:
        p = self._pagination
        return slice_page(p.total, p.current_page, p.page_size)

    def page_rows(self) -> List[Any]:
        return page_rows(self.filtered_rows(), self.page())

    def visible_keys(self) -> List[Hashable]:
        return keys_of(self.page_rows(), self.row_key)

    def selected_records(self) -> List[Any]:
        return self._selection.selected_records(self._records, self.row_key)

    def header_checkbox(self) -> str:
        return self._selection.page_state(self.visible_keys())

    def table_props(self) -> Dict[str, Any]:
        """
        Props for the table collaborator: display rows of the current page,
        column list, page bounds, selected keys and the active sort.
        """
        page = self.page()
        rows = self.page_rows()
        return {
            "rows": display_rows(rows, self.columns, row_key=self.row_key, offset=page.offset),
            "columns": column_options(self.columns),
            "page": page,
            "selected_keys": self._selection.selected_keys,
            "sort": self._sort,
        }

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def click_header(self, column_key: str) -> SortState:
        col = column_by_key(self.columns, column_key)
        self._sort = next_sort(self._sort, col)
        return self._sort

    def _check_sort(self, sort: SortState) -> SortState:
        if sort.column_key is not None:
            col = column_by_key(self.columns, sort.column_key)
            if not col.sortable:
                raise ColumnNotSortableError(f"Column '{col.key}' is not sortable")
        return sort

    def _restore_sort(self, sort: SortState) -> SortState:
        # a stored sort may name a column that is gone or no longer sortable
        try:
            return self._check_sort(sort)
        except (UnknownColumnError, ColumnNotSortableError):
            logger.warning("Dropping stored sort", extra={"column": sort.column_key})
            return SortState()

    def set_sort(self, sort: SortState) -> None:
        """
        Raises:
            UnknownColumnError: no column has sort.column_key
            ColumnNotSortableError: the column is declared sortable=False
        """
        self._sort = self._check_sort(sort)

    def search(self, text: str) -> None:
        """
        Debounced: the query is applied once typing has paused, from whatever
        thread the timer_factory runs its callback on.
        """
        self._search(text)

    def set_query(self, text: str) -> None:
        text = text or ""
        if text == self._query:
            return
        self._query = text
        # a new result set starts from its first page
        self._pagination = replace(self._pagination, current_page=1)
        self._sync_total()
        logger.debug("Table query applied", extra={"query": text, "total": self._pagination.total})

    def set_page(self, page: int) -> PageSlice:
        self._pagination = self._pagination.with_page(page)
        return self.page()

    def next_page(self) -> PageSlice:
        return self.set_page(self._pagination.current_page + 1)

    def prev_page(self) -> PageSlice:
        return self.set_page(self._pagination.current_page - 1)

    def set_page_size(self, page_size: int) -> PageSlice:
        self._pagination = self._pagination.with_page_size(page_size)
        return self.page()

    def toggle_row(self, key: Hashable) -> SelectionTracker:
        self._selection = self._selection.toggle(key)
        return self._selection

    def set_page_selection(self, checked_keys: Iterable[Hashable]) -> SelectionTracker:
        """
        Apply the checkbox state of the visible page: rows on the page that are
        checked become selected, unchecked ones are deselected. Rows on other
        pages keep their state.
        """
        checked = set(checked_keys)
        selection = self._selection
        for key in self.visible_keys():
            if (key in checked) != selection.is_selected(key):
                selection = selection.toggle(key)
        self._selection = selection
        return selection

    def select_all_visible(self) -> SelectionTracker:
        self._selection = self._selection.select_all_visible(self.visible_keys())
        return self._selection

    def select_all_filtered(self) -> SelectionTracker:
        self._selection = self._selection.select_all_filtered(keys_of(self.filtered_rows(), self.row_key))
        return self._selection

    def clear_selection(self) -> SelectionTracker:
        self._selection = self._selection.clear()
        return self._selection

    def replace_records(self, records: Sequence[Any]) -> None:
        """
        Swap in a fresh snapshot (after a fetch, create or delete). Selection is
        pruned to keys that still exist and the current page is re-clamped.
        """
        self._records = list(records)
        before = len(self._selection)
        self._selection = self._selection.prune(self.all_keys())
        self._sync_total()
        if len(self._selection) != before:
            logger.info(
                "Pruned selection after data change",
                extra={"removed": before - len(self._selection)},
            )

    def remove_records(self, keys: Iterable[Hashable]) -> None:
        drop = set(keys)
        self.replace_records([r for r in self._records if row_key_of(r, self.row_key) not in drop])

    def dispose(self) -> None:
        self._search.cancel()
