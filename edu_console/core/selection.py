from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Sequence, Tuple, TypeVar

from .columns import row_key_of

T = TypeVar("T")

PAGE_ALL = "all"
PAGE_SOME = "some"
PAGE_NONE = "none"


class SelectionTracker:
    """
    Immutable set of selected row keys.

    Every operation returns a new tracker; keys keep the order in which they
    were first selected so batch operations are deterministic.

    Selection is tracked against the full dataset, not the current page:
    paging and re-sorting never drop keys, only prune() does.
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[Hashable] = ()):
        self._keys: Tuple[Hashable, ...] = tuple(dict.fromkeys(keys))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def selected_keys(self) -> List[Hashable]:
        return list(self._keys)

    def is_selected(self, key: Hashable) -> bool:
        return key in self._keys

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionTracker):
            return NotImplemented
        return set(self._keys) == set(other._keys)

    def __repr__(self) -> str:
        return f"SelectionTracker({list(self._keys)!r})"

    def page_state(self, visible_keys: Sequence[Hashable]) -> str:
        """
        Header checkbox state for the visible page: 'all', 'some' (indeterminate) or 'none'.
        """
        if not visible_keys:
            return PAGE_NONE
        chosen = sum(1 for k in visible_keys if k in self._keys)
        if chosen == 0:
            return PAGE_NONE
        if chosen == len(visible_keys):
            return PAGE_ALL
        return PAGE_SOME

    def selected_records(self, records: Sequence[T], row_key: str) -> List[T]:
        """Selected records in source order."""
        chosen = set(self._keys)
        return [r for r in records if row_key_of(r, row_key) in chosen]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def toggle(self, key: Hashable) -> SelectionTracker:
        if key in self._keys:
            return SelectionTracker(k for k in self._keys if k != key)
        return SelectionTracker(self._keys + (key,))

    def select_all_visible(self, visible_keys: Iterable[Hashable]) -> SelectionTracker:
        """Union with the keys of the page currently on screen."""
        return SelectionTracker(self._keys + tuple(visible_keys))

    def select_all_filtered(self, filtered_keys: Iterable[Hashable]) -> SelectionTracker:
        """Union with every key of the filtered result set, across all pages."""
        return SelectionTracker(self._keys + tuple(filtered_keys))

    def deselect_visible(self, visible_keys: Iterable[Hashable]) -> SelectionTracker:
        drop = set(visible_keys)
        return SelectionTracker(k for k in self._keys if k not in drop)

    def clear(self) -> SelectionTracker:
        return SelectionTracker()

    def prune(self, all_known_keys: Iterable[Hashable]) -> SelectionTracker:
        """
        Drop keys that no longer exist in the source data (e.g. after a delete),
        so later batch operations never reference removed entities.
        """
        known = set(all_known_keys)
        return SelectionTracker(k for k in self._keys if k in known)


def keys_of(records: Iterable[Any], row_key: str) -> List[Any]:
    return [row_key_of(r, row_key) for r in records]
