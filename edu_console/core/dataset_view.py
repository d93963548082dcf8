from __future__ import annotations

import locale
import logging
import numbers
from functools import cmp_to_key
from typing import Any, List, Sequence, Tuple, TypeVar

from .columns import ColumnDescriptor, column_by_key
from .exceptions import ColumnNotSortableError
from .instants import as_instant, is_datelike
from .table_state import SORT_ASC, SORT_DESC, SortState

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Sort key of a record whose accessor failed (or returned None).
_MISSING = object()


# -----------------------------------------------------------------------------
# Filtering
# -----------------------------------------------------------------------------
def _matches(record: Any, columns: Sequence[ColumnDescriptor], needle: str) -> bool:
    for col in columns:
        if not col.searchable:
            continue
        try:
            haystack = str(col.accessor(record)).lower()
        except Exception:
            # a broken column simply doesn't match this record
            logger.debug("Accessor failed during filtering", extra={"column": col.key}, exc_info=True)
            continue
        if needle in haystack:
            return True
    return False


def filter_records(records: Sequence[T], columns: Sequence[ColumnDescriptor], query: str) -> List[T]:
    """
    Keep records where any searchable column contains the query (case-insensitive).

    Only an empty query keeps everything; whitespace in the query is matched as typed.
    """
    if not query:
        return list(records)
    needle = query.lower()
    return [r for r in records if _matches(r, columns, needle)]


# -----------------------------------------------------------------------------
# Sorting
# -----------------------------------------------------------------------------
_RANK_NUMBER = 0
_RANK_STRING = 1
_RANK_DATE = 2
_RANK_OTHER = 3


def _kind_rank(value: Any) -> int:
    if isinstance(value, numbers.Real):
        return _RANK_NUMBER
    if isinstance(value, str):
        return _RANK_STRING
    if is_datelike(value):
        return _RANK_DATE
    return _RANK_OTHER


def _sign(diff: float) -> int:
    return (diff > 0) - (diff < 0)


def _compare_strings(a: str, b: str) -> int:
    result = _sign_cmp(locale.strxfrm(a.casefold()), locale.strxfrm(b.casefold()))
    if result == 0:
        result = _sign_cmp(locale.strxfrm(a), locale.strxfrm(b))
    return result


def _sign_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_values(a: Any, b: Any) -> int:
    """
    Ascending three-way comparison of two accessor values.

    Numbers compare numerically, strings locale-aware, date-likes as instants.
    Values of different kinds order by kind (numbers, strings, dates, anything
    else) so a mixed column still gets a total order; values of an unknown
    kind compare by their string form.
    """
    rank_a, rank_b = _kind_rank(a), _kind_rank(b)
    if rank_a != rank_b:
        return _sign(rank_a - rank_b)
    if rank_a == _RANK_NUMBER:
        return _sign(a - b)
    if rank_a == _RANK_STRING:
        return _compare_strings(a, b)
    if rank_a == _RANK_DATE:
        return _sign(as_instant(a) - as_instant(b))
    return _compare_strings(str(a), str(b))


def _sort_key_of(record: Any, col: ColumnDescriptor) -> Any:
    try:
        value = col.accessor(record)
    except Exception:
        logger.debug("Accessor failed during sorting", extra={"column": col.key}, exc_info=True)
        return _MISSING
    return _MISSING if value is None else value


def sort_records(records: Sequence[T], columns: Sequence[ColumnDescriptor], sort: SortState) -> List[T]:
    """
    Stable sort by the column named in `sort`.

    'desc' flips the sign of the ascending comparison, so records with equal
    values keep their input order in both directions. Records whose value can't
    be read go last in both directions, in input order.
    """
    if sort.column_key is None:
        return list(records)

    col = column_by_key(columns, sort.column_key)
    if not col.sortable:
        raise ColumnNotSortableError(f"Column '{col.key}' is not sortable")

    sign = -1 if sort.direction == SORT_DESC else 1

    def compare(x: Tuple[Any, T], y: Tuple[Any, T]) -> int:
        a, b = x[0], y[0]
        if a is _MISSING or b is _MISSING:
            return (a is _MISSING) - (b is _MISSING)
        return sign * compare_values(a, b)

    decorated = [(_sort_key_of(r, col), r) for r in records]
    return [r for _, r in sorted(decorated, key=cmp_to_key(compare))]


def view(
    records: Sequence[T],
    columns: Sequence[ColumnDescriptor],
    sort: SortState,
    query: str,
) -> List[T]:
    """
    Filtered + sorted view of `records`. Pure: the input list is never mutated.
    """
    return sort_records(filter_records(records, columns, query), columns, sort)


def next_sort(sort: SortState, column: ColumnDescriptor) -> SortState:
    """
    Header-click cycle: new column -> asc, asc -> desc, desc -> asc.
    Clicks on a non-sortable column leave the sort untouched.
    """
    if not column.sortable:
        return sort
    if sort.column_key == column.key and sort.direction == SORT_ASC:
        return SortState(column_key=column.key, direction=SORT_DESC)
    return SortState(column_key=column.key, direction=SORT_ASC)
