from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .exceptions import UnknownColumnError

logger = logging.getLogger(__name__)

Accessor = Callable[[Any], Any]
Renderer = Callable[[Any, Any, int], str]

MISSING_DISPLAY = "-"


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Describes one table column over an opaque record type.

    Fields:

    - key: unique column identifier, used by SortState.column_key
    - accessor: pure function record -> comparable value (str, number, date-like)
    - sortable: whether header clicks may sort by this column
    - searchable: whether the free-text query is matched against this column
    - title: header text, defaults to the key
    - render: optional callback (value, record, row_index) -> display string
    - align: cell alignment hint for the table collaborator
    """

    key: str
    accessor: Accessor
    sortable: bool = True
    searchable: bool = False
    title: Optional[str] = None
    render: Optional[Renderer] = None
    align: str = "left"

    @property
    def header(self) -> str:
        return self.title if self.title is not None else self.key

    def value_of(self, record: Any) -> Any:
        return self.accessor(record)

    def display(self, record: Any, index: int = 0) -> str:
        """
        Display string for one cell.

        Accessor/render failures show the missing marker instead of raising, so
        one malformed record never blanks the whole table.
        """
        try:
            value = self.accessor(record)
            if self.render is not None:
                return self.render(value, record, index)
        except Exception:
            logger.debug("Cell display failed", extra={"column": self.key}, exc_info=True)
            return MISSING_DISPLAY

        if value is None or value == "":
            return MISSING_DISPLAY
        return str(value)


def field(
    name: str,
    *,
    sortable: bool = True,
    searchable: bool = False,
    title: Optional[str] = None,
    render: Optional[Renderer] = None,
    align: str = "left",
) -> ColumnDescriptor:
    """
    Build a descriptor whose accessor reads `name` from a mapping or an attribute.
    """

    def accessor(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record[name]
        return getattr(record, name)

    return ColumnDescriptor(
        key=name,
        accessor=accessor,
        sortable=sortable,
        searchable=searchable,
        title=title,
        render=render,
        align=align,
    )


def column_by_key(columns: Sequence[ColumnDescriptor], key: str) -> ColumnDescriptor:
    for col in columns:
        if col.key == key:
            return col
    raise UnknownColumnError(f"Column '{key}' not found")


def column_options(columns: Sequence[ColumnDescriptor]) -> List[Dict[str, str]]:
    """Column list in the shape dash_table.DataTable expects."""
    return [{"name": col.header, "id": col.key} for col in columns]


def display_rows(
    records: Sequence[Any],
    columns: Sequence[ColumnDescriptor],
    row_key: Optional[str] = None,
    offset: int = 0,
) -> List[Dict[str, str]]:
    """
    Render records into flat dicts of display strings, one entry per column.

    If row_key is given the raw key is kept under "id" so the table can track
    rows across pages.
    """
    rows: List[Dict[str, Any]] = []
    for i, record in enumerate(records):
        row: Dict[str, Any] = {col.key: col.display(record, offset + i) for col in columns}
        if row_key is not None:
            row["id"] = row_key_of(record, row_key)
        rows.append(row)
    return rows


def row_key_of(record: Any, row_key: str) -> Any:
    if isinstance(record, Mapping):
        return record[row_key]
    return getattr(record, row_key)
