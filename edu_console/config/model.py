from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from edu_console.core.columns import ColumnDescriptor, Renderer
from edu_console.core.debounce import DEFAULT_WINDOW_MS
from edu_console.core.table_state import DEFAULT_PAGE_SIZE
from edu_console.services.formatting import format_number

COLUMN_TYPES = ("string", "number", "date")


@dataclass(frozen=True)
class ColumnConfig:
    """
    Declarative column entry from a table config file.

    'type' decides how raw JSON values are read: dates arrive as ISO strings and
    are parsed so they sort chronologically rather than lexically.
    """

    key: str
    title: Optional[str] = None
    type: str = "string"
    sortable: bool = True
    searchable: bool = False
    align: str = "left"
    value_format: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> ColumnConfig:
        return cls(
            key=raw["key"],
            title=raw.get("title"),
            type=raw.get("type", "string"),
            sortable=bool(raw.get("sortable", True)),
            searchable=bool(raw.get("searchable", False)),
            align=raw.get("align", "right" if raw.get("type") == "number" else "left"),
            value_format=raw.get("format"),
        )

    def to_descriptor(self) -> ColumnDescriptor:
        key = self.key

        if self.type == "date":
            def accessor(record: Mapping[str, Any]) -> Any:
                return datetime.fromisoformat(str(record[key]))
        else:
            def accessor(record: Mapping[str, Any]) -> Any:
                return record[key]

        render: Optional[Renderer] = None
        if self.value_format is not None:
            fmt = self.value_format

            def render(value: Any, record: Any, index: int) -> str:
                return format_number(value, fmt)
        elif self.type == "date":
            def render(value: Any, record: Any, index: int) -> str:
                return value.strftime("%Y-%m-%d %H:%M") if (value.hour or value.minute) else value.strftime("%Y-%m-%d")

        return ColumnDescriptor(
            key=key,
            accessor=accessor,
            sortable=self.sortable,
            searchable=self.searchable,
            title=self.title,
            render=render,
            align=self.align,
        )


@dataclass
class TableConfig:
    """
    Parsed config entry for one CRUD table (classes, students, courses...).
    """

    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Table {self.index}")

    @property
    def title(self) -> str:
        return self.raw.get("title", self.name)

    @property
    def row_key(self) -> str:
        return self.raw.get("row_key", "id")

    @property
    def path(self) -> Path:
        """
        Records file for this table, resolved relative to the config file.
        """
        raw_path = self.raw.get("path")
        if raw_path is None:
            raise KeyError(f"No 'path' in table config: {self.raw}")
        p = Path(raw_path)
        return p if p.is_absolute() else (self.source_path.parent / p).resolve()

    @property
    def columns(self) -> List[ColumnConfig]:
        return [ColumnConfig.from_raw(c) for c in self.raw.get("columns", [])]

    def descriptors(self) -> List[ColumnDescriptor]:
        return [c.to_descriptor() for c in self.columns]

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> TableConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class ChartConfig:
    """
    Parsed config entry for one analytics chart.

    Series come either inline ('series') or from a JSON file ('path').
    """

    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Chart {self.index}")

    @property
    def title(self) -> str:
        return self.raw.get("title", self.name)

    @property
    def view_id(self) -> str:
        return self.raw.get("view", "line")

    @property
    def path(self) -> Optional[Path]:
        raw_path = self.raw.get("path")
        if raw_path is None:
            return None
        p = Path(raw_path)
        return p if p.is_absolute() else (self.source_path.parent / p).resolve()

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> ChartConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class ConsoleConfig:
    ui_title: str = "Education Console"
    page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: List[int] = field(default_factory=lambda: [10, 20, 50, 100])
    search_debounce_ms: int = DEFAULT_WINDOW_MS
    default_table: Optional[str] = None
    tables: List[TableConfig] = field(default_factory=list)
    charts: List[ChartConfig] = field(default_factory=list)
