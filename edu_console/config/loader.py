from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from edu_console.config.model import COLUMN_TYPES, ChartConfig, ConsoleConfig, TableConfig
from edu_console.core.chart_alignment import Series, SeriesPoint
from edu_console.core.chart_state import AnalyticsSnapshot
from edu_console.core.exceptions import ConfigError
from edu_console.services.formatting import VALUE_FORMATS
from edu_console.validation.errors import ValidationError, ValidationIssue

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _load_entries(directory: Path, factory) -> list:
    entries = []
    if not directory.is_dir():
        logger.info("Config directory not found; skipping", extra={"directory": str(directory)})
        return entries

    for idx, config_file in enumerate(sorted(directory.glob("*.json"))):
        logger.info("Loading config entry", extra={"file": config_file.name})
        try:
            raw = _read_json(config_file)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Skipping unreadable config file", extra={"file": str(config_file), "error": str(e)})
            continue
        entries.append(factory(raw, source_path=config_file, index=idx))
    return entries


def validate_config(config: ConsoleConfig) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if config.page_size <= 0:
        issues.append(ValidationIssue("page_size", f"page_size must be > 0, got {config.page_size}"))
    if any(int(s) <= 0 for s in config.page_size_options):
        issues.append(ValidationIssue("page_size_options", "page_size_options must all be > 0"))
    if config.search_debounce_ms < 0:
        issues.append(ValidationIssue("search_debounce_ms", "search_debounce_ms must be >= 0"))

    seen_tables = set()
    for table in config.tables:
        src = table.source_path.name
        if table.name in seen_tables:
            issues.append(ValidationIssue("duplicate_table", f"Duplicate table name '{table.name}'", src))
        seen_tables.add(table.name)

        if "path" not in table.raw:
            issues.append(ValidationIssue("table_path", "Table config has no 'path'", src))

        try:
            columns = table.columns
        except KeyError:
            issues.append(ValidationIssue("column_key", "Every column needs a 'key'", src))
            continue

        if not columns:
            issues.append(ValidationIssue("columns", "Table config declares no columns", src))
        keys = [c.key for c in columns]
        if len(keys) != len(set(keys)):
            issues.append(ValidationIssue("duplicate_column", "Column keys must be unique", src))
        for col in columns:
            if col.type not in COLUMN_TYPES:
                issues.append(ValidationIssue("column_type", f"Column '{col.key}' has unknown type '{col.type}'", src))
            if col.value_format is not None and col.value_format not in VALUE_FORMATS:
                issues.append(
                    ValidationIssue("column_format", f"Column '{col.key}' has unknown format '{col.value_format}'", src)
                )

    seen_charts = set()
    for chart in config.charts:
        src = chart.source_path.name
        if chart.name in seen_charts:
            issues.append(ValidationIssue("duplicate_chart", f"Duplicate chart name '{chart.name}'", src))
        seen_charts.add(chart.name)
        if "path" not in chart.raw and "series" not in chart.raw:
            issues.append(ValidationIssue("chart_series", "Chart config needs 'series' or 'path'", src))
        value_format = chart.raw.get("value_format", "integer")
        if value_format not in VALUE_FORMATS:
            issues.append(ValidationIssue("chart_format", f"Unknown value_format '{value_format}'", src))

    if config.default_table is not None and config.default_table not in seen_tables:
        issues.append(ValidationIssue("default_table", f"default_table '{config.default_table}' is not configured"))

    return issues


def load_console_config(root: Path) -> ConsoleConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            tables/
                students.json
                ...
            charts/
                weekly_activity.json
                ...

    :param root: Directory containing 'global.json' and optionally 'tables/' and 'charts/'.
    :return: A validated ConsoleConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if the configuration is invalid (wraps the ValidationError listing every issue).
    """
    root = Path(root)
    logger.info("Loading console config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        raw_global = _read_json(global_path)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    config = ConsoleConfig(
        ui_title=raw_global.get("ui_title", "Education Console"),
        page_size=int(raw_global.get("page_size", ConsoleConfig.page_size)),
        page_size_options=[int(s) for s in raw_global.get("page_size_options", [10, 20, 50, 100])],
        search_debounce_ms=int(raw_global.get("search_debounce_ms", ConsoleConfig.search_debounce_ms)),
        default_table=raw_global.get("default_table"),
        tables=_load_entries(root / "tables", TableConfig.from_raw),
        charts=_load_entries(root / "charts", ChartConfig.from_raw),
    )

    issues = validate_config(config)
    if issues:
        error = ValidationError(issues)
        raise ConfigError(f"Invalid console config in {root}:\n{error}") from error

    return config


# -----------------------------------------------------------------------------
# Data snapshots
# -----------------------------------------------------------------------------
def load_records(table: TableConfig) -> List[Dict[str, Any]]:
    """
    Read the records file of a table. Accepts a bare JSON list or {"records": [...]}.
    """
    raw = _read_json(table.path)
    records = raw.get("records", []) if isinstance(raw, dict) else raw
    if not isinstance(records, list):
        raise ConfigError(f"Records file {table.path} must contain a list")

    missing = [i for i, r in enumerate(records) if table.row_key not in r]
    if missing:
        raise ConfigError(f"Records {missing[:5]} in {table.path} have no '{table.row_key}' field")
    return records


def _parse_series(raw_series: List[Dict[str, Any]]) -> List[Series]:
    return [
        Series(
            name=s["name"],
            points=tuple(SeriesPoint(p["key"], p["value"]) for p in s.get("points", [])),
        )
        for s in raw_series
    ]


def load_snapshot(chart: ChartConfig) -> AnalyticsSnapshot:
    if chart.path is not None:
        raw = _read_json(chart.path)
        raw_series = raw.get("series", []) if isinstance(raw, dict) else raw
    else:
        raw_series = chart.raw.get("series", [])

    return AnalyticsSnapshot(
        name=chart.name,
        title=chart.title,
        series=_parse_series(raw_series),
        x_label=chart.raw.get("x_label"),
        y_label=chart.raw.get("y_label"),
        value_format=chart.raw.get("value_format", "integer"),
    )


def load_snapshots(config: ConsoleConfig) -> Dict[str, AnalyticsSnapshot]:
    """
    Materialise every configured chart, skipping (and logging) charts whose data can't be read.
    """
    snapshots: Dict[str, AnalyticsSnapshot] = {}
    for chart in config.charts:
        try:
            snapshots[chart.name] = load_snapshot(chart)
        except (OSError, KeyError, TypeError, json.JSONDecodeError) as e:
            logger.error(
                "Skipping chart due to data error",
                extra={"chart": chart.name, "path": str(chart.path or ""), "error": str(e)},
            )
    logger.info("Charts loaded", extra={"n_charts": len(snapshots), "chart_names": list(snapshots)})
    return snapshots
