import json
from datetime import datetime
from pathlib import Path

import pytest

from edu_console.config.loader import load_console_config, load_records, load_snapshots
from edu_console.core.exceptions import ConfigError
from edu_console.validation.errors import ValidationError


def _write(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload))


def _make_config_dir(tmp_path: Path, table_entry=None, global_entry=None) -> Path:
    # root/
    #   global.json
    #   tables/students.json
    #   charts/weekly.json
    #   data/students.json
    config_root = tmp_path / "config"

    _write(config_root / "global.json", global_entry or {"ui_title": "Test Console", "page_size": 20})
    _write(
        config_root / "tables" / "students.json",
        table_entry
        or {
            "name": "students",
            "title": "Students",
            "path": "../data/students.json",
            "columns": [
                {"key": "name", "title": "Name", "searchable": True},
                {"key": "progress", "type": "number", "format": "percentage"},
                {"key": "enrolled_at", "type": "date"},
            ],
        },
    )
    _write(
        config_root / "data" / "students.json",
        {"records": [{"id": 1, "name": "Ann", "progress": 0.5, "enrolled_at": "2023-09-01"}]},
    )
    _write(
        config_root / "charts" / "weekly.json",
        {
            "name": "weekly",
            "view": "bar",
            "series": [{"name": "attempts", "points": [{"key": "Mon", "value": 10}]}],
        },
    )
    return config_root


def test_load_console_config_from_dir(tmp_path):
    config = load_console_config(_make_config_dir(tmp_path))

    assert config.ui_title == "Test Console"
    assert config.page_size == 20
    assert config.search_debounce_ms == 300
    assert [t.name for t in config.tables] == ["students"]
    assert [c.name for c in config.charts] == ["weekly"]
    assert config.charts[0].view_id == "bar"


def test_table_records_and_descriptors(tmp_path):
    config = load_console_config(_make_config_dir(tmp_path))
    table = config.tables[0]

    records = load_records(table)
    name, progress, enrolled = table.descriptors()

    assert records[0]["name"] == "Ann"
    assert name.searchable and name.header == "Name"
    assert progress.align == "right"
    assert progress.display(records[0]) == "50.0%"
    assert enrolled.value_of(records[0]) == datetime(2023, 9, 1)
    assert enrolled.display(records[0]) == "2023-09-01"


def test_load_snapshots_inline_series(tmp_path):
    snapshots = load_snapshots(load_console_config(_make_config_dir(tmp_path)))

    snap = snapshots["weekly"]
    assert snap.title == "weekly"
    assert snap.series_names == ["attempts"]
    assert snap.series[0].as_mapping() == {"Mon": 10}


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_console_config(tmp_path)


def test_invalid_config_collects_all_issues(tmp_path):
    table_entry = {
        "name": "students",
        "columns": [{"key": "a", "type": "money"}, {"key": "a"}],
    }
    root = _make_config_dir(tmp_path, table_entry=table_entry, global_entry={"page_size": 0})

    with pytest.raises(ConfigError) as exc_info:
        load_console_config(root)

    cause = exc_info.value.__cause__
    assert isinstance(cause, ValidationError)
    assert {"page_size", "table_path", "duplicate_column", "column_type"} <= set(cause.codes)


def test_records_without_row_key_raise(tmp_path):
    root = _make_config_dir(tmp_path)
    _write(root / "data" / "students.json", [{"name": "no id"}])
    table = load_console_config(root).tables[0]

    with pytest.raises(ConfigError):
        load_records(table)
