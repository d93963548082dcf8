from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone

import pytest

from edu_console.core.chart_alignment import (
    MISSING_NULL,
    MISSING_ZERO,
    ORDER_FIRST_SEEN,
    ORDER_SORTED,
    Series,
    SeriesPoint,
    align,
    series_from_mapping,
    series_from_records,
)
from edu_console.core.exceptions import ChartDataError


def _make_weekday_series():
    attempts = Series("attempts", (SeriesPoint("Mon", 10), SeriesPoint("Wed", 5)))
    completions = Series("completions", (SeriesPoint("Mon", 8),))
    return [attempts, completions]


def test_align_first_seen_with_zero_fill():
    data = align(_make_weekday_series(), MISSING_ZERO, ORDER_FIRST_SEEN)

    assert data.labels == ["Mon", "Wed"]
    assert [(s.name, s.values) for s in data.series] == [
        ("attempts", [10, 5]),
        ("completions", [8, 0]),
    ]


def test_align_null_fill_leaves_gaps():
    data = align(_make_weekday_series(), MISSING_NULL, ORDER_FIRST_SEEN)

    assert data.series[1].values == [8, None]


def test_every_series_has_one_value_per_label():
    series = [
        series_from_mapping("a", {3: 1, 1: 2}),
        series_from_mapping("b", {2: 5}),
        series_from_mapping("c", {}),
        series_from_mapping("d", {4: 1, 1: 1, 5: 9}),
    ]

    data = align(series, MISSING_NULL, ORDER_SORTED)

    assert data.labels == [1, 2, 3, 4, 5]
    assert all(len(s.values) == len(data.labels) for s in data.series)
    assert data.series[2].values == [None] * 5


def test_first_seen_keeps_external_weekday_order():
    series = [
        series_from_mapping("a", {"Sun": 1, "Tue": 2}),
        series_from_mapping("b", {"Mon": 3, "Tue": 4, "Sat": 1}),
    ]

    assert align(series, MISSING_ZERO, ORDER_FIRST_SEEN).labels == ["Sun", "Tue", "Mon", "Sat"]
    assert align(series, MISSING_ZERO, ORDER_SORTED).labels == ["Mon", "Sat", "Sun", "Tue"]


def test_sorted_date_keys_are_chronological():
    series = [series_from_mapping("s", {date(2024, 3, 1): 1, date(2023, 12, 1): 2})]

    assert align(series, MISSING_NULL, ORDER_SORTED).labels == [date(2023, 12, 1), date(2024, 3, 1)]


@pytest.mark.parametrize("series", [[], [Series("a"), Series("b")]])
def test_empty_input_gives_empty_dataset(series):
    data = align(series, MISSING_ZERO, ORDER_SORTED)

    assert data.labels == []
    assert data.series == []
    assert data.is_empty


def test_unknown_policy_or_order_raises():
    with pytest.raises(ValueError):
        align(_make_weekday_series(), "mean", ORDER_SORTED)
    with pytest.raises(ValueError):
        align(_make_weekday_series(), MISSING_ZERO, "random")


def test_duplicate_key_in_series_raises():
    series = [Series("a", (SeriesPoint("Mon", 1), SeriesPoint("Mon", 2)))]

    with pytest.raises(ChartDataError):
        align(series, MISSING_ZERO, ORDER_FIRST_SEEN)


def test_mixed_key_types_fall_back_to_first_seen(caplog):
    series = [series_from_mapping("a", {"x": 1, 2: 3})]

    with caplog.at_level(logging.WARNING):
        data = align(series, MISSING_ZERO, ORDER_SORTED)

    assert data.labels == ["x", 2]
    assert "not mutually orderable" in caplog.text


def test_to_dict_and_to_frame():
    data = align(_make_weekday_series(), MISSING_NULL, ORDER_FIRST_SEEN)

    assert data.to_dict() == {
        "labels": ["Mon", "Wed"],
        "datasets": [
            {"label": "attempts", "data": [10, 5]},
            {"label": "completions", "data": [8, None]},
        ],
    }

    frame = data.to_frame()
    assert list(frame.columns) == ["attempts", "completions"]
    assert frame.index.name == "label"
    assert math.isnan(frame.loc["Wed", "completions"])


def test_series_from_records_with_custom_fields():
    rows = [{"day": "Mon", "count": 10}, {"day": "Tue", "count": 4}]
    s = series_from_records(rows, name="attempts", key_field="day", value_field="count")

    assert s.as_mapping() == {"Mon": 10, "Tue": 4}


def test_sorted_mixed_date_and_datetime_keys_are_chronological(caplog):
    series = [
        series_from_mapping("a", {date(2024, 1, 2): 1, datetime(2024, 1, 1, 12, 0): 2}),
        series_from_mapping("b", {datetime(2024, 1, 1, 18, 0, tzinfo=timezone.utc): 3}),
    ]

    with caplog.at_level(logging.WARNING):
        data = align(series, MISSING_NULL, ORDER_SORTED)

    assert data.labels == [
        datetime(2024, 1, 1, 12, 0),
        datetime(2024, 1, 1, 18, 0, tzinfo=timezone.utc),
        date(2024, 1, 2),
    ]
    assert data.series[1].values == [None, 3, None]
    assert "not mutually orderable" not in caplog.text
