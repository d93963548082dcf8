from __future__ import annotations

import pytest

from edu_console.core.chart_state import AnalyticsSnapshot
from edu_console.core.view_registry import ViewRegistry
from edu_console.views import BarChartView, LineChartView, build_view_registry


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(LineChartView)

    view = registry.create("line", AnalyticsSnapshot(name="s", title="S"))

    assert isinstance(view, LineChartView)
    assert registry.has("line")
    assert not registry.has("bar")


def test_register_rejects_duplicates_and_non_views():
    registry = ViewRegistry()
    registry.register(BarChartView)

    with pytest.raises(ValueError):
        registry.register(BarChartView)
    with pytest.raises(TypeError):
        registry.register(object)


def test_create_unknown_view_raises():
    with pytest.raises(KeyError):
        ViewRegistry().create("nope", AnalyticsSnapshot(name="s", title="S"))


def test_default_registry_order():
    assert [cls.id for cls in build_view_registry().all_classes()] == ["line", "area", "bar", "pie"]
