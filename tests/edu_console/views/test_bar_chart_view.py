import plotly.graph_objs as go

from edu_console.core.chart_alignment import series_from_mapping
from edu_console.core.chart_state import AnalyticsSnapshot, ChartState
from edu_console.views.bar_chart_view import BarChartView


def _make_snapshot():
    return AnalyticsSnapshot(
        name="weekly_activity",
        title="Attempts vs completions",
        series=[
            series_from_mapping("attempts", {"Mon": 10, "Wed": 5}),
            series_from_mapping("completions", {"Mon": 8}),
        ],
        x_label="Day",
        y_label="Count",
    )


def _make_state(**kwargs):
    return ChartState(snapshot_name="weekly_activity", view_id="bar", **kwargs)


def test_bar_compute_data_fills_zeros_in_first_seen_order():
    data = BarChartView(_make_snapshot()).compute_data(_make_state())

    assert data.labels == ["Mon", "Wed"]
    assert data.series[1].values == [8, 0]


def test_bar_render_grouped_by_default():
    view = BarChartView(_make_snapshot())
    state = _make_state()
    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 2
    assert fig.layout.barmode == "group"
    assert list(fig.data[0].x) == ["Mon", "Wed"]


def test_bar_render_stacked_horizontal():
    view = BarChartView(_make_snapshot())
    state = _make_state(stacked=True, horizontal=True)
    fig = view.render_figure(view.compute_data(state), state)

    assert fig.layout.barmode == "stack"
    assert fig.data[0].orientation == "h"
    assert list(fig.data[0].y) == ["Mon", "Wed"]
    assert fig.layout.yaxis.title.text == "Day"
