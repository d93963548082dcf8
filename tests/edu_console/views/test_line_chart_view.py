import plotly.graph_objs as go

from edu_console.core.chart_alignment import series_from_mapping
from edu_console.core.chart_state import AnalyticsSnapshot, ChartState
from edu_console.views.line_chart_view import AreaChartView, LineChartView


def _make_snapshot():
    """
    Two weekly score series with disjoint gaps:
    - class A misses week 2
    - class B misses week 1
    """
    return AnalyticsSnapshot(
        name="score_trend",
        title="Average score",
        series=[
            series_from_mapping("A", {"2023-09-11": 74.0, "2023-09-04": 71.5}),
            series_from_mapping("B", {"2023-09-11": 68.0, "2023-09-18": 70.5}),
        ],
        x_label="Week",
        y_label="Score",
        value_format="decimal",
    )


def test_line_compute_data_sorts_labels_and_keeps_gaps():
    view = LineChartView(_make_snapshot())
    data = view.compute_data(ChartState(snapshot_name="score_trend", view_id="line"))

    assert data.labels == ["2023-09-04", "2023-09-11", "2023-09-18"]
    assert data.series[0].values == [71.5, 74.0, None]
    assert data.series[1].values == [None, 68.0, 70.5]


def test_line_key_order_override():
    view = LineChartView(_make_snapshot())
    state = ChartState(snapshot_name="score_trend", view_id="line", key_order="first-seen")

    assert view.compute_data(state).labels == ["2023-09-11", "2023-09-04", "2023-09-18"]


def test_line_render_figure_has_one_trace_per_series():
    view = LineChartView(_make_snapshot())
    state = ChartState(snapshot_name="score_trend", view_id="line")
    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == ["A", "B"]
    assert fig.data[0].connectgaps is False
    assert fig.data[0].text[2] == "-"
    assert fig.layout.xaxis.title.text == "Week"


def test_series_selection_limits_traces():
    view = LineChartView(_make_snapshot())
    state = ChartState(snapshot_name="score_trend", view_id="line", series_names=["B"])
    fig = view.render_figure(view.compute_data(state), state)

    assert [t.name for t in fig.data] == ["B"]


def test_area_fills_to_zero():
    view = AreaChartView(_make_snapshot())
    state = ChartState(snapshot_name="score_trend", view_id="area")
    fig = view.render_figure(view.compute_data(state), state)

    assert all(t.fill == "tozeroy" for t in fig.data)


def test_empty_snapshot_renders_empty_figure():
    view = LineChartView(AnalyticsSnapshot(name="empty", title="Empty"))
    state = ChartState(snapshot_name="empty", view_id="line")
    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data) == 0
    assert fig.layout.title.text == "No data for the selected series"
