from edu_console.core.chart_alignment import series_from_mapping
from edu_console.core.chart_state import AnalyticsSnapshot, ChartState
from edu_console.views.pie_chart_view import PieChartView


def _make_snapshot(values):
    return AnalyticsSnapshot(
        name="course_completion",
        title="Course completion",
        series=[series_from_mapping("students", values)],
    )


def test_pie_renders_first_series_in_first_seen_order():
    view = PieChartView(_make_snapshot({"Completed": 58, "In progress": 31, "Not started": 13}))
    state = ChartState(snapshot_name="course_completion", view_id="pie")
    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data) == 1
    assert list(fig.data[0].labels) == ["Completed", "In progress", "Not started"]
    assert fig.data[0].hole == 0.0


def test_pie_donut_shows_total():
    view = PieChartView(_make_snapshot({"Completed": 58, "In progress": 31, "Not started": 13}))
    state = ChartState(snapshot_name="course_completion", view_id="pie", donut=True)
    fig = view.render_figure(view.compute_data(state), state)

    assert fig.data[0].hole == 0.5
    assert fig.layout.annotations[0].text == "Total<br>102"


def test_pie_with_all_zero_values_is_empty():
    view = PieChartView(_make_snapshot({"Completed": 0, "In progress": 0}))
    state = ChartState(snapshot_name="course_completion", view_id="pie")
    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data) == 0
