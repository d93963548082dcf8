from __future__ import annotations

from edu_console.core.chart_state import ChartState


def test_chart_state_to_from_dict_roundtrip():
    st = ChartState(
        snapshot_name="weekly_activity",
        view_id="bar",
        series_names=["attempts"],
        key_order="sorted",
        stacked=True,
        horizontal=True,
        donut=False,
    )

    raw = st.to_dict()
    rebuilt = ChartState.from_dict(raw)

    assert rebuilt == st


def test_chart_state_from_minimal_dict():
    st = ChartState.from_dict({"snapshot_name": "s", "view_id": "line"})

    assert st.series_names == []
    assert st.key_order is None
    assert not st.stacked
