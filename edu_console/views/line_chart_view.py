from __future__ import annotations

import plotly.graph_objects as go

from edu_console.core.base_view import ChartView, color_for
from edu_console.core.chart_alignment import MISSING_NULL, ORDER_SORTED, AlignedDataset
from edu_console.core.chart_state import ChartProfile, ChartState
from edu_console.services.formatting import format_number


class LineChartView(ChartView):
    """
    Trend lines over time (or any ordered axis).

    Missing points stay None so plotly draws a break instead of dropping to zero;
    labels are sorted so the x-axis is chronological.
    """

    id = "line"
    label = "Line chart"
    missing_policy = MISSING_NULL
    key_order = ORDER_SORTED
    profile = ChartProfile(series_select=True, key_order=True)

    fill: str = "none"

    def render_figure(self, data: AlignedDataset, state: ChartState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No data for the selected series")

        fig = go.Figure()
        for i, s in enumerate(data.series):
            fig.add_trace(
                go.Scatter(
                    x=data.labels,
                    y=s.values,
                    name=s.name,
                    mode="lines+markers",
                    line=dict(color=color_for(i), shape="spline", smoothing=0.8),
                    fill=self.fill if self.fill != "none" else None,
                    connectgaps=False,
                    text=[format_number(v, self.snapshot.value_format) for v in s.values],
                    hovertemplate="%{x}<br>" + s.name + ": %{text}<extra></extra>",
                )
            )

        return self.apply_layout(fig)


class AreaChartView(LineChartView):
    """
    Line chart with the area under each series filled.
    """

    id = "area"
    label = "Area chart"
    fill = "tozeroy"
