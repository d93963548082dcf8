from __future__ import annotations

import plotly.graph_objects as go

from edu_console.core.base_view import CHART_COLORS, ChartView
from edu_console.core.chart_alignment import MISSING_ZERO, ORDER_FIRST_SEEN, AlignedDataset
from edu_console.core.chart_state import ChartProfile, ChartState


class PieChartView(ChartView):
    """
    Share of each category within a single series (e.g. course completion split).

    Only the first selected series is drawn; with the donut option the total is
    shown in the hole.
    """

    id = "pie"
    label = "Pie chart"
    missing_policy = MISSING_ZERO
    key_order = ORDER_FIRST_SEEN
    profile = ChartProfile(series_select=True, donut=True)

    def render_figure(self, data: AlignedDataset, state: ChartState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No data for the selected series")

        first = data.series[0]
        total = sum(v for v in first.values if v is not None)
        if total == 0:
            return self.empty_figure(f"'{first.name}' has no values to show")

        fig = go.Figure(
            go.Pie(
                labels=[str(label) for label in data.labels],
                values=first.values,
                name=first.name,
                hole=0.5 if state.donut else 0.0,
                marker=dict(colors=CHART_COLORS),
                sort=False,
            )
        )

        if state.donut:
            fig.add_annotation(text=f"Total<br>{total:g}", showarrow=False, x=0.5, y=0.5)

        fig.update_layout(
            title=self.snapshot.title,
            height=450,
            margin=dict(l=40, r=40, t=60, b=40),
            legend_title=first.name,
        )
        return fig
