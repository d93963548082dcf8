from __future__ import annotations

import plotly.graph_objects as go

from edu_console.core.base_view import ChartView, color_for
from edu_console.core.chart_alignment import MISSING_ZERO, ORDER_FIRST_SEEN, AlignedDataset
from edu_console.core.chart_state import ChartProfile, ChartState
from edu_console.services.formatting import format_number


class BarChartView(ChartView):
    """
    Categorical comparison across series (e.g. attempts vs completions per weekday).

    Gaps are filled with 0 so every category shows an (empty) bar; categories keep
    their first-seen order because they often carry an external order (Mon..Sun)
    that alphabetical sorting would break.
    """

    id = "bar"
    label = "Bar chart"
    missing_policy = MISSING_ZERO
    key_order = ORDER_FIRST_SEEN
    profile = ChartProfile(series_select=True, key_order=True, stacked=True, horizontal=True)

    def render_figure(self, data: AlignedDataset, state: ChartState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No data for the selected series")

        fig = go.Figure()
        for i, s in enumerate(data.series):
            categories, values = data.labels, s.values
            x, y = (values, categories) if state.horizontal else (categories, values)
            fig.add_trace(
                go.Bar(
                    x=x,
                    y=y,
                    name=s.name,
                    orientation="h" if state.horizontal else "v",
                    marker=dict(color=color_for(i)),
                    text=[format_number(v, self.snapshot.value_format) for v in values],
                    hovertemplate="%{text}<extra>" + s.name + "</extra>",
                )
            )

        fig.update_layout(barmode="stack" if state.stacked else "group")

        if state.horizontal:
            return self.apply_layout(fig, x_title=self.snapshot.y_label, y_title=self.snapshot.x_label)
        return self.apply_layout(fig)
