from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional

import plotly.graph_objs as go

from .chart_alignment import AlignedDataset, Series, align
from .chart_state import AnalyticsSnapshot, ChartProfile, ChartState

logger = logging.getLogger(__name__)

CHART_COLORS = [
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#06B6D4",
    "#8B5CF6",
    "#EC4899",
    "#6366F1",
    "#6B7280",
]


def color_for(index: int) -> str:
    return CHART_COLORS[index % len(CHART_COLORS)]


class ChartView(ABC):
    """
    Abstract base class for all analytics chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - declare 'missing_policy' and 'key_order' - how sparse series are aligned for this chart type
    - implement 'render_figure' - used to render the aligned data using Plotly

    compute_data is shared: every chart aligns its series the same way and only
    the policy differs per chart type.
    """

    id: str = None
    label: str = None
    missing_policy: str = None
    key_order: str = None
    profile = ChartProfile()

    def __init__(self, snapshot: AnalyticsSnapshot):
        self.snapshot = snapshot

    def selected_series(self, state: ChartState) -> List[Series]:
        """
        Series chosen in the state, in snapshot order. Unknown names are ignored;
        an empty selection means every series.
        """
        if not state.series_names:
            return list(self.snapshot.series)
        wanted = set(state.series_names)
        return [s for s in self.snapshot.series if s.name in wanted]

    def compute_data(self, state: ChartState) -> AlignedDataset:
        """
        Align the selected series with this view's missing-value policy.
        :param state: the current {@link ChartState}
        :return: the dense {@link AlignedDataset}
        """
        key_order = state.key_order if (state.key_order and self.profile.key_order) else self.key_order
        return align(self.selected_series(state), self.missing_policy, key_order)

    def timed_compute(self, state: ChartState) -> AlignedDataset:
        start = time.perf_counter()
        data = self.compute_data(state)
        logger.info(
            "compute_data",
            extra={
                "view_id": self.id,
                "snapshot": self.snapshot.name,
                "n_labels": len(data.labels),
                "n_series": len(data.series),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @abstractmethod
    def render_figure(self, data: AlignedDataset, state: ChartState) -> go.Figure:
        """
        Render the figure given the aligned data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link ChartState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def apply_layout(self, fig: go.Figure, x_title: Optional[str] = None, y_title: Optional[str] = None) -> go.Figure:
        fig.update_layout(
            title=self.snapshot.title,
            height=450,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title=x_title if x_title is not None else self.snapshot.x_label,
            yaxis_title=y_title if y_title is not None else self.snapshot.y_label,
            legend_title="Series",
        )
        return fig

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
