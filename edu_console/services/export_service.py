from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

import pandas as pd
import plotly.graph_objs as go

from edu_console.core.base_view import ChartView
from edu_console.core.chart_state import AnalyticsSnapshot, ChartState
from edu_console.core.columns import ColumnDescriptor
from edu_console.core.view_registry import ViewRegistry

logger = logging.getLogger(__name__)

# Spreadsheet apps only detect UTF-8 CSV reliably with a BOM
CSV_BOM = "\ufeff"


def rows_frame(records: Sequence[Any], columns: Sequence[ColumnDescriptor]) -> pd.DataFrame:
    """Display values of `records`, one column per descriptor, headed by column titles."""
    data = {col.header: [col.display(r, i) for i, r in enumerate(records)] for col in columns}
    return pd.DataFrame(data, columns=[col.header for col in columns])


def export_rows_csv(records: Sequence[Any], columns: Sequence[ColumnDescriptor]) -> str:
    """
    CSV text for the given rows (normally the filtered + sorted table view).

    Returns an empty string when there are no rows, matching the table's
    "nothing to export" state.
    """
    if not records:
        return ""
    return CSV_BOM + rows_frame(records, columns).to_csv(index=False)


class ExportService:
    """
    Renders chart figures and chart data from a ChartState.
    Stateless: snapshots are looked up and views created on demand.
    """

    def __init__(
            self,
            *,
            snapshots_by_name: Dict[str, AnalyticsSnapshot],
            view_registry: ViewRegistry,
    ) -> None:
        self._snapshots_by_name = snapshots_by_name
        self._view_registry = view_registry

    def _get_snapshot(self, name: str) -> AnalyticsSnapshot:
        try:
            return self._snapshots_by_name[name]
        except KeyError:
            raise KeyError(f"Snapshot '{name}' not found")

    def _view_for(self, state: ChartState) -> ChartView:
        snapshot = self._get_snapshot(state.snapshot_name)
        return self._view_registry.create(state.view_id, snapshot)

    def render_figure(self, state: ChartState | Dict[str, Any]) -> go.Figure:
        if isinstance(state, dict):
            state = ChartState.from_dict(state)
        view = self._view_for(state)
        data = view.timed_compute(state)
        return view.render_figure(data, state)

    def chart_csv(self, state: ChartState | Dict[str, Any]) -> str:
        """Aligned chart data as CSV: one row per label, one column per series."""
        if isinstance(state, dict):
            state = ChartState.from_dict(state)
        data = self._view_for(state).compute_data(state)
        if data.is_empty:
            return ""
        logger.info(
            "Exporting chart data",
            extra={"snapshot": state.snapshot_name, "view_id": state.view_id, "n_labels": len(data.labels)},
        )
        return CSV_BOM + data.to_frame().to_csv()
