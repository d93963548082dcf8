from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output, State, dcc

from edu_console.core.chart_state import ChartState
from edu_console.core.exceptions import EduConsoleError
from edu_console.ui.ids import IDs

if TYPE_CHECKING:
    from edu_console.ui.config import AppConfig

logger = logging.getLogger(__name__)

OPT_STACKED = "stacked"
OPT_HORIZONTAL = "horizontal"
OPT_DONUT = "donut"


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this chart.", details)


def chart_state_from_controls(
    chart_name: str,
    view_id: str,
    series_names: list[str] | None,
    key_order: str | None,
    options: list[str] | None,
) -> ChartState:
    options = options or []
    return ChartState(
        snapshot_name=chart_name,
        view_id=view_id,
        series_names=list(series_names or []),
        key_order=key_order or None,
        stacked=OPT_STACKED in options,
        horizontal=OPT_HORIZONTAL in options,
        donut=OPT_DONUT in options,
    )


def register_chart_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Chart selection -> series options + the chart's configured view
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SERIES_SELECT, "options"),
        Output(IDs.Control.SERIES_SELECT, "value"),
        Output(IDs.Control.VIEW_SELECT, "value"),
        Input(IDs.Control.CHART_SELECT, "value"),
    )
    def update_series_options(chart_name: str | None):
        snapshot = ctx.snapshots.get(chart_name) if chart_name else None
        if snapshot is None:
            return [], [], None

        options = [{"label": n, "value": n} for n in snapshot.series_names]
        chart_cfg = next((c for c in ctx.console_config.charts if c.name == chart_name), None)
        view_id = chart_cfg.view_id if chart_cfg is not None else "line"
        return options, [], view_id

    # ---------------------------------------------------------
    # Hide/show chart controls based on the view's profile
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SERIES_FILTER_CONTAINER, "style"),
        Output(IDs.Control.KEY_ORDER_CONTAINER, "style"),
        Output(IDs.Control.CHART_OPTIONS_CONTAINER, "style"),
        Output(IDs.Control.CHART_OPTIONS, "options"),
        Input(IDs.Control.VIEW_SELECT, "value"),
        State(IDs.Control.CHART_SELECT, "value"),
    )
    def update_control_visibility(view_id: str | None, chart_name: str | None):
        def style(flag: bool) -> dict:
            return {} if flag else {"display": "none"}

        snapshot = ctx.snapshots.get(chart_name) if chart_name else None
        if snapshot is None or not view_id or ctx.registry is None or not ctx.registry.has(view_id):
            return style(True), style(False), style(False), []

        profile = ctx.registry.create(view_id, snapshot).profile
        options = []
        if profile.stacked:
            options.append({"label": "Stacked", "value": OPT_STACKED})
        if profile.horizontal:
            options.append({"label": "Horizontal", "value": OPT_HORIZONTAL})
        if profile.donut:
            options.append({"label": "Donut", "value": OPT_DONUT})

        return (
            style(profile.series_select),
            style(profile.key_order),
            style(bool(options)),
            options,
        )

    # ---------------------------------------------------------
    # Main figure: controls -> ChartState -> figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Store.CHART_STATE, "data"),
        Input(IDs.Control.CHART_SELECT, "value"),
        Input(IDs.Control.VIEW_SELECT, "value"),
        Input(IDs.Control.SERIES_SELECT, "value"),
        Input(IDs.Control.KEY_ORDER_SELECT, "value"),
        Input(IDs.Control.CHART_OPTIONS, "value"),
    )
    def update_main_graph(
        chart_name: str | None,
        view_id: str | None,
        series_names: list[str] | None,
        key_order: str | None,
        options: list[str] | None,
    ):
        if not chart_name or not view_id:
            return _message_figure("No chart selected.", "Choose a metric and chart type."), None

        if chart_name not in ctx.snapshots:
            return _error_figure(f"The chart '{chart_name}' is not available."), None

        state = chart_state_from_controls(chart_name, view_id, series_names, key_order, options)

        try:
            fig = ctx.export_service.render_figure(state)
        except (EduConsoleError, KeyError, ValueError) as e:
            logger.exception("Error rendering chart", extra={"chart_state": state.to_dict()})
            return _error_figure(str(e)), state.to_dict()

        return fig, state.to_dict()

    # ---------------------------------------------------------
    # CSV export of the aligned chart data
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CHART, "data"),
        Input(IDs.Control.DOWNLOAD_CHART_BTN, "n_clicks"),
        State(IDs.Store.CHART_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_chart(n_clicks: int | None, state_data: dict[str, Any] | None):
        if not n_clicks or not state_data:
            raise dash.exceptions.PreventUpdate

        csv_text = ctx.export_service.chart_csv(state_data)
        if not csv_text:
            raise dash.exceptions.PreventUpdate

        return dcc.send_string(csv_text, f"{state_data['snapshot_name']}_{state_data['view_id']}.csv")
