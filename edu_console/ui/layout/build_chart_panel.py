from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from edu_console.core.chart_alignment import ORDER_FIRST_SEEN, ORDER_SORTED
from edu_console.ui.ids import IDs


def build_chart_controls(chart_options: List[dict], view_options: List[dict], default_chart: Optional[str]) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Chart", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Metric", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.CHART_SELECT,
                        options=chart_options,
                        value=default_chart,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Label("Chart type", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.VIEW_SELECT,
                        options=view_options,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Div(
                        id=IDs.Control.SERIES_FILTER_CONTAINER,
                        children=[
                            html.Label("Series", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.SERIES_SELECT,
                                multi=True,
                                placeholder="All series",
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.KEY_ORDER_CONTAINER,
                        children=[
                            html.Label("Label order", className="form-label"),
                            dcc.RadioItems(
                                id=IDs.Control.KEY_ORDER_SELECT,
                                options=[
                                    {"label": "Chart default", "value": ""},
                                    {"label": "Sorted", "value": ORDER_SORTED},
                                    {"label": "As received", "value": ORDER_FIRST_SEEN},
                                ],
                                value="",
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.CHART_OPTIONS_CONTAINER,
                        children=[
                            dcc.Checklist(
                                id=IDs.Control.CHART_OPTIONS,
                                options=[],
                                value=[],
                            ),
                        ],
                    ),
                ]
            ),
        ],
        className="edc-sidebar",
    )


def build_chart_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Plot"), className="p-2"),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAIN_GRAPH,
                            style={"height": "500px"},
                            config={"responsive": True},
                        ),
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Download data (CSV)",
                                id=IDs.Control.DOWNLOAD_CHART_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_CHART),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ]
            ),
        ],
        className="edc-maincard",
    )
