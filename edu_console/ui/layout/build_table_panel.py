from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from edu_console.config.model import ConsoleConfig
from edu_console.ui.ids import IDs


def build_table_panel(
    console_config: ConsoleConfig,
    table_options: List[dict],
    default_table: Optional[str],
) -> dbc.Card:
    page_size_options = [{"label": f"{n} / page", "value": n} for n in console_config.page_size_options]

    toolbar = dbc.Row(
        [
            dbc.Col(
                dcc.Dropdown(
                    id=IDs.Control.TABLE_SELECT,
                    options=table_options,
                    value=default_table,
                    clearable=False,
                ),
                md=3,
            ),
            dbc.Col(
                dcc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="text",
                    placeholder="Search...",
                    # seconds of quiet typing before the query is sent
                    debounce=console_config.search_debounce_ms / 1000.0,
                    className="form-control",
                ),
                md=5,
            ),
            dbc.Col(
                dcc.Dropdown(
                    id=IDs.Control.PAGE_SIZE_SELECT,
                    options=page_size_options,
                    value=console_config.page_size,
                    clearable=False,
                ),
                md=2,
            ),
            dbc.Col(
                dbc.Button(
                    "Export CSV",
                    id=IDs.Control.DOWNLOAD_ROWS_BTN,
                    color="secondary",
                    size="sm",
                ),
                md=2,
                className="d-flex justify-content-end",
            ),
        ],
        className="g-2 mb-3 align-items-center",
    )

    selection_bar = html.Div(
        [
            dbc.ButtonGroup(
                [
                    dbc.Button("Select page", id=IDs.Control.SELECT_PAGE_BTN, size="sm", outline=True, color="primary"),
                    dbc.Button("Select all results", id=IDs.Control.SELECT_FILTERED_BTN, size="sm", outline=True, color="primary"),
                    dbc.Button("Clear selection", id=IDs.Control.CLEAR_SELECTION_BTN, size="sm", outline=True, color="secondary"),
                ],
                className="me-3",
            ),
            html.Span(id=IDs.Control.SELECTION_TEXT, className="text-muted"),
        ],
        className="d-flex align-items-center mb-2",
    )

    return dbc.Card(
        [
            dbc.CardHeader("Records", className="fw-semibold"),
            dbc.CardBody(
                [
                    toolbar,
                    selection_bar,
                    dash_table.DataTable(
                        id=IDs.Control.DATA_TABLE,
                        columns=[],
                        data=[],
                        row_selectable="multi",
                        selected_rows=[],
                        sort_action="custom",
                        sort_mode="single",
                        sort_by=[],
                        page_action="custom",
                        page_current=0,
                        page_size=console_config.page_size,
                        style_table={"overflowX": "auto"},
                        style_cell={"textAlign": "left", "padding": "6px"},
                        style_header={"fontWeight": "600"},
                    ),
                    html.Div(
                        [
                            html.Span(id=IDs.Control.RANGE_TEXT, className="text-muted"),
                            html.Span(id=IDs.Control.STATUS_TEXT, className="text-danger ms-3"),
                        ],
                        className="mt-2",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_ROWS),
                ]
            ),
        ],
        className="edc-table-card",
    )
