from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from edu_console.ui.config import AppConfig
from edu_console.ui.helpers import chart_options, table_options, view_options
from edu_console.ui.ids import IDs
from edu_console.ui.layout.build_chart_panel import build_chart_controls, build_chart_panel
from edu_console.ui.layout.build_navbar import build_navbar
from edu_console.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    default_table = ctx.default_table or next(iter(ctx.tables), None)
    default_chart = next(iter(ctx.snapshots), None)

    table_panel = build_table_panel(ctx.console_config, table_options(ctx), default_table)
    chart_controls = build_chart_controls(chart_options(ctx), view_options(ctx), default_chart)
    chart_panel = build_chart_panel()

    return dbc.Container(
        fluid=True,
        className="edc-root",
        children=[
            build_navbar(ctx.console_config),

            # App-level stores
            dcc.Store(id=IDs.Store.TABLE_STATE, storage_type="session"),
            dcc.Store(id=IDs.Store.CHART_STATE, storage_type="session"),

            dcc.Tabs(
                id="page-tabs",
                value="tables",
                children=[
                    dcc.Tab(label="Tables", value="tables", children=[table_panel]),
                    dcc.Tab(
                        label="Analytics",
                        value="analytics",
                        children=[
                            dbc.Row(
                                [
                                    dbc.Col(chart_controls, md=3, className="mt-3"),
                                    dbc.Col(chart_panel, md=9, className="mt-3"),
                                ],
                                className="gx-3",
                            ),
                        ],
                    ),
                ],
                className="mt-2",
            ),
        ],
    )
