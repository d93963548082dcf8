from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from edu_console.config.model import ConsoleConfig


def build_navbar(console_config: ConsoleConfig) -> dbc.Navbar:
    title = console_config.ui_title
    subtitle = "Classes, students and learning analytics"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        className="edc-navbar mb-2",
    )
