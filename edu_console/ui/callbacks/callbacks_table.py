from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State, dcc

from edu_console.core.exceptions import EduConsoleError
from edu_console.core.table_state import SortState
from edu_console.services.export_service import export_rows_csv
from edu_console.ui.helpers import build_controller, store_payload, triggered
from edu_console.ui.ids import IDs

if TYPE_CHECKING:
    from edu_console.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _sort_from_table(sort_by: list[dict] | None) -> SortState:
    if not sort_by:
        return SortState()
    first = sort_by[0]
    return SortState(column_key=first.get("column_id"), direction=first.get("direction", "asc"))


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Table: every table event -> TableController -> rows/page/selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DATA_TABLE, "data"),
        Output(IDs.Control.DATA_TABLE, "columns"),
        Output(IDs.Control.DATA_TABLE, "page_count"),
        Output(IDs.Control.DATA_TABLE, "page_current"),
        Output(IDs.Control.DATA_TABLE, "page_size"),
        Output(IDs.Control.DATA_TABLE, "selected_rows"),
        Output(IDs.Store.TABLE_STATE, "data"),
        Output(IDs.Control.RANGE_TEXT, "children"),
        Output(IDs.Control.SELECTION_TEXT, "children"),
        Output(IDs.Control.STATUS_TEXT, "children"),
        Input(IDs.Control.TABLE_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.DATA_TABLE, "sort_by"),
        Input(IDs.Control.DATA_TABLE, "page_current"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.DATA_TABLE, "selected_rows"),
        Input(IDs.Control.SELECT_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.SELECT_FILTERED_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_SELECTION_BTN, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
        State(IDs.Control.DATA_TABLE, "data"),
    )
    def update_table(
        table_name: str | None,
        search: str | None,
        sort_by: list[dict] | None,
        page_current: int | None,
        page_size: int | None,
        selected_rows: list[int] | None,
        _select_page: int | None,
        _select_filtered: int | None,
        _clear: int | None,
        store: dict[str, Any] | None,
        current_rows: list[dict] | None,
    ):
        source = ctx.tables.get(table_name) if table_name else None
        if source is None:
            return [], [], 1, 0, ctx.console_config.page_size, [], None, "No data", "", ""

        component, prop = triggered()
        if component == IDs.Control.TABLE_SELECT:
            store = None

        controller = build_controller(ctx, source, store)
        status = ""

        try:
            if component == IDs.Control.SEARCH_INPUT:
                controller.set_query(search or "")
            elif component == IDs.Control.PAGE_SIZE_SELECT and page_size:
                controller.set_page_size(int(page_size))
            elif component == IDs.Control.DATA_TABLE and prop == "sort_by":
                controller.set_sort(_sort_from_table(sort_by))
            elif component == IDs.Control.DATA_TABLE and prop == "page_current":
                controller.set_page((page_current or 0) + 1)
            elif component == IDs.Control.DATA_TABLE and prop == "selected_rows":
                rows = current_rows or []
                checked = [rows[i]["id"] for i in (selected_rows or []) if 0 <= i < len(rows)]
                controller.set_page_selection(checked)
            elif component == IDs.Control.SELECT_PAGE_BTN:
                controller.select_all_visible()
            elif component == IDs.Control.SELECT_FILTERED_BTN:
                controller.select_all_filtered()
            elif component == IDs.Control.CLEAR_SELECTION_BTN:
                controller.clear_selection()
        except EduConsoleError as e:
            logger.exception(
                "Table event failed",
                extra={"table": source.name, "trigger": f"{component}.{prop}"},
            )
            status = str(e)

        props = controller.table_props()
        page = props["page"]
        selected = set(props["selected_keys"])
        rows = props["rows"]
        selected_on_page = [i for i, row in enumerate(rows) if row["id"] in selected]

        return (
            rows,
            props["columns"],
            max(page.page_count, 1),
            page.current_page - 1,
            page.page_size,
            selected_on_page,
            store_payload(source, controller),
            page.showing_text,
            f"{len(selected)} selected",
            status,
        )

    # ---------------------------------------------------------
    # CSV export of the current filtered + sorted view
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_ROWS, "data"),
        Input(IDs.Control.DOWNLOAD_ROWS_BTN, "n_clicks"),
        State(IDs.Control.TABLE_SELECT, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_rows(n_clicks: int | None, table_name: str | None, store: dict[str, Any] | None):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        source = ctx.tables.get(table_name) if table_name else None
        if source is None:
            raise dash.exceptions.PreventUpdate

        controller = build_controller(ctx, source, store)
        csv_text = export_rows_csv(controller.filtered_rows(), controller.columns)
        if not csv_text:
            raise dash.exceptions.PreventUpdate

        return dcc.send_string(csv_text, f"{source.name}.csv")
