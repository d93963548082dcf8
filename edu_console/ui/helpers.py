from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import dash

from edu_console.core.table_controller import TableController
from edu_console.core.table_state import PaginationState, TableState
from edu_console.ui.config import AppConfig, TableSource


def table_options(ctx: AppConfig) -> List[dict]:
    return [{"label": t.config.title, "value": name} for name, t in ctx.tables.items()]


def chart_options(ctx: AppConfig) -> List[dict]:
    return [{"label": s.title, "value": name} for name, s in ctx.snapshots.items()]


def view_options(ctx: AppConfig) -> List[dict]:
    if ctx.registry is None:
        return []
    return [{"label": cls.label, "value": cls.id} for cls in ctx.registry.all_classes()]


def triggered() -> Tuple[Optional[str], Optional[str]]:
    """(component id, property) of the input that fired the current callback."""
    trigger = dash.callback_context
    if not trigger.triggered:
        return None, None
    prop_id = trigger.triggered[0]["prop_id"]
    component, _, prop = prop_id.rpartition(".")
    return component or None, prop or None


def initial_table_state(ctx: AppConfig) -> TableState:
    return TableState(pagination=PaginationState(page_size=ctx.console_config.page_size))


def build_controller(ctx: AppConfig, source: TableSource, store: Optional[Dict[str, Any]]) -> TableController:
    """
    Rebuild the table controller for one request from the dcc.Store payload.

    The store holds {"table": name, "state": TableState dict}; a payload for a
    different table (or none at all) starts from a fresh state.
    """
    if store and store.get("table") == source.name and store.get("state"):
        state = TableState.from_dict(store["state"])
    else:
        state = initial_table_state(ctx)

    # Dash already debounces the search box client side
    return TableController(
        source.records,
        source.columns,
        row_key=source.row_key,
        state=state,
        search_debounce_ms=0,
    )


def store_payload(source: TableSource, controller: TableController) -> Dict[str, Any]:
    return {"table": source.name, "state": controller.state.to_dict()}
