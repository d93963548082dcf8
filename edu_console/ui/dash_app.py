from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig, TableSource
from edu_console.config.loader import load_console_config, load_records, load_snapshots
from edu_console.config.model import ConsoleConfig
from edu_console.core.exceptions import ConfigError
from edu_console.services.export_service import ExportService
from edu_console.ui.callbacks.callbacks_charts import register_chart_callbacks
from edu_console.ui.callbacks.callbacks_table import register_table_callbacks
from edu_console.ui.layout.build_layout import build_layout
from edu_console.views import build_view_registry

logger = logging.getLogger(__name__)


def _load_tables(console_config: ConsoleConfig) -> Dict[str, TableSource]:
    tables: Dict[str, TableSource] = {}
    for table_cfg in console_config.tables:
        try:
            records = load_records(table_cfg)
        except (OSError, ConfigError, ValueError) as e:
            logger.error(
                "Skipping table due to data error",
                extra={"table": table_cfg.name, "error": str(e)},
            )
            continue
        tables[table_cfg.name] = TableSource(
            config=table_cfg,
            records=records,
            columns=table_cfg.descriptors(),
        )
    return tables


def build_app_context(config_root: Path | str) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load Config
    console_config = load_console_config(config_root)

    # 2) Snapshots of table records and chart series
    tables = _load_tables(console_config)
    snapshots = load_snapshots(console_config)
    if not tables and not snapshots:
        raise RuntimeError(f"No tables or charts could be loaded from config root: {config_root}")

    # 3) Views & Services
    registry = build_view_registry()
    export_service = ExportService(snapshots_by_name=snapshots, view_registry=registry)

    default_table = console_config.default_table
    if default_table not in tables:
        default_table = next(iter(tables), None)

    ctx = AppConfig(
        config_root=config_root,
        console_config=console_config,
        tables=tables,
        snapshots=snapshots,
        default_table=default_table,
        registry=registry,
        export_service=export_service,
    )
    ctx.validate()

    logger.info(
        "App context ready",
        extra={"tables": list(tables), "charts": list(snapshots), "default_table": default_table},
    )
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_context(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        suppress_callback_exceptions=True,
    )
    app.title = ctx.console_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_table_callbacks(app, ctx)
    register_chart_callbacks(app, ctx)

    return app
