from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from edu_console.config.model import ConsoleConfig, TableConfig
from edu_console.core.chart_state import AnalyticsSnapshot
from edu_console.core.columns import ColumnDescriptor
from edu_console.core.view_registry import ViewRegistry
from edu_console.services.export_service import ExportService


@dataclass
class TableSource:
    """One configured table: its config, the fetched records and the column descriptors."""
    config: TableConfig
    records: List[Dict[str, Any]]
    columns: List[ColumnDescriptor]

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def row_key(self) -> str:
        return self.config.row_key


@dataclass
class AppConfig:
    config_root: Path
    console_config: ConsoleConfig
    tables: Dict[str, TableSource] = field(default_factory=dict)
    snapshots: Dict[str, AnalyticsSnapshot] = field(default_factory=dict)
    default_table: Optional[str] = None

    registry: Optional[ViewRegistry] = None
    export_service: Optional[ExportService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
