"""
Configuration layer: JSON config directory -> ConsoleConfig, table records and chart snapshots
"""

from .loader import load_console_config, load_records, load_snapshots
from .model import ChartConfig, ColumnConfig, ConsoleConfig, TableConfig

__all__ = [
    "ChartConfig",
    "ColumnConfig",
    "ConsoleConfig",
    "TableConfig",
    "load_console_config",
    "load_records",
    "load_snapshots",
]
