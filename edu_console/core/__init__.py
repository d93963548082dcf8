"""
Core domain layer: column descriptors, the filter/sort dataset view,
selection, pagination, chart-series alignment and the table controller
"""

from .chart_alignment import AlignedDataset, Series, SeriesPoint, align
from .columns import ColumnDescriptor
from .dataset_view import view
from .debounce import DebouncedQueryController
from .pagination import PageSlice, slice_page
from .selection import SelectionTracker
from .table_controller import TableController
from .table_state import PaginationState, SortState, TableState

__all__ = [
    "AlignedDataset",
    "ColumnDescriptor",
    "DebouncedQueryController",
    "PageSlice",
    "PaginationState",
    "Series",
    "SeriesPoint",
    "SelectionTracker",
    "SortState",
    "TableController",
    "TableState",
    "align",
    "slice_page",
    "view",
]
