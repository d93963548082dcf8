from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        TABLE_STATE = "table-state"
        CHART_STATE = "chart-state"

    class Control:
        # Tables tab
        TABLE_SELECT = "table-select"
        SEARCH_INPUT = "search-input"
        PAGE_SIZE_SELECT = "page-size-select"
        DATA_TABLE = "data-table"
        RANGE_TEXT = "range-text"
        SELECTION_TEXT = "selection-text"
        STATUS_TEXT = "table-status-text"

        SELECT_PAGE_BTN = "select-page-btn"
        SELECT_FILTERED_BTN = "select-filtered-btn"
        CLEAR_SELECTION_BTN = "clear-selection-btn"

        DOWNLOAD_ROWS_BTN = "download-rows-btn"
        DOWNLOAD_ROWS = "download-rows"

        # Analytics tab
        CHART_SELECT = "chart-select"
        VIEW_SELECT = "view-select"
        SERIES_SELECT = "series-select"
        KEY_ORDER_SELECT = "key-order-select"
        CHART_OPTIONS = "chart-options-checklist"

        SERIES_FILTER_CONTAINER = "series-filter-container"
        KEY_ORDER_CONTAINER = "key-order-container"
        CHART_OPTIONS_CONTAINER = "chart-options-container"

        MAIN_GRAPH = "main-graph"
        DOWNLOAD_CHART_BTN = "download-chart-btn"
        DOWNLOAD_CHART = "download-chart"
