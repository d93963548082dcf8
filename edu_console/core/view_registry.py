from __future__ import annotations
from typing import Dict, List, Type

from .base_view import ChartView
from .chart_state import AnalyticsSnapshot


class ViewRegistry:
    """
    Chart types available to the analytics tab, keyed by ChartView.id.

    Holds classes rather than instances: a view is bound to one snapshot, so
    create() builds a fresh one for whichever chart is selected. Registration
    order is the order of the chart-type dropdown.
    """

    def __init__(self):
        self._views: Dict[str, Type[ChartView]] = {}

    def register(self, view_cls: Type[ChartView]) -> None:
        """
        Raises:
            TypeError: view_cls is not a ChartView subclass
            ValueError: another view already uses view_cls.id
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, ChartView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of ChartView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, snapshot: AnalyticsSnapshot) -> ChartView:
        """Bind the chart type `view_id` to `snapshot`. Unknown ids raise KeyError."""
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(snapshot)

    def has(self, view_id: str) -> bool:
        return view_id in self._views

    def all_classes(self) -> List[Type[ChartView]]:
        return list(self._views.values())
