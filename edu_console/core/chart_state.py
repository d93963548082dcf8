from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .chart_alignment import Series


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """
    An already-fetched set of series for one analytics chart.

    Fields:

    - name: unique snapshot identifier (config key)
    - title: chart title shown above the figure
    - series: the raw, sparse series in legend order
    - x_label / y_label: axis titles
    - value_format: how tooltips format values (integer, decimal, percentage, time)
    """

    name: str
    title: str
    series: List[Series] = field(default_factory=list)
    x_label: Optional[str] = None
    y_label: Optional[str] = None
    value_format: str = "integer"

    @property
    def series_names(self) -> List[str]:
        return [s.name for s in self.series]


@dataclass
class ChartProfile:
    """
    Which chart controls a view supports.

    :param series_select: the series multi-select
    :param key_order: the sorted / first-seen toggle
    :param stacked: stacked bars
    :param horizontal: horizontal bars
    :param donut: donut hole for pies
    """
    series_select: bool = True
    key_order: bool = False
    stacked: bool = False
    horizontal: bool = False
    donut: bool = False


@dataclass
class ChartState:
    """
    Represents the current chart selection.

    Fields:

    - snapshot_name: which AnalyticsSnapshot to draw
    - view_id: which registered chart view draws it
    - series_names: subset of series to show; empty means all
    - key_order: overrides the view's default label order when set
    - stacked / horizontal / donut: display options for bar and pie charts
    """

    snapshot_name: str
    view_id: str

    series_names: List[str] = field(default_factory=list)
    key_order: Optional[str] = None

    stacked: bool = False
    horizontal: bool = False
    donut: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ChartState:
        return cls(
            snapshot_name=data.get("snapshot_name"),
            view_id=data.get("view_id"),
            series_names=list(data.get("series_names", [])),
            key_order=data.get("key_order"),
            stacked=bool(data.get("stacked", False)),
            horizontal=bool(data.get("horizontal", False)),
            donut=bool(data.get("donut", False)),
        )
