from edu_console.core.view_registry import ViewRegistry

from .bar_chart_view import BarChartView
from .line_chart_view import AreaChartView, LineChartView
from .pie_chart_view import PieChartView

__all__ = ["LineChartView", "AreaChartView", "BarChartView", "PieChartView", "build_view_registry"]


def build_view_registry() -> ViewRegistry:
    registry = ViewRegistry()
    registry.register(LineChartView)
    registry.register(AreaChartView)
    registry.register(BarChartView)
    registry.register(PieChartView)
    return registry
