from __future__ import annotations

import math
from typing import Optional, Union

Number = Union[int, float]

FORMAT_INTEGER = "integer"
FORMAT_DECIMAL = "decimal"
FORMAT_PERCENTAGE = "percentage"
FORMAT_TIME = "time"
VALUE_FORMATS = (FORMAT_INTEGER, FORMAT_DECIMAL, FORMAT_PERCENTAGE, FORMAT_TIME)


def format_number(value: Optional[Number], kind: str = FORMAT_INTEGER) -> str:
    """
    Format a chart value for tooltips and table cells.

    - integer:    10 -> "10"
    - decimal:    2.5 -> "2.50"
    - percentage: 0.256 -> "25.6%" (expects a 0-1 fraction)
    - time:       65 (minutes) -> "1h 5m"

    Missing values (None / NaN) render as "-".
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "-"

    if kind == FORMAT_DECIMAL:
        return f"{value:.2f}"
    if kind == FORMAT_PERCENTAGE:
        return f"{value * 100:.1f}%"
    if kind == FORMAT_TIME:
        total = int(value)
        hours, minutes = divmod(total, 60)
        return f"{hours}h {minutes}m" if hours > 0 else f"{minutes}m"
    if kind != FORMAT_INTEGER:
        raise ValueError(f"Unknown value format '{kind}'")

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
