import pytest

from edu_console.services.formatting import format_number


@pytest.mark.parametrize(
    "value, kind, expected",
    [
        (10, "integer", "10"),
        (10.0, "integer", "10"),
        (2.5, "decimal", "2.50"),
        (0.256, "percentage", "25.6%"),
        (65, "time", "1h 5m"),
        (45, "time", "45m"),
        (None, "decimal", "-"),
        (float("nan"), "integer", "-"),
    ],
)
def test_format_number(value, kind, expected):
    assert format_number(value, kind) == expected


def test_unknown_format_raises():
    with pytest.raises(ValueError):
        format_number(1, "currency")
