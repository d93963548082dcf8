from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Union

import pandas as pd

from .exceptions import ChartDataError
from .instants import as_instant, is_datelike

logger = logging.getLogger(__name__)

Key = Hashable
Number = Union[int, float]

MISSING_NULL = "null"
MISSING_ZERO = "zero"
MISSING_POLICIES = (MISSING_NULL, MISSING_ZERO)

ORDER_SORTED = "sorted"
ORDER_FIRST_SEEN = "first-seen"
KEY_ORDERS = (ORDER_SORTED, ORDER_FIRST_SEEN)


@dataclass(frozen=True)
class SeriesPoint:
    key: Key
    value: Number


@dataclass(frozen=True)
class Series:
    """
    A named, sparse list of points, e.g. "attempts" per weekday.

    Keys are unique within one series.
    """

    name: str
    points: Sequence[SeriesPoint] = field(default_factory=tuple)

    def as_mapping(self) -> Dict[Key, Number]:
        mapping: Dict[Key, Number] = {}
        for point in self.points:
            if point.key in mapping:
                raise ChartDataError(f"Duplicate key {point.key!r} in series '{self.name}'")
            mapping[point.key] = point.value
        return mapping


@dataclass(frozen=True)
class AlignedSeries:
    name: str
    values: List[Optional[Number]]


@dataclass(frozen=True)
class AlignedDataset:
    """
    Dense result of align(): values[j] of every series belongs to labels[j].
    """

    labels: List[Key] = field(default_factory=list)
    series: List[AlignedSeries] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def to_dict(self) -> Dict[str, Any]:
        """Chart collaborator shape: {labels, datasets: [{label, data}]}."""
        return {
            "labels": list(self.labels),
            "datasets": [{"label": s.name, "data": list(s.values)} for s in self.series],
        }

    def to_frame(self) -> pd.DataFrame:
        """One column per series, indexed by label. None becomes NaN."""
        return pd.DataFrame(
            {s.name: pd.Series(s.values, index=self.labels, dtype="float64") for s in self.series},
            index=pd.Index(self.labels, name="label"),
        )


def _first_seen(series: Sequence[Series]) -> List[Key]:
    seen: Dict[Key, None] = {}
    for s in series:
        for point in s.points:
            seen.setdefault(point.key, None)
    return list(seen)


def _ordered_labels(series: Sequence[Series], key_order: str) -> List[Key]:
    labels = _first_seen(series)
    if key_order == ORDER_FIRST_SEEN:
        return labels

    # date and datetime keys don't compare with each other; order them as instants
    if labels and all(is_datelike(k) for k in labels):
        return sorted(labels, key=as_instant)

    try:
        return sorted(labels)
    except TypeError:
        # Mixed key types are a caller contract violation; the order is undefined.
        logger.warning(
            "Series keys are not mutually orderable; keeping first-seen order",
            extra={"series": [s.name for s in series]},
        )
        return labels


def align(series: Sequence[Series], missing_policy: str, key_order: str) -> AlignedDataset:
    """
    Merge sparse series into one dense dataset.

    :param series: the input series, in legend order
    :param missing_policy: 'null' (line/area: gaps render as breaks) or
                           'zero' (bar/pie: gaps render as empty bars)
    :param key_order: 'sorted' (natural ascending order of the key type) or
                      'first-seen' (first appearance across series, in input order)
    :return: AlignedDataset where every series has exactly one value per label

    Raises:
        ValueError: unknown missing_policy / key_order
        ChartDataError: a series repeats a key
    """
    if missing_policy not in MISSING_POLICIES:
        raise ValueError(f"Unknown missing policy '{missing_policy}'")
    if key_order not in KEY_ORDERS:
        raise ValueError(f"Unknown key order '{key_order}'")

    if not series or all(len(s.points) == 0 for s in series):
        return AlignedDataset(labels=[], series=[])

    lookups = [s.as_mapping() for s in series]
    labels = _ordered_labels(series, key_order)
    fill: Optional[Number] = None if missing_policy == MISSING_NULL else 0

    aligned = [
        AlignedSeries(name=s.name, values=[lookup.get(label, fill) for label in labels])
        for s, lookup in zip(series, lookups)
    ]
    return AlignedDataset(labels=labels, series=aligned)


# -----------------------------------------------------------------------------
# Adapters for raw analytics payloads
# -----------------------------------------------------------------------------
def series_from_mapping(name: str, mapping: Mapping[Key, Number]) -> Series:
    return Series(name=name, points=tuple(SeriesPoint(k, v) for k, v in mapping.items()))


def series_from_records(
    records: Iterable[Mapping[str, Any]],
    *,
    name: str,
    key_field: str = "key",
    value_field: str = "value",
) -> Series:
    """
    Build a Series from plain dict rows, e.g. [{"day": "Mon", "count": 10}, ...].
    """
    points = tuple(SeriesPoint(row[key_field], row[value_field]) for row in records)
    return Series(name=name, points=points)
