from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Number = Union[int, float]


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One day of a series: local midnight as an ISO-8601 UTC string and its value."""

    timestamp: str
    value: Number


@dataclass(frozen=True)
class DistributionPoint:
    key: str
    value: Number
    metadata: dict[str, Any] = field(default_factory=dict)
