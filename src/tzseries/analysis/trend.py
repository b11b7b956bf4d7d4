from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Optional, Sequence

from tzseries.config.range import DEFAULT_RANGE_DAYS
from tzseries.domain.range import DateRange
from tzseries.domain.series import DistributionPoint, Number, TimeSeriesPoint
from tzseries.transforms.utils import check_number, exact_sum, record_instant
from tzseries.utils.time import ensure_utc, isoformat_utc, load_zone

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class TrendSummary:
    """Headline figures for a daily series over its period."""

    total: Number
    average_daily: float
    peak_daily: Number
    total_days: int
    period_start: str
    period_end: str


def summarize_trend(points: Sequence[TimeSeriesPoint], window: DateRange) -> TrendSummary:
    values = [point.value for point in points]
    total = exact_sum(values)
    total_days = len(points) or 1
    return TrendSummary(
        total=total,
        average_daily=round(total / total_days, 2),
        peak_daily=max([*values, 0]),
        total_days=total_days,
        period_start=isoformat_utc(window.start_date),
        period_end=isoformat_utc(window.end_date),
    )


def growth_rate(current: Number, previous: Number) -> float:
    """Percentage change from previous to current.

    With no previous activity any current activity counts as 100% growth.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def comparison_windows(
    now: datetime,
    timezone_name: str,
    days: int = DEFAULT_RANGE_DAYS,
) -> tuple[DateRange, DateRange]:
    """Return (previous, current) adjacent windows of ``days`` days ending at now."""
    end = ensure_utc(now)
    span = timedelta(days=days)
    current = DateRange(start_date=end - span, end_date=end, timezone=timezone_name)
    previous = DateRange(
        start_date=current.start_date - span,
        end_date=current.start_date,
        timezone=timezone_name,
    )
    return previous, current


def _count(_record: Any) -> int:
    return 1


def hourly_distribution(
    records: Iterable[Any],
    timezone_name: str,
    *,
    extract: Optional[Callable[[Any], Number]] = None,
    time_field: str = "created_at",
) -> list[DistributionPoint]:
    """Bucket records by local hour of day; all 24 hours are always present."""
    zone = load_zone(timezone_name)
    reducer = extract or _count
    contributions: list[list[Number]] = [[] for _ in range(HOURS_PER_DAY)]
    for position, record in enumerate(records):
        instant = record_instant(record, time_field, position)
        hour = instant.astimezone(zone).hour
        contributions[hour].append(check_number(reducer(record)))

    return [
        DistributionPoint(
            key=str(hour),
            value=exact_sum(values),
            metadata={"hour": hour, "time_range": f"{hour}:00-{hour + 1}:00"},
        )
        for hour, values in enumerate(contributions)
    ]
