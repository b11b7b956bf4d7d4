from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tzseries.utils.time import isoformat_utc


@dataclass(frozen=True)
class DateRange:
    """Normalized window: both bounds present, UTC-aware, start <= end."""

    start_date: datetime
    end_date: datetime
    timezone: str

    def __post_init__(self) -> None:
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if value.tzinfo is None:
                raise ValueError(f"{name} must be timezone-aware")

    def describe(self) -> str:
        return f"{isoformat_utc(self.start_date)}..{isoformat_utc(self.end_date)} ({self.timezone})"
