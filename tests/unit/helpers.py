from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def make_record(when: datetime, count: Any = 1) -> dict[str, Any]:
    return {"created_at": when, "count": count}


@dataclass
class Order:
    created_at: datetime
    amount: float
