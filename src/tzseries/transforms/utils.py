from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Iterable

from tzseries.domain.series import Number
from tzseries.errors import InvalidDateError
from tzseries.utils.time import coerce_instant


def get_field(record: Any, field: str) -> Any:
    if isinstance(record, dict):
        return record.get(field)
    return getattr(record, field, None)


def record_instant(record: Any, field: str, position: int):
    """Return the UTC instant stored under field, naming the record on failure."""
    value = get_field(record, field)
    if value is None:
        raise InvalidDateError(f"record[{position}].{field}", value)
    return coerce_instant(value, f"record[{position}].{field}")


def check_number(value: Any) -> Number:
    if isinstance(value, Decimal):
        value = float(value)
    if not isinstance(value, (int, float)):
        raise TypeError(f"extractor must return a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"extractor must return a finite number, got {value!r}")
    return value


def exact_sum(values: Iterable[Number]) -> Number:
    """Order-independent sum: exact for ints, correctly rounded for floats."""
    items = list(values)
    if all(isinstance(v, int) for v in items):
        return sum(items)
    return math.fsum(items)
