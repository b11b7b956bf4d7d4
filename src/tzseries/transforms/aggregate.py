from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from tzseries.domain.series import Number
from tzseries.keyer import TimezoneDayKeyer
from tzseries.transforms.utils import check_number, exact_sum, record_instant

logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord")
Extractor = Callable[[TRecord], Number]
DayBucket = dict[str, Number]


def aggregate(
    records: Iterable[TRecord],
    keyer: TimezoneDayKeyer,
    extract: Extractor,
    timezone_name: str,
    *,
    time_field: str = "created_at",
) -> DayBucket:
    """Sum ``extract(record)`` per local day key.

    Fails as a whole when a record lacks a valid instant or the extractor
    raises or returns a non-number.
    """
    contributions: dict[str, list[Number]] = {}
    count = 0
    for position, record in enumerate(records):
        instant = record_instant(record, time_field, position)
        key = keyer.day_key(instant, timezone_name)
        value = check_number(extract(record))
        contributions.setdefault(key, []).append(value)
        count += 1

    bucket: DayBucket = {key: exact_sum(values) for key, values in contributions.items()}
    logger.debug("Aggregated %d records into %d day buckets", count, len(bucket))
    return bucket
