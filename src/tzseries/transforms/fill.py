from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime

from tzseries.domain.series import Number
from tzseries.keyer import DAY_KEY_FORMAT, TimezoneDayKeyer

logger = logging.getLogger(__name__)


def fill_gaps(
    bucket: Mapping[str, Number],
    start_date: datetime,
    end_date: datetime,
    timezone_name: str,
    keyer: TimezoneDayKeyer,
) -> dict[str, Number]:
    """Return a copy of bucket with a zero for every missing local day in range.

    Days are walked on the local calendar so DST shifts never skip or repeat a day.
    """
    filled: dict[str, Number] = dict(bucket)
    added = 0
    for day in keyer.iter_days(start_date, end_date, timezone_name):
        key = day.strftime(DAY_KEY_FORMAT)
        if key not in filled:
            filled[key] = 0
            added += 1
    if added:
        logger.debug("Filled %d empty days", added)
    return filled
