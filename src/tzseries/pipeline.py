from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from tzseries.config.range import MAX_RANGE_DAYS, DateRangeConfig
from tzseries.domain.series import TimeSeriesPoint
from tzseries.keyer import TimezoneDayKeyer, default_keyer
from tzseries.ranges import normalize_date_range, validate_date_range
from tzseries.transforms.aggregate import Extractor, TRecord, aggregate
from tzseries.transforms.emit import emit_series
from tzseries.transforms.fill import fill_gaps

logger = logging.getLogger(__name__)


def process_time_series(
    records: Iterable[TRecord],
    config: DateRangeConfig,
    extract: Extractor,
    *,
    max_range_days: int = MAX_RANGE_DAYS,
    time_field: str = "created_at",
    keyer: TimezoneDayKeyer = default_keyer,
    now: Optional[datetime] = None,
) -> list[TimeSeriesPoint]:
    """Turn raw records into a gap-free daily series over the configured range.

    Records are bucketed by their local day in ``config.timezone``; every day
    between the normalized bounds appears exactly once, sorted ascending.
    Records outside the range keep their own day in the output.
    """
    window = normalize_date_range(config, now=now)
    validate_date_range(window.start_date, window.end_date, max_range_days)

    bucket = aggregate(records, keyer, extract, window.timezone, time_field=time_field)
    filled = fill_gaps(bucket, window.start_date, window.end_date, window.timezone, keyer)
    series = emit_series(filled, window.timezone, keyer)
    logger.debug("Emitted %d points for %s", len(series), window.describe())
    return series
