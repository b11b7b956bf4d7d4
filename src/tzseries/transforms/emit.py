from __future__ import annotations

from collections.abc import Mapping

from tzseries.domain.series import Number, TimeSeriesPoint
from tzseries.keyer import TimezoneDayKeyer
from tzseries.utils.time import isoformat_utc


def emit_series(
    bucket: Mapping[str, Number],
    timezone_name: str,
    keyer: TimezoneDayKeyer,
) -> list[TimeSeriesPoint]:
    """Convert day buckets into points ordered by local midnight."""
    stamped = [
        (keyer.local_midnight(key, timezone_name), value)
        for key, value in bucket.items()
    ]
    stamped.sort(key=lambda item: item[0])
    return [
        TimeSeriesPoint(timestamp=isoformat_utc(instant), value=value)
        for instant, value in stamped
    ]
