from tzseries.analysis.trend import (
    TrendSummary,
    comparison_windows,
    growth_rate,
    hourly_distribution,
    summarize_trend,
)
from tzseries.config.range import DEFAULT_TIMEZONE, DateRangeConfig
from tzseries.config.settings import SeriesSettings, load_settings
from tzseries.domain.range import DateRange
from tzseries.domain.series import DistributionPoint, TimeSeriesPoint
from tzseries.errors import (
    DateRangeError,
    InvalidDateError,
    InvalidRangeError,
    InvalidTimezoneError,
    RangeTooLargeError,
)
from tzseries.keyer import TimezoneDayKeyer
from tzseries.pipeline import process_time_series
from tzseries.ranges import (
    date_range,
    days_difference,
    format_in_timezone,
    normalize_date_range,
    validate_date_range,
)

__all__ = [
    "DEFAULT_TIMEZONE",
    "DateRange",
    "DateRangeConfig",
    "DateRangeError",
    "DistributionPoint",
    "InvalidDateError",
    "InvalidRangeError",
    "InvalidTimezoneError",
    "RangeTooLargeError",
    "SeriesSettings",
    "TimeSeriesPoint",
    "TimezoneDayKeyer",
    "TrendSummary",
    "comparison_windows",
    "date_range",
    "days_difference",
    "format_in_timezone",
    "growth_rate",
    "hourly_distribution",
    "load_settings",
    "normalize_date_range",
    "process_time_series",
    "summarize_trend",
    "validate_date_range",
]
