from datetime import datetime

import pytest
from pydantic import ValidationError

from tzseries.config.range import DateRangeConfig
from tzseries.errors import InvalidDateError
from tests.unit.helpers import utc


def test_defaults():
    config = DateRangeConfig()
    assert config.start_date is None
    assert config.end_date is None
    assert config.timezone == "Asia/Shanghai"
    assert config.default_range_days == 30


def test_datetimes_are_converted_to_utc():
    config = DateRangeConfig(
        start_date="2024-01-01T08:00:00+08:00",
        end_date=datetime(2024, 1, 2, 12, 0),
    )
    assert config.start_date == utc(2024, 1, 1)
    assert config.end_date == utc(2024, 1, 2, 12)
    assert config.end_date.utcoffset().total_seconds() == 0


def test_blank_timezone_falls_back_to_default():
    assert DateRangeConfig(timezone="  ").timezone == "Asia/Shanghai"
    assert DateRangeConfig(timezone=" UTC ").timezone == "UTC"


def test_unknown_timezone_is_rejected():
    with pytest.raises(ValidationError):
        DateRangeConfig(timezone="Mars/Olympus_Mons")


def test_negative_default_range_is_rejected():
    with pytest.raises(ValidationError):
        DateRangeConfig(default_range_days=-1)


def test_date_strings_accept_z_suffix_and_plain_dates():
    config = DateRangeConfig(start_date="2024-01-01", end_date="2024-01-03T00:00:00Z")
    assert config.start_date == utc(2024, 1, 1)
    assert config.end_date == utc(2024, 1, 3)


def test_from_query_names_malformed_bound():
    with pytest.raises(InvalidDateError) as excinfo:
        DateRangeConfig.from_query(start_date="2024-13-45")
    assert excinfo.value.bound == "start"

    with pytest.raises(InvalidDateError) as excinfo:
        DateRangeConfig.from_query(start_date=utc(2024, 1, 1), end_date=float("nan"))
    assert excinfo.value.bound == "end"


def test_from_query_keeps_defaults_for_missing_values():
    config = DateRangeConfig.from_query(end_date="2024-01-31T12:00:00+08:00")
    assert config.start_date is None
    assert config.end_date == utc(2024, 1, 31, 4)
    assert config.timezone == "Asia/Shanghai"
    assert config.default_range_days == 30


def test_constructor_wraps_malformed_bound_in_validation_error():
    with pytest.raises(ValidationError):
        DateRangeConfig(start_date="not-a-date")
