from datetime import date

import pytest

from tzseries.errors import InvalidDateError, InvalidTimezoneError
from tzseries.keyer import TimezoneDayKeyer
from tests.unit.helpers import utc


@pytest.fixture
def keyer():
    return TimezoneDayKeyer()


def test_day_key_uses_local_calendar_day(keyer):
    assert keyer.day_key(utc(2024, 1, 1, 15, 59), "Asia/Shanghai") == "2024-01-01"
    assert keyer.day_key(utc(2024, 1, 1, 16, 30), "Asia/Shanghai") == "2024-01-02"
    assert keyer.day_key(utc(2024, 1, 1, 16, 30), "UTC") == "2024-01-01"


def test_day_key_treats_naive_instants_as_utc(keyer):
    from datetime import datetime

    assert keyer.day_key(datetime(2024, 1, 1, 23, 0), "UTC") == "2024-01-01"
    assert keyer.day_key(datetime(2024, 1, 1, 23, 0), "Asia/Tokyo") == "2024-01-02"


def test_local_midnight_returns_utc_instant(keyer):
    assert keyer.local_midnight("2024-01-02", "Asia/Shanghai") == utc(2024, 1, 1, 16)
    assert keyer.local_midnight(date(2024, 1, 2), "UTC") == utc(2024, 1, 2)


def test_local_midnight_follows_dst_offsets(keyer):
    # New York springs forward on 2024-03-10 at 02:00.
    assert keyer.local_midnight("2024-03-10", "America/New_York") == utc(2024, 3, 10, 5)
    assert keyer.local_midnight("2024-03-11", "America/New_York") == utc(2024, 3, 11, 4)


def test_local_midnight_inside_dst_gap_is_first_instant_of_day(keyer):
    # Santiago skips 00:00-01:00 on 2024-09-08.
    start = keyer.local_midnight("2024-09-08", "America/Santiago")
    assert start == utc(2024, 9, 8, 4)
    assert keyer.day_key(start, "America/Santiago") == "2024-09-08"


def test_iter_days_is_inclusive(keyer):
    days = list(keyer.iter_days(utc(2024, 1, 1, 10), utc(2024, 1, 3, 1), "UTC"))
    assert days == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]


def test_unknown_timezone_is_rejected(keyer):
    with pytest.raises(InvalidTimezoneError):
        keyer.day_key(utc(2024, 1, 1), "Mars/Olympus_Mons")


def test_iter_days_skips_dates_the_zone_never_had(keyer):
    # Samoa moved across the date line: 2011-12-29 was followed by 2011-12-31.
    days = list(keyer.iter_days(utc(2011, 12, 29, 12), utc(2011, 12, 31, 12), "Pacific/Apia"))
    assert days == [date(2011, 12, 29), date(2011, 12, 31), date(2012, 1, 1)]


@pytest.mark.parametrize("key", ["2024-02-30", "01/02/2024", "", None])
def test_parse_key_rejects_malformed_keys(keyer, key):
    with pytest.raises(InvalidDateError) as excinfo:
        keyer.local_midnight(key, "UTC")
    assert excinfo.value.bound == "day_key"
