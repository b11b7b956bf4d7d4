from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from tzseries.errors import InvalidDateError
from tzseries.utils.time import ensure_utc, load_zone

DAY_KEY_FORMAT = "%Y-%m-%d"


class TimezoneDayKeyer:
    """Map instants to local calendar days under IANA timezone rules.

    A day key is the canonical ``YYYY-MM-DD`` string of the local date.
    Two instants share a key iff they fall on the same local calendar day.
    """

    def local_day(self, instant: datetime, timezone_name: str) -> date:
        zone = load_zone(timezone_name)
        return ensure_utc(instant).astimezone(zone).date()

    def day_key(self, instant: datetime, timezone_name: str) -> str:
        return self.local_day(instant, timezone_name).strftime(DAY_KEY_FORMAT)

    def parse_key(self, day_key: str) -> date:
        try:
            return datetime.strptime(day_key, DAY_KEY_FORMAT).date()
        except (TypeError, ValueError) as exc:
            raise InvalidDateError("day_key", day_key) from exc

    def local_midnight(self, day_key: str | date, timezone_name: str) -> datetime:
        """Return the UTC instant at which the given local day begins.

        When midnight is skipped by a DST transition the wall time is resolved
        with the pre-transition offset, which lands on the transition instant.
        """
        zone = load_zone(timezone_name)
        day = day_key if isinstance(day_key, date) else self.parse_key(day_key)
        local = datetime.combine(day, time.min, tzinfo=zone)
        return local.astimezone(timezone.utc)

    def iter_days(self, start: datetime, end: datetime, timezone_name: str):
        """Yield every local date from the day of start to the day of end inclusive.

        Dates the zone never had (Pacific/Apia dropped 2011-12-30) are skipped.
        """
        current = self.local_day(start, timezone_name)
        last = self.local_day(end, timezone_name)
        step = timedelta(days=1)
        while current <= last:
            if self.local_day(self.local_midnight(current, timezone_name), timezone_name) == current:
                yield current
            current = current + step


default_keyer = TimezoneDayKeyer()
