"""Proleptic Gregorian calendar arithmetic on millisecond timestamps.

Timestamps are integer milliseconds since 1970-01-01T00:00:00 UTC. Day
conversion uses Howard Hinnant's ``days_from_civil`` / ``civil_from_days``
algorithms with astronomical year numbering (year 0 exists and is a leap
year), so years far outside ``datetime``'s range stay representable.
"""

from __future__ import annotations

import enum
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone

from imperial_dating._constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_SECOND,
    SIDEREAL_YEAR_MS,
)
from imperial_dating._errors import ERR_MSG_OUT_OF_RANGE, DateOutOfRangeError


class YearModel(enum.Enum):
    """Year-length model used to compute the year fraction."""

    SIMPLE = "simple"
    SIDEREAL = "sidereal"

    @classmethod
    def from_flag(cls, use_simple_year: bool) -> YearModel:
        return cls.SIMPLE if use_simple_year else cls.SIDEREAL


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_from_civil(y: int, m: int, d: int) -> int:
    """Convert a civil date to days since 1970-01-01 (can be negative)."""
    y0 = y - (1 if m <= 2 else 0)
    era = y0 // 400
    yoe = y0 - era * 400
    mp = m - 3 if m > 2 else m + 9
    doy = (153 * mp + 2) // 5 + d - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(z: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`."""
    z += 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    d = doy - (153 * mp + 2) // 5 + 1
    m = mp + 3 if mp < 10 else mp - 9
    y = yoe + era * 400 + (1 if m <= 2 else 0)
    return y, m, d


def year_start_ms(year: int) -> int:
    return days_from_civil(year, 1, 1) * MS_PER_DAY


def year_of(timestamp_ms: int) -> int:
    return civil_from_days(timestamp_ms // MS_PER_DAY)[0]


def year_length_ms(year: int, model: YearModel = YearModel.SIMPLE) -> int:
    if model is YearModel.SIDEREAL:
        return SIDEREAL_YEAR_MS
    return (366 if is_leap_year(year) else 365) * MS_PER_DAY


def _leap_years_before(year: int) -> int:
    """Count leap years in ``[0, year)``."""
    if year <= 0:
        return 0
    last = year - 1
    return last // 4 - last // 100 + last // 400 + 1


def sidereal_drift_ms(year: int) -> int:
    """Cumulative Gregorian-minus-sidereal length of the years ``[0, year)``.

    Negative for positive years: the Gregorian calendar runs short of the
    sidereal year by roughly 20 minutes a year.
    """
    if year <= 0:
        return 0
    gregorian = (year * 365 + _leap_years_before(year)) * MS_PER_DAY
    return gregorian - year * SIDEREAL_YEAR_MS


def to_timestamp(value: datetime | date) -> int:
    """Millisecond timestamp of a date or datetime.

    Aware datetimes are converted to UTC; naive ones are read as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        days = days_from_civil(value.year, value.month, value.day)
        return (
            days * MS_PER_DAY
            + value.hour * MS_PER_HOUR
            + value.minute * 60 * MS_PER_SECOND
            + value.second * MS_PER_SECOND
            + value.microsecond // 1000
        )
    return days_from_civil(value.year, value.month, value.day) * MS_PER_DAY


def from_timestamp(timestamp_ms: int) -> datetime:
    """Aware UTC datetime for a millisecond timestamp."""
    days, remainder = divmod(timestamp_ms, MS_PER_DAY)
    y, m, d = civil_from_days(days)
    if not MINYEAR <= y <= MAXYEAR:
        raise DateOutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"year {y} of timestamp {timestamp_ms} is outside {MINYEAR}..{MAXYEAR}",
        )
    return datetime(y, m, d, tzinfo=timezone.utc) + timedelta(milliseconds=remainder)
