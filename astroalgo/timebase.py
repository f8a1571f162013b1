"""Julian Day and calendar conversions.

Julian Days count days (and fractions) from noon of -4712 January 1; the
Julian calendar is used before 1582 October 15 and the Gregorian calendar
from that date on.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Tuple

from .errors import InvalidDate, UnsupportedDomain
from .labels import MONTH_DAYS
from .mathutil import fraction_to_time

__all__ = [
    "CalendarDate",
    "J2000",
    "GREGORIAN_START_JD",
    "julian_century",
    "midnight_floor",
    "day_of_week",
    "zeller_day_of_week",
    "first_weekday_of_year",
    "to_julian_day",
    "to_calendar_date",
    "to_datetime",
    "from_datetime",
]

LOGGER = logging.getLogger(__name__)

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
SECONDS_PER_DAY = 86400.0

# 1582 October 15, 0h: first day of the Gregorian calendar.
GREGORIAN_START_JD = 2299160.5
# Day numbers from this value on are decomposed with the Gregorian correction.
_GREGORIAN_DAY_NUMBER = 2299161


@dataclass(frozen=True)
class CalendarDate:
    """A calendar date whose day carries the time of day as a fraction."""

    month: int
    day: float
    year: int

    @property
    def day_of_month(self) -> int:
        return int(math.floor(self.day))

    @property
    def time_of_day(self) -> Tuple[int, int, float]:
        """``(hour, minute, second)`` encoded in the fractional day."""

        return fraction_to_time(self.day)


def julian_century(jd: float) -> float:
    """Julian centuries elapsed since J2000.0 (JDE 2451545.0)."""

    return (jd - J2000) / DAYS_PER_CENTURY


def midnight_floor(jd: float) -> float:
    """Julian Day of 0h UT on the civil day containing *jd*."""

    return math.floor(jd - 0.5) + 0.5


def day_of_week(jd: float) -> int:
    """Weekday of *jd*: 0 = Sunday through 6 = Saturday."""

    return int(midnight_floor(jd) + 1.5) % 7


def zeller_day_of_week(day: int, month: int, year: int) -> int:
    """Weekday index (0 = Sunday) of a Gregorian calendar date.

    Zeller's congruence only holds inside the Gregorian calendar; earlier
    dates raise :class:`InvalidDate`. Use :func:`day_of_week` with a Julian
    Day for any other date.
    """

    if (year, month, day) < (1582, 10, 15):
        raise InvalidDate(f"Zeller's congruence requires a Gregorian date, got {year}-{month}-{day}")
    if month > 2:
        month -= 2
    else:
        month += 10
        year -= 1
    century, year_of_century = divmod(year, 100)
    index = (
        (13 * month - 1) // 5
        + day
        + year_of_century
        + year_of_century // 4
        + century // 4
        - 2 * century
        + 77
    )
    return index % 7


def first_weekday_of_year(year: int) -> int:
    """Weekday index (0 = Sunday) of January 1 of Gregorian *year*."""

    previous = year - 1
    return (year + previous // 4 - previous // 100 + previous // 400) % 7


def _february_days(year: int) -> int:
    if year < 1582:
        return 29 if year % 4 == 0 else 28
    return 29 if (year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)) else 28


def _reject(month: float, day: float, year: float, reason: str) -> InvalidDate:
    LOGGER.debug(
        json.dumps(
            {"event": "invalid_date", "month": month, "day": day, "year": year, "reason": reason}
        )
    )
    return InvalidDate(f"Invalid calendar date {year}-{month}-{day}: {reason}")


def _gregorian_correction(month: int, day: float, year: int) -> float:
    """Century correction B, or raise for dates in the 1582 October gap."""

    if (year, month) < (1582, 10) or ((year, month) == (1582, 10) and day < 5):
        return 0.0
    if (year, month) == (1582, 10) and day < 15:
        raise _reject(month, day, year, "falls in the Gregorian reform gap 1582-10-05..14")
    shifted_year = year - 1 if month <= 2 else year
    century = math.floor(shifted_year / 100)
    return 2 - century + math.floor(century / 4)


def to_julian_day(month: int, day: float, year: int) -> float:
    """Convert a calendar date to a Julian Day.

    Parameters
    ----------
    month:
        Month number, 1-12.
    day:
        Day of month; the fractional part is the time of day (``4.75`` is 18h).
    year:
        Astronomical year number (year 0 is 1 BC, negative years allowed).

    Returns
    -------
    float
        The Julian Day.

    Raises
    ------
    InvalidDate
        If the month or day is out of range, or the date falls on
        1582 October 5-14, which the calendar reform skipped.
    """

    if month != int(month) or not 1 <= month <= 12:
        raise _reject(month, day, year, "month must be an integer between 1 and 12")
    if year != int(year):
        raise _reject(month, day, year, "year must be an integer")
    month = int(month)
    year = int(year)
    length = _february_days(year) if month == 2 else MONTH_DAYS[month - 1]
    if not (math.isfinite(day) and 1.0 <= day < length + 1):
        raise _reject(month, day, year, f"day must lie in [1, {length + 1})")

    correction = _gregorian_correction(month, day, year)

    # January and February count as months 13 and 14 of the previous year.
    if month <= 2:
        year -= 1
        month += 12

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + correction
        - 1524.5
    )


def to_calendar_date(jd: float) -> CalendarDate:
    """Convert a non-negative Julian Day to a calendar date.

    Negative Julian Days raise :class:`UnsupportedDomain`; negative years are
    fine as long as the Julian Day itself is not negative.
    """

    if not math.isfinite(jd) or jd < 0:
        raise UnsupportedDomain(f"Calendar conversion requires a Julian Day >= 0, got {jd!r}")

    shifted = jd + 0.5
    whole = math.floor(shifted)
    fraction = shifted - whole

    if whole >= _GREGORIAN_DAY_NUMBER:
        alpha = math.floor((whole - 1867216.25) / 36524.25)
        a = whole + 1 + alpha - math.floor(alpha / 4)
    else:
        a = whole

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + fraction
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CalendarDate(month=int(month), day=float(day), year=int(year))


def to_datetime(jd: float) -> datetime:
    """Return the timezone-aware UTC :class:`~datetime.datetime` for *jd*.

    Only Gregorian-calendar instants within :mod:`datetime`'s year range are
    representable.
    """

    if jd < GREGORIAN_START_JD:
        raise UnsupportedDomain(f"Julian Day {jd!r} precedes the Gregorian calendar")
    date = to_calendar_date(jd)
    if not 1 <= date.year <= 9999:
        raise UnsupportedDomain(f"Year {date.year} is outside the datetime range")
    midnight = datetime(date.year, date.month, date.day_of_month, tzinfo=UTC)
    return midnight + timedelta(days=date.day - date.day_of_month)


def from_datetime(dt: datetime) -> float:
    """Julian Day of a timezone-aware :class:`~datetime.datetime`."""

    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(UTC)
    seconds = (
        dt_utc.hour * 3600.0
        + dt_utc.minute * 60.0
        + dt_utc.second
        + dt_utc.microsecond / 1_000_000
    )
    return to_julian_day(dt_utc.month, dt_utc.day + seconds / SECONDS_PER_DAY, dt_utc.year)
