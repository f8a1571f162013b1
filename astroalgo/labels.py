"""Display labels and standard month lengths.

Plain lookups kept apart from the numerical code; replace the tuples to
localize.
"""

from __future__ import annotations

from typing import Optional, Tuple

__all__ = [
    "DAY_LABELS",
    "MONTH_LABELS",
    "SEASON_LABELS",
    "PHASE_LABELS",
    "MONTH_DAYS",
    "day_of_week_name",
    "month_name",
    "days_in_month",
    "season_name",
    "phase_name",
    "leap_year",
]

MONTH_LABELS: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_LABELS: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

SEASON_LABELS: Tuple[str, ...] = (
    "Vernal Equinox",
    "Summer Solstice",
    "Autumnal Equinox",
    "Winter Solstice",
)

PHASE_LABELS: Tuple[str, ...] = (
    "New Moon",
    "First Quarter Moon",
    "Full Moon",
    "Last Quarter Moon",
)

# February is listed with 28 days; see leap_year().
MONTH_DAYS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _lookup(labels: Tuple[str, ...], index: int) -> Optional[str]:
    if 0 <= index < len(labels):
        return labels[index]
    return None


def day_of_week_name(index: int) -> Optional[str]:
    """Weekday name for *index* (0 = Sunday), or ``None`` when out of range."""

    return _lookup(DAY_LABELS, index)


def month_name(index: int) -> Optional[str]:
    """Month name for zero-based *index*, or ``None`` when out of range."""

    return _lookup(MONTH_LABELS, index)


def season_name(index: int) -> Optional[str]:
    return _lookup(SEASON_LABELS, index)


def phase_name(index: int) -> Optional[str]:
    return _lookup(PHASE_LABELS, index)


def days_in_month(index: int) -> int:
    """Standard day count for zero-based month *index*; 0 when out of range."""

    if 0 <= index < len(MONTH_DAYS):
        return MONTH_DAYS[index]
    return 0


def leap_year(year: int) -> int:
    """Return the number of days in February of *year*.

    Non-negative years follow the Gregorian rule; negative (proleptic) years
    use the every-fourth-year rule.
    """

    if year >= 0:
        return 29 if (year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)) else 28
    return 29 if year % 4 == 0 else 28
