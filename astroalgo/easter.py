"""Astronomical Easter: the Sunday after the first full moon on or after the March equinox."""

from __future__ import annotations

import json
import logging

from .errors import UnsupportedDomain
from .moonphase import PhaseKind, lunar_phase
from .seasons import SeasonKind, equinox_or_solstice
from .timebase import day_of_week, midnight_floor, to_calendar_date

__all__ = ["EASTER_SEARCH_LIMIT", "FULL_MOON_SEARCH_STEP", "astronomical_easter"]

LOGGER = logging.getLogger(__name__)

# Fractional-year step of the full-moon search, a little under half a lunation.
FULL_MOON_SEARCH_STEP = 0.04
EASTER_SEARCH_LIMIT = 100


def astronomical_easter(year: int) -> float:
    """Julian Day (0h) of astronomical Easter in *year*.

    Dates come from the true equinox and full moon rather than the
    ecclesiastical tables, so they can differ from the church calendar.
    Ash Wednesday falls 46 days earlier.

    Raises
    ------
    UnsupportedDomain
        If no full moon after the equinox is found within
        :data:`EASTER_SEARCH_LIMIT` steps.
    """

    equinox = midnight_floor(equinox_or_solstice(year, SeasonKind.march_equinox))
    fractional_year = float(to_calendar_date(equinox).year)

    moon = midnight_floor(lunar_phase(fractional_year, PhaseKind.full_moon))
    steps = 0
    while moon < equinox:
        steps += 1
        if steps > EASTER_SEARCH_LIMIT:
            LOGGER.warning(json.dumps({"event": "easter_search_exhausted", "year": year}))
            raise UnsupportedDomain(f"No full moon found after the {year} March equinox")
        fractional_year += FULL_MOON_SEARCH_STEP
        moon = midnight_floor(lunar_phase(fractional_year, PhaseKind.full_moon))

    moon += 1
    while day_of_week(moon) != 0:
        moon += 1
    return moon
