"""Instants of the equinoxes and solstices."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from .errors import InvalidSeasonKind
from .mathutil import cos_d
from .series import PeriodicSeries
from .timebase import julian_century

__all__ = [
    "SeasonKind",
    "SeasonEvent",
    "SEASON_PERIODIC_TERMS",
    "coerce_season_kind",
    "mean_equinox_or_solstice",
    "equinox_or_solstice",
    "season_event",
]

LOGGER = logging.getLogger(__name__)


class SeasonKind(str, Enum):
    """The four seasonal instants, in calendar order."""

    march_equinox = "march_equinox"
    june_solstice = "june_solstice"
    september_equinox = "september_equinox"
    december_solstice = "december_solstice"

    @property
    def index(self) -> int:
        return list(SeasonKind).index(self)


@dataclass(frozen=True)
class SeasonEvent:
    jde: float
    kind: SeasonKind


# Coefficients of the mean-instant polynomials in y, for years -1000..+1000
# (y = year / 1000) and +1000..+3000 (y = (year - 2000) / 1000).
_BEFORE_1000: Dict[SeasonKind, Tuple[float, ...]] = {
    SeasonKind.march_equinox: (1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071),
    SeasonKind.june_solstice: (1721233.25401, 365241.72562, -0.05323, 0.00907, 0.00025),
    SeasonKind.september_equinox: (1721325.70455, 365242.49558, -0.11677, -0.00297, 0.00074),
    SeasonKind.december_solstice: (1721414.39987, 365242.88257, -0.00769, -0.00933, -0.00006),
}

_FROM_1000: Dict[SeasonKind, Tuple[float, ...]] = {
    SeasonKind.march_equinox: (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    SeasonKind.june_solstice: (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    SeasonKind.september_equinox: (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    SeasonKind.december_solstice: (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
}

# Amplitude, phase (degrees), rate (degrees per Julian century).
_PERIODIC_ROWS: Tuple[Tuple[float, float, float], ...] = (
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
)

SEASON_PERIODIC_TERMS = PeriodicSeries.from_rows(
    [(row[2],) for row in _PERIODIC_ROWS],
    [row[0] for row in _PERIODIC_ROWS],
    phases=[row[1] for row in _PERIODIC_ROWS],
)


def coerce_season_kind(kind: Union[SeasonKind, str, int]) -> SeasonKind:
    """Resolve a season selector given as enum member, value string or index 0-3."""

    if isinstance(kind, SeasonKind):
        return kind
    if isinstance(kind, int) and not isinstance(kind, bool):
        members = list(SeasonKind)
        if 0 <= kind < len(members):
            return members[kind]
    elif isinstance(kind, str):
        try:
            return SeasonKind(kind)
        except ValueError:
            pass
    LOGGER.debug(json.dumps({"event": "invalid_season_kind", "kind": repr(kind)}))
    raise InvalidSeasonKind(f"Unsupported season selector: {kind!r}")


def mean_equinox_or_solstice(year: float, kind: Union[SeasonKind, str, int]) -> float:
    """Mean instant (JDE) of a seasonal event, before the periodic correction."""

    kind = coerce_season_kind(kind)
    if year >= 1000:
        y = (math.floor(year) - 2000) / 1000.0
        coefficients = _FROM_1000[kind]
    else:
        y = math.floor(year) / 1000.0
        coefficients = _BEFORE_1000[kind]
    return sum(c * y**power for power, c in enumerate(coefficients))


def equinox_or_solstice(year: float, kind: Union[SeasonKind, str, int]) -> float:
    """Julian Ephemeris Day of an equinox or solstice.

    Parameters
    ----------
    year:
        Calendar year; any fractional part is ignored.
    kind:
        Which of the four events to compute.

    Returns
    -------
    float
        The instant as a Julian Ephemeris Day, good to about a minute for
        years 1951-2050.

    Raises
    ------
    InvalidSeasonKind
        If *kind* does not name one of the four seasonal instants.
    """

    jde0 = mean_equinox_or_solstice(year, kind)
    t = julian_century(jde0)
    w = 35999.373 * t - 2.47
    delta_lambda = 1 + 0.0334 * cos_d(w) + 0.0007 * cos_d(2 * w)
    s = SEASON_PERIODIC_TERMS.cosine_sum((t,))
    return jde0 + 0.00001 * s / delta_lambda


def season_event(year: float, kind: Union[SeasonKind, str, int]) -> SeasonEvent:
    kind = coerce_season_kind(kind)
    return SeasonEvent(jde=equinox_or_solstice(year, kind), kind=kind)
