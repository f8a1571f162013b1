"""Times of rising, transit and setting of a body (Meeus, ch. 15)."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .config import resolve_settings
from .coordinates import EquatorialCoordinate
from .errors import UnsupportedDomain
from .mathutil import (
    RAD_TO_DEG,
    cos_d,
    day_fraction,
    normalize_angle_180,
    normalize_angle_360,
    sin_d,
)
from .sidereal import apparent_sidereal_time
from .solar import solar_coordinates
from .timebase import SECONDS_PER_DAY

__all__ = [
    "SUN_ALTITUDE",
    "STAR_ALTITUDE",
    "MOON_ALTITUDE",
    "EventStatus",
    "RiseTransitSet",
    "interpolate",
    "legacy_guard_fails",
    "rise_transit_set",
    "sun_rise_transit_set",
]

LOGGER = logging.getLogger(__name__)

# Standard altitudes h0 in degrees.
SUN_ALTITUDE = -0.8333
STAR_ALTITUDE = -0.5667
MOON_ALTITUDE = 0.125  # mean value only

# Sidereal degrees per solar day.
_SIDEREAL_RATE = 360.985647


class EventStatus(str, Enum):
    ok = "ok"
    always_above = "always_above"
    always_below = "always_below"
    no_event = "no_event"


@dataclass(frozen=True)
class RiseTransitSet:
    """Fractional-day offsets from 0h UT of the requested day.

    When ``status`` is not ``ok`` the body does not cross the standard
    altitude that day and all three offsets are ``None``.
    """

    transit: Optional[float]
    rise: Optional[float]
    set: Optional[float]
    status: EventStatus = EventStatus.ok

    @property
    def ok(self) -> bool:
        return self.status is EventStatus.ok

    def julian_days(self, jd: float) -> Tuple[Optional[float], Optional[float], Optional[float]]:
        """``(transit, rise, set)`` as Julian Days, given the day's 0h UT *jd*."""

        return tuple(None if m is None else jd + m for m in (self.transit, self.rise, self.set))


def _no_event(status: EventStatus) -> RiseTransitSet:
    return RiseTransitSet(transit=None, rise=None, set=None, status=status)


def interpolate(values: Sequence[float], n: float) -> float:
    """Quadratic interpolation of three equally spaced tabular values.

    *n* is the interpolating factor measured from the middle value.
    """

    y1, y2, y3 = values
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + n / 2.0 * (a + b + n * c)


def _unwrapped(right_ascensions: Sequence[float]) -> List[float]:
    """Right ascensions made continuous across the 0/360 boundary."""

    unwrapped = [right_ascensions[0]]
    for value in right_ascensions[1:]:
        previous = unwrapped[-1]
        while value - previous > 180.0:
            value -= 360.0
        while value - previous < -180.0:
            value += 360.0
        unwrapped.append(value)
    return unwrapped


def legacy_guard_fails(latitude: float, declination: float) -> bool:
    """The historical circumpolar test, evaluated with its original grouping.

    It reads ``|-sin(phi) * sin(delta) / cos(phi) * cos(delta)| > 1`` left to
    right, so it ignores ``h0`` and is not the bound on ``cos(H0)``. Kept for
    callers that need results identical to older releases.
    """

    return abs(-sin_d(latitude) * sin_d(declination) / cos_d(latitude) * cos_d(declination)) > 1


def _hour_angle_cosine(h0: float, latitude: float, declination: float) -> float:
    numerator = sin_d(h0) - sin_d(latitude) * sin_d(declination)
    denominator = cos_d(latitude) * cos_d(declination)
    if denominator == 0.0:
        return math.inf if numerator > 0 else -math.inf
    return numerator / denominator


def rise_transit_set(
    longitude: float,
    latitude: float,
    h0: float,
    jd: float,
    samples: Sequence[EquatorialCoordinate],
    *,
    delta_t: float = 0.0,
    iterations: Optional[int] = None,
    legacy_guard: Optional[bool] = None,
) -> RiseTransitSet:
    """Compute transit, rising and setting of a body on one day.

    Parameters
    ----------
    longitude:
        Observer longitude in degrees, positive WEST of Greenwich.
    latitude:
        Observer latitude in degrees, positive north.
    h0:
        Standard altitude in degrees (:data:`SUN_ALTITUDE`,
        :data:`STAR_ALTITUDE`, :data:`MOON_ALTITUDE`).
    jd:
        Julian Day of 0h UT on the day of interest.
    samples:
        Apparent equatorial coordinates at 0h Dynamical Time on the days
        ``jd - 1``, ``jd`` and ``jd + 1``.
    delta_t:
        TD - UT in seconds.
    iterations:
        Number of correction passes; defaults to ``ASTROALGO_RTS_ITERATIONS``.
    legacy_guard:
        Also apply :func:`legacy_guard_fails`; defaults to
        ``ASTROALGO_RTS_LEGACY_GUARD``.

    Returns
    -------
    RiseTransitSet
        Offsets in ``[0, 1)`` of a day after *jd*, or a non-``ok`` status
        when the body stays above or below ``h0`` all day.
    """

    if len(samples) != 3:
        raise UnsupportedDomain(f"Expected three daily coordinate samples, got {len(samples)}")
    if iterations is None or legacy_guard is None:
        settings = resolve_settings()
        iterations = settings.rts_iterations if iterations is None else iterations
        legacy_guard = settings.rts_legacy_guard if legacy_guard is None else legacy_guard
    if iterations < 1:
        raise UnsupportedDomain(f"iterations must be at least 1, got {iterations}")

    right_ascensions = _unwrapped([sample.right_ascension for sample in samples])
    declinations = [sample.declination for sample in samples]
    alpha, delta = right_ascensions[1], declinations[1]

    if legacy_guard and legacy_guard_fails(latitude, delta):
        LOGGER.debug(json.dumps({"event": "rts_legacy_guard", "jd": jd, "latitude": latitude}))
        return _no_event(EventStatus.no_event)

    cos_h0 = _hour_angle_cosine(h0, latitude, delta)
    if cos_h0 < -1.0:
        LOGGER.debug(json.dumps({"event": "rts_always_above", "jd": jd, "latitude": latitude}))
        return _no_event(EventStatus.always_above)
    if cos_h0 > 1.0:
        LOGGER.debug(json.dumps({"event": "rts_always_below", "jd": jd, "latitude": latitude}))
        return _no_event(EventStatus.always_below)
    hour_angle0 = math.acos(cos_h0) * RAD_TO_DEG

    theta0 = apparent_sidereal_time(jd)
    transit = day_fraction((alpha + longitude - theta0) / 360.0)
    m = [
        transit,
        day_fraction(transit - hour_angle0 / 360.0),
        day_fraction(transit + hour_angle0 / 360.0),
    ]

    for _ in range(iterations):
        corrected = []
        for index, fraction in enumerate(m):
            theta = normalize_angle_360(theta0 + _SIDEREAL_RATE * fraction)
            n = fraction + delta_t / SECONDS_PER_DAY
            ra = interpolate(right_ascensions, n)
            dec = interpolate(declinations, n)
            hour_angle = normalize_angle_180(theta - longitude - ra)
            if index == 0:
                corrected.append(fraction - hour_angle / 360.0)
                continue
            altitude = math.asin(
                sin_d(latitude) * sin_d(dec) + cos_d(latitude) * cos_d(dec) * cos_d(hour_angle)
            ) * RAD_TO_DEG
            denominator = 360.0 * cos_d(dec) * cos_d(latitude) * sin_d(hour_angle)
            if denominator == 0.0:
                corrected.append(fraction)
            else:
                corrected.append(fraction + (altitude - h0) / denominator)
        m = corrected

    return RiseTransitSet(
        transit=day_fraction(m[0]), rise=day_fraction(m[1]), set=day_fraction(m[2])
    )


def sun_rise_transit_set(
    longitude: float,
    latitude: float,
    jd: float,
    *,
    delta_t: float = 0.0,
    h0: float = SUN_ALTITUDE,
    iterations: Optional[int] = None,
    legacy_guard: Optional[bool] = None,
) -> RiseTransitSet:
    """Sunrise, solar transit and sunset, sampling the Sun with :func:`solar_coordinates`."""

    offset = delta_t / SECONDS_PER_DAY
    samples = [solar_coordinates(jd + day + offset).equatorial for day in (-1, 0, 1)]
    return rise_transit_set(
        longitude,
        latitude,
        h0,
        jd,
        samples,
        delta_t=delta_t,
        iterations=iterations,
        legacy_guard=legacy_guard,
    )
