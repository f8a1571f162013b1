"""Apparent geocentric position of the Sun (low-accuracy theory)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .coordinates import EquatorialCoordinate
from .mathutil import RAD_TO_DEG, cos_d, normalize_angle_360, sin_d
from .nutation import mean_obliquity
from .timebase import julian_century

__all__ = ["SolarPosition", "solar_coordinates"]


@dataclass(frozen=True)
class SolarPosition(EquatorialCoordinate):
    """Equatorial position of the Sun with the intermediate quantities kept."""

    apparent_longitude: float
    distance_au: float

    @property
    def equatorial(self) -> EquatorialCoordinate:
        return EquatorialCoordinate(self.right_ascension, self.declination)


def solar_coordinates(jd: float) -> SolarPosition:
    """Apparent right ascension and declination of the Sun at *jd*.

    Parameters
    ----------
    jd:
        Julian Ephemeris Day.

    Returns
    -------
    SolarPosition
        Right ascension in ``[0, 360)``, declination, apparent longitude
        (degrees) and the Sun-Earth distance in astronomical units.
    """

    t = julian_century(jd)

    mean_longitude = 280.46645 + 36000.76983 * t + 0.0003032 * t * t
    mean_anomaly = 357.52910 + 35999.05030 * t - 0.0001559 * t * t - 0.00000048 * t * t * t
    eccentricity = 0.016708617 - 0.000042037 * t - 0.0000001236 * t * t

    center = (
        (1.914600 - 0.004817 * t - 0.000014 * t * t) * sin_d(mean_anomaly)
        + (0.019993 - 0.000101 * t) * sin_d(2 * mean_anomaly)
        + 0.000290 * sin_d(3 * mean_anomaly)
    )
    true_longitude = mean_longitude + center
    true_anomaly = mean_anomaly + center
    distance = (1.000001018 * (1 - eccentricity * eccentricity)) / (
        1 + eccentricity * cos_d(true_anomaly)
    )

    node = 125.04 - 1934.136 * t
    apparent_longitude = normalize_angle_360(true_longitude - 0.00569 - 0.00478 * sin_d(node))
    epsilon = mean_obliquity(t) + 0.00256 * cos_d(node)

    right_ascension = normalize_angle_360(
        math.atan2(cos_d(epsilon) * sin_d(apparent_longitude), cos_d(apparent_longitude))
        * RAD_TO_DEG
    )
    declination = math.asin(sin_d(epsilon) * sin_d(apparent_longitude)) * RAD_TO_DEG
    return SolarPosition(
        right_ascension=right_ascension,
        declination=declination,
        apparent_longitude=apparent_longitude,
        distance_au=distance,
    )
