"""Equatorial and horizontal coordinates and the transform between them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .mathutil import RAD_TO_DEG, cos_d, normalize_angle_360, sin_d, tan_d
from .sidereal import apparent_sidereal_time

__all__ = ["EquatorialCoordinate", "HorizontalCoordinate", "azimuth_altitude"]


@dataclass(frozen=True)
class EquatorialCoordinate:
    """Apparent right ascension and declination, both in degrees."""

    right_ascension: float
    declination: float


@dataclass(frozen=True)
class HorizontalCoordinate:
    """Azimuth (degrees westward from south) and altitude (degrees)."""

    azimuth: float
    altitude: float


def azimuth_altitude(
    jd: float,
    right_ascension: float,
    declination: float,
    longitude: float,
    latitude: float,
) -> HorizontalCoordinate:
    """Horizontal coordinates of a body for an observer.

    Parameters
    ----------
    jd:
        Julian Day (UT) of the observation.
    right_ascension, declination:
        Apparent equatorial coordinates of the body in degrees.
    longitude:
        Observer longitude in degrees, positive WEST of Greenwich.
    latitude:
        Observer latitude in degrees, positive north.

    Returns
    -------
    HorizontalCoordinate
        Azimuth in ``(-180, 180]`` measured westward from south, and altitude.
    """

    hour_angle = normalize_angle_360(apparent_sidereal_time(jd) - longitude - right_ascension)
    azimuth = math.atan2(
        sin_d(hour_angle),
        cos_d(hour_angle) * sin_d(latitude) - tan_d(declination) * cos_d(latitude),
    )
    altitude = math.asin(
        sin_d(latitude) * sin_d(declination)
        + cos_d(latitude) * cos_d(declination) * cos_d(hour_angle)
    )
    return HorizontalCoordinate(azimuth=azimuth * RAD_TO_DEG, altitude=altitude * RAD_TO_DEG)
