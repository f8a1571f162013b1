"""Sidereal time at the Greenwich meridian."""

from __future__ import annotations

from .mathutil import cos_d, normalize_angle_360
from .nutation import nutation_obliquity
from .timebase import J2000, julian_century

__all__ = ["mean_sidereal_time", "apparent_sidereal_time"]


def mean_sidereal_time(jd: float) -> float:
    """Greenwich mean sidereal time in degrees, ``[0, 360)``, for any instant UT."""

    t = julian_century(jd)
    return normalize_angle_360(
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )


def apparent_sidereal_time(jd: float) -> float:
    """Greenwich apparent sidereal time in degrees.

    Adds the equation of the equinoxes, ``delta_psi * cos(epsilon)``; dividing
    by 15 turns arcseconds into seconds of time and by 240 seconds of time into
    degrees.
    """

    nutation = nutation_obliquity(julian_century(jd))
    correction = nutation.delta_psi / 15.0 * cos_d(nutation.true_obliquity) / 240.0
    return mean_sidereal_time(jd) + correction
