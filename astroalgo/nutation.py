"""Nutation in longitude and obliquity, and the obliquity of the ecliptic.

The nutation series is the 63-term table of the IAU 1980 theory as
tabulated by Meeus (Astronomical Algorithms, ch. 21). Coefficients are in
units of 0.0001 arcsecond.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .series import PeriodicSeries

__all__ = [
    "NUTATION_TERMS",
    "NUTATION_SERIES",
    "NutationObliquity",
    "fundamental_arguments",
    "nutation",
    "mean_obliquity",
    "obliquity",
    "nutation_obliquity",
]

# Multiples of D, M, M', F, Omega, then
# (longitude coefficient, its change per century,
#  obliquity coefficient, its change per century).
NUTATION_TERMS: Tuple[Tuple[float, ...], ...] = (
    (0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9),
    (-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1),
    (0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5),
    (0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5),
    (0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1),
    (0, 0, 1, 0, 0, 712, 0.1, -7, 0),
    (-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6),
    (0, 0, 0, 2, 1, -386, -0.4, 200, 0),
    (0, 0, 1, 2, 2, -301, 0, 129, -0.1),
    (-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3),
    (-2, 0, 1, 0, 0, -158, 0, 0, 0),
    (-2, 0, 0, 2, 1, 129, 0.1, -70, 0),
    (0, 0, -1, 2, 2, 123, 0, -53, 0),
    (2, 0, 0, 0, 0, 63, 0, 0, 0),
    (0, 0, 1, 0, 1, 63, 0.1, -33, 0),
    (2, 0, -1, 2, 2, -59, 0, 26, 0),
    (0, 0, -1, 0, 1, -58, -0.1, 32, 0),
    (0, 0, 1, 2, 1, -51, 0, 27, 0),
    (-2, 0, 2, 0, 0, 48, 0, 0, 0),
    (0, 0, -2, 2, 1, 46, 0, -24, 0),
    (2, 0, 0, 2, 2, -38, 0, 16, 0),
    (0, 0, 2, 2, 2, -31, 0, 13, 0),
    (0, 0, 2, 0, 0, 29, 0, 0, 0),
    (-2, 0, 1, 2, 2, 29, 0, -12, 0),
    (0, 0, 0, 2, 0, 26, 0, 0, 0),
    (-2, 0, 0, 2, 0, -22, 0, 0, 0),
    (0, 0, -1, 2, 1, 21, 0, -10, 0),
    (0, 2, 0, 0, 0, 17, -0.1, 0, 0),
    (2, 0, -1, 0, 1, 16, 0, -8, 0),
    (-2, 2, 0, 2, 2, -16, 0.1, 7, 0),
    (0, 1, 0, 0, 1, -15, 0, 9, 0),
    (-2, 0, 1, 0, 1, -13, 0, 7, 0),
    (0, -1, 0, 0, 1, -12, 0, 6, 0),
    (0, 0, 2, -2, 0, 11, 0, 0, 0),
    (2, 0, -1, 2, 1, -10, 0, 5, 0),
    (2, 0, 1, 2, 2, -8, 0, 3, 0),
    (0, 1, 0, 2, 2, 7, 0, -3, 0),
    (-2, 1, 1, 0, 0, -7, 0, 0, 0),
    (0, -1, 0, 2, 2, -7, 0, 3, 0),
    (2, 0, 0, 2, 1, -7, 0, 3, 0),
    (2, 0, 1, 0, 0, 6, 0, 0, 0),
    (-2, 0, 2, 2, 2, 6, 0, -3, 0),
    (-2, 0, 1, 2, 1, 6, 0, -3, 0),
    (2, 0, -2, 0, 1, -6, 0, 3, 0),
    (2, 0, 0, 0, 1, -6, 0, 3, 0),
    (0, -1, 1, 0, 0, 5, 0, 0, 0),
    (-2, -1, 0, 2, 1, -5, 0, 3, 0),
    (-2, 0, 0, 0, 1, -5, 0, 3, 0),
    (0, 0, 2, 2, 1, -5, 0, 3, 0),
    (-2, 0, 2, 0, 1, 4, 0, 0, 0),
    (-2, 1, 0, 2, 1, 4, 0, 0, 0),
    (0, 0, 1, -2, 0, 4, 0, 0, 0),
    (-1, 0, 1, 0, 0, -4, 0, 0, 0),
    (-2, 1, 0, 0, 0, -4, 0, 0, 0),
    (1, 0, 0, 0, 0, -4, 0, 0, 0),
    (0, 0, 1, 2, 0, 3, 0, 0, 0),
    (0, 0, -2, 2, 2, -3, 0, 0, 0),
    (-1, -1, 1, 0, 0, -3, 0, 0, 0),
    (0, 1, 1, 0, 0, -3, 0, 0, 0),
    (0, -1, 1, 2, 2, -3, 0, 0, 0),
    (2, -1, -1, 2, 2, -3, 0, 0, 0),
    (0, 0, 3, 2, 2, -3, 0, 0, 0),
    (2, -1, 0, 2, 2, -3, 0, 0, 0),
)

NUTATION_SERIES: Tuple[PeriodicSeries, PeriodicSeries] = (
    PeriodicSeries.from_rows(
        [row[:5] for row in NUTATION_TERMS],
        [row[5] for row in NUTATION_TERMS],
        rates=[row[6] for row in NUTATION_TERMS],
    ),
    PeriodicSeries.from_rows(
        [row[:5] for row in NUTATION_TERMS],
        [row[7] for row in NUTATION_TERMS],
        rates=[row[8] for row in NUTATION_TERMS],
    ),
)

# Table units are 0".0001.
_TABLE_SCALE = 0.0001


@dataclass(frozen=True)
class NutationObliquity:
    """Nutation (arcseconds) and obliquity of the ecliptic (degrees) at one instant."""

    delta_psi: float
    delta_epsilon: float
    mean_obliquity: float
    true_obliquity: float


def fundamental_arguments(t: float) -> Tuple[float, float, float, float, float]:
    """Return ``(D, M, M', F, Omega)`` in degrees for Julian century *t*.

    D is the mean elongation of the Moon from the Sun, M the Sun's mean
    anomaly, M' the Moon's mean anomaly, F the Moon's argument of latitude and
    Omega the longitude of the ascending node of the Moon's mean orbit.
    """

    t2 = t * t
    t3 = t2 * t
    elongation = 297.85036 + 445267.111480 * t - 0.0019142 * t2 + t3 / 189474.0
    sun_anomaly = 357.52772 + 35999.050340 * t - 0.0001603 * t2 - t3 / 300000.0
    moon_anomaly = 134.96298 + 477198.867398 * t + 0.0086972 * t2 + t3 / 56250.0
    latitude = 93.27191 + 483202.017538 * t - 0.0036825 * t2 + t3 / 327270.0
    node = 125.04452 - 1934.136261 * t + 0.0020708 * t2 + t3 / 450000.0
    return elongation, sun_anomaly, moon_anomaly, latitude, node


def nutation(t: float) -> Tuple[float, float]:
    """Nutation in longitude and in obliquity, both in arcseconds.

    Parameters
    ----------
    t:
        Julian centuries from J2000.0 (see :func:`~astroalgo.timebase.julian_century`).

    Returns
    -------
    tuple[float, float]
        ``(delta_psi, delta_epsilon)``.
    """

    arguments = fundamental_arguments(t)
    longitude_series, obliquity_series = NUTATION_SERIES
    delta_psi = longitude_series.sine_sum(arguments, t) * _TABLE_SCALE
    delta_epsilon = obliquity_series.cosine_sum(arguments, t) * _TABLE_SCALE
    return delta_psi, delta_epsilon


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic in degrees (IAU 1980 polynomial)."""

    seconds = 84381.448 - 46.8150 * t - 0.00059 * t * t + 0.001813 * t * t * t
    return seconds / 3600.0


def obliquity(t: float) -> Tuple[float, float]:
    """Return ``(true_obliquity, mean_obliquity)`` in degrees."""

    mean = mean_obliquity(t)
    _, delta_epsilon = nutation(t)
    return mean + delta_epsilon / 3600.0, mean


def nutation_obliquity(t: float) -> NutationObliquity:
    """Nutation and obliquity together, evaluating the series once."""

    delta_psi, delta_epsilon = nutation(t)
    mean = mean_obliquity(t)
    return NutationObliquity(
        delta_psi=delta_psi,
        delta_epsilon=delta_epsilon,
        mean_obliquity=mean,
        true_obliquity=mean + delta_epsilon / 3600.0,
    )
