"""Degree-argument trigonometry and angle/day-fraction normalization."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "Angle",
    "sin_d",
    "cos_d",
    "tan_d",
    "normalize_angle_360",
    "normalize_angle_180",
    "normalize_fraction01",
    "day_fraction",
    "fraction_to_time",
    "angle_to_time",
]

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Upper bound on unit steps taken by normalize_fraction01.
FRACTION_STEP_LIMIT = 10_000


def sin_d(x: float) -> float:
    return math.sin(x * DEG_TO_RAD)


def cos_d(x: float) -> float:
    return math.cos(x * DEG_TO_RAD)


def tan_d(x: float) -> float:
    return math.tan(x * DEG_TO_RAD)


def normalize_angle_360(theta: float) -> float:
    """Map *theta* (degrees) onto ``[0, 360)`` using a floored modulo.

    Negative angles wrap to the top of the range, so ``-30`` becomes ``330``.
    """

    value = theta % 360.0
    # -1e-17 % 360.0 rounds to 360.0 in binary floating point.
    if value >= 360.0:
        value -= 360.0
    return value


def normalize_angle_180(theta: float) -> float:
    """Map *theta* (degrees) onto ``(-180, 180]``.

    Used for hour angles, where the sign tells east from west of the meridian.
    """

    value = normalize_angle_360(theta)
    if value > 180.0:
        value -= 360.0
    return value


def normalize_fraction01(x: float) -> float:
    """Step *x* by whole units until it lies in ``[0, 1]``.

    The loop is linear in ``|x|``; values further than
    :data:`FRACTION_STEP_LIMIT` from the unit interval raise ``ValueError``.
    """

    if not math.isfinite(x) or abs(x) > FRACTION_STEP_LIMIT:
        raise ValueError(f"Day fraction out of range: {x!r}")
    while x < 0.0 or x > 1.0:
        if x > 1.0:
            x -= 1.0
        else:
            x += 1.0
    return x


def day_fraction(x: float) -> float:
    """Fold *x* onto ``[0, 1)`` with a floored modulo."""

    value = x % 1.0
    # -1e-17 % 1.0 rounds to 1.0.
    if value >= 1.0:
        value -= 1.0
    return value


def fraction_to_time(x: float) -> Tuple[int, int, float]:
    """Return ``(hour, minute, second)`` for the fractional part of day *x*."""

    fraction = x - math.floor(x)
    hours = fraction * 24.0
    hour = int(hours)
    minutes = (hours - hour) * 60.0
    minute = int(minutes)
    second = (minutes - minute) * 60.0
    return hour, minute, second


def angle_to_time(x: float) -> Tuple[int, int, float]:
    """Express an angle in degrees as ``(hours, minutes, seconds)`` of time."""

    hours = x / 15.0
    whole = int(hours)
    minutes = (hours - math.floor(hours)) * 60.0
    minute = int(minutes)
    second = (minutes - math.floor(minutes)) * 60.0
    return whole, minute, second


@dataclass(frozen=True)
class Angle:
    """Sexagesimal angle: whole degrees, arcminutes and arcseconds.

    The sign lives on ``degree``; ``negative`` carries it for angles smaller
    than one degree in magnitude.
    """

    degree: int
    arcminute: int
    arcsecond: float
    negative: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.arcminute <= 59:
            raise ValueError("arcminute must be an integer between 0 and 59 inclusive")
        if not 0.0 <= self.arcsecond < 60.0:
            raise ValueError("arcsecond must lie in [0, 60)")

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        degree = int(value)
        fractional_minutes = abs(value - degree) * 60.0
        arcminute = int(fractional_minutes)
        arcsecond = (fractional_minutes - arcminute) * 60.0
        return cls(degree, arcminute, arcsecond, negative=value < 0)

    @property
    def degrees(self) -> float:
        magnitude = abs(self.degree) + (self.arcminute + self.arcsecond / 60.0) / 60.0
        return -magnitude if (self.negative or self.degree < 0) else magnitude

    @property
    def hour(self) -> int:
        return int(self.degree / 15.0)
