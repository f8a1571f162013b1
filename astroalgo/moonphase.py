"""Instants of the principal lunar phases (Meeus, ch. 47)."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from .errors import InvalidPhaseKind
from .mathutil import cos_d
from .series import PeriodicSeries

__all__ = [
    "PhaseKind",
    "PhaseEvent",
    "SYNODIC_MONTH",
    "PLANETARY_TERMS",
    "PHASE_CORRECTIONS",
    "coerce_phase_kind",
    "lunation_number",
    "mean_phase",
    "lunar_phase",
    "phase_event",
]

LOGGER = logging.getLogger(__name__)

SYNODIC_MONTH = 29.530588853


class PhaseKind(str, Enum):
    """The four principal phases, in the order they occur."""

    new_moon = "new_moon"
    first_quarter = "first_quarter"
    full_moon = "full_moon"
    last_quarter = "last_quarter"

    @property
    def index(self) -> int:
        return list(PhaseKind).index(self)

    @property
    def offset(self) -> float:
        """Fraction of a lunation after new moon."""

        return self.index * 0.25


@dataclass(frozen=True)
class PhaseEvent:
    jde: float
    kind: PhaseKind


# Phase (degrees), rate per lunation (degrees), amplitude (1e-6 day). The
# first argument also carries -0.009173 T^2, hence the second multiplier.
_PLANETARY_ROWS: Tuple[Tuple[float, float, float, float], ...] = (
    (299.77, 0.107408, -0.009173, 325),
    (251.88, 0.016321, 0, 165),
    (251.83, 26.651886, 0, 164),
    (349.42, 36.412478, 0, 126),
    (84.66, 18.206239, 0, 110),
    (141.74, 53.303771, 0, 62),
    (207.14, 2.453732, 0, 60),
    (154.84, 7.306860, 0, 56),
    (34.52, 27.261239, 0, 47),
    (207.19, 0.121824, 0, 42),
    (291.34, 1.844379, 0, 40),
    (161.72, 24.198154, 0, 37),
    (239.56, 25.513099, 0, 35),
    (331.55, 3.592518, 0, 23),
)

PLANETARY_TERMS = PeriodicSeries.from_rows(
    [row[1:3] for row in _PLANETARY_ROWS],
    [row[3] * 0.000001 for row in _PLANETARY_ROWS],
    phases=[row[0] for row in _PLANETARY_ROWS],
)

# Multiples of M, M', F, Omega; amplitude (days); power of E.
_NEW_MOON_ROWS: Tuple[Tuple[float, ...], ...] = (
    (0, 1, 0, 0, -0.40720, 0),
    (1, 0, 0, 0, 0.17241, 1),
    (0, 2, 0, 0, 0.01608, 0),
    (0, 0, 2, 0, 0.01039, 0),
    (-1, 1, 0, 0, 0.00739, 1),
    (1, 1, 0, 0, -0.00514, 1),
    (2, 0, 0, 0, 0.00208, 2),
    (0, 1, -2, 0, -0.00111, 0),
    (0, 1, 2, 0, -0.00057, 0),
    (1, 2, 0, 0, 0.00056, 1),
    (0, 3, 0, 0, -0.00042, 0),
    (1, 0, 2, 0, 0.00042, 1),
    (1, 0, -2, 0, 0.00038, 1),
    (-1, 2, 0, 0, -0.00024, 1),
    (0, 0, 0, 1, -0.00017, 0),
    (2, 1, 0, 0, -0.00007, 0),
    (0, 2, -2, 0, 0.00004, 0),
    (3, 0, 0, 0, 0.00004, 0),
    (1, 1, -2, 0, 0.00003, 0),
    (0, 2, 2, 0, 0.00003, 0),
    (1, 1, 2, 0, -0.00003, 0),
    (-1, 1, 2, 0, 0.00003, 0),
    (-1, 1, -2, 0, -0.00002, 0),
    (1, 3, 0, 0, -0.00002, 0),
    (0, 4, 0, 0, 0.00002, 0),
)

_FULL_MOON_ROWS: Tuple[Tuple[float, ...], ...] = (
    (0, 1, 0, 0, -0.40614, 0),
    (1, 0, 0, 0, 0.17302, 1),
    (0, 2, 0, 0, 0.01614, 0),
    (0, 0, 2, 0, 0.01043, 0),
    (-1, 1, 0, 0, 0.00734, 1),
    (1, 1, 0, 0, -0.00515, 1),
    (2, 0, 0, 0, 0.00209, 2),
    (0, 1, -2, 0, -0.00111, 0),
    (0, 1, 2, 0, -0.00057, 0),
    (1, 2, 0, 0, 0.00056, 1),
    (0, 3, 0, 0, -0.00042, 0),
    (1, 0, 2, 0, 0.00042, 1),
    (1, 0, -2, 0, 0.00038, 1),
    (-1, 2, 0, 0, -0.00024, 1),
    (0, 0, 0, 1, -0.00017, 0),
    (2, 1, 0, 0, -0.00007, 0),
    (0, 2, -2, 0, 0.00004, 0),
    (3, 0, 0, 0, 0.00004, 0),
    (1, 1, -2, 0, 0.00003, 0),
    (0, 2, 2, 0, 0.00003, 0),
    (1, 1, 2, 0, -0.00003, 0),
    (-1, 1, 2, 0, 0.00003, 0),
    (-1, 1, -2, 0, -0.00002, 0),
    (1, 3, 0, 0, -0.00002, 0),
    (0, 4, 0, 0, 0.00002, 0),
)

_QUARTER_ROWS: Tuple[Tuple[float, ...], ...] = (
    (0, 1, 0, 0, -0.62801, 0),
    (1, 0, 0, 0, 0.17172, 1),
    (1, 1, 0, 0, -0.01183, 1),
    (0, 2, 0, 0, 0.00862, 0),
    (0, 0, 2, 0, 0.00804, 0),
    (-1, 1, 0, 0, 0.00454, 1),
    (2, 0, 0, 0, 0.00204, 2),
    (0, 1, -2, 0, -0.00180, 0),
    (0, 1, 2, 0, -0.00070, 0),
    (0, 3, 0, 0, -0.00040, 0),
    (-1, 2, 0, 0, -0.00034, 1),
    (1, 0, 2, 0, 0.00032, 1),
    (1, 0, -2, 0, 0.00032, 1),
    (2, 1, 0, 0, -0.00028, 2),
    (1, 2, 0, 0, 0.00027, 1),
    (0, 0, 0, 1, -0.00017, 0),
    (-1, 1, -2, 0, -0.00005, 0),
    (0, 2, 2, 0, 0.00004, 0),
    (1, 1, 2, 0, -0.00004, 0),
    (-2, 1, 0, 0, 0.00004, 0),
    (1, 1, -2, 0, 0.00003, 0),
    (3, 0, 0, 0, 0.00003, 0),
    (0, 2, -2, 0, 0.00002, 0),
    (-1, 1, 2, 0, 0.00002, 0),
    (1, 3, 0, 0, -0.00002, 0),
)


def _series(rows: Tuple[Tuple[float, ...], ...]) -> PeriodicSeries:
    return PeriodicSeries.from_rows(
        [row[:4] for row in rows],
        [row[4] for row in rows],
        powers=[row[5] for row in rows],
    )


_QUARTER_SERIES = _series(_QUARTER_ROWS)

PHASE_CORRECTIONS: Dict[PhaseKind, PeriodicSeries] = {
    PhaseKind.new_moon: _series(_NEW_MOON_ROWS),
    PhaseKind.first_quarter: _QUARTER_SERIES,
    PhaseKind.full_moon: _series(_FULL_MOON_ROWS),
    PhaseKind.last_quarter: _QUARTER_SERIES,
}


def coerce_phase_kind(phase: Union[PhaseKind, str, int]) -> PhaseKind:
    """Resolve a phase selector given as enum member, value string or index 0-3."""

    if isinstance(phase, PhaseKind):
        return phase
    if isinstance(phase, int) and not isinstance(phase, bool):
        members = list(PhaseKind)
        if 0 <= phase < len(members):
            return members[phase]
    elif isinstance(phase, str):
        try:
            return PhaseKind(phase)
        except ValueError:
            pass
    LOGGER.debug(json.dumps({"event": "invalid_phase_kind", "phase": repr(phase)}))
    raise InvalidPhaseKind(f"Unsupported lunar phase selector: {phase!r}")


def lunation_number(year: float, phase: Union[PhaseKind, str, int]) -> float:
    """Cycle index k of *phase* near fractional *year*; k = 0 is 2000 January 6."""

    phase = coerce_phase_kind(phase)
    return math.floor((year - 2000.0) * 12.3685) + phase.offset


def mean_phase(k: float) -> float:
    """JDE of the mean phase for cycle index *k*."""

    t = k / 1236.85
    return (
        2451550.09765
        + SYNODIC_MONTH * k
        + 0.0001337 * t**2
        - 0.000000150 * t**3
        + 0.00000000073 * t**4
    )


def _phase_arguments(k: float, t: float) -> Tuple[float, float, float, float]:
    """Sun's and Moon's mean anomalies, Moon's argument of latitude, node (degrees)."""

    t2 = t * t
    sun_anomaly = 2.5534 + 29.10535669 * k - 0.0000218 * t2 - 0.00000011 * t2 * t
    moon_anomaly = (
        201.5643 + 385.81693528 * k + 0.0107438 * t2 + 0.00001239 * t2 * t - 0.000000058 * t2 * t2
    )
    latitude = (
        160.7108 + 390.67050274 * k - 0.0016341 * t2 - 0.00000227 * t2 * t + 0.000000011 * t2 * t2
    )
    node = 124.7746 - 1.56375580 * k + 0.0020691 * t2 + 0.00000215 * t2 * t
    return sun_anomaly, moon_anomaly, latitude, node


def lunar_phase(year: float, phase: Union[PhaseKind, str, int]) -> float:
    """Julian Ephemeris Day of a lunar phase.

    Parameters
    ----------
    year:
        Fractional year near which the phase is wanted (``1977.13`` is
        mid-February 1977).
    phase:
        Which phase to compute.

    Returns
    -------
    float
        JDE of the phase in the lunation selected by ``floor((year - 2000)
        * 12.3685)``.

    Raises
    ------
    InvalidPhaseKind
        If *phase* is not one of the four principal phases.
    """

    phase = coerce_phase_kind(phase)
    k = lunation_number(year, phase)
    t = k / 1236.85
    eccentricity = 1.0 - 0.002516 * t - 0.0000074 * t * t
    sun_anomaly, moon_anomaly, latitude, node = _phase_arguments(k, t)

    planetary = PLANETARY_TERMS.sine_sum((k, t * t))
    corrections = PHASE_CORRECTIONS[phase].sine_sum(
        (sun_anomaly, moon_anomaly, latitude, node), eccentricity=eccentricity
    )

    quarter = 0.0
    if phase in (PhaseKind.first_quarter, PhaseKind.last_quarter):
        quarter = (
            0.00306
            - 0.00038 * eccentricity * cos_d(sun_anomaly)
            + 0.00026 * cos_d(moon_anomaly)
            - 0.00002 * cos_d(moon_anomaly - sun_anomaly)
            + 0.00002 * cos_d(moon_anomaly + sun_anomaly)
            + 0.00002 * cos_d(2 * latitude)
        )
        if phase is PhaseKind.last_quarter:
            quarter = -quarter

    return mean_phase(k) + corrections + planetary + quarter


def phase_event(year: float, phase: Union[PhaseKind, str, int]) -> PhaseEvent:
    phase = coerce_phase_kind(phase)
    return PhaseEvent(jde=lunar_phase(year, phase), kind=phase)
