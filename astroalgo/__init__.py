"""Closed-form astronomical algorithms: time bases, Sun and Moon events."""

from .coordinates import EquatorialCoordinate, HorizontalCoordinate, azimuth_altitude
from .easter import astronomical_easter
from .errors import (
    AstroAlgoError,
    InvalidDate,
    InvalidPhaseKind,
    InvalidSeasonKind,
    UnsupportedDomain,
)
from .moonphase import PhaseEvent, PhaseKind, lunar_phase, phase_event
from .nutation import NutationObliquity, nutation, nutation_obliquity, obliquity
from .risetransitset import (
    EventStatus,
    RiseTransitSet,
    rise_transit_set,
    sun_rise_transit_set,
)
from .seasons import SeasonEvent, SeasonKind, equinox_or_solstice, season_event
from .sidereal import apparent_sidereal_time, mean_sidereal_time
from .solar import SolarPosition, solar_coordinates
from .timebase import (
    CalendarDate,
    day_of_week,
    julian_century,
    midnight_floor,
    to_calendar_date,
    to_julian_day,
    zeller_day_of_week,
)

__all__ = [
    "AstroAlgoError",
    "CalendarDate",
    "EquatorialCoordinate",
    "EventStatus",
    "HorizontalCoordinate",
    "InvalidDate",
    "InvalidPhaseKind",
    "InvalidSeasonKind",
    "NutationObliquity",
    "PhaseEvent",
    "PhaseKind",
    "RiseTransitSet",
    "SeasonEvent",
    "SeasonKind",
    "SolarPosition",
    "UnsupportedDomain",
    "apparent_sidereal_time",
    "astronomical_easter",
    "azimuth_altitude",
    "day_of_week",
    "equinox_or_solstice",
    "julian_century",
    "lunar_phase",
    "mean_sidereal_time",
    "midnight_floor",
    "nutation",
    "nutation_obliquity",
    "obliquity",
    "phase_event",
    "rise_transit_set",
    "season_event",
    "solar_coordinates",
    "sun_rise_transit_set",
    "to_calendar_date",
    "to_julian_day",
    "zeller_day_of_week",
]

__version__ = "1.0.0"
