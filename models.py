"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from astroalgo.moonphase import PhaseKind
from astroalgo.risetransitset import EventStatus
from astroalgo.seasons import SeasonKind

MIN_YEAR = -1000
MAX_YEAR = 3000
GREGORIAN_START = date(1582, 10, 15)


class SunQueryParams(BaseModel):
    """Validated query parameters for the ``/sun`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(
        ..., ge=-180.0, le=180.0, description="Longitude in degrees, positive east"
    )
    date_utc: date = Field(..., alias="date", description="UTC calendar date (YYYY-MM-DD)")
    delta_t: float = Field(
        0.0,
        ge=-3600.0,
        le=3600.0,
        description="TD - UT in seconds used when sampling the Sun",
    )

    @field_validator("date_utc")
    def validate_gregorian(cls, value: date) -> date:
        if value < GREGORIAN_START:
            raise ValueError("date must be on or after 1582-10-15 (Gregorian calendar)")
        return value


class SeasonQueryParams(BaseModel):
    """Validated query parameters for the ``/season`` endpoint."""

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Calendar year")
    kind: SeasonKind = Field(..., description="Equinox or solstice to compute")


class MoonPhaseQueryParams(BaseModel):
    """Validated query parameters for the ``/moon-phase`` endpoint."""

    year: float = Field(
        ..., ge=MIN_YEAR, le=MAX_YEAR, description="Fractional year near the wanted phase"
    )
    phase: PhaseKind = Field(..., description="Principal lunar phase")


class EasterQueryParams(BaseModel):
    """Validated query parameters for the ``/easter`` endpoint."""

    year: int = Field(..., ge=1583, le=MAX_YEAR, description="Gregorian calendar year")


class SunResponse(BaseModel):
    """Solar position and rise/transit/set for one UTC day."""

    ok: bool = True
    status: EventStatus = Field(..., description="Rise/transit/set outcome")
    date_utc: date = Field(..., description="Requested UTC date")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees, positive east")
    julian_day: float = Field(..., description="Julian Day of 0h UT")
    right_ascension: float = Field(..., description="Apparent right ascension in degrees")
    declination: float = Field(..., description="Apparent declination in degrees")
    rise_utc: Optional[str] = Field(None, description="Sunrise in UTC (ISO-8601)")
    transit_utc: Optional[str] = Field(None, description="Solar transit in UTC (ISO-8601)")
    set_utc: Optional[str] = Field(None, description="Sunset in UTC (ISO-8601)")


class EventResponse(BaseModel):
    """Instant of a seasonal or lunar event."""

    ok: bool = True
    event: str = Field(..., description="Event selector")
    label: Optional[str] = Field(None, description="Display name of the event")
    jde: float = Field(..., description="Julian Ephemeris Day")
    instant_tt: Optional[str] = Field(
        None, description="Instant in Terrestrial Time (ISO-8601), Gregorian dates only"
    )


class EasterResponse(BaseModel):
    """Date of astronomical Easter for one Gregorian year."""

    ok: bool = True
    year: int
    julian_day: float
    easter_date: str = Field(..., description="Calendar date of astronomical Easter (YYYY-MM-DD)")


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    version: str


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
