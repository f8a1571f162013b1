"""FastAPI application exposing the astronomy engine."""

from __future__ import annotations

import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC
from typing import Annotated, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from astroalgo import __version__
from astroalgo.config import resolve_settings
from astroalgo.easter import astronomical_easter
from astroalgo.errors import AstroAlgoError, UnsupportedDomain
from astroalgo.labels import phase_name, season_name
from astroalgo.moonphase import phase_event
from astroalgo.risetransitset import sun_rise_transit_set
from astroalgo.seasons import season_event
from astroalgo.solar import solar_coordinates
from astroalgo.timebase import to_calendar_date, to_datetime, to_julian_day
from models import (
    EasterQueryParams,
    EasterResponse,
    ErrorResponse,
    EventResponse,
    HealthResponse,
    MoonPhaseQueryParams,
    SeasonQueryParams,
    SunQueryParams,
    SunResponse,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("astroalgo-api")

APP_DESCRIPTION = (
    "Julian Days, solar position, equinoxes, lunar phases and rise/transit/set "
    "times from closed-form astronomical algorithms"
)

SETTINGS = resolve_settings()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - exercised in integration tests
    LOGGER.info(
        json.dumps(
            {
                "event": "startup",
                "version": __version__,
                "rts_iterations": SETTINGS.rts_iterations,
                "rts_legacy_guard": SETTINGS.rts_legacy_guard,
            }
        )
    )
    yield


app = FastAPI(
    title="AstroAlgo API",
    description=APP_DESCRIPTION,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials="*" not in SETTINGS.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _format_utc(jd: Optional[float]) -> Optional[str]:
    if jd is None:
        return None
    return to_datetime(jd).astimezone(UTC).isoformat().replace("+00:00", "Z")


def _format_tt(jde: float) -> Optional[str]:
    """ISO-8601 text for a JDE, or ``None`` outside the Gregorian datetime range."""

    try:
        instant = to_datetime(jde)
    except UnsupportedDomain:
        return None
    return instant.replace(tzinfo=None).isoformat() + " TT"


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def _log_request(event: str, start_time: float, **fields: object) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(json.dumps({"event": event, **fields, "duration_ms": round(duration_ms, 3)}))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(AstroAlgoError)
async def astroalgo_exception_handler(request: Request, exc: AstroAlgoError) -> JSONResponse:
    return _error_response(400, type(exc).__name__, str(exc))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, version=__version__)


@app.get("/sun", response_model=SunResponse, responses=ERROR_RESPONSES)
def sun_endpoint(params: Annotated[SunQueryParams, Query()]) -> SunResponse:
    start_time = time.perf_counter()
    day = params.date_utc
    jd = to_julian_day(day.month, day.day, day.year)
    position = solar_coordinates(jd + params.delta_t / 86400.0)
    # The engine measures longitude positive west.
    events = sun_rise_transit_set(-params.lon, params.lat, jd, delta_t=params.delta_t)
    transit, rise, setting = events.julian_days(jd)

    response = SunResponse(
        status=events.status,
        date_utc=day,
        latitude=params.lat,
        longitude=params.lon,
        julian_day=jd,
        right_ascension=position.right_ascension,
        declination=position.declination,
        rise_utc=_format_utc(rise),
        transit_utc=_format_utc(transit),
        set_utc=_format_utc(setting),
    )

    _log_request(
        "sun",
        start_time,
        lat=params.lat,
        lon=params.lon,
        date=day.isoformat(),
        status=events.status.value,
    )
    return response


@app.get("/season", response_model=EventResponse, responses=ERROR_RESPONSES)
def season_endpoint(params: Annotated[SeasonQueryParams, Query()]) -> EventResponse:
    start_time = time.perf_counter()
    event = season_event(params.year, params.kind)
    response = EventResponse(
        event=event.kind.value,
        label=season_name(event.kind.index),
        jde=event.jde,
        instant_tt=_format_tt(event.jde),
    )
    _log_request("season", start_time, year=params.year, kind=event.kind.value)
    return response


@app.get("/moon-phase", response_model=EventResponse, responses=ERROR_RESPONSES)
def moon_phase_endpoint(params: Annotated[MoonPhaseQueryParams, Query()]) -> EventResponse:
    start_time = time.perf_counter()
    event = phase_event(params.year, params.phase)
    response = EventResponse(
        event=event.kind.value,
        label=phase_name(event.kind.index),
        jde=event.jde,
        instant_tt=_format_tt(event.jde),
    )
    _log_request("moon_phase", start_time, year=params.year, phase=event.kind.value)
    return response


@app.get("/easter", response_model=EasterResponse, responses=ERROR_RESPONSES)
def easter_endpoint(params: Annotated[EasterQueryParams, Query()]) -> EasterResponse:
    start_time = time.perf_counter()
    jd = astronomical_easter(params.year)
    date = to_calendar_date(jd)
    response = EasterResponse(
        year=params.year,
        julian_day=jd,
        easter_date=f"{date.year:04d}-{date.month:02d}-{date.day_of_month:02d}",
    )
    _log_request("easter", start_time, year=params.year, julian_day=jd)
    return response
