"""Environment-driven settings for the engine and the HTTP service."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

__all__ = ["ConfigurationError", "Settings", "resolve_settings"]

LOGGER = logging.getLogger(__name__)

DEFAULT_RTS_ITERATIONS = 1
MAX_RTS_ITERATIONS = 10

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigurationError(RuntimeError):
    """Raised when an environment override cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    """Resolved configuration.

    ``rts_iterations`` is the number of correction passes applied by
    :func:`~astroalgo.risetransitset.rise_transit_set`; ``rts_legacy_guard``
    enables the older, stricter circumpolar test; ``cors_origins`` feeds the
    HTTP service's CORS middleware.
    """

    rts_iterations: int = DEFAULT_RTS_ITERATIONS
    rts_legacy_guard: bool = False
    cors_origins: Tuple[str, ...] = ("*",)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_iterations(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"ASTROALGO_RTS_ITERATIONS must be an integer, got {raw!r}") from exc
    if not 1 <= value <= MAX_RTS_ITERATIONS:
        raise ConfigurationError(
            f"ASTROALGO_RTS_ITERATIONS must lie between 1 and {MAX_RTS_ITERATIONS}, got {value}"
        )
    return value


def resolve_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``ASTROALGO_*`` environment variables."""

    env = os.environ if environ is None else environ

    iterations = DEFAULT_RTS_ITERATIONS
    raw_iterations = env.get("ASTROALGO_RTS_ITERATIONS")
    if raw_iterations:
        iterations = _parse_iterations(raw_iterations)

    legacy_guard = _parse_bool(
        "ASTROALGO_RTS_LEGACY_GUARD", env.get("ASTROALGO_RTS_LEGACY_GUARD", "")
    )

    raw_origins = env.get("ASTROALGO_CORS_ORIGINS", "*")
    origins = tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())

    settings = Settings(
        rts_iterations=iterations,
        rts_legacy_guard=legacy_guard,
        cors_origins=origins or ("*",),
    )
    LOGGER.debug(
        json.dumps(
            {
                "event": "settings_resolved",
                "rts_iterations": settings.rts_iterations,
                "rts_legacy_guard": settings.rts_legacy_guard,
                "cors_origins": list(settings.cors_origins),
            }
        )
    )
    return settings
