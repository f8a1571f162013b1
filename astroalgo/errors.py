"""Recoverable error conditions raised by the astronomy engine."""

from __future__ import annotations

__all__ = [
    "AstroAlgoError",
    "InvalidDate",
    "UnsupportedDomain",
    "InvalidSeasonKind",
    "InvalidPhaseKind",
]


class AstroAlgoError(ValueError):
    """Base class for expected, caller-correctable engine failures."""


class InvalidDate(AstroAlgoError):
    """Raised for malformed calendar input or dates in the 1582 Gregorian gap."""


class UnsupportedDomain(AstroAlgoError):
    """Raised when an input lies outside the domain an operation supports."""


class InvalidSeasonKind(AstroAlgoError):
    """Raised when a season selector is not one of the four seasonal instants."""


class InvalidPhaseKind(AstroAlgoError):
    """Raised when a lunar phase selector is not one of the four principal phases."""
