"""Evaluation of periodic trigonometric series stored as literal tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

__all__ = ["PeriodicSeries"]


@dataclass(frozen=True, eq=False)
class PeriodicSeries:
    """Read-only table of periodic terms.

    Term ``i`` contributes::

        (amplitude[i] + rate[i] * t) * e ** power[i]
            * f(phase[i] + multipliers[i] . arguments)

    where ``f`` is sine or cosine of an angle in degrees. ``rates``,
    ``phases`` and ``powers`` are optional and default to zero.
    """

    multipliers: np.ndarray
    amplitudes: np.ndarray
    rates: Optional[np.ndarray] = None
    phases: Optional[np.ndarray] = None
    powers: Optional[np.ndarray] = None

    @classmethod
    def from_rows(
        cls,
        multipliers: Sequence[Sequence[float]],
        amplitudes: Sequence[float],
        *,
        rates: Optional[Sequence[float]] = None,
        phases: Optional[Sequence[float]] = None,
        powers: Optional[Sequence[int]] = None,
    ) -> "PeriodicSeries":
        def _frozen(values: Optional[Sequence[float]]) -> Optional[np.ndarray]:
            if values is None:
                return None
            array = np.array(values, dtype=float)
            array.setflags(write=False)
            return array

        matrix = np.array(multipliers, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != len(amplitudes):
            raise ValueError("multipliers must be an (n_terms, n_arguments) table")
        matrix.setflags(write=False)
        return cls(
            multipliers=matrix,
            amplitudes=_frozen(amplitudes),
            rates=_frozen(rates),
            phases=_frozen(phases),
            powers=_frozen(powers),
        )

    def __len__(self) -> int:
        return int(self.amplitudes.shape[0])

    def angles(self, arguments: Sequence[float]) -> np.ndarray:
        """Per-term angle in degrees for the given fundamental arguments."""

        angles = self.multipliers @ np.asarray(arguments, dtype=float)
        if self.phases is not None:
            angles = angles + self.phases
        return angles

    def coefficients(self, t: float = 0.0, eccentricity: float = 1.0) -> np.ndarray:
        coefficients = self.amplitudes
        if self.rates is not None:
            coefficients = coefficients + self.rates * t
        if self.powers is not None:
            coefficients = coefficients * np.power(eccentricity, self.powers)
        return coefficients

    def sine_sum(
        self, arguments: Sequence[float], t: float = 0.0, eccentricity: float = 1.0
    ) -> float:
        angles = np.radians(self.angles(arguments))
        return float(np.dot(self.coefficients(t, eccentricity), np.sin(angles)))

    def cosine_sum(
        self, arguments: Sequence[float], t: float = 0.0, eccentricity: float = 1.0
    ) -> float:
        angles = np.radians(self.angles(arguments))
        return float(np.dot(self.coefficients(t, eccentricity), np.cos(angles)))
