from __future__ import annotations

import pytest

from astroalgo.easter import astronomical_easter
from astroalgo.errors import InvalidPhaseKind, InvalidSeasonKind
from astroalgo.moonphase import (
    SYNODIC_MONTH,
    PhaseKind,
    lunar_phase,
    lunation_number,
    mean_phase,
    phase_event,
)
from astroalgo.seasons import (
    SEASON_PERIODIC_TERMS,
    SeasonKind,
    equinox_or_solstice,
    mean_equinox_or_solstice,
    season_event,
)
from astroalgo.timebase import day_of_week, to_calendar_date, to_julian_day


def test_june_solstice_1962() -> None:
    assert mean_equinox_or_solstice(1962, SeasonKind.june_solstice) == pytest.approx(
        2437837.38589, abs=1e-4
    )
    assert equinox_or_solstice(1962, SeasonKind.june_solstice) == pytest.approx(
        2437837.39245, abs=1e-4
    )


# Meeus, Astronomical Algorithms, Table 27.C.
PUBLISHED_SEASON_TERMS = [
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
]


def test_season_correction_table_matches_published_values() -> None:
    assert len(SEASON_PERIODIC_TERMS) == 24
    amplitudes, phases, rates = zip(*PUBLISHED_SEASON_TERMS)
    assert SEASON_PERIODIC_TERMS.amplitudes.tolist() == list(amplitudes)
    assert SEASON_PERIODIC_TERMS.phases.tolist() == list(phases)
    assert SEASON_PERIODIC_TERMS.multipliers[:, 0].tolist() == list(rates)
    assert SEASON_PERIODIC_TERMS.amplitudes.sum() == 1978


@pytest.mark.parametrize(
    "kind, month, day",
    [
        (SeasonKind.march_equinox, 3, 20),
        (SeasonKind.june_solstice, 6, 20),
        (SeasonKind.september_equinox, 9, 22),
        (SeasonKind.december_solstice, 12, 21),
    ],
)
def test_seasons_of_2024(kind: SeasonKind, month: int, day: int) -> None:
    date = to_calendar_date(equinox_or_solstice(2024, kind))
    assert (date.year, date.month, date.day_of_month) == (2024, month, day)


def test_march_equinox_2024_instant() -> None:
    # 2024 March 20, 03h06m UT.
    assert equinox_or_solstice(2024, SeasonKind.march_equinox) == pytest.approx(
        2460389.6292, abs=0.002
    )


def test_seasons_before_year_1000_use_their_own_polynomials() -> None:
    jde = equinox_or_solstice(500, SeasonKind.march_equinox)
    date = to_calendar_date(jde)
    assert date.year == 500
    assert date.month == 3
    assert 16 <= date.day_of_month <= 21


def test_seasons_are_ordered_within_a_year() -> None:
    instants = [equinox_or_solstice(1987, kind) for kind in SeasonKind]
    assert instants == sorted(instants)
    assert instants[-1] - instants[0] < 366


def test_season_selectors() -> None:
    by_index = equinox_or_solstice(2000, 2)
    by_name = equinox_or_solstice(2000, "september_equinox")
    assert by_index == by_name == equinox_or_solstice(2000, SeasonKind.september_equinox)
    event = season_event(2000, 0)
    assert event.kind is SeasonKind.march_equinox
    assert event.jde == equinox_or_solstice(2000, SeasonKind.march_equinox)


@pytest.mark.parametrize("kind", [4, -1, "spring", True, None, 1.0])
def test_invalid_season_kind(kind: object) -> None:
    with pytest.raises(InvalidSeasonKind):
        equinox_or_solstice(2000, kind)  # type: ignore[arg-type]


def test_new_moon_february_1977() -> None:
    assert lunation_number(1977.13, PhaseKind.new_moon) == -283
    assert lunar_phase(1977.13, PhaseKind.new_moon) == pytest.approx(2443192.65118, abs=1e-3)


def test_mean_new_moon_epoch() -> None:
    assert mean_phase(0) == pytest.approx(2451550.09765)


@pytest.mark.parametrize(
    "year, phase, expected",
    [
        # 2024 January 11, 11h57m UT.
        (2024.05, PhaseKind.new_moon, 2460320.998),
        # 2024 January 25, 17h54m UT.
        (2024.05, PhaseKind.full_moon, 2460335.246),
        # 2024 January 18, 03h53m UT.
        (2024.05, PhaseKind.first_quarter, 2460327.662),
        # 2024 February 2, 23h18m UT.
        (2024.05, PhaseKind.last_quarter, 2460343.471),
    ],
)
def test_lunar_phases_of_early_2024(year: float, phase: PhaseKind, expected: float) -> None:
    assert lunar_phase(year, phase) == pytest.approx(expected, abs=0.01)


def test_phases_follow_in_order() -> None:
    instants = [lunar_phase(2010.5, phase) for phase in PhaseKind]
    assert instants == sorted(instants)
    assert 20.0 < instants[-1] - instants[0] < 24.0


@pytest.mark.parametrize("k", [-300, -1, 0, 1, 50, 299])
def test_consecutive_full_moons_are_a_synodic_month_apart(k: int) -> None:
    # A year whose lunation index floors to exactly k.
    year = 2000.0 + (k + 0.5) / 12.3685
    next_year = 2000.0 + (k + 1.5) / 12.3685
    assert lunation_number(next_year, PhaseKind.full_moon) - lunation_number(
        year, PhaseKind.full_moon
    ) == 1
    spacing = lunar_phase(next_year, PhaseKind.full_moon) - lunar_phase(year, PhaseKind.full_moon)
    assert abs(spacing - SYNODIC_MONTH) < 0.6


def test_phase_selectors() -> None:
    assert lunar_phase(2000.0, 2) == lunar_phase(2000.0, "full_moon")
    event = phase_event(2000.0, PhaseKind.first_quarter)
    assert event.kind is PhaseKind.first_quarter
    assert event.jde == lunar_phase(2000.0, PhaseKind.first_quarter)


@pytest.mark.parametrize("phase", [4, -1, "gibbous", False, None])
def test_invalid_phase_kind(phase: object) -> None:
    with pytest.raises(InvalidPhaseKind):
        lunar_phase(2000.0, phase)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "year, month, day",
    [(2024, 3, 31), (2025, 4, 20), (2010, 4, 4), (2023, 4, 9)],
)
def test_astronomical_easter(year: int, month: int, day: int) -> None:
    jd = astronomical_easter(year)
    assert jd == to_julian_day(month, day, year)
    assert day_of_week(jd) == 0
