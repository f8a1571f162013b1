from __future__ import annotations

import pytest

from astroalgo import risetransitset
from astroalgo.coordinates import EquatorialCoordinate
from astroalgo.errors import UnsupportedDomain
from astroalgo.risetransitset import (
    STAR_ALTITUDE,
    SUN_ALTITUDE,
    EventStatus,
    interpolate,
    legacy_guard_fails,
    rise_transit_set,
    sun_rise_transit_set,
)
from astroalgo.sidereal import apparent_sidereal_time

# Venus from Boston, 1988 March 20.
BOSTON_LONGITUDE = 71.0833
BOSTON_LATITUDE = 42.3333
VENUS_JD = 2447240.5
VENUS_SAMPLES = [
    EquatorialCoordinate(40.68021, 18.04761),
    EquatorialCoordinate(41.73129, 18.44092),
    EquatorialCoordinate(42.78204, 18.82742),
]


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ASTROALGO_RTS_ITERATIONS", raising=False)
    monkeypatch.delenv("ASTROALGO_RTS_LEGACY_GUARD", raising=False)


def _fixed_star(ra: float, dec: float) -> list:
    return [EquatorialCoordinate(ra, dec)] * 3


def test_sidereal_time_for_venus_example() -> None:
    assert apparent_sidereal_time(VENUS_JD) == pytest.approx(177.74208, abs=1e-4)


def test_venus_at_boston() -> None:
    result = rise_transit_set(
        BOSTON_LONGITUDE,
        BOSTON_LATITUDE,
        STAR_ALTITUDE,
        VENUS_JD,
        VENUS_SAMPLES,
        delta_t=56.0,
    )
    assert result.status is EventStatus.ok
    assert result.ok
    assert result.transit == pytest.approx(0.81980, abs=5e-4)
    assert result.rise == pytest.approx(0.51766, abs=5e-4)
    assert result.set == pytest.approx(0.12130, abs=5e-4)


def test_extra_iterations_stay_close_to_single_step() -> None:
    single = rise_transit_set(
        BOSTON_LONGITUDE, BOSTON_LATITUDE, STAR_ALTITUDE, VENUS_JD, VENUS_SAMPLES,
        delta_t=56.0, iterations=1,
    )
    refined = rise_transit_set(
        BOSTON_LONGITUDE, BOSTON_LATITUDE, STAR_ALTITUDE, VENUS_JD, VENUS_SAMPLES,
        delta_t=56.0, iterations=3,
    )
    for before, after in zip(single.julian_days(0.0), refined.julian_days(0.0)):
        assert after == pytest.approx(before, abs=1e-3)


def test_iterations_come_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTROALGO_RTS_ITERATIONS", "3")
    from_env = rise_transit_set(
        BOSTON_LONGITUDE, BOSTON_LATITUDE, STAR_ALTITUDE, VENUS_JD, VENUS_SAMPLES, delta_t=56.0
    )
    explicit = rise_transit_set(
        BOSTON_LONGITUDE, BOSTON_LATITUDE, STAR_ALTITUDE, VENUS_JD, VENUS_SAMPLES,
        delta_t=56.0, iterations=3,
    )
    assert from_env == explicit


def test_sun_events_are_ordered_at_greenwich() -> None:
    # 2024 March 31, latitude 40 N on the prime meridian.
    result = sun_rise_transit_set(0.0, 40.0, 2460400.5)
    assert result.status is EventStatus.ok
    assert 0.0 <= result.rise < result.transit < result.set < 1.0
    assert result.transit == pytest.approx(0.5029, abs=2e-3)
    day_length = result.set - result.rise
    assert 12.3 / 24.0 < day_length < 13.2 / 24.0


def test_offsets_are_folded_into_the_day() -> None:
    # Sydney (151.2 E), 2024 June 21; the UT day starts in the local afternoon.
    result = sun_rise_transit_set(-151.2093, -33.8688, 2460482.5)
    assert result.ok
    for value in (result.transit, result.rise, result.set):
        assert 0.0 <= value < 1.0
    assert result.set < result.rise


def test_transit_just_before_midnight_folds_to_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    # Sidereal time a hair past the star's RA puts the transit at -1e-17 day.
    monkeypatch.setattr(risetransitset, "apparent_sidereal_time", lambda jd: 3.6e-15)
    result = rise_transit_set(0.0, 0.0, STAR_ALTITUDE, 2451544.5, _fixed_star(0.0, 0.0))
    assert result.ok
    assert result.transit == 0.0
    for value in (result.transit, result.rise, result.set):
        assert 0.0 <= value < 1.0


def test_polar_day_and_night() -> None:
    summer = sun_rise_transit_set(-15.6469, 78.2232, 2460482.5)
    assert summer.status is EventStatus.always_above
    assert summer.julian_days(2460482.5) == (None, None, None)

    winter = sun_rise_transit_set(-15.6469, 78.2232, 2460665.5)
    assert winter.status is EventStatus.always_below
    assert (winter.transit, winter.rise, winter.set) == (None, None, None)


def test_circumpolar_star() -> None:
    result = rise_transit_set(0.0, 60.0, STAR_ALTITUDE, 2451544.5, _fixed_star(100.0, 45.0))
    assert result.status is EventStatus.always_above


def test_never_rising_star() -> None:
    result = rise_transit_set(0.0, 60.0, STAR_ALTITUDE, 2451544.5, _fixed_star(100.0, -45.0))
    assert result.status is EventStatus.always_below


def test_legacy_guard_expression() -> None:
    # |tan(phi) * sin(delta) * cos(delta)| once grouped left to right.
    assert legacy_guard_fails(78.0, 23.44)
    assert not legacy_guard_fails(40.0, 23.44)
    assert not legacy_guard_fails(70.0, 21.0)


def test_legacy_guard_reports_no_event() -> None:
    samples = _fixed_star(90.0, 23.44)
    corrected = rise_transit_set(0.0, 78.0, SUN_ALTITUDE, 2460482.5, samples, legacy_guard=False)
    legacy = rise_transit_set(0.0, 78.0, SUN_ALTITUDE, 2460482.5, samples, legacy_guard=True)
    assert corrected.status is EventStatus.always_above
    assert legacy.status is EventStatus.no_event


def test_legacy_guard_ignores_standard_altitude() -> None:
    # With h0 = 20 degrees the body does cross the threshold, but the
    # historical test rejects the day anyway.
    samples = _fixed_star(90.0, 23.44)
    corrected = rise_transit_set(0.0, 78.0, 20.0, 2460482.5, samples, legacy_guard=False)
    legacy = rise_transit_set(0.0, 78.0, 20.0, 2460482.5, samples, legacy_guard=True)
    assert corrected.status is EventStatus.ok
    assert legacy.status is EventStatus.no_event


def test_legacy_guard_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTROALGO_RTS_LEGACY_GUARD", "true")
    result = rise_transit_set(0.0, 78.0, 20.0, 2460482.5, _fixed_star(90.0, 23.44))
    assert result.status is EventStatus.no_event


def test_right_ascension_wrapping_samples() -> None:
    wrapped = [
        EquatorialCoordinate(359.0, 0.0),
        EquatorialCoordinate(0.0, 0.4),
        EquatorialCoordinate(1.0, 0.8),
    ]
    unwrapped = [
        EquatorialCoordinate(-1.0, 0.0),
        EquatorialCoordinate(0.0, 0.4),
        EquatorialCoordinate(1.0, 0.8),
    ]
    first = rise_transit_set(0.0, 40.0, SUN_ALTITUDE, 2451624.5, wrapped)
    second = rise_transit_set(0.0, 40.0, SUN_ALTITUDE, 2451624.5, unwrapped)
    assert first.transit == pytest.approx(second.transit, abs=1e-12)
    assert first.rise == pytest.approx(second.rise, abs=1e-12)
    assert first.set == pytest.approx(second.set, abs=1e-12)


def test_interpolate() -> None:
    values = (1.0, 4.0, 9.0)  # y = (x + 2) ** 2 at x = -1, 0, 1
    assert interpolate(values, 0.0) == 4.0
    assert interpolate(values, 1.0) == pytest.approx(9.0)
    assert interpolate(values, 0.5) == pytest.approx(6.25)


def test_requires_three_samples() -> None:
    with pytest.raises(UnsupportedDomain):
        rise_transit_set(0.0, 40.0, SUN_ALTITUDE, 2451544.5, VENUS_SAMPLES[:2])


def test_rejects_non_positive_iterations() -> None:
    with pytest.raises(UnsupportedDomain):
        rise_transit_set(0.0, 40.0, SUN_ALTITUDE, 2451544.5, VENUS_SAMPLES, iterations=0)
