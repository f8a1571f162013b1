from __future__ import annotations

import pytest

from astroalgo.config import ConfigurationError, Settings, resolve_settings


def test_defaults() -> None:
    settings = resolve_settings({})
    assert settings == Settings()
    assert settings.rts_iterations == 1
    assert settings.rts_legacy_guard is False
    assert settings.cors_origins == ("*",)


def test_overrides() -> None:
    settings = resolve_settings(
        {
            "ASTROALGO_RTS_ITERATIONS": "4",
            "ASTROALGO_RTS_LEGACY_GUARD": "Yes",
            "ASTROALGO_CORS_ORIGINS": "https://a.example, https://b.example,",
        }
    )
    assert settings.rts_iterations == 4
    assert settings.rts_legacy_guard is True
    assert settings.cors_origins == ("https://a.example", "https://b.example")


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTROALGO_RTS_ITERATIONS", "2")
    monkeypatch.setenv("ASTROALGO_RTS_LEGACY_GUARD", "0")
    settings = resolve_settings()
    assert settings.rts_iterations == 2
    assert settings.rts_legacy_guard is False


@pytest.mark.parametrize(
    "environ",
    [
        {"ASTROALGO_RTS_ITERATIONS": "many"},
        {"ASTROALGO_RTS_ITERATIONS": "0"},
        {"ASTROALGO_RTS_ITERATIONS": "11"},
        {"ASTROALGO_RTS_LEGACY_GUARD": "maybe"},
    ],
)
def test_invalid_values(environ: dict) -> None:
    with pytest.raises(ConfigurationError):
        resolve_settings(environ)
