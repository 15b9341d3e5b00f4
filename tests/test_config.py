from __future__ import annotations

from datetime import UTC
from zoneinfo import ZoneInfo

import pytest

from climatestats.config import ClimateConfig
from climatestats.exceptions import ClimateConfigError


def test_defaults() -> None:
    config = ClimateConfig.from_env()

    assert config.time_zone is None
    assert config.encoding == "utf-8"
    assert config.json_output is False
    assert config.resolve_tz() is None


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CLIMATE_TIME_ZONE", "America/Chicago")
    monkeypatch.setenv("CLIMATE_ENCODING", "latin-1")
    monkeypatch.setenv("CLIMATE_JSON_OUTPUT", "yes")

    config = ClimateConfig.from_env()

    assert config.time_zone == "America/Chicago"
    assert config.encoding == "latin-1"
    assert config.json_output is True
    assert config.resolve_tz() == ZoneInfo("America/Chicago")


def test_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv("CLIMATE_TIME_ZONE", "America/Chicago")
    monkeypatch.setenv("CLIMATE_JSON_OUTPUT", "true")

    config = ClimateConfig.from_env(time_zone="UTC", json_output=False)

    assert config.resolve_tz() is UTC
    assert config.json_output is False


@pytest.mark.parametrize("name", ["local", "LOCAL", ""])
def test_local_zone_names(name: str) -> None:
    assert ClimateConfig(time_zone=name).resolve_tz() is None


def test_unknown_zone_raises() -> None:
    with pytest.raises(ClimateConfigError):
        ClimateConfig(time_zone="Nowhere/Special").resolve_tz()
