from __future__ import annotations

import math

import pytest

from pygarage.config import GarageConfig
from pygarage.exceptions import GarageConfigError


def test_defaults() -> None:
    config = GarageConfig()
    assert config.max_allowed_speed == 300.0
    assert config.log_level == "WARNING"


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_MAX_ALLOWED_SPEED", "180")
    monkeypatch.setenv("GARAGE_LOG_LEVEL", "debug")

    config = GarageConfig.from_env()

    assert config.max_allowed_speed == 180.0
    assert config.log_level == "DEBUG"


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_MAX_ALLOWED_SPEED", "180")
    config = GarageConfig.from_env(max_allowed_speed=90.0)
    assert config.max_allowed_speed == 90.0


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GARAGE_MAX_ALLOWED_SPEED", raising=False)
    monkeypatch.delenv("GARAGE_LOG_LEVEL", raising=False)
    assert GarageConfig.from_env() == GarageConfig()


def test_non_numeric_env_speed_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_MAX_ALLOWED_SPEED", "fast")
    with pytest.raises(GarageConfigError):
        GarageConfig.from_env()


@pytest.mark.parametrize("speed", [0, -50])
def test_non_positive_speed_raises(speed: float) -> None:
    with pytest.raises(GarageConfigError):
        GarageConfig(max_allowed_speed=speed)


def test_unknown_log_level_raises() -> None:
    with pytest.raises(GarageConfigError):
        GarageConfig(log_level="chatty")


@pytest.mark.parametrize("speed", [math.nan, math.inf])
def test_non_finite_speed_raises(speed: float) -> None:
    with pytest.raises(GarageConfigError):
        GarageConfig(max_allowed_speed=speed)


def test_from_env_nan_speed_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_MAX_ALLOWED_SPEED", "nan")
    with pytest.raises(GarageConfigError):
        GarageConfig.from_env()
