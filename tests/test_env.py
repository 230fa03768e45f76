import logging

import pytest

from verifiable_ts.utils.env import (
    get_latency_history_limit,
    get_log_level,
    get_max_forecast_horizon,
    get_max_series_length,
    get_redis_url,
)


def test_env_defaults(monkeypatch: pytest.MonkeyPatch):
    for key in (
        "MAX_SERIES_LENGTH",
        "MAX_FORECAST_HORIZON",
        "LATENCY_HISTORY_LIMIT",
        "LOG_LEVEL",
        "REDIS_URL",
    ):
        monkeypatch.delenv(key, raising=False)

    assert get_max_series_length() == 100_000
    assert get_max_forecast_horizon() == 10_000
    assert get_latency_history_limit() == 100
    assert get_log_level() == logging.INFO
    assert get_redis_url() == "redis://redis:6379/0"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAX_SERIES_LENGTH", "50")
    monkeypatch.setenv("MAX_FORECAST_HORIZON", "0")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert get_max_series_length() == 50
    assert get_max_forecast_horizon() == 0
    assert get_log_level() == logging.DEBUG


def test_env_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAX_SERIES_LENGTH", "many")
    with pytest.raises(ValueError, match="MAX_SERIES_LENGTH must be an integer"):
        get_max_series_length()

    monkeypatch.setenv("LATENCY_HISTORY_LIMIT", "0")
    with pytest.raises(ValueError, match="LATENCY_HISTORY_LIMIT"):
        get_latency_history_limit()

    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        get_log_level()
