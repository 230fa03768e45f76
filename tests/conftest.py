from unittest.mock import patch

import pytest


class InMemoryRedis:
    """@brief Minimal stand-in for the Redis list commands used by `LatencyRecord`."""

    def __init__(self) -> None:
        self.lists: dict[str, list[str]] = {}

    def pipeline(self) -> "InMemoryRedis":
        return self

    def execute(self) -> list:
        return []

    def rpush(self, key: str, *values) -> int:
        items = self.lists.setdefault(key, [])
        items.extend(repr(value) if isinstance(value, float) else str(value) for value in values)
        return len(items)

    def ltrim(self, key: str, start: int, end: int) -> bool:
        items = self.lists.get(key, [])
        self.lists[key] = items[start : None if end == -1 else end + 1]
        return True

    def lrange(self, key: str, start: int, end: int) -> list[str]:
        items = self.lists.get(key, [])
        return list(items[start : None if end == -1 else end + 1])

    def delete(self, *keys: str) -> int:
        return sum(1 for key in keys if self.lists.pop(key, None) is not None)


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch):
    """@brief Provide stable default env values for the test suite.

    @details
    Ensures local environment changes do not make tests flaky. Individual
    tests may still override these values with `monkeypatch.setenv(...)`.
    """
    monkeypatch.setenv("MAX_SERIES_LENGTH", "1000")
    monkeypatch.setenv("MAX_FORECAST_HORIZON", "100")
    monkeypatch.setenv("LATENCY_HISTORY_LIMIT", "10")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("REDIS_URL", "redis://redis:6379/0")


@pytest.fixture(autouse=True)
def redis_client():
    """@brief Route every `Redis.from_url` connection to one in-memory store per test."""
    client = InMemoryRedis()
    with patch("verifiable_ts.telemetry.latency.Redis.from_url", return_value=client):
        yield client
