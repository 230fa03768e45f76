import logging
import os

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _get_int_env(key: str, default: int, minimum: int) -> int:
    """@brief Read an integer environment variable with a lower bound.

    @param key Environment variable name.
    @param default Value used when the variable is unset or empty.
    @param minimum Smallest accepted value.
    @return Parsed integer.
    @throws ValueError If the value is not an integer or is below `minimum`.
    """
    raw = os.getenv(key, "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got '{raw}'.") from exc

    if value < minimum:
        raise ValueError(f"{key} must be greater than or equal to {minimum}.")
    return value


def get_log_level() -> int:
    """@brief Return the logging level configured for the application.

    @return Numeric level from `LOG_LEVEL` (default `INFO`).
    @throws ValueError If the level name is not a standard logging level.
    """
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if name not in _LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}.")
    return getattr(logging, name)


def get_max_series_length() -> int:
    """@brief Return the maximum number of points accepted per request.

    @return Integer from `MAX_SERIES_LENGTH` (default `100000`).
    """
    return _get_int_env("MAX_SERIES_LENGTH", 100_000, 1)


def get_max_forecast_horizon() -> int:
    """@brief Return the maximum forecast horizon accepted per request.

    @return Integer from `MAX_FORECAST_HORIZON` (default `10000`).
    """
    return _get_int_env("MAX_FORECAST_HORIZON", 10_000, 0)


def get_latency_history_limit() -> int:
    """@brief Return max number of latency samples retained per route group.

    @return Integer history limit from `LATENCY_HISTORY_LIMIT` (default `100`).
    """
    return _get_int_env("LATENCY_HISTORY_LIMIT", 100, 1)


def get_redis_url() -> str:
    """@brief Return the Redis URL holding the shared latency history.

    @return Redis URL from `REDIS_URL` (default `redis://redis:6379/0`).
    """
    return os.getenv("REDIS_URL", "redis://redis:6379/0")
