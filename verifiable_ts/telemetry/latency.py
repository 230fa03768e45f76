from math import isfinite
from typing import Literal

from redis import Redis

from verifiable_ts.utils.env import get_latency_history_limit, get_redis_url

LatencyTarget = Literal["public_values", "smoothing"]


class LatencyRecord:

    _KEYS: dict[LatencyTarget, str] = {
        "public_values": "public_values_latencies",
        "smoothing": "smoothing_latencies",
    }

    def __init__(
        self,
        redis_client: Redis | None = None,
        redis_url: str | None = None,
        history_limit: int | None = None,
    ) -> None:
        """@brief Connect to Redis and set the number of samples kept per group.

        @param redis_client Optional pre-configured Redis client.
        @param redis_url Optional Redis URL. Falls back to `get_redis_url()`.
        @param history_limit Optional max history size per group.
        Falls back to `get_latency_history_limit()`.
        @throws ValueError If `history_limit` is less than 1.
        """
        url = redis_url or get_redis_url()

        if history_limit is None:
            history_limit = get_latency_history_limit()

        if history_limit < 1:
            raise ValueError("LATENCY_HISTORY_LIMIT must be greater than or equal to 1.")

        self._redis = redis_client or Redis.from_url(url, decode_responses=True)
        self._history_limit = history_limit

    def push_latency(self, target: LatencyTarget, latency_ms: float) -> None:
        """@brief Append a latency value and trim the group to its newest entries.

        @param target Latency bucket (`public_values` or `smoothing`).
        @param latency_ms Request latency in milliseconds.
        @throws ValueError If target is invalid or latency is not finite.
        """
        key = self._key_for(target)
        value = float(latency_ms)

        if not isfinite(value):
            raise ValueError("latency_ms must be a finite number.")

        pipeline = self._redis.pipeline()
        pipeline.rpush(key, value)
        pipeline.ltrim(key, -self._history_limit, -1)
        pipeline.execute()

    def get_latencies(self, target: LatencyTarget) -> list[float]:
        """@brief Read the latencies stored for a group, oldest first.

        @details Entries that do not parse as finite floats are skipped.

        @param target Latency bucket (`public_values` or `smoothing`).
        @return Latency values in milliseconds.
        @throws ValueError If target is invalid.
        """
        key = self._key_for(target)

        latencies: list[float] = []
        for value in self._redis.lrange(key, 0, -1):
            try:
                numeric = float(value)
            except (TypeError, ValueError):
                continue

            if isfinite(numeric):
                latencies.append(numeric)

        return latencies

    def clear(self) -> None:
        self._redis.delete(*self._KEYS.values())

    @classmethod
    def _key_for(cls, target: LatencyTarget) -> str:
        try:
            return cls._KEYS[target]
        except KeyError as exc:
            raise ValueError("target must be 'public_values' or 'smoothing'.") from exc
