import math

from fastapi import HTTPException, status

from verifiable_ts.schemas.healthcheck import HealthCheckResponse, Metrics
from verifiable_ts.telemetry.latency import LatencyRecord


class HealthCheckService:
    def __init__(self, latency_record: LatencyRecord | None = None) -> None:
        """@brief Initialize healthcheck service dependencies.

        @param latency_record Optional latency repository backed by Redis.
        """
        self._latency_record = latency_record or LatencyRecord()

    @staticmethod
    def _compute_p95(latencies: list[float]) -> float:
        """@brief Compute P95 latency using nearest-rank method.

        @param latencies Latency samples in milliseconds.
        @return P95 latency. Returns 0.0 when list is empty.
        """
        if not latencies:
            return 0.0

        sorted_latencies = sorted(latencies)
        rank = max(1, math.ceil(0.95 * len(sorted_latencies)))
        return float(sorted_latencies[rank - 1])

    @classmethod
    def _metrics_from_latencies(cls, latencies: list[float]) -> Metrics:
        """@brief Summarise one route group's latency samples.

        @param latencies Latency samples in milliseconds.
        @return Average and P95 for the group, both 0.0 without samples.
        """
        if not latencies:
            return Metrics(avg=0.0, p95=0.0)

        average = float(sum(latencies) / len(latencies))
        return Metrics(
            avg=average,
            p95=cls._compute_p95(latencies),
        )

    def healthcheck(self) -> HealthCheckResponse:
        """@brief Build healthcheck response from the latency record.

        @return HealthCheckResponse with latency metrics per route group.
        @throws HTTPException HTTP 503 if telemetry cannot be read.
        """
        try:
            public_values_latencies = self._latency_record.get_latencies("public_values")
            smoothing_latencies = self._latency_record.get_latencies("smoothing")
        except Exception as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Telemetry unavailable for healthcheck.",
            ) from exc

        return HealthCheckResponse(
            status="ok",
            public_values_latency_ms=self._metrics_from_latencies(public_values_latencies),
            smoothing_latency_ms=self._metrics_from_latencies(smoothing_latencies),
        )
