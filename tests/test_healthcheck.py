from unittest.mock import patch

from fastapi.testclient import TestClient

from verifiable_ts.main import app
from verifiable_ts.services.healthcheck import HealthCheckService
from verifiable_ts.telemetry.latency import LatencyRecord


client = TestClient(app)


def test_healthcheck_returns_latency_metrics():
    with patch(
        "verifiable_ts.services.healthcheck.LatencyRecord.get_latencies",
        side_effect=[[10.0, 20.0], [30.0, 40.0]],
    ):
        response = client.get("/healthcheck")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["public_values_latency_ms"] == {"avg": 15.0, "p95": 20.0}
    assert payload["smoothing_latency_ms"] == {"avg": 35.0, "p95": 40.0}


def test_healthcheck_reads_samples_stored_by_another_record(redis_client):
    """@brief Samples pushed through one connection are visible to the healthcheck.

    @details Each worker process builds its own `LatencyRecord`; the history
    lives in Redis, so the healthcheck reports samples from every worker.
    """
    LatencyRecord(redis_client=redis_client).push_latency("public_values", 12.0)
    LatencyRecord(redis_client=redis_client).push_latency("public_values", 18.0)

    response = client.get("/healthcheck")

    assert response.status_code == 200
    assert response.json()["public_values_latency_ms"] == {"avg": 15.0, "p95": 18.0}


def test_healthcheck_returns_zero_metrics_when_no_requests():
    response = client.get("/healthcheck")

    assert response.status_code == 200
    payload = response.json()
    assert payload["public_values_latency_ms"] == {"avg": 0.0, "p95": 0.0}
    assert payload["smoothing_latency_ms"] == {"avg": 0.0, "p95": 0.0}


def test_healthcheck_returns_503_when_redis_read_fails():
    with patch(
        "verifiable_ts.services.healthcheck.LatencyRecord.get_latencies",
        side_effect=RuntimeError("redis unavailable"),
    ):
        response = client.get("/healthcheck")

    assert response.status_code == 503
    assert response.json()["detail"] == "Telemetry unavailable for healthcheck."


def test_compute_p95_uses_nearest_rank():
    latencies = [float(v) for v in range(1, 21)]

    assert HealthCheckService._compute_p95(latencies) == 19.0
    assert HealthCheckService._compute_p95([]) == 0.0


def test_metrics_from_latencies_defaults_to_zero():
    metrics = HealthCheckService._metrics_from_latencies([])

    assert metrics.avg == 0.0
    assert metrics.p95 == 0.0
