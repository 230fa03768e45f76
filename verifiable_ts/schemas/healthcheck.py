from pydantic import BaseModel


class Metrics(BaseModel):
    avg: float
    p95: float


class HealthCheckResponse(BaseModel):
    status: str
    public_values_latency_ms: Metrics
    smoothing_latency_ms: Metrics
