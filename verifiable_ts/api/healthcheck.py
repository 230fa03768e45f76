from fastapi import APIRouter

from verifiable_ts.schemas.healthcheck import HealthCheckResponse
from verifiable_ts.services.healthcheck import HealthCheckService

router = APIRouter(tags=["Health Check"])


@router.get("/healthcheck", response_model=HealthCheckResponse)
def healthcheck() -> HealthCheckResponse:
    """@brief Return API health and request latency metrics.

    @return HealthCheckResponse with latency metrics per route group.
    """
    return HealthCheckService().healthcheck()
