from verifiable_ts.schemas.healthcheck import HealthCheckResponse, Metrics
from verifiable_ts.schemas.public_values import (
    MovingAveragePublicValues,
    PublicValues,
    SummaryPublicValues,
)
from verifiable_ts.schemas.series_payload import (
    EmaRequest,
    ForecastRequest,
    MovingAverageRequest,
    SeriesData,
    SummaryRequest,
)
from verifiable_ts.schemas.series_response import SeriesResponse

__all__ = [
    "EmaRequest",
    "ForecastRequest",
    "HealthCheckResponse",
    "Metrics",
    "MovingAveragePublicValues",
    "MovingAverageRequest",
    "PublicValues",
    "SeriesData",
    "SeriesResponse",
    "SummaryPublicValues",
    "SummaryRequest",
]
