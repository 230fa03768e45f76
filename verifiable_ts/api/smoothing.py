from fastapi import APIRouter

from verifiable_ts.schemas import EmaRequest, ForecastRequest, SeriesResponse
from verifiable_ts.services.smoothing_service import SmoothingService

router = APIRouter(prefix="/smoothing", tags=["smoothing"])


@router.post("/ema", response_model=SeriesResponse)
def ema(payload: EmaRequest) -> SeriesResponse:
    return SmoothingService().ema(payload)


@router.post("/forecast", response_model=SeriesResponse)
def forecast(payload: ForecastRequest) -> SeriesResponse:
    """@brief Smooth a series and append a flat forecast.

    @param payload Series timestamps, values, `alpha` and `horizon`.
    @return Smoothed and forecast series.
    """
    return SmoothingService().forecast(payload)
