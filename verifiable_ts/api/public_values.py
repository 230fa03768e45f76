from fastapi import APIRouter

from verifiable_ts.schemas import (
    MovingAveragePublicValues,
    MovingAverageRequest,
    SummaryPublicValues,
    SummaryRequest,
)
from verifiable_ts.services.public_values_service import PublicValuesService

router = APIRouter(prefix="/public-values", tags=["public values"])


@router.post("/summary", response_model=SummaryPublicValues)
def summary(payload: SummaryRequest) -> SummaryPublicValues:
    """@brief Commit to a series and return its fixed-point summary statistics.

    @param payload Series timestamps and values.
    @return Summary public values record.
    """
    return PublicValuesService().summary(payload)


@router.post("/moving-average", response_model=MovingAveragePublicValues)
def moving_average(payload: MovingAverageRequest) -> MovingAveragePublicValues:
    """@brief Commit to a series and return its fixed-point moving average.

    @param payload Series timestamps, values and window size.
    @return Moving-average public values record.
    """
    return PublicValuesService().moving_average(payload)
