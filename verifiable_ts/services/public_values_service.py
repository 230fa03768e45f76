import logging

from verifiable_ts.core.public_values import (
    build_moving_average_public_values,
    build_summary_public_values,
)
from verifiable_ts.schemas import (
    MovingAveragePublicValues,
    MovingAverageRequest,
    SummaryPublicValues,
    SummaryRequest,
)
from verifiable_ts.services.errors import translate_errors

_LOGGER = logging.getLogger(__name__)


class PublicValuesService:

    def summary(self, payload: SummaryRequest) -> SummaryPublicValues:
        """@brief Compute the summary record for a submitted series.

        @param payload Raw series payload.
        @return Summary record with fixed-point mean, median and std_dev.
        @throws HTTPException HTTP 422 for invalid series, HTTP 500 otherwise.
        """
        with translate_errors("summary public values"):
            series = payload.to_time_series()
            record = build_summary_public_values(series)

        _LOGGER.info("Built summary public values for %d points", len(series))
        return record

    def moving_average(self, payload: MovingAverageRequest) -> MovingAveragePublicValues:
        """@brief Compute the moving-average record for a submitted series.

        @param payload Raw series payload with the window size.
        @return Moving-average record with one fixed-point word per point.
        @throws HTTPException HTTP 422 for invalid series or window, HTTP 500 otherwise.
        """
        with translate_errors("moving average public values"):
            series = payload.to_time_series()
            record = build_moving_average_public_values(series, payload.window_size)

        _LOGGER.info(
            "Built moving average public values for %d points (window %d)",
            len(series),
            payload.window_size,
        )
        return record
