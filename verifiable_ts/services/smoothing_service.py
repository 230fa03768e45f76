import logging

from verifiable_ts.core.commitment import commit
from verifiable_ts.core.fixed_point import encode_many
from verifiable_ts.core.time_series import TimeSeries
from verifiable_ts.schemas import EmaRequest, ForecastRequest, SeriesResponse
from verifiable_ts.services.errors import translate_errors

_LOGGER = logging.getLogger(__name__)


class SmoothingService:

    @staticmethod
    def _to_response(source: TimeSeries, result: TimeSeries) -> SeriesResponse:
        """@brief Encode a transformed series for the response.

        @param source Input series, used for the commitment.
        @param result Transformed series.
        @return Response with float and fixed-point values.
        """
        return SeriesResponse(
            timestamps=list(result.timestamps),
            values=result.values.tolist(),
            fixed_point_values=[word.value for word in encode_many(result.values)],
            values_hash=commit(source).as_int(),
        )

    def ema(self, payload: EmaRequest) -> SeriesResponse:
        """@brief Exponential moving average of a submitted series.

        @param payload Raw series payload with `alpha`.
        @return Smoothed series.
        """
        with translate_errors("exponential moving average"):
            series = payload.to_time_series()
            response = self._to_response(
                series, series.exponential_moving_average(payload.alpha)
            )

        _LOGGER.info("Computed EMA for %d points (alpha %s)", len(series), payload.alpha)
        return response

    def forecast(self, payload: ForecastRequest) -> SeriesResponse:
        """@brief Simple exponential smoothing forecast of a submitted series.

        @param payload Raw series payload with `alpha` and `horizon`.
        @return Smoothed series followed by `horizon` forecast points.
        """
        with translate_errors("exponential smoothing forecast"):
            series = payload.to_time_series()
            response = self._to_response(
                series,
                series.simple_exponential_smoothing(payload.alpha, payload.horizon),
            )

        _LOGGER.info(
            "Computed forecast for %d points (alpha %s, horizon %d)",
            len(series),
            payload.alpha,
            payload.horizon,
        )
        return response
