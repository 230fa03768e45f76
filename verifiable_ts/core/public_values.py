from verifiable_ts.core.commitment import commit
from verifiable_ts.core.fixed_point import encode, encode_many
from verifiable_ts.core.time_series import TimeSeries
from verifiable_ts.schemas.public_values import (
    MovingAveragePublicValues,
    PublicValues,
    SummaryPublicValues,
)


def build_summary_public_values(series: TimeSeries) -> SummaryPublicValues:
    """@brief Assemble the summary record for a series.

    @param series Validated input series.
    @return Record with boundaries, commitment and fixed-point mean, median and std_dev.
    @throws TimeSeriesError If a statistic is not finite or cannot be encoded.
    """
    return SummaryPublicValues(
        start_timestamp=series.start_timestamp,
        end_timestamp=series.end_timestamp,
        values_hash=commit(series).as_int(),
        mean=encode(series.mean()).value,
        median=encode(series.median()).value,
        std_dev=encode(series.std_dev()).value,
    )


def build_moving_average_public_values(
    series: TimeSeries, window_size: int
) -> MovingAveragePublicValues:
    """@brief Assemble the moving-average record for a series.

    @details The commitment and the timestamp boundaries always describe the
    input series, never the averaged one.

    @param series Validated input series.
    @param window_size Trailing window length (>= 1).
    @return Record with one fixed-point word per input point.
    @throws TimeSeriesError If the window is invalid or an average cannot be encoded.
    """
    averaged = series.moving_average(window_size)

    return MovingAveragePublicValues(
        start_timestamp=series.start_timestamp,
        end_timestamp=series.end_timestamp,
        values_hash=commit(series).as_int(),
        window_size=window_size,
        moving_averages=[word.value for word in encode_many(averaged.values)],
    )


def assemble_public_values(
    series: TimeSeries, window_size: int | None = None
) -> PublicValues:
    """@brief Build the record for the requested mode.

    @param series Validated input series.
    @param window_size Moving-average window; `None` selects summary mode.
    @return Summary or moving-average record.
    """
    if window_size is None:
        return build_summary_public_values(series)
    return build_moving_average_public_values(series, window_size)
