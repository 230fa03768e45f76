import math
from typing import Iterable, Sequence

import numpy as np

from verifiable_ts.core.errors import (
    EmptySeriesError,
    InvalidParameterError,
    LengthMismatchError,
    NonFiniteValueError,
    UnsortedTimestampsError,
)

MAX_TIMESTAMP = 2**64 - 1


def _sequential_sum(values: np.ndarray) -> float:
    """@brief Sum values strictly left to right.

    @details `np.sum` uses pairwise reduction, whose rounding differs from a
    plain fold; `np.add.accumulate` does not.

    @param values Non-empty float64 array.
    @return Sum of the values.
    """
    return float(np.add.accumulate(values)[-1])


def _ensure_finite(name: str, result: float) -> float:
    if not math.isfinite(result):
        raise NonFiniteValueError(f"{name} is not finite for this series.")
    return result


def _coerce_values(values: Iterable[float]) -> np.ndarray:
    if isinstance(values, np.ndarray) and values.dtype.kind in "biuf":
        items = values
    else:
        try:
            items = list(values)
        except TypeError as exc:
            raise InvalidParameterError("values must be a sequence of numbers.") from exc
        if any(isinstance(item, (str, bytes, bytearray)) for item in items):
            raise InvalidParameterError("values must contain only float or int values.")

    try:
        array = np.array(items, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError("values must contain only float or int values.") from exc

    if array.ndim != 1:
        raise InvalidParameterError("values must be a one-dimensional sequence.")

    return array


def _coerce_timestamps(timestamps: Sequence[int]) -> tuple[int, ...]:
    coerced: list[int] = []
    for index, timestamp in enumerate(timestamps):
        if isinstance(timestamp, (bool, np.bool_)) or not isinstance(
            timestamp, (int, np.integer)
        ):
            raise InvalidParameterError(
                f"timestamp at index {index} must be an integer Unix timestamp."
            )
        timestamp = int(timestamp)
        if timestamp < 0 or timestamp > MAX_TIMESTAMP:
            raise InvalidParameterError(
                f"timestamp at index {index} must be between 0 and {MAX_TIMESTAMP}."
            )
        coerced.append(timestamp)
    return tuple(coerced)


def _validate_alpha(alpha: float) -> float:
    if isinstance(alpha, (bool, np.bool_)) or not isinstance(
        alpha, (int, float, np.integer, np.floating)
    ):
        raise InvalidParameterError("alpha must be a number.")

    alpha = float(alpha)
    if not 0.0 <= alpha <= 1.0:
        raise InvalidParameterError("alpha must be between 0 and 1.")
    return alpha


def _validate_count(name: str, value: int, minimum: int) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an integer.")
    if value < minimum:
        raise InvalidParameterError(f"{name} must be greater than or equal to {minimum}.")
    return int(value)


class TimeSeries:
    """@brief Immutable pair of equal-length timestamp and value sequences.

    @details Timestamps are unsigned 64-bit Unix timestamps in non-decreasing
    order, values are finite IEEE-754 doubles. Every statistic is computed
    with a fixed summation order so that independent implementations obtain
    bit-identical results. Transforms return new instances.
    """

    __slots__ = ("_timestamps", "_values")

    def __init__(self, timestamps: Sequence[int], values: Iterable[float]) -> None:
        """@brief Validate and store a time series.

        @param timestamps Unix timestamps, one per value.
        @param values Numeric observations.
        @throws LengthMismatchError If both sequences differ in length.
        @throws EmptySeriesError If the sequences are empty.
        @throws InvalidParameterError If a timestamp or value has the wrong type or range.
        @throws NonFiniteValueError If a value is NaN or infinite.
        @throws UnsortedTimestampsError If timestamps decrease anywhere.
        """
        try:
            timestamps = list(timestamps)
        except TypeError as exc:
            raise InvalidParameterError("timestamps must be a sequence of integers.") from exc
        array = _coerce_values(values)

        if len(timestamps) != len(array):
            raise LengthMismatchError(
                "timestamps and values must have the same length "
                f"(got {len(timestamps)} and {len(array)})."
            )
        if not timestamps:
            raise EmptySeriesError("time series must contain at least one data point.")

        coerced = _coerce_timestamps(timestamps)

        finite = np.isfinite(array)
        if not finite.all():
            index = int(np.argmin(finite))
            raise NonFiniteValueError(f"value at index {index} is NaN or infinite.")

        for index, (prev, curr) in enumerate(zip(coerced, coerced[1:]), start=1):
            if curr < prev:
                raise UnsortedTimestampsError(
                    f"timestamp at index {index} is earlier than the previous one."
                )

        array.setflags(write=False)
        self._timestamps = coerced
        self._values = array

    @property
    def timestamps(self) -> tuple[int, ...]:
        return self._timestamps

    @property
    def values(self) -> np.ndarray:
        """@brief Read-only float64 view of the observations."""
        return self._values

    @property
    def start_timestamp(self) -> int:
        return self._timestamps[0] if self._timestamps else 0

    @property
    def end_timestamp(self) -> int:
        return self._timestamps[-1] if self._timestamps else 0

    def __len__(self) -> int:
        return len(self._timestamps)

    def __repr__(self) -> str:
        return (
            f"TimeSeries(n={len(self)}, start={self.start_timestamp}, "
            f"end={self.end_timestamp})"
        )

    def mean(self) -> float:
        """@brief Arithmetic mean of the values.

        @return Sequential sum divided by the number of points.
        @throws NonFiniteValueError If the sum overflows.
        """
        return _ensure_finite("mean", _sequential_sum(self._values) / len(self._values))

    def median(self) -> float:
        """@brief Median of the values.

        @return Middle element for odd lengths, mean of the two middle ones otherwise.
        """
        ordered = np.sort(self._values)
        mid = len(ordered) // 2
        if len(ordered) % 2 == 0:
            return _ensure_finite("median", (float(ordered[mid - 1]) + float(ordered[mid])) / 2.0)
        return float(ordered[mid])

    def std_dev(self) -> float:
        """@brief Population standard deviation (divisor `n`).

        @return Square root of the mean squared deviation from the mean.
        @throws NonFiniteValueError If intermediate results overflow.
        """
        mean = self.mean()
        deviations = self._values - mean
        variance = _sequential_sum(deviations * deviations) / len(self._values)
        return _ensure_finite("std_dev", math.sqrt(variance))

    def moving_average(self, window_size: int) -> "TimeSeries":
        """@brief Trailing moving average with a window shrinking at the start.

        @param window_size Number of points averaged at each position (>= 1).
        @return New series with the same timestamps and one average per point.
        @throws InvalidParameterError If `window_size` is not a positive integer.
        """
        window_size = _validate_count("window_size", window_size, 1)

        averages = np.empty(len(self._values), dtype=np.float64)

        # Windows anchored at index 0 are prefixes of one left fold.
        head = min(window_size, len(self._values))
        prefix_sums = np.add.accumulate(self._values[:head])
        averages[:head] = prefix_sums / np.arange(1, head + 1, dtype=np.float64)

        for index in range(head, len(self._values)):
            window = self._values[index - window_size + 1 : index + 1]
            averages[index] = _sequential_sum(window) / window_size

        return TimeSeries(self._timestamps, averages)

    def _smooth(self, alpha: float) -> list[float]:
        values = self._values.tolist()
        smoothed = [values[0]]
        for value in values[1:]:
            smoothed.append(alpha * value + (1.0 - alpha) * smoothed[-1])
        return smoothed

    def exponential_moving_average(self, alpha: float) -> "TimeSeries":
        """@brief Exponential moving average seeded with the first value.

        @param alpha Smoothing factor in [0, 1].
        @return New series with the same timestamps.
        @throws InvalidParameterError If `alpha` is outside [0, 1].
        """
        alpha = _validate_alpha(alpha)
        return TimeSeries(self._timestamps, self._smooth(alpha))

    def simple_exponential_smoothing(self, alpha: float, horizon: int) -> "TimeSeries":
        """@brief Smooth the series and extend it with a flat forecast.

        @details The forecast repeats the last smoothed value. Forecast
        timestamps advance by the spacing of the first two points, or by 1
        for a single-point series.

        @param alpha Smoothing factor in [0, 1].
        @param horizon Number of forecast points to append (>= 0).
        @return New series of length `n + horizon`.
        @throws InvalidParameterError If a parameter is out of range or the
        forecast timestamps exceed the unsigned 64-bit range.
        """
        alpha = _validate_alpha(alpha)
        horizon = _validate_count("horizon", horizon, 0)

        smoothed = self._smooth(alpha)
        smoothed.extend([smoothed[-1]] * horizon)

        last = self._timestamps[-1]
        step = self._timestamps[1] - self._timestamps[0] if len(self) > 1 else 1
        if last + horizon * step > MAX_TIMESTAMP:
            raise InvalidParameterError(
                "forecast timestamps exceed the unsigned 64-bit range."
            )
        forecast_timestamps = [last + k * step for k in range(1, horizon + 1)]

        return TimeSeries(self._timestamps + tuple(forecast_timestamps), smoothed)
