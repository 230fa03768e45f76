from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from verifiable_ts.core.time_series import TimeSeries
from verifiable_ts.utils.env import get_max_forecast_horizon, get_max_series_length


class SeriesData(BaseModel):
    """@brief Raw series submitted as parallel `timestamps`/`values` arrays.

    @note Validation rules:
    only element types and the configured maximum length are checked here.
    Length agreement, ordering, finiteness and emptiness are checked by
    `TimeSeries` so that clients receive the precise error kind.
    """

    timestamps: list[int] = Field(
        ...,
        description="Unix timestamps (unsigned 64-bit), non-decreasing",
    )
    values: list[float] = Field(
        ...,
        description="Observations, one per timestamp",
    )

    @field_validator("timestamps", mode="before")
    @classmethod
    def validate_timestamps(cls, timestamps: Any) -> Any:
        """@brief Reject booleans, which would otherwise coerce to 0/1.

        @param timestamps Raw timestamps input.
        @return Unchanged input for standard int coercion.
        """
        if isinstance(timestamps, list):
            for timestamp in timestamps:
                if isinstance(timestamp, bool):
                    raise ValueError("Input list must contain only integer Unix timestamps.")
        return timestamps

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, values: Any) -> Any:
        """@brief Reject booleans, strings and missing entries.

        @param values Raw values input.
        @return Unchanged input for standard float coercion.
        """
        if isinstance(values, list):
            for value in values:
                if value is None:
                    raise ValueError("Input list cannot contain None values.")
                if isinstance(value, (bool, str)):
                    raise ValueError("Input list must contain only float or int values.")
        return values

    @model_validator(mode="after")
    def validate_size(self) -> "SeriesData":
        """@brief Enforce the configured maximum series length."""
        max_points = get_max_series_length()
        if max(len(self.timestamps), len(self.values)) > max_points:
            raise ValueError(f"Input list must contain at most {max_points} data points.")
        return self

    def to_time_series(self) -> TimeSeries:
        """@brief Convert the payload into a validated TimeSeries.

        @return TimeSeries built from the payload arrays.
        @throws TimeSeriesError If the arrays do not form a valid series.
        """
        return TimeSeries(self.timestamps, self.values)


class SummaryRequest(SeriesData):
    pass


class MovingAverageRequest(SeriesData):
    window_size: int = Field(..., description="Trailing window length, at least 1")


class EmaRequest(SeriesData):
    alpha: float = Field(..., description="Smoothing factor in [0, 1]")


class ForecastRequest(EmaRequest):
    horizon: int = Field(..., description="Number of forecast points to append")

    @model_validator(mode="after")
    def validate_horizon_limit(self) -> "ForecastRequest":
        """@brief Enforce the configured maximum forecast horizon."""
        max_horizon = get_max_forecast_horizon()
        if self.horizon > max_horizon:
            raise ValueError(f"horizon must be at most {max_horizon}.")
        return self
