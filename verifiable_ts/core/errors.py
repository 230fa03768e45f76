class TimeSeriesError(ValueError):
    """@brief Base class for every failure raised by the statistics core.

    @details Subclasses carry a stable `kind` identifier which the service
    layer forwards to clients as the error `type`.
    """

    kind = "time_series_error"


class EmptySeriesError(TimeSeriesError):
    kind = "empty_series"


class LengthMismatchError(TimeSeriesError):
    kind = "length_mismatch"


class InvalidParameterError(TimeSeriesError):
    kind = "invalid_parameter"


class NonFiniteValueError(TimeSeriesError):
    kind = "non_finite_value"


class EncodingOverflowError(TimeSeriesError):
    kind = "encoding_overflow"


class UnsortedTimestampsError(TimeSeriesError):
    kind = "unsorted_timestamps"
