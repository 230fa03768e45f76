from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

Uint256 = Annotated[int, Field(ge=0, lt=2**256)]


class _PublicValuesRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    def canonical_fields(self) -> tuple[Any, ...]:
        """@brief Field values in the fixed order expected by the verifier.

        @details The trailing `kind` tag is not part of the verifier layout.

        @return Tuple of field values in declaration order, tag excluded.
        """
        return tuple(
            getattr(self, name) for name in type(self).model_fields if name != "kind"
        )


class SummaryPublicValues(_PublicValuesRecord):
    """@brief Summary statistics committed for a series.

    @var start_timestamp First timestamp of the input series.
    @var end_timestamp Last timestamp of the input series.
    @var values_hash Commitment digest of the input series as a big-endian integer.
    @var mean Fixed-point mean.
    @var median Fixed-point median.
    @var std_dev Fixed-point population standard deviation.
    """

    start_timestamp: Uint256
    end_timestamp: Uint256
    values_hash: Uint256
    mean: Uint256
    median: Uint256
    std_dev: Uint256
    kind: Literal["summary"] = "summary"


class MovingAveragePublicValues(_PublicValuesRecord):
    """@brief Moving-average series committed for a series.

    @var window_size Raw window size (not fixed-point encoded).
    @var moving_averages Fixed-point moving average, one word per input point.
    """

    start_timestamp: Uint256
    end_timestamp: Uint256
    values_hash: Uint256
    window_size: Uint256
    moving_averages: list[Uint256]
    kind: Literal["moving_average"] = "moving_average"


PublicValues = Annotated[
    Union[SummaryPublicValues, MovingAveragePublicValues],
    Field(discriminator="kind"),
]
