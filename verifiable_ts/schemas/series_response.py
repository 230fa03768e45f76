from pydantic import BaseModel

from verifiable_ts.schemas.public_values import Uint256


class SeriesResponse(BaseModel):
    """@brief Transformed series returned by the smoothing endpoints.

    @var timestamps Timestamps of the transformed series (forecast included).
    @var values Transformed values as floats.
    @var fixed_point_values Fixed-point words of `values`, scaled by 10^18.
    @var values_hash Commitment digest of the input series as a big-endian integer.
    """

    timestamps: list[int]
    values: list[float]
    fixed_point_values: list[Uint256]
    values_hash: Uint256
