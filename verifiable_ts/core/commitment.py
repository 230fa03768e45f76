import hmac
import struct
from dataclasses import dataclass

from Crypto.Hash import keccak

from verifiable_ts.core.errors import InvalidParameterError
from verifiable_ts.core.time_series import TimeSeries

DIGEST_SIZE = 32

# u64 timestamp followed by the IEEE-754 bit pattern of the value, both big-endian
_PAIR_STRUCT = struct.Struct(">Qd")


@dataclass(frozen=True)
class CommitmentDigest:
    """@brief 32-byte Keccak-256 commitment to a raw time series."""

    digest: bytes

    def __post_init__(self) -> None:
        if len(self.digest) != DIGEST_SIZE:
            raise InvalidParameterError(
                f"commitment digest must be {DIGEST_SIZE} bytes, got {len(self.digest)}."
            )

    def hex(self) -> str:
        return self.digest.hex()

    def as_int(self) -> int:
        """@brief Digest read as a big-endian unsigned 256-bit integer."""
        return int.from_bytes(self.digest, "big")


def keccak256(data: bytes) -> bytes:
    hasher = keccak.new(digest_bits=256)
    hasher.update(data)
    return hasher.digest()


def commit(series: TimeSeries) -> CommitmentDigest:
    """@brief Hash every (timestamp, value) pair of a series in order.

    @param series Raw input series.
    @return Digest over the big-endian encoding of all pairs.
    """
    hasher = keccak.new(digest_bits=256)
    for timestamp, value in zip(series.timestamps, series.values.tolist()):
        hasher.update(_PAIR_STRUCT.pack(timestamp, value))
    return CommitmentDigest(hasher.digest())


def verify_commitment(series: TimeSeries, digest: CommitmentDigest | bytes) -> bool:
    """@brief Check that a revealed series matches a previously published digest.

    @param series Revealed series.
    @param digest Published commitment.
    @return True if the series hashes to `digest`.
    """
    expected = digest.digest if isinstance(digest, CommitmentDigest) else bytes(digest)
    return hmac.compare_digest(commit(series).digest, expected)
