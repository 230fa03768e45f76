"""Conversion between float64 magnitudes and 256-bit fixed-point words.

A fixed-point word holds ``round(|x| * 10**18)`` as an unsigned integer,
serialised big-endian into 32 bytes. The sign of ``x`` is dropped, so every
word is non-negative. Magnitudes are limited to the unsigned 128-bit range,
which occupies the low-order half of the word.
"""

import math
from dataclasses import dataclass
from typing import Iterable

from verifiable_ts.core.errors import (
    EncodingOverflowError,
    InvalidParameterError,
    NonFiniteValueError,
)

SCALE = 10**18
WORD_SIZE = 32
MAX_FIXED_POINT = 2**128 - 1

_FLOAT_SCALE = 1e18
_HALF_WORD = WORD_SIZE // 2


@dataclass(frozen=True)
class FixedPointValue:
    """@brief Unsigned fixed-point word scaled by 10^18."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidParameterError("fixed-point value must be an integer.")
        if self.value < 0:
            raise InvalidParameterError("fixed-point value cannot be negative.")
        if self.value >= 2 ** (8 * WORD_SIZE):
            raise EncodingOverflowError("fixed-point value does not fit in 256 bits.")

    def __int__(self) -> int:
        return self.value

    def to_bytes(self) -> bytes:
        """@brief Serialise as a 32-byte big-endian word, zero padded on the left."""
        return self.value.to_bytes(WORD_SIZE, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> "FixedPointValue":
        """@brief Parse a 32-byte big-endian word.

        @param data Exactly 32 bytes.
        @return Parsed fixed-point value.
        @throws InvalidParameterError If `data` is not 32 bytes long.
        """
        if len(data) != WORD_SIZE:
            raise InvalidParameterError(
                f"fixed-point word must be {WORD_SIZE} bytes, got {len(data)}."
            )
        return cls(int.from_bytes(data, "big"))


def encode(x: float) -> FixedPointValue:
    """@brief Encode the magnitude of a float as a fixed-point word.

    @details The product `|x| * 1e18` is taken in float64 and rounded half
    away from zero to an integer.

    @param x Finite number; its sign is discarded.
    @return Fixed-point word.
    @throws NonFiniteValueError If `x` is NaN or infinite.
    @throws EncodingOverflowError If the scaled magnitude exceeds 2^128 - 1.
    @throws InvalidParameterError If `x` is not a number.
    """
    if isinstance(x, (str, bytes, bytearray)):
        raise InvalidParameterError("only numbers can be fixed-point encoded.")

    try:
        x = float(x)
    except OverflowError as exc:
        raise EncodingOverflowError("value is too large for fixed-point encoding.") from exc
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError("only numbers can be fixed-point encoded.") from exc

    if not math.isfinite(x):
        raise NonFiniteValueError("cannot encode a NaN or infinite value.")

    scaled = abs(x) * _FLOAT_SCALE
    if not math.isfinite(scaled):
        raise EncodingOverflowError(f"{x!r} is too large for fixed-point encoding.")

    integral = math.floor(scaled)
    if scaled - integral >= 0.5:
        integral += 1

    if integral > MAX_FIXED_POINT:
        raise EncodingOverflowError(f"{x!r} is too large for fixed-point encoding.")

    return FixedPointValue(integral)


def decode(word: FixedPointValue | bytes | int) -> float:
    """@brief Decode a fixed-point word back to a float.

    @details Lossy: the result is only approximately equal to the encoded
    input and is never negative.

    @param word Fixed-point value, its 32-byte serialisation, or the raw integer.
    @return Magnitude as a float64.
    @throws EncodingOverflowError If the high-order half of the word is non-zero.
    """
    if isinstance(word, (bytes, bytearray)):
        word = FixedPointValue.from_bytes(bytes(word))
    elif not isinstance(word, FixedPointValue):
        word = FixedPointValue(word)

    raw = word.to_bytes()
    if any(raw[:_HALF_WORD]):
        raise EncodingOverflowError("fixed-point word exceeds the 128-bit magnitude range.")

    return float(int.from_bytes(raw[_HALF_WORD:], "big")) / _FLOAT_SCALE


def encode_many(values: Iterable[float]) -> list[FixedPointValue]:
    return [encode(value) for value in values]


def decode_many(words: Iterable[FixedPointValue | bytes | int]) -> list[float]:
    return [decode(word) for word in words]
