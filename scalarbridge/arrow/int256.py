"""Arrow ``i256``: 256-bit two's-complement signed integer.

The value is held as two halves, mirroring Arrow's in-memory layout:

  low  – unsigned 128-bit, bits 0..127
  high – signed 128-bit, bits 128..255 (carries the sign)

so that ``value = (high << 128) | low`` and the range is [-2^255, 2^255 - 1].
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Tuple

from scalarbridge.config import (
    I128_MAX,
    I128_MIN,
    I256_MAX,
    I256_MIN,
    INT256_BYTE_WIDTH,
    U128_MAX,
)


@functools.total_ordering
@dataclass(frozen=True)
class Int256:
    """Immutable 256-bit signed integer split into (low, high) halves."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if not 0 <= self.low <= U128_MAX:
            raise ValueError(f"low half out of u128 range: {self.low}")
        if not I128_MIN <= self.high <= I128_MAX:
            raise ValueError(f"high half out of i128 range: {self.high}")

    # ---- construction ----

    @classmethod
    def from_parts(cls, low: int, high: int) -> "Int256":
        return cls(low=low, high=high)

    @classmethod
    def from_int(cls, value: int) -> "Int256":
        """Build from a Python int; raises ``OverflowError`` outside the i256 range."""
        if not I256_MIN <= value <= I256_MAX:
            raise OverflowError(f"{value} does not fit in i256")
        return cls(low=value & U128_MAX, high=value >> 128)

    @classmethod
    def from_le_bytes(cls, data: bytes) -> "Int256":
        """Decode Arrow's 32-byte little-endian two's-complement layout."""
        if len(data) != INT256_BYTE_WIDTH:
            raise ValueError(f"Expected {INT256_BYTE_WIDTH} bytes, got {len(data)}")
        return cls.from_int(int.from_bytes(data, "little", signed=True))

    # ---- export ----

    def to_parts(self) -> Tuple[int, int]:
        return self.low, self.high

    def to_int(self) -> int:
        return (self.high << 128) | self.low

    def to_le_bytes(self) -> bytes:
        return self.to_int().to_bytes(INT256_BYTE_WIDTH, "little", signed=True)

    # ---- arithmetic ----

    def is_negative(self) -> bool:
        return self.high < 0

    def wrapping_neg(self) -> "Int256":
        """Two's-complement negation modulo 2^256 (MIN maps to itself)."""
        bits = (-self.to_int()) & ((1 << 256) - 1)
        if bits >> 255:
            bits -= 1 << 256
        return Int256.from_int(bits)

    def __neg__(self) -> "Int256":
        return Int256.from_int(-self.to_int())

    def __add__(self, other: "Int256") -> "Int256":
        if not isinstance(other, Int256):
            return NotImplemented
        return Int256.from_int(self.to_int() + other.to_int())

    def __sub__(self, other: "Int256") -> "Int256":
        if not isinstance(other, Int256):
            return NotImplemented
        return Int256.from_int(self.to_int() - other.to_int())

    # ---- ordering ----

    def __lt__(self, other: "Int256") -> bool:
        if not isinstance(other, Int256):
            return NotImplemented
        # high is signed and low unsigned, so the pair orders lexicographically.
        return (self.high, self.low) < (other.high, other.low)

    def __int__(self) -> int:
        return self.to_int()


INT256_MIN = Int256.from_int(I256_MIN)
INT256_MAX = Int256.from_int(I256_MAX)
INT256_ZERO = Int256(low=0, high=0)
