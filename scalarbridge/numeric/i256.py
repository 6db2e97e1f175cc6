"""Four-limb storage form of a 256-bit signed integer.

``I256`` is the canonical numeric-storage record: four little-endian u64
words holding the full two's-complement bit pattern.  Unlike the scalar
conversion it accepts every i256 value.
"""

from __future__ import annotations

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from scalarbridge.arrow.int256 import Int256
from scalarbridge.config import LIMB_BITS, NUM_LIMBS, U64_MAX, U128_MAX


class I256(BaseModel):
    """Little-endian u64 limbs of a two's-complement 256-bit integer."""

    model_config = ConfigDict(frozen=True)

    limbs: Tuple[StrictInt, StrictInt, StrictInt, StrictInt]

    @field_validator("limbs")
    @classmethod
    def _check_limbs(cls, limbs: Tuple[int, ...]) -> Tuple[int, ...]:
        for i, word in enumerate(limbs):
            if not 0 <= word <= U64_MAX:
                raise ValueError(f"limb {i} out of u64 range: {word}")
        return limbs

    @classmethod
    def new(cls, limbs: Any) -> "I256":
        return cls(limbs=tuple(limbs))

    def to_int(self) -> int:
        """Signed value of the bit pattern."""
        bits = 0
        for i in range(NUM_LIMBS):
            bits |= self.limbs[i] << (LIMB_BITS * i)
        if bits >> 255:
            bits -= 1 << 256
        return bits


def normalize_i256(value: Int256) -> I256:
    """Reinterpret any i256 as four u64 words, bit for bit.  Never fails."""
    low, high = value.to_parts()
    high_bits = high & U128_MAX
    return I256.new(
        [
            low & U64_MAX,
            low >> 64,
            high_bits & U64_MAX,
            high_bits >> 64,
        ]
    )
