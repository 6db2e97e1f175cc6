"""Conversions between field scalars and Arrow ``i256``.

A scalar is read as a signed number (residues above ``MAX_SIGNED`` are
negative) and written into the i256 two's-complement range.  The reverse
direction only accepts the symmetric window

    [MIN_SUPPORTED, MAX_SUPPORTED] = [-MAX_SIGNED, MAX_SIGNED]

which is exactly the image of the forward direction, so the two
conversions are mutual inverses inside it and nowhere else.

The wrapping negation in ``scalar_to_i256`` is safe because every
``Scalar`` subclass guarantees ``MAX_SIGNED < 2^255`` at class creation
(see ``scalarbridge.crypto.field``).
"""

from __future__ import annotations

import functools
from typing import Optional, Tuple, Type, TypeVar

from scalarbridge.arrow.int256 import Int256
from scalarbridge.config import U64_MAX
from scalarbridge.crypto.field import Curve25519Scalar, Scalar

S = TypeVar("S", bound=Scalar)


class ConversionOutOfRange(ValueError):
    """Raised when an i256 lies outside the range a scalar field can hold."""

    def __init__(
        self,
        value: Int256,
        scalar_type: Type[Scalar],
        row: Optional[int] = None,
    ) -> None:
        self.value = value
        self.scalar_type = scalar_type
        self.row = row
        where = "" if row is None else f" (row {row})"
        super().__init__(
            f"i256 value {value.to_int()}{where} is outside the supported range "
            f"of {scalar_type.__name__}"
        )


def scalar_to_i256(value: Scalar) -> Int256:
    """Convert *value* to an i256 using its signed interpretation.  Never fails."""
    is_negative = value > type(value).MAX_SIGNED
    abs_scalar = -value if is_negative else value
    limbs = abs_scalar.to_limbs()

    low = limbs[0] | (limbs[1] << 64)
    # abs_scalar <= MAX_SIGNED < 2^255, so the top limb keeps bit 63 clear
    high = limbs[2] | (limbs[3] << 64)

    abs_i256 = Int256.from_parts(low, high)
    return abs_i256.wrapping_neg() if is_negative else abs_i256


@functools.lru_cache(maxsize=None)
def supported_range(scalar_type: Type[Scalar]) -> Tuple[Int256, Int256]:
    """Return ``(MIN_SUPPORTED, MAX_SUPPORTED)`` for *scalar_type*."""
    max_supported = scalar_to_i256(scalar_type.MAX_SIGNED)
    return -max_supported, max_supported


def i256_to_scalar(value: Int256, scalar_type: Type[S]) -> Optional[S]:
    """Convert *value* into *scalar_type*, or ``None`` if it is out of range."""
    min_supported, max_supported = supported_range(scalar_type)
    if value < min_supported or value > max_supported:
        return None

    # |MIN_SUPPORTED| == MAX_SUPPORTED, so negation cannot overflow here
    abs_value = -value if value.is_negative() else value
    low, high = abs_value.to_parts()
    limbs = (
        low & U64_MAX,
        low >> 64,
        high & U64_MAX,
        high >> 64,
    )

    scalar = scalar_type.from_limbs(limbs)
    return -scalar if value.is_negative() else scalar


def scalar_from_i256(value: Int256, scalar_type: Type[S]) -> S:
    """Like ``i256_to_scalar`` but raises ``ConversionOutOfRange`` instead of returning None."""
    scalar = i256_to_scalar(value, scalar_type)
    if scalar is None:
        raise ConversionOutOfRange(value, scalar_type)
    return scalar


# Bounds of the default (Curve25519) field, fixed at import.
MIN_SUPPORTED, MAX_SUPPORTED = supported_range(Curve25519Scalar)
