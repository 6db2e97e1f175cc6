"""Prime-field scalars F_p.

Every ``Scalar`` holds its canonical residue in [0, MODULUS).  Residues
above ``MAX_SIGNED = (MODULUS - 1) / 2`` are the field's "negative"
numbers and read as ``value - MODULUS``.

Concrete fields are declared by subclassing and setting ``MODULUS``:

    class MyScalar(Scalar):
        MODULUS = ...

Contract for subclasses
-----------------------
``MAX_SIGNED`` must be strictly below 2^255 so that its magnitude fits the
positive half of a 256-bit two's-complement integer.  The check runs once,
when the subclass is created; conversions rely on it and never re-check.
"""

from __future__ import annotations

import functools
from typing import Dict, Iterable, Tuple, Type, TypeVar

from scalarbridge.config import (
    BLS12_381_ORDER,
    BN254_ORDER,
    CURVE25519_ORDER,
    LIMB_BITS,
    NUM_LIMBS,
    U64_MAX,
)

S = TypeVar("S", bound="Scalar")

Limbs = Tuple[int, int, int, int]


@functools.total_ordering
class Scalar:
    """Element of a prime field, stored as its canonical residue."""

    MODULUS: int
    MAX_SIGNED: "Scalar"

    __slots__ = ("value",)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if "MODULUS" not in cls.__dict__:
            return
        p = cls.MODULUS
        if p < 3 or p % 2 == 0:
            raise ValueError(f"{cls.__name__}.MODULUS must be odd and > 2")
        if (p - 1) // 2 >= 1 << 255:
            raise ValueError(
                f"{cls.__name__}.MODULUS too large: MAX_SIGNED must be < 2^255"
            )
        cls.MAX_SIGNED = cls((p - 1) // 2)

    def __init__(self, value: int = 0) -> None:
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        self.value = value % type(self).MODULUS

    # ---- constructors ----

    @classmethod
    def zero(cls: Type[S]) -> S:
        return cls(0)

    @classmethod
    def one(cls: Type[S]) -> S:
        return cls(1)

    @classmethod
    def from_limbs(cls: Type[S], limbs: Iterable[int]) -> S:
        """Build a scalar from four little-endian u64 words.

        The words must encode a value strictly below ``MODULUS``; no
        reduction is performed.
        """
        words = tuple(limbs)
        if len(words) != NUM_LIMBS:
            raise ValueError(f"Expected {NUM_LIMBS} limbs, got {len(words)}")
        magnitude = 0
        for i, word in enumerate(words):
            if not 0 <= word <= U64_MAX:
                raise ValueError(f"Limb {i} out of u64 range: {word}")
            magnitude |= word << (LIMB_BITS * i)
        if magnitude >= cls.MODULUS:
            raise ValueError(f"Limbs encode a value >= {cls.__name__}.MODULUS")
        return cls(magnitude)

    # ---- export ----

    def to_limbs(self) -> Limbs:
        """Canonical value as four little-endian u64 words."""
        v = self.value
        return (
            v & U64_MAX,
            (v >> 64) & U64_MAX,
            (v >> 128) & U64_MAX,
            (v >> 192) & U64_MAX,
        )

    def is_negative(self) -> bool:
        return self.value > type(self).MAX_SIGNED.value

    def to_signed_int(self) -> int:
        """Signed reading of the residue: value, or value - MODULUS."""
        if self.is_negative():
            return self.value - type(self).MODULUS
        return self.value

    # ---- arithmetic ----

    def _coerce(self, other):
        cls = type(self)
        if isinstance(other, cls):
            return other
        if isinstance(other, int):
            return cls(other)
        return NotImplemented

    def __neg__(self: S) -> S:
        return type(self)(-self.value)

    def __add__(self: S, other) -> S:
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return type(self)(self.value + o.value)

    __radd__ = __add__

    def __sub__(self: S, other) -> S:
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return type(self)(self.value - o.value)

    def __mul__(self: S, other) -> S:
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return type(self)(self.value * o.value)

    __rmul__ = __mul__

    # ---- comparison ----

    def __eq__(self, other) -> bool:
        if isinstance(other, type(self)):
            return self.value == other.value
        if isinstance(other, int):
            # Only the canonical residue matches, so hashes agree with int.
            return self.value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class Curve25519Scalar(Scalar):
    """Scalar field of the Curve25519 (ristretto) group."""

    MODULUS = CURVE25519_ORDER


class DoryScalar(Scalar):
    """BLS12-381 scalar field, used by Dory commitments."""

    MODULUS = BLS12_381_ORDER


class BN254Scalar(Scalar):
    MODULUS = BN254_ORDER


SCALAR_TYPES: Dict[str, Type[Scalar]] = {
    "curve25519": Curve25519Scalar,
    "dory": DoryScalar,
    "bn254": BN254Scalar,
}


def scalar_type(name: str) -> Type[Scalar]:
    """Return the scalar class registered under *name*."""
    try:
        return SCALAR_TYPES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(SCALAR_TYPES))
        raise ValueError(f"Unknown scalar field '{name}' (known: {known})") from None
