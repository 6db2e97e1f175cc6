"""Test utilities: test-only scalar fields, reverse conversions, i256 sampling."""

import random

from scalarbridge.arrow.conversions import i256_to_scalar, scalar_to_i256, supported_range
from scalarbridge.arrow.int256 import Int256
from scalarbridge.config import CURVE25519_ORDER
from scalarbridge.crypto.field import Scalar


class MockScalar(Scalar):
    """Test-only field sharing the Curve25519 order."""

    MODULUS = CURVE25519_ORDER


class SmallScalar(Scalar):
    MODULUS = 2**61 - 1  # Mersenne prime M61


def to_i256(value: Scalar) -> Int256:
    return scalar_to_i256(value)


def try_from_i256(value: Int256, scalar_type=MockScalar):
    """Fallible conversion used to drive the round-trip checks."""
    return i256_to_scalar(value, scalar_type)


def random_i256(rng: random.Random, scalar_type=MockScalar) -> Int256:
    """Uniform i256 inside the supported window of *scalar_type*."""
    lo, hi = supported_range(scalar_type)
    return Int256.from_int(rng.randint(lo.to_int(), hi.to_int()))
