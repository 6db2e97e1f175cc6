"""Tests for prime-field scalars."""

import pytest

from scalarbridge.config import BLS12_381_ORDER, BN254_ORDER, CURVE25519_ORDER
from scalarbridge.crypto.field import (
    BN254Scalar,
    Curve25519Scalar,
    DoryScalar,
    Scalar,
    scalar_type,
)
from tests.utils import MockScalar, SmallScalar


def test_add_basic():
    assert Curve25519Scalar(2) + Curve25519Scalar(3) == 5


def test_add_wrap():
    assert Curve25519Scalar(CURVE25519_ORDER - 1) + 2 == 1


def test_sub_underflow():
    assert Curve25519Scalar(0) - 1 == CURVE25519_ORDER - 1


def test_mul_wrap():
    a = CURVE25519_ORDER - 1
    assert Curve25519Scalar(a) * 2 == (a * 2) % CURVE25519_ORDER


def test_neg():
    a = Curve25519Scalar(42)
    assert a + (-a) == 0
    assert -Curve25519Scalar(0) == Curve25519Scalar(0)


def test_negative_int_is_reduced():
    assert Curve25519Scalar(-12345).value == CURVE25519_ORDER - 12345
    assert Curve25519Scalar(-12345) == -Curve25519Scalar(12345)


def test_max_signed():
    assert Curve25519Scalar.MAX_SIGNED.value == (CURVE25519_ORDER - 1) // 2
    assert DoryScalar.MAX_SIGNED.value == (BLS12_381_ORDER - 1) // 2
    assert BN254Scalar.MAX_SIGNED.value == (BN254_ORDER - 1) // 2
    assert isinstance(DoryScalar.MAX_SIGNED, DoryScalar)


def test_is_negative_boundary():
    m = Curve25519Scalar.MAX_SIGNED
    assert not m.is_negative()
    assert (m + 1).is_negative()
    assert (m + 1).to_signed_int() == -m.value
    assert Curve25519Scalar(-1).to_signed_int() == -1


def test_ordering_uses_canonical_value():
    assert Curve25519Scalar(1) < Curve25519Scalar(2)
    assert Curve25519Scalar(-1) > Curve25519Scalar.MAX_SIGNED
    assert sorted([Curve25519Scalar(3), Curve25519Scalar(1)]) == [1, 3]


def test_different_fields_not_equal():
    assert Curve25519Scalar(7) != DoryScalar(7)
    assert Curve25519Scalar(7) != MockScalar(7)


def test_limbs_roundtrip_edges():
    for v in (0, 1, (1 << 64) - 1, 1 << 64, CURVE25519_ORDER - 1):
        s = Curve25519Scalar(v)
        assert Curve25519Scalar.from_limbs(s.to_limbs()) == s


def test_to_limbs_little_endian():
    s = Curve25519Scalar((3 << 192) | (2 << 128) | (1 << 64) | 9)
    assert s.to_limbs() == (9, 1, 2, 3)


def test_from_limbs_rejects_non_canonical():
    modulus_limbs = (
        CURVE25519_ORDER & ((1 << 64) - 1),
        (CURVE25519_ORDER >> 64) & ((1 << 64) - 1),
        (CURVE25519_ORDER >> 128) & ((1 << 64) - 1),
        CURVE25519_ORDER >> 192,
    )
    with pytest.raises(ValueError, match="MODULUS"):
        Curve25519Scalar.from_limbs(modulus_limbs)


def test_from_limbs_rejects_bad_shape():
    with pytest.raises(ValueError, match="Expected 4 limbs"):
        Curve25519Scalar.from_limbs([1, 2, 3])
    with pytest.raises(ValueError, match="u64"):
        Curve25519Scalar.from_limbs([1 << 64, 0, 0, 0])
    with pytest.raises(ValueError, match="u64"):
        Curve25519Scalar.from_limbs([-1, 0, 0, 0])


def test_small_field_uses_low_limb_only():
    s = SmallScalar(-1)
    assert s.to_limbs() == (2**61 - 2, 0, 0, 0)


def test_oversized_modulus_rejected_at_class_creation():
    with pytest.raises(ValueError, match="MAX_SIGNED"):

        class TooWide(Scalar):
            MODULUS = (1 << 256) + 297  # wider than four limbs


def test_even_modulus_rejected():
    with pytest.raises(ValueError, match="odd and > 2"):

        class Even(Scalar):
            MODULUS = 1 << 200


def test_scalar_type_lookup():
    assert scalar_type("curve25519") is Curve25519Scalar
    assert scalar_type("Dory") is DoryScalar
    assert scalar_type("bn254") is BN254Scalar
    with pytest.raises(ValueError, match="Unknown scalar field"):
        scalar_type("secp256k1")


def test_modulus_one_rejected():
    with pytest.raises(ValueError, match="odd and > 2"):

        class One(Scalar):
            MODULUS = 1


def test_hash_agrees_with_int_equality():
    a = Curve25519Scalar(5)
    assert a == 5
    assert hash(a) == hash(5)
    assert a in {5}
    assert {a: "x"}[5] == "x"


def test_non_canonical_int_not_equal():
    assert Curve25519Scalar(5) != 5 + CURVE25519_ORDER
    assert Curve25519Scalar(-1) != -1


def test_scalars_dedupe_in_set():
    assert len({Curve25519Scalar(3), Curve25519Scalar(3 + CURVE25519_ORDER)}) == 1


def test_non_int_value_rejected():
    with pytest.raises(TypeError, match="float"):
        Curve25519Scalar(1.5)
    with pytest.raises(TypeError, match="str"):
        Curve25519Scalar("7")
