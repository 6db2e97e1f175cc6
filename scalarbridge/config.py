"""Global configuration for scalarbridge."""

import os

# ---------- Word layout ----------
# Multi-word integers are split into little-endian 64-bit limbs.
LIMB_BITS = 64
NUM_LIMBS = 4

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
I128_MIN = -(1 << 127)
I128_MAX = (1 << 127) - 1

# Arrow i256 / Decimal256: 32-byte two's-complement.
I256_MIN = -(1 << 255)
I256_MAX = (1 << 255) - 1
INT256_BYTE_WIDTH = 32

# ---------- Scalar field orders ----------
# Curve25519 (ristretto) group order l = 2^252 + 27742317777372353535851937790883648493
CURVE25519_ORDER = 2**252 + 27742317777372353535851937790883648493
# BLS12-381 scalar field r, used by Dory commitments
BLS12_381_ORDER = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
# BN254 scalar field r
BN254_ORDER = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# ---------- Defaults ----------
# Field used by the column helpers when none is passed explicitly.
DEFAULT_SCALAR = os.environ.get("SCALARBRIDGE_DEFAULT_SCALAR", "curve25519")
