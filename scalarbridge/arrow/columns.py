"""Column-at-a-time helpers for Arrow ``Decimal256`` data.

A column is a plain sequence of values.  Buffers follow Arrow's fixed-width
layout: one 32-byte little-endian two's-complement slot per row, no
padding between rows.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Type

from scalarbridge.arrow.conversions import (
    ConversionOutOfRange,
    i256_to_scalar,
    scalar_to_i256,
)
from scalarbridge.arrow.int256 import Int256
from scalarbridge.config import DEFAULT_SCALAR, INT256_BYTE_WIDTH
from scalarbridge.crypto.field import Scalar, scalar_type as lookup_scalar_type
from scalarbridge.numeric.i256 import I256, normalize_i256

logger = logging.getLogger(__name__)


def scalars_to_i256_column(values: Iterable[Scalar]) -> List[Int256]:
    """Convert every scalar in *values* to an i256."""
    return [scalar_to_i256(v) for v in values]


def i256_column_to_scalars(
    values: Iterable[Int256],
    scalar_type: Optional[Type[Scalar]] = None,
) -> List[Scalar]:
    """Convert a column of i256 values into scalars.

    Raises ``ConversionOutOfRange`` for the first row that does not fit;
    the row index is attached as ``row``.
    """
    if scalar_type is None:
        scalar_type = lookup_scalar_type(DEFAULT_SCALAR)
    out: List[Scalar] = []
    for row, value in enumerate(values):
        scalar = i256_to_scalar(value, scalar_type)
        if scalar is None:
            logger.debug("row %d out of range for %s", row, scalar_type.__name__)
            raise ConversionOutOfRange(value, scalar_type, row=row)
        out.append(scalar)
    logger.debug("converted %d i256 rows to %s", len(out), scalar_type.__name__)
    return out


def normalize_i256_column(values: Iterable[Int256]) -> List[I256]:
    return [normalize_i256(v) for v in values]


def encode_i256_buffer(values: Iterable[Int256]) -> bytes:
    """Pack *values* into a contiguous Decimal256 value buffer."""
    return b"".join(v.to_le_bytes() for v in values)


def decode_i256_buffer(data: bytes) -> List[Int256]:
    """Unpack a Decimal256 value buffer into i256 values."""
    if len(data) % INT256_BYTE_WIDTH:
        raise ValueError(
            f"Buffer length {len(data)} is not a multiple of {INT256_BYTE_WIDTH}"
        )
    view = memoryview(data)
    return [
        Int256.from_le_bytes(bytes(view[i : i + INT256_BYTE_WIDTH]))
        for i in range(0, len(data), INT256_BYTE_WIDTH)
    ]
