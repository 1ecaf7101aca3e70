"""Integer reductions.

- `weighted_matrix_sum`: every row value times the full column sum, summed
- `random_window_residues`: sorted middle window of a seeded random sample
"""
from __future__ import annotations

import logging
from numbers import Integral
from typing import Sequence

import numpy as np

log = logging.getLogger(__name__)


def _as_ints(values: Sequence[int], name: str) -> list[int]:
    """Return `values` as Python ints (numpy integer scalars are accepted)."""
    out: list[int] = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise TypeError(f"{name} must be a flat sequence of integers, got {type(v).__name__}")
        out.append(int(v))
    return out


def weighted_matrix_sum(rows: Sequence[int], columns: Sequence[int]) -> int:
    """Return the sum over rows of ``row * sum(columns)``.

    Each square of a rows x columns board is worth row value times column
    value; summing the whole board equals every row value multiplied by the
    column total. The lengths of `rows` and `columns` may differ.

    Args:
        rows: Integer values assigned to the rows.
        columns: Integer values assigned to the columns.

    Returns:
        The exact total as a Python int; there is no 64-bit limit.

    Raises:
        TypeError: if either input holds a non-integer value.
    """
    row_values = _as_ints(rows, "rows")
    column_sum = sum(_as_ints(columns, "columns"))
    total = sum(r * column_sum for r in row_values)
    log.info("Weighted matrix sum over %d rows: %d", len(row_values), total)
    return total


def random_window_residues(
    seed: int = 0,
    count: int = 10,
    skip: int = 5,
    limit: int = 10,
    modulus: int = 1000,
) -> list[int]:
    """Return a sorted window of seeded random values reduced modulo `modulus`.

    Two samples are drawn from independently seeded PCG64 generators: `count`
    64-bit integers narrowed to their low 32 bits, and `count` 32-bit integers.
    The concatenation is made non-negative, sorted ascending, `skip` values are
    dropped, the next `limit` kept, and each is reduced modulo `modulus`.

    Args:
        seed: Seed for both generators.
        count: Size of each sample.
        skip: Number of smallest values to drop.
        limit: Window size.
        modulus: Divisor for the final remainder.

    Returns:
        List of at most `limit` ints in ``[0, modulus)``.
    """
    if count < 0 or skip < 0 or limit < 0:
        raise ValueError("count, skip and limit must be non-negative")
    if modulus < 1:
        raise ValueError(f"modulus must be >= 1, got {modulus}")

    i64 = np.iinfo(np.int64)
    i32 = np.iinfo(np.int32)

    longs = np.random.Generator(np.random.PCG64(seed)).integers(
        i64.min, i64.max, size=count, dtype=np.int64, endpoint=True
    )
    ints = np.random.Generator(np.random.PCG64(seed)).integers(
        i32.min, i32.max, size=count, dtype=np.int32, endpoint=True
    )

    # widen before abs() so int32 min stays positive
    values = np.concatenate([longs.astype(np.int32), ints]).astype(np.int64)
    window = np.sort(np.abs(values))[skip : skip + limit]
    return [int(v) for v in window % modulus]
