# -------------------------------------
# digit permutations
# -------------------------------------
"""
Cartesian grid of integer digits.

perm([m1, ..., mn]) enumerates every combination of integers with
column i ranging over 0..mi. The first column cycles fastest and the
last slowest, so for [1, 1]:

    0 0
    1 0
    0 1
    1 1

Digit positions in nodal types are row numbers of this grid, so the
order must not change.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["perm", "strides"]


def strides(maxima: Sequence[int]) -> list[int]:
    """Row stride of each column: product of the sizes of the columns before it."""
    out = []
    acc = 1
    for m in maxima:
        out.append(acc)
        acc *= int(m) + 1
    return out


def perm(max: Sequence[int] = (1, 1)) -> np.ndarray:
    """
    Return the permutation grid for `max` as an int array of shape
    (prod(max + 1), len(max)).

    An empty `max` gives a single empty row.
    """
    maxima = [int(m) for m in max]
    if any(m < 0 for m in maxima):
        raise ValueError(f"maxima must be >= 0, got {maxima}")

    sizes = [m + 1 for m in maxima]
    nrows = int(np.prod(sizes, dtype=np.int64))
    rows = np.arange(nrows, dtype=np.int64)

    grid = np.empty((nrows, len(sizes)), dtype=np.int64)
    for j, (size, stride) in enumerate(zip(sizes, strides(maxima))):
        grid[:, j] = (rows // stride) % size
    return grid
