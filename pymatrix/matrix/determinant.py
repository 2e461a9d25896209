"""
Determinant by recursive cofactor expansion along the first row.

Operates on a raw n x n buffer rather than a Matrix, since the recursion
works on freshly built, shrinking minors. Each level owns one
(n-1) x (n-1) scratch buffer. Cost is O(n!): intended for the small
matrices this library targets.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_array, check_2d, check_dimension
from pymatrix.matrix._kernels import minor_into


def determinant(buffer: ArrayLike, n: int) -> np.floating[Any]:
    """
    Determinant of the leading n x n block of buffer.

    Parameters
    ----------
    buffer : array-like
        2D buffer with at least n rows and n columns. A Matrix's
        `elements` or nested lists both work. Computation runs in the
        buffer's floating dtype (float64 for integer input).
    n : int
        Matrix order, >= 1.

    Returns
    -------
    numpy floating scalar
        sum_c (-1)^c * buffer[0][c] * det(minor(0, c))

    Raises
    ------
    DimensionError
        If n < 1 or buffer is smaller than n x n.
    """
    array = check_array(buffer, 'buffer')
    check_2d(array, 'buffer')
    n = check_dimension(n, 'n')

    if n < 1:
        raise DimensionError(
            f"n: determinant needs order >= 1, got {n}",
            operation='determinant',
            shapes=(array.shape,),
        )
    if array.shape[0] < n or array.shape[1] < n:
        raise DimensionError(
            f"buffer: shape {array.shape} is smaller than {n}x{n}",
            operation='determinant',
            shapes=(array.shape,),
        )

    return _expand(array, n)


def _expand(a: NDArray[np.floating[Any]], n: int) -> np.floating[Any]:
    if n == 1:
        return a[0, 0]

    scalar = a.dtype.type
    scratch = np.zeros((n - 1, n - 1), dtype=a.dtype)
    det = scalar(0.0)
    sign = scalar(1.0)

    for c in range(n):
        minor_into(scratch, a, 0, c, n)
        det = det + sign * (a[0, c] * _expand(scratch, n - 1))
        sign = -sign

    return det
