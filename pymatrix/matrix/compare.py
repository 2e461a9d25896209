"""
Tolerance-aware matrix comparison.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.compute.precision import coarser, is_close
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance
from pymatrix.matrix.storage import Matrix
from pymatrix.matrix._common import check_matrix


def allclose(
    A: Matrix,
    B: Matrix,
    *,
    tolerance: ToleranceTier | None = None,
) -> bool:
    """
    True if A and B have the same shape and all elements are close.

    Closeness is |a - b| <= atol + rtol * |b|. Without an explicit
    tolerance, the tier of the coarser precision of A and B is used, so an
    fp32 result compared with an fp64 reference gets fp32 tolerances.
    Two invalid matrices compare equal.
    """
    check_matrix(A, 'A')
    check_matrix(B, 'B')

    if A.shape != B.shape:
        return False
    if not A.is_valid:
        return True

    if tolerance is None:
        tolerance = select_tolerance(coarser(A.precision, B.precision))

    a = A.elements.astype(np.float64)
    b = B.elements.astype(np.float64)
    return bool(np.all(is_close(a, b, tolerance.rtol, tolerance.atol)))
