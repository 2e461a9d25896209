"""
Matrix inverse via the adjugate.

    A^-1 = adj(A) / det(A),   adj(A) = C^T,   C[i][j] = (-1)^(i+j) det(M_ij)

where M_ij is A with row i and column j deleted. Each cofactor is a full
cofactor-expansion determinant, so the whole inverse is O(n * n * (n-1)!).
There is no pivoting and the singularity test is exact by default.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.matrix.storage import Matrix
from pymatrix.matrix.determinant import determinant
from pymatrix.matrix.ops import transpose
from pymatrix.matrix._common import (
    OnError,
    INVERSE_DIMENSIONS,
    ZERO_DETERMINANT,
    check_matrix,
    check_on_error,
    is_degenerate,
    shape_error,
    fail,
)
from pymatrix.matrix._kernels import minor_into


def inverse(
    A: Matrix,
    B: Matrix,
    *,
    singular_atol: float = 0.0,
    on_error: OnError = 'invalidate',
) -> Matrix:
    """
    Inverse B = A^-1.

    Parameters
    ----------
    A : Matrix
        Square, non-degenerate matrix.
    B : Matrix
        Destination, resized to A's shape if needed. May be A.
    singular_atol : float
        A is treated as singular when |det(A)| <= singular_atol. The
        default 0.0 is an exact `det == 0` test; values near zero still
        invert and may produce huge elements.
    on_error : str
        'invalidate' (default) or 'raise'.

    Returns
    -------
    Matrix
        B. Invalid (0 x 0) if A is not square, is degenerate, or is
        singular.

    Raises
    ------
    DimensionError, DegenerateOperandError
        Under on_error='raise' for a non-square or degenerate A.
    SingularMatrixError
        Under on_error='raise' for a singular A.
    """
    check_on_error(on_error)
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    if singular_atol < 0:
        raise ValidationError(
            f"singular_atol: must be >= 0, got {singular_atol}"
        )

    if not A.is_square or is_degenerate(A):
        error = shape_error(INVERSE_DIMENSIONS, 'inverse', A)
        return fail(B, INVERSE_DIMENSIONS, error, on_error)

    n = A.rows
    source = A.elements.astype(B.dtype, copy=False)
    det = determinant(source, n)

    if abs(det) <= singular_atol:
        error = SingularMatrixError(
            f"{ZERO_DETERMINANT} (det={float(det)!r}, "
            f"singular_atol={singular_atol!r})",
            matrix_name='A',
            determinant=float(det),
        )
        return fail(B, ZERO_DETERMINANT, error, on_error)

    if n == 1:
        value = 1.0 / source[0, 0]
        B.ensure_shape(1, 1)
        B.elements[0, 0] = value
        return B

    # cofactors, then transposed in place into the adjugate
    adjugate = Matrix(n, n, B.precision)
    minor = np.zeros((n - 1, n - 1), dtype=B.dtype)

    for i in range(n):
        for j in range(n):
            minor_into(minor, source, i, j, n)
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            adjugate.elements[i, j] = sign * determinant(minor, n - 1)

    transpose(adjugate, adjugate)

    B.ensure_shape(n, n)
    for i in range(n):
        for j in range(n):
            B.elements[i, j] = adjugate.elements[i, j] / det

    return B
