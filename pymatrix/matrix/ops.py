"""
Elementwise and linear matrix operations: multiply, add, subtract, transpose.

Each operation writes into a caller-supplied destination:

    C = Matrix()
    multiply(A, B, C)
    if not C.is_valid:
        ...  # "Wrong array dimensions to multiplicate!" was logged

Arithmetic runs in the destination's precision. Operands are borrowed
read-only; the destination may be one of the operands.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.matrix.storage import Matrix
from pymatrix.matrix._common import (
    OnError,
    MULTIPLY_DIMENSIONS,
    ADD_DIMENSIONS,
    SUBTRACT_DIMENSIONS,
    TRANSPOSE_DIMENSIONS,
    check_matrix,
    check_on_error,
    is_degenerate,
    shape_error,
    fail,
)
from pymatrix.matrix._kernels import (
    matmul_into,
    elementwise_into,
    transpose_into,
)


def _operand(matrix: Matrix, destination: Matrix) -> NDArray[np.floating[Any]]:
    """Operand buffer in the destination's dtype (no copy if it already is)."""
    return matrix.elements.astype(destination.dtype, copy=False)


def multiply(
    A: Matrix,
    B: Matrix,
    C: Matrix,
    *,
    on_error: OnError = 'invalidate',
) -> Matrix:
    """
    Matrix product C = A B.

    Parameters
    ----------
    A : Matrix
        Left operand, m x k.
    B : Matrix
        Right operand, k x n.
    C : Matrix
        Destination, resized to m x n if needed. May be A or B.
    on_error : str
        'invalidate' (default) or 'raise'.

    Returns
    -------
    Matrix
        C. Invalid (0 x 0) if A.cols != B.rows or an operand is degenerate.

    Raises
    ------
    DimensionError
        Under on_error='raise' when the inner dimensions differ.
    DegenerateOperandError
        Under on_error='raise' when an operand has a zero dimension.
    """
    check_on_error(on_error)
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    check_matrix(C, 'C')

    if A.cols != B.rows or is_degenerate(A) or is_degenerate(B):
        error = shape_error(MULTIPLY_DIMENSIONS, 'multiply', A, B)
        return fail(C, MULTIPLY_DIMENSIONS, error, on_error)

    a = _operand(A, C)
    b = _operand(B, C)

    if C is A or C is B:
        scratch = np.zeros((A.rows, B.cols), dtype=C.dtype)
        matmul_into(scratch, a, b)
        C.ensure_shape(A.rows, B.cols)
        C.elements[...] = scratch
    else:
        C.ensure_shape(A.rows, B.cols)
        matmul_into(C.elements, a, b)

    return C


def _elementwise(
    A: Matrix,
    B: Matrix,
    C: Matrix,
    op: Callable[[Any, Any], Any],
    message: str,
    operation: str,
    on_error: OnError,
) -> Matrix:
    check_on_error(on_error)
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    check_matrix(C, 'C')

    if A.shape != B.shape or is_degenerate(A) or is_degenerate(B):
        error = shape_error(message, operation, A, B)
        return fail(C, message, error, on_error)

    a = _operand(A, C)
    b = _operand(B, C)
    C.ensure_shape(A.rows, A.cols)
    elementwise_into(C.elements, a, b, op)
    return C


def add(
    A: Matrix,
    B: Matrix,
    C: Matrix,
    *,
    on_error: OnError = 'invalidate',
) -> Matrix:
    """
    Elementwise sum C = A + B.

    A and B must have the same non-degenerate shape; otherwise C is
    invalidated and "Wrong array dimensions to add!" is logged.
    """
    return _elementwise(A, B, C, operator.add, ADD_DIMENSIONS, 'add', on_error)


def subtract(
    A: Matrix,
    B: Matrix,
    C: Matrix,
    *,
    on_error: OnError = 'invalidate',
) -> Matrix:
    """
    Elementwise difference C = A - B.

    A and B must have the same non-degenerate shape; otherwise C is
    invalidated and "Wrong array dimensions to subtract!" is logged.
    """
    return _elementwise(
        A, B, C, operator.sub, SUBTRACT_DIMENSIONS, 'subtract', on_error
    )


def transpose(
    A: Matrix,
    B: Matrix,
    *,
    on_error: OnError = 'invalidate',
) -> Matrix:
    """
    Transpose B = A^T.

    B may be A itself: the result is built in a temporary buffer before B is
    resized, so a non-square in-place transpose reads A intact.

    Parameters
    ----------
    A : Matrix
        Source, m x n, non-degenerate.
    B : Matrix
        Destination, resized to n x m if needed.
    on_error : str
        'invalidate' (default) or 'raise'.
    """
    check_on_error(on_error)
    check_matrix(A, 'A')
    check_matrix(B, 'B')

    if is_degenerate(A):
        error = shape_error(TRANSPOSE_DIMENSIONS, 'transpose', A)
        return fail(B, TRANSPOSE_DIMENSIONS, error, on_error)

    scratch = np.empty((A.cols, A.rows), dtype=B.dtype)
    transpose_into(scratch, A.elements)
    B.ensure_shape(A.cols, A.rows)
    B.elements[...] = scratch
    return B
