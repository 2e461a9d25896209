"""
Failure handling shared by every matrix operation.

An operation that rejects its operands leaves its destination as the
canonical invalid value, logs one static error line, and returns at once.
With on_error='raise' the matching typed exception is raised after the
destination has been invalidated and the line logged.
"""

from __future__ import annotations

import logging
from typing import Literal

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DegenerateOperandError,
)
from pymatrix.matrix.storage import Matrix

logger = logging.getLogger(__name__)


OnError = Literal['invalidate', 'raise']
VALID_ON_ERROR = ('invalidate', 'raise')

MULTIPLY_DIMENSIONS = "Wrong array dimensions to multiplicate!"
ADD_DIMENSIONS = "Wrong array dimensions to add!"
SUBTRACT_DIMENSIONS = "Wrong array dimensions to subtract!"
TRANSPOSE_DIMENSIONS = "Wrong array dimensions to transpose!"
INVERSE_DIMENSIONS = "Wrong array dimensions to inverse!"
ZERO_DETERMINANT = "Array determinant equals 0!"


def check_on_error(on_error: str) -> None:
    """Reject unknown error policies regardless of the policy itself."""
    if on_error not in VALID_ON_ERROR:
        raise ValidationError(
            f"on_error: must be one of {VALID_ON_ERROR}, got {on_error!r}"
        )


def check_matrix(obj: object, name: str) -> Matrix:
    """Verify an operand is a Matrix."""
    if not isinstance(obj, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(obj).__name__}"
        )
    return obj


def is_degenerate(matrix: Matrix) -> bool:
    """True if the matrix has zero rows or zero columns."""
    return matrix.rows == 0 or matrix.cols == 0


def shape_error(
    message: str,
    operation: str,
    *operands: Matrix,
) -> DimensionError:
    """
    Build the exception describing a rejected operand set.

    DegenerateOperandError when any operand is degenerate, DimensionError
    otherwise. The exception message extends the static log line with the
    actual operand shapes.
    """
    shapes = tuple(m.shape for m in operands)
    detail = ", ".join(f"{r}x{c}" for r, c in shapes)
    if any(is_degenerate(m) for m in operands):
        cls = DegenerateOperandError
    else:
        cls = DimensionError
    return cls(
        f"{message} ({operation}: got {detail})",
        operation=operation,
        shapes=shapes,
    )


def fail(
    destination: Matrix,
    message: str,
    error: PyMatrixError,
    on_error: OnError,
) -> Matrix:
    """
    Invalidate destination, log message, and apply the error policy.

    Returns the invalidated destination under 'invalidate'; raises error
    under 'raise'.
    """
    destination.invalidate()
    logger.error(message)
    if on_error == 'raise':
        raise error
    return destination
