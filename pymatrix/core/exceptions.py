"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Matrix operations only raise the shape and
singularity errors when called with on_error='raise'; by default they
invalidate their destination and log instead.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: negative
    dimensions, non-numeric data, unknown precision or policy names.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions violate an operation's algebraic precondition.

    Raised when, e.g., A.cols != B.rows for a product, or when a
    non-square matrix is passed to inverse().

    Attributes:
        operation: Name of the operation that rejected its operands
        shapes: (rows, cols) of each operand, in argument order
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shapes: tuple[tuple[int, int], ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shapes = shapes


class DegenerateOperandError(DimensionError):
    """
    An operand has zero rows or zero columns.

    Invalid matrices (the 0 x 0 failure value of an earlier call) land
    here when they are fed into a later operation.
    """
    pass


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by inverse() when the determinant is zero (or within the
    caller-supplied singular_atol of zero).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that failed the check
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
