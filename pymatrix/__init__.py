"""
pymatrix: small dense-matrix arithmetic.

Allocate 2-D numeric arrays in single or double precision and multiply,
add, subtract, transpose, take determinants of and invert them. Operations
write into caller-supplied destination matrices; a failed operation leaves
its destination as the invalid 0 x 0 matrix and logs an error.

Submodules:
    matrix: Matrix storage and operations
    core: Exceptions, validation, precision and tolerance tiers
"""

__version__ = "0.1.0"

import logging as _logging

from pymatrix.core.compute.precision import Precision, FP64, FP32
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DegenerateOperandError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.matrix import (
    Matrix,
    allocate,
    release,
    ensure_shape,
    multiply,
    add,
    subtract,
    transpose,
    determinant,
    inverse,
    allclose,
)

# No output unless the application configures logging.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "__version__",
    # Storage
    "Matrix",
    "allocate",
    "release",
    "ensure_shape",
    # Operations
    "multiply",
    "add",
    "subtract",
    "transpose",
    "determinant",
    "inverse",
    "allclose",
    # Precision
    "Precision",
    "FP64",
    "FP32",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DegenerateOperandError",
    "NumericalError",
    "SingularMatrixError",
]
