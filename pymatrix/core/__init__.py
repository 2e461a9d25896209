"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the matrix
engine.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision and tolerance tiers
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DegenerateOperandError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DegenerateOperandError",
    "NumericalError",
    "SingularMatrixError",
]
