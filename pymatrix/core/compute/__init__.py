"""
Shared compute infrastructure for pymatrix.

This module contains the numeric constants shared by the matrix engine.
It holds no matrix algorithms; those live in pymatrix.matrix.

Submodules:
    precision: Precision tiers (fp64, fp32) and machine epsilon
    tolerances: Comparison tolerance tiers per precision
"""

from pymatrix.core.compute.precision import (
    Precision,
    PrecisionChoice,
    FP64,
    FP32,
    DEFAULT_PRECISION,
    machine_epsilon,
    is_close,
    coarser,
    select_precision,
)
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    FP64_TOLERANCE,
    FP32_TOLERANCE,
    select_tolerance,
)

__all__ = [
    # Precision
    "Precision",
    "PrecisionChoice",
    "FP64",
    "FP32",
    "DEFAULT_PRECISION",
    "machine_epsilon",
    "is_close",
    "coarser",
    "select_precision",
    # Tolerances
    "ToleranceTier",
    "FP64_TOLERANCE",
    "FP32_TOLERANCE",
    "select_tolerance",
]
