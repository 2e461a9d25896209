"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each storage width:
- FP64: results of the O(n^3)/O(n!) loop kernels agree to ~1e-10
- FP32: relaxed for single-precision accumulation

Used by matrix comparison (pymatrix.matrix.compare) and the test suite.
"""

from dataclasses import dataclass

from pymatrix.core.compute.precision import Precision, select_precision


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerance for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64_TOLERANCE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, exact up to accumulated rounding',
)

FP32_TOLERANCE = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision, relaxed for float32 accumulation',
)


def select_tolerance(precision: Precision | str) -> ToleranceTier:
    """Select the tolerance tier for a precision tier or tier name."""
    tier = select_precision(precision)
    if tier.name == 'fp32':
        return FP32_TOLERANCE
    return FP64_TOLERANCE
