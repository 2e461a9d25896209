"""
Numerical precision tiers.

A Precision fixes the scalar width of a matrix buffer. fp64 (double) is the
default; fp32 (single) trades accuracy for half the memory on small
targets. Every Matrix carries one tier and all arithmetic written into it
is rounded to that tier's dtype.
"""

from dataclasses import dataclass
from typing import Literal, Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError


PrecisionChoice = Literal['fp64', 'fp32']


@dataclass(frozen=True)
class Precision:
    """
    Scalar width of a matrix buffer.

    Attributes:
        name: Tier identifier ('fp64' or 'fp32')
        dtype: NumPy dtype used for element storage
        description: Human-readable summary
    """
    name: str
    dtype: np.dtype
    description: str

    @property
    def eps(self) -> float:
        """Machine epsilon of the tier's dtype."""
        return machine_epsilon(self.dtype)

    @property
    def itemsize(self) -> int:
        """Bytes per element."""
        return self.dtype.itemsize

    def __str__(self) -> str:
        return self.name


FP64 = Precision(
    name='fp64',
    dtype=np.dtype(np.float64),
    description='double precision element storage',
)

FP32 = Precision(
    name='fp32',
    dtype=np.dtype(np.float32),
    description='single precision element storage',
)

DEFAULT_PRECISION = FP64

_BY_NAME = {FP64.name: FP64, FP32.name: FP32}


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def select_precision(precision: PrecisionChoice | Precision | Any) -> Precision:
    """
    Resolve a precision name, dtype or tier to a Precision tier.

    Accepts a tier name ('fp64', 'fp32'), a Precision instance, or a NumPy
    floating dtype/type of matching width (np.float64, np.float32). None
    resolves to the default tier (fp64).

    Raises:
        ValidationError: If the value names no supported tier
    """
    if isinstance(precision, Precision):
        return precision

    if precision is None:
        return DEFAULT_PRECISION

    if isinstance(precision, str) and precision in _BY_NAME:
        return _BY_NAME[precision]

    unknown = ValidationError(
        f"Unknown precision: {precision!r}. Must be 'fp64', 'fp32', "
        f"np.float64 or np.float32."
    )
    try:
        dtype = np.dtype(precision)
    except (TypeError, ValueError):
        raise unknown from None

    if dtype == FP64.dtype:
        return FP64
    if dtype == FP32.dtype:
        return FP32
    raise unknown


def coarser(a: Precision, b: Precision) -> Precision:
    """Return the lower-resolution of two tiers."""
    return a if a.eps >= b.eps else b
