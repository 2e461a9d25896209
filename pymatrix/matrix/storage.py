"""
Matrix: an owned, resizable 2-D buffer and its declared dimensions.

A Matrix exclusively owns a row-major numpy buffer of its precision's dtype.
Operations write into caller-supplied destination matrices and resize them
in place through ensure_shape(); a destination whose shape already matches
keeps its buffer object, so accumulators reused in a loop never reallocate.

The canonical invalid value is rows == 0, cols == 0, elements is None. It is
what every failing operation leaves behind in its destination.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.precision import (
    Precision, PrecisionChoice, select_precision,
)
from pymatrix.core.validation import (
    check_array, check_2d, check_finite, check_dimension,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Dense rows x cols matrix with an owned element buffer.

    Construction:
        Matrix(rows, cols, precision='fp64')
        Matrix.from_array([[1, 2], [3, 4]])
        Matrix.identity(3, precision='fp32')
        Matrix.invalid()

    Elements are zero-initialized. The buffer is None whenever either
    dimension is zero.
    """

    __slots__ = ('_rows', '_cols', '_elements', '_precision')

    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        precision: PrecisionChoice | Precision = 'fp64',
    ):
        self._precision = select_precision(precision)
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._elements = self._allocate(self._rows, self._cols)

    # --- Construction ---

    @classmethod
    def from_array(
        cls,
        data: ArrayLike,
        precision: PrecisionChoice | Precision | None = None,
        *,
        allow_non_finite: bool = False,
    ) -> Matrix:
        """
        Build a Matrix holding a copy of array-like data.

        Parameters
        ----------
        data : array-like
            2D data (nested lists, numpy array). Integers are promoted.
        precision : str or Precision, optional
            Storage precision. If None, float32 input keeps fp32 and
            everything else is stored as fp64.
        allow_non_finite : bool
            Accept NaN/Inf elements. Rejected by default, including
            values that overflow the storage dtype.
        """
        array = check_array(data, 'data')
        check_2d(array, 'data')

        if precision is None:
            precision = 'fp32' if array.dtype == np.float32 else 'fp64'

        rows, cols = array.shape
        matrix = cls(rows, cols, precision)
        if matrix._elements is not None:
            with np.errstate(over='ignore'):
                matrix._elements[...] = array
            if not allow_non_finite:
                check_finite(matrix._elements, 'data')
        return matrix

    @classmethod
    def zeros(
        cls,
        rows: int,
        cols: int,
        precision: PrecisionChoice | Precision = 'fp64',
    ) -> Matrix:
        """Zero-filled rows x cols matrix."""
        return cls(rows, cols, precision)

    @classmethod
    def identity(
        cls,
        n: int,
        precision: PrecisionChoice | Precision = 'fp64',
    ) -> Matrix:
        """n x n identity matrix."""
        matrix = cls(n, n, precision)
        for i in range(matrix._rows):
            matrix._elements[i][i] = 1.0
        return matrix

    @classmethod
    def invalid(cls, precision: PrecisionChoice | Precision = 'fp64') -> Matrix:
        """The canonical invalid value: 0 x 0, no buffer."""
        return cls(0, 0, precision)

    def _allocate(self, rows: int, cols: int) -> NDArray[np.floating[Any]] | None:
        if rows == 0 or cols == 0:
            return None
        return np.zeros((rows, cols), dtype=self._precision.dtype)

    # --- Dimensions and buffer ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def elements(self) -> NDArray[np.floating[Any]] | None:
        """Owned element buffer, shape (rows, cols), or None if degenerate."""
        return self._elements

    @property
    def precision(self) -> Precision:
        """Storage precision tier."""
        return self._precision

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype of the element buffer."""
        return self._precision.dtype

    @property
    def is_valid(self) -> bool:
        """True if both dimensions are positive (the buffer exists)."""
        return self._rows > 0 and self._cols > 0

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    # --- Lifecycle ---

    def ensure_shape(self, rows: int, cols: int) -> bool:
        """
        Make this matrix rows x cols.

        If the current shape differs, the buffer is replaced by a new
        zero-filled one and previous content is lost. A matching shape keeps
        the existing buffer object untouched.

        Returns
        -------
        bool
            True if the buffer was reallocated.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if (self._rows, self._cols) == (rows, cols):
            return False

        logger.debug(
            "Reallocating %s buffer %dx%d -> %dx%d",
            self._precision, self._rows, self._cols, rows, cols,
        )
        self._rows = rows
        self._cols = cols
        self._elements = self._allocate(rows, cols)
        return True

    def invalidate(self) -> None:
        """Set this matrix to the canonical invalid value."""
        self._rows = 0
        self._cols = 0
        self._elements = None

    def release(self) -> None:
        """Drop the buffer and reset dimensions to 0. Safe to repeat."""
        self.invalidate()

    # --- Element access and conversion ---

    def __getitem__(self, index: tuple[int, int]) -> Any:
        if self._elements is None:
            raise IndexError(f"{self!r} has no elements")
        return self._elements[index]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        if self._elements is None:
            raise IndexError(f"{self!r} has no elements")
        self._elements[index] = value

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the buffer; an empty (rows, cols) array if degenerate."""
        if self._elements is None:
            return np.zeros((self._rows, self._cols), dtype=self._precision.dtype)
        return self._elements.copy()

    def tolist(self) -> list[list[float]]:
        return self.to_array().tolist()

    def copy(self) -> Matrix:
        """Independent matrix with the same shape, precision and values."""
        duplicate = Matrix(self._rows, self._cols, self._precision)
        if self._elements is not None:
            duplicate._elements[...] = self._elements
        return duplicate

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError(
                "Matrix cannot be exposed as an array without copying"
            )
        array = self.to_array()
        if dtype is not None:
            array = array.astype(dtype)
        return array

    def __repr__(self) -> str:
        if not self.is_valid:
            return f"Matrix({self._rows}x{self._cols}, {self._precision}, invalid)"
        return f"Matrix({self._rows}x{self._cols}, {self._precision})"


def allocate(
    rows: int,
    cols: int,
    precision: PrecisionChoice | Precision = 'fp64',
) -> Matrix:
    """Allocate a zero-filled rows x cols matrix."""
    return Matrix(rows, cols, precision)


def release(matrix: Matrix) -> None:
    """Release a matrix's buffer and reset its dimensions to 0."""
    matrix.release()


def ensure_shape(matrix: Matrix, rows: int, cols: int) -> bool:
    """Resize matrix to rows x cols if needed; see Matrix.ensure_shape."""
    return matrix.ensure_shape(rows, cols)
