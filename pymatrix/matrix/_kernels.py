"""
Element loop kernels on raw 2-D buffers.

Kernels take numpy arrays, write into a caller-provided output buffer and
never allocate. Every write into `out` rounds to out's dtype, so a float32
output accumulates in single precision.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray


Buffer = NDArray[np.floating[Any]]


def matmul_into(out: Buffer, a: Buffer, b: Buffer) -> None:
    """out = a @ b, zeroing out before accumulation."""
    rows, inner = a.shape
    cols = b.shape[1]

    out.fill(0.0)
    for i in range(rows):
        for j in range(cols):
            for k in range(inner):
                out[i, j] = a[i, k] * b[k, j] + out[i, j]


def elementwise_into(
    out: Buffer,
    a: Buffer,
    b: Buffer,
    op: Callable[[Any, Any], Any],
) -> None:
    """out[i, j] = op(a[i, j], b[i, j]). out may be a or b."""
    rows, cols = a.shape
    for i in range(rows):
        for j in range(cols):
            out[i, j] = op(a[i, j], b[i, j])


def transpose_into(out: Buffer, a: Buffer) -> None:
    """out[i, j] = a[j, i]. out must not share memory with a."""
    rows, cols = out.shape
    for i in range(rows):
        for j in range(cols):
            out[i, j] = a[j, i]


def minor_into(out: Buffer, a: Buffer, row: int, col: int, n: int) -> None:
    """
    Write the minor of the leading n x n block of a into out.

    The minor deletes `row` and `col`. Row and column offsets switch from
    0 to 1 once the deleted index has been passed, so out[m - k][c - l]
    receives a[m][c] for every kept element.
    """
    k = 0
    for m in range(n):
        if m == row:
            k = 1
            continue
        l = 0
        for c in range(n):
            if c == col:
                l = 1
                continue
            out[m - k, c - l] = a[m, c]
