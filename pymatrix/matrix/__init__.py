"""
Matrix engine.

Dense matrices with fp64 or fp32 element storage and the operations that
write into caller-supplied destinations.

Public API:
    Matrix                 - owned, resizable 2-D buffer
    allocate(rows, cols)   - new zero-filled matrix
    release(m)             - drop a matrix's buffer
    ensure_shape(m, r, c)  - resize a destination only if needed
    multiply(A, B, C)      - C = A B
    add(A, B, C)           - C = A + B
    subtract(A, B, C)      - C = A - B
    transpose(A, B)        - B = A^T (B may be A)
    determinant(buf, n)    - cofactor-expansion determinant of a raw buffer
    inverse(A, B)          - B = A^-1 via the adjugate
    allclose(A, B)         - precision-aware comparison
"""

from pymatrix.matrix.storage import Matrix, allocate, release, ensure_shape
from pymatrix.matrix.ops import multiply, add, subtract, transpose
from pymatrix.matrix.determinant import determinant
from pymatrix.matrix.inverse import inverse
from pymatrix.matrix.compare import allclose

__all__ = [
    "Matrix",
    "allocate",
    "release",
    "ensure_shape",
    "multiply",
    "add",
    "subtract",
    "transpose",
    "determinant",
    "inverse",
    "allclose",
]
