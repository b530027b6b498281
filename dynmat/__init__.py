"""dynmat: fixed-size dynamic vectors and square matrices of a generic
element type.

`dynmat.Vector` owns a fixed-size sequence of elements and overloads the
arithmetic operators for scalar and elementwise operations and the dot
product.  `dynmat.Matrix` is a square matrix of `Vector` rows adding
matrix-matrix, matrix-vector and matrix-scalar products.  Both read and
write whitespace-separated text streams and dynmat ASCII files.
"""

from .errors import (
    AllocationFailure,
    DynmatError,
    DynmatWarning,
    IndexOutOfRange,
    InvalidSize,
    LengthMismatch,
    ParseError,
    UnexpectedEndOfInput,
)
from .logger import Logger
from .vec import Vector, MAX_VECTOR_SIZE
from .mat import Matrix, MAX_MATRIX_SIZE
from .utils import io_utils, stream_utils

__version__ = "0.1.0"
__all__ = [
    "Vector",
    "Matrix",
    "MAX_VECTOR_SIZE",
    "MAX_MATRIX_SIZE",
    "Logger",
    "DynmatError",
    "DynmatWarning",
    "InvalidSize",
    "IndexOutOfRange",
    "LengthMismatch",
    "AllocationFailure",
    "ParseError",
    "UnexpectedEndOfInput",
    "io_utils",
    "stream_utils",
]
