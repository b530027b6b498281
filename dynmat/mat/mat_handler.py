"""Square matrix built from a list of owned `Vector` rows."""
import copy
import operator

import numpy as np
import pandas as pd

from ..errors import IndexOutOfRange, InvalidSize, LengthMismatch
from ..utils.stream_utils import parse_tokens, read_tokens
from ..vec.vec_handler import Vector, check_size, is_container

MAX_MATRIX_SIZE = 10000


class Matrix(object):
    """A square matrix stored row-major as `size` owned `Vector` rows

    Args:
        size (`int`): number of rows and of columns. Default is 1
        dtype (`callable`): element type, see `Vector`. Default is `float`

    Example::

        m = dynmat.Matrix(3, dtype=int)
        m[0] = dynmat.Vector.from_buffer([1, 3, 5])
        m[2][2] = 1
        scaled = m * 3
        prod = m * scaled
        print(prod)

    Note:
        `m[i]` returns the row `Vector` itself, so `m[i][j] = x` writes
        into the matrix.  Assigning a whole row stores a copy that takes
        the matrix `dtype`.

    """

    max_size = MAX_MATRIX_SIZE
    __array_ufunc__ = None

    def __init__(self, size=1, dtype=float):
        size = operator.index(size)
        if size > self.max_size:
            raise InvalidSize(
                "Matrix.__init__(): size {0} exceeds max size {1}".format(
                    size, self.max_size
                ),
                size=size,
                max_size=self.max_size,
            )
        size = check_size(size, Vector.max_size, "Matrix.__init__()")
        self.dtype = dtype
        self._rows = [Vector(size, dtype=dtype) for _ in range(size)]

    @classmethod
    def _adopt(cls, rows, dtype):
        new = cls.__new__(cls)
        new.dtype = dtype
        new._rows = rows
        return new

    @classmethod
    def from_array(cls, arr):
        """create a `Matrix` from a square 2-D `numpy.ndarray`

        Args:
            arr (`numpy.ndarray`): square 2-D array

        Returns:
            `Matrix`: a new matrix with Python scalar elements

        """
        arr = np.asarray(arr)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise InvalidSize(
                "Matrix.from_array(): array is not square: {0}".format(arr.shape),
                size=arr.shape[0] if arr.ndim > 0 else None,
            )
        check_size(arr.shape[0], cls.max_size, "Matrix.from_array()")
        rows = [Vector.from_buffer(row) for row in arr.tolist()]
        return cls._adopt(rows, rows[0].dtype)

    @classmethod
    def from_dataframe(cls, df):
        """class method to create a new `Matrix` instance from a
        square `pandas.DataFrame`

        Args:
            df (`pandas.DataFrame`): dataframe

        Returns:
            `Matrix`: `Matrix` instance derived from `df`.

        Note:
            row and column labels are discarded

        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("Matrix.from_dataframe(): df is not a DataFrame")
        return cls.from_array(df.to_numpy())

    def to_dataframe(self):
        """return a `pandas.DataFrame` representation of `Matrix`

        Returns:
            `pandas.DataFrame`: dataframe with integer row and column labels

        """
        return pd.DataFrame(data=self.newx)

    def df(self):
        """wrapper of Matrix.to_dataframe()"""
        return self.to_dataframe()

    @property
    def newx(self):
        """a copy of the elements as a 2-D `numpy.ndarray`"""
        return np.array([row.newx for row in self._rows])

    @property
    def size(self):
        """number of rows (and of columns)"""
        return len(self._rows)

    @property
    def shape(self):
        """(`size`, `size`)"""
        return (len(self._rows), len(self._rows))

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __getitem__(self, index):
        return self._rows[index]

    def _check_row(self, row, caller):
        if not isinstance(row, Vector):
            raise TypeError(
                "Matrix.{0}(): row must be a Vector, not {1}".format(
                    caller, type(row).__name__
                )
            )
        if row.size != len(self._rows):
            raise LengthMismatch(
                "Matrix.{0}(): row length {1} != matrix size {2}".format(
                    caller, row.size, len(self._rows)
                ),
                expected=len(self._rows),
                actual=row.size,
            )
        new = row.copy()
        # stored rows share the matrix element type
        new.dtype = self.dtype
        return new

    def __setitem__(self, index, row):
        self._rows[index] = self._check_row(row, "__setitem__")

    def _check_index(self, index):
        index = operator.index(index)
        if index < 0 or index >= len(self._rows):
            raise IndexOutOfRange(
                "Matrix.at(): index {0} out of range [0, {1})".format(
                    index, len(self._rows)
                ),
                index=index,
                size=len(self._rows),
            )
        return index

    def at(self, index):
        """bounds-checked row access

        Args:
            index (`int`): row in [0, `size`)

        Returns:
            `Vector`: the row itself (not a copy)

        Raises:
            `IndexOutOfRange`: `index` < 0 or `index` >= `size`

        """
        return self._rows[self._check_index(index)]

    def set_at(self, index, row):
        """bounds-checked row assignment. A copy of `row` is stored.

        Args:
            index (`int`): row in [0, `size`)
            row (`Vector`): the new row, of length `size`

        Raises:
            `IndexOutOfRange`: `index` < 0 or `index` >= `size`
            `LengthMismatch`: `row.size` != `size`

        """
        index = self._check_index(index)
        self._rows[index] = self._check_row(row, "set_at")

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self._rows) != len(other._rows):
            return False
        for a, b in zip(self._rows, other._rows):
            if a != b:
                return False
        return True

    __hash__ = None

    def _check_size(self, other, op, what="matrices"):
        if len(self._rows) != other.size:
            raise LengthMismatch(
                "Matrix.{0}(): {1} sizes differ: {2} {3}".format(
                    op, what, len(self._rows), other.size
                ),
                expected=len(self._rows),
                actual=other.size,
            )

    def __add__(self, other):
        """elementwise addition of an equal-size `Matrix`

        Args:
            other (`Matrix`): the matrix to add

        Returns:
            `Matrix`: a new matrix

        Raises:
            `LengthMismatch`: sizes differ

        """
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_size(other, "__add__")
        return self._adopt(
            [a + b for a, b in zip(self._rows, other._rows)], self.dtype
        )

    def __sub__(self, other):
        """elementwise subtraction of an equal-size `Matrix`

        Args:
            other (`Matrix`): the matrix to subtract

        Returns:
            `Matrix`: a new matrix

        Raises:
            `LengthMismatch`: sizes differ

        """
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_size(other, "__sub__")
        return self._adopt(
            [a - b for a, b in zip(self._rows, other._rows)], self.dtype
        )

    def __mul__(self, other):
        """matrix-matrix, matrix-vector or matrix-scalar multiplication

        Args:
            other (`Matrix`,`Vector`,`object`): the thing to multiply by

        Returns:
            `Matrix` for a `Matrix` or a scalar, `Vector` for a `Vector`

        Raises:
            `LengthMismatch`: `other` is a container of different size

        Note:
            matrix products are accumulated cell by cell in increasing
            inner index order, starting from `dtype()`

        Example::

            a = dynmat.Matrix(3, dtype=int)
            b = dynmat.Matrix(3, dtype=int)
            a[2] = dynmat.Vector.from_buffer([1, 1, 2])
            b[2] = dynmat.Vector.from_buffer([0, 2, 1])
            (a * b)[2]   # Vector([0, 4, 2])

        """
        if isinstance(other, Matrix):
            self._check_size(other, "__mul__")
            n = len(self._rows)
            b = [row._x for row in other._rows]
            rows = []
            for a_row in self._rows:
                a = a_row._x
                out = []
                for j in range(n):
                    total = self.dtype()
                    for k in range(n):
                        total += a[k] * b[k][j]
                    out.append(total)
                rows.append(Vector._adopt(out, self.dtype))
            return self._adopt(rows, self.dtype)
        if isinstance(other, Vector):
            self._check_size(other, "__mul__", what="matrix and vector")
            return Vector._adopt([row * other for row in self._rows], self.dtype)
        if is_container(other):
            return NotImplemented
        return self._adopt([row * other for row in self._rows], self.dtype)

    def __rmul__(self, other):
        if is_container(other):
            return NotImplemented
        return self._adopt([other * row for row in self._rows], self.dtype)

    def copy(self):
        """get a storage-independent copy of `Matrix`

        Returns:
            `Matrix`: copy of this `Matrix`

        """
        return self._adopt([row.copy() for row in self._rows], self.dtype)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self._adopt(copy.deepcopy(self._rows, memo), self.dtype)

    def move(self):
        """transfer the rows to a new `Matrix`, leaving this one empty

        Returns:
            `Matrix`: the new owner of the rows

        """
        new = self._adopt(self._rows, self.dtype)
        self._rows = []
        return new

    def swap(self, other):
        """exchange contents with another `Matrix` in O(1)

        Args:
            other (`Matrix`): the matrix to swap with

        """
        self._rows, other._rows = other._rows, self._rows
        self.dtype, other.dtype = other.dtype, self.dtype

    def assign(self, other):
        """copy-assign from another `Matrix`, adopting its size and content

        Args:
            other (`Matrix`): the source

        Returns:
            `Matrix`: self

        """
        if other is self:
            return self
        tmp = other.copy()
        self.swap(tmp)
        return self

    def read(self, stream):
        """read `size` x `size` elements, row-major, from a text stream

        Args:
            stream (`io.TextIOBase`): an open text stream

        Returns:
            `Matrix`: self

        Raises:
            `UnexpectedEndOfInput`: the stream ran out first
            `ParseError`: a token could not be parsed by `dtype`

        Note:
            no row is changed unless every element parses

        """
        n = len(self._rows)
        values = parse_tokens(read_tokens(stream, n * n), self.dtype)
        for i, row in enumerate(self._rows):
            row._x[:] = values[i * n : (i + 1) * n]
        return self

    def write(self, stream):
        """write each row to a text stream followed by a line break

        Args:
            stream (`io.TextIOBase`): an open text stream

        """
        for row in self._rows:
            row.write(stream)
            stream.write("\n")

    def __str__(self):
        return "".join(str(row) + "\n" for row in self._rows)

    def __repr__(self):
        return "{0}({1!r})".format(
            type(self).__name__, [row._x for row in self._rows]
        )

    def to_ascii(self, filename, verbose=False):
        """write a dynmat ASCII matrix file

        Args:
            filename (`str`): filename to write to
            verbose (`bool`): flag to echo log events to the screen

        """
        from ..utils.io_utils import write_ascii

        write_ascii(self, filename, verbose=verbose)

    @classmethod
    def from_ascii(cls, filename, dtype=float, verbose=False):
        """load a dynmat ASCII matrix file

        Args:
            filename (`str`): file to read from
            dtype (`callable`): element type.  Default is `float`
            verbose (`bool`): flag to echo log events to the screen

        Returns:
            `Matrix`: the loaded matrix

        Example::

            m = dynmat.Matrix.from_ascii("my.mat", dtype=int)

        """
        from ..utils.io_utils import read_ascii

        return read_ascii(filename, dtype=dtype, kind="matrix", verbose=verbose)
