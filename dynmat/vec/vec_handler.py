"""Fixed-size dynamic vector of a generic element type."""
import copy
import operator

import numpy as np

from ..errors import (
    AllocationFailure,
    IndexOutOfRange,
    InvalidSize,
    LengthMismatch,
)
from ..utils.stream_utils import parse_tokens, read_tokens

MAX_VECTOR_SIZE = 100000000


def check_size(size, max_size, caller="Vector.__init__()"):
    """validate a requested container dimension

    Args:
        size (`int`): requested dimension
        max_size (`int`): largest accepted dimension
        caller (`str`): name used in the error message

    Returns:
        `int`: `size` as a plain int

    Raises:
        `InvalidSize`: `size` is not in (0, `max_size`]

    """
    size = operator.index(size)
    if size <= 0:
        raise InvalidSize(
            "{0}: size should be greater than zero, not {1}".format(caller, size),
            size=size,
            max_size=max_size,
        )
    if size > max_size:
        raise InvalidSize(
            "{0}: size {1} exceeds max size {2}".format(caller, size, max_size),
            size=size,
            max_size=max_size,
        )
    return size


def is_container(other):
    """True if `other` is a `Vector` or a `Matrix` rather than a scalar"""
    from ..mat.mat_handler import Matrix

    return isinstance(other, (Vector, Matrix))


class Vector(object):
    """An owning, fixed-size sequence of elements with arithmetic operators

    Args:
        size (`int`): number of elements. Default is 1
        dtype (`callable`): element type.  `dtype()` gives the zero value
            every element starts at and `dtype(token)` parses a text token.
            Default is `float`

    Example::

        v = dynmat.Vector(3, dtype=int)
        v[0] = 2
        w = v * 3 + 1          # [7, 1, 1]
        dot = v * w            # 14
        print(v.at(1))

    Note:
        `v[i]` is the unchecked access path: it goes straight to the
        underlying list.  Use `Vector.at()` and `Vector.set_at()` for
        bounds-checked access.

    """

    max_size = MAX_VECTOR_SIZE
    sep = " "
    # defer numpy scalar operators to the reflected methods below
    __array_ufunc__ = None

    def __init__(self, size=1, dtype=float):
        size = check_size(size, self.max_size)
        self.dtype = dtype
        try:
            self._x = [dtype() for _ in range(size)]
        except MemoryError as e:
            raise AllocationFailure(
                "Vector.__init__(): unable to allocate {0} elements".format(size)
            ) from e

    @classmethod
    def _adopt(cls, values, dtype):
        """wrap an already-owned list without copying or re-checking it"""
        new = cls.__new__(cls)
        new.dtype = dtype
        new._x = values
        return new

    @classmethod
    def from_buffer(cls, buffer, length=None, dtype=None):
        """create a `Vector` holding a copy of an existing buffer of
        exactly `length` elements

        Args:
            buffer (`sequence`): source elements.  Not retained.
            length (`int`): number of elements `buffer` holds.  Default is
                `len(buffer)`
            dtype (`callable`): element type.  Default is the type of the
                first element

        Returns:
            `Vector`: a new vector

        Example::

            v = dynmat.Vector.from_buffer([2, 1, 4])

        """
        if buffer is None:
            raise ValueError("Vector.from_buffer(): buffer is None")
        if isinstance(buffer, np.ndarray):
            buffer = buffer.tolist()
        if length is None:
            length = len(buffer)
        length = check_size(length, cls.max_size, "Vector.from_buffer()")
        if len(buffer) != length:
            raise LengthMismatch(
                "Vector.from_buffer(): buffer holds {0} elements, "
                "expected {1}".format(len(buffer), length),
                expected=length,
                actual=len(buffer),
            )
        values = [copy.copy(e) for e in buffer]
        if dtype is None:
            dtype = type(values[0])
        return cls._adopt(values, dtype)

    @classmethod
    def from_array(cls, arr):
        """create a `Vector` from a 1-D `numpy.ndarray`

        Args:
            arr (`numpy.ndarray`): 1-D array

        Returns:
            `Vector`: a new vector with Python scalar elements

        """
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise InvalidSize(
                "Vector.from_array(): ndim != 1: {0}".format(arr.ndim),
                size=arr.size,
            )
        return cls.from_buffer(arr.tolist())

    @property
    def newx(self):
        """a copy of the elements as a `numpy.ndarray`"""
        return np.array(self._x)

    @property
    def size(self):
        """number of elements"""
        return len(self._x)

    def __len__(self):
        return len(self._x)

    def __iter__(self):
        return iter(self._x)

    def __getitem__(self, index):
        return self._x[index]

    def __setitem__(self, index, value):
        self._x[index] = value

    def _check_index(self, index):
        index = operator.index(index)
        if index < 0 or index >= len(self._x):
            raise IndexOutOfRange(
                "{0}.at(): index {1} out of range [0, {2})".format(
                    type(self).__name__, index, len(self._x)
                ),
                index=index,
                size=len(self._x),
            )
        return index

    def at(self, index):
        """bounds-checked element access

        Args:
            index (`int`): position in [0, `size`)

        Returns:
            `object`: the element at `index`

        Raises:
            `IndexOutOfRange`: `index` < 0 or `index` >= `size`

        """
        return self._x[self._check_index(index)]

    def set_at(self, index, value):
        """bounds-checked element assignment

        Args:
            index (`int`): position in [0, `size`)
            value (`object`): the new element

        Raises:
            `IndexOutOfRange`: `index` < 0 or `index` >= `size`

        """
        self._x[self._check_index(index)] = value

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self._x) != len(other._x):
            return False
        for a, b in zip(self._x, other._x):
            if a != b:
                return False
        return True

    __hash__ = None

    def _check_length(self, other, op):
        if len(self._x) != len(other._x):
            raise LengthMismatch(
                "Vector.{0}(): different lengths of vectors: {1} {2}".format(
                    op, len(self._x), len(other._x)
                ),
                expected=len(self._x),
                actual=len(other._x),
            )

    def __add__(self, other):
        """elementwise addition of a scalar or an equal-length `Vector`

        Args:
            other (`object`,`Vector`): scalar or vector to add

        Returns:
            `Vector`: a new vector

        Raises:
            `LengthMismatch`: `other` is a `Vector` of different size

        """
        if isinstance(other, Vector):
            self._check_length(other, "__add__")
            return self._adopt([a + b for a, b in zip(self._x, other._x)], self.dtype)
        if is_container(other):
            return NotImplemented
        return self._adopt([a + other for a in self._x], self.dtype)

    def __radd__(self, other):
        if is_container(other):
            return NotImplemented
        return self._adopt([other + a for a in self._x], self.dtype)

    def __sub__(self, other):
        """elementwise subtraction of a scalar or an equal-length `Vector`

        Args:
            other (`object`,`Vector`): scalar or vector to subtract

        Returns:
            `Vector`: a new vector

        Raises:
            `LengthMismatch`: `other` is a `Vector` of different size

        """
        if isinstance(other, Vector):
            self._check_length(other, "__sub__")
            return self._adopt([a - b for a, b in zip(self._x, other._x)], self.dtype)
        if is_container(other):
            return NotImplemented
        return self._adopt([a - other for a in self._x], self.dtype)

    def __rsub__(self, other):
        if is_container(other):
            return NotImplemented
        return self._adopt([other - a for a in self._x], self.dtype)

    def __mul__(self, other):
        """scalar multiplication or dot product

        Args:
            other (`object`,`Vector`): scalar to scale by, or an
                equal-length vector to take the dot product with

        Returns:
            `Vector` for a scalar, a single element for a `Vector`

        Raises:
            `LengthMismatch`: `other` is a `Vector` of different size

        Note:
            the dot product is accumulated in index order starting from
            `dtype()`, which matters for floating point elements

        """
        if isinstance(other, Vector):
            self._check_length(other, "__mul__")
            total = self.dtype()
            for a, b in zip(self._x, other._x):
                total += a * b
            return total
        if is_container(other):
            return NotImplemented
        return self._adopt([a * other for a in self._x], self.dtype)

    def __rmul__(self, other):
        if is_container(other):
            return NotImplemented
        return self._adopt([other * a for a in self._x], self.dtype)

    def copy(self):
        """get a storage-independent copy of `Vector`

        Returns:
            `Vector`: copy of this `Vector`

        """
        try:
            values = [copy.copy(e) for e in self._x]
        except MemoryError as e:
            raise AllocationFailure(
                "Vector.copy(): unable to allocate {0} elements".format(len(self._x))
            ) from e
        return self._adopt(values, self.dtype)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self._adopt(copy.deepcopy(self._x, memo), self.dtype)

    def move(self):
        """transfer the storage to a new `Vector`, leaving this one empty

        Returns:
            `Vector`: the new owner of the elements

        Note:
            the source is left with size 0; it can still be assigned to
            or swapped with

        """
        new = self._adopt(self._x, self.dtype)
        self._x = []
        return new

    def swap(self, other):
        """exchange contents with another `Vector` in O(1)

        Args:
            other (`Vector`): the vector to swap with

        """
        self._x, other._x = other._x, self._x
        self.dtype, other.dtype = other.dtype, self.dtype

    def assign(self, other):
        """copy-assign from another `Vector`, adopting its size and content

        Args:
            other (`Vector`): the source

        Returns:
            `Vector`: self

        Note:
            the copy is made before anything is swapped in, so a failed
            copy leaves self unchanged

        """
        if other is self:
            return self
        tmp = other.copy()
        self.swap(tmp)
        return self

    def read(self, stream):
        """read `size` whitespace-separated elements from a text stream

        Args:
            stream (`io.TextIOBase`): an open text stream

        Returns:
            `Vector`: self

        Raises:
            `UnexpectedEndOfInput`: the stream ran out first
            `ParseError`: a token could not be parsed by `dtype`

        Note:
            nothing is stored unless all `size` elements parse

        """
        values = parse_tokens(read_tokens(stream, len(self._x)), self.dtype)
        self._x[:] = values
        return self

    def write(self, stream):
        """write the elements to a text stream separated by `Vector.sep`

        Args:
            stream (`io.TextIOBase`): an open text stream

        """
        stream.write(str(self))

    def __str__(self):
        return self.sep.join(str(e) for e in self._x)

    def __repr__(self):
        return "{0}({1!r})".format(type(self).__name__, self._x)

    def to_ascii(self, filename, verbose=False):
        """write a dynmat ASCII vector file

        Args:
            filename (`str`): filename to write to
            verbose (`bool`): flag to echo log events to the screen

        """
        from ..utils.io_utils import write_ascii

        write_ascii(self, filename, verbose=verbose)

    @classmethod
    def from_ascii(cls, filename, dtype=float, verbose=False):
        """load a dynmat ASCII vector file

        Args:
            filename (`str`): file to read from
            dtype (`callable`): element type.  Default is `float`
            verbose (`bool`): flag to echo log events to the screen

        Returns:
            `Vector`: the loaded vector

        """
        from ..utils.io_utils import read_ascii

        return read_ascii(filename, dtype=dtype, kind="vector", verbose=verbose)
