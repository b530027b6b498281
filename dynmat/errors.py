"""Exception hierarchy for dynmat containers.

Every error derives from `DynmatError` and from the closest builtin
exception, so callers can catch either the library error or the
builtin one (e.g. `IndexError` for a failed checked index).
"""
from .dynmat_warnings import DynmatWarning


class DynmatError(Exception):
    """Base exception for all dynmat errors."""

    pass


class InvalidSize(DynmatError, ValueError):
    """requested container dimension is not positive, exceeds the
    configured maximum, or does not describe a square matrix
    """

    def __init__(self, message, size=None, max_size=None):
        super().__init__(message)
        self.size = size
        self.max_size = max_size


class IndexOutOfRange(DynmatError, IndexError):
    """checked indexing with an index outside [0, size)"""

    def __init__(self, message, index=None, size=None):
        super().__init__(message)
        self.index = index
        self.size = size


class LengthMismatch(DynmatError, ValueError):
    """binary operation between containers of unequal declared size"""

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class AllocationFailure(DynmatError, MemoryError):
    """storage could not be obtained"""

    pass


class ParseError(DynmatError, ValueError):
    """a text token could not be parsed into the element type"""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class UnexpectedEndOfInput(DynmatError, EOFError):
    """the stream ran out before all elements were read"""

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
