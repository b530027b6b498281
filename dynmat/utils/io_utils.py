"""ASCII file input/output for `Vector` and `Matrix`.

A dynmat ASCII file holds a one-line header `<kind> <size>`, where kind
is ``vector`` or ``matrix``, followed by the container's stream text::

    matrix 2
    1 0
    0 1
"""
from ..errors import DynmatError, ParseError
from ..logger import Logger
from ..mat.mat_handler import Matrix
from ..vec.vec_handler import Vector
from .stream_utils import read_token

kinds = {"vector": Vector, "matrix": Matrix}


def _kind_of(container):
    for kind, cls in kinds.items():
        if isinstance(container, cls):
            return kind
    raise TypeError(
        "io_utils: can't write object of type {0}".format(type(container).__name__)
    )


def write_ascii(container, filename, verbose=False):
    """write a `Vector` or `Matrix` to a dynmat ASCII file

    Args:
        container (`Vector`,`Matrix`): the thing to write
        filename (`str`): filename to write to
        verbose (`bool`): flag to echo log events to the screen. Can also
            be a log filename

    Example::

        m = dynmat.Matrix(3)
        dynmat.utils.io_utils.write_ascii(m, "m.mat")

    """
    kind = _kind_of(container)
    logger = Logger(verbose)
    logger.log("writing {0} {1} to {2}".format(kind, container.size, filename))
    with open(filename, "w") as f:
        f.write("{0} {1}\n".format(kind, container.size))
        try:
            container.write(f)
        except Exception as e:
            logger.lraise(str(e), e)
        if kind == "vector":
            f.write("\n")
    logger.log("writing {0} {1} to {2}".format(kind, container.size, filename))
    logger.close()


def read_ascii(filename, dtype=float, kind=None, verbose=False):
    """read a dynmat ASCII file into a new `Vector` or `Matrix`

    Args:
        filename (`str`): file to read from
        dtype (`callable`): element type. Default is `float`
        kind (`str`): if not `None`, the kind ("vector" or "matrix") the
            file must hold
        verbose (`bool`): flag to echo log events to the screen. Can also
            be a log filename

    Returns:
        `Vector` or `Matrix`: the loaded container

    Raises:
        `ParseError`: the header is malformed or names the wrong kind
        `UnexpectedEndOfInput`: the file holds too few elements

    Note:
        tokens left over after the elements are ignored with a
        `DynmatWarning`

    """
    logger = Logger(verbose)
    logger.log("reading {0}".format(filename))
    with open(filename, "r") as f:
        header = f.readline().strip().lower().split()
        if len(header) != 2 or header[0] not in kinds:
            logger.lraise(
                "read_ascii(): bad header in {0}: '{1}'".format(
                    filename, " ".join(header)
                ),
                ParseError,
            )
        if kind is not None and header[0] != kind:
            logger.lraise(
                "read_ascii(): {0} holds a {1}, not a {2}".format(
                    filename, header[0], kind
                ),
                ParseError,
            )
        try:
            size = int(header[1])
        except ValueError:
            logger.lraise(
                "read_ascii(): can't cast size '{0}' to int".format(header[1]),
                ParseError,
            )
        try:
            container = kinds[header[0]](size, dtype=dtype)
            container.read(f)
        except DynmatError as e:
            logger.lraise(str(e), e)
        extra = read_token(f)
        if extra is not None:
            logger.warn(
                "read_ascii(): ignoring data after {0} {1} in {2}, starting "
                "with '{3}'".format(header[0], size, filename, extra)
            )
    logger.log("reading {0}".format(filename))
    logger.close()
    return container
