"""Whitespace-token reading from text streams.

Tokens are read one character at a time so that consecutive reads from
the same stream (several vectors, or the rows of a matrix) never lose
data buffered past the last token consumed.
"""
from ..errors import ParseError, UnexpectedEndOfInput


def read_token(stream):
    """read the next whitespace-delimited token from a text stream

    Args:
        stream (`io.TextIOBase`): an open text stream

    Returns:
        `str`: the token, or `None` if the stream is exhausted before any
        non-whitespace character is found

    Note:
        the single whitespace character terminating the token is consumed

    """
    c = stream.read(1)
    while c and c.isspace():
        c = stream.read(1)
    if not c:
        return None
    chars = []
    while c and not c.isspace():
        chars.append(c)
        c = stream.read(1)
    return "".join(chars)


def read_tokens(stream, count):
    """read exactly `count` tokens from a text stream

    Args:
        stream (`io.TextIOBase`): an open text stream
        count (`int`): number of tokens to read

    Returns:
        [`str`]: the tokens, in stream order

    Raises:
        `UnexpectedEndOfInput`: the stream ran out first

    """
    tokens = []
    for _ in range(count):
        token = read_token(stream)
        if token is None:
            raise UnexpectedEndOfInput(
                "read_tokens(): stream exhausted after {0} of {1} tokens".format(
                    len(tokens), count
                ),
                expected=count,
                actual=len(tokens),
            )
        tokens.append(token)
    return tokens


def parse_tokens(tokens, dtype):
    """parse text tokens into element values with the element type's own rule

    Args:
        tokens ([`str`]): tokens to parse
        dtype (`callable`): element type, called with one token

    Returns:
        [`object`]: parsed values

    Raises:
        `ParseError`: a token was rejected by `dtype`

    """
    values = []
    for token in tokens:
        try:
            values.append(dtype(token))
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ParseError(
                "parse_tokens(): can't cast '{0}' to {1}".format(
                    token, getattr(dtype, "__name__", str(dtype))
                ),
                token=token,
            ) from e
    return values
