"""dynmat utils module contains the text stream tokenizer shared by
`Vector` and `Matrix` and the ASCII file helpers (`dynmat.utils.io_utils`)
"""
from . import stream_utils
