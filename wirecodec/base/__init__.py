# Licensed under the GPLv3 - see LICENSE
"""Base implementations shared between all codecs.

The `~wirecodec.base.buffer` module defines `~wirecodec.base.buffer.BufferView`,
through which the codecs and the endianness conversions access their binary
input, whether given as raw bytes, a numpy array, or a memoryview.  The
exceptions raised on malformed or unsupported input are collected in
`~wirecodec.base.errors`.
"""
from .errors import *  # noqa
from .buffer import BufferView, buffer_view  # noqa
