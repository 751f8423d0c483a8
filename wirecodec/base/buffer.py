# Licensed under the GPLv3 - see LICENSE
"""
Byte-addressable views over binary data.

Defines `BufferView`, which gives uniform byte access to the various
kinds of binary input accepted by the codecs: raw buffers (`bytes`,
`bytearray`), numeric `~numpy.ndarray` instances, and byte views
(`memoryview` or another `BufferView`).  A view always shares memory with
its source; nothing is copied.

Note that a view on a multi-byte numeric array exposes the bytes as they
are laid out in memory.  For native-order arrays, that layout depends on
the host, so encoding such an array directly gives host-dependent text.
Use `~wirecodec.endian.array_to_endian` first if the result should be
portable.
"""
import operator

import numpy as np

from .errors import UnsupportedTypeError


__all__ = ['BufferView', 'buffer_view', 'is_numeric_dtype']


def is_numeric_dtype(dtype):
    """Whether the dtype is one of the supported fixed-width numeric types.

    These are signed and unsigned integers of 8, 16, 32 and 64 bits, and
    floats of 32 and 64 bits, in any byte order.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in 'iu':
        return dtype.itemsize in (1, 2, 4, 8)
    return dtype.kind == 'f' and dtype.itemsize in (4, 8)


def _byte_array(data):
    """Get a 1-D uint8 array sharing memory with data."""
    if isinstance(data, BufferView):
        return data.array

    if isinstance(data, np.ndarray):
        if not is_numeric_dtype(data.dtype):
            raise UnsupportedTypeError(
                "unsupported array dtype {0}".format(data.dtype))
        if not data.flags.c_contiguous:
            raise UnsupportedTypeError(
                "cannot view a non-contiguous array as bytes.")
        return data.reshape(-1).view(np.uint8)

    if isinstance(data, memoryview):
        if not data.c_contiguous:
            raise UnsupportedTypeError(
                "cannot view a non-contiguous memoryview as bytes.")
        return np.frombuffer(data.cast('B'), dtype=np.uint8)

    if isinstance(data, (bytes, bytearray)):
        return np.frombuffer(data, dtype=np.uint8)

    raise UnsupportedTypeError("unsupported type {0}; expected bytes, "
                               "bytearray, memoryview or numeric ndarray."
                               .format(type(data).__name__))


class BufferView:
    """Byte-level access to a binary buffer.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, `~numpy.ndarray`, or `BufferView`
        Data to view.  Arrays should have one of the supported integer or
        float dtypes and be C-contiguous.  Bytes of numeric arrays are
        exposed in memory order.

    Raises
    ------
    UnsupportedTypeError
        If ``data`` is not of one of the types listed above.
    """

    def __init__(self, data):
        self.array = _byte_array(data)

    @property
    def nbytes(self):
        """Number of bytes in the view."""
        return self.array.size

    def __len__(self):
        return self.array.size

    @property
    def readonly(self):
        """Whether the underlying memory can be written to."""
        return not self.array.flags.writeable

    def getbyte(self, index):
        """Get the byte at the given index, as an integer."""
        return int(self.array[operator.index(index)])

    def setbyte(self, index, value):
        """Set the byte at the given index.

        Raises `ValueError` if the value does not fit in a byte or if the
        underlying memory is read-only.
        """
        value = operator.index(value)
        if not 0 <= value < 256:
            raise ValueError("byte value {0} not in range(256).".format(value))
        self.array[operator.index(index)] = value

    def __getitem__(self, item):
        return self.array[item]

    def __bytes__(self):
        return self.array.tobytes()

    def __array__(self, dtype=None, copy=None):
        """Interface to arrays.

        Returns the underlying byte array unless a copy is requested or
        needed for a different dtype.  If a copy is needed but ``copy`` is
        `False`, raises `ValueError`.
        """
        if copy or (dtype is not None and np.dtype(dtype) != self.array.dtype):
            if copy is False:
                raise ValueError("cannot give a view of the bytes with "
                                 "dtype {0}.".format(dtype))
            return np.array(self.array, dtype=dtype, copy=True)

        return self.array

    def __repr__(self):
        return "<{0} nbytes={1}>".format(self.__class__.__name__, self.nbytes)


def buffer_view(data):
    """Get a `BufferView` for the data, reusing it if it already is one."""
    if isinstance(data, BufferView):
        return data
    return BufferView(data)
