# Licensed under the GPLv3 - see LICENSE
"""
Conversion between numeric arrays and bytes in a given byte order.

Protocols generally specify the byte order in which multi-byte numbers are
sent, which may well differ from the order the host uses in memory.
`array_to_endian` gives the bytes representing an array in a requested
order, and `array_from_endian` reads numbers from bytes known to be in a
given order, independent of the host.
"""
import warnings

import numpy as np

from ..base.buffer import buffer_view, is_numeric_dtype
from ..base.errors import UnsupportedTypeError, IncompleteByteSequenceError
from .host import HOST_ENDIANNESS


__all__ = ['ELEMENT_TYPES', 'array_to_endian', 'array_from_endian']


ELEMENT_TYPES = {
    'uint8': 1, 'int8': 1,
    'uint16': 2, 'int16': 2,
    'uint32': 4, 'int32': 4,
    'uint64': 8, 'int64': 8,
    'float32': 4, 'float64': 8}
"""Names of the supported element types, with their size in bytes."""

_ENDIANNESS = ('little', 'big')


def _check_endianness(endianness):
    if endianness not in _ENDIANNESS:
        raise ValueError("endianness should be 'little' or 'big', not {0!r}."
                         .format(endianness))


def _element_dtype(dtype):
    """Get the native dtype for an element type name (or dtype)."""
    if dtype is None:
        name = None
    elif isinstance(dtype, str):
        name = dtype
    else:
        name = np.dtype(dtype).name
    if name not in ELEMENT_TYPES:
        raise ValueError("element type should be one of {0}, not {1!r}."
                         .format(', '.join(ELEMENT_TYPES), dtype))
    return np.dtype(name)


def _memory_order(dtype, host):
    """Order in which the bytes of dtype elements are stored in memory."""
    if dtype.byteorder == '<':
        return 'little'
    elif dtype.byteorder == '>':
        return 'big'
    # Native ('=') or not applicable ('|').
    return host


def _to_endian(array, endianness, host):
    if (array.dtype.itemsize == 1
            or _memory_order(array.dtype, host) == endianness):
        return array.tobytes()
    return array.byteswap().tobytes()


def _from_endian(array, endianness, dtype, host):
    """Interpret a uint8 array as elements of dtype stored in endianness.

    Always returns a new, native-order array.
    """
    width = dtype.itemsize
    if array.size & (width - 1):
        raise IncompleteByteSequenceError(
            "{0} bytes cannot be split in elements of {1} bytes."
            .format(array.size, width))
    elements = array.view(dtype)
    if width > 1 and endianness != host:
        return elements.byteswap()
    return elements.copy()


def array_to_endian(array, endianness):
    """Get the bytes of a numeric array with elements in the given order.

    Parameters
    ----------
    array : `~numpy.ndarray`
        Array with 8, 16, 32 or 64-bit integers, or 32 or 64-bit floats.
        Elements are taken in C order.
    endianness : {'little', 'big'}
        Byte order to write the elements in.

    Returns
    -------
    data : bytes
        ``array.size * array.itemsize`` bytes.  For 8-bit types, simply
        the array's bytes.
    """
    _check_endianness(endianness)
    if not isinstance(array, np.ndarray) or not is_numeric_dtype(array.dtype):
        raise UnsupportedTypeError(
            "can only convert numeric arrays, not {0}."
            .format(getattr(array, 'dtype', type(array).__name__)))
    return _to_endian(array, endianness, HOST_ENDIANNESS)


def array_from_endian(data, endianness, dtype):
    """Read numbers of a given type from bytes in a given order.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, `~numpy.ndarray` or `BufferView`
        Bytes to read from.  Arrays are read in their in-memory byte order;
        for multi-byte arrays this is host-dependent, so a warning is
        given.  To read part of a larger buffer, pass a slice of a
        memoryview.
    endianness : {'little', 'big'}
        Byte order in which the numbers are stored.
    dtype : str
        One of the names in `ELEMENT_TYPES`, e.g., 'uint32'.

    Returns
    -------
    array : `~numpy.ndarray`
        New array, in native byte order, with ``nbytes // itemsize``
        elements.  For 8-bit types, a copy of the bytes.

    Raises
    ------
    IncompleteByteSequenceError
        If the number of bytes is not a multiple of the element size.
    """
    _check_endianness(endianness)
    dtype = _element_dtype(dtype)
    view = buffer_view(data)
    if isinstance(data, np.ndarray) and data.dtype.itemsize > 1:
        warnings.warn("reading bytes of a {0} array in memory order, which "
                      "depends on the host. Pass raw bytes instead."
                      .format(data.dtype), UserWarning, stacklevel=2)
    return _from_endian(view.array, endianness, dtype, HOST_ENDIANNESS)
