# Licensed under the GPLv3 - see LICENSE
"""Byte order of the host.

Determined once, on import, by storing the 16-bit value 1 and checking
which of its two bytes ends up non-zero.
"""
import numpy as np


__all__ = ['probe_endianness', 'HOST_ENDIANNESS', 'host_endianness',
           'host_is_little_endian', 'host_is_big_endian']


def probe_endianness(probe):
    """Classify a byte order from a 2-byte probe.

    Parameters
    ----------
    probe : sequence of int
        The two bytes in which the 16-bit integer 1 was stored.

    Returns
    -------
    endianness : {'little', 'big'}
    """
    low, high = (int(byte) for byte in probe)
    if (low, high) == (1, 0):
        return 'little'
    if (low, high) == (0, 1):
        return 'big'
    raise ValueError("probe {0} does not hold the 16-bit value 1."
                     .format([low, high]))


def _detect():
    return probe_endianness(np.ones(1, dtype='=u2').view(np.uint8))


HOST_ENDIANNESS = _detect()
"""Byte order of the host, 'little' or 'big'."""


def host_endianness():
    """Byte order used by the host, 'little' or 'big'."""
    return HOST_ENDIANNESS


def host_is_little_endian():
    """Whether the host stores the least significant byte first."""
    return HOST_ENDIANNESS == 'little'


def host_is_big_endian():
    """Whether the host stores the most significant byte first."""
    return HOST_ENDIANNESS == 'big'
