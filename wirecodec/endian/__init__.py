# Licensed under the GPLv3 - see LICENSE
"""Byte order of the host, and conversion of numeric arrays to and from
bytes with a given byte order."""
from .host import (HOST_ENDIANNESS, host_endianness,  # noqa
                   host_is_little_endian, host_is_big_endian)
from .convert import ELEMENT_TYPES, array_to_endian, array_from_endian  # noqa
