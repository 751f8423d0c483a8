# Licensed under the GPLv3 - see LICENSE
"""Binary data codecs: hexadecimal, base64, and byte-order conversion."""

from .base.errors import *  # noqa
from .base.buffer import BufferView, buffer_view  # noqa
from .hex import encode_hex, decode_hex  # noqa
from .base64 import (encode_base64, decode_base64,  # noqa
                     encode_base64url, decode_base64url)
from .endian import (host_endianness, host_is_little_endian,  # noqa
                     host_is_big_endian, array_to_endian, array_from_endian)

try:
    from .version import version as __version__
except ImportError:
    __version__ = ''

# Define minima for the documentation, but do not bother to explicitly check.
__minimum_python_version__ = '3.10'
__minimum_astropy_version__ = '5.1'
__minimum_numpy_version__ = '1.24'
