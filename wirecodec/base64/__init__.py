# Licensed under the GPLv3 - see LICENSE
"""Base64 text encoding, following RFC 4648.

The standard alphabet (``+``, ``/``, with ``=`` padding) is used by
`encode` and `decode` in this module; the URL-safe one (``-``, ``_``,
without padding) by those in `~wirecodec.base64.url`.
"""
from .alphabet import Alphabet, STANDARD, URLSAFE  # noqa
from .codec import (encode_base64, decode_base64,  # noqa
                    encode_base64url, decode_base64url,
                    encoded_length, decoded_length)

encode = encode_base64
decode = decode_base64
