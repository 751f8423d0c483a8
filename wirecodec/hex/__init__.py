# Licensed under the GPLv3 - see LICENSE
"""Hexadecimal text encoding, two upper-case digits per byte."""
from .codec import encode_hex, decode_hex, HexDigits, HEX_DIGITS  # noqa

encode = encode_hex
decode = decode_hex
