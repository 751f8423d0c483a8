# Licensed under the GPLv3 - see LICENSE
"""URL and filename safe base64 encoding, without padding."""
from .alphabet import URLSAFE  # noqa
from .codec import encode_base64url as encode, decode_base64url as decode

__all__ = ['encode', 'decode']
