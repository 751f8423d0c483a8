# Licensed under the GPLv3 - see LICENSE
"""Base64 alphabets, as defined in RFC 4648.

The standard and URL-safe alphabets differ only in the characters used for
values 62 and 63, and in whether encoded text is padded with ``=``.
"""
import string

import numpy as np
from astropy.utils import lazyproperty


__all__ = ['INVALID', 'PAD', 'Alphabet', 'STANDARD', 'URLSAFE']


INVALID = 255
"""Entry in decode tables for bytes not in the alphabet."""
PAD = ord('=')
"""Byte value of the padding character."""

_BASE62 = string.ascii_uppercase + string.ascii_lowercase + string.digits


class Alphabet:
    """Base64 alphabet.

    Parameters
    ----------
    char62, char63 : str
        Characters for the 6-bit values 62 and 63.
    padding : bool
        Whether encoded text is padded with ``=`` to a multiple of 4.
    name : str, optional
        Used in the representation.
    """

    def __init__(self, char62, char63, padding, name=None):
        chars = _BASE62 + char62 + char63
        if len(set(chars)) != 64 or not chars.isascii() or '=' in chars:
            raise ValueError("alphabet should consist of 64 distinct ASCII "
                             "characters other than '='.")
        self.chars = chars
        self.padding = padding
        self.name = name
        self.encode_table = np.frombuffer(chars.encode('ascii'),
                                          dtype=np.uint8)

    @lazyproperty
    def decode_table(self):
        """6-bit value for each possible input byte.

        Bytes not in the alphabet map to `INVALID`.  The table is built
        completely on first access, and cached.
        """
        table = np.full(256, INVALID, dtype=np.uint8)
        table[self.encode_table] = np.arange(64, dtype=np.uint8)
        table.flags.writeable = False
        return table

    def __repr__(self):
        return ("<{0} {1}{2}{3}>"
                .format(self.__class__.__name__,
                        '' if self.name is None else self.name + ': ',
                        self.chars[62:],
                        ', padded' if self.padding else ''))


STANDARD = Alphabet('+', '/', padding=True, name='STANDARD')
"""Standard base64 alphabet, with padding."""
URLSAFE = Alphabet('-', '_', padding=False, name='URLSAFE')
"""URL and filename safe base64 alphabet, without padding."""
