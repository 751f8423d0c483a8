# Licensed under the GPLv3 - see LICENSE
"""Hexadecimal encoder and decoder."""
import numpy as np
from astropy.utils import lazyproperty

from ..base.buffer import buffer_view
from ..base.errors import BadInputError, ExpectingStringError


__all__ = ['HexDigits', 'HEX_DIGITS', 'encode_hex', 'decode_hex']


class HexDigits:
    """Digits used to represent the 16 values of a nibble.

    Parameters
    ----------
    digits : str
        The 16 characters to use for values 0 to 15 on output.  On input,
        their lower-case versions are accepted as well.
    """

    def __init__(self, digits='0123456789ABCDEF'):
        if len(digits) != 16 or len(set(digits)) != 16:
            raise ValueError("need 16 distinct digits.")
        self.digits = digits
        self.encode_table = np.frombuffer(digits.encode('ascii'),
                                          dtype=np.uint8)

    @lazyproperty
    def decode_table(self):
        """Nibble value for each possible input byte, 255 if not a digit.

        Built on first use and cached.
        """
        table = np.full(256, 255, dtype=np.uint8)
        for value, digit in enumerate(self.digits):
            table[ord(digit)] = value
            table[ord(digit.lower())] = value
        table.flags.writeable = False
        return table


HEX_DIGITS = HexDigits()
"""Upper-case hexadecimal digits."""


def encode_hex(data):
    """Encode binary data as upper-case hexadecimal text.

    Each byte becomes two digits, most significant nibble first.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, `~numpy.ndarray` or `BufferView`
        Data to encode.  Arrays are encoded in their in-memory byte order.

    Returns
    -------
    text : str
        Twice as many characters as there were bytes.
    """
    array = buffer_view(data).array
    out = np.empty((array.size, 2), dtype=np.uint8)
    out[:, 0] = HEX_DIGITS.encode_table[array >> 4]
    out[:, 1] = HEX_DIGITS.encode_table[array & 0xf]
    return out.tobytes().decode('ascii')


def decode_hex(text):
    """Decode hexadecimal text to bytes.

    Both upper and lower case digits are accepted.  Decoding is all or
    nothing: any invalid character means no output.

    Parameters
    ----------
    text : str
        Text with an even number of hexadecimal digits.

    Returns
    -------
    data : bytes

    Raises
    ------
    ExpectingStringError
        If ``text`` is not a `str`.
    BadInputError
        If ``text`` has odd length or contains non-hexadecimal characters.
    """
    if not isinstance(text, str):
        raise ExpectingStringError("hex decoding requires str, not {0}."
                                   .format(type(text).__name__))
    if len(text) % 2:
        raise BadInputError("hex text should have even length, got {0}."
                            .format(len(text)))
    try:
        raw = text.encode('ascii')
    except UnicodeEncodeError as exc:
        raise BadInputError("hex text contains non-ASCII characters.") from exc

    nibbles = HEX_DIGITS.decode_table[np.frombuffer(raw, dtype=np.uint8)]
    bad = nibbles == 255
    if bad.any():
        start = np.flatnonzero(bad)[0] // 2 * 2
        raise BadInputError("invalid hex digits {0!r} at position {1}."
                            .format(text[start:start+2], start))

    return ((nibbles[0::2] << 4) | nibbles[1::2]).tobytes()
