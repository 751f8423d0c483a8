# Licensed under the GPLv3 - see LICENSE
"""Base64 encoder and decoder.

The standard and URL-safe variants share one implementation, parametrized
by an `~wirecodec.base64.alphabet.Alphabet`.  Bytes are processed in groups
of three, which are packed most-significant bit first into four 6-bit
values, each represented by one character of the alphabet.  A trailing
group of one or two bytes gives two or three characters, followed by
padding if the alphabet requires it.
"""
import numpy as np

from ..base.buffer import buffer_view
from ..base.errors import (ExpectingStringError, InvalidLengthError,
                           UnsupportedCharacterError, MangledPaddingError)
from .alphabet import INVALID, PAD, STANDARD, URLSAFE


__all__ = ['encoded_length', 'decoded_length', 'encode', 'decode',
           'encode_base64', 'decode_base64',
           'encode_base64url', 'decode_base64url']


def encoded_length(nbytes, padding=True):
    """Calculate the length of the encoded text.

    Parameters
    ----------
    nbytes : int
        Number of bytes to be encoded.
    padding : bool
        Whether the text will be padded to a multiple of 4 characters.

    Returns
    -------
    length : int
        Number of characters in the encoded text.
    complete : int
        Number of bytes in complete groups of three.
    remainder : int
        Number of bytes in the final, incomplete group (0, 1, or 2).
    """
    remainder = nbytes % 3
    complete = nbytes - remainder
    length = -(-nbytes // 3) * 4
    if remainder and not padding:
        # 2 characters for 1 byte, 3 for 2 bytes.
        length -= 3 - remainder
    return length, complete, remainder


def decoded_length(text):
    """Calculate the number of bytes encoded in base64 text.

    Parameters
    ----------
    text : str or bytes
        Encoded text.  Any trailing padding is ignored.

    Returns
    -------
    length : int
        Number of characters without the trailing padding.
    remainder : int
        Number of characters in the final, incomplete group (0, 2, or 3).
    nbytes : int
        Number of bytes encoded.

    Raises
    ------
    InvalidLengthError
        If the final group would consist of a single character.
    """
    length = len(text.rstrip('=' if isinstance(text, str) else b'='))
    remainder = length % 4
    if remainder == 1:
        raise InvalidLengthError("invalid base64 length {0} without padding."
                                 .format(length))
    # A 2-character tail holds 1 byte, a 3-character one 2 bytes.
    nbytes = length // 4 * 3 + max(remainder - 1, 0)
    return length, remainder, nbytes


def encode(data, alphabet=STANDARD):
    """Encode binary data as base64 text using the given alphabet.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, `~numpy.ndarray` or `BufferView`
        Data to encode.  Arrays are encoded in their in-memory byte order.
    alphabet : `~wirecodec.base64.alphabet.Alphabet`
        Alphabet to use.  Default: standard, with padding.

    Returns
    -------
    text : str
    """
    array = buffer_view(data).array
    length, complete, remainder = encoded_length(array.size,
                                                 alphabet.padding)
    table = alphabet.encode_table
    # Initialize with padding, which remains at the end if needed.
    out = np.full(length, PAD, dtype=np.uint8)
    nfull = complete // 3 * 4

    a, b, c = array[:complete].reshape(-1, 3).T
    chars = out[:nfull].reshape(-1, 4)
    chars[:, 0] = table[a >> 2]
    chars[:, 1] = table[(a & 0x3) << 4 | b >> 4]
    chars[:, 2] = table[(b & 0xf) << 2 | c >> 6]
    chars[:, 3] = table[c & 0x3f]

    if remainder == 1:
        a = int(array[complete])
        out[nfull:nfull+2] = table[[a >> 2, (a & 0x3) << 4]]
    elif remainder == 2:
        a, b = int(array[complete]), int(array[complete+1])
        out[nfull:nfull+3] = table[[a >> 2, (a & 0x3) << 4 | b >> 4,
                                    (b & 0xf) << 2]]

    return out.tobytes().decode('ascii')


def decode(text, alphabet=STANDARD):
    """Decode base64 text using the given alphabet.

    Trailing padding is allowed, but not required, for either alphabet.
    Decoding is all or nothing: on any error, no output is produced.

    Parameters
    ----------
    text : str
        Encoded text.
    alphabet : `~wirecodec.base64.alphabet.Alphabet`
        Alphabet to use.  Default: standard.

    Returns
    -------
    data : bytes

    Raises
    ------
    ExpectingStringError
        If ``text`` is not a `str`.
    InvalidLengthError
        If the unpadded length is one more than a multiple of 4.
    UnsupportedCharacterError
        If characters outside the alphabet are present.
    MangledPaddingError
        If the final character has bits set that do not encode data.
    """
    if not isinstance(text, str):
        raise ExpectingStringError("base64 decoding requires str, not {0}."
                                   .format(type(text).__name__))
    length, remainder, nbytes = decoded_length(text)
    if length == 0:
        return b''
    try:
        raw = text[:length].encode('ascii')
    except UnicodeEncodeError as exc:
        raise UnsupportedCharacterError(
            "unsupported characters in base64: {0!r}"
            .format(text[exc.start:exc.end])) from exc

    values = alphabet.decode_table[np.frombuffer(raw, dtype=np.uint8)]
    full = length - remainder
    groups = values[:full].reshape(-1, 4)
    bad = (groups == INVALID).any(axis=1)
    if bad.any():
        start = np.flatnonzero(bad)[0] * 4
        raise UnsupportedCharacterError(
            "unsupported characters in base64: {0!r}"
            .format(text[start:start+4]))

    out = np.empty(nbytes, dtype=np.uint8)
    ncomplete = full // 4 * 3
    a, b, c, d = groups.T
    octets = out[:ncomplete].reshape(-1, 3)
    octets[:, 0] = a << 2 | b >> 4
    octets[:, 1] = (b & 0xf) << 4 | c >> 2
    octets[:, 2] = (c & 0x3) << 6 | d

    if remainder:
        tail = values[full:]
        if (tail == INVALID).any():
            raise UnsupportedCharacterError(
                "unsupported characters in base64: {0!r}"
                .format(text[full:length]))
        a, b = int(tail[0]), int(tail[1])
        out[ncomplete] = a << 2 | b >> 4
        if remainder == 2:
            last_unused = b & 0xf
        else:
            c = int(tail[2])
            out[ncomplete+1] = (b & 0xf) << 4 | c >> 2
            last_unused = c & 0x3
        if last_unused:
            raise MangledPaddingError(
                "base64 text {0!r} ends with non-zero padding bits."
                .format(text[full:length]))

    return out.tobytes()


def encode_base64(data):
    """Encode binary data as standard, padded base64 text.

    Uses ``+`` and ``/`` for values 62 and 63.
    """
    return encode(data, STANDARD)


def decode_base64(text):
    """Decode standard base64 text."""
    return decode(text, STANDARD)


def encode_base64url(data):
    """Encode binary data as URL-safe base64 text, without padding.

    Uses ``-`` and ``_`` for values 62 and 63.
    """
    return encode(data, URLSAFE)


def decode_base64url(text):
    """Decode URL-safe base64 text."""
    return decode(text, URLSAFE)
