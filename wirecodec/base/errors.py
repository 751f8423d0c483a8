# Licensed under the GPLv3 - see LICENSE
"""Exceptions raised by the codecs and the endianness conversions.

All inherit from `CodecError`, as well as from the builtin exception that
best describes them, so that callers can catch either.
"""


__all__ = ['CodecError', 'UnsupportedTypeError', 'BadInputError',
           'ExpectingStringError', 'InvalidLengthError',
           'UnsupportedCharacterError', 'MangledPaddingError',
           'IncompleteByteSequenceError']


class CodecError(Exception):
    """Base class for all encoding and decoding failures."""


class UnsupportedTypeError(CodecError, TypeError):
    """Input is not a recognized buffer-like type."""


class BadInputError(CodecError, ValueError):
    """Malformed hexadecimal text."""


class ExpectingStringError(BadInputError, TypeError):
    """Decoder was given something other than a `str`."""


class InvalidLengthError(CodecError, ValueError):
    """Base64 text whose unpadded length leaves a single character."""


class UnsupportedCharacterError(CodecError, ValueError):
    """Base64 text with characters outside of the alphabet."""


class MangledPaddingError(CodecError, ValueError):
    """Base64 tail with bits set that padding requires to be zero."""


class IncompleteByteSequenceError(CodecError, ValueError):
    """Byte count not a multiple of the requested element size."""
