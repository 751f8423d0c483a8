# Licensed under the GPLv3 - see LICENSE
import pytest
import numpy as np

from .. import io as wio
from ..base.errors import BadInputError, MangledPaddingError


@pytest.mark.parametrize(('codec', 'text'), [
    ('hex', '68656C6C6F20776F726C64'),
    ('base64', 'aGVsbG8gd29ybGQ='),
    ('base64url', 'aGVsbG8gd29ybGQ')])
class TestByName:
    def test_encode(self, codec, text):
        assert wio.encode(b'hello world', codec) == text
        assert wio.encode(np.frombuffer(b'hello world', 'u1'), codec) == text

    def test_decode(self, codec, text):
        assert wio.decode(text, codec) == b'hello world'

    def test_empty(self, codec, text):
        assert wio.encode(b'', codec) == ''
        assert wio.decode('', codec) == b''


def test_errors_pass_through():
    with pytest.raises(BadInputError):
        wio.decode('0', 'hex')
    with pytest.raises(MangledPaddingError):
        wio.decode('A/==', 'base64')


@pytest.mark.parametrize('codec', ('base32', 'HEX', '_entries', None))
def test_unknown_codec(codec):
    with pytest.raises(ValueError, match='unknown codec'):
        wio.encode(b'', codec)
    with pytest.raises(ValueError, match='unknown codec'):
        wio.decode('', codec)


def test_codecs_listed():
    assert {'hex', 'base64', 'base64url'} <= set(wio.CODECS)
    assert {'hex', 'base64', 'base64url'} <= set(dir(wio))
