# Licensed under the GPLv3 - see LICENSE
"""Text codecs by name.

Contains general ``encode`` and ``decode`` functions that look up a codec
by name, including possible codecs discovered via entry point
'wirecodec.io'.  A codec is a module that defines ``encode(data)``,
returning `str`, and ``decode(text)``, returning `bytes`.

Only 'wirecodec.io' entry points that point to a module (e.g.,
'hex = wirecodec.hex') are treated as codecs.

Attributes
----------
CODECS : list
    Available codecs.

"""
import sys
from importlib.metadata import EntryPoint, entry_points


__all__ = ['encode', 'decode']


__self__ = sys.modules[__name__]
"""Link to our own module, for convenience below."""

# We only load entries on demand, to keep import time minimal.
_entries = {}
"""Entry points found."""
_bad_entries = set()
"""Any entry points that failed to load. These will not be retried."""

_builtin_codecs = {
    'hex': 'wirecodec.hex',
    'base64': 'wirecodec.base64',
    'base64url': 'wirecodec.base64.url',
}


def __getattr__(attr):
    """Get a missing attribute from a possible entry point.

    Looks for the attribute among the (possibly updated) entry points,
    and, if found, tries loading the entry.  If that fails, the entry
    is added to _bad_entries to ensure it does not recur.
    """
    if attr.startswith('_') or attr in _bad_entries:
        raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")

    CODECS = globals().setdefault('CODECS', [])
    if attr not in _entries:
        if not _entries:
            # On initial update, we add our own codecs as explicit entries,
            # so they come first and work even in a pure source checkout,
            # where entry points are missing.
            _entries.update({
                name: EntryPoint(name, module, 'wirecodec.io')
                for name, module in _builtin_codecs.items()
                if name not in _bad_entries
            })

        _entries.update({entry.name: entry for entry
                         in entry_points(group='wirecodec.io')
                         if entry.name not in _bad_entries})
        CODECS.extend([name for name, entry in _entries.items()
                       if not (entry.attr or name in CODECS)])
        if attr == 'CODECS':
            return CODECS

    entry = _entries.get(attr, None)
    if entry is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")

    try:
        value = entry.load()
    except Exception:
        _entries.pop(attr)
        _bad_entries.add(attr)
        if attr in CODECS:
            CODECS.remove(attr)
        raise AttributeError(f"{entry} was not loadable. Now removed")

    # Update so we do not have to go through __getattr__ again.
    globals()[attr] = value
    return value


def __dir__():
    # Force update of entries, creates 'CODECS' if it doesn't exist.
    hasattr(__self__, 'absolutely_no_way_this_exists')
    return sorted(set(globals()).union(_entries).difference(_bad_entries))


def _get_codec(codec):
    if codec not in __self__.CODECS:
        raise ValueError(f"unknown codec {codec!r}; "
                         f"should be one of {__self__.CODECS}.")
    return getattr(__self__, codec)


def encode(data, codec):
    """Encode binary data as text with the named codec.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, `~numpy.ndarray` or `BufferView`
        Data to encode.
    codec : str
        Name of the codec, one of `CODECS` (e.g., 'hex', 'base64',
        'base64url').

    Returns
    -------
    text : str
    """
    return _get_codec(codec).encode(data)


def decode(text, codec):
    """Decode text to bytes with the named codec.

    Parameters
    ----------
    text : str
        Encoded text.
    codec : str
        Name of the codec, one of `CODECS`.

    Returns
    -------
    data : bytes
    """
    return _get_codec(codec).decode(text)
