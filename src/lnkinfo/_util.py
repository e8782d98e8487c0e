"""Internal helpers for bounds-checked integer reads and string decoding."""

import struct

from ._constants import (
    GENERIC_SURROGATE_MASK,
    GENERIC_SURROGATE_VALUE,
    HIGH_SURROGATE_VALUE,
    LOW_SURROGATE_VALUE,
    REPLACEMENT_CODEPOINT,
    SURROGATE_CODEPOINT_BITS,
    SURROGATE_CODEPOINT_MASK,
    SURROGATE_CODEPOINT_OFFSET,
    SURROGATE_MASK,
)
from ._errors import OutOfRangeError

_INT_FORMATS = {1: "<B", 2: "<H", 4: "<I"}


def read_integer(data: bytes, off: int, size: int) -> int:
    """Read an unsigned little-endian integer of *size* bytes at *off*.

    Every read of the input goes through here, so this is the one place the
    buffer bounds are checked.
    """
    fmt = _INT_FORMATS[size]
    if off < 0 or off + size > len(data):
        raise OutOfRangeError(
            f"Read of {size} byte(s) at offset 0x{off:X} exceeds data length "
            f"0x{len(data):X}"
        )
    return struct.unpack_from(fmt, data, off)[0]


def transcode_utf16(data: bytes, off: int, stop: int) -> tuple[bytes, int]:
    """Decode one UTF-16LE scalar value at *off* into UTF-8.

    *stop* is the exclusive end of the field being decoded.  Returns
    ``(utf8_bytes, consumed)`` where *consumed* is 2 or 4.  Unpaired or
    misordered surrogates decode to U+FFFD instead of raising.
    """
    high = read_integer(data, off, 2)
    consumed = 2
    if high & GENERIC_SURROGATE_MASK != GENERIC_SURROGATE_VALUE:
        codepoint = high
    elif high & SURROGATE_MASK != HIGH_SURROGATE_VALUE or stop - off < 4:
        codepoint = REPLACEMENT_CODEPOINT
    else:
        low = read_integer(data, off + 2, 2)
        if low & SURROGATE_MASK != LOW_SURROGATE_VALUE:
            codepoint = REPLACEMENT_CODEPOINT
        else:
            codepoint = (
                ((high & SURROGATE_CODEPOINT_MASK) << SURROGATE_CODEPOINT_BITS)
                | (low & SURROGATE_CODEPOINT_MASK)
            ) + SURROGATE_CODEPOINT_OFFSET
            consumed = 4
    return chr(codepoint).encode("utf-8"), consumed


def _transcode_range(data: bytes, start: int, stop: int) -> str:
    out = bytearray()
    pos = start
    while pos < stop:
        chunk, consumed = transcode_utf16(data, pos, stop)
        out += chunk
        pos += consumed
    return out.decode("utf-8")


def read_counted_utf16(data: bytes, off: int) -> tuple[str, int]:
    """Read a StringData entry: uint16 code-unit count, then UTF-16LE units.

    Returns ``(text, next_offset)`` where *next_offset* is the first byte
    after the field.
    """
    count = read_integer(data, off, 2)
    stop = off + 2 + count * 2
    return _transcode_range(data, off + 2, stop), stop


def read_utf16_bytes(data: bytes, off: int, nbytes: int) -> str:
    """Decode exactly *nbytes* bytes of UTF-16LE starting at *off*."""
    return _transcode_range(data, off, off + nbytes)


def read_latin1_z(data: bytes, off: int) -> tuple[str, int]:
    """Read a NUL-terminated Latin-1 string at *off*.

    Returns ``(text, next_offset)`` with *next_offset* just past the NUL.
    A string that runs off the end of *data* raises :class:`OutOfRangeError`.
    """
    end = off
    while read_integer(data, end, 1):
        end += 1
    return bytes(data[off:end]).decode("latin-1"), end + 1
