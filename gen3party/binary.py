"""
Bounds-checked little-endian readers used by every fixed-offset decoder.
"""

import struct

from .errors import OutOfBoundsError


def check_range(data, offset, width):
    """Raise OutOfBoundsError unless data[offset:offset+width] is fully inside data."""
    if offset < 0 or width < 0 or offset + width > len(data):
        raise OutOfBoundsError(offset, width, len(data))


def read_u8(data, offset):
    check_range(data, offset, 1)
    return data[offset]


def read_u16(data, offset):
    check_range(data, offset, 2)
    return struct.unpack_from("<H", data, offset)[0]


def read_u32(data, offset):
    check_range(data, offset, 4)
    return struct.unpack_from("<I", data, offset)[0]


def read_bytes(data, offset, size):
    check_range(data, offset, size)
    return bytes(data[offset:offset + size])
