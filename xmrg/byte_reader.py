# byte_reader.py
# ----------------
# Endian-aware primitive reads from a seekable binary stream.
#
# Exposes:
#   - ShortReadError           (OSError raised on truncated data)
#   - read_int32 / read_int16 / read_u8
#   - read_values(fd, endian, kind, count)   (bulk read -> numpy array)
#   - read_pad(fd)                            (consume a record marker)
#   - detect_endian(fd)

from __future__ import annotations
from typing import BinaryIO
import struct
import numpy as np

from xmrg.config import BIG_ENDIAN_PROBE, PAD_BYTES
from xmrg.models import Endian

# region Errors
class ShortReadError(OSError):
    """Fewer bytes were left in the stream than a read required."""

    def __init__(self, offset, wanted: int, got: int):
        self.offset = offset
        self.wanted = wanted
        self.got = got
        super().__init__(f"Short read at byte {offset}: wanted {wanted} bytes, got {got}")
# endregion

# region Primitive Reads
_WIDTHS = {"i4": 4, "i2": 2, "u1": 1}


def _tell(fd: BinaryIO):
    try:
        return fd.tell()
    except (OSError, AttributeError):
        return "unknown"


def read_exact(fd: BinaryIO, n: int) -> bytes:
    at = _tell(fd)
    buf = fd.read(n)
    if len(buf) != n:
        raise ShortReadError(at, n, len(buf))
    return buf


def read_int32(fd: BinaryIO, endian: Endian) -> int:
    return struct.unpack(endian.value + "i", read_exact(fd, 4))[0]


def read_int16(fd: BinaryIO, endian: Endian) -> int:
    return struct.unpack(endian.value + "h", read_exact(fd, 2))[0]


def read_u8(fd: BinaryIO, endian: Endian) -> int:
    # byte order is irrelevant for a single byte; kept for a uniform signature
    return struct.unpack(endian.value + "B", read_exact(fd, 1))[0]


def read_values(fd: BinaryIO, endian: Endian, kind: str, count: int) -> np.ndarray:
    """Read `count` consecutive values of one width ("i4", "i2" or "u1").

    The whole block is read at once, so a truncated stream raises before any
    value is returned. The result is in native byte order.
    """
    if kind not in _WIDTHS:
        raise ValueError(f"Unsupported value kind: {kind!r}")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    dtype = np.dtype(endian.value + kind)
    if count == 0:
        return np.empty(0, dtype=dtype.newbyteorder("="))
    buf = read_exact(fd, dtype.itemsize * count)
    return np.frombuffer(buf, dtype=dtype, count=count).astype(dtype.newbyteorder("="))


def read_pad(fd: BinaryIO) -> None:
    """Consume one Fortran record marker; its value is not interpreted."""
    read_exact(fd, PAD_BYTES)
# endregion

# region Endianness
def detect_endian(fd: BinaryIO) -> Endian:
    """Classify the stream from its first word, read big-endian.

    The first header field is a small known constant in one byte order and an
    implausibly large number in the other. Advances the stream by 4 bytes.
    """
    word = read_int32(fd, Endian.BIG)
    return Endian.BIG if word == BIG_ENDIAN_PROBE else Endian.LITTLE
# endregion
