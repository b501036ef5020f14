# region Imports
from typing import BinaryIO
import numpy as np
from xmrg.byte_reader import read_pad, read_values
from xmrg.config import NO_DATA, RAW_SCALE
from xmrg.models import Endian
# endregion

# region Value Conversion
def to_physical(raw: int) -> float:
    """Hundredths of a millimeter -> millimeters; negative means no data."""
    if raw < 0:
        return NO_DATA
    return raw / RAW_SCALE


def to_physical_array(raw: np.ndarray) -> np.ndarray:
    raw = np.asarray(raw)
    return np.where(raw < 0, NO_DATA, raw.astype(np.float64) / RAW_SCALE)
# endregion

# region Row Decoding
def read_row(fd: BinaryIO, columns: int, endian: Endian) -> np.ndarray:
    """Decode one record: pad, `columns` int16 samples, pad.

    Consumes exactly 8 + 2 * columns bytes.
    """
    read_pad(fd)
    raw = read_values(fd, endian, "i2", columns)
    read_pad(fd)
    return to_physical_array(raw)
# endregion
