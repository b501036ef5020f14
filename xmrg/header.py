# region Imports
from typing import BinaryIO, Tuple
from xmrg.byte_reader import read_int32, read_pad, read_values
from xmrg.config import BUILD4_MARKER, BUILD5_MARKER
from xmrg.log import get_logger
from xmrg.models import Endian, FormatVersion, Header
# endregion

logger = get_logger(__name__)

# region Header
def read_header(fd: BinaryIO, endian: Endian) -> Header:
    """Read origin x/y, column and row counts (4 x int32)."""
    xor, yor, columns, rows = (int(v) for v in read_values(fd, endian, "i4", 4))
    return Header(origin_x=xor, origin_y=yor, columns=columns, rows=rows)
# endregion

# region Version Detection
def classify_version(marker: int, columns: int) -> FormatVersion:
    # fixed markers win over the legacy row length
    if marker == BUILD5_MARKER:
        return FormatVersion.BUILD5
    if marker == BUILD4_MARKER:
        return FormatVersion.BUILD4
    if columns > 0 and marker == 2 * columns:
        return FormatVersion.LEGACY
    return FormatVersion.UNRECOGNIZED


def resolve_header(fd: BinaryIO, endian: Endian) -> Tuple[Header, FormatVersion]:
    """Read the header and the byte count of the second record.

    Expects the stream just past the endianness word and leaves it just past
    the marker; callers must seek before decoding rows.
    """
    header = read_header(fd, endian)
    read_pad(fd)
    marker = read_int32(fd, endian)
    version = classify_version(marker, header.columns)
    logger.debug("header=%s marker=%d version=%s", header, marker, version.value)
    return header, version
# endregion
