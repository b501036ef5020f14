# reader.py
# ----------------
# Decode an XMRG file into a Grid.
#
# Exposes:
#   - open_source(path)   (binary handle; gzip files are inflated in memory)
#   - decode_grid(fd)     (full pipeline on an already-open seekable stream)
#   - read_grid(path)

from __future__ import annotations
from typing import BinaryIO
import gzip
import io
import zlib
import numpy as np

from xmrg.byte_reader import detect_endian
from xmrg.config import LEGACY_DATA_OFFSET
from xmrg.header import resolve_header
from xmrg.log import get_logger
from xmrg.models import FormatVersion, Grid
from xmrg.rows import read_row

logger = get_logger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"

# region Source
def open_source(path) -> BinaryIO:
    """Open `path` for decoding. Gzip files are decompressed into memory so
    the decoder always gets a seekable stream."""
    fd = open(path, "rb")
    try:
        magic = fd.read(2)
        if magic == _GZIP_MAGIC:
            fd.seek(0)
            try:
                with gzip.GzipFile(fileobj=fd, mode="rb") as gz:
                    data = gz.read()
            except (EOFError, zlib.error) as e:
                raise OSError(f"{path}: truncated gzip stream") from e
            fd.close()
            logger.debug("%s: gzip, %d bytes inflated", path, len(data))
            return io.BytesIO(data)
        fd.seek(0)
        return fd
    except BaseException:
        fd.close()
        raise
# endregion

# region Decoding
def decode_grid(fd: BinaryIO) -> Grid:
    """Run the whole pipeline on `fd`, which the caller must not touch until
    this returns. Undecodable versions give an empty grid."""
    endian = detect_endian(fd)
    header, version = resolve_header(fd, endian)
    logger.debug("endian=%s header=%s version=%s", endian.name, header, version.value)

    if version is not FormatVersion.LEGACY:
        logger.warning("XMRG version %r is not supported; returning an empty grid", version.value)
        return Grid.empty(header, version)
    if header.rows <= 0:
        logger.warning("Header reports %d rows; returning an empty grid", header.rows)
        return Grid.empty(header, version)

    fd.seek(LEGACY_DATA_OFFSET)
    # no up-front allocation: a header overstating rows fails on the first short read
    rows = [read_row(fd, header.columns, endian) for _ in range(header.rows)]
    return Grid(header=header, version=version, values=np.vstack(rows))


def read_grid(path) -> Grid:
    with open_source(path) as fd:
        grid = decode_grid(fd)
    logger.info("%s: %s, %d x %d", path, grid.version.value, grid.header.rows, grid.header.columns)
    return grid
# endregion
