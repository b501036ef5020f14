# region Imports
from typing import Iterator, Tuple
import numpy as np
from xmrg.models import Header, Point
from xmrg.projection import hrap_to_latlon, hrap_to_latlon_array
# endregion

# region Coordinate Enumeration
def iter_hrap(header: Header) -> Iterator[Tuple[int, int]]:
    """HRAP (x, y) of every cell, columns first within each row."""
    for y in range(header.origin_y, header.origin_y + header.rows):
        for x in range(header.origin_x, header.origin_x + header.columns):
            yield x, y


def iter_coordinates(header: Header) -> Iterator[Point]:
    for x, y in iter_hrap(header):
        yield hrap_to_latlon(float(x), float(y))
# endregion

# region Grid Coordinate Arrays
def hrap_grid(header: Header):
    xs = np.arange(header.origin_x, header.origin_x + header.columns, dtype=np.float64)
    ys = np.arange(header.origin_y, header.origin_y + header.rows, dtype=np.float64)
    return np.tile(xs, header.rows), np.repeat(ys, header.columns)


def lonlat_grid(header: Header):
    """(lon, lat) arrays of shape (rows, columns) matching Grid.values."""
    lon, lat = hrap_to_latlon_array(*hrap_grid(header))
    shape = (header.rows, header.columns)
    return lon.reshape(shape), lat.reshape(shape)
# endregion

# region Index Helpers
def idx_to_rc(i: int, columns: int):
    return (i // columns, i % columns)


def rc_to_hrap(r: int, c: int, header: Header):
    return (header.origin_x + c, header.origin_y + r)
# endregion
