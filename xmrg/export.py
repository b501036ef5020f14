# export.py
# ----------------
# GeoTIFF export of a decoded grid in the HRAP polar stereographic CRS.
#
# Dependencies: numpy, rasterio, pyproj

# region Imports
from __future__ import annotations
import numpy as np
import rasterio
from rasterio.transform import from_origin
from pyproj import CRS

from xmrg.config import EARTH_R_KM, MESH_KM, NO_DATA, POLE_X, POLE_Y, STD_LAT, STD_LON
from xmrg.log import get_logger
from xmrg.models import Grid, Header
# endregion

logger = get_logger(__name__)

HRAP_PROJ4 = (
    f"+proj=stere +lat_0=90 +lat_ts={STD_LAT:g} +lon_0={-STD_LON:g} "
    f"+x_0=0 +y_0=0 +R={EARTH_R_KM * 1000.0:.0f} +units=m +no_defs"
)

# region Georeferencing
def hrap_crs() -> CRS:
    return CRS.from_proj4(HRAP_PROJ4)


def hrap_transform(header: Header):
    """Affine transform with pixel centers on integer HRAP coordinates and
    the northern-most row first."""
    m = MESH_KM * 1000.0
    west = (header.origin_x - POLE_X - 0.5) * m
    north = (header.origin_y + header.rows - 1 - POLE_Y + 0.5) * m
    return from_origin(west, north, m, m)
# endregion

# region GeoTIFF Writer
def write_geotiff(grid: Grid, out_path: str) -> None:
    if grid.is_empty:
        raise ValueError(f"Cannot export an empty grid (version {grid.version.value!r})")

    # on-disk rows run south to north
    data = np.flipud(grid.values).astype(np.float32)
    H, W = data.shape

    with rasterio.open(
        out_path,
        "w",
        driver="GTiff",
        height=H,
        width=W,
        count=1,
        dtype="float32",
        crs=hrap_crs().to_wkt(),
        transform=hrap_transform(grid.header),
        nodata=NO_DATA,
    ) as ds:
        ds.write(data, 1)
    logger.info("Wrote %d x %d GeoTIFF to %s", H, W, out_path)
# endregion
