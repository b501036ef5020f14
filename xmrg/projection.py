# region Imports
import math
import numpy as np
from xmrg.config import EARTH_R_KM, STD_LON, STD_LAT, MESH_KM, POLE_X, POLE_Y
from xmrg.models import Point
# endregion

RAD_DEG = 180.0 / math.pi

# grid units from the pole to the equator, squared
_G = EARTH_R_KM * (1.0 + math.sin(STD_LAT / RAD_DEG)) / MESH_KM
_G2 = _G * _G

# region HRAP -> Lon/Lat
def hrap_to_latlon(x: float, y: float) -> Point:
    """HRAP grid coordinate -> Point (longitude West-positive, latitude North).

    The asin argument is not clamped.
    """
    dx = x - POLE_X
    dy = y - POLE_Y
    rr = dx * dx + dy * dy

    lat = math.asin((_G2 - rr) / (_G2 + rr)) * RAD_DEG

    ang = math.atan2(dy, dx) * RAD_DEG
    if ang < 0.0:
        ang += 360.0

    lon = 270.0 + STD_LON - ang
    if lon < 0.0:
        lon += 360.0
    if lon >= 360.0:
        lon -= 360.0

    return Point(longitude=lon, latitude=lat)


def hrap_to_latlon_array(xs, ys):
    """Vectorized hrap_to_latlon; returns (lon, lat) float64 arrays."""
    dx = np.asarray(xs, dtype=np.float64) - POLE_X
    dy = np.asarray(ys, dtype=np.float64) - POLE_Y
    rr = dx * dx + dy * dy

    lat = np.degrees(np.arcsin((_G2 - rr) / (_G2 + rr)))

    ang = np.degrees(np.arctan2(dy, dx))
    ang = np.where(ang < 0.0, ang + 360.0, ang)

    lon = 270.0 + STD_LON - ang
    lon = np.where(lon < 0.0, lon + 360.0, lon)
    lon = np.where(lon >= 360.0, lon - 360.0, lon)
    return lon, lat
# endregion
