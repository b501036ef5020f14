# config.py
import os

# HRAP polar stereographic grid
EARTH_R_KM = 6371.2
STD_LON = 105.0       # degrees West
STD_LAT = 60.0        # true latitude (degrees North)
MESH_KM = 4.7625
POLE_X = 401.0        # HRAP coordinates of the North Pole
POLE_Y = 1601.0

# Binary layout
BIG_ENDIAN_PROBE = 16
PAD_BYTES = 4
LEGACY_DATA_OFFSET = 24   # probe word + 16 byte header + pad
BUILD4_MARKER = 38
BUILD5_MARKER = 66

# Values are stored as hundredths of a millimeter
RAW_SCALE = 100.0
NO_DATA = -999.0

LOG_LEVEL = os.getenv("XMRG_LOG_LEVEL", "INFO")
DATA_DIR = os.getenv("XMRG_DATA_DIR", ".")
