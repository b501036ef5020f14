"""Decoder for legacy XMRG gridded precipitation files on the HRAP grid."""

from xmrg.byte_reader import ShortReadError, detect_endian
from xmrg.features import csv_row, generate_features
from xmrg.header import classify_version, resolve_header
from xmrg.models import Endian, Feature, FormatVersion, Grid, Header, Point
from xmrg.projection import hrap_to_latlon
from xmrg.reader import decode_grid, read_grid
from xmrg.rows import read_row, to_physical

__all__ = [
    "Endian", "Feature", "FormatVersion", "Grid", "Header", "Point",
    "ShortReadError", "classify_version", "csv_row", "decode_grid",
    "detect_endian", "generate_features", "hrap_to_latlon", "read_grid",
    "read_row", "resolve_header", "to_physical",
]
