# region Imports
from __future__ import annotations
import json
from itertools import chain
from typing import Iterator
from xmrg.grid import iter_coordinates
from xmrg.log import get_logger
from xmrg.models import Feature, Grid
# endregion

logger = get_logger(__name__)

# region Feature Stream
def generate_features(grid: Grid) -> Iterator[Feature]:
    """Lazily pair each cell value with its lon/lat.

    Values run row by row in on-disk order, columns first within a row, and
    the coordinates advance in the same order from the header origin. The
    stream stops at the shorter of the two, so an empty grid yields nothing.
    The grid is borrowed, not copied: do not modify it while iterating.
    """
    values = chain.from_iterable(grid.rows())
    for value, point in zip(values, iter_coordinates(grid.header)):
        yield Feature(point=point, value=float(value))
# endregion

# region Export
def _num(v: float) -> str:
    # shortest round-trip form, whole numbers without ".0"
    s = repr(float(v))
    return s[:-2] if s.endswith(".0") else s


def csv_row(feature: Feature) -> str:
    return f"{_num(feature.point.longitude)},{_num(feature.point.latitude)},{_num(feature.value)}"


def write_features_csv(grid: Grid, out_path: str) -> int:
    """Write `lon,lat,value` lines (no header row); returns the line count."""
    n = 0
    with open(out_path, "w") as f:
        for feat in generate_features(grid):
            f.write(csv_row(feat) + "\n")
            n += 1
    logger.info("Wrote %d features to %s", n, out_path)
    return n


def features_to_dicts(grid: Grid):
    return [
        {"lon": feat.point.longitude, "lat": feat.point.latitude, "value": feat.value}
        for feat in generate_features(grid)
    ]


def write_features_json(grid: Grid, out_path: str) -> int:
    features = features_to_dicts(grid)
    with open(out_path, "w") as f:
        json.dump({"features": features}, f, indent=2)
    logger.info("Wrote %d features to %s", len(features), out_path)
    return len(features)
# endregion
