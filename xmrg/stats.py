# stats.py
from typing import Optional
import numpy as np
from xmrg.models import Grid


def _valid(grid: Grid) -> np.ndarray:
    v = grid.values
    return v[v >= 0.0]


def valid_count(grid: Grid) -> int:
    return int(_valid(grid).size)


def average(grid: Grid) -> Optional[float]:
    """Mean of the measured cells (no-data excluded); None if there are none."""
    v = _valid(grid)
    if v.size == 0:
        return None
    return float(np.mean(v))


def maximum(grid: Grid) -> Optional[float]:
    v = _valid(grid)
    if v.size == 0:
        return None
    return float(np.max(v))


def summarize(grid: Grid) -> dict:
    h = grid.header
    return {
        "version": grid.version.value,
        "decodable": grid.version.decodable,
        "origin_x": h.origin_x,
        "origin_y": h.origin_y,
        "columns": h.columns,
        "rows": h.rows,
        "valid_cells": valid_count(grid),
        "average_mm": average(grid),
        "max_mm": maximum(grid),
    }
