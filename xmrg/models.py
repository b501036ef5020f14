# models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator
import numpy as np


class Endian(Enum):
    # values double as struct / numpy byte-order prefixes
    BIG = ">"
    LITTLE = "<"


class FormatVersion(Enum):
    LEGACY = "pre-1997"
    BUILD4 = "build 4.2"
    BUILD5 = "build 5.2.2"
    UNRECOGNIZED = "unrecognized"

    @property
    def decodable(self) -> bool:
        return self is FormatVersion.LEGACY


@dataclass(frozen=True)
class Header:
    origin_x: int
    origin_y: int
    columns: int
    rows: int


@dataclass(frozen=True)
class Point:
    longitude: float   # degrees, West positive
    latitude: float    # degrees, North positive


@dataclass(frozen=True)
class Feature:
    point: Point
    value: float


@dataclass
class Grid:
    header: Header
    version: FormatVersion
    values: np.ndarray = field(repr=False)   # (rows, columns) float64, on-disk row order

    @classmethod
    def empty(cls, header: Header, version: FormatVersion) -> "Grid":
        return cls(header, version, np.empty((0, max(header.columns, 0)), dtype=np.float64))

    @property
    def is_empty(self) -> bool:
        return self.values.size == 0

    @property
    def shape(self):
        return self.values.shape

    def rows(self) -> Iterator[np.ndarray]:
        for row in self.values:
            yield row
