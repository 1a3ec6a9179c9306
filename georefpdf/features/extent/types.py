"""
georefpdf/features/extent/types.py

Value types shared by the extent math: geographic boxes and pixel sizes.
Both validate on construction, so anything holding one can rely on it being
non-degenerate.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence


class InvalidInput(ValueError):
    """Raised when a box, size or CRS cannot be used for a computation."""


def _finite(name: str, value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class GeoBox:
    """Geographic bounding box in decimal degrees (non-wrapping)."""
    north: float
    south: float
    east: float
    west: float

    def __post_init__(self):
        for name in ("north", "south", "east", "west"):
            object.__setattr__(self, name, _finite(name, getattr(self, name)))
        if not self.north > self.south:
            raise InvalidInput(f"north ({self.north}) must be greater than south ({self.south})")
        if not self.east > self.west:
            raise InvalidInput(f"east ({self.east}) must be greater than west ({self.west})")

    @classmethod
    def from_extent(cls, minx, miny, maxx, maxy) -> "GeoBox":
        """Build from an ``(minx, miny, maxx, maxy)`` extent, lon/lat order."""
        return cls(north=maxy, south=miny, east=maxx, west=minx)

    @classmethod
    def coerce(cls, value) -> "GeoBox":
        """Accept a GeoBox, a mapping with n/s/e/w keys, or a 4-item extent."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(value["north"], value["south"], value["east"], value["west"])
            except KeyError as exc:
                raise InvalidInput(f"GeoBox mapping is missing {exc.args[0]!r}") from exc
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 4:
            return cls.from_extent(*value)
        raise InvalidInput(f"Cannot interpret {value!r} as a GeoBox")

    @property
    def extent(self) -> tuple[float, float, float, float]:
        return (self.west, self.south, self.east, self.north)

    @property
    def lon_span(self) -> float:
        return self.east - self.west

    @property
    def lat_span(self) -> float:
        return self.north - self.south

    @property
    def aspect(self) -> float:
        return self.lon_span / self.lat_span

    @property
    def center(self) -> tuple[float, float]:
        """(lon, lat) of the box center."""
        return ((self.east + self.west) / 2, (self.north + self.south) / 2)

    @property
    def upper_left(self) -> tuple[float, float]:
        return (self.west, self.north)

    @property
    def lower_right(self) -> tuple[float, float]:
        return (self.east, self.south)

    @property
    def ullr(self) -> tuple[float, float, float, float]:
        """Corner tuple ``(ulx, uly, lrx, lry)`` as used by ``-a_ullr``."""
        return (*self.upper_left, *self.lower_right)


@dataclass(frozen=True)
class PixelSize:
    """Strictly positive width/height, in device pixels or page units."""
    width: float
    height: float

    def __post_init__(self):
        for name in ("width", "height"):
            value = _finite(name, getattr(self, name))
            if value <= 0:
                raise InvalidInput(f"{name} must be positive, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def coerce(cls, value) -> "PixelSize":
        """Accept a PixelSize, a mapping with width/height, or a ``(w, h)`` pair."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(value["width"], value["height"])
            except KeyError as exc:
                raise InvalidInput(f"PixelSize mapping is missing {exc.args[0]!r}") from exc
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(*value)
        raise InvalidInput(f"Cannot interpret {value!r} as a PixelSize")

    @property
    def aspect(self) -> float:
        return self.width / self.height
