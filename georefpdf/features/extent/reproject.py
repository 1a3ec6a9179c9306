"""
georefpdf/features/extent/reproject.py

Convert a map view extent (web mercator by default) into a geographic GeoBox.

Only the two corners are transformed, and longitudes are left unwrapped: a
view wider than the world, or one crossing the antimeridian, keeps its true
span (e.g. -270..270 or 170..190) instead of being folded into [-180, 180].
"""
from __future__ import annotations

import math

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError

from georefpdf.globals import configs
from georefpdf.features.extent.types import GeoBox, InvalidInput


def parse_crs(crs) -> CRS:
    """``pyproj.CRS`` from any user input, raising InvalidInput when unusable."""
    try:
        return CRS.from_user_input(crs)
    except CRSError as exc:
        raise InvalidInput(f"Unrecognised CRS: {crs!r}") from exc


def _unwrap_longitudes(inverse: Transformer, xs, lons, lats) -> list[float]:
    """Add back the whole turns PROJ dropped when normalizing longitude.

    Each longitude is projected back into the source CRS; the difference from
    the original x, in source world widths, is the number of turns lost.
    """
    east_edge, _ = inverse.transform(180.0, 0.0)
    world = 2 * abs(east_edge)
    if not math.isfinite(world) or world == 0:
        return list(lons)
    back_xs, _ = inverse.transform(list(lons), list(lats))
    return [
        lon + 360.0 * round((x - back_x) / world)
        for lon, x, back_x in zip(lons, xs, back_xs)
    ]


def reproject_extent(extent, src_crs=configs.SOURCE_CRS, dst_crs=configs.TARGET_CRS) -> GeoBox:
    """Transform ``(minx, miny, maxx, maxy)`` from ``src_crs`` into a GeoBox in ``dst_crs``."""
    if len(extent) != 4:
        raise InvalidInput(f"extent must have 4 values (minx, miny, maxx, maxy), got {extent!r}")

    src, dst = parse_crs(src_crs), parse_crs(dst_crs)
    if src == dst:
        return GeoBox.from_extent(*extent)

    minx, miny, maxx, maxy = (float(v) for v in extent)
    xs, ys = [minx, maxx], [miny, maxy]
    transformer = Transformer.from_crs(src, dst, always_xy=True)
    lons, lats = transformer.transform(xs, ys)
    if not all(math.isfinite(v) for v in (*lons, *lats)):
        raise InvalidInput(f"extent {extent!r} has no valid {dst_crs} equivalent")

    if dst.is_geographic and not src.is_geographic:
        inverse = Transformer.from_crs(dst, src, always_xy=True)
        lons = _unwrap_longitudes(inverse, xs, lons, lats)

    return GeoBox.from_extent(min(lons), min(lats), max(lons), max(lats))
