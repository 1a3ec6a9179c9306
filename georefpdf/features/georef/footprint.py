"""
georefpdf/features/georef/footprint.py

Fitted extents as polygon footprints, for checking the result in a GIS.
"""
from pathlib import Path

import geopandas as gpd
from shapely.geometry import Polygon, box as shapely_box

from georefpdf.globals import configs
from georefpdf.globals.exporters import export_gdf
from georefpdf.features.extent.types import GeoBox


def box_to_polygon(geo_box: GeoBox) -> Polygon:
    return shapely_box(*GeoBox.coerce(geo_box).extent)


def footprint_gdf(geo_box: GeoBox, crs: str = configs.TARGET_CRS, **attrs) -> gpd.GeoDataFrame:
    """One-row GeoDataFrame of the box outline; ``attrs`` become columns."""
    geo_box = GeoBox.coerce(geo_box)
    data = {k: [v] for k, v in attrs.items()}
    return gpd.GeoDataFrame(data, geometry=[box_to_polygon(geo_box)], crs=crs)


def export_footprint(geo_box: GeoBox, path: Path, crs: str = configs.TARGET_CRS,
                     verbose: bool = False, **attrs) -> Path:
    gdf = footprint_gdf(geo_box, crs=crs, **attrs)
    return export_gdf(gdf, Path(path), verbose=verbose)
