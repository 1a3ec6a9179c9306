from pathlib import Path
from georefpdf.globals.logutil import process_step
import geopandas as gpd

DRIVERS = {".geojson": "GeoJSON", ".shp": "ESRI Shapefile"}

def export_gdf(gdf: gpd.GeoDataFrame, path: Path, verbose: bool | str = False) -> Path:
    path = Path(path)
    ext = path.suffix.lower()
    driver = DRIVERS.get(ext)

    if not driver:
        raise ValueError(f"Unsupported extension: {ext}")
    path.parent.mkdir(parents=True, exist_ok=True)
    if verbose in (True, "info", "debug"):
        process_step(f"Exporting GeoDataFrame to {path} using driver {driver}...")

    gdf.to_file(path, driver=driver)
    return path
