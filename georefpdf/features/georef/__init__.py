from .params import GeorefParams, build_georef_params, default_output_path, page_transform
from .footprint import box_to_polygon, footprint_gdf, export_footprint
