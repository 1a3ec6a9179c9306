from .types import GeoBox, PixelSize, InvalidInput
from .fitter import ExtentFitter, fit, pillarbox_adjustment, letterbox_adjustment
from .layout import CanvasPlacement, fit_to_canvas, hidpi_canvas, slider_to_opacity
from .reproject import parse_crs, reproject_extent
