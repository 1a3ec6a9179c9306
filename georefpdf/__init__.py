from . import globals
from .globals import configs, directories

from .features.extent import GeoBox, PixelSize, InvalidInput, ExtentFitter, fit
from .features.extent import fit_to_canvas, reproject_extent
