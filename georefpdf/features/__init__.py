from .extent import (GeoBox,
                     PixelSize,
                     InvalidInput,
                     ExtentFitter,
                     fit,
                     fit_to_canvas,
                     reproject_extent)
