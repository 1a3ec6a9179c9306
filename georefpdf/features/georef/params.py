"""
georefpdf/features/georef/params.py

Everything an external georeferencing tool needs to tag a page with a fitted
extent: corner coordinates, the CRS, the page-pixel geotransform and an output
path. ``gdal_translate_args`` spells these out as a ``gdal_translate`` argument
list; running it is left to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from affine import Affine
from rasterio.transform import from_bounds

from georefpdf.globals import configs
from georefpdf.globals.logutil import info
from georefpdf.features.extent.types import GeoBox, InvalidInput, PixelSize
from georefpdf.features.extent.reproject import parse_crs


def default_output_path(source: Path | str, suffix: str = configs.OUTPUT_SUFFIX) -> Path:
    """``<dir>/<stem><suffix><ext>`` next to ``source``."""
    source = Path(source)
    if not suffix:
        raise InvalidInput("output suffix must not be empty")
    return source.with_name(f"{source.stem}{suffix}{source.suffix}")


def page_transform(box: GeoBox, content: PixelSize) -> Affine:
    """Affine mapping page pixel (col, row) onto (lon, lat); row 0 is the north edge."""
    return from_bounds(box.west, box.south, box.east, box.north, content.width, content.height)


@dataclass(frozen=True)
class GeorefParams:
    source: Path
    output: Path
    box: GeoBox
    srs: str
    srs_wkt: str
    transform: Affine

    @property
    def ullr(self) -> tuple[float, float, float, float]:
        return self.box.ullr

    def gdal_translate_args(self) -> list[str]:
        return [
            "gdal_translate",
            "-a_srs", self.srs,
            "-a_ullr", *(repr(float(v)) for v in self.ullr),
            str(self.source),
            str(self.output),
        ]


def build_georef_params(
    box,
    content,
    source: Path | str,
    output: Path | str | None = None,
    *,
    srs: str = configs.TARGET_CRS,
    suffix: str = configs.OUTPUT_SUFFIX,
    verbose: bool = False,
) -> GeorefParams:
    box = GeoBox.coerce(box)
    content = PixelSize.coerce(content)
    source = Path(source)
    output = Path(output) if output else default_output_path(source, suffix)
    if output.resolve() == source.resolve():
        raise InvalidInput(f"output {output} would overwrite the source document")

    params = GeorefParams(
        source=source,
        output=output,
        box=box,
        srs=srs,
        srs_wkt=parse_crs(srs).to_wkt(),
        transform=page_transform(box, content),
    )
    if verbose:
        ulx, uly, lrx, lry = params.ullr
        info(f"Georeferencing {source.name} with coordinates: UL({uly}, {ulx}), LR({lry}, {lrx})")
    return params
