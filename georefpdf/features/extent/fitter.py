"""
georefpdf/features/extent/fitter.py

Aspect-ratio correction of a map viewport extent.

The page is drawn "contain"-fitted inside the map canvas, so only part of the
viewport is covered by it. ``fit`` trims the viewport's geographic box to that
covered part, keeping the center fixed: longitude is trimmed when the page is
narrower than the view (pillarbox), latitude otherwise (letterbox).
"""
from __future__ import annotations

from georefpdf.globals.logutil import process_step
from georefpdf.features.extent.types import GeoBox, PixelSize


def pillarbox_adjustment(lon_span: float, viewport: PixelSize, content: PixelSize) -> float:
    """Amount trimmed from *each* side of the longitude span."""
    return (lon_span / 2) - (content.width * viewport.height * lon_span) / (
        2 * content.height * viewport.width
    )


def letterbox_adjustment(lat_span: float, viewport: PixelSize, content: PixelSize) -> float:
    """Amount trimmed from *each* side of the latitude span."""
    return (lat_span / 2) - (content.height * viewport.width * lat_span) / (
        2 * content.width * viewport.height
    )


def fit(viewport_geo, viewport_pixels, content_pixels, *, verbose: bool = False) -> GeoBox:
    """Geographic box the content page covers inside the viewport.

    Parameters
    ----------
    viewport_geo
        Viewport extent as a :class:`GeoBox` (or anything ``GeoBox.coerce``
        accepts).
    viewport_pixels
        On-screen size of the map viewport.
    content_pixels
        Intrinsic size of the content page.
    verbose
        Log which axis was trimmed and by how much.

    Raises
    ------
    InvalidInput
        On a degenerate box or a non-positive / non-finite size.
    """
    box = GeoBox.coerce(viewport_geo)
    viewport = PixelSize.coerce(viewport_pixels)
    content = PixelSize.coerce(content_pixels)

    north, south, east, west = box.north, box.south, box.east, box.west

    # strict "<": equal aspects fall through to the latitude branch
    if content.width / content.height < (east - west) / (north - south):
        adjustment = pillarbox_adjustment(east - west, viewport, content)
        if verbose:
            process_step(f"Pillarboxing (longitude) adjustment: {adjustment}")
        west += adjustment
        east -= adjustment
    else:
        adjustment = letterbox_adjustment(north - south, viewport, content)
        if verbose:
            process_step(f"Letterboxing (latitude) adjustment: {adjustment}")
        north -= adjustment
        south += adjustment

    return GeoBox(north=north, south=south, east=east, west=west)


class ExtentFitter:
    """Callable wrapper around :func:`fit` for a fixed content page."""

    def __init__(self, content_pixels, *, verbose: bool = False) -> None:
        self.content = PixelSize.coerce(content_pixels)
        self.verbose = verbose

    def __call__(self, viewport_geo, viewport_pixels) -> GeoBox:
        return fit(viewport_geo, viewport_pixels, self.content, verbose=self.verbose)

    def __repr__(self) -> str:
        return f"ExtentFitter(content={self.content!r})"
