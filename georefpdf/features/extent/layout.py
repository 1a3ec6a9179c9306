"""
georefpdf/features/extent/layout.py

Placement of the content page on the overlay canvas: uniform "contain"
scaling, centered, so that one pair of margins is always zero.
"""
from __future__ import annotations

from dataclasses import dataclass

from georefpdf.globals import configs
from georefpdf.features.extent.types import InvalidInput, PixelSize


@dataclass(frozen=True)
class CanvasPlacement:
    scale: float
    offset_x: float
    offset_y: float
    width: float
    height: float

    @property
    def is_pillarboxed(self) -> bool:
        return self.offset_x > self.offset_y


def hidpi_canvas(container, ratio: float = configs.HIDPI_RATIO) -> PixelSize:
    """Backing canvas size for a container at ``ratio`` device pixels per CSS pixel."""
    container = PixelSize.coerce(container)
    if ratio <= 0:
        raise InvalidInput(f"ratio must be positive, got {ratio}")
    return PixelSize(container.width * ratio, container.height * ratio)


def fit_to_canvas(canvas, content) -> CanvasPlacement:
    canvas = PixelSize.coerce(canvas)
    content = PixelSize.coerce(content)

    scale = min(canvas.width / content.width, canvas.height / content.height)
    width = content.width * scale
    height = content.height * scale
    return CanvasPlacement(
        scale=scale,
        offset_x=(canvas.width - width) / 2,
        offset_y=(canvas.height - height) / 2,
        width=width,
        height=height,
    )


def slider_to_opacity(value: float, maximum: float = configs.OPACITY_SLIDER_MAX) -> float:
    """Map a transparency slider position onto an opacity in [0, 1]."""
    if maximum <= 0:
        raise InvalidInput(f"maximum must be positive, got {maximum}")
    return min(max(value / maximum, 0.0), 1.0)
