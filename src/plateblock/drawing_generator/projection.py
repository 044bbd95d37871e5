"""
Projection from plate coordinates (inches) to drawing pixels.

The drawing space is centered: the plate center is the origin, so every
shape is expressed as +/- half sizes. X and Y share one scale factor.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import PIXELS_PER_INCH, VIEWPORT_MARGIN
from .parameters import PlateParameters


@dataclass(frozen=True)
class Viewport:
    """
    Pixel extent of a drawing, centered on the origin.

    Attributes:
        width_px: Total drawing width including margins
        height_px: Total drawing height including margins
    """
    width_px: float
    height_px: float

    @property
    def left(self) -> float:
        """Left edge x-coordinate."""
        return -self.width_px / 2

    @property
    def right(self) -> float:
        """Right edge x-coordinate."""
        return self.width_px / 2

    @property
    def top(self) -> float:
        """Top edge y-coordinate."""
        return -self.height_px / 2

    @property
    def bottom(self) -> float:
        """Bottom edge y-coordinate."""
        return self.height_px / 2

    @property
    def size(self) -> tuple[float, float]:
        """Size as (width, height) tuple."""
        return (self.width_px, self.height_px)

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        """SVG viewBox as (min_x, min_y, width, height)."""
        return (self.left, self.top, self.width_px, self.height_px)


class GeometryProjector:
    """
    Maps inch coordinates onto the pixel grid at a given zoom.

    Args:
        pixels_per_inch: Scale at zoom=1
    """

    def __init__(self, pixels_per_inch: float = PIXELS_PER_INCH):
        self.pixels_per_inch = pixels_per_inch

    def pixels_per_base_unit(self, zoom: float) -> float:
        return self.pixels_per_inch * zoom

    def project(self, coordinate: float, zoom: float) -> float:
        """Scale one coordinate (either axis) to pixels."""
        return coordinate * self.pixels_per_base_unit(zoom)

    def project_point(self, point: tuple[float, float], zoom: float) -> tuple[float, float]:
        x, y = point
        return (self.project(x, zoom), self.project(y, zoom))

    def viewport(
        self,
        params: PlateParameters,
        zoom: float,
        margin: float = VIEWPORT_MARGIN,
    ) -> Viewport:
        """
        Compute the drawing size for a plate.

        Args:
            params: Plate geometry (inches)
            zoom: Zoom factor
            margin: Blank border on every side (pixels)

        Returns:
            Viewport sized to the projected plate plus margins
        """
        return Viewport(
            width_px=self.project(params.width, zoom) + 2 * margin,
            height_px=self.project(params.thickness, zoom) + 2 * margin,
        )
