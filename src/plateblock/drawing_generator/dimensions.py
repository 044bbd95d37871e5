"""
Dimension annotations for plate drawings.

A dimension is built from two anchor points and a signed offset:
- Two extension lines from the anchors out to the dimension line
- A dimension line parallel to the anchors, with an arrow at each end
- A label at the middle of the dimension line

The offset is applied along the normal n = (-u.y, u.x) of the unit
direction u from p1 to p2. In SVG coordinates (Y down) a horizontal
dimension drawn left to right with a positive offset sits below its
anchors; a vertical dimension drawn top to bottom with a positive offset
sits to their left. Callers pick the side purely with the offset sign.

Building is pure geometry; the label arrives already formatted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from xml.sax.saxutils import escape

import numpy as np

from .constants import (
    ARROW_LENGTH,
    ARROW_WIDTH,
    DIMENSION_FONT_SIZE,
    DIMENSION_LINE_WIDTH,
    EXTENSION_LINE_WIDTH,
    OUTLINE_COLOR,
    ROTATED_TEXT_SHIFT_X,
    ROTATED_TEXT_SHIFT_Y,
    TEXT_OFFSET,
)
from .shapes import Line, fmt


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class Arrow:
    """
    Arrowhead on a dimension line.

    Attributes:
        tip: Arrow tip position (pixels)
        angle: Direction the arrow points, degrees (SVG, Y down)
    """
    tip: tuple[float, float]
    angle: float


@dataclass(frozen=True)
class DimensionAnnotation:
    """
    A fully computed linear dimension.

    Attributes:
        p1, p2: Anchor points on the geometry
        offset: Signed distance from the anchors to the dimension line
        label: Formatted measurement (e.g. 0'-10.00")
        prefix: Caption written before the label (e.g. "WIDTH = ")
        rotate: Label rotation in degrees, or None
        extension_lines: p1 -> o1 and p2 -> o2
        dimension_line: o1 -> o2
        arrows: Arrowheads at o1 and o2, pointing outward
        label_anchor: Text anchor position
        rotation_center: Pivot for a rotated label, or None
    """
    p1: tuple[float, float]
    p2: tuple[float, float]
    offset: float
    label: str
    prefix: str
    rotate: float | None
    extension_lines: tuple[Line, Line]
    dimension_line: Line
    arrows: tuple[Arrow, Arrow]
    label_anchor: tuple[float, float]
    rotation_center: tuple[float, float] | None = None

    @property
    def text(self) -> str:
        """Text as written on the drawing."""
        return f"{self.prefix}{self.label}"


@dataclass
class DimensionStyle:
    """Styling parameters for rendering dimensions."""
    # Line styling
    line_color: str = OUTLINE_COLOR
    line_stroke_width: float = DIMENSION_LINE_WIDTH
    extension_stroke_width: float = EXTENSION_LINE_WIDTH

    # Arrow styling
    arrow_length: float = ARROW_LENGTH
    arrow_width: float = ARROW_WIDTH
    arrow_style: str = "filled"  # "filled", "open"

    # Text styling
    font_family: str = "Arial, sans-serif"
    font_size: float = DIMENSION_FONT_SIZE


# =============================================================================
# DIMENSION GEOMETRY
# =============================================================================

def _as_point(values: np.ndarray) -> tuple[float, float]:
    return (float(values[0]), float(values[1]))


def build_dimension(
    p1: tuple[float, float],
    p2: tuple[float, float],
    offset: float,
    label: str,
    rotate: float | None = None,
    prefix: str = "",
) -> DimensionAnnotation:
    """
    Compute the geometry of a dimension between two points.

    Args:
        p1: First anchor (pixels)
        p2: Second anchor (pixels)
        offset: Signed distance of the dimension line along the normal
        label: Formatted measurement text
        rotate: Optional label rotation in degrees (e.g. -90 for vertical)
        prefix: Optional caption before the label

    Returns:
        DimensionAnnotation with all derived coordinates
    """
    start = np.asarray(p1, dtype=float)
    end = np.asarray(p2, dtype=float)
    delta = end - start

    # Zero-length dimensions keep their anchors instead of dividing by zero
    length = float(np.hypot(delta[0], delta[1])) or 1.0
    ux, uy = delta / length
    normal = np.array([-uy, ux])

    o1 = start + normal * offset
    o2 = end + normal * offset

    angle = math.degrees(math.atan2(delta[1], delta[0]))
    mid_x, mid_y = (o1 + o2) / 2

    if rotate:
        label_anchor = (float(mid_x + ROTATED_TEXT_SHIFT_X), float(mid_y - ROTATED_TEXT_SHIFT_Y))
        rotation_center = (float(mid_x + ROTATED_TEXT_SHIFT_X), float(mid_y))
    else:
        label_anchor = (float(mid_x), float(mid_y - TEXT_OFFSET))
        rotation_center = None

    s, e = _as_point(start), _as_point(end)
    a, b = _as_point(o1), _as_point(o2)

    return DimensionAnnotation(
        p1=s,
        p2=e,
        offset=float(offset),
        label=label,
        prefix=prefix,
        rotate=rotate,
        extension_lines=(Line(*s, *a), Line(*e, *b)),
        dimension_line=Line(*a, *b),
        arrows=(Arrow(a, angle + 180), Arrow(b, angle)),
        label_anchor=label_anchor,
        rotation_center=rotation_center,
    )


# =============================================================================
# SVG RENDERING
# =============================================================================

def render_dimension_svg(
    dim: DimensionAnnotation,
    style: DimensionStyle | None = None,
) -> str:
    """
    Render a single dimension as an SVG group.

    Args:
        dim: Computed dimension
        style: DimensionStyle configuration

    Returns:
        SVG string for the complete dimension
    """
    if style is None:
        style = DimensionStyle()

    parts: list[str] = [f'<g class="dimension" fill="none" stroke="{style.line_color}">']

    for ext in dim.extension_lines:
        parts.append("  " + ext.svg(style.line_color, style.extension_stroke_width))

    parts.append("  " + dim.dimension_line.svg(style.line_color, style.line_stroke_width))

    for arrow in dim.arrows:
        parts.append("  " + _render_arrow_svg(arrow, style))

    text_x, text_y = dim.label_anchor
    transform = ""
    if dim.rotation_center is not None:
        cx, cy = dim.rotation_center
        transform = f' transform="rotate({dim.rotate:g} {fmt(cx)} {fmt(cy)})"'

    parts.append(
        f'  <text x="{fmt(text_x)}" y="{fmt(text_y)}" '
        f'text-anchor="middle" '
        f'fill="{style.line_color}" stroke="none" '
        f'font-family="{style.font_family}" '
        f'font-size="{style.font_size}"{transform}>'
        f'{escape(dim.text)}</text>'
    )
    parts.append("</g>")

    return "\n".join(parts)


def _render_arrow_svg(arrow: Arrow, style: DimensionStyle) -> str:
    """
    Render an arrowhead with its tip on the dimension line end.

    Returns:
        SVG polygon (filled) or polyline (open) for the arrowhead
    """
    al = style.arrow_length
    aw = style.arrow_width / 2

    angle_rad = math.radians(arrow.angle)
    dx = math.cos(angle_rad)
    dy = math.sin(angle_rad)

    # Perpendicular direction
    px, py = -dy, dx

    x, y = arrow.tip
    base_x = x - dx * al
    base_y = y - dy * al

    b1_x = base_x + px * aw
    b1_y = base_y + py * aw
    b2_x = base_x - px * aw
    b2_y = base_y - py * aw

    points = f"{fmt(x)},{fmt(y)} {fmt(b1_x)},{fmt(b1_y)} {fmt(b2_x)},{fmt(b2_y)}"
    if style.arrow_style == "filled":
        return f'<polygon points="{points}" fill="{style.line_color}" stroke="none"/>'
    return (
        f'<polyline points="{fmt(b1_x)},{fmt(b1_y)} {fmt(x)},{fmt(y)} {fmt(b2_x)},{fmt(b2_y)}" '
        f'fill="none" stroke="{style.line_color}" stroke-width="{style.line_stroke_width}"/>'
    )


def render_all_dimensions_svg(
    dimensions: list[DimensionAnnotation] | tuple[DimensionAnnotation, ...],
    style: DimensionStyle | None = None,
    group_id: str = "dimensions",
) -> str:
    """
    Render all dimensions as an SVG group.

    Returns:
        SVG string containing all dimensions, or "" when there are none
    """
    if style is None:
        style = DimensionStyle()

    if not dimensions:
        return ""

    parts: list[str] = [f'<g id="{group_id}">']
    for index, dim in enumerate(dimensions, start=1):
        parts.append(f"  <!-- Dim {index} -->")
        parts.append("  " + render_dimension_svg(dim, style).replace("\n", "\n  "))
    parts.append("</g>")

    return "\n".join(parts)
