"""
Plate drawing assembly and export.

Builds the immutable Scene for a plate (outline, hatching, slot, axes and
dimensions) and serializes it:
- SVG: standalone vector drawing sized to the viewport
- JSON: the three plate parameters in inches
- PDF: optional, via svglib + reportlab
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

# Make PDF export optional using svglib + reportlab (pure Python, no Cairo needed)
try:
    from reportlab.graphics import renderPDF
    from svglib.svglib import svg2rlg
    SVGLIB_AVAILABLE = True
except ImportError:
    SVGLIB_AVAILABLE = False

from .constants import (
    AXIS_COLOR,
    AXIS_DASHARRAY,
    DIAMETER_SYMBOL,
    HATCH_COLOR,
    HATCH_OPACITY,
    HATCH_SPACING,
    HATCH_STROKE_WIDTH,
    HOLE_DIM_OFFSET,
    OUTLINE_COLOR,
    OUTLINE_STROKE_WIDTH,
    SLOT_FILL,
    THICKNESS_DIM_OFFSET,
    THICKNESS_DIM_ROTATION,
    VIEWPORT_MARGIN,
    WIDTH_DIM_OFFSET,
    WIDTH_PREFIX,
)
from .dimensions import (
    DimensionAnnotation,
    DimensionStyle,
    build_dimension,
    render_all_dimensions_svg,
)
from .parameters import PlateParameters, resolve_field
from .projection import GeometryProjector, Viewport
from .shapes import Line, Rect, fmt
from .units import ensure_number, format_decimal, format_length
from .view_config import ViewConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """
    Everything needed to render one drawing, in pixels.

    A Scene is rebuilt from scratch on every parameter or view change.
    """
    parameters: PlateParameters
    view: ViewConfig
    viewport: Viewport
    plate_outline: Rect
    hatch_regions: tuple[Rect, Rect]
    slot: Rect
    axes: tuple[Line, Line]
    dimensions: tuple[DimensionAnnotation, ...] = ()

    def dimension_labels(self) -> list[str]:
        return [dim.label for dim in self.dimensions]


def build_plate_dimensions(
    params: PlateParameters,
    view: ViewConfig,
    projector: GeometryProjector,
) -> tuple[DimensionAnnotation, ...]:
    """
    Create the width, thickness and slot dimensions.

    Width is written in feet-inches for imperial drawings; thickness and
    slot always use plain decimals.
    """
    px = lambda value: projector.project(value, view.zoom)  # noqa: E731

    left, right = px(-params.half_width), px(params.half_width)
    top, bottom = px(-params.half_thickness), px(params.half_thickness)
    hole_left, hole_right = px(-params.hole_radius), px(params.hole_radius)

    width_dim = build_dimension(
        (left, bottom), (right, bottom),
        offset=WIDTH_DIM_OFFSET,
        label=format_length(params.width, view.unit, view.precision),
        prefix=WIDTH_PREFIX,
    )
    thickness_dim = build_dimension(
        (left, top), (left, bottom),
        offset=THICKNESS_DIM_OFFSET,
        label=format_decimal(params.thickness, view.unit, view.precision),
        rotate=THICKNESS_DIM_ROTATION,
    )
    hole_dim = build_dimension(
        (hole_left, top), (hole_right, top),
        offset=HOLE_DIM_OFFSET,
        label=DIAMETER_SYMBOL + format_decimal(
            params.center_hole_diameter, view.unit, view.precision
        ),
    )
    return (width_dim, thickness_dim, hole_dim)


def build_scene(
    params: PlateParameters,
    view: ViewConfig,
    projector: GeometryProjector | None = None,
    margin: float = VIEWPORT_MARGIN,
) -> Scene:
    """
    Assemble the scene for a plate.

    Args:
        params: Plate geometry (inches); clamped before use
        view: Display settings
        projector: Pixel projection (default 8 px/in)
        margin: Blank border around the plate (pixels)

    Returns:
        Immutable Scene
    """
    if projector is None:
        projector = GeometryProjector()
    params = params.clamped()

    px = lambda value: projector.project(value, view.zoom)  # noqa: E731
    viewport = projector.viewport(params, view.zoom, margin)

    plate = Rect(
        x=px(-params.half_width),
        y=px(-params.half_thickness),
        width=px(params.width),
        height=px(params.thickness),
    )
    # Second hatch is anchored on the right edge; it lands on the same spot
    right_hatch = Rect(
        x=px(params.half_width) - px(params.width),
        y=plate.y,
        width=plate.width,
        height=plate.height,
    )
    slot = Rect(
        x=px(-params.hole_radius),
        y=plate.y,
        width=px(params.center_hole_diameter),
        height=plate.height,
    )
    axes = (
        Line(-viewport.width_px, 0, viewport.width_px, 0),
        Line(0, -viewport.height_px, 0, viewport.height_px),
    )

    dimensions: tuple[DimensionAnnotation, ...] = ()
    if view.show_dimensions:
        dimensions = build_plate_dimensions(params, view, projector)

    return Scene(
        parameters=params,
        view=view,
        viewport=viewport,
        plate_outline=plate,
        hatch_regions=(plate, right_hatch),
        slot=slot,
        axes=axes,
        dimensions=dimensions,
    )


# =============================================================================
# SVG SERIALIZATION
# =============================================================================

def _svg_header(viewport: Viewport) -> str:
    min_x, min_y, width, height = viewport.view_box
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{fmt(width)}" height="{fmt(height)}" '
        f'viewBox="{fmt(min_x)} {fmt(min_y)} {fmt(width)} {fmt(height)}">'
    )


def _svg_defs() -> str:
    return (
        "<defs>\n"
        f'  <pattern id="hatch" width="{HATCH_SPACING}" height="{HATCH_SPACING}" '
        f'patternUnits="userSpaceOnUse" patternTransform="rotate(45)">\n'
        f'    <line x1="0" y1="0" x2="0" y2="{HATCH_SPACING}" '
        f'stroke="{HATCH_COLOR}" stroke-width="{HATCH_STROKE_WIDTH}"/>\n'
        "  </pattern>\n"
        "</defs>"
    )


def render_scene_svg(scene: Scene, style: DimensionStyle | None = None) -> str:
    """
    Serialize a scene to a standalone SVG document.

    The output depends only on the scene, so identical inputs give
    byte-identical documents.
    """
    svg_parts = [
        _svg_header(scene.viewport),
        _svg_defs(),
        '<g id="plate">',
    ]
    for hatch in scene.hatch_regions:
        svg_parts.append("  " + hatch.svg(fill="url(#hatch)", opacity=HATCH_OPACITY))
    svg_parts.append(
        "  " + scene.plate_outline.svg(
            fill="none", stroke=OUTLINE_COLOR, stroke_width=OUTLINE_STROKE_WIDTH
        )
    )
    svg_parts.append("</g>")

    svg_parts.append(
        scene.slot.svg(
            fill=SLOT_FILL, stroke=OUTLINE_COLOR,
            stroke_width=OUTLINE_STROKE_WIDTH, id="center-hole",
        )
    )

    svg_parts.append('<g id="axes">')
    for axis in scene.axes:
        svg_parts.append("  " + axis.svg(AXIS_COLOR, stroke_dasharray=AXIS_DASHARRAY))
    svg_parts.append("</g>")

    dims_svg = render_all_dimensions_svg(scene.dimensions, style)
    if dims_svg:
        svg_parts.append(dims_svg)

    svg_parts.append("</svg>")
    return "\n".join(svg_parts) + "\n"


# =============================================================================
# PARAMETER SERIALIZATION
# =============================================================================

def export_parameters(params: PlateParameters) -> str:
    """Pretty-printed JSON of the plate parameters (inches)."""
    return json.dumps(params.to_dict(), indent=2)


def import_parameters(text: str) -> PlateParameters:
    """
    Read parameters written by ``export_parameters``.

    Missing or invalid fields fall back to the defaults and the result is
    clamped, so any JSON object yields a valid plate.

    Raises:
        ValueError: If the text is not a JSON object
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Parameter file must contain a JSON object")

    defaults = PlateParameters()
    values: dict[str, float] = {}
    for key, value in data.items():
        try:
            field_name = resolve_field(key)
        except KeyError:
            logger.warning("Skipping unknown parameter %r", key)
            continue
        values[field_name] = ensure_number(value, getattr(defaults, field_name))

    # All fields are merged before clamping so the slot bound sees the new width
    return PlateParameters(**values).clamped()


# =============================================================================
# DRAWING
# =============================================================================

@dataclass
class PlateDrawing:
    """
    A dimensioned drawing of a plate with a center slot.

    Usage:
        drawing = PlateDrawing(PlateParameters(width=12), ViewConfig(unit="mm"))
        drawing.export_svg("plate.svg")
        drawing.export_json("plate.json")

    Attributes:
        parameters: Plate geometry (inches)
        view: Display settings
        style: Dimension styling
    """
    parameters: PlateParameters = field(default_factory=PlateParameters)
    view: ViewConfig = field(default_factory=ViewConfig)
    style: DimensionStyle = field(default_factory=DimensionStyle)
    projector: GeometryProjector = field(default_factory=GeometryProjector)

    def build_scene(self) -> Scene:
        return build_scene(self.parameters, self.view, self.projector)

    def export_vector(self) -> str:
        """The drawing as an SVG document string."""
        return render_scene_svg(self.build_scene(), self.style)

    def export_parameters(self) -> str:
        """The parameters as a JSON document string."""
        return export_parameters(self.parameters.clamped())

    def properties(self) -> list[tuple[str, str]]:
        """Property panel rows: (label, formatted value)."""
        params = self.parameters.clamped()
        unit, precision = self.view.unit, self.view.precision
        return [
            ("Width", format_decimal(params.width, unit, precision)),
            ("Thickness", format_decimal(params.thickness, unit, precision)),
            ("Center Hole Ø", format_decimal(params.center_hole_diameter, unit, precision)),
        ]

    def export_svg(self, filepath: str | Path) -> None:
        """Export the drawing as SVG file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.export_vector())
        logger.info("Exported SVG: %s", filepath)

    def export_json(self, filepath: str | Path) -> None:
        """Export the parameters as JSON file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.export_parameters())
            f.write("\n")
        logger.info("Exported JSON: %s", filepath)

    def export_pdf(self, filepath: str | Path) -> None:
        """Export the drawing as PDF file using svglib + reportlab."""
        if not SVGLIB_AVAILABLE:
            raise ImportError(
                "PDF export requires svglib and reportlab. "
                "Install with: pip install plateblock[pdf]"
            )

        # Write SVG to a temporary file for svglib to read
        with tempfile.NamedTemporaryFile(mode="w", suffix=".svg",
                                         encoding="utf-8", delete=False) as tmp:
            tmp.write(self.export_vector())
            tmp_path = tmp.name

        try:
            drawing = svg2rlg(tmp_path)
            if drawing is None:
                raise ValueError("Failed to parse SVG content")
            renderPDF.drawToFile(drawing, str(filepath))
            logger.info("Exported PDF: %s", filepath)
        finally:
            os.unlink(tmp_path)

    @classmethod
    def from_json(cls, filepath: str | Path, view: ViewConfig | None = None) -> "PlateDrawing":
        """Load a drawing from an exported parameter file."""
        with open(filepath, encoding="utf-8") as f:
            params = import_parameters(f.read())
        return cls(parameters=params, view=view or ViewConfig())
