"""
Drawing Generator Module

Generates dimensioned technical drawings of a rectangular plate with a
center slot from a small set of parameters.

Features:
- Clamped parametric geometry (inches internally)
- Imperial (feet-inches) or metric dimension text, 0-4 decimal places
- Zoomable, centered drawing space
- SVG, JSON and optional PDF export

Usage:
    from plateblock.drawing_generator import PlateDrawing, PlateParameters, ViewConfig

    drawing = PlateDrawing(
        parameters=PlateParameters(width=12, thickness=2, center_hole_diameter=3),
        view=ViewConfig(unit="mm", precision=1),
    )
    drawing.export_svg("plate.svg")
"""

from .dimensions import (
    Arrow,
    DimensionAnnotation,
    DimensionStyle,
    build_dimension,
    render_all_dimensions_svg,
    render_dimension_svg,
)
from .drawing import (
    PlateDrawing,
    Scene,
    build_scene,
    export_parameters,
    import_parameters,
    render_scene_svg,
)
from .parameters import (
    InputRange,
    ParameterStore,
    PlateParameters,
    clamp,
    input_range,
)
from .projection import GeometryProjector, Viewport
from .shapes import Line, Rect
from .units import (
    Unit,
    ensure_number,
    format_decimal,
    format_engineering,
    format_length,
    from_display,
    to_display,
)
from .view_config import ViewConfig

__all__ = [
    # Main classes
    'PlateDrawing',
    'PlateParameters',
    'ParameterStore',
    'ViewConfig',
    'Unit',
    'Scene',
    'GeometryProjector',
    'Viewport',
    'DimensionAnnotation',
    'DimensionStyle',
    'Arrow',
    'Line',
    'Rect',
    'InputRange',
    # Functions
    'build_scene',
    'build_dimension',
    'render_scene_svg',
    'render_dimension_svg',
    'render_all_dimensions_svg',
    'export_parameters',
    'import_parameters',
    'input_range',
    'clamp',
    'ensure_number',
    'to_display',
    'from_display',
    'format_decimal',
    'format_engineering',
    'format_length',
]
