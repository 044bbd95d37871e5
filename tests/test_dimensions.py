"""
Tests for dimension geometry and SVG rendering.

Tests cover:
- Offset direction along the normal of the measured edge
- Arrow directions
- Label placement for plain and rotated text
- Degenerate (zero-length) dimensions
- SVG output for single dimensions and dimension groups
"""

import math

import pytest

from plateblock.drawing_generator.dimensions import (
    DimensionStyle,
    build_dimension,
    render_all_dimensions_svg,
    render_dimension_svg,
)
from plateblock.drawing_generator.shapes import Line, fmt


# =============================================================================
# GEOMETRY TESTS
# =============================================================================


class TestBuildDimension:
    """Test the geometry computed by build_dimension."""

    def test_horizontal_positive_offset_below(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="1.00\"")
        assert dim.dimension_line == Line(0, 40, 100, 40)
        assert dim.extension_lines == (Line(0, 0, 0, 40), Line(100, 0, 100, 40))
        assert dim.label_anchor == (50, 34)
        assert dim.rotation_center is None

    def test_horizontal_negative_offset_above(self):
        dim = build_dimension((0, 0), (100, 0), offset=-20, label="x")
        assert dim.dimension_line == Line(0, -20, 100, -20)

    def test_arrows_point_outward(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="x")
        first, second = dim.arrows
        assert first.tip == (0, 40)
        assert second.tip == (100, 40)
        assert first.angle == pytest.approx(180)
        assert second.angle == pytest.approx(0)

    def test_vertical_rotated_label(self):
        dim = build_dimension((0, 0), (0, 100), offset=60, label="2.50\"", rotate=-90)
        assert dim.dimension_line.start == pytest.approx((-60, 0))
        assert dim.dimension_line.end == pytest.approx((-60, 100))
        assert dim.label_anchor == pytest.approx((-46, 28))
        assert dim.rotation_center == pytest.approx((-46, 50))

    def test_diagonal_offset_along_normal(self):
        dim = build_dimension((0, 0), (3, 4), offset=5, label="x")
        assert dim.dimension_line.start == pytest.approx((-4, 3))
        assert dim.dimension_line.end == pytest.approx((-1, 7))

    def test_zero_length_stays_finite(self):
        dim = build_dimension((10, 10), (10, 10), offset=40, label="0.00\"")
        coords = [*dim.dimension_line.start, *dim.dimension_line.end, *dim.label_anchor]
        assert all(math.isfinite(c) for c in coords)

    def test_outputs_are_plain_floats(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="x")
        assert type(dim.dimension_line.x1) is float
        assert type(dim.label_anchor[0]) is float

    def test_text_joins_prefix_and_label(self):
        dim = build_dimension((0, 0), (1, 0), offset=1, label="0'-10.00\"", prefix="WIDTH = ")
        assert dim.label == "0'-10.00\""
        assert dim.text == "WIDTH = 0'-10.00\""


# =============================================================================
# SVG TESTS
# =============================================================================


class TestRenderDimensionSvg:
    """Test SVG output for one dimension."""

    def test_contains_lines_arrows_and_text(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="1.00\"")
        svg = render_dimension_svg(dim)
        assert svg.startswith('<g class="dimension"')
        assert svg.count("<line ") == 3
        assert svg.count("<polygon ") == 2
        assert '<text x="50.00" y="34.00"' in svg
        assert "1.00\"</text>" in svg
        assert "transform" not in svg

    def test_rotated_text_transform(self):
        dim = build_dimension((0, 0), (0, 100), offset=60, label="x", rotate=-90)
        svg = render_dimension_svg(dim)
        assert 'transform="rotate(-90 -46.00 50.00)"' in svg

    def test_open_arrows(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="x")
        svg = render_dimension_svg(dim, DimensionStyle(arrow_style="open"))
        assert svg.count("<polyline ") == 2
        assert "<polygon" not in svg

    def test_text_is_escaped(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="<1 & 2>")
        assert "&lt;1 &amp; 2&gt;" in render_dimension_svg(dim)

    def test_style_color(self):
        dim = build_dimension((0, 0), (100, 0), offset=40, label="x")
        svg = render_dimension_svg(dim, DimensionStyle(line_color="#ff0000"))
        assert 'stroke="#ff0000"' in svg
        assert 'fill="#ff0000"' in svg


class TestRenderAllDimensionsSvg:
    """Test the dimensions group."""

    def test_empty_renders_nothing(self):
        assert render_all_dimensions_svg([]) == ""

    def test_group_with_numbered_comments(self):
        dims = [
            build_dimension((0, 0), (100, 0), offset=40, label="a"),
            build_dimension((0, 0), (0, 100), offset=60, label="b", rotate=-90),
        ]
        svg = render_all_dimensions_svg(dims)
        assert svg.startswith('<g id="dimensions">')
        assert svg.endswith("</g>")
        assert "<!-- Dim 1 -->" in svg
        assert "<!-- Dim 2 -->" in svg
        assert svg.count('<g class="dimension"') == 2


class TestFmt:
    """Test the SVG number format."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, "0.00"), (1.005, "1.00"), (-25, "-25.00"), (-0.001, "0.00"), (12.345678, "12.35")],
    )
    def test_two_places(self, value, expected):
        assert fmt(value) == expected
