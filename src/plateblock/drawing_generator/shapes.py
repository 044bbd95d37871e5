"""
Plain shape records used by scenes, with their SVG element form.
"""

from dataclasses import dataclass


def fmt(value: float) -> str:
    """Fixed two-place number for SVG attributes (stable across runs)."""
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


@dataclass(frozen=True)
class Line:
    """A straight segment in drawing pixels."""
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> tuple[float, float]:
        return (self.x2, self.y2)

    def svg(self, stroke: str, stroke_width: float | None = None, **attrs) -> str:
        """Generate an SVG line element for this segment."""
        width_str = f' stroke-width="{stroke_width}"' if stroke_width is not None else ""
        extra = ' '.join(f'{k.replace("_", "-")}="{v}"' for k, v in attrs.items())
        extra_str = f" {extra}" if extra else ""
        return (f'<line x1="{fmt(self.x1)}" y1="{fmt(self.y1)}" '
                f'x2="{fmt(self.x2)}" y2="{fmt(self.y2)}" '
                f'stroke="{stroke}"{width_str}{extra_str}/>')


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle in drawing pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal size
        height: Vertical size
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def svg(self, fill: str = "none", stroke: str | None = None,
            stroke_width: float | None = None, **attrs) -> str:
        """Generate an SVG rect element for this area."""
        stroke_str = f' stroke="{stroke}"' if stroke is not None else ""
        width_str = f' stroke-width="{stroke_width}"' if stroke_width is not None else ""
        extra = ' '.join(f'{k.replace("_", "-")}="{v}"' for k, v in attrs.items())
        extra_str = f" {extra}" if extra else ""
        return (f'<rect x="{fmt(self.x)}" y="{fmt(self.y)}" '
                f'width="{fmt(self.width)}" height="{fmt(self.height)}" '
                f'fill="{fill}"{stroke_str}{width_str}{extra_str}/>')
