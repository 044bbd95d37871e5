"""
View configuration for plate drawings.

The view settings (unit, precision, zoom, dimension visibility) are kept
apart from the plate geometry and passed explicitly to every drawing call.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_PRECISION,
    DEFAULT_ZOOM,
    PRECISION_MAX,
    PRECISION_MIN,
    ZOOM_MAX,
    ZOOM_MIN,
)
from .parameters import clamp
from .units import Unit, ensure_number


@dataclass(frozen=True)
class ViewConfig:
    """
    Display settings for a drawing.

    Values coming from a UI or a config file are untrusted; they are
    sanitized on construction so a ViewConfig is always usable.

    Attributes:
        unit: Display unit system (inches or millimeters)
        precision: Decimal places in dimension text (0-4)
        zoom: Zoom factor (2.5-5.0)
        show_dimensions: Whether dimension annotations are drawn
    """
    unit: Unit = Unit.IMPERIAL
    precision: int = DEFAULT_PRECISION
    zoom: float = DEFAULT_ZOOM
    show_dimensions: bool = True

    def __post_init__(self):
        precision = ensure_number(self.precision, 0)
        precision = int(clamp(precision, PRECISION_MIN, PRECISION_MAX))
        zoom = clamp(ensure_number(self.zoom, DEFAULT_ZOOM), ZOOM_MIN, ZOOM_MAX)

        object.__setattr__(self, "unit", Unit.parse(self.unit))
        object.__setattr__(self, "precision", precision)
        object.__setattr__(self, "zoom", zoom)
        object.__setattr__(self, "show_dimensions", bool(self.show_dimensions))

    def with_changes(self, **changes) -> "ViewConfig":
        """Return a copy with some settings replaced (and re-sanitized)."""
        values = {
            "unit": self.unit,
            "precision": self.precision,
            "zoom": self.zoom,
            "show_dimensions": self.show_dimensions,
        }
        values.update(changes)
        return ViewConfig(**values)

    def to_dict(self) -> dict:
        return {
            "unit": self.unit.value,
            "precision": self.precision,
            "zoom": self.zoom,
            "show_dimensions": self.show_dimensions,
        }

