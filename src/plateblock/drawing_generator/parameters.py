"""
Plate parameters and the parameter store.

PlateParameters is an immutable snapshot in inches. ParameterStore owns the
current snapshot and is the only place raw input is merged into it:

    store = ParameterStore()
    store.update("width", "300", Unit.METRIC)   # 300 mm -> 11.81"
    store.update("width", "abc", Unit.METRIC)   # ignored, width unchanged
    params = store.snapshot

Clamping rules (inches):
- width:                2 .. 36
- thickness:            0.1 .. 10
- center_hole_diameter: 0.1 .. 0.9 x clamped width
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from .constants import (
    DEFAULT_HOLE_DIAMETER,
    DEFAULT_THICKNESS,
    DEFAULT_WIDTH,
    HOLE_DIAMETER_MIN,
    HOLE_TO_WIDTH_RATIO,
    MM_PER_INCH,
    THICKNESS_MAX,
    THICKNESS_MIN,
    WIDTH_MAX,
    WIDTH_MIN,
)
from .units import Unit, ensure_number, from_display

logger = logging.getLogger(__name__)


PARAMETER_FIELDS = ("width", "thickness", "center_hole_diameter")

# Keys used in exported parameter files
FIELD_ALIASES = {
    "width_in": "width",
    "thickness_in": "thickness",
    "centerHoleDia_in": "center_hole_diameter",
}


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Restrict value to [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def resolve_field(name: str) -> str:
    """Map a field name or export alias to the canonical field name."""
    field_name = FIELD_ALIASES.get(name, name)
    if field_name not in PARAMETER_FIELDS:
        raise KeyError(
            f"Unknown parameter: {name}. Valid names: {list(PARAMETER_FIELDS)}"
        )
    return field_name


@dataclass(frozen=True)
class PlateParameters:
    """
    Plate geometry in inches.

    Attributes:
        width: Overall plate width
        thickness: Vertical extent of the plate
        center_hole_diameter: Width of the center slot
    """
    width: float = DEFAULT_WIDTH
    thickness: float = DEFAULT_THICKNESS
    center_hole_diameter: float = DEFAULT_HOLE_DIAMETER

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_thickness(self) -> float:
        return self.thickness / 2

    @property
    def hole_radius(self) -> float:
        return self.center_hole_diameter / 2

    @property
    def max_hole_diameter(self) -> float:
        """Largest slot the current width allows."""
        return self.width * HOLE_TO_WIDTH_RATIO

    def clamped(self) -> "PlateParameters":
        """
        Return a copy with every constraint applied.

        Width is clamped first because the hole bound depends on it.
        """
        width = clamp(self.width, WIDTH_MIN, WIDTH_MAX)
        thickness = clamp(self.thickness, THICKNESS_MIN, THICKNESS_MAX)
        hole = clamp(
            self.center_hole_diameter,
            HOLE_DIAMETER_MIN,
            width * HOLE_TO_WIDTH_RATIO,
        )
        return PlateParameters(
            width=width,
            thickness=thickness,
            center_hole_diameter=hole,
        )

    def is_valid(self) -> bool:
        """True when the snapshot already satisfies every constraint."""
        return self == self.clamped()

    def to_dict(self) -> dict[str, float]:
        """Export form, keyed the way parameter files are written."""
        return {
            "width_in": self.width,
            "thickness_in": self.thickness,
            "centerHoleDia_in": self.center_hole_diameter,
        }


class ParameterStore:
    """
    Holds the current PlateParameters snapshot.

    Single-writer: ``update`` replaces the snapshot reference, it never
    mutates a snapshot in place, so old snapshots handed out earlier stay
    valid for comparison or undo.
    """

    def __init__(self, initial: PlateParameters | None = None):
        self._snapshot = (initial or PlateParameters()).clamped()

    @property
    def snapshot(self) -> PlateParameters:
        return self._snapshot

    def update(self, field_name: str, raw_value: object, unit: Unit | str) -> PlateParameters:
        """
        Merge one raw display-unit value into the parameters.

        Invalid input (empty, non-numeric, NaN, inf) leaves the field at its
        current value. Out-of-range values are clamped.

        Args:
            field_name: "width", "thickness", "center_hole_diameter" (or an
                export alias such as "width_in")
            raw_value: Untrusted value in the display unit
            unit: Display unit the value was entered in

        Returns:
            The new snapshot
        """
        field_name = resolve_field(field_name)
        current = getattr(self._snapshot, field_name)
        value = from_display(raw_value, Unit.parse(unit), fallback=current)

        merged = replace(self._snapshot, **{field_name: value})
        clamped = merged.clamped()

        if math.isnan(ensure_number(raw_value, math.nan)):
            logger.debug("Ignored %s input %r", field_name, raw_value)
        elif clamped != merged:
            logger.debug("Clamped %s input %r", field_name, raw_value)

        self._snapshot = clamped
        return clamped

    def load(self, params: PlateParameters) -> PlateParameters:
        """Swap in a whole snapshot (clamped), e.g. after an import."""
        self._snapshot = params.clamped()
        return self._snapshot

    def reset(self) -> PlateParameters:
        """Return to the default plate."""
        return self.load(PlateParameters())


# =============================================================================
# INPUT RANGES
# =============================================================================

@dataclass(frozen=True)
class InputRange:
    """Slider range for one field, in display units."""
    label: str
    minimum: float
    maximum: float
    step: float


# field -> (label, min inches, max inches or None, imperial step, metric step)
_INPUT_RANGES = {
    "width": ("Width", 6.0, 36.0, 0.1, 1.0),
    "thickness": ("Thickness", 0.5, 10.0, 0.05, 0.5),
    "center_hole_diameter": ("Center Hole Ø", 0.25, None, 0.05, 0.5),
}

# Metric slider bounds are rounded values, not exact conversions
_METRIC_OVERRIDES = {
    ("width", "max"): 915.0,
}


def input_range(field_name: str, params: PlateParameters, unit: Unit | str) -> InputRange:
    """
    Slider bounds offered for a field.

    These are tighter than the clamping bounds; they describe what the
    input panel offers, not what the store accepts.
    """
    field_name = resolve_field(field_name)
    unit = Unit.parse(unit)
    label, low, high, step_in, step_mm = _INPUT_RANGES[field_name]
    if high is None:
        high = max(low, params.max_hole_diameter)

    if unit is Unit.IMPERIAL:
        return InputRange(label, low, high, step_in)

    low_mm = low * MM_PER_INCH
    high_mm = _METRIC_OVERRIDES.get((field_name, "max"), high * MM_PER_INCH)
    return InputRange(label, low_mm, high_mm, step_mm)
