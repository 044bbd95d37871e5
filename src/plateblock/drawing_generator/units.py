"""
Unit conversion and dimension text formatting.

All geometry is stored in inches. Millimeters exist only at the edges:
when raw input is parsed and when a dimension label is written.

Examples:
    format_decimal(25.4, Unit.METRIC, 1)   -> 25.4 mm
    format_decimal(1, Unit.IMPERIAL, 2)    -> 1.00"
    format_engineering(15, 2)              -> 1'-3.00"
    format_engineering(-15, 2)             -> -1'-3.00"
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from .constants import MM_PER_INCH

logger = logging.getLogger(__name__)


class Unit(str, Enum):
    """Display unit system."""

    IMPERIAL = "in"
    METRIC = "mm"

    @classmethod
    def parse(cls, value: "Unit | str") -> "Unit":
        """Accept the enum, its value ("in"/"mm") or its name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        aliases = {
            "in": cls.IMPERIAL,
            "inch": cls.IMPERIAL,
            "inches": cls.IMPERIAL,
            "imperial": cls.IMPERIAL,
            "mm": cls.METRIC,
            "metric": cls.METRIC,
        }
        if key not in aliases:
            raise ValueError(
                f"Unknown unit: {value}. Valid units: {[u.value for u in cls]}"
            )
        return aliases[key]

    @property
    def suffix(self) -> str:
        return '"' if self is Unit.IMPERIAL else " mm"


def ensure_number(value: object, fallback: float) -> float:
    """
    Parse an untrusted value as a finite float.

    Strings are stripped first. Empty strings, non-numeric text, booleans,
    NaN and infinities all yield ``fallback``.
    """
    if isinstance(value, bool) or value is None:
        return fallback
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return fallback
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        logger.debug("Rejected non-numeric input %r", value)
        return fallback
    if not math.isfinite(number):
        logger.debug("Rejected non-finite input %r", value)
        return fallback
    return number


def to_display(base: float, unit: Unit) -> float:
    """Convert inches to the display unit."""
    unit = Unit.parse(unit)
    if unit is Unit.IMPERIAL:
        return base
    return base * MM_PER_INCH


def from_display(value: object, unit: Unit, fallback: float) -> float:
    """
    Convert a raw display-unit value to inches.

    Invalid input returns ``fallback`` (already in inches) unchanged, so a
    bad entry never reaches the data model.
    """
    unit = Unit.parse(unit)
    number = ensure_number(value, math.nan)
    if math.isnan(number):
        return fallback
    if unit is Unit.IMPERIAL:
        return number
    return number / MM_PER_INCH


def format_decimal(base: float, unit: Unit, precision: int) -> str:
    """Format as a plain decimal with the unit suffix."""
    unit = Unit.parse(unit)
    return f"{to_display(base, unit):.{precision}f}{unit.suffix}"


def format_engineering(inches: float, precision: int = 2) -> str:
    """
    Format inches as feet'-inches.decimal" (engineering notation).

    The remainder is rounded before it is written; if it rounds up to a full
    foot the feet count is bumped, so 11.999 at two places reads 1'-0.00"
    rather than 0'-12.00". A value that rounds to zero is written unsigned.
    """
    abs_inches = abs(inches)
    feet = math.floor(abs_inches / 12)
    remainder = abs_inches - feet * 12
    remainder_str = f"{remainder:.{precision}f}"

    # Handle rollover (12.00" = 1 foot)
    if float(remainder_str) >= 12:
        feet += 1
        remainder_str = f"{0:.{precision}f}"

    is_zero = feet == 0 and float(remainder_str) == 0
    sign = "-" if inches < 0 and not is_zero else ""
    return f"{sign}{feet}'-{remainder_str}\""


def format_length(base: float, unit: Unit, precision: int) -> str:
    """Engineering notation for imperial, decimal millimeters for metric."""
    if Unit.parse(unit) is Unit.IMPERIAL:
        return format_engineering(base, precision)
    return format_decimal(base, unit, precision)
