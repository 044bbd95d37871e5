"""
Tests for unit conversion and dimension text formatting.

Tests cover:
- Inch <-> millimeter conversion and the round-trip law
- Rejection of invalid raw input
- Decimal formatting with unit suffixes
- Feet-inches engineering notation, including sign and rollover
"""

import math

import pytest

from plateblock.drawing_generator.units import (
    Unit,
    ensure_number,
    format_decimal,
    format_engineering,
    format_length,
    from_display,
    to_display,
)


# =============================================================================
# CONVERSION TESTS
# =============================================================================


class TestUnitParsing:
    """Test Unit.parse with the spellings a UI or config file may use."""

    @pytest.mark.parametrize("value", ["in", "IN", "inch", "imperial", Unit.IMPERIAL])
    def test_imperial_aliases(self, value):
        assert Unit.parse(value) is Unit.IMPERIAL

    @pytest.mark.parametrize("value", ["mm", "metric", " MM ", Unit.METRIC])
    def test_metric_aliases(self, value):
        assert Unit.parse(value) is Unit.METRIC

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError, match="Unknown unit"):
            Unit.parse("ft")

    def test_suffixes(self):
        assert Unit.IMPERIAL.suffix == '"'
        assert Unit.METRIC.suffix == " mm"


class TestConversion:
    """Test inch/display-unit conversion."""

    def test_imperial_is_identity(self):
        assert to_display(3.25, Unit.IMPERIAL) == 3.25
        assert from_display(3.25, Unit.IMPERIAL, fallback=0.0) == 3.25

    def test_metric_multiplies_by_25_4(self):
        assert to_display(2.0, Unit.METRIC) == pytest.approx(50.8)

    def test_metric_from_display(self):
        assert from_display("50.8", Unit.METRIC, fallback=0.0) == pytest.approx(2.0)

    def test_string_unit_accepted(self):
        assert to_display(1.0, "mm") == pytest.approx(25.4)

    @pytest.mark.parametrize("unit", [Unit.IMPERIAL, Unit.METRIC])
    @pytest.mark.parametrize("inches", [0.1, 1.0, 2.5, 10.0, 32.4, 36.0])
    def test_round_trip(self, unit, inches):
        """Converting to display units and back returns the original value."""
        displayed = to_display(inches, unit)
        assert from_display(displayed, unit, fallback=-1.0) == pytest.approx(inches)


class TestInvalidInput:
    """Invalid raw values must fall back instead of reaching the model."""

    @pytest.mark.parametrize(
        "raw",
        ["abc", "", "   ", "nan", "NaN", "inf", "-inf", None, True, [1], float("nan"), 10 ** 400],
    )
    def test_from_display_uses_fallback(self, raw):
        assert from_display(raw, Unit.METRIC, fallback=7.5) == 7.5

    def test_fallback_is_not_converted(self):
        """The fallback is already in inches and must come back untouched."""
        assert from_display("oops", Unit.METRIC, fallback=10.0) == 10.0

    def test_ensure_number_strips_whitespace(self):
        assert ensure_number(" 4.5 ", 0.0) == 4.5

    def test_ensure_number_accepts_ints(self):
        assert ensure_number(3, 0.0) == 3.0

    def test_ensure_number_never_returns_nan(self):
        assert not math.isnan(ensure_number("nan", 1.0))


# =============================================================================
# FORMATTING TESTS
# =============================================================================


class TestFormatDecimal:
    """Test decimal formatting with unit suffixes."""

    def test_one_inch_imperial(self):
        assert format_decimal(1, Unit.IMPERIAL, 2) == '1.00"'

    def test_one_inch_metric(self):
        assert format_decimal(1, Unit.METRIC, 1) == "25.4 mm"

    def test_zero_precision(self):
        assert format_decimal(2, Unit.METRIC, 0) == "51 mm"

    def test_four_places(self):
        assert format_decimal(0.125, Unit.IMPERIAL, 4) == '0.1250"'


class TestFormatEngineering:
    """Test feet'-inches.decimal" notation."""

    def test_zero(self):
        assert format_engineering(0, 2) == "0'-0.00\""

    def test_negative_fifteen(self):
        """Sign is written once, in front of the whole expression."""
        assert format_engineering(-15, 2) == "-1'-3.00\""

    def test_positive_fifteen(self):
        assert format_engineering(15, 2) == "1'-3.00\""

    def test_under_a_foot(self):
        assert format_engineering(10, 2) == "0'-10.00\""

    def test_whole_feet(self):
        assert format_engineering(36, 2) == "3'-0.00\""

    def test_one_decimal_place(self):
        assert format_engineering(15.5, 1) == "1'-3.5\""

    def test_zero_precision(self):
        assert format_engineering(12, 0) == "1'-0\""

    @pytest.mark.parametrize(
        "inches, precision, expected",
        [
            (11.999, 2, "1'-0.00\""),
            (23.9999, 3, "2'-0.000\""),
            (11.6, 0, "1'-0\""),
            (-11.999, 2, "-1'-0.00\""),
        ],
    )
    def test_rollover_to_next_foot(self, inches, precision, expected):
        """A remainder rounding up to 12 must never be written as 12."""
        assert format_engineering(inches, precision) == expected

    def test_no_negative_zero(self):
        assert format_engineering(-0.001, 2) == "0'-0.00\""


class TestFormatLength:
    """Width labels: engineering for imperial, decimal for metric."""

    def test_imperial_uses_engineering(self):
        assert format_length(10, Unit.IMPERIAL, 2) == "0'-10.00\""

    def test_metric_uses_decimal(self):
        assert format_length(10, Unit.METRIC, 1) == "254.0 mm"
