"""
Drawing generator constants.

Parameter bounds, scale, margins, and styling constants for the plate drawing.
All lengths in the PARAMETER section are in inches (the base unit); all
lengths in the LAYOUT and STYLING sections are in drawing pixels.
"""

# =============================================================================
# PARAMETER BOUNDS (inches)
# =============================================================================

MM_PER_INCH = 25.4

WIDTH_MIN = 2.0
WIDTH_MAX = 36.0

THICKNESS_MIN = 0.1
THICKNESS_MAX = 10.0

HOLE_DIAMETER_MIN = 0.1
HOLE_TO_WIDTH_RATIO = 0.9  # Slot may never exceed 90% of the plate width

DEFAULT_WIDTH = 10.0
DEFAULT_THICKNESS = 2.5
DEFAULT_HOLE_DIAMETER = 2.5


# =============================================================================
# VIEW SETTINGS
# =============================================================================

PRECISION_MIN = 0
PRECISION_MAX = 4
DEFAULT_PRECISION = 2

ZOOM_MIN = 2.5
ZOOM_MAX = 5.0
DEFAULT_ZOOM = 2.5


# =============================================================================
# LAYOUT (pixels)
# =============================================================================

PIXELS_PER_INCH = 8  # px per inch at zoom=1
VIEWPORT_MARGIN = 100  # Blank border around the plate on every side

WIDTH_DIM_OFFSET = 40       # Below the bottom edge
THICKNESS_DIM_OFFSET = 60   # Left of the left edge
HOLE_DIM_OFFSET = -20       # Above the top edge
THICKNESS_DIM_ROTATION = -90

DIAMETER_SYMBOL = "⌀"
WIDTH_PREFIX = "WIDTH = "


# =============================================================================
# SVG STYLING
# =============================================================================

OUTLINE_COLOR = "#0F0E0E"
OUTLINE_STROKE_WIDTH = 2
HATCH_COLOR = "#44444E"
HATCH_SPACING = 8
HATCH_STROKE_WIDTH = 2
HATCH_OPACITY = 0.7
SLOT_FILL = "#ffffff"

AXIS_COLOR = "#94a3b8"
AXIS_DASHARRAY = "20 6 6 6 20"

DIMENSION_LINE_WIDTH = 1.0
EXTENSION_LINE_WIDTH = 0.5
ARROW_LENGTH = 6.0
ARROW_WIDTH = 6.0
DIMENSION_FONT_SIZE = 12
TEXT_OFFSET = 6.0             # Gap between dimension line and label
ROTATED_TEXT_SHIFT_X = 14.0   # Rotated labels are pushed off the line
ROTATED_TEXT_SHIFT_Y = 22.0
