"""
Rotated Grid - Constants and Configuration

This module contains all constant values used throughout the package:
- Numeric tolerances for intersection and phase-lock math
- Default lattice generator settings
- Halftone screen angles for CMYK separations
- Logging format
"""

# ======================================================================
# NUMERIC TOLERANCES
# ======================================================================

# Determinant magnitude below which two lines count as parallel
PARALLEL_TOLERANCE = 1e-6

# Slack applied to edge bounds, row/column spans and phase-lock ceilings.
# A row passing exactly through a rotated corner must still hit both edges.
SPAN_TOLERANCE = 1e-9

# Containment slack used when checking produced points against the rectangle
CONTAINMENT_TOLERANCE = 1e-9

# ======================================================================
# ANGLES
# ======================================================================

# Normalized angles lie in [ANGLE_RANGE_MIN, ANGLE_RANGE_MIN + ANGLE_FOLD_PERIOD)
# Each half turn removed by the fold negates the lattice phase offsets.
ANGLE_FOLD_PERIOD_DEGREES = 180.0
ANGLE_RANGE_MIN_DEGREES = -90.0

# ======================================================================
# HALFTONE SCREENS
# ======================================================================

# Classic screen angles (degrees) for the four CMYK separations.
# Yellow sits at 0 because it is the least visible ink.
HALFTONE_SCREEN_ANGLES = {
    'cyan':    15.0,
    'magenta': 75.0,
    'yellow':  0.0,
    'black':   45.0,
}

# ======================================================================
# LATTICE GENERATOR DEFAULTS
# ======================================================================

DEFAULT_WIDTH = 16.0
DEFAULT_HEIGHT = 10.0
DEFAULT_SPACING_X = 7.0
DEFAULT_SPACING_Y = 7.0
DEFAULT_OFFSET_X = 0.0
DEFAULT_OFFSET_Y = 0.0
DEFAULT_ANGLE_DEGREES = 0.0

# Number of columns in a position array: [x, y]
POSITION_COLUMNS = 2

# ======================================================================
# LOGGING
# ======================================================================

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
