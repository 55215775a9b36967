"""TriCheck - version constants and geometry defaults.

Keep this module tiny and dependency-free. It is imported by the models,
the settings loader and the CLI, and must not have side effects.
"""

import math

APP_NAME = "TriCheck"
APP_SHORT = "TCK"

APP_VERSION = "0.1.0"

# Defaults for a new PathConfig (same units as `size`).
DEFAULT_SIZE = 24.0
DEFAULT_CHECKMARK_LINE_WIDTH = 1.0
DEFAULT_BOX_LINE_WIDTH = 1.0
DEFAULT_CORNER_RADIUS = 3.0

# Angle between the x-axis and the ray (from the center) that meets the box
# where the extended long arm touches it.
DEFAULT_LONG_ARM_ANGLE = math.radians(45.0)

# Ratios as fractions of size, (circle box, square box).
DEFAULT_LONG_ARM_RADIUS = (0.22, 0.33)
DEFAULT_MIDDLE_POINT_RADIUS = (0.133, 0.1995)
DEFAULT_MIDDLE_POINT_OFFSET = (-0.04, -0.06)
DEFAULT_SHORT_ARM_RADIUS = (0.17, 0.255)
DEFAULT_SHORT_ARM_OFFSET = (0.02, 0.03)

# Radio dot: box outline scaled then moved back to the center.
# NOTE: RADIO_TRANSLATE == (1 - RADIO_SCALE) / 2 keeps the dot concentric.
RADIO_SCALE = 0.665
RADIO_TRANSLATE = 0.1675

# Mixed mark, x as fraction of size (y is always size / 2).
MIXED_MARK_X = (0.25, 0.5, 0.75)
