"""
Kernel constants and default tolerances.
"""

# Tolerance constants
EPSILON = 4.76837158203125e-7  # Single precision epsilon (2^-21), "effectively zero"

# Arc discretization constants
ARC_EXPLODE_STEPS = 20  # Chords per arc for vertical distance queries
FULL_TURN_DEGREES = 360.0

# Hatching defaults
DEFAULT_HATCH_ANGLE = 45.0  # degrees
DEFAULT_HATCH_SPACING = 1.0  # same unit as the rectangle dimensions
