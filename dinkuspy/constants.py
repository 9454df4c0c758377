"""
Constants module - Numeric tolerances and angle constants shared by the kernel.
"""

import math

# Distance below which two points are considered coincident.
TOLERANCE = 1e-12

# Cross-product determinant below which two lines count as parallel.
PARALLEL_TOLERANCE = 1e-16

# Alignment between a start tangent and a chord below which an arc is flat.
TANGENT_TOLERANCE = 1e-8

# Vector lengths this close to 0 or 1 are returned as-is by V2.normalize().
NORMALIZE_TOLERANCE = 1e-16

# Square roots of quadratic discriminants below this yield a single tangent root.
DISCRIMINANT_TOLERANCE = 1e-12

MIN_SWEEP = -360.0
MAX_SWEEP = 360.0
FULL_TURN = 360.0
TWO_PI = 2.0 * math.pi

# Returned by line_line() for parallel, anti-parallel or degenerate lines.
PARALLEL_SENTINEL = (0.5, 0.5)

# Exact unit-circle values at quarter turns, keyed by circle parameter.
QUARTER_TURN_POINTS = {
    0.0: (1.0, 0.0),
    0.25: (0.0, 1.0),
    0.5: (-1.0, 0.0),
    0.75: (0.0, -1.0),
}
QUARTER_TURN_TANGENTS = {
    0.0: (0.0, 1.0),
    0.25: (-1.0, 0.0),
    0.5: (0.0, -1.0),
    0.75: (1.0, 0.0),
}

DEFAULT_SAMPLE_COUNT = 256
