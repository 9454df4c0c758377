"""
dinkuspy - A 2D parametric geometry kernel.

This package provides immutable points, vectors, line segments, circles,
circular arcs and composite curves, with nearest-point, distance and
intersection queries.
"""

__version__ = "0.1.0"

# Core geometry types
from .cad_types import P2, V2

# Curve contract and primitives
from .curve_like import CurveLike
from .primitives import A2, C2, L2

# Composite curves
from .curve import Curve, Segment

from .intersections import (
    are_parallel,
    circle_circle,
    line_line,
    segment_circle,
    segment_segment,
)

# Define what gets imported with "from dinkuspy import *"
__all__ = [
    # Geometry types
    "V2",
    "P2",
    # Primitives
    "CurveLike",
    "L2",
    "C2",
    "A2",
    "Curve",
    "Segment",
    # Intersections
    "are_parallel",
    "line_line",
    "segment_segment",
    "segment_circle",
    "circle_circle",
]
