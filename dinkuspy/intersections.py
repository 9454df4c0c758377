"""
Intersection and closest-approach routines between pairs of primitives.

Every function is pure and returns curve parameters rather than points, so
callers can evaluate them with ``point_at`` on whichever curve they need.
"""

import logging
import math
from typing import Tuple

from .constants import (
    DISCRIMINANT_TOLERANCE,
    PARALLEL_SENTINEL,
    PARALLEL_TOLERANCE,
    TOLERANCE,
)
from .primitives import C2, L2, clamp

logger = logging.getLogger(__name__)


def are_parallel(line1: L2, line2: L2) -> bool:
    """Whether two lines are parallel, anti-parallel or degenerate."""
    return abs(line1.span.cross(line2.span)) < PARALLEL_TOLERANCE


def line_line(line1: L2, line2: L2) -> Tuple[float, float]:
    """
    Find the parameters where two infinite lines cross.

    Args:
        line1: First line, extended infinitely in both directions
        line2: Second line, extended infinitely in both directions

    Returns:
        Tuple[float, float]: Unclamped parameters on ``line1`` and ``line2``.
        Parallel, anti-parallel and degenerate lines return ``(0.5, 0.5)``,
        which callers must handle separately.
    """
    if are_parallel(line1, line2):
        logger.debug(f"Lines {line1} and {line2} are parallel")
        return PARALLEL_SENTINEL

    d1 = line1.span
    d2 = line2.span
    delta = line2.a - line1.a
    determinant = d1.cross(d2)
    t1 = delta.cross(d2) / determinant
    t2 = delta.cross(d1) / determinant
    return t1, t2


def segment_segment(line1: L2, line2: L2) -> Tuple[float, float]:
    """
    Find the parameters where two finite segments most closely approach each other.

    Parallel segments return the middle of each segment's overlap with the
    other. Otherwise both line parameters are clamped to the segments, and a
    parameter that hit an end of its segment has the other one recomputed
    against that end point. This approximates the closest pair of points and
    is not exact in every configuration.
    """
    if are_parallel(line1, line2):
        t1_start = line1.parameter_near(line2.a)
        t1_end = line1.parameter_near(line2.b)
        t2_start = line2.parameter_near(line1.a)
        t2_end = line2.parameter_near(line1.b)

        t1 = 0.5 * (max(0.0, min(t1_start, t1_end)) + min(1.0, max(t1_start, t1_end)))
        t2 = 0.5 * (max(0.0, min(t2_start, t2_end)) + min(1.0, max(t2_start, t2_end)))
        return t1, t2

    t1, t2 = line_line(line1, line2)
    t1 = clamp(t1, 0.0, 1.0)
    t2 = clamp(t2, 0.0, 1.0)

    if t1 <= 0.0 or t1 >= 1.0:
        t2 = clamp(line2.parameter_near(line1.point_at(t1)), 0.0, 1.0)

    if t2 <= 0.0 or t2 >= 1.0:
        t1 = clamp(line1.parameter_near(line2.point_at(t2)), 0.0, 1.0)

    return t1, t2


def segment_circle(line: L2, circle: C2) -> Tuple[float, ...]:
    """
    Find the parameters on a segment where it crosses a circle.

    Args:
        line: Finite line segment
        circle: Circle to intersect with

    Returns:
        Tuple[float, ...]: Zero, one or two ascending segment parameters in [0, 1].
        A segment touching the circle within tolerance yields a single parameter.
    """
    span = line.span
    radial = line.a - circle.m

    a = span.dot(span)
    b = 2.0 * radial.dot(span)
    c = radial.dot(radial) - circle.r * circle.r

    if a == 0.0:
        # Zero length segment, a single point.
        if abs(radial.length - circle.r) < TOLERANCE:
            return (0.0,)
        return ()

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()

    root = math.sqrt(discriminant)
    if root < DISCRIMINANT_TOLERANCE:
        roots = ((-b - root) / (2.0 * a),)
    else:
        roots = ((-b - root) / (2.0 * a), (-b + root) / (2.0 * a))

    return tuple(t for t in roots if 0.0 <= t <= 1.0)


def circle_circle(circle1: C2, circle2: C2) -> Tuple[float, ...]:
    """
    Find the parameters on ``circle1`` where it meets ``circle2``.

    Returns:
        Tuple[float, ...]: No parameters for disjoint, nested or concentric
        circles, one for tangent circles and two ascending parameters for
        circles that properly cross.
    """
    offset = circle2.m - circle1.m
    distance = offset.length
    r1 = circle1.r
    r2 = circle2.r

    if distance < TOLERANCE:
        return ()
    if distance > r1 + r2 + TOLERANCE:
        return ()
    if distance < abs(r1 - r2) - TOLERANCE:
        return ()

    # Distance from circle1's centre to the chord joining both crossings,
    # measured along the line of centres.
    along = (distance * distance + r1 * r1 - r2 * r2) / (2.0 * distance)
    across = math.sqrt(max(0.0, r1 * r1 - along * along))

    axis = offset / distance
    foot = circle1.m + axis * along
    tangent = (
        abs(distance - (r1 + r2)) <= TOLERANCE
        or abs(distance - abs(r1 - r2)) <= TOLERANCE
    )
    if tangent or across < TOLERANCE:
        return (circle1.parameter_near(foot),)

    normal = axis.perpendicular()
    parameters = sorted(
        [
            circle1.parameter_near(foot + normal * across),
            circle1.parameter_near(foot - normal * across),
        ]
    )
    return tuple(parameters)
